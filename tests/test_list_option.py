"""Tests for opt() around lists.

An optional list that does not start still produces a value: the empty
aggregate of a freshly created and immediately finished sink.
"""

from __future__ import annotations

import pytest

from branchparse import visit
from branchparse.dsl import CountSink, label, list_, lit, opt, sep, trailing_sep
from branchparse.parser import RuleParser
from tests.helpers.callbacks import ItemListCallback, bare_end, separated_end, trailing_end
from tests.helpers.outcome_assertions import assert_failed_expecting, assert_matched

ITEM = lit("abc") >> label(0)


class TestOptionalBareList:
    """opt(list(item))."""

    RULE = opt(list_(ITEM, sink=CountSink))

    @pytest.mark.parametrize(
        ("source", "result"),
        [
            ("", 0),
            ("ab", 0),
            ("abc", 1),
            ("abcabc", 2),
            ("abcabcabc", 3),
        ],
    )
    def test_visit(self, source: str, result: int) -> None:
        """No items is a success with count 0 at the start."""
        assert visit(self.RULE, source, ItemListCallback(bare_end)) == result

    def test_empty_default_aggregate(self) -> None:
        """With the default sink the empty aggregate is an empty tuple."""
        matched = assert_matched(RuleParser().parse(opt(list_(ITEM)), "x"))

        assert matched.cursor.pos == 0
        assert matched.values == ((),)

    def test_one_sink_for_empty_list(self) -> None:
        """The empty aggregate comes from exactly one new sink."""
        created: list[CountSink] = []

        def factory() -> CountSink:
            sink = CountSink()
            created.append(sink)
            return sink

        RuleParser().parse(opt(list_(ITEM, sink=factory)), "")

        assert len(created) == 1
        assert created[0].finished


class TestOptionalSeparatedList:
    """opt(list(item, sep(",")))."""

    RULE = opt(list_(ITEM, sep(lit(",")), sink=CountSink))

    @pytest.mark.parametrize(
        ("source", "result"),
        [
            ("", 0),
            ("ab", 0),
            ("abc", 1),
            ("abc,abc", 2),
            ("abc,abc,abc", 3),
            ("abcabc", 1),
        ],
    )
    def test_visit(self, source: str, result: int) -> None:
        """The separated list becomes optional as a whole."""
        assert visit(self.RULE, source, ItemListCallback(separated_end)) == result

    def test_failure_not_hidden(self) -> None:
        """opt() does not turn a failed list into an empty one."""
        assert_failed_expecting(RuleParser().parse(self.RULE, "abc,"), 4, "abc")


class TestOptionalTrailingList:
    """opt(list(item, trailing_sep(",")))."""

    RULE = opt(list_(ITEM, trailing_sep(lit(",")), sink=CountSink))

    @pytest.mark.parametrize(
        ("source", "result"),
        [
            ("", 0),
            ("ab", 0),
            ("abc", 1),
            ("abc,abc", 2),
            ("abc,abc,abc", 3),
            ("abcabc", 1),
            ("abc,", 1),
        ],
    )
    def test_visit(self, source: str, result: int) -> None:
        """A trailing separator still counts only complete items."""
        assert visit(self.RULE, source, ItemListCallback(trailing_end)) == result
