"""Tests for the top-level public API surface."""

from __future__ import annotations

import pytest

import branchparse
from branchparse.enums import ListState, SeparatorPolicy


class TestPublicApi:
    """Test exports and the operator-based rule language."""

    @pytest.mark.parametrize("name", branchparse.__all__)
    def test_all_names_exist(self, name: str) -> None:
        """Every name in __all__ is importable from the package."""
        assert hasattr(branchparse, name)

    def test_readme_example(self) -> None:
        """A comma-separated list of counted items, end to end."""
        from branchparse import CountSink, label, list_, lit, parse, sep

        rule = list_(lit("abc") >> label(0), sep(lit(",")), sink=CountSink)

        assert parse(rule, "abc,abc,abc").value == 3


class TestEnums:
    """Test StrEnum string behavior."""

    def test_separator_policy_values(self) -> None:
        assert str(SeparatorPolicy.NONE) == "none"
        assert SeparatorPolicy("trailing") is SeparatorPolicy.TRAILING

    def test_list_states(self) -> None:
        assert [state.value for state in ListState] == [
            "start",
            "after_item",
            "after_separator",
            "done",
            "error",
        ]
