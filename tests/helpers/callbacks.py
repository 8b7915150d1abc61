"""Callback objects for visit() tests.

Each callback maps an outcome to an int so a whole scenario reduces to one
comparable number: a count (>= 0) on success, a negative code on error.

The success handlers also check that the final cursor agrees with the
count, and the error handlers check the expected text, so a wrong cursor
or a wrong error shows up as an AssertionError instead of a passing count.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from branchparse.dsl.rules import LabelMarker
from branchparse.dsl.sink import CallbackSink, Sink
from branchparse.syntax.cursor import Lexeme

if TYPE_CHECKING:
    from branchparse.syntax.cursor import Cursor
    from branchparse.syntax.outcome import ParseError


class BareListCallback:
    """Callback for ``list_(lit("ab") >> lit("c") + label(0))``.

    Errors at offset 0 must expect "ab" and return -1; errors after a
    committed condition must expect "c" and return -2.
    """

    def success(self, cursor: Cursor, count: int) -> int:
        assert cursor.pos == 3 * count, f"cursor at {cursor.pos} for count {count}"
        return count

    def error(self, error: ParseError) -> int:
        if error.position == 0:
            assert error.expected == "ab"
            return -1
        assert error.expected == "c"
        return -2


class ItemListCallback:
    """Callback for lists of "abc" items; every error must expect "abc".

    Args:
        end_for: Maps the final cursor and the count to the offset the
            parse must end at (see bare_end, separated_end, trailing_end)
    """

    def __init__(self, end_for: Callable[[Cursor, int], int]) -> None:
        self.end_for = end_for

    def success(self, cursor: Cursor, count: int) -> int:
        expected_end = self.end_for(cursor, count)
        assert cursor.pos == expected_end, (
            f"cursor at {cursor.pos}, expected {expected_end} for count {count}"
        )
        return count

    def error(self, error: ParseError) -> int:
        assert error.expected == "abc"
        return -1


def bare_end(cursor: Cursor, count: int) -> int:
    """Items of "abc" back to back."""
    return 3 * count


def separated_end(cursor: Cursor, count: int) -> int:
    """Items of "abc" joined by ","."""
    return 0 if count == 0 else 4 * count - 1


def trailing_end(cursor: Cursor, count: int) -> int:
    """Items of "abc" joined by ",", possibly followed by one more ","."""
    if count == 0:
        return 0
    if cursor.source[cursor.pos - 1] == ",":
        return 4 * count
    return 4 * count - 1


class WeightedCallback:
    """Callback for weighted lists; the weight must equal the consumed length."""

    def success(self, cursor: Cursor, weight: int) -> int:
        assert cursor.pos == weight, f"cursor at {cursor.pos}, weight {weight}"
        return weight

    def error(self, error: ParseError) -> int:
        assert error.expected == "abc"
        return -1


def weighted_sink() -> Sink[int]:
    """Sink adding 3 per label and 1 per single-character lexeme.

    With "abc" items and "," separators the total equals the number of
    characters the list consumed.
    """
    total = 0

    def on_value(value: object) -> None:
        nonlocal total
        match value:
            case LabelMarker():
                total += 3
            case Lexeme():
                assert len(value) == 1
                total += 1
            case _:
                raise AssertionError(f"unexpected value {value!r}")

    return CallbackSink(on_value, lambda: total)
