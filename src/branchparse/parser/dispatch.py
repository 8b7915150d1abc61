"""Continuation dispatch for top-level outcomes.

A caller hands the parser a callback object with a success handler and an
error handler. The success handler is chosen by the shape of what the rule
produced, decided by pattern matching on the outcome rather than by a
runtime tag on the rule:

    no value        callback.success(cursor)
    value(s)        callback.success(cursor, *values)
    Failed          callback.error(error)
"""

from typing import Protocol

from branchparse.syntax.cursor import Cursor
from branchparse.syntax.outcome import Failed, Matched, MatchOutcome, ParseError, Unmatched

__all__ = ["ParseCallback", "dispatch"]


class ParseCallback[R](Protocol):
    """Protocol for objects receiving a parse result.

    Example:
        >>> class Count:
        ...     def success(self, cursor: Cursor, count: int = 0) -> int:
        ...         return count
        ...     def error(self, error: ParseError) -> int:
        ...         return -1
    """

    def success(self, cursor: Cursor, /, *values: object) -> R:
        ...  # pragma: no cover  # Protocol stub - not executable

    def error(self, error: ParseError, /) -> R:
        ...  # pragma: no cover  # Protocol stub - not executable


def dispatch[R](outcome: MatchOutcome, callback: ParseCallback[R]) -> R:
    """Route an outcome to the matching callback handler.

    Args:
        outcome: Result of a rule
        callback: Handler object

    Returns:
        Whatever the selected handler returns
    """
    match outcome:
        case Matched(cursor=cursor, values=()):
            return callback.success(cursor)
        case Matched(cursor=cursor, values=values):
            return callback.success(cursor, *values)
        case Failed(error=error) | Unmatched(error=error):
            return callback.error(error)
