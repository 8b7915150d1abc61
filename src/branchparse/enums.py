"""Enumerations for branchparse type-safe constants.

Uses StrEnum so members compare and format as plain strings.

Python 3.13+.
"""

from enum import StrEnum


class SeparatorPolicy(StrEnum):
    """How a list treats separators between its items.

    StrEnum provides automatic string conversion: str(SeparatorPolicy.NONE) == "none"
    """

    NONE = "none"
    """Bare list: items follow each other directly."""

    REQUIRED = "required"
    """sep(s): a separator demands a following item."""

    TRAILING = "trailing"
    """trailing_sep(s): the final item may be followed by a separator."""


class ListState(StrEnum):
    """States of the list engine loop."""

    START = "start"
    AFTER_ITEM = "after_item"
    AFTER_SEPARATOR = "after_separator"
    DONE = "done"
    ERROR = "error"


__all__ = [
    "ListState",
    "SeparatorPolicy",
]
