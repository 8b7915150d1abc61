"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Match errors (a mandatory match did not happen)
        2000-2999: Limit errors (input size, nesting depth)
        3000-3999: Grammar definition errors (invalid rule composition)
        4000-4999: Sink protocol errors
    """

    # Match errors (1000-1999)
    EXPECTED_LITERAL = 1001
    EXPECTED_CHAR_CLASS = 1002
    EXHAUSTED_CHOICE = 1003
    UNEXPECTED_EOF = 1004

    # Limit errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001
    SOURCE_TOO_LARGE = 2002

    # Grammar definition errors (3000-3999)
    BRANCH_CONDITION_REQUIRED = 3001
    EMPTY_LITERAL = 3002
    UNDEFINED_FORWARD = 3003

    # Sink protocol errors (4000-4999)
    SINK_FINISHED = 4001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line/column
                are less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for grammar definition errors)
        hint: Suggestion for fixing the error
        expected: Text the failing matcher expected (match errors only)
        rule: Description of the rule involved (grammar definition errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expected: str | None = None
    rule: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[EXPECTED_LITERAL]: expected 'abc'
              --> line 1, column 5
              = expected: abc

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
