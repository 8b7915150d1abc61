"""branchparse exception hierarchy with structured diagnostics.

Parse outcomes (matched, unmatched, failed) are plain values and never
raised. Exceptions are reserved for grammar definition mistakes, sink
protocol misuse, and callers that explicitly unwrap a failed outcome.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from branchparse.syntax.outcome import ParseError


class BranchParseError(Exception):
    """Base exception for all branchparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize BranchParseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GrammarError(BranchParseError):
    """Invalid rule composition.

    Raised eagerly when a rule tree is built in a way the engine cannot
    evaluate, for example a branch whose condition is unconditional or a
    bare list whose item can never report "did not match".
    """


class RuleSyntaxError(BranchParseError):
    """Input did not match a rule.

    Raised only by ``unwrap()`` on a failed outcome. Carries the single
    ParseError that describes the mandatory match that failed.

    Attributes:
        error: The ParseError value from the failed outcome
    """

    def __init__(self, error: ParseError) -> None:
        """Initialize RuleSyntaxError from a ParseError value.

        Args:
            error: The failed outcome's error
        """
        super().__init__(error.to_diagnostic())
        self.error = error


class SinkStateError(BranchParseError):
    """Sink used after finish().

    A sink is consumed by finish(); any later add() or finish() is a
    programming error in the sink's owner.
    """
