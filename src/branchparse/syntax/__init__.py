"""Input positions and match outcomes.

Python 3.13+.
"""

from .cursor import Cursor, Lexeme
from .outcome import Failed, Matched, MatchOutcome, ParseError, Unmatched

__all__ = [
    "Cursor",
    "Failed",
    "Lexeme",
    "MatchOutcome",
    "Matched",
    "ParseError",
    "Unmatched",
]
