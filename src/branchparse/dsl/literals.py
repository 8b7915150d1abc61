"""Matcher rules: the leaves of a rule tree.

Matchers consume a fixed pattern at the cursor or refuse without consuming.
They are branch rules and never report Failed on their own; hard failures
are synthesized by the branch, sequence, and list layers.
"""

from dataclasses import dataclass

from branchparse.diagnostics import DiagnosticCode, ErrorTemplate, GrammarError
from branchparse.dsl.rules import ParseContext, Rule
from branchparse.syntax.cursor import Cursor
from branchparse.syntax.outcome import Matched, MatchOutcome, ParseError, Unmatched

__all__ = ["CharClass", "Literal", "lit", "one_of"]


@dataclass(frozen=True, slots=True, repr=False)
class Literal(Rule):
    """Match an exact, non-empty string.

    Example:
        >>> lit("abc").try_match(Cursor("abc,", 0), ParseContext())
        Matched(cursor=Cursor(source='abc,', pos=3), values=())
    """

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise GrammarError(ErrorTemplate.empty_literal())

    @property
    def is_branch(self) -> bool:
        return True

    def describe(self) -> str:
        return repr(self.text)

    def try_match(self, cursor: Cursor, context: ParseContext) -> MatchOutcome:
        if cursor.startswith(self.text):
            return Matched(cursor.advance(len(self.text)))
        return Unmatched(ParseError(DiagnosticCode.EXPECTED_LITERAL, cursor, self.text))


def lit(text: str) -> Literal:
    """Build a literal matcher."""
    return Literal(text)


@dataclass(frozen=True, slots=True, repr=False)
class CharClass(Rule):
    """Match one character from a set.

    Attributes:
        chars: The accepted characters
        name: Description used as the expected text in errors
    """

    chars: frozenset[str]
    name: str

    def __post_init__(self) -> None:
        if not self.chars:
            raise GrammarError(ErrorTemplate.empty_literal())

    @property
    def is_branch(self) -> bool:
        return True

    def describe(self) -> str:
        return self.name

    def try_match(self, cursor: Cursor, context: ParseContext) -> MatchOutcome:
        if not cursor.is_eof and cursor.current in self.chars:
            return Matched(cursor.advance())
        return Unmatched(ParseError(DiagnosticCode.EXPECTED_CHAR_CLASS, cursor, self.name))


def one_of(chars: str, name: str | None = None) -> CharClass:
    """Build a character class matcher.

    Args:
        chars: Accepted characters (must not be empty)
        name: Description for errors (default: "one of '<chars>'")

    Raises:
        GrammarError: If chars is empty
    """
    return CharClass(frozenset(chars), name or f"one of {chars!r}")
