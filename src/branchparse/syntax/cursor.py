"""Immutable cursor and lexeme types.

A Cursor is the Position of the rule engine: a source string plus an
integer offset. Cursors are never mutated, so backtracking needs no
snapshot/restore machinery:

    - snapshot: keep a reference to the cursor you were given
    - restore:  carry on with that reference

A rule that reports Unmatched simply returns no cursor, and its caller
continues from the cursor it already holds.

Line Ending Support:
    compute_line_col() uses \\n as the line delimiter. CRLF input works
    because the \\n is still present; CR-only input is not supported.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from branchparse.diagnostics import ErrorTemplate

__all__ = ["Cursor", "Lexeme"]


@dataclass(frozen=True, slots=True, order=True)
class Cursor:
    """Immutable source position.

    Key Design Decisions:
        1. Frozen dataclass - snapshot/restore is reference reuse
        2. Slots - cursors are created for every matched token
        3. Ordered - compares by (source, pos); only compare cursors
           over the same source
        4. EOF is a property, not a return value

    Example:
        >>> cursor = Cursor("abc,abc", 0)
        >>> cursor.startswith("abc")
        True
        >>> after = cursor.advance(3)
        >>> after.current
        ','
        >>> cursor.pos  # Original unchanged
        0
        >>> cursor.distance(after)
        3
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def startswith(self, text: str) -> bool:
        """Check whether the remaining input begins with text.

        Does not allocate a substring.
        """
        return self.source.startswith(text, self.pos)

    def distance(self, other: "Cursor") -> int:
        """Number of characters from this cursor to other.

        Negative when other lies before this cursor.

        Example:
            >>> Cursor("hello", 1).distance(Cursor("hello", 4))
            3
        """
        return other.pos - self.pos

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during matching.

        Example:
            >>> source = "abc\\nabc,ab"
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 8).compute_line_col()
            (2, 5)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class Lexeme:
    """Non-owning view over a span of already-matched input.

    Produced by capture(). Holds the source by reference, so it stays valid
    as long as the caller keeps the source string; do not retain lexemes
    beyond the parse call that produced them if the source is large.

    Attributes:
        source: The full input
        start: Start offset (inclusive)
        end: End offset (exclusive)

    Example:
        >>> lexeme = Lexeme("abc,abc", 3, 4)
        >>> lexeme.text
        ','
        >>> len(lexeme)
        1
    """

    source: str
    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span bounds.

        Raises:
            ValueError: If start is negative or end precedes start
        """
        if self.start < 0:
            msg = f"Lexeme.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Lexeme.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @classmethod
    def between(cls, start: Cursor, end: Cursor) -> "Lexeme":
        """Build the lexeme spanning two cursors over the same source."""
        return cls(start.source, start.pos, end.pos)

    @property
    def text(self) -> str:
        """The matched text."""
        return self.source[self.start : self.end]

    @property
    def start_cursor(self) -> Cursor:
        return Cursor(self.source, self.start)

    @property
    def end_cursor(self) -> Cursor:
        return Cursor(self.source, self.end)

    def __len__(self) -> int:
        return self.end - self.start
