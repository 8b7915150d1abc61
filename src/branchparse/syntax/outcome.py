"""Match outcomes and the ParseError value.

Every rule's try_match() returns exactly one of three outcomes:

    Matched(cursor, values)  the rule matched; cursor is past the input it consumed
    Unmatched(error)         the rule's condition did not match; nothing consumed,
                             the caller may try something else
    Failed(error, cursor)    a condition matched but a mandatory continuation did
                             not; the whole parse is abandoned

Unmatched deliberately has no cursor field: the cursor is the one the caller
passed in, so it cannot carry consumed input. Its error describes what the
refusing matcher expected and is used when the Unmatched is promoted to a
failure (by a branch, a separator, or the top-level entry point).

Outcomes are values, not exceptions. Callers dispatch with ``match``:

    match rule.try_match(cursor, context):
        case Matched(cursor=end, values=values): ...
        case Unmatched(): ...
        case Failed(error=error): ...
"""

from dataclasses import dataclass

from branchparse.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    RuleSyntaxError,
    SourceSpan,
)
from branchparse.syntax.cursor import Cursor

__all__ = ["Failed", "MatchOutcome", "Matched", "ParseError", "Unmatched"]


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse error with location and expected text.

    Immutable once constructed. Owned by the Failed (or Unmatched) outcome
    that carries it until the caller's error handler consumes it.

    Attributes:
        code: Diagnostic category (e.g. EXPECTED_LITERAL)
        cursor: Position of the match that did not happen
        expected: What the failing matcher expected, as text (empty for limit errors)
        limit: The exceeded limit, for MAX_DEPTH_EXCEEDED; None otherwise

    Example:
        >>> error = ParseError(DiagnosticCode.EXPECTED_LITERAL, Cursor("abc,ab", 4), "abc")
        >>> error.position
        4
        >>> error.format_error()
        "1:5: Expected 'abc'"
    """

    code: DiagnosticCode
    cursor: Cursor
    expected: str = ""
    limit: int | None = None

    @property
    def position(self) -> int:
        """Character offset of the error."""
        return self.cursor.pos

    @property
    def message(self) -> str:
        """Human-readable message for the error code."""
        return ErrorTemplate.from_parse_error(self.code, self.expected, limit=self.limit).message

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a Diagnostic with a line/column span."""
        line, col = self.cursor.compute_line_col()
        span = SourceSpan(start=self.position, end=self.position, line=line, column=col)
        return ErrorTemplate.from_parse_error(self.code, self.expected, span, limit=self.limit)

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> ParseError(DiagnosticCode.EXPECTED_LITERAL, Cursor("ab\\nx", 3), ",").format_error()
            "2:1: Expected ','"
        """
        line, col = self.cursor.compute_line_col()
        return f"{line}:{col}: {self.message}"

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and a caret under the position.

        Args:
            context_lines: Number of lines to show before/after the error line

        Returns:
            Multi-line formatted error with context

        Example:
            >>> source = "abc,abc\\nabc,ab"
            >>> error = ParseError(DiagnosticCode.EXPECTED_LITERAL, Cursor(source, 12), "abc")
            >>> print(error.format_with_context())
            2:5: Expected 'abc'
            <BLANKLINE>
               1 | abc,abc
               2 | abc,ab
                 |     ^
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.source.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])
            if i == line:
                gutter = " " * (len(line_num_str) - 2) + "| "
                result_lines.append(gutter + " " * (col - 1) + "^")

        return "\n".join(result_lines)


@dataclass(frozen=True, slots=True)
class Matched:
    """The rule matched.

    Attributes:
        cursor: Position after the consumed input
        values: Values produced, in parse order (labels, lexemes, list aggregates)
    """

    cursor: Cursor
    values: tuple[object, ...] = ()

    @property
    def value(self) -> object | None:
        """The single produced value, or None when the rule produced no value.

        Raises:
            ValueError: If the rule produced more than one value
        """
        match self.values:
            case ():
                return None
            case (single,):
                return single
            case _:
                msg = f"Rule produced {len(self.values)} values; use .values"
                raise ValueError(msg)

    def unwrap(self) -> object | None:
        """Return the single produced value (None if no value)."""
        return self.value


@dataclass(frozen=True, slots=True)
class Unmatched:
    """The rule's condition did not match. No input was consumed.

    Attributes:
        error: What the refusing matcher expected, at the probed cursor
    """

    error: ParseError

    def unwrap(self) -> object | None:
        """Raise RuleSyntaxError for the refusing matcher's error."""
        raise RuleSyntaxError(self.error)


@dataclass(frozen=True, slots=True)
class Failed:
    """A mandatory match failed after a condition committed.

    Attributes:
        error: The single error describing the mandatory match that failed
        cursor: How far the parse got (diagnostics only)
    """

    error: ParseError
    cursor: Cursor

    def unwrap(self) -> object | None:
        """Raise RuleSyntaxError for this failure."""
        raise RuleSyntaxError(self.error)


type MatchOutcome = Matched | Unmatched | Failed
