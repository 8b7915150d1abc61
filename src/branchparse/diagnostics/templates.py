"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # =========================================================================
    # MATCH ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def expected_literal(text: str, span: SourceSpan | None = None) -> Diagnostic:
        """A literal matcher refused to match.

        Args:
            text: The literal that was expected
            span: Location of the failed match

        Returns:
            Diagnostic for EXPECTED_LITERAL
        """
        msg = f"Expected '{text}'"
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_LITERAL,
            message=msg,
            span=span,
            expected=text,
        )

    @staticmethod
    def expected_char_class(name: str, span: SourceSpan | None = None) -> Diagnostic:
        """A character class matcher refused to match.

        Args:
            name: Human-readable name of the character class
            span: Location of the failed match

        Returns:
            Diagnostic for EXPECTED_CHAR_CLASS
        """
        msg = f"Expected {name}"
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_CHAR_CLASS,
            message=msg,
            span=span,
            expected=name,
        )

    @staticmethod
    def exhausted_choice(alternatives: str, span: SourceSpan | None = None) -> Diagnostic:
        """No alternative of a choice matched.

        Args:
            alternatives: Description of the alternatives that were tried
            span: Location where every alternative was tried

        Returns:
            Diagnostic for EXHAUSTED_CHOICE
        """
        msg = f"Expected one of {alternatives}"
        return Diagnostic(
            code=DiagnosticCode.EXHAUSTED_CHOICE,
            message=msg,
            span=span,
            expected=alternatives,
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check EOF with cursor.is_eof before reading cursor.current",
        )

    # =========================================================================
    # LIMIT ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def max_depth_exceeded(max_depth: int, span: SourceSpan | None = None) -> Diagnostic:
        """Recursive grammar nested deeper than the configured limit.

        Args:
            max_depth: The configured maximum nesting depth
            span: Location where the limit was hit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            span=span,
            hint="Increase max_nesting_depth in RuleParser or simplify the input",
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source exceeds the configured size limit.

        Args:
            size: Source length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({limit:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_source_size in the RuleParser constructor to increase limit",
        )

    # =========================================================================
    # GRAMMAR DEFINITION ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def branch_condition_required(rule: str, role: str) -> Diagnostic:
        """An unconditional rule was used where a branch rule is needed.

        Args:
            rule: Description of the offending rule
            role: Where it was used (e.g. "branch condition", "list item")

        Returns:
            Diagnostic for BRANCH_CONDITION_REQUIRED
        """
        msg = f"{role} must be a branch rule, got {rule}"
        return Diagnostic(
            code=DiagnosticCode.BRANCH_CONDITION_REQUIRED,
            message=msg,
            rule=rule,
            hint="Start the rule with a matcher such as lit() or use cond >> body",
        )

    @staticmethod
    def empty_literal() -> Diagnostic:
        """A literal with no characters.

        Returns:
            Diagnostic for EMPTY_LITERAL
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_LITERAL,
            message="Literal must not be empty",
            hint="An empty literal always matches; use label() for a zero-width marker",
        )

    @staticmethod
    def undefined_forward(name: str) -> Diagnostic:
        """A forward reference was used before define().

        Args:
            name: Name of the forward rule

        Returns:
            Diagnostic for UNDEFINED_FORWARD
        """
        msg = f"Forward rule '{name}' used before define()"
        return Diagnostic(
            code=DiagnosticCode.UNDEFINED_FORWARD,
            message=msg,
            rule=name,
        )

    # =========================================================================
    # SINK PROTOCOL ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def sink_finished(sink_type: str, operation: str) -> Diagnostic:
        """A sink was used after finish().

        Args:
            sink_type: Class name of the sink
            operation: The rejected operation ("add" or "finish")

        Returns:
            Diagnostic for SINK_FINISHED
        """
        msg = f"{sink_type}.{operation}() called after finish()"
        return Diagnostic(
            code=DiagnosticCode.SINK_FINISHED,
            message=msg,
            hint="A sink is consumed by finish(); create a new one per list activation",
        )

    # =========================================================================
    # PARSE ERROR VALUES
    # =========================================================================

    @staticmethod
    def from_parse_error(
        code: DiagnosticCode,
        expected: str,
        span: SourceSpan | None = None,
        *,
        limit: int | None = None,
    ) -> Diagnostic:
        """Build the diagnostic for a ParseError value.

        Args:
            code: The ParseError's code
            expected: The ParseError's expected text
            span: Location of the error
            limit: The ParseError's exceeded limit (MAX_DEPTH_EXCEEDED only)

        Returns:
            Diagnostic matching the code
        """
        match code:
            case DiagnosticCode.EXPECTED_LITERAL:
                return ErrorTemplate.expected_literal(expected, span)
            case DiagnosticCode.EXPECTED_CHAR_CLASS:
                return ErrorTemplate.expected_char_class(expected, span)
            case DiagnosticCode.EXHAUSTED_CHOICE:
                return ErrorTemplate.exhausted_choice(expected, span)
            case DiagnosticCode.MAX_DEPTH_EXCEEDED if limit is not None:
                return ErrorTemplate.max_depth_exceeded(limit, span)
            case _:
                return Diagnostic(code=code, message=f"Expected {expected}", span=span)
