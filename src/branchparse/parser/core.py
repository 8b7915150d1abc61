"""Top-level parse entry point.

This module provides the RuleParser class that runs a rule tree against a
source string.

Architecture:
    The parser builds an immutable :class:`~branchparse.syntax.cursor.Cursor`
    at offset 0 and a fresh :class:`~branchparse.dsl.rules.ParseContext`, then
    calls the rule's try_match(). Every rule returns one of
    :class:`~branchparse.syntax.outcome.Matched`,
    :class:`~branchparse.syntax.outcome.Unmatched` or
    :class:`~branchparse.syntax.outcome.Failed`.

    An Unmatched that reaches this level has no branch-aware caller left to
    recover it, so it is reported as a Failed carrying the refusing matcher's
    own error. Callers therefore only ever see Matched or Failed.

Security:
    Includes a configurable input size limit and a nesting depth limit for
    recursive grammars.
"""

import logging

from branchparse.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from branchparse.diagnostics import ErrorTemplate
from branchparse.dsl.rules import ParseContext, Rule
from branchparse.parser.dispatch import ParseCallback, dispatch
from branchparse.syntax.cursor import Cursor
from branchparse.syntax.outcome import Failed, Matched, Unmatched

__all__ = ["RuleParser"]

logger = logging.getLogger(__name__)


class RuleParser:
    """Runs rules against source text.

    Stateless apart from its configuration; one instance may be shared by
    any number of threads, each parsing independent input.

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
        max_nesting_depth: Maximum Forward nesting depth (default: 64)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable the size limit.
            max_nesting_depth: Maximum Forward nesting depth (default: 64).
                              Clamped against the interpreter recursion limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed Forward nesting depth."""
        return self._max_nesting_depth

    def parse(self, rule: Rule, source: str) -> Matched | Failed:
        """Match rule against source, starting at offset 0.

        Trailing input after the match is not an error; compare
        ``outcome.cursor.is_eof`` if the whole input must be consumed.

        Args:
            rule: Root of the rule tree
            source: Input text

        Returns:
            Matched with the final cursor and produced values, or Failed with
            exactly one error

        Raises:
            ValueError: If source exceeds max_source_size

        Example:
            >>> parser = RuleParser()
            >>> outcome = parser.parse(list_(lit("abc") >> label(0), sink=CountSink), "abcabc")
            >>> outcome.value
            2
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), self._max_source_size)
            raise ValueError(diagnostic.message)

        cursor = Cursor(source, 0)
        context = ParseContext.create(self._max_nesting_depth)
        logger.debug("Parsing %d characters with %s", len(source), rule.describe())

        outcome = rule.try_match(cursor, context)
        match outcome:
            case Unmatched(error=error):
                logger.debug(
                    "Rule did not match at position %d; reporting %s",
                    error.position,
                    error.code.name,
                )
                return Failed(error, cursor)
            case Failed(error=error):
                logger.debug("Parse failed at position %d: %s", error.position, error.code.name)
            case Matched(cursor=end):
                logger.debug("Parse matched up to position %d", end.pos)
        return outcome

    def visit[R](self, rule: Rule, source: str, callback: ParseCallback[R]) -> R:
        """Parse and hand the outcome to callback.

        Args:
            rule: Root of the rule tree
            source: Input text
            callback: Object with success(cursor, *values) and error(error)

        Returns:
            The selected handler's return value
        """
        return dispatch(self.parse(rule, source), callback)
