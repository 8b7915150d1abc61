"""List engine: repetition with optional separators.

    list_(item)                      bare: item item item ...
    list_(item, sep(s))              separated: item s item s item
    list_(item, trailing_sep(s))     separated, final separator allowed: item s item s

The engine runs a small state machine (see ListState):

    START            probe item; Unmatched/Failed is the list's outcome
    AFTER_ITEM       bare: probe item again; separated: probe separator.
                     Unmatched -> DONE, Matched -> AFTER_ITEM / AFTER_SEPARATOR
    AFTER_SEPARATOR  the item is mandatory (sep) or optional (trailing_sep)
    DONE             Matched(cursor, (sink.finish(),))
    ERROR            Failed; the sink is abandoned without finish()

A clean stop happens only where a refusal is legitimate: the first probe,
the separator probe, and the item probe after a trailing separator. Every
other refusal is a hard failure, because a condition success (including a
matched separator) cannot be taken back.

Zero-width items accepted forever loop forever; that is a grammar defect
and not detected here.
"""

import logging
from dataclasses import dataclass

from branchparse.dsl.rules import ParseContext, Rule, require_branch
from branchparse.dsl.sink import ListSink, Sink, SinkFactory
from branchparse.enums import ListState, SeparatorPolicy
from branchparse.syntax.cursor import Cursor
from branchparse.syntax.outcome import Failed, Matched, MatchOutcome, Unmatched

__all__ = ["List", "Separator", "list_", "sep", "trailing_sep"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Separator:
    """Separator rule plus its policy.

    Attributes:
        rule: The separator (must be a branch rule)
        policy: REQUIRED for sep(), TRAILING for trailing_sep()
    """

    rule: Rule
    policy: SeparatorPolicy = SeparatorPolicy.REQUIRED

    def __post_init__(self) -> None:
        require_branch(self.rule, "list separator")

    @property
    def allows_trailing(self) -> bool:
        return self.policy is SeparatorPolicy.TRAILING

    def describe(self) -> str:
        name = "trailing_sep" if self.allows_trailing else "sep"
        return f"{name}({self.rule.describe()})"


def sep(rule: Rule) -> Separator:
    """A separator that must be followed by another item."""
    return Separator(rule, SeparatorPolicy.REQUIRED)


def trailing_sep(rule: Rule) -> Separator:
    """A separator that may also follow the last item."""
    return Separator(rule, SeparatorPolicy.TRAILING)


def _feed(sink: Sink[object], outcome: Matched) -> Cursor:
    """Deliver an outcome's values to the sink; return its cursor."""
    for value in outcome.values:
        sink.add(value)
    return outcome.cursor


@dataclass(frozen=True, slots=True, repr=False)
class List[T](Rule):
    """One or more items, optionally separated, accumulated into a sink.

    Attributes:
        item: The repeated rule
        separator: None for a bare list, else sep(...) or trailing_sep(...)
        sink: Zero-argument factory creating one sink per list activation
    """

    item: Rule
    separator: Separator | None = None
    sink: SinkFactory[T] = ListSink  # type: ignore[assignment]

    def __post_init__(self) -> None:
        # A separated list probes the separator, so its item may be unconditional;
        # bare and trailing lists must be able to probe the item itself.
        if self.separator is None or self.separator.allows_trailing:
            require_branch(self.item, "list item")

    @property
    def policy(self) -> SeparatorPolicy:
        return SeparatorPolicy.NONE if self.separator is None else self.separator.policy

    @property
    def is_branch(self) -> bool:
        return self.item.is_branch

    def describe(self) -> str:
        if self.separator is None:
            return f"list({self.item.describe()})"
        return f"list({self.item.describe()}, {self.separator.describe()})"

    def empty_values(self) -> tuple[object, ...]:
        # Zero iterations still yield a finished aggregate, never "no value".
        return (self.sink().finish(),)

    def try_match(self, cursor: Cursor, context: ParseContext) -> MatchOutcome:  # noqa: PLR0912
        state = ListState.START
        sink: Sink[T] | None = None
        failure: MatchOutcome | None = None

        while True:
            match state:
                case ListState.START:
                    outcome = self.item.try_match(cursor, context)
                    if not isinstance(outcome, Matched):
                        return outcome
                    sink = self.sink()
                    cursor = _feed(sink, outcome)
                    state = ListState.AFTER_ITEM

                case ListState.AFTER_ITEM:
                    probe = self.item if self.separator is None else self.separator.rule
                    outcome = probe.try_match(cursor, context)
                    match outcome:
                        case Matched():
                            cursor = _feed(sink, outcome)  # type: ignore[arg-type]
                            if self.separator is not None:
                                state = ListState.AFTER_SEPARATOR
                        case Unmatched():
                            state = ListState.DONE
                        case Failed():
                            failure = outcome
                            state = ListState.ERROR

                case ListState.AFTER_SEPARATOR:
                    outcome = self.item.try_match(cursor, context)
                    match outcome:
                        case Matched():
                            cursor = _feed(sink, outcome)  # type: ignore[arg-type]
                            state = ListState.AFTER_ITEM
                        case Unmatched() if self.policy is SeparatorPolicy.TRAILING:
                            state = ListState.DONE
                        case Unmatched(error=error):
                            # A separator demands a following item.
                            failure = Failed(error, cursor)
                            state = ListState.ERROR
                        case Failed():
                            failure = outcome
                            state = ListState.ERROR

                case ListState.DONE:
                    return Matched(cursor, (sink.finish(),))  # type: ignore[union-attr]

                case ListState.ERROR:
                    logger.debug(
                        "%s abandoned its sink after a hard failure at position %d",
                        self.describe(),
                        cursor.pos,
                    )
                    return failure  # type: ignore[return-value]


def list_[T](
    item: Rule,
    separator: Separator | None = None,
    *,
    sink: SinkFactory[T] = ListSink,  # type: ignore[assignment]
) -> List[T]:
    """Build a list rule.

    Args:
        item: The repeated rule
        separator: sep(...) or trailing_sep(...), or None for a bare list
        sink: Sink factory (default: ListSink, aggregating to a tuple)

    Raises:
        GrammarError: If a rule that must be probed is not a branch rule

    Example:
        >>> rule = list_(lit("abc") >> label(0), sep(lit(",")), sink=CountSink)
        >>> parse(rule, "abc,abc,abc").value
        3
    """
    return List(item, separator, sink)
