"""Rule tree for the branchparse combinator language.

This module provides the composition rules:
- Rule: abstract base with the uniform try_match() operation
- Branch: condition >> continuation, the single commitment point
- Sequence: rules chained left to right
- Capture: wraps consumed input as a Lexeme value
- Label: zero-width marker value
- Option: turns an initial Unmatched into an empty success
- Choice: ordered alternatives of branch rules
- Forward: late-bound reference for recursive grammars

All composition rules are co-located in a single module because they refer
to each other through the operator overloads on Rule. Matchers live in
:mod:`branchparse.dsl.literals` and the list engine in
:mod:`branchparse.dsl.repetition`.

Branch Rules:
    A rule is a *branch* rule when it may legitimately report Unmatched:
    its leading condition can refuse without consuming input. Unconditional
    rules report only Matched or Failed. Places that need to probe (branch
    conditions, bare list items, separators, choice alternatives) reject
    unconditional rules with GrammarError when the tree is built.

Operators:
    a + b    Sequence
    a >> b   Branch (a is the condition)
    a | b    Choice

    Python precedence gives ``lit("ab") >> lit("c") + label(0)`` the
    reading ``lit("ab") >> (lit("c") + label(0))``.
"""

from abc import ABC, abstractmethod
from collections.abc import Hashable
from dataclasses import dataclass

from branchparse.constants import MAX_DEPTH
from branchparse.core import depth_clamp
from branchparse.diagnostics import DiagnosticCode, ErrorTemplate, GrammarError
from branchparse.syntax.cursor import Cursor, Lexeme
from branchparse.syntax.outcome import Failed, Matched, MatchOutcome, ParseError, Unmatched

__all__ = [
    "Branch",
    "Capture",
    "Choice",
    "Forward",
    "Label",
    "LabelMarker",
    "Option",
    "ParseContext",
    "Rule",
    "Sequence",
    "branch",
    "capture",
    "choice",
    "forward",
    "label",
    "opt",
    "require_branch",
    "seq",
]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit per-parse context.

    Replaces global state with explicit parameter passing, so rules stay
    immutable and reentrant: every parse call builds its own context.

    Attributes:
        max_nesting_depth: Maximum allowed Forward nesting depth
        current_depth: Current nesting depth (0 = top level)
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0

    @classmethod
    def create(cls, max_nesting_depth: int = MAX_DEPTH) -> "ParseContext":
        """Create a top-level context with the depth clamped to the recursion limit."""
        return cls(max_nesting_depth=depth_clamp(max_nesting_depth))

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_nesting(self) -> "ParseContext":
        """Create new context with incremented depth."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
        )


class Rule(ABC):
    """Abstract grammar rule.

    Rules are immutable descriptions with no runtime identity. Evaluation
    state lives only in the cursor, the context, and the returned outcome.
    """

    __slots__ = ()

    @abstractmethod
    def try_match(self, cursor: Cursor, context: ParseContext) -> MatchOutcome:
        """Attempt the rule at cursor.

        Returns:
            Matched with the advanced cursor and produced values,
            Unmatched if the rule's condition refused (branch rules only),
            Failed if a mandatory match failed
        """

    @abstractmethod
    def describe(self) -> str:
        """Short grammar-like description used in diagnostics."""

    @property
    def is_branch(self) -> bool:
        """True if the rule may report Unmatched."""
        return False

    @property
    def is_zero_width(self) -> bool:
        """True if the rule never consumes input."""
        return False

    def empty_values(self) -> tuple[object, ...]:
        """Values opt() produces when this rule is Unmatched."""
        return ()

    def __repr__(self) -> str:
        return self.describe()

    def __add__(self, other: "Rule") -> "Sequence":
        return seq(self, other)

    def __rshift__(self, other: "Rule") -> "Branch":
        return branch(self, other)

    def __or__(self, other: "Rule") -> "Choice":
        return choice(self, other)


def require_branch(rule: Rule, role: str) -> None:
    """Raise GrammarError unless rule is a branch rule.

    Args:
        rule: Rule about to be used as a probe
        role: Where it is used, for the diagnostic ("branch condition", ...)

    Raises:
        GrammarError: If rule.is_branch is False
    """
    if not rule.is_branch:
        raise GrammarError(ErrorTemplate.branch_condition_required(rule.describe(), role))


# =============================================================================
# Branch
# =============================================================================


@dataclass(frozen=True, slots=True, repr=False)
class Branch(Rule):
    """Condition followed by a mandatory continuation.

    The condition is probed without commitment. If it refuses, the branch
    is Unmatched. Once it matches there is no more backtracking for this
    branch: the continuation either matches or the branch Failed, even when
    the continuation itself only reported Unmatched.
    """

    condition: Rule
    then: Rule

    def __post_init__(self) -> None:
        require_branch(self.condition, "branch condition")

    @property
    def is_branch(self) -> bool:
        return True

    def describe(self) -> str:
        return f"({self.condition.describe()} >> {self.then.describe()})"

    def try_match(self, cursor: Cursor, context: ParseContext) -> MatchOutcome:
        outcome = self.condition.try_match(cursor, context)
        if not isinstance(outcome, Matched):
            return outcome

        continuation = self.then.try_match(outcome.cursor, context)
        match continuation:
            case Matched(cursor=end, values=values):
                return Matched(end, outcome.values + values)
            case Unmatched(error=error):
                return Failed(error, outcome.cursor)
            case _:
                return continuation


def branch(condition: Rule, then: Rule) -> Branch:
    """Build ``condition >> then``."""
    return Branch(condition, then)


# =============================================================================
# Sequence
# =============================================================================


@dataclass(frozen=True, slots=True, repr=False)
class Sequence(Rule):
    """Rules matched left to right, threading the cursor.

    An Unmatched sub-rule means "the sequence did not start" only while no
    input has been consumed and the sequence is a branch rule; afterwards it
    is promoted to Failed. Failed is propagated unchanged.
    """

    rules: tuple[Rule, ...]

    @property
    def is_branch(self) -> bool:
        # Zero-width rules (labels) may precede the leading condition.
        for rule in self.rules:
            if rule.is_branch:
                return True
            if not rule.is_zero_width:
                return False
        return False

    @property
    def is_zero_width(self) -> bool:
        return all(rule.is_zero_width for rule in self.rules)

    def describe(self) -> str:
        return " + ".join(rule.describe() for rule in self.rules)

    def try_match(self, cursor: Cursor, context: ParseContext) -> MatchOutcome:
        start = cursor
        values: list[object] = []
        for rule in self.rules:
            outcome = rule.try_match(cursor, context)
            match outcome:
                case Matched(cursor=next_cursor, values=produced):
                    values.extend(produced)
                    cursor = next_cursor
                case Unmatched(error=error):
                    if cursor.pos == start.pos and self.is_branch:
                        return outcome
                    return Failed(error, cursor)
                case Failed():
                    return outcome
        return Matched(cursor, tuple(values))


def seq(*rules: Rule) -> Sequence:
    """Build a sequence, flattening nested sequences."""
    flat: list[Rule] = []
    for rule in rules:
        if isinstance(rule, Sequence):
            flat.extend(rule.rules)
        else:
            flat.append(rule)
    return Sequence(tuple(flat))


# =============================================================================
# Capture & Label
# =============================================================================


@dataclass(frozen=True, slots=True, repr=False)
class Capture(Rule):
    """Produce the input consumed by the inner rule as a Lexeme.

    The Lexeme comes first, followed by the inner rule's own values.
    """

    inner: Rule

    @property
    def is_branch(self) -> bool:
        return self.inner.is_branch

    @property
    def is_zero_width(self) -> bool:
        return self.inner.is_zero_width

    def describe(self) -> str:
        return f"capture({self.inner.describe()})"

    def try_match(self, cursor: Cursor, context: ParseContext) -> MatchOutcome:
        outcome = self.inner.try_match(cursor, context)
        if isinstance(outcome, Matched):
            lexeme = Lexeme.between(cursor, outcome.cursor)
            return Matched(outcome.cursor, (lexeme, *outcome.values))
        return outcome


def capture(rule: Rule) -> Capture:
    """Build ``capture(rule)``."""
    return Capture(rule)


@dataclass(frozen=True, slots=True)
class LabelMarker:
    """Zero-size marker value produced by label().

    Attributes:
        identity: The label's identity (any hashable, e.g. 0 or "item")
    """

    identity: Hashable


@dataclass(frozen=True, slots=True, repr=False)
class Label(Rule):
    """Zero-width rule producing a LabelMarker. Always matches."""

    identity: Hashable

    @property
    def is_zero_width(self) -> bool:
        return True

    def describe(self) -> str:
        return f"label({self.identity!r})"

    def try_match(self, cursor: Cursor, context: ParseContext) -> MatchOutcome:
        return Matched(cursor, (LabelMarker(self.identity),))


def label(identity: Hashable) -> Label:
    """Build ``label(identity)``."""
    return Label(identity)


# =============================================================================
# Option
# =============================================================================


@dataclass(frozen=True, slots=True, repr=False)
class Option(Rule):
    """Make a rule optional.

    An Unmatched inner rule becomes a success at the unchanged cursor,
    producing the inner rule's empty_values(): nothing for most rules, an
    empty aggregate for lists. Matched and Failed are forwarded.
    """

    rule: Rule

    def describe(self) -> str:
        return f"opt({self.rule.describe()})"

    def try_match(self, cursor: Cursor, context: ParseContext) -> MatchOutcome:
        outcome = self.rule.try_match(cursor, context)
        if isinstance(outcome, Unmatched):
            return Matched(cursor, self.rule.empty_values())
        return outcome


def opt(rule: Rule) -> Option:
    """Build ``opt(rule)``."""
    return Option(rule)


# =============================================================================
# Choice
# =============================================================================


@dataclass(frozen=True, slots=True, repr=False)
class Choice(Rule):
    """Ordered alternatives; the first alternative that does not refuse wins.

    Every alternative must be a branch rule. If all of them are Unmatched,
    the choice is Unmatched with a single EXHAUSTED_CHOICE error.
    """

    alternatives: tuple[Rule, ...]

    def __post_init__(self) -> None:
        for alternative in self.alternatives:
            require_branch(alternative, "choice alternative")

    @property
    def is_branch(self) -> bool:
        return True

    def describe(self) -> str:
        return " | ".join(alternative.describe() for alternative in self.alternatives)

    def try_match(self, cursor: Cursor, context: ParseContext) -> MatchOutcome:
        for alternative in self.alternatives:
            outcome = alternative.try_match(cursor, context)
            if not isinstance(outcome, Unmatched):
                return outcome
        error = ParseError(DiagnosticCode.EXHAUSTED_CHOICE, cursor, self.describe())
        return Unmatched(error)


def choice(*alternatives: Rule) -> Choice:
    """Build a choice, flattening nested choices."""
    flat: list[Rule] = []
    for alternative in alternatives:
        if isinstance(alternative, Choice):
            flat.extend(alternative.alternatives)
        else:
            flat.append(alternative)
    return Choice(tuple(flat))


# =============================================================================
# Forward
# =============================================================================


class Forward(Rule):
    """Late-bound rule reference for recursive grammars.

    Example:
        >>> group = forward("group")
        >>> group.define(lit("(") >> opt(group) + lit(")"))
        group

    Each pass through a Forward enters one nesting level; past the context's
    max_nesting_depth the Forward fails with MAX_DEPTH_EXCEEDED instead of
    exhausting the Python stack.
    """

    __slots__ = ("_name", "_rule")

    def __init__(self, name: str = "forward") -> None:
        self._name = name
        self._rule: Rule | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def rule(self) -> Rule:
        """The defined rule.

        Raises:
            GrammarError: If define() has not been called
        """
        if self._rule is None:
            raise GrammarError(ErrorTemplate.undefined_forward(self._name))
        return self._rule

    def define(self, rule: Rule) -> "Forward":
        """Bind the rule this forward refers to. Returns self."""
        self._rule = rule
        return self

    @property
    def is_branch(self) -> bool:
        return self.rule.is_branch

    def describe(self) -> str:
        return self._name

    def empty_values(self) -> tuple[object, ...]:
        return self.rule.empty_values()

    def try_match(self, cursor: Cursor, context: ParseContext) -> MatchOutcome:
        rule = self.rule
        if context.is_depth_exceeded():
            error = ParseError(
                DiagnosticCode.MAX_DEPTH_EXCEEDED, cursor, limit=context.max_nesting_depth
            )
            return Failed(error, cursor)
        return rule.try_match(cursor, context.enter_nesting())


def forward(name: str = "forward") -> Forward:
    """Build an undefined Forward; bind it later with define()."""
    return Forward(name)
