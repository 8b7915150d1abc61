"""branchparse - branch/backtrack parser combinators with streaming list sinks.

Rules are immutable trees composed in Python and matched against a string
with a three-way outcome: Matched, Unmatched (the condition refused, nothing
consumed) or Failed (a condition committed, then a mandatory match failed).
Lists stream their values into a per-activation sink.

Public API:
    parse - Match a rule against source with default limits
    visit - Parse and dispatch to a callback object
    RuleParser - Configurable entry point (size and nesting limits)
    lit, one_of - Matchers
    branch (>>), seq (+), choice (|), capture, label, opt, forward - Composition
    list_, sep, trailing_sep - Repetition
    Sink, CountSink, ListSink, CallbackSink - Accumulators

Exceptions:
    BranchParseError - Base exception class
    GrammarError - Invalid rule composition
    RuleSyntaxError - Raised by unwrap() on a failed outcome
    SinkStateError - Sink used after finish()

Submodules:
    branchparse.syntax - Cursor, Lexeme, outcomes, ParseError
    branchparse.dsl - Rule tree and sinks
    branchparse.parser - Entry point and continuation dispatch
    branchparse.diagnostics - Error codes, templates and formatting
"""

from .diagnostics import BranchParseError, GrammarError, RuleSyntaxError, SinkStateError
from .dsl import (
    CallbackSink,
    CountSink,
    LabelMarker,
    ListSink,
    Rule,
    Sink,
    branch,
    capture,
    choice,
    forward,
    label,
    list_,
    lit,
    one_of,
    opt,
    sep,
    seq,
    trailing_sep,
)
from .parser import ParseCallback, RuleParser
from .syntax import Cursor, Failed, Lexeme, Matched, ParseError, Unmatched

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("branchparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BranchParseError",
    "CallbackSink",
    "CountSink",
    "Cursor",
    "Failed",
    "GrammarError",
    "LabelMarker",
    "Lexeme",
    "ListSink",
    "Matched",
    "ParseCallback",
    "ParseError",
    "Rule",
    "RuleParser",
    "RuleSyntaxError",
    "Sink",
    "SinkStateError",
    "Unmatched",
    "__version__",
    "branch",
    "capture",
    "choice",
    "forward",
    "label",
    "list_",
    "lit",
    "one_of",
    "opt",
    "parse",
    "sep",
    "seq",
    "trailing_sep",
    "visit",
]


def parse(rule: Rule, source: str) -> Matched | Failed:
    """Match rule against source with default limits.

    Convenience function for RuleParser().parse().

    Example:
        >>> from branchparse import CountSink, label, list_, lit, parse
        >>> parse(list_(lit("abc") >> label(0), sink=CountSink), "abcabcabc").value
        3
    """
    return RuleParser().parse(rule, source)


def visit[R](rule: Rule, source: str, callback: ParseCallback[R]) -> R:
    """Parse with default limits and dispatch to callback.

    Convenience function for RuleParser().visit().
    """
    return RuleParser().visit(rule, source, callback)
