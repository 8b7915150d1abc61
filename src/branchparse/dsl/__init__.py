"""Rule composition language.

Module Organization:
- rules.py: Rule base, ParseContext and composition rules
  (branch, sequence, capture, label, opt, choice, forward)
- literals.py: Matchers (lit, one_of)
- sink.py: Sink protocol and built-in sinks
- repetition.py: List engine (list_, sep, trailing_sep)

Example:
    >>> from branchparse.dsl import CountSink, label, list_, lit, sep
    >>> item = lit("abc") >> label(0)
    >>> rule = list_(item, sep(lit(",")), sink=CountSink)
"""

from .literals import CharClass, Literal, lit, one_of
from .repetition import List, Separator, list_, sep, trailing_sep
from .rules import (
    Branch,
    Capture,
    Choice,
    Forward,
    Label,
    LabelMarker,
    Option,
    ParseContext,
    Rule,
    Sequence,
    branch,
    capture,
    choice,
    forward,
    label,
    opt,
    seq,
)
from .sink import CallbackSink, CountSink, ListSink, Sink, SinkFactory

__all__ = [
    "Branch",
    "CallbackSink",
    "Capture",
    "CharClass",
    "Choice",
    "CountSink",
    "Forward",
    "Label",
    "LabelMarker",
    "List",
    "ListSink",
    "Literal",
    "Option",
    "ParseContext",
    "Rule",
    "Separator",
    "Sequence",
    "Sink",
    "SinkFactory",
    "branch",
    "capture",
    "choice",
    "forward",
    "label",
    "list_",
    "lit",
    "one_of",
    "opt",
    "sep",
    "seq",
    "trailing_sep",
]
