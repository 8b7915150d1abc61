"""Parser entry point.

Module Organization:
- core.py: RuleParser class and parse() entry point
- dispatch.py: Continuation dispatch (ParseCallback, dispatch)

Public API:
    RuleParser: Configured entry point
    ParseCallback: Protocol for visit() callbacks
    dispatch: Route an outcome to a callback
"""

from branchparse.parser.core import RuleParser
from branchparse.parser.dispatch import ParseCallback, dispatch

__all__ = ["ParseCallback", "RuleParser", "dispatch"]
