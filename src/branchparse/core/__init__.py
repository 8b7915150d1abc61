"""Core utilities shared by the rule tree and the parser entry point.

Exports:
    depth_clamp: Clamp a nesting limit against the interpreter recursion limit

Python 3.13+.
"""

from .depth import depth_clamp

__all__ = ["depth_clamp"]
