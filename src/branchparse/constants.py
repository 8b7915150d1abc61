"""Shared constants for branchparse.

Centralized configuration defaults used by the parser entry point and the
rule tree. Placing constants here avoids circular imports between the
``dsl`` and ``parser`` packages.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "FRAMES_PER_NESTING_LEVEL",
    "MAX_DEPTH",
    "MAX_SOURCE_SIZE",
    "RECURSION_RESERVE_FRAMES",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth for recursive grammars (Forward references).
# Every pass through a Forward rule costs several Python frames
# (Forward -> Sequence -> Branch -> ...), so this stays well below the
# interpreter's default recursion limit of 1000.
MAX_DEPTH: int = 64

# Frames kept free for the caller when clamping against sys.getrecursionlimit().
RECURSION_RESERVE_FRAMES: int = 50

# Python frames budgeted for one Forward nesting level when clamping.
# A recursive group (Forward -> Branch -> Sequence -> Option -> List -> Forward)
# costs four to five; the rest is headroom for Choice and Capture layers.
FRAMES_PER_NESTING_LEVEL: int = 8

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
