"""Recursion depth limiting for recursive grammars.

Forward rules let a grammar refer to itself; every nested pass adds several
Python frames to the call stack (FRAMES_PER_NESTING_LEVEL). The configured
nesting limit is clamped so that, at that frame cost, the deepest allowed
nesting still fits under the interpreter recursion limit and a deep input
reports MAX_DEPTH_EXCEEDED instead of raising RecursionError.

Python 3.13+.
"""

import logging
import sys

from branchparse.constants import FRAMES_PER_NESTING_LEVEL, RECURSION_RESERVE_FRAMES

__all__ = ["depth_clamp"]

logger = logging.getLogger(__name__)


def depth_clamp(
    requested_depth: int,
    reserve_frames: int = RECURSION_RESERVE_FRAMES,
    frames_per_level: int = FRAMES_PER_NESTING_LEVEL,
) -> int:
    """Clamp requested nesting depth against Python recursion limit.

    Logs a warning if clamping occurs.

    Args:
        requested_depth: Desired maximum nesting depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)
        frames_per_level: Stack frames one nesting level may use (default: 8)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(200)
        >>> depth_clamp(10)  # OK, within limit
        10
        >>> depth_clamp(500)  # (200 - 50) // 8
        18
    """
    max_safe_depth = max(
        (sys.getrecursionlimit() - reserve_frames) // max(frames_per_level, 1), 1
    )
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d) at %d frames per level. "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            frames_per_level,
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
