"""Recursion limits for tree walks.

The expansion dispatch, the traversal and the printer all recurse once per
nesting level. A host may hand over a programmatically built tree of any
depth, so each walk counts its levels with a DepthGuard and fails with
DepthLimitExceededError instead of exhausting the interpreter stack.

Guards hold plain per-instance state; every walk owns its guard.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from vget.constants import MAX_DEPTH
from vget.diagnostics import VGetError
from vget.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(VGetError):
    """A tree nests deeper than the configured maximum.

    Usually a runaway chain of sub-expressions or elements produced by
    another plugin, rarely hand-written template source.
    """


@dataclass(slots=True)
class DepthGuard:
    """Counts nesting levels entered through ``with guard:``.

        guard = DepthGuard(max_depth=10)
        with guard:
            walk(child)

    Not frozen: entering and leaving update current_depth.

    Attributes:
        max_depth: Deepest level allowed, clamped to the recursion limit
        current_depth: Levels currently entered
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter one level.

        The limit is checked before counting: a raising __enter__ gets no
        matching __exit__.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(self.max_depth))
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Levels currently entered."""
        return self.current_depth

    def reset(self) -> None:
        """Forget all entered levels (start of a new walk)."""
        self.current_depth = 0


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Lower requested_depth so a walk cannot hit RecursionError first.

    Args:
        requested_depth: Configured maximum depth
        reserve_frames: Frames left for the caller and the host compiler

    Returns:
        requested_depth, or the recursion limit minus reserve_frames if that
        is smaller (logged as a warning)
    """
    limit = sys.getrecursionlimit()
    ceiling = limit - reserve_frames
    if requested_depth <= ceiling:
        return requested_depth
    logger.warning(
        "Max depth %d is above what the recursion limit (%d) allows. "
        "Clamping to %d.",
        requested_depth,
        limit,
        ceiling,
    )
    return ceiling
