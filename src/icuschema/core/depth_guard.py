"""Nesting limits for the recursive scanners.

Both sub-message extraction and tag collection recurse once per nesting
level. DepthGuard counts those levels and refuses to go past a configured
maximum, which itself is kept below what the interpreter stack can hold.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from icuschema.constants import MAX_DEPTH
from icuschema.diagnostics import ICUSchemaError
from icuschema.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)

_FRAMES_PER_LEVEL = 4
_RESERVED_FRAMES = 50


class DepthLimitExceededError(ICUSchemaError):
    """A scanner tried to descend one level past DepthGuard.max_depth.

    Caught inside the package by whoever attempted the descent; callers of
    extract_schema() never see it.
    """


@dataclass(slots=True)
class DepthGuard:
    """Level counter used as a context manager around each descent.

    Example:
        >>> guard = DepthGuard(max_depth=1)
        >>> with guard:
        ...     guard.depth
        1
        >>> guard.depth
        0

    One guard belongs to one parse; it is not shared between threads.

    Attributes:
        max_depth: Deepest level allowed, after depth_clamp()
        current_depth: Levels currently entered
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        # Check first: a raising __enter__ gets no matching __exit__.
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


def depth_clamp(
    requested_depth: int,
    frames_per_level: int = _FRAMES_PER_LEVEL,
    reserve_frames: int = _RESERVED_FRAMES,
) -> int:
    """Lower requested_depth to what the current recursion limit supports.

    A nesting level costs frames_per_level interpreter frames and
    reserve_frames are kept for the callers above the parser, so the
    ceiling is (recursion limit - reserve_frames) // frames_per_level.

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(80), depth_clamp(1000)
        (80, 237)
    """
    ceiling = (sys.getrecursionlimit() - reserve_frames) // frames_per_level
    if requested_depth <= ceiling:
        return requested_depth

    logger.warning(
        "Clamping nesting depth %d to %d (recursion limit is %d); "
        "raise sys.setrecursionlimit() to allow deeper messages",
        requested_depth,
        ceiling,
        sys.getrecursionlimit(),
    )
    return ceiling
