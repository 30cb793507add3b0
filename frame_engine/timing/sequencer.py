"""
Hierarchical time remapping.

A sub-scene lives inside a TimelineWindow of its parent and only ever sees
its own local frame, starting at 0 when the window opens.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from ..errors import ConfigurationError, ensure_finite

logger = logging.getLogger(__name__)

Number = Union[int, float]


@dataclass(frozen=True)
class TimelineWindow:
    """Frames [start, start + duration) of the parent timeline."""
    start: Number
    duration: Number

    def __post_init__(self):
        ensure_finite("window start", self.start)
        if math.isnan(self.duration):
            raise ConfigurationError("window duration must not be NaN")
        if self.duration <= 0:
            raise ConfigurationError(f"window duration must be positive, got {self.duration}")

    @property
    def end(self) -> Number:
        """First frame after the window."""
        return self.start + self.duration

    def contains(self, frame: Number) -> bool:
        return self.start <= frame < self.end

    def overlaps(self, other: "TimelineWindow") -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class SceneVisibility:
    """Mount state of a sub-scene at one parent frame."""
    active_range: TimelineWindow
    is_mounted: bool
    local_frame: Optional[Number] = None


def local_frame(parent_frame: Number, window: TimelineWindow) -> Optional[Number]:
    """
    Parent frame -> child-local frame, or None while the child is unmounted.

    None means: do not evaluate, render nothing and trigger no cues.
    """
    if not window.contains(parent_frame):
        return None
    return parent_frame - window.start


def nest(outer: TimelineWindow, inner: TimelineWindow) -> TimelineWindow:
    """
    Collapse a window nested inside another into one parent-level window.

    ``local_frame(local_frame(f, outer), inner) == local_frame(f, nest(outer, inner))``
    """
    if inner.start < 0:
        raise ConfigurationError(
            f"nested window cannot start before its parent (start={inner.start})"
        )
    start = outer.start + inner.start
    end = min(outer.end, start + inner.duration)
    if end <= start:
        raise ConfigurationError(
            f"window {inner} nested in {outer} is never visible"
        )
    return TimelineWindow(start, end - start)


def series_windows(
    durations: Iterable[Number],
    start: Number = 0,
    overlap: Number = 0,
) -> List[TimelineWindow]:
    """Lay windows end to end, each starting `overlap` frames before the previous one ends."""
    if overlap < 0:
        raise ConfigurationError(f"overlap must be >= 0, got {overlap}")
    windows = []
    cursor = start
    for duration in durations:
        window = TimelineWindow(cursor, duration)
        if windows and overlap >= windows[-1].duration:
            raise ConfigurationError(
                f"overlap {overlap} swallows the whole previous window {windows[-1]}"
            )
        windows.append(window)
        cursor = window.end - overlap
    return windows


class Sequencer:
    """A chain of nested windows, outermost first."""

    def __init__(self, windows: Sequence[TimelineWindow]):
        if not windows:
            raise ConfigurationError("Sequencer needs at least one window")
        self.windows = tuple(windows)
        flattened = self.windows[0]
        for inner in self.windows[1:]:
            flattened = nest(flattened, inner)
        self.flattened = flattened
        logger.debug("Sequencer %s flattens to %s", self.windows, flattened)

    def local_frame(self, parent_frame: Number) -> Optional[Number]:
        frame = parent_frame
        for window in self.windows:
            frame = local_frame(frame, window)
            if frame is None:
                return None
        return frame

    def visibility(self, parent_frame: Number) -> SceneVisibility:
        frame = self.local_frame(parent_frame)
        return SceneVisibility(
            active_range=self.flattened,
            is_mounted=frame is not None,
            local_frame=frame,
        )
