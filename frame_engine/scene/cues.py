"""
Audio cue sheet.

Cues are (frame, cue id) pairs derived from the same timelines as the
visuals. The audio mixer consults the sheet; the engine never plays sound.
"""

import bisect
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..errors import ConfigurationError, ensure_finite

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AudioCue:
    """A sound that starts on `frame`."""
    frame: int
    cue_id: str
    asset_id: Optional[str] = None
    volume: float = 1.0
    start_from: int = 0  # frames to skip into the asset
    loop: bool = False

    def __post_init__(self):
        ensure_finite(f"cue {self.cue_id}", self.frame, self.volume)
        if not 0 <= self.volume <= 1:
            raise ConfigurationError(f"cue {self.cue_id}: volume must be in [0, 1], got {self.volume}")
        if self.start_from < 0:
            raise ConfigurationError(f"cue {self.cue_id}: start_from must be >= 0")

    def shifted(self, offset: int) -> "AudioCue":
        return AudioCue(self.frame + offset, self.cue_id, self.asset_id,
                        self.volume, self.start_from, self.loop)

    def to_dict(self):
        return {
            "frame": self.frame,
            "cue": self.cue_id,
            "asset": self.asset_id,
            "volume": self.volume,
            "start_from": self.start_from,
            "loop": self.loop,
        }


class CueSheet:
    """Cues sorted by frame, searchable without rescanning every frame."""

    def __init__(self, cues: Iterable[AudioCue] = ()):
        self.cues: List[AudioCue] = sorted(cues, key=lambda c: (c.frame, c.cue_id))
        self._frames = [cue.frame for cue in self.cues]
        pairs = [(cue.frame, cue.cue_id) for cue in self.cues]
        for previous, current in zip(pairs, pairs[1:]):
            if previous == current:
                raise ConfigurationError(f"cue {current[1]!r} is scheduled twice on frame {current[0]}")
        logger.debug("Cue sheet: %s", [(c.frame, c.cue_id) for c in self.cues])

    def __len__(self):
        return len(self.cues)

    def __iter__(self):
        return iter(self.cues)

    def get(self, cue_id: str) -> AudioCue:
        """Earliest cue with `cue_id`."""
        for cue in self.cues:
            if cue.cue_id == cue_id:
                return cue
        raise KeyError(cue_id)

    def occurrences(self, cue_id: str) -> List[AudioCue]:
        """Every cue with `cue_id`, in frame order."""
        return [cue for cue in self.cues if cue.cue_id == cue_id]

    def at(self, frame: int) -> List[AudioCue]:
        """Cues that start exactly on `frame`."""
        lo = bisect.bisect_left(self._frames, frame)
        hi = bisect.bisect_right(self._frames, frame)
        return self.cues[lo:hi]

    def latest_before(self, frame: int) -> Optional[AudioCue]:
        """Most recent cue starting on or before `frame`."""
        index = bisect.bisect_right(self._frames, frame)
        return self.cues[index - 1] if index else None

    def between(self, start: int, end: int) -> List[AudioCue]:
        """Cues with start <= frame < end."""
        lo = bisect.bisect_left(self._frames, start)
        hi = bisect.bisect_left(self._frames, end)
        return self.cues[lo:hi]

    def merged(self, other: "CueSheet", offset: int = 0) -> "CueSheet":
        return CueSheet(list(self.cues) + [cue.shifted(offset) for cue in other])

    def to_list(self):
        return [cue.to_dict() for cue in self.cues]
