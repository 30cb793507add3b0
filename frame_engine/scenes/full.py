"""
Opening followed by stars-and-productivity, overlapping by 10 frames.
"""

import logging

from ..scene import CueSheet, ElementState, SceneOrchestrator, SubScene
from ..timing import series_windows
from .constants import OPENING_SCENE_LENGTH, OPENING_SCENE_OUT_OVERLAP
from .opening import OpeningScene
from .stars_and_productivity import StarsAndProductivity

logger = logging.getLogger(__name__)


class FullComposition:
    def __init__(self, opening: OpeningScene, main: StarsAndProductivity, fps: int = 30):
        self.opening = opening
        self.main = main
        first, second = series_windows(
            [OPENING_SCENE_LENGTH, main.duration],
            overlap=OPENING_SCENE_OUT_OVERLAP,
        )
        self.orchestrator = SceneOrchestrator(fps, [
            SubScene("opening", first, render=lambda frame, fps: self.opening.render(frame)),
            SubScene("stars-and-productivity", second,
                     render=lambda frame, fps: self.main.render(frame)),
        ])
        logger.debug("Full composition: %d frames", self.duration)

    @property
    def duration(self):
        return self.orchestrator.duration

    def render(self, frame: int) -> ElementState:
        # both scenes are drawn through the overlap
        return self.orchestrator.render(frame, only_active=False)

    def cue_sheet(self) -> CueSheet:
        start = self.orchestrator.scene("stars-and-productivity").window.start
        return self.opening.cue_sheet().merged(self.main.cue_sheet(), offset=start)
