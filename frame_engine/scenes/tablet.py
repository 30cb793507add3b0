"""
3D tablet that slides in, tilts, and then flattens to fill the screen.

The frame and the content it holds are driven by the same progress value
with opposite signs (see OpposingTransform), so the content straightens
while the frame tilts away.
"""

import logging
from typing import List, Sequence

from ..scene import AudioCue, ElementState
from ..timing import EasedWindow, SpringConfig, power2_out
from ..transforms import OpposingTransform, TransformState, Translate
from .constants import (
    AUDIO_FILES,
    AUDIO_VOLUMES,
    CONTENT_OFFSET,
    CONTENT_PERSPECTIVE,
    CONTENT_REST_SCALE,
    CONTENT_SIZE,
    FRAME_PADDING,
    FRAME_TRAVEL,
    MASTER_REST_SCALE,
    SCREEN_ROTATION_X,
    SCREEN_ROTATION_Y,
    SKEW_X,
    SKEW_Y,
    TABLET_ASSET,
    TABLET_INTENSITY,
    TABLET_SCENE_ENTER_ANIMATION,
    TABLET_SCENE_ENTER_ANIMATION_DELAY,
    TABLET_SCENE_HIDE_ANIMATION,
    TABLET_SCENE_LENGTH,
    TABLET_SLIDE_DISTANCE,
)
from .data import MOCK_PRODUCTIVITY_DATA, ProductivityDataPoint
from .productivity import Productivity

logger = logging.getLogger(__name__)


class Tablet:
    """
    Tablet scene. All frames are local to the scene's window.
    """

    def __init__(
        self,
        weekday,
        hour,
        graph_data: Sequence[ProductivityDataPoint] = MOCK_PRODUCTIVITY_DATA,
        fps: int = 30,
        easing=power2_out,
    ):
        self.fps = fps
        self.window = EasedWindow(easing)
        self.entry = SpringConfig(
            delay=TABLET_SCENE_ENTER_ANIMATION_DELAY,
            duration_in_frames=TABLET_SCENE_ENTER_ANIMATION,
        )
        self.exit = SpringConfig(
            delay=TABLET_SCENE_LENGTH,
            duration_in_frames=TABLET_SCENE_HIDE_ANIMATION,
        )
        self.window.validate(fps, self.entry)
        self.window.validate(fps, self.exit)
        self.opposing = OpposingTransform(
            rotate_x=SCREEN_ROTATION_X,
            rotate_y=SCREEN_ROTATION_Y,
            skew_x=SKEW_X,
            skew_y=SKEW_Y,
            content_rest_scale=CONTENT_REST_SCALE,
            padding=FRAME_PADDING,
            master_rest_scale=MASTER_REST_SCALE,
            travel=FRAME_TRAVEL,
            content_offset=CONTENT_OFFSET,
            perspective=CONTENT_PERSPECTIVE,
        )
        self.productivity = Productivity(graph_data, weekday, hour)
        logger.debug("Tablet enters at %s, hides at %s", self.entry.delay, self.exit.delay)

    @property
    def duration(self) -> int:
        return TABLET_SCENE_LENGTH + TABLET_SCENE_HIDE_ANIMATION

    def entry_progress(self, frame: float) -> float:
        return self.window.progress(frame, self.fps, self.entry)

    def exit_progress(self, frame: float) -> float:
        return self.window.progress(frame, self.fps, self.exit)

    def to_fullscreen(self, frame: float) -> float:
        """Opposing-transform progress: 0 while tilted, up to the intensity when flat."""
        return TABLET_INTENSITY * (self.entry_progress(frame) - self.exit_progress(frame))

    def slide_offset(self, frame: float) -> float:
        return TABLET_SLIDE_DISTANCE - TABLET_SLIDE_DISTANCE * self.entry_progress(frame)

    def element(self, frame: float) -> ElementState:
        progress = self.to_fullscreen(frame)
        frame_transform, content_transform = self.opposing.layers(progress)
        content = ElementState(
            element_id="tablet.content",
            transform=content_transform,
            size=CONTENT_SIZE,
            children=(self.productivity.element(frame),),
        )
        shell = ElementState(
            element_id="tablet.frame",
            transform=frame_transform,
            asset_id=TABLET_ASSET,
            size=CONTENT_SIZE,
        )
        return ElementState(
            element_id="tablet",
            transform=TransformState.of(Translate(y=self.slide_offset(frame))),
            children=(shell, content),
            metadata={"to_fullscreen": progress},
        )

    def cues(self) -> List[AudioCue]:
        return [
            AudioCue(0, "tablet-entry", AUDIO_FILES["tablet-entry"],
                     AUDIO_VOLUMES["tablet-entry"]),
        ] + self.productivity.cues()
