"""
Stars-and-productivity composition.

The stars counter plays first; at frame 150 the tablet slides in while the
stars zoom away behind it, and at frame 300 the zoom reverses. Total
length 345 frames.
"""

import logging
from typing import Sequence

from ..scene import AudioCue, CueSheet, ElementState, SceneOrchestrator, SubScene
from ..timing import EasedWindow, SpringConfig, TimelineWindow, power2_out
from ..transforms import Scale, TransformState, Translate
from .constants import (
    AUDIO_FILES,
    AUDIO_VOLUMES,
    STAR_FLY_DURATION,
    TABLET_ENTER_DURATION,
    TABLET_ENTERED_MARGIN,
    TABLET_SCENE_HIDE_ANIMATION,
    TABLET_SCENE_LENGTH,
    ZOOM_FADE,
    ZOOM_SCALE,
    ZOOM_TRANSLATE,
)
from .data import MOCK_PRODUCTIVITY_DATA, ProductivityDataPoint
from .stars_given import stars_given_cues, stars_given_element
from .tablet import Tablet

logger = logging.getLogger(__name__)

TABLET_START = STAR_FLY_DURATION
TABLET_DURATION = TABLET_SCENE_LENGTH + TABLET_SCENE_HIDE_ANIMATION
TOTAL_DURATION = TABLET_START + TABLET_DURATION


def zoom_style(zoom: float):
    """(transform, opacity) applied to the stars while the tablet covers them."""
    transform = TransformState.of(
        Translate(ZOOM_TRANSLATE * zoom, -ZOOM_TRANSLATE * zoom),
        Scale.uniform(1 + ZOOM_SCALE * zoom),
    )
    return transform, 1 - ZOOM_FADE * zoom


class StarsAndProductivity:
    """
    Parameters:
    -----------
    stars_given : int
        Count shown by the stars scene.
    top_weekday : int or str
        Index into WEEKDAYS the weekday wheel lands on.
    top_hour : int or str
        Hour (0-23) the hour wheel lands on.
    graph_data : sequence of ProductivityDataPoint
        One point per hour for the bar graph.
    """

    def __init__(
        self,
        stars_given: int,
        top_weekday,
        top_hour,
        graph_data: Sequence[ProductivityDataPoint] = MOCK_PRODUCTIVITY_DATA,
        fps: int = 30,
    ):
        self.stars_given = stars_given
        self.fps = fps
        self.tablet = Tablet(top_weekday, top_hour, graph_data, fps=fps)
        self.orchestrator = SceneOrchestrator(
            fps,
            [
                SubScene(
                    "stars",
                    TimelineWindow(0, TOTAL_DURATION),
                    render=lambda frame, fps: stars_given_element(frame, self.stars_given),
                ),
                SubScene(
                    "tablet",
                    TimelineWindow(TABLET_START, TABLET_DURATION),
                    entry=SpringConfig(delay=TABLET_START,
                                       duration_in_frames=TABLET_ENTER_DURATION),
                    exit=SpringConfig(delay=TABLET_START + TABLET_SCENE_LENGTH,
                                      duration_in_frames=TABLET_ENTER_DURATION),
                    render=lambda frame, fps: self.tablet.element(frame),
                ),
            ],
            strategy=EasedWindow(power2_out),
        )
        logger.debug("Stars and productivity: %d stars, %d frames", stars_given, TOTAL_DURATION)

    @property
    def duration(self) -> int:
        return TOTAL_DURATION

    def zoom(self, frame: float) -> float:
        return self.orchestrator.transition_value(frame, "tablet")

    def stars_visible(self, frame: float) -> bool:
        """Stars are hidden while the tablet fully covers them."""
        return (frame < TABLET_START + TABLET_ENTERED_MARGIN
                or frame > TABLET_START + TABLET_SCENE_LENGTH)

    def render(self, frame: int) -> ElementState:
        children = []
        if self.stars_visible(frame) and self.orchestrator.local_frame(frame, "stars") is not None:
            transform, opacity = zoom_style(self.zoom(frame))
            children.append(stars_given_element(frame, self.stars_given, transform, opacity))
        tablet_frame = self.orchestrator.local_frame(frame, "tablet")
        if tablet_frame is not None:
            children.append(self.tablet.element(tablet_frame))
        return ElementState(
            element_id="stars-and-productivity",
            children=tuple(children),
            metadata={"frame": frame, "zoom": self.zoom(frame)},
        )

    def cue_sheet(self) -> CueSheet:
        cues = [
            AudioCue(0, "background-music", AUDIO_FILES["background-music"],
                     AUDIO_VOLUMES["background-music"], loop=True),
        ]
        cues.extend(stars_given_cues())
        cues.extend(cue.shifted(TABLET_START) for cue in self.tablet.cues())
        return CueSheet(cues)
