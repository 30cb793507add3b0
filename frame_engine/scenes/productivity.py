"""
Productivity panel: two wheels (weekday, hour) above a staggered bar graph.

Frames here are local to the tablet scene.
"""

import logging
from typing import List, Sequence

from ..layout import Wheel
from ..scene import AudioCue, ElementState
from ..timing import power2_out
from ..timing.interpolate import clamp01
from ..transforms import Scale, TransformState, Translate
from .constants import (
    AUDIO_FILES,
    AUDIO_VOLUMES,
    BAR_COLOR,
    BAR_DELAY,
    BAR_DURATION,
    BAR_GAP,
    BAR_HIGHLIGHT_COLOR,
    BAR_STAGGER,
    BAR_WIDTH,
    GRAPH_HEIGHT,
    HOUR_WHEEL_DELAY,
    HOUR_WHEEL_RADIUS,
    HOUR_WHEEL_SOUND_DELAY,
    WEEKDAY_WHEEL_DELAY,
    WEEKDAY_WHEEL_RADIUS,
    WEEKDAY_WHEEL_SOUND_DELAY,
    WHEEL_DURATION,
    WHEEL_HIGHLIGHT_AFTER,
)
from .data import HOURS, WEEKDAYS, ProductivityDataPoint, format_hour

logger = logging.getLogger(__name__)


def bar_progress(frame: float, index: int) -> float:
    """Eased growth of bar `index`; bars start 2 frames apart."""
    delay = BAR_DELAY + index * BAR_STAGGER
    return power2_out(clamp01(max(0, frame - delay) / BAR_DURATION))


class Productivity:
    """Wheels and bar graph inside the tablet screen."""

    def __init__(self, graph_data: Sequence[ProductivityDataPoint], weekday, hour):
        self.graph_data = list(graph_data)
        self.max_productivity = max((p.productivity for p in self.graph_data), default=0)
        self.weekday_wheel = Wheel(
            values=WEEKDAYS,
            selected_value=weekday,
            radius=WEEKDAY_WHEEL_RADIUS,
            delay=WEEKDAY_WHEEL_DELAY,
            duration=WHEEL_DURATION,
            highlight_after=WHEEL_HIGHLIGHT_AFTER,
            element_id="productivity.weekday",
        )
        self.hour_wheel = Wheel(
            values=HOURS,
            selected_value=hour,
            radius=HOUR_WHEEL_RADIUS,
            delay=HOUR_WHEEL_DELAY,
            duration=WHEEL_DURATION,
            highlight_after=WHEEL_HIGHLIGHT_AFTER,
            render_label=format_hour,
            element_id="productivity.hour",
        )
        logger.debug("Productivity: %d data points, max %s",
                     len(self.graph_data), self.max_productivity)

    def is_most_productive(self, point: ProductivityDataPoint) -> bool:
        return self.max_productivity > 0 and point.productivity == self.max_productivity

    def normalized(self, point: ProductivityDataPoint) -> float:
        if self.max_productivity <= 0:
            return 0.0
        return point.productivity / self.max_productivity

    def bar_elements(self, frame: float) -> List[ElementState]:
        bars = []
        count = len(self.graph_data)
        for position, point in enumerate(self.graph_data):
            x = (position - (count - 1) / 2) * (BAR_WIDTH + BAR_GAP)
            fill = ElementState(
                element_id=f"productivity.bar{point.time}.fill",
                transform=TransformState.of(Scale(1, self.normalized(point), 1)),
                color=BAR_HIGHLIGHT_COLOR if self.is_most_productive(point) else BAR_COLOR,
                size=(BAR_WIDTH, GRAPH_HEIGHT),
            )
            bars.append(ElementState(
                element_id=f"productivity.bar{point.time}",
                transform=TransformState.of(
                    Translate(x=x),
                    Scale(1, bar_progress(frame, point.time), 1),
                ),
                children=(fill,),
                metadata={"hour": point.time, "label": str(point.time)},
            ))
        return bars

    def element(self, frame: float) -> ElementState:
        graph = ElementState(
            element_id="productivity.graph",
            transform=TransformState.of(Translate(y=300)),
            children=tuple(self.bar_elements(frame)),
        )
        weekday = ElementState(
            element_id="productivity.weekday.pane",
            transform=TransformState.of(Translate(x=300, y=-400)),
            text="Most productive day",
            size=(1000, 200),
            children=(self.weekday_wheel.element(frame),),
        )
        hour = ElementState(
            element_id="productivity.hour.pane",
            transform=TransformState.of(Translate(x=300, y=-180)),
            text="Most productive time",
            size=(1000, 200),
            children=(self.hour_wheel.element(frame),),
        )
        return ElementState(
            element_id="productivity",
            children=(weekday, hour, graph),
        )

    def cues(self) -> List[AudioCue]:
        """Cues relative to the tablet scene's first frame."""
        return [
            AudioCue(BAR_DELAY, "bars-animate", AUDIO_FILES["bars-animate"],
                     AUDIO_VOLUMES["bars-animate"]),
            AudioCue(WEEKDAY_WHEEL_SOUND_DELAY, "weekday-wheel", AUDIO_FILES["weekday-wheel"],
                     AUDIO_VOLUMES["weekday-wheel"]),
            AudioCue(HOUR_WHEEL_SOUND_DELAY, "hour-wheel", AUDIO_FILES["hour-wheel"],
                     AUDIO_VOLUMES["hour-wheel"]),
            AudioCue(self.weekday_wheel.settle_frame, "weekday-wheel-settled"),
            AudioCue(self.hour_wheel.settle_frame, "hour-wheel-settled"),
        ]
