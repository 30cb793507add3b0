"""
Opening scene: the camera zooms out over a rocket launch site while a
title pane swings in, then everything rushes past the viewer on exit.
"""

import logging
import math

from ..errors import ConfigurationError
from ..scene import AudioCue, CueSheet, ElementState
from ..timing import DampedSpring, SpringConfig, interpolate, wind_up_progress
from ..transforms import Rotate, Scale, TransformState, Translate
from .constants import (
    AUDIO_FILES,
    AUDIO_VOLUMES,
    BACKGROUND_MOUNTAINS_IMAGE,
    FOREGROUND_IMAGE,
    OPENING_EXIT_DURATION,
    OPENING_EXIT_LEAD,
    OPENING_FOREGROUND_EXIT_TRAVEL,
    OPENING_GRADIENT,
    OPENING_HIGHLIGHT_DELAY,
    OPENING_HIGHLIGHT_DURATION,
    OPENING_LAUNCH_PREROLL,
    OPENING_LONG_LOGIN,
    OPENING_MOUNTAINS_DROP,
    OPENING_SCENE_LENGTH,
    OPENING_SPRING_DAMPING,
    OPENING_START_SCALE,
    OPENING_TITLE_ENTER_DELAY,
    OPENING_TITLE_ENTER_DURATION,
    OPENING_TITLE_EXIT_TILT,
    OPENING_TITLE_EXIT_TRAVEL,
    OPENING_TITLE_SWAY,
    OPENING_TITLE_SWAY_DEGREES,
    OPENING_WHOOSH_LEAD,
    OPENING_ZOOM_BIAS,
    OPENING_ZOOM_DELAY,
    OPENING_ZOOM_DURATION,
    ROCKET_THEMES,
)

logger = logging.getLogger(__name__)

# exit zoom never reaches zero distance
MIN_DISTANCE = 0.000005


class OpeningScene:
    """
    Parameters:
    -----------
    login : str
        Name shown on the title pane.
    start_angle : str
        "left" or "right"; side the camera starts from.
    rocket : str
        Rocket theme, one of ROCKET_THEMES.
    width, height : int
        Canvas size; the zoom offset and title entry depend on it.
    """

    def __init__(self, login: str, start_angle: str = "left", rocket: str = "blue",
                 width: int = 1080, height: int = 1080, fps: int = 30,
                 duration: int = OPENING_SCENE_LENGTH):
        if start_angle not in ("left", "right"):
            raise ConfigurationError(f"start_angle must be 'left' or 'right', got {start_angle!r}")
        if rocket not in ROCKET_THEMES:
            raise ConfigurationError(f"unknown rocket theme {rocket!r}")
        if duration <= OPENING_WHOOSH_LEAD:
            raise ConfigurationError(f"opening needs more than {OPENING_WHOOSH_LEAD} frames")
        self.login = login
        self.start_angle = start_angle
        self.rocket = rocket
        self.width = width
        self.height = height
        self.fps = fps
        self.duration = duration
        self.strategy = DampedSpring()
        self.zoom_config = SpringConfig(
            damping=OPENING_SPRING_DAMPING,
            delay=OPENING_ZOOM_DELAY,
            duration_in_frames=OPENING_ZOOM_DURATION,
        )
        self.exit_config = SpringConfig(
            damping=OPENING_SPRING_DAMPING,
            delay=duration - OPENING_EXIT_LEAD,
            duration_in_frames=OPENING_EXIT_DURATION,
        )
        self.title_config = SpringConfig(
            damping=OPENING_SPRING_DAMPING,
            delay=OPENING_TITLE_ENTER_DELAY,
            duration_in_frames=OPENING_TITLE_ENTER_DURATION,
        )
        self.highlight_config = SpringConfig(
            damping=OPENING_SPRING_DAMPING,
            delay=OPENING_HIGHLIGHT_DELAY,
            duration_in_frames=OPENING_HIGHLIGHT_DURATION,
        )
        for config in (self.zoom_config, self.exit_config, self.title_config, self.highlight_config):
            self.strategy.validate(fps, config)
        logger.debug("Opening for %s: %d frames from the %s", login, duration, start_angle)

    def zoom_out(self, frame: float) -> float:
        return wind_up_progress(frame, self.fps, self.zoom_config,
                                bias=OPENING_ZOOM_BIAS, strategy=self.strategy)

    def exit_progress(self, frame: float) -> float:
        return self.strategy.progress(frame, self.fps, self.exit_config)

    def camera(self, frame: float) -> TransformState:
        zoom = self.zoom_out(frame)
        scale = interpolate(zoom, [0, 1], [OPENING_START_SCALE, 1])
        start = self.width / 2 - 300 if self.start_angle == "left" else -self.width / 2
        offset = interpolate(zoom, [0, 1], [start, 0])
        return TransformState.of(Scale.uniform(scale), Translate(x=offset / scale))

    def exit_scale(self, frame: float) -> float:
        """Grows from 1 towards 1 / MIN_DISTANCE as the exit spring completes."""
        distance = interpolate(self.exit_progress(frame), [0, 1], [1, MIN_DISTANCE])
        return 1 / distance

    def title(self, frame: float, exit_progress: float, scale_divided: float) -> ElementState:
        enter = self.strategy.progress(frame, self.fps, self.title_config)
        sway = [OPENING_TITLE_SWAY_DEGREES, -OPENING_TITLE_SWAY_DEGREES]
        if self.start_angle != "left":
            sway.reverse()
        rotate_y = interpolate(frame, OPENING_TITLE_SWAY, sway)
        tilt = interpolate(exit_progress, [0, 1], [0, math.pi * OPENING_TITLE_EXIT_TILT])
        highlight = self.strategy.progress(frame, self.fps, self.highlight_config)
        pane_scale = 0.75 if len(self.login) > OPENING_LONG_LOGIN else 1
        return ElementState(
            element_id="opening.title",
            transform=TransformState.of(
                Translate(y=-200 + interpolate(enter, [0, 1], [self.height, 0])),
                Scale.uniform(pane_scale),
                Scale.uniform(scale_divided),
                Rotate.degrees("y", rotate_y),
                Rotate("x", tilt),
                Translate(y=(scale_divided - 1) * OPENING_TITLE_EXIT_TRAVEL),
            ),
            size=(900, 200),
            children=(
                ElementState(element_id="opening.title.caption",
                             text="This is my #GitHubUnwrapped"),
                ElementState(element_id="opening.title.login", text=self.login),
            ),
            metadata={"highlight": highlight, "padding": highlight * 20},
        )

    def render(self, frame: int) -> ElementState:
        exit_progress = self.exit_progress(frame)
        scale_divided = self.exit_scale(frame)
        background = ElementState(
            element_id="opening.background",
            opacity=interpolate(exit_progress, [0, 1], [1, 0]),
            color=OPENING_GRADIENT,
            size=(self.width, self.height),
        )
        mountains = ElementState(
            element_id="opening.mountains",
            transform=TransformState.of(Translate(
                y=interpolate(exit_progress, [0, 0.7], [0, OPENING_MOUNTAINS_DROP])
            )),
            asset_id=BACKGROUND_MOUNTAINS_IMAGE,
            size=(self.width, self.height),
        )
        foreground = ElementState(
            element_id="opening.foreground",
            transform=TransformState.of(
                Scale.uniform(scale_divided),
                Translate(y=(scale_divided - 1) * OPENING_FOREGROUND_EXIT_TRAVEL),
            ),
            asset_id=FOREGROUND_IMAGE,
            size=(self.width, self.height),
        )
        rocket = ElementState(
            element_id="opening.rocket",
            asset_id=f"rocket-side-{self.rocket}.png",
            size=(200, 600),
        )
        return ElementState(
            element_id="opening",
            transform=self.camera(frame),
            children=(background, self.title(frame, exit_progress, scale_divided),
                      mountains, foreground, rocket),
            metadata={"zoom": self.zoom_out(frame), "exit": exit_progress},
        )

    def cue_sheet(self) -> CueSheet:
        return CueSheet([
            AudioCue(0, "rocket-launch", AUDIO_FILES["rocket-launch"],
                     AUDIO_VOLUMES["rocket-launch"], start_from=OPENING_LAUNCH_PREROLL),
            AudioCue(self.duration - OPENING_WHOOSH_LEAD, "opening-whoosh",
                     AUDIO_FILES["opening-whoosh"], AUDIO_VOLUMES["opening-whoosh"]),
        ])
