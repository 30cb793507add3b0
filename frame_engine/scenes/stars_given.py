"""
Stars-given counter: gradient background fades in, the count scales up,
everything fades out at the end of the scene.
"""

from ..scene import AudioCue, ElementState
from ..timing import Extrapolation, interpolate, power2_out
from ..timing.interpolate import clamp01
from ..transforms import IDENTITY, Scale, TransformState
from .constants import (
    AUDIO_FILES,
    AUDIO_VOLUMES,
    STARS_BACKGROUND,
    STARS_BACKGROUND_FADE,
    STARS_FADE_OUT,
    STARS_TEXT_DELAY,
    STARS_TEXT_DURATION,
)

CLAMP = Extrapolation.CLAMP


def background_opacity(frame: float) -> float:
    return interpolate(frame, STARS_BACKGROUND_FADE, [0, 1], CLAMP, CLAMP)


def fade_out_opacity(frame: float) -> float:
    return interpolate(frame, STARS_FADE_OUT, [1, 0], CLAMP, CLAMP)


def text_progress(frame: float) -> float:
    return power2_out(clamp01((frame - STARS_TEXT_DELAY) / STARS_TEXT_DURATION))


def stars_given_element(
    frame: float,
    stars_given: int,
    transform: TransformState = IDENTITY,
    opacity: float = 1.0,
) -> ElementState:
    """
    Element tree for the stars-given scene at local `frame`.

    `transform` and `opacity` come from the parent's zoom transition.
    """
    fade = fade_out_opacity(frame)
    eased = text_progress(frame)

    background = ElementState(
        element_id="stars.background",
        opacity=background_opacity(frame) * fade,
        color=STARS_BACKGROUND,
        size=(1080, 1080),
    )
    text = ElementState(
        element_id="stars.text",
        transform=TransformState.of(Scale.uniform(0.5 + eased * 0.5)),
        opacity=eased * fade,
        children=(
            ElementState(element_id="stars.label", text="Stars Given", size=(420, 60)),
            ElementState(element_id="stars.count", text=str(stars_given), size=(420, 180)),
            ElementState(element_id="stars.icon", text="⭐", size=(100, 100)),
        ),
    )
    return ElementState(
        element_id="stars",
        transform=transform,
        opacity=opacity,
        children=(background, text),
    )


def stars_given_cues():
    return [
        AudioCue(STARS_TEXT_DELAY, "stars-whoosh", AUDIO_FILES["stars-whoosh"],
                 AUDIO_VOLUMES["stars-whoosh"]),
    ]
