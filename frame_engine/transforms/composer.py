"""
Composition of per-element transforms.

TransformComposer turns an ordered list of tracks (each a constant or a
function of the local frame) into a TransformState. The two helpers below
it implement the recurring scene patterns: counter-rotation for labels
that must stay upright, and the opposing frame/content pair behind the
tablet's "object behind glass" depth effect.
"""

import math
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple, Union

from ..errors import ConfigurationError, check_output, ensure_finite
from .operations import (
    Perspective,
    Rotate,
    Scale,
    Skew,
    TransformOp,
    TransformState,
    Translate,
    op_values,
)

Driver = Union[float, Callable[[float], float]]

TRACK_KINDS = (
    "translate_x", "translate_y", "translate_z",
    "rotate_x", "rotate_y", "rotate_z",
    "scale", "scale_x", "scale_y", "scale_z",
    "skew_x", "skew_y",
    "perspective",
)


@dataclass(frozen=True)
class TransformTrack:
    """One named transform parameter; angles in radians, distances in px."""
    kind: str
    driver: Driver

    def __post_init__(self):
        if self.kind not in TRACK_KINDS:
            raise ConfigurationError(f"Unknown transform track {self.kind!r}")
        if not callable(self.driver):
            ensure_finite(f"track {self.kind}", self.driver)

    def value(self, frame: float) -> float:
        return self.driver(frame) if callable(self.driver) else self.driver

    def operation(self, frame: float) -> TransformOp:
        v = self.value(frame)
        kind, _, axis = self.kind.partition("_")
        if kind == "translate":
            return Translate(**{axis: v})
        if kind == "rotate":
            return Rotate(axis, v)
        if kind == "scale":
            if not axis:
                return Scale.uniform(v)
            return Scale(**{axis: v})
        if kind == "skew":
            return Skew(**{axis: v})
        return Perspective(v)


class TransformComposer:
    """Ordered tracks -> TransformState for one element at a given local frame."""

    def __init__(self, tracks: Sequence[TransformTrack]):
        self.tracks = tuple(tracks)

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[str, Driver]]) -> "TransformComposer":
        return cls([TransformTrack(kind, driver) for kind, driver in pairs])

    def at(self, frame: float) -> TransformState:
        ops = [track.operation(frame) for track in self.tracks]
        state = TransformState(tuple(ops))
        check_output("TransformComposer", (v for op in ops for v in op_values(op)))
        return state


def counter_rotate(parent: TransformState) -> TransformState:
    """
    Rotations that cancel every rotation in `parent`.

    ``parent.then(counter_rotate(parent))`` keeps the parent's translation
    while its net rotation is zero.
    """
    return TransformState(tuple(
        op.inverse() for op in reversed(parent.operations) if isinstance(op, Rotate)
    ))


class OpposingTransform:
    """
    Frame and content stacks driven by one progress value with opposite signs.

    At progress 0 the content is tilted by the full rotation/skew and shrunk
    to ``content_rest_scale`` while the frame sits flat at its rest size. At
    progress 1 the content is flat and full size and the frame is tilted the
    other way and grown by ``padding / (1 - content_rest_scale)`` so it still
    surrounds the content.

    Parameters:
    -----------
    rotate_x, rotate_y : float
        Maximum tilt in degrees.
    skew_x, skew_y : float
        Maximum skew in degrees.
    content_rest_scale : float
        Content size at rest, strictly between 0 and 1.
    padding : float
        Extra growth of the frame on top of the exact compensation.
    master_rest_scale : float
        Uniform scale of the whole frame stack at rest.
    travel : (float, float)
        Frame translation at progress 1.
    content_offset : (float, float)
        Content position (left, top) at rest; 0 at progress 1.
    perspective : float
        Perspective distance applied to the content stack.
    """

    def __init__(
        self,
        rotate_x: float = -10,
        rotate_y: float = 15,
        skew_x: float = 7,
        skew_y: float = -4,
        content_rest_scale: float = 0.5 * 0.8,
        padding: float = 1.3,
        master_rest_scale: float = 0.8,
        travel: Tuple[float, float] = (-500, 250),
        content_offset: Tuple[float, float] = (350, 480),
        perspective: float = 1200,
    ):
        ensure_finite("opposing transform magnitudes", rotate_x, rotate_y, skew_x, skew_y,
                      content_rest_scale, padding, master_rest_scale, perspective,
                      *travel, *content_offset)
        if not 0 < content_rest_scale < 1:
            raise ConfigurationError(
                f"content_rest_scale must be in (0, 1), got {content_rest_scale}"
            )
        if padding <= 0 or master_rest_scale <= 0:
            raise ConfigurationError("padding and master_rest_scale must be positive")
        if perspective <= 0:
            raise ConfigurationError(f"perspective must be positive, got {perspective}")

        self.rotate_x = math.radians(rotate_x)
        self.rotate_y = math.radians(rotate_y)
        self.skew_x = math.radians(skew_x)
        self.skew_y = math.radians(skew_y)
        self.content_rest_scale = content_rest_scale
        self.padding = padding
        self.master_rest_scale = master_rest_scale
        self.travel = travel
        self.content_offset = content_offset
        self.perspective = perspective

    @property
    def compensation(self) -> float:
        """Frame scale at progress 1."""
        return self.padding / (1 - self.content_rest_scale)

    def content_scale(self, progress: float) -> float:
        return (1 - progress) * self.content_rest_scale + progress

    def frame_scale(self, progress: float) -> float:
        return (1 - progress) + progress * self.compensation

    def master_scale(self, progress: float) -> float:
        return (1 - progress) * self.master_rest_scale + progress

    def frame_transform(self, progress: float) -> TransformState:
        p = progress
        return TransformState.of(
            Scale.uniform(self.master_scale(p)),
            Rotate("y", -p * self.rotate_y),
            Rotate("x", -p * self.rotate_x),
            Skew(-p * self.skew_x, -p * self.skew_y),
            Scale.uniform(self.frame_scale(p)),
            Translate(p * self.travel[0], p * self.travel[1]),
        )

    def content_transform(self, progress: float) -> TransformState:
        rest = 1 - progress
        return TransformState.of(
            Translate(rest * self.content_offset[0], rest * self.content_offset[1]),
            Perspective(self.perspective),
            Rotate("y", rest * self.rotate_y),
            Rotate("x", rest * self.rotate_x),
            Skew(rest * self.skew_x, rest * self.skew_y),
            Scale.uniform(self.content_scale(progress)),
        )

    def layers(self, progress: float) -> Tuple[TransformState, TransformState]:
        """(frame, content) at `progress`."""
        return self.frame_transform(progress), self.content_transform(progress)
