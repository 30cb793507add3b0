"""
Range mapping with per-side extrapolation.

``interpolate(5, [0, 10], [0, 1])`` maps a frame or a progress value from an
input range onto an output range. Ranges may have more than two points, in
which case the segment containing ``x`` is used.
"""

import bisect
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..errors import ConfigurationError, ensure_finite
from .easing import EasingStrategy


class Extrapolation(Enum):
    CLAMP = "clamp"
    EXTEND = "extend"
    IDENTITY = "identity"


def _policy(value) -> Extrapolation:
    if isinstance(value, Extrapolation):
        return value
    try:
        return Extrapolation(value)
    except ValueError:
        raise ConfigurationError(f"Unknown extrapolation policy: {value!r}") from None


class Interpolator:
    """
    Validated mapping from ``input_range`` to ``output_range``.

    Parameters:
    -----------
    input_range : Sequence[float]
        Strictly increasing breakpoints, at least two.
    output_range : Sequence[float]
        Values at those breakpoints, same length as input_range.
    extrapolate_left, extrapolate_right : Extrapolation or str
        What happens outside the input range: "clamp" holds the boundary
        value, "extend" continues the edge segment, "identity" returns x.
    easing : callable, optional
        Applied to the normalized position inside a segment.
    """

    def __init__(
        self,
        input_range: Sequence[float],
        output_range: Sequence[float],
        extrapolate_left=Extrapolation.EXTEND,
        extrapolate_right=Extrapolation.EXTEND,
        easing: Optional[EasingStrategy] = None,
    ):
        self.input_range: Tuple[float, ...] = tuple(input_range)
        self.output_range: Tuple[float, ...] = tuple(output_range)
        if len(self.input_range) < 2:
            raise ConfigurationError("input_range needs at least two points")
        if len(self.input_range) != len(self.output_range):
            raise ConfigurationError(
                f"input_range ({len(self.input_range)}) and output_range "
                f"({len(self.output_range)}) must have the same length"
            )
        ensure_finite("input_range", *self.input_range)
        ensure_finite("output_range", *self.output_range)
        for a, b in zip(self.input_range, self.input_range[1:]):
            if b == a:
                raise ConfigurationError(f"input_range has a zero-width segment at {a}")
            if b < a:
                raise ConfigurationError(f"input_range must be strictly increasing: {self.input_range}")
        self.extrapolate_left = _policy(extrapolate_left)
        self.extrapolate_right = _policy(extrapolate_right)
        self.easing = easing

    def _segment(self, x: float) -> int:
        index = bisect.bisect_right(self.input_range, x) - 1
        return max(0, min(len(self.input_range) - 2, index))

    def __call__(self, x: float) -> float:
        i = self._segment(x)
        a, b = self.input_range[i], self.input_range[i + 1]
        c, d = self.output_range[i], self.output_range[i + 1]

        if x < a:
            if self.extrapolate_left is Extrapolation.IDENTITY:
                return x
            if self.extrapolate_left is Extrapolation.CLAMP:
                return c
        if x > b:
            if self.extrapolate_right is Extrapolation.IDENTITY:
                return x
            if self.extrapolate_right is Extrapolation.CLAMP:
                return d

        t = (x - a) / (b - a)
        if self.easing is not None:
            t = self.easing(t)
        return c + t * (d - c)


def interpolate(
    x: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
    extrapolate_left=Extrapolation.EXTEND,
    extrapolate_right=Extrapolation.EXTEND,
    easing: Optional[EasingStrategy] = None,
) -> float:
    """One-shot form of Interpolator."""
    return Interpolator(input_range, output_range, extrapolate_left,
                        extrapolate_right, easing)(x)


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))
