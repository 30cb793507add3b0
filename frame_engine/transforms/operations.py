"""
Typed transform operations and their 4x4 matrices.

Conventions follow CSS transforms: column vectors, y pointing down, and in a
list of operations the rightmost one is applied to the element first.
Angles are radians.
"""

import math
from dataclasses import asdict, dataclass
from typing import Iterable, Tuple, Union

import numpy as np

from ..errors import ConfigurationError

AXES = ("x", "y", "z")


def _fmt(value: float) -> str:
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True)
class Translate:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def matrix(self) -> np.ndarray:
        m = np.eye(4)
        m[:3, 3] = (self.x, self.y, self.z)
        return m

    def inverse(self) -> "Translate":
        return Translate(-self.x, -self.y, -self.z)

    def to_css(self) -> str:
        return f"translate3d({_fmt(self.x)}px, {_fmt(self.y)}px, {_fmt(self.z)}px)"


@dataclass(frozen=True)
class Rotate:
    axis: str
    angle: float

    def __post_init__(self):
        if self.axis not in AXES:
            raise ConfigurationError(f"rotation axis must be one of {AXES}, got {self.axis!r}")

    @classmethod
    def degrees(cls, axis: str, degrees: float) -> "Rotate":
        return cls(axis, math.radians(degrees))

    def matrix(self) -> np.ndarray:
        c, s = math.cos(self.angle), math.sin(self.angle)
        m = np.eye(4)
        if self.axis == "x":
            m[1:3, 1:3] = ((c, -s), (s, c))
        elif self.axis == "y":
            m[0, 0], m[0, 2], m[2, 0], m[2, 2] = c, s, -s, c
        else:
            m[0:2, 0:2] = ((c, -s), (s, c))
        return m

    def inverse(self) -> "Rotate":
        return Rotate(self.axis, -self.angle)

    def to_css(self) -> str:
        return f"rotate{self.axis.upper()}({_fmt(self.angle)}rad)"


@dataclass(frozen=True)
class Scale:
    x: float = 1.0
    y: float = 1.0
    z: float = 1.0

    @classmethod
    def uniform(cls, factor: float) -> "Scale":
        return cls(factor, factor, 1.0)

    def matrix(self) -> np.ndarray:
        return np.diag((self.x, self.y, self.z, 1.0))

    def inverse(self) -> "Scale":
        if 0 in (self.x, self.y, self.z):
            raise ConfigurationError(f"{self} has no inverse")
        return Scale(1 / self.x, 1 / self.y, 1 / self.z)

    def to_css(self) -> str:
        return f"scale3d({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"


@dataclass(frozen=True)
class Skew:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def degrees(cls, x: float = 0.0, y: float = 0.0) -> "Skew":
        return cls(math.radians(x), math.radians(y))

    def matrix(self) -> np.ndarray:
        m = np.eye(4)
        m[0, 1] = math.tan(self.x)
        m[1, 0] = math.tan(self.y)
        return m

    def inverse(self) -> "Skew":
        inv = np.linalg.inv(self.matrix()[:2, :2])
        if abs(inv[0, 1]) > 1e-12 and abs(inv[1, 0]) > 1e-12:
            raise ConfigurationError("a combined x/y skew is not invertible as a single Skew")
        return Skew(math.atan(inv[0, 1]), math.atan(inv[1, 0]))

    def to_css(self) -> str:
        return f"skew({_fmt(self.x)}rad, {_fmt(self.y)}rad)"


@dataclass(frozen=True)
class Perspective:
    distance: float

    def __post_init__(self):
        if self.distance <= 0:
            raise ConfigurationError(f"perspective distance must be positive, got {self.distance}")

    def matrix(self) -> np.ndarray:
        m = np.eye(4)
        m[3, 2] = -1.0 / self.distance
        return m

    def inverse(self):
        raise ConfigurationError("perspective has no inverse operation")

    def to_css(self) -> str:
        return f"perspective({_fmt(self.distance)}px)"


TransformOp = Union[Translate, Rotate, Scale, Skew, Perspective]


def op_values(op: TransformOp) -> Tuple[float, ...]:
    if isinstance(op, Translate):
        return (op.x, op.y, op.z)
    if isinstance(op, Rotate):
        return (op.angle,)
    if isinstance(op, Scale):
        return (op.x, op.y, op.z)
    if isinstance(op, Skew):
        return (op.x, op.y)
    return (op.distance,)


@dataclass(frozen=True)
class TransformState:
    """Ordered operations for one element; operations[-1] is applied first."""
    operations: Tuple[TransformOp, ...] = ()

    @classmethod
    def of(cls, *operations: TransformOp) -> "TransformState":
        return cls(tuple(operations))

    def then(self, other: "TransformState") -> "TransformState":
        """Nest `other` inside this transform (parent.then(child))."""
        return TransformState(self.operations + other.operations)

    def inverse(self) -> "TransformState":
        return TransformState(tuple(op.inverse() for op in reversed(self.operations)))

    def matrix(self) -> np.ndarray:
        m = np.eye(4)
        for op in self.operations:
            m = m @ op.matrix()
        return m

    def apply(self, points: Iterable[Tuple[float, float, float]]) -> np.ndarray:
        """Map 3D points to projected (x, y) through the full matrix."""
        pts = np.asarray(list(points), dtype=float)
        homogeneous = np.hstack([pts, np.ones((len(pts), 1))])
        mapped = homogeneous @ self.matrix().T
        return mapped[:, :2] / mapped[:, 3:4]

    def rotation(self, axis: str) -> float:
        """Summed rotation about one axis (meaningful for single-axis stacks)."""
        return sum(op.angle for op in self.operations
                   if isinstance(op, Rotate) and op.axis == axis)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for op in self.operations for v in op_values(op))

    def to_css(self) -> str:
        if not self.operations:
            return "none"
        return " ".join(op.to_css() for op in self.operations)

    def to_list(self):
        out = []
        for op in self.operations:
            out.append({"op": type(op).__name__.lower(), **asdict(op)})
        return out


IDENTITY = TransformState()
