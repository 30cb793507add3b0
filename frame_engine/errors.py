"""
Error types raised by the frame engine.

Configuration problems are detected when an element, window or scene is
assembled, never halfway through computing a frame.
"""

import math
from typing import Iterable


class FrameEngineError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(FrameEngineError, ValueError):
    """Invalid static configuration (zero-length windows, bad spring params, ...)."""


class NumericError(FrameEngineError, ArithmeticError):
    """A NaN or infinity reached an output. Always a programming defect."""


def ensure_finite(name: str, *values: float) -> None:
    """Raise ConfigurationError if any value is NaN or infinite."""
    for value in values:
        if not math.isfinite(value):
            raise ConfigurationError(f"{name} must be finite, got {value!r}")


def check_output(name: str, values: Iterable[float]) -> None:
    """Guard for computed outputs; a non-finite result means validation missed something."""
    for value in values:
        if not math.isfinite(value):
            raise NumericError(f"{name} produced non-finite value {value!r}")
