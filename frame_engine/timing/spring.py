"""
Spring progress.

A damped harmonic oscillator released from rest at distance 1 from its
target, evaluated in closed form at any frame. Progress starts at exactly 0
on the delay frame and settles at 1. Nothing is integrated step by step,
so frames can be evaluated in any order.
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Optional

from ..errors import ConfigurationError, check_output, ensure_finite
from .easing import EasingStrategy, power2_out
from .interpolate import Extrapolation, interpolate

logger = logging.getLogger(__name__)

SETTLE_THRESHOLD = 0.005
MAX_SETTLE_FRAMES = 100_000


@dataclass(frozen=True)
class SpringConfig:
    """Physical parameters plus timing for one spring."""
    mass: float = 1.0
    damping: float = 10.0
    stiffness: float = 100.0
    delay: float = 0.0
    duration_in_frames: Optional[float] = None  # stretch settle time to exactly this
    overshoot_clamping: bool = False
    velocity: float = 0.0  # initial velocity towards the target, units/second

    def __post_init__(self):
        ensure_finite("spring parameters", self.mass, self.damping,
                      self.stiffness, self.delay, self.velocity)
        if self.mass <= 0:
            raise ConfigurationError(f"spring mass must be positive, got {self.mass}")
        if self.stiffness <= 0:
            raise ConfigurationError(f"spring stiffness must be positive, got {self.stiffness}")
        if self.damping <= 0:
            # an undamped spring oscillates forever and never settles
            raise ConfigurationError(f"spring damping must be positive, got {self.damping}")
        if self.duration_in_frames is not None:
            ensure_finite("duration_in_frames", self.duration_in_frames)
            if self.duration_in_frames <= 0:
                raise ConfigurationError(
                    f"duration_in_frames must be positive, got {self.duration_in_frames}"
                )

    @property
    def damping_ratio(self) -> float:
        return self.damping / (2 * math.sqrt(self.stiffness * self.mass))

    @property
    def natural_frequency(self) -> float:
        return math.sqrt(self.stiffness / self.mass)


def _check_fps(fps: float) -> None:
    if not fps or fps <= 0:
        raise ConfigurationError(f"fps must be positive, got {fps}")


def _displacement(t: float, config: SpringConfig) -> float:
    """Distance left to the target after t seconds (1 at t=0)."""
    omega0 = config.natural_frequency
    zeta = config.damping_ratio
    x0 = 1.0
    dx0 = -config.velocity

    if zeta < 1:
        omega1 = omega0 * math.sqrt(1 - zeta ** 2)
        envelope = math.exp(-zeta * omega0 * t)
        return envelope * (
            x0 * math.cos(omega1 * t)
            + ((dx0 + zeta * omega0 * x0) / omega1) * math.sin(omega1 * t)
        )
    if zeta == 1:
        return math.exp(-omega0 * t) * (x0 + (dx0 + omega0 * x0) * t)

    root = math.sqrt(zeta ** 2 - 1)
    slow = -omega0 * (zeta - root)
    fast = -omega0 * (zeta + root)
    c_fast = (dx0 - slow * x0) / (fast - slow)
    c_slow = x0 - c_fast
    return c_slow * math.exp(slow * t) + c_fast * math.exp(fast * t)


def _natural_progress(frame: float, fps: float, config: SpringConfig) -> float:
    """Progress `frame` frames after release, ignoring delay and duration stretch."""
    if frame <= 0:
        return 0.0
    value = 1.0 - _displacement(frame / fps, config)
    if config.overshoot_clamping:
        value = min(value, 1.0)
    return value


@lru_cache(maxsize=256)
def _measure(fps: float, physics: SpringConfig, threshold: float) -> int:
    window = 20
    zeta = physics.damping_ratio
    if zeta < 1:
        # Never accept a zero crossing: wait at least half an oscillation.
        omega1 = physics.natural_frequency * math.sqrt(1 - zeta ** 2)
        window = max(window, int(math.ceil(math.pi / omega1 * fps)))

    settled_at = None
    frame = 0
    while frame < MAX_SETTLE_FRAMES:
        if abs(1.0 - _natural_progress(frame, fps, physics)) >= threshold:
            settled_at = None
        elif settled_at is None:
            settled_at = frame
        if settled_at is not None and frame - settled_at >= window:
            logger.debug("Spring %s settles after %d frames at %s fps", physics, settled_at, fps)
            return settled_at
        frame += 1
    raise ConfigurationError(
        f"spring {physics} does not settle within {MAX_SETTLE_FRAMES} frames"
    )


def measure_spring(fps: float, config: SpringConfig, threshold: float = SETTLE_THRESHOLD) -> int:
    """
    Natural settle horizon in frames.

    The first frame after release from which the spring stays within
    `threshold` of 1. Delay and duration stretch are ignored.
    """
    _check_fps(fps)
    if threshold <= 0:
        raise ConfigurationError(f"threshold must be positive, got {threshold}")
    physics = replace(config, delay=0.0, duration_in_frames=None)
    return _measure(float(fps), physics, threshold)


def spring_progress(frame: float, fps: float, config: SpringConfig) -> float:
    """Spring progress at `frame`; exactly 0 for every frame before the delay."""
    _check_fps(fps)
    elapsed = frame - config.delay
    if elapsed <= 0:
        return 0.0
    if config.duration_in_frames is not None:
        natural = measure_spring(fps, config)
        elapsed = elapsed * natural / config.duration_in_frames
    value = _natural_progress(elapsed, fps, config)
    check_output("spring_progress", (value,))
    return value


class SpringStrategy(ABC):
    """Pluggable source of one-directional 0 -> 1 progress over frames."""

    @abstractmethod
    def progress(self, frame: float, fps: float, config: SpringConfig) -> float:
        """Progress at `frame`, 0 before `config.delay`."""

    @abstractmethod
    def settle_frames(self, fps: float, config: SpringConfig) -> float:
        """Frames after the delay until progress has visibly arrived."""

    def validate(self, fps: float, config: SpringConfig) -> None:
        """Raise ConfigurationError if `config` cannot drive this strategy."""
        _check_fps(fps)
        self.settle_frames(fps, config)


class DampedSpring(SpringStrategy):
    """The closed-form physical spring."""

    def progress(self, frame, fps, config):
        return spring_progress(frame, fps, config)

    def settle_frames(self, fps, config):
        natural = measure_spring(fps, config)
        if config.duration_in_frames is not None:
            return config.duration_in_frames
        return natural


class EasedWindow(SpringStrategy):
    """
    Easing curve stretched over [delay, delay + duration_in_frames].

    Arrives at exactly 1 on the last frame of the window and stays there.
    Physical parameters of the config are ignored.
    """

    def __init__(self, easing: EasingStrategy = power2_out):
        self.easing = easing

    def progress(self, frame, fps, config):
        duration = self.settle_frames(fps, config)
        raw = (frame - config.delay) / duration
        return self.easing(max(0.0, min(1.0, raw)))

    def settle_frames(self, fps, config):
        if config.duration_in_frames is None:
            raise ConfigurationError("EasedWindow needs duration_in_frames")
        return config.duration_in_frames


DEFAULT_STRATEGY = DampedSpring()


def initial_velocity(
    fps: float,
    config: SpringConfig,
    sample_frames: float = 1,
    strategy: Optional[SpringStrategy] = None,
) -> float:
    """
    Progress gained over the first `sample_frames` frames after the delay, per frame.

    Pass it as `bias` to wind_up_progress to size the lead-in ramp from the
    spring itself rather than from a fixed constant.
    """
    if sample_frames <= 0:
        raise ConfigurationError(f"sample_frames must be positive, got {sample_frames}")
    strategy = strategy or DEFAULT_STRATEGY
    start = strategy.progress(config.delay, fps, config)
    end = strategy.progress(config.delay + sample_frames, fps, config)
    return (end - start) / sample_frames


def wind_up_progress(
    frame: float,
    fps: float,
    config: SpringConfig,
    bias: float = 0.1,
    strategy: Optional[SpringStrategy] = None,
) -> float:
    """
    Spring progress with a linear lead-in so motion does not start dead still.

    Returns ``progress * (1 - bias)`` plus a ramp from ``-bias`` at frame 0
    to ``+bias`` once the spring has settled, so the result starts at
    ``-bias`` and reaches 1 (within the settle threshold) at the settle frame.

    The default bias is the fixed 0.1 lead-in the opening zoom uses; pass
    ``initial_velocity(fps, config)`` to derive it from the spring instead.
    """
    strategy = strategy or DEFAULT_STRATEGY
    end = config.delay + strategy.settle_frames(fps, config)
    if end <= 0:
        raise ConfigurationError(f"wind-up needs a positive settle frame, got {end}")
    ramp = interpolate(frame, [0, end], [-bias, bias],
                       extrapolate_right=Extrapolation.CLAMP)
    return strategy.progress(frame, fps, config) * (1 - bias) + ramp
