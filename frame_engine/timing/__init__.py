"""
Frame-driven timing primitives: easing, springs, interpolation, windows.
"""

from .easing import (
    EASING_FUNCTIONS,
    EasingStrategy,
    EasingType,
    ease,
    get_easing_function,
    power2_out,
)
from .interpolate import Extrapolation, Interpolator, clamp01, interpolate
from .sequencer import (
    SceneVisibility,
    Sequencer,
    TimelineWindow,
    local_frame,
    nest,
    series_windows,
)
from .spring import (
    DampedSpring,
    EasedWindow,
    SpringConfig,
    SpringStrategy,
    initial_velocity,
    measure_spring,
    spring_progress,
    wind_up_progress,
)

__all__ = [
    'EASING_FUNCTIONS',
    'EasingStrategy',
    'EasingType',
    'ease',
    'get_easing_function',
    'power2_out',
    'Extrapolation',
    'Interpolator',
    'clamp01',
    'interpolate',
    'SceneVisibility',
    'Sequencer',
    'TimelineWindow',
    'local_frame',
    'nest',
    'series_windows',
    'DampedSpring',
    'EasedWindow',
    'SpringConfig',
    'SpringStrategy',
    'initial_velocity',
    'measure_spring',
    'spring_progress',
    'wind_up_progress',
]
