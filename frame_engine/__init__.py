"""
Frame-indexed animation and transform composition.

Every visual property is a pure function of an integer frame number:
springs, easing and interpolation produce progress values, which drive
typed transform stacks, wheel layouts and scene transitions.
"""

from .errors import ConfigurationError, FrameEngineError, NumericError
from .layout import Wheel, WheelItem, wheel_item
from .scene import (
    AudioCue,
    CueSheet,
    ElementState,
    SceneOrchestrator,
    SubScene,
    TransitionPhase,
)
from .timing import (
    EasingType,
    Extrapolation,
    SpringConfig,
    TimelineWindow,
    ease,
    interpolate,
    local_frame,
    spring_progress,
)
from .transforms import OpposingTransform, TransformState

__version__ = "0.1.0"

__all__ = [
    'ConfigurationError',
    'FrameEngineError',
    'NumericError',
    'Wheel',
    'WheelItem',
    'wheel_item',
    'AudioCue',
    'CueSheet',
    'ElementState',
    'SceneOrchestrator',
    'SubScene',
    'TransitionPhase',
    'EasingType',
    'Extrapolation',
    'SpringConfig',
    'TimelineWindow',
    'ease',
    'interpolate',
    'local_frame',
    'spring_progress',
    'OpposingTransform',
    'TransformState',
]
