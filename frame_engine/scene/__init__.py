"""
Scene tree, orchestration and audio cues.
"""

from .cues import AudioCue, CueSheet
from .element import ElementState, WorldElement, iter_world
from .orchestrator import (
    SceneOrchestrator,
    SubScene,
    TransitionPhase,
    classify_phase,
    transition_value,
)

__all__ = [
    'AudioCue',
    'CueSheet',
    'ElementState',
    'WorldElement',
    'iter_world',
    'SceneOrchestrator',
    'SubScene',
    'TransitionPhase',
    'classify_phase',
    'transition_value',
]
