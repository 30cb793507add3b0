"""
Typed transform operations and their composition.
"""

from .composer import (
    OpposingTransform,
    TransformComposer,
    TransformTrack,
    counter_rotate,
)
from .operations import (
    IDENTITY,
    Perspective,
    Rotate,
    Scale,
    Skew,
    TransformOp,
    TransformState,
    Translate,
)

__all__ = [
    'OpposingTransform',
    'TransformComposer',
    'TransformTrack',
    'counter_rotate',
    'IDENTITY',
    'Perspective',
    'Rotate',
    'Scale',
    'Skew',
    'TransformOp',
    'TransformState',
    'Translate',
]
