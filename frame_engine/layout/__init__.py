"""
Layouts that place discrete items from a progress value.
"""

from .wheel import (
    Wheel,
    WheelItem,
    parse_selected_value,
    resolved_value,
    rotation_offset,
    wheel_item,
)

__all__ = [
    'Wheel',
    'WheelItem',
    'parse_selected_value',
    'resolved_value',
    'rotation_offset',
    'wheel_item',
]
