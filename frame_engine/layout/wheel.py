"""
Circular "wheel" layout.

N items sit on a vertical circle. The wheel spins from one full turn away
and decelerates until the slot holding the selected value faces the
viewer. Each slot's label is counter-rotated so it stays readable.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

from ..errors import ConfigurationError, check_output, ensure_finite
from ..scene.element import ElementState
from ..timing.easing import EasingStrategy, power2_out
from ..timing.interpolate import clamp01
from ..transforms import (
    Perspective,
    Rotate,
    TransformState,
    Translate,
    counter_rotate,
)

logger = logging.getLogger(__name__)

SELECTED_OPACITY = 1.0
DIMMED_OPACITY = 0.3

SelectedValue = Union[int, str]


@dataclass(frozen=True)
class WheelItem:
    """Placement of one slot at one frame."""
    index: int
    angular_offset: float  # radians
    depth_z: float
    vertical_y: float
    is_selected: bool
    opacity: float
    resolved_value: int

    def transform(self) -> TransformState:
        return TransformState.of(
            Translate(z=self.depth_z),
            Translate(y=self.vertical_y),
            Rotate("x", self.angular_offset),
        )

    def label_transform(self) -> TransformState:
        return counter_rotate(self.transform())


def _check_total(total_items: int) -> None:
    if isinstance(total_items, bool) or not isinstance(total_items, int) or total_items <= 0:
        raise ConfigurationError(f"total_items must be a positive integer, got {total_items!r}")


def parse_selected_value(selected_value: SelectedValue, total_items: int) -> int:
    """Selected value as an index into the wheel's values; never wrapped."""
    _check_total(total_items)
    if isinstance(selected_value, bool):
        raise ConfigurationError(f"selected value must be an integer, got {selected_value!r}")
    try:
        value = int(selected_value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"selected value must be an integer, got {selected_value!r}") from None
    if isinstance(selected_value, float) and value != selected_value:
        raise ConfigurationError(f"selected value must be an integer, got {selected_value!r}")
    if value < 0:
        raise ConfigurationError(f"selected value must not be negative, got {value}")
    if value >= total_items:
        raise ConfigurationError(
            f"selected value {value} is out of range for {total_items} items"
        )
    return value


def rotation_offset(
    rotation_progress: float,
    easing: EasingStrategy = power2_out,
    revolutions: float = 1.0,
) -> float:
    """Remaining spin in turns: `revolutions` at progress 0, exactly 0 at progress 1."""
    eased = easing(clamp01(rotation_progress))
    return (revolutions * (1 - eased)) % 1.0


def resolved_value(index: int, total_items: int, selected_value: int) -> int:
    """Value shown in slot `index` when `selected_value` is selected."""
    return (index + selected_value) % total_items


def wheel_item(
    index: int,
    total_items: int,
    rotation_progress: float,
    radius: float,
    selected_value: SelectedValue,
    settled: Optional[bool] = None,
    easing: EasingStrategy = power2_out,
    revolutions: float = 1.0,
    selected_opacity: float = SELECTED_OPACITY,
    dimmed_opacity: float = DIMMED_OPACITY,
) -> WheelItem:
    """
    Place slot `index` of a `total_items` wheel.

    `settled` defaults to ``rotation_progress >= 1``; frame-driven callers
    pass their own highlight rule.
    """
    selected = parse_selected_value(selected_value, total_items)
    if isinstance(index, bool) or not isinstance(index, int):
        raise ConfigurationError(f"index must be an integer, got {index!r}")
    if not 0 <= index < total_items:
        raise ConfigurationError(f"index {index} out of range [0, {total_items})")
    ensure_finite("wheel radius", radius)

    normalized_index = index / total_items + rotation_offset(rotation_progress, easing, revolutions)
    angle = normalized_index * -2 * math.pi
    depth_z = math.cos(angle) * radius
    vertical_y = math.sin(angle) * radius
    check_output("wheel_item", (angle, depth_z, vertical_y))

    value = resolved_value(index, total_items, selected)
    if settled is None:
        settled = rotation_progress >= 1
    is_selected = value == selected and settled

    return WheelItem(
        index=index,
        angular_offset=angle,
        depth_z=depth_z,
        vertical_y=vertical_y,
        is_selected=is_selected,
        opacity=selected_opacity if is_selected else dimmed_opacity,
        resolved_value=value,
    )


class Wheel:
    """
    A frame-driven wheel over a fixed list of values.

    Parameters:
    -----------
    values : Sequence[str]
        Everything the wheel can show, in slot order.
    selected_value : int or str
        Index into `values` of the value the wheel stops on.
    radius : float
        Circle radius in pixels.
    delay : int
        Local frame the spin starts on.
    duration : int
        Frames the spin takes (default 100).
    highlight_after : int
        The selected label lights up once ``frame - highlight_after > delay``.
    render_label : callable
        Turns a value into its label text.
    """

    def __init__(
        self,
        values: Sequence[str],
        selected_value: SelectedValue,
        radius: float,
        delay: int = 0,
        duration: int = 100,
        highlight_after: int = 5,
        render_label: Callable[[str], str] = str,
        easing: EasingStrategy = power2_out,
        revolutions: float = 1.0,
        element_id: str = "wheel",
        perspective: float = 10000,
    ):
        self.values = tuple(values)
        if not self.values:
            raise ConfigurationError("a wheel needs at least one value")
        self.total_items = len(self.values)
        self.selected_value = parse_selected_value(selected_value, self.total_items)
        ensure_finite("wheel radius", radius)
        if radius <= 0:
            raise ConfigurationError(f"wheel radius must be positive, got {radius}")
        if duration <= 0:
            raise ConfigurationError(f"wheel duration must be positive, got {duration}")
        self.radius = radius
        self.delay = delay
        self.duration = duration
        self.highlight_after = highlight_after
        self.render_label = render_label
        self.easing = easing
        self.revolutions = revolutions
        self.element_id = element_id
        self.perspective = perspective
        logger.debug("Wheel %s: %d values, selected %d, settles at frame %d",
                     element_id, self.total_items, self.selected_value, self.settle_frame)

    @property
    def settle_frame(self) -> int:
        """Local frame on which the spin stops."""
        return self.delay + self.duration

    def rotation_progress(self, frame: float) -> float:
        return clamp01(max(0, frame - self.delay) / self.duration)

    def is_highlighted(self, frame: float) -> bool:
        """
        Whether the selected slot is lit.

        The highlight comes on `highlight_after` frames past the delay, while
        the wheel is still decelerating, not at `settle_frame`.
        """
        return frame - self.highlight_after > self.delay

    def items(self, frame: float) -> List[WheelItem]:
        progress = self.rotation_progress(frame)
        highlighted = self.is_highlighted(frame)
        return [
            wheel_item(index, self.total_items, progress, self.radius,
                       self.selected_value, settled=highlighted,
                       easing=self.easing, revolutions=self.revolutions)
            for index in range(self.total_items)
        ]

    def selected_item(self, frame: float) -> Optional[WheelItem]:
        for item in self.items(frame):
            if item.is_selected:
                return item
        return None

    def label(self, item: WheelItem) -> str:
        return self.render_label(self.values[item.resolved_value])

    def element(self, frame: float) -> ElementState:
        children = []
        for item in self.items(frame):
            label = ElementState(
                element_id=f"{self.element_id}.item{item.index}.label",
                transform=item.label_transform(),
                text=self.label(item),
                size=(410, 65),
            )
            children.append(ElementState(
                element_id=f"{self.element_id}.item{item.index}",
                transform=item.transform(),
                opacity=item.opacity,
                children=(label,),
            ))
        return ElementState(
            element_id=self.element_id,
            transform=TransformState.of(Perspective(self.perspective)),
            children=tuple(children),
        )
