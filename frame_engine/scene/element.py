"""
Per-element visual state handed to the rendering surface.

A frame resolves to a tree of ElementState. Transforms nest like CSS:
a child's world matrix is its parent's world matrix times its own, and
opacity multiplies down the tree.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple

import numpy as np

from ..errors import NumericError
from ..transforms import IDENTITY, TransformState


@dataclass(frozen=True)
class ElementState:
    """Transform, opacity and content references for one element."""
    element_id: str
    transform: TransformState = IDENTITY
    opacity: float = 1.0
    children: Tuple["ElementState", ...] = ()
    asset_id: Optional[str] = None  # resolved by the asset loader, never here
    text: Optional[str] = None
    size: Tuple[float, float] = (0.0, 0.0)
    color: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        if not math.isfinite(self.opacity):
            raise NumericError(f"{self.element_id}: opacity is {self.opacity!r}")
        if not self.transform.is_finite():
            raise NumericError(f"{self.element_id}: non-finite transform {self.transform}")
        object.__setattr__(self, "opacity", max(0.0, min(1.0, self.opacity)))
        object.__setattr__(self, "children", tuple(self.children))

    def find(self, element_id: str) -> Optional["ElementState"]:
        if self.element_id == element_id:
            return self
        for child in self.children:
            found = child.find(element_id)
            if found is not None:
                return found
        return None

    def walk(self) -> Iterator["ElementState"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.element_id,
            "opacity": round(self.opacity, 6),
            "transform": self.transform.to_css(),
            "operations": self.transform.to_list(),
        }
        if self.asset_id is not None:
            data["asset"] = self.asset_id
        if self.text is not None:
            data["text"] = self.text
        if self.size != (0.0, 0.0):
            data["size"] = list(self.size)
        if self.color is not None:
            data["color"] = self.color
        if self.metadata:
            data["metadata"] = dict(self.metadata)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True)
class WorldElement:
    element: ElementState
    matrix: np.ndarray
    opacity: float
    depth: int


def iter_world(
    root: ElementState,
    parent_matrix: Optional[np.ndarray] = None,
    parent_opacity: float = 1.0,
    depth: int = 0,
) -> Iterator[WorldElement]:
    """Depth-first walk yielding accumulated world matrix and opacity."""
    matrix = (np.eye(4) if parent_matrix is None else parent_matrix) @ root.transform.matrix()
    opacity = parent_opacity * root.opacity
    yield WorldElement(root, matrix, opacity, depth)
    for child in root.children:
        yield from iter_world(child, matrix, opacity, depth + 1)
