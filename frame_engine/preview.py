"""
Wireframe preview of an element tree.

Each element's rectangle is pushed through its world matrix and outlined
with OpenCV. Useful for eyeballing transforms and timings without a real
renderer; it does not paint assets.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Tuple

import cv2
import numpy as np

from .scene import ElementState, iter_world

logger = logging.getLogger(__name__)

BACKGROUND = (24, 27, 40)
OUTLINE = (255, 255, 255)
LABEL = (157, 107, 255)
FONT = cv2.FONT_HERSHEY_SIMPLEX


def element_corners(size: Tuple[float, float]) -> np.ndarray:
    """Homogeneous corners of a size-(w, h) box centred on the origin."""
    w, h = size
    return np.array([
        [-w / 2, -h / 2, 0, 1],
        [w / 2, -h / 2, 0, 1],
        [w / 2, h / 2, 0, 1],
        [-w / 2, h / 2, 0, 1],
    ], dtype=float)


def project(matrix: np.ndarray, points: np.ndarray, width: int, height: int):
    """
    Map homogeneous points to pixel coordinates.

    Returns None when any point lands on or behind the camera plane.
    """
    mapped = points @ matrix.T
    w = mapped[:, 3]
    if np.any(w <= 1e-9):
        return None
    xy = mapped[:, :2] / w[:, None]
    xy[:, 0] += width / 2
    xy[:, 1] += height / 2
    if not np.all(np.isfinite(xy)):
        return None
    return xy


def render_preview_frame(root: ElementState, width: int, height: int) -> np.ndarray:
    """Draw every sized element of `root` onto a BGR canvas."""
    canvas = np.full((height, width, 3), BACKGROUND, dtype=np.uint8)
    limit = 4 * max(width, height)
    for world in iter_world(root):
        element = world.element
        if not any(element.size) or world.opacity <= 0:
            continue
        xy = project(world.matrix, element_corners(element.size), width, height)
        if xy is None or np.abs(xy).max() > limit:
            continue
        pts = np.round(xy).astype(np.int32).reshape((-1, 1, 2))
        overlay = canvas.copy()
        cv2.polylines(overlay, [pts], True, OUTLINE, 2)
        label = element.text or element.asset_id
        if label:
            origin = tuple(int(v) for v in pts[0, 0])
            cv2.putText(overlay, str(label), origin, FONT, 0.6, LABEL, 1, cv2.LINE_AA)
        canvas = cv2.addWeighted(overlay, world.opacity, canvas, 1 - world.opacity, 0)
    return canvas


def write_preview(frames: Iterable[Tuple[int, np.ndarray]], out_dir) -> List[Path]:
    """Save (frame number, image) pairs as frame_00000.png ... in `out_dir`."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for frame, image in frames:
        path = out_dir / f"frame_{frame:05d}.png"
        if not cv2.imwrite(str(path), image):
            raise IOError(f"could not write preview frame {path}")
        written.append(path)
    logger.info("Wrote %d preview frames to %s", len(written), out_dir)
    return written
