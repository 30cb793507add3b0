"""
Scene orchestration.

Decides which sub-scene owns a global frame and blends two one-directional
springs (entry minus exit) into a rise-hold-fall transition value. Every
answer is a pure function of the frame.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from ..errors import ConfigurationError
from ..timing.sequencer import TimelineWindow, local_frame
from ..timing.spring import DampedSpring, SpringConfig, SpringStrategy
from .element import ElementState

logger = logging.getLogger(__name__)

SceneRenderer = Callable[[int, int], ElementState]


class TransitionPhase(Enum):
    HIDDEN = "hidden"
    ENTERING = "entering"
    VISIBLE = "visible"
    EXITING = "exiting"


@dataclass(frozen=True)
class SubScene:
    """
    A sub-scene mounted inside `window` of the global timeline.

    `entry` and `exit` delays are global frames; None means the scene is
    fully shown from its first frame (entry) or never leaves (exit).
    `render` receives the sub-scene's local frame and the fps.
    """
    scene_id: str
    window: TimelineWindow
    entry: Optional[SpringConfig] = None
    exit: Optional[SpringConfig] = None
    render: Optional[SceneRenderer] = None


def _progress(strategy: SpringStrategy, frame: float, fps: float,
              config: Optional[SpringConfig], missing: float) -> float:
    if config is None:
        return missing
    return strategy.progress(frame, fps, config)


def transition_value(
    frame: float,
    fps: float,
    entry: Optional[SpringConfig],
    exit: Optional[SpringConfig],
    strategy: Optional[SpringStrategy] = None,
) -> float:
    """Entry progress minus exit progress: 0 -> 1, hold, 1 -> 0."""
    strategy = strategy or DampedSpring()
    return _progress(strategy, frame, fps, entry, 1.0) - _progress(strategy, frame, fps, exit, 0.0)


def classify_phase(entry_progress: float, exit_progress: float, tolerance: float = 0.01) -> TransitionPhase:
    """Hidden -> Entering -> Visible -> Exiting -> Hidden, from the two progress values."""
    value = entry_progress - exit_progress
    if exit_progress > 0:
        return TransitionPhase.HIDDEN if value <= tolerance else TransitionPhase.EXITING
    if entry_progress <= 0:
        return TransitionPhase.HIDDEN
    if value >= 1 - tolerance:
        return TransitionPhase.VISIBLE
    return TransitionPhase.ENTERING


class SceneOrchestrator:
    """
    Owns the global timeline of a composition.

    Windows may overlap; when several contain a frame the one that opened
    most recently is the active one. A frame between the first start and the
    last end that no window covers is rejected at construction.
    """

    def __init__(
        self,
        fps: int,
        scenes: Sequence[SubScene],
        strategy: Optional[SpringStrategy] = None,
        tolerance: float = 0.01,
    ):
        if fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {fps}")
        if not scenes:
            raise ConfigurationError("an orchestrator needs at least one scene")
        self.fps = fps
        self.strategy = strategy or DampedSpring()
        self.tolerance = tolerance
        self.scenes: Dict[str, SubScene] = {}
        for scene in scenes:
            if scene.scene_id in self.scenes:
                raise ConfigurationError(f"duplicate scene id {scene.scene_id!r}")
            for config in (scene.entry, scene.exit):
                if config is not None:
                    self.strategy.validate(fps, config)
            self.scenes[scene.scene_id] = scene
        self._order = list(self.scenes)
        self._check_coverage()
        logger.debug("Orchestrator at %s fps: %s", fps,
                     {s.scene_id: (s.window.start, s.window.end) for s in scenes})

    def _check_coverage(self):
        windows = sorted((s.window for s in self.scenes.values()), key=lambda w: w.start)
        reach = windows[0].end
        for window in windows[1:]:
            if window.start > reach:
                raise ConfigurationError(
                    f"frames {reach}..{window.start - 1} are not covered by any scene"
                )
            reach = max(reach, window.end)

    @property
    def start(self):
        return min(s.window.start for s in self.scenes.values())

    @property
    def duration(self):
        return max(s.window.end for s in self.scenes.values()) - self.start

    def scene(self, scene_id: str) -> SubScene:
        try:
            return self.scenes[scene_id]
        except KeyError:
            raise KeyError(f"unknown scene {scene_id!r}") from None

    def transition_value(self, frame: float, scene_id: str) -> float:
        scene = self.scene(scene_id)
        return transition_value(frame, self.fps, scene.entry, scene.exit, self.strategy)

    def phase(self, frame: float, scene_id: str) -> TransitionPhase:
        scene = self.scene(scene_id)
        entry = _progress(self.strategy, frame, self.fps, scene.entry, 1.0)
        exit = _progress(self.strategy, frame, self.fps, scene.exit, 0.0)
        return classify_phase(entry, exit, self.tolerance)

    def mounted_scene_ids(self, frame: float) -> List[str]:
        return [sid for sid in self._order if self.scenes[sid].window.contains(frame)]

    def active_scene_id(self, frame: float) -> Optional[str]:
        best = None
        for scene_id in self.mounted_scene_ids(frame):
            if best is None or self.scenes[scene_id].window.start >= self.scenes[best].window.start:
                best = scene_id
        return best

    def local_frame(self, frame: float, scene_id: str):
        return local_frame(frame, self.scene(scene_id).window)

    def render(self, frame: int, only_active: bool = True) -> ElementState:
        """
        Root element for `frame`.

        By default only the active sub-scene is evaluated; with
        ``only_active=False`` every mounted sub-scene is, in declaration order.
        """
        if only_active:
            active = self.active_scene_id(frame)
            scene_ids = [active] if active is not None else []
        else:
            scene_ids = self.mounted_scene_ids(frame)
        children = []
        for scene_id in scene_ids:
            scene = self.scenes[scene_id]
            if scene.render is not None:
                children.append(scene.render(self.local_frame(frame, scene_id), self.fps))
        return ElementState(element_id="root", children=tuple(children))
