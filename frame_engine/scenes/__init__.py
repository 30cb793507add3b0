"""
Bundled compositions and a registry for the CLI.

Every composition exposes ``duration``, ``render(frame)`` and ``cue_sheet()``.
"""

from ..config import EngineConfig
from .data import MOCK_PRODUCTIVITY_DATA, most_productive_hour
from .full import FullComposition
from .opening import OpeningScene
from .stars_and_productivity import StarsAndProductivity

DEMO_LOGIN = "octocat"
DEMO_STARS = 42
DEMO_WEEKDAY = 3


def build_opening(config: EngineConfig) -> OpeningScene:
    return OpeningScene(DEMO_LOGIN, width=config.width, height=config.height, fps=config.fps)


def build_stars_and_productivity(config: EngineConfig) -> StarsAndProductivity:
    return StarsAndProductivity(
        stars_given=DEMO_STARS,
        top_weekday=DEMO_WEEKDAY,
        top_hour=most_productive_hour(MOCK_PRODUCTIVITY_DATA),
        fps=config.fps,
    )


def build_full(config: EngineConfig) -> FullComposition:
    return FullComposition(build_opening(config), build_stars_and_productivity(config),
                           fps=config.fps)


SCENES = {
    "opening": build_opening,
    "stars-productivity": build_stars_and_productivity,
    "full": build_full,
}


def build_scene(name: str, config: EngineConfig):
    """Instantiate the composition registered under `name`."""
    try:
        factory = SCENES[name]
    except KeyError:
        raise KeyError(f"unknown scene {name!r}; choose from {sorted(SCENES)}") from None
    return factory(config)


__all__ = [
    'FullComposition',
    'OpeningScene',
    'StarsAndProductivity',
    'SCENES',
    'build_scene',
]
