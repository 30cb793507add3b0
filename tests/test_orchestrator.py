import pytest

from frame_engine.errors import ConfigurationError
from frame_engine.scene import (
    ElementState,
    SceneOrchestrator,
    SubScene,
    TransitionPhase,
    classify_phase,
    transition_value,
)
from frame_engine.timing import EasedWindow, SpringConfig, TimelineWindow

FPS = 30
ENTRY = SpringConfig(damping=200, delay=150, duration_in_frames=45)
EXIT = SpringConfig(damping=200, delay=300, duration_in_frames=45)


@pytest.mark.parametrize("strategy", [None, EasedWindow()])
def test_transition_shape(strategy):
    def value(frame):
        return transition_value(frame, FPS, ENTRY, EXIT, strategy)

    assert value(150) == pytest.approx(0, abs=0.01)
    assert value(195) == pytest.approx(1, abs=0.01)
    assert value(300) == pytest.approx(1, abs=0.01)
    assert value(345) == pytest.approx(0, abs=0.01)
    assert 0 < value(170) < 1
    assert 0 < value(320) < 1


def test_missing_configs_mean_no_transition():
    assert transition_value(0, FPS, None, None) == 1
    assert transition_value(500, FPS, ENTRY, None) == pytest.approx(1, abs=0.01)


@pytest.mark.parametrize("entry, exit, expected", [
    (0, 0, TransitionPhase.HIDDEN),
    (0.5, 0, TransitionPhase.ENTERING),
    (1, 0, TransitionPhase.VISIBLE),
    (0.995, 0, TransitionPhase.VISIBLE),
    (1, 0.4, TransitionPhase.EXITING),
    (1, 1, TransitionPhase.HIDDEN),
])
def test_classify_phase(entry, exit, expected):
    assert classify_phase(entry, exit) is expected


def _scene(scene_id, start, duration, **kwargs):
    return SubScene(
        scene_id,
        TimelineWindow(start, duration),
        render=lambda frame, fps: ElementState(scene_id, metadata={"local": frame}),
        **kwargs,
    )


def test_phases_follow_the_frame():
    orchestrator = SceneOrchestrator(
        FPS,
        [_scene("stars", 0, 345), _scene("tablet", 150, 195, entry=ENTRY, exit=EXIT)],
        strategy=EasedWindow(),
    )
    assert orchestrator.phase(100, "tablet") is TransitionPhase.HIDDEN
    assert orchestrator.phase(160, "tablet") is TransitionPhase.ENTERING
    assert orchestrator.phase(250, "tablet") is TransitionPhase.VISIBLE
    assert orchestrator.phase(320, "tablet") is TransitionPhase.EXITING
    assert orchestrator.phase(400, "tablet") is TransitionPhase.HIDDEN
    assert orchestrator.phase(10, "stars") is TransitionPhase.VISIBLE


def test_active_scene_is_the_most_recently_opened():
    orchestrator = SceneOrchestrator(FPS, [_scene("opening", 0, 130), _scene("main", 120, 345)])
    assert orchestrator.active_scene_id(0) == "opening"
    assert orchestrator.active_scene_id(119) == "opening"
    assert orchestrator.active_scene_id(120) == "main"
    assert orchestrator.active_scene_id(464) == "main"
    assert orchestrator.active_scene_id(465) is None
    assert orchestrator.mounted_scene_ids(125) == ["opening", "main"]
    assert orchestrator.duration == 465


def test_render_passes_local_frames():
    orchestrator = SceneOrchestrator(FPS, [_scene("opening", 0, 130), _scene("main", 120, 345)])
    only_active = orchestrator.render(125)
    assert [child.element_id for child in only_active.children] == ["main"]
    assert only_active.children[0].metadata["local"] == 5
    both = orchestrator.render(125, only_active=False)
    assert [child.metadata["local"] for child in both.children] == [125, 5]


def test_uncovered_frames_are_rejected():
    with pytest.raises(ConfigurationError):
        SceneOrchestrator(FPS, [_scene("a", 0, 100), _scene("b", 120, 50)])


def test_duplicate_ids_are_rejected():
    with pytest.raises(ConfigurationError):
        SceneOrchestrator(FPS, [_scene("a", 0, 100), _scene("a", 100, 50)])


def test_bad_fps_and_unusable_configs_are_rejected():
    with pytest.raises(ConfigurationError):
        SceneOrchestrator(0, [_scene("a", 0, 100)])
    with pytest.raises(ConfigurationError):
        SceneOrchestrator(FPS, [_scene("a", 0, 100, entry=SpringConfig(delay=5))],
                          strategy=EasedWindow())


def test_unknown_scene():
    orchestrator = SceneOrchestrator(FPS, [_scene("a", 0, 100)])
    with pytest.raises(KeyError):
        orchestrator.phase(0, "b")
