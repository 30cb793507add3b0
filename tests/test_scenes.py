import pytest

from frame_engine.config import EngineConfig
from frame_engine.errors import ConfigurationError
from frame_engine.scenes import FullComposition, OpeningScene, StarsAndProductivity, build_scene
from frame_engine.scenes.constants import BAR_COLOR, BAR_HIGHLIGHT_COLOR
from frame_engine.scenes.data import (
    MOCK_PRODUCTIVITY_DATA,
    ProductivityDataPoint,
    format_hour,
    most_productive_hour,
    weekday_name,
)
from frame_engine.scenes.productivity import Productivity, bar_progress
from frame_engine.scenes.stars_given import background_opacity, fade_out_opacity
from frame_engine.scenes.tablet import Tablet


@pytest.fixture
def composition():
    return StarsAndProductivity(stars_given=42, top_weekday=3, top_hour=10)


def _ids(element):
    return [child.element_id for child in element.children]


def test_data_helpers():
    assert most_productive_hour(MOCK_PRODUCTIVITY_DATA) == 10
    assert most_productive_hour([]) == 0
    assert [format_hour(h) for h in (0, 9, 12, 15)] == ["12 am", "9 am", "12 pm", "3 pm"]
    assert weekday_name(4) == "Friday"
    assert weekday_name(12) == "Monday"


def test_stars_fades():
    assert background_opacity(0) == 0
    assert background_opacity(10) == 1
    assert fade_out_opacity(100) == 1
    assert fade_out_opacity(150) == 0


def test_zoom_between_stars_and_tablet(composition):
    assert composition.duration == 345
    assert composition.zoom(100) == 0
    assert composition.zoom(150) == 0
    assert composition.zoom(195) == pytest.approx(1)
    assert composition.zoom(300) == pytest.approx(1)
    assert composition.zoom(344) == pytest.approx(0, abs=0.01)


def test_stars_hidden_while_tablet_covers_them(composition):
    assert _ids(composition.render(100)) == ["stars"]
    assert _ids(composition.render(150)) == ["stars", "tablet"]
    assert _ids(composition.render(250)) == ["tablet"]
    assert _ids(composition.render(320)) == ["stars", "tablet"]


def test_stars_zoom_style(composition):
    stars = composition.render(195).find("stars")
    assert stars.opacity == pytest.approx(0.3)
    assert stars.transform.to_css().startswith("translate3d(270px, -270px, 0px) scale3d(1.5, 1.5, 1)")


def test_tablet_slides_in_and_flattens():
    tablet = Tablet(weekday=3, hour=10)
    assert tablet.slide_offset(0) == 800
    assert tablet.slide_offset(46) == 0
    assert tablet.to_fullscreen(20) == 0
    assert tablet.to_fullscreen(100) == pytest.approx(0.68)
    assert tablet.to_fullscreen(194) == pytest.approx(0, abs=0.01)
    element = tablet.element(100)
    assert _ids(element) == ["tablet.frame", "tablet.content"]
    assert element.find("tablet.frame").asset_id == "tablet.svg"


def test_bars_stagger_and_highlight():
    assert bar_progress(30, 0) == 0
    assert bar_progress(90, 0) == 1
    assert bar_progress(90, 23) < 1
    productivity = Productivity(MOCK_PRODUCTIVITY_DATA, weekday=3, hour=10)
    tree = productivity.element(200)
    assert tree.find("productivity.bar10.fill").color == BAR_HIGHLIGHT_COLOR
    assert tree.find("productivity.bar9.fill").color == BAR_COLOR


def test_bars_without_any_activity_are_flat():
    flat = [ProductivityDataPoint(h, 0) for h in range(24)]
    productivity = Productivity(flat, weekday=0, hour=0)
    fill = productivity.element(200).find("productivity.bar0.fill")
    assert fill.color == BAR_COLOR
    assert fill.transform.operations[0].y == 0


def test_wheels_land_on_the_top_values():
    productivity = Productivity(MOCK_PRODUCTIVITY_DATA, weekday=3, hour=10)
    assert productivity.weekday_wheel.label(productivity.weekday_wheel.selected_item(190)) == "Thursday"
    assert productivity.hour_wheel.label(productivity.hour_wheel.selected_item(190)) == "10 am"
    assert productivity.hour_wheel.selected_item(70) is None


def test_stars_and_productivity_cues(composition):
    sheet = composition.cue_sheet()
    frames = {cue.cue_id: cue.frame for cue in sheet}
    assert frames == {
        "background-music": 0,
        "stars-whoosh": 10,
        "tablet-entry": 150,
        "bars-animate": 180,
        "weekday-wheel": 195,
        "hour-wheel": 220,
        "weekday-wheel-settled": 310,
        "hour-wheel-settled": 320,
    }
    assert sheet.get("background-music").loop


def test_opening_zoom_and_exit():
    opening = OpeningScene("octocat")
    assert opening.zoom_out(0) == pytest.approx(-0.1)
    assert opening.camera(0).operations[0].x == pytest.approx(2.65)
    assert opening.exit_progress(109) == 0
    assert opening.exit_scale(50) == 1
    assert opening.exit_scale(129) > 1
    root = opening.render(0)
    assert root.find("opening.background").opacity == 1
    assert root.find("opening.title.login").text == "octocat"


def test_opening_camera_side():
    left = OpeningScene("octocat", start_angle="left", width=1080)
    right = OpeningScene("octocat", start_angle="right", width=1080)
    assert left.camera(0).operations[1].x > 0
    assert right.camera(0).operations[1].x < 0


def test_opening_cues():
    sheet = OpeningScene("octocat").cue_sheet()
    launch = sheet.get("rocket-launch")
    assert (launch.frame, launch.start_from) == (0, 20)
    assert sheet.get("opening-whoosh").frame == 70


@pytest.mark.parametrize("kwargs", [
    {"start_angle": "up"},
    {"rocket": "green"},
    {"duration": 30},
    {"fps": 0},
])
def test_opening_rejects_bad_options(kwargs):
    with pytest.raises(ConfigurationError):
        OpeningScene("octocat", **kwargs)


def test_full_composition_overlaps_scenes():
    full = build_scene("full", EngineConfig())
    assert isinstance(full, FullComposition)
    assert full.duration == 465
    assert _ids(full.render(125)) == ["opening", "stars-and-productivity"]
    sheet = full.cue_sheet()
    assert sheet.get("opening-whoosh").frame == 70
    assert sheet.get("stars-whoosh").frame == 130


def test_unknown_scene_name():
    with pytest.raises(KeyError):
        build_scene("credits", EngineConfig())


def test_bad_selected_weekday_is_rejected():
    with pytest.raises(ConfigurationError):
        StarsAndProductivity(stars_given=1, top_weekday=-1, top_hour=10)
