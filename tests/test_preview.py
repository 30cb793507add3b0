import numpy as np

from frame_engine.preview import BACKGROUND, element_corners, project, render_preview_frame, write_preview
from frame_engine.scene import ElementState
from frame_engine.scenes import StarsAndProductivity
from frame_engine.transforms import Perspective, TransformState, Translate


def test_project_centres_the_origin():
    corners = element_corners((20, 10))
    xy = project(np.eye(4), corners, 200, 100)
    np.testing.assert_allclose(xy[0], (90, 45))
    np.testing.assert_allclose(xy[2], (110, 55))


def test_points_behind_the_camera_are_dropped():
    matrix = TransformState.of(Perspective(100), Translate(z=200)).matrix()
    assert project(matrix, element_corners((10, 10)), 100, 100) is None


def test_render_draws_sized_elements():
    root = ElementState("root", children=(ElementState("box", size=(60, 40), text="box"),))
    image = render_preview_frame(root, 120, 120)
    assert image.shape == (120, 120, 3)
    assert image.dtype == np.uint8
    assert (image != np.array(BACKGROUND, dtype=np.uint8)).any()


def test_invisible_elements_leave_the_canvas_blank():
    root = ElementState("root", children=(ElementState("box", size=(60, 40), opacity=0),))
    image = render_preview_frame(root, 120, 120)
    assert (image == np.array(BACKGROUND, dtype=np.uint8)).all()


def test_write_preview(tmp_path):
    composition = StarsAndProductivity(stars_given=7, top_weekday=1, top_hour=10)
    frames = [(f, render_preview_frame(composition.render(f), 270, 270)) for f in (0, 200)]
    paths = write_preview(frames, tmp_path / "preview")
    assert [p.name for p in paths] == ["frame_00000.png", "frame_00200.png"]
    assert all(p.exists() for p in paths)
