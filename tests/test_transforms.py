import math

import numpy as np
import pytest

from frame_engine.errors import ConfigurationError, NumericError
from frame_engine.transforms import (
    IDENTITY,
    OpposingTransform,
    Perspective,
    Rotate,
    Scale,
    Skew,
    TransformComposer,
    TransformState,
    TransformTrack,
    Translate,
    counter_rotate,
)


@pytest.mark.parametrize("angle", [0.0, 0.3, -1.2, math.pi, 5.0])
def test_counter_rotation_cancels_parent_rotation(angle):
    parent = TransformState.of(Translate(z=40), Translate(y=-12), Rotate("x", angle))
    combined = parent.then(counter_rotate(parent))
    np.testing.assert_allclose(combined.matrix()[:3, :3], np.eye(3), atol=1e-12)
    np.testing.assert_allclose(combined.matrix()[:3, 3], (0, -12, 40), atol=1e-12)


def test_order_matters():
    a = TransformState.of(Translate(x=10), Scale.uniform(2))
    b = TransformState.of(Scale.uniform(2), Translate(x=10))
    np.testing.assert_allclose(a.apply([(1, 0, 0)])[0], (12, 0))
    np.testing.assert_allclose(b.apply([(1, 0, 0)])[0], (22, 0))


def test_inverse_undoes_the_stack():
    state = TransformState.of(
        Translate(5, -3, 2), Rotate("y", 0.4), Scale(2, 3, 1), Skew(0.2, 0), Rotate("z", -1)
    )
    np.testing.assert_allclose(state.then(state.inverse()).matrix(), np.eye(4), atol=1e-9)


def test_perspective_has_no_inverse():
    with pytest.raises(ConfigurationError):
        TransformState.of(Perspective(1200)).inverse()
    with pytest.raises(ConfigurationError):
        Perspective(0)


def test_rotation_axis_is_checked():
    with pytest.raises(ConfigurationError):
        Rotate("w", 1)


def test_css_text():
    assert IDENTITY.to_css() == "none"
    state = TransformState.of(Translate(y=800), Rotate("x", 0.5), Scale.uniform(0.5))
    assert state.to_css() == "translate3d(0px, 800px, 0px) rotateX(0.5rad) scale3d(0.5, 0.5, 1)"


def test_composer_reads_tracks_in_order():
    composer = TransformComposer.from_pairs([
        ("translate_y", lambda frame: 800 - 8 * frame),
        ("rotate_x", 0.25),
        ("scale", lambda frame: 1 + frame / 100),
    ])
    state = composer.at(50)
    assert state.operations == (Translate(y=400), Rotate("x", 0.25), Scale.uniform(1.5))


def test_composer_rejects_unknown_tracks_and_bad_outputs():
    with pytest.raises(ConfigurationError):
        TransformTrack("wobble", 1.0)
    with pytest.raises(ConfigurationError):
        TransformTrack("rotate_x", float("nan"))
    composer = TransformComposer([TransformTrack("translate_x", lambda frame: math.inf)])
    with pytest.raises(NumericError):
        composer.at(0)


def test_opposing_transform_rest_and_full_scales():
    opposing = OpposingTransform()
    assert opposing.content_scale(0) == pytest.approx(0.4)
    assert opposing.content_scale(1) == pytest.approx(1)
    assert opposing.frame_scale(0) == pytest.approx(1)
    assert opposing.frame_scale(1) == pytest.approx(1.3 / 0.6)
    assert opposing.master_scale(0) == pytest.approx(0.8)
    assert opposing.master_scale(1) == pytest.approx(1)


def test_opposing_rotations_have_opposite_signs():
    opposing = OpposingTransform(rotate_x=-10, rotate_y=15)
    theta_y = math.radians(15)
    frame_rest, content_rest = opposing.layers(0)
    frame_full, content_full = opposing.layers(1)
    assert frame_rest.rotation("y") == pytest.approx(0)
    assert content_rest.rotation("y") == pytest.approx(theta_y)
    assert frame_full.rotation("y") == pytest.approx(-theta_y)
    assert content_full.rotation("y") == pytest.approx(0)
    for p in (0.25, 0.5, 0.75):
        frame, content = opposing.layers(p)
        assert frame.rotation("y") < 0 < content.rotation("y")


def test_opposing_transform_validates_rest_scale():
    with pytest.raises(ConfigurationError):
        OpposingTransform(content_rest_scale=1)
