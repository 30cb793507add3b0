import math

import numpy as np
import pytest

from frame_engine.errors import NumericError
from frame_engine.scene import ElementState, iter_world
from frame_engine.transforms import Scale, TransformState, Translate


def _tree():
    leaf = ElementState("leaf", transform=TransformState.of(Translate(x=5)), opacity=0.5,
                        text="hi", size=(10, 4))
    middle = ElementState("middle", transform=TransformState.of(Scale.uniform(2)),
                          opacity=0.5, children=[leaf])
    return ElementState("root", transform=TransformState.of(Translate(y=100)), children=(middle,))


def test_world_matrices_and_opacity_accumulate():
    worlds = {w.element.element_id: w for w in iter_world(_tree())}
    leaf = worlds["leaf"]
    assert leaf.depth == 2
    assert leaf.opacity == pytest.approx(0.25)
    origin = leaf.matrix @ np.array([0, 0, 0, 1.0])
    np.testing.assert_allclose(origin[:3], (10, 100, 0))


def test_find_and_walk():
    root = _tree()
    assert root.find("leaf").text == "hi"
    assert root.find("missing") is None
    assert [e.element_id for e in root.walk()] == ["root", "middle", "leaf"]
    assert isinstance(root.find("middle").children, tuple)


def test_opacity_is_clamped():
    assert ElementState("a", opacity=1.4).opacity == 1
    assert ElementState("a", opacity=-0.2).opacity == 0


def test_non_finite_values_are_numeric_errors():
    with pytest.raises(NumericError):
        ElementState("a", opacity=math.nan)
    with pytest.raises(NumericError):
        ElementState("a", transform=TransformState.of(Translate(x=math.inf)))


def test_to_dict():
    data = _tree().to_dict()
    assert data["transform"] == "translate3d(0px, 100px, 0px)"
    leaf = data["children"][0]["children"][0]
    assert leaf["id"] == "leaf"
    assert leaf["text"] == "hi"
    assert leaf["size"] == [10, 4]
    assert leaf["opacity"] == 0.5
    assert "asset" not in leaf
