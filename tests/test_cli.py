import json

import pytest

from frame_engine.cli import main


def test_cues_command(capsys):
    assert main(["cues", "--scene", "stars-productivity"]) == 0
    cues = json.loads(capsys.readouterr().out)
    assert cues[0]["cue"] == "background-music"
    assert [c["frame"] for c in cues] == sorted(c["frame"] for c in cues)


def test_state_command(capsys):
    assert main(["state", "--scene", "stars-productivity", "--frame", "200"]) == 0
    state = json.loads(capsys.readouterr().out)
    assert state["id"] == "stars-and-productivity"
    assert [child["id"] for child in state["children"]] == ["tablet"]


def test_state_outside_the_timeline_fails(capsys):
    assert main(["state", "--scene", "opening", "--frame", "500"]) == 1
    assert "outside" in capsys.readouterr().out


def test_preview_command(tmp_path, capsys):
    out = tmp_path / "opening"
    assert main(["preview", "--scene", "opening", "--step", "100", "--out", str(out)]) == 0
    assert sorted(p.name for p in out.iterdir()) == ["frame_00000.png", "frame_00100.png"]


def test_unknown_scene_is_an_argparse_error():
    with pytest.raises(SystemExit):
        main(["cues", "--scene", "credits"])


@pytest.mark.parametrize("fps", ["0", "-5"])
def test_bad_fps_override_is_reported(fps, capsys):
    assert main(["--fps", fps, "cues", "--scene", "opening"]) == 1
    assert "fps must be positive" in capsys.readouterr().out


def test_bad_environment_is_reported(monkeypatch, capsys):
    monkeypatch.setenv("FRAME_ENGINE_WIDTH", "0")
    assert main(["cues", "--scene", "opening"]) == 1
    assert "canvas size" in capsys.readouterr().out
