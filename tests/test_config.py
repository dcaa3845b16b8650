from __future__ import annotations

import json

import pytest

from tileassist.config.scene import load_scene, parse_scene
from tileassist.config.settings import ConfigError, TilingSettings, load_settings
from tileassist.tiling.rect import Rect


def test_defaults():
    settings = TilingSettings()
    assert settings.gap == 0
    assert settings.use_animation is True
    assert settings.ignore_margin == 35
    assert settings.equal_margin == 15
    assert settings.prefer_vertical is None


def test_from_mapping_accepts_shell_key_names():
    settings = TilingSettings.from_mapping({"window-gaps": 8, "use-anim": False})
    assert settings.gap == 8
    assert settings.use_animation is False


def test_unknown_keys_are_ignored(caplog):
    settings = TilingSettings.from_mapping({"gap": 4, "colour": "red"})
    assert settings.gap == 4
    assert "colour" in caplog.text


@pytest.mark.parametrize(
    "data",
    [
        {"gap": -1},
        {"gap": "10"},
        {"gap": True},
        {"use_animation": "yes"},
        {"prefer_vertical": 1},
        [],
    ],
)
def test_invalid_values_raise(data):
    with pytest.raises(ConfigError):
        TilingSettings.from_mapping(data)


def test_load_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"gap": 12, "ignore_margin": 20}), encoding="utf-8")
    settings = load_settings(path)
    assert settings.gap == 12
    assert settings.ignore_margin == 20


def test_load_settings_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "missing.json")
    broken = tmp_path / "broken.json"
    broken.write_text("{gap: ", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(broken)


def test_parse_scene():
    scene = parse_scene({
        "monitors": [{"rect": [0, 0, 1920, 1080], "work": [0, 32, 1920, 1048]}],
        "windows": [
            {"id": 1, "rect": [0, 32, 960, 1048], "tiled": True},
            {"id": 2, "rect": [100, 100, 400, 300], "app": "term"},
        ],
    })
    wm = scene.desktop.manager
    assert wm.work_area_for_monitor(0) == Rect(0, 32, 1920, 1048)
    assert [w.window_id for w in scene.tiled] == [1]
    assert scene.desktop.stack()[0].window_id == 2
    assert wm.get(2).app_id == "term"


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"monitors": []},
        {"monitors": [{"rect": [0, 0, 10]}]},
        {"monitors": [{"rect": [0, 0, 10, 10]}], "windows": [{"rect": "big"}]},
        {"monitors": [{"rect": [0, 0, 10, 10]}], "windows": [{"rect": [0, 0, 1, 1], "type": "x"}]},
    ],
)
def test_parse_scene_rejects_bad_input(data):
    with pytest.raises(ConfigError):
        parse_scene(data)


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_scene(tmp_path / "nope.json")
