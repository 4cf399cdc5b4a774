# tests/test_config_manager.py
import json

import pytest

from markov_textgen.errors import ConfigError
from markov_textgen.utils.config_manager import DEFAULTS, Config


def test_defaults_without_path():
    cfg = Config()
    assert cfg.as_dict() == DEFAULTS
    cfg.set("length", "50")  # no file to save to, still updates in memory
    assert cfg.get("length") == 50


def test_missing_file_keeps_defaults_and_writes_nothing(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert cfg.as_dict() == DEFAULTS
    assert not path.exists()
    cfg.save()
    assert json.loads(path.read_text()) == DEFAULTS


@pytest.mark.parametrize("key", ["length", "window_length", "show_table"])
def test_null_value_raises_config_error(tmp_path, key):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({key: None}))
    with pytest.raises(ConfigError):
        Config(str(path))


def test_uncoercible_value_raises_config_error(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"length": "lots"}))
    with pytest.raises(ConfigError):
        Config(str(path))


def test_load_overrides_and_ignores_unknown(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"window_length": 5, "seed": 9, "colour": "red"}))
    cfg = Config(str(path))
    assert cfg.get("window_length") == 5
    assert cfg.get("seed") == 9
    assert cfg.get("colour") is None


def test_malformed_file_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        Config(str(path))


def test_non_object_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        Config(str(path))


def test_set_coerces_and_saves(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    cfg.set("window_length", "4")
    cfg.set("show_table", "yes")
    cfg.set("seed", "12")
    saved = json.loads(path.read_text())
    assert saved["window_length"] == 4
    assert saved["show_table"] is True
    assert saved["seed"] == 12
    cfg.set("seed", "none")
    assert cfg.get("seed") is None


def test_set_unknown_key():
    with pytest.raises(KeyError):
        Config().set("theme", "dark")
