"""Tests for config module."""

import json

import pytest
from pydantic import ValidationError

from notelog.config import (
    Config,
    create_log,
    get_config_path,
    load_config,
    save_config,
    set_default_prefix,
    set_newline,
    update_config,
)


def test_load_config_nonexistent(tmp_path):
    """Test loading config from nonexistent file returns default config."""
    config = load_config(tmp_path / "config.json")

    assert config.default_prefix == ""
    assert config.newline is None
    assert config.color is True


def test_save_and_load_config(tmp_path):
    """Test saving and loading config."""
    config_path = tmp_path / "config.json"

    save_config(Config(default_prefix="APP", newline="crlf", color=False), config_path)

    loaded = load_config(config_path)
    assert loaded.default_prefix == "APP"
    assert loaded.newline == "crlf"
    assert loaded.color is False


def test_saved_file_omits_unset_newline(tmp_path):
    config_path = tmp_path / "nested" / "config.json"

    save_config(Config(), config_path)

    with open(config_path) as f:
        assert json.load(f) == {"default_prefix": "", "color": True}


def test_load_invalid_json_returns_default(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json")

    assert load_config(config_path) == Config()


def test_load_invalid_values_returns_default(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"newline": "cr"}))

    assert load_config(config_path).newline is None


def test_prefix_whitespace_is_stripped():
    assert Config(default_prefix="  APP ").default_prefix == "APP"


def test_set_default_prefix(tmp_path):
    config_path = tmp_path / "config.json"

    set_default_prefix(" build ", config_path)

    assert load_config(config_path).default_prefix == "build"


def test_set_newline(tmp_path):
    config_path = tmp_path / "config.json"

    set_newline("lf", config_path)
    assert load_config(config_path).newline == "lf"

    set_newline(None, config_path)
    assert load_config(config_path).newline is None


def test_set_newline_rejects_unknown(tmp_path):
    config_path = tmp_path / "config.json"

    with pytest.raises(ValidationError):
        set_newline("\r", config_path)

    assert not config_path.exists()


def test_update_config_keeps_extra_fields(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"default_prefix": "A", "theme": "dark"}))

    update_config(config_path, lambda cfg: setattr(cfg, "color", False))

    with open(config_path) as f:
        data = json.load(f)
    assert data["theme"] == "dark"
    assert data["color"] is False
    assert data["default_prefix"] == "A"


def test_create_log_from_config():
    log = create_log(Config(default_prefix="CI", newline="crlf"))
    log.add_warning("flaky")

    assert log.prefix == "CI"
    assert log.render() == "WRN[CI]: flaky\r\n"


def test_create_log_loads_default_path(isolated_home):
    save_config(Config(default_prefix="HOME", newline="lf"))

    log = create_log()

    assert log.prefix == "HOME"
    assert log.newline == "\n"


def test_config_path_prefers_xdg(monkeypatch, tmp_path, isolated_home):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    assert get_config_path() == tmp_path / "xdg" / "notelog" / "config.json"


def test_config_path_default(isolated_home):
    assert get_config_path() == isolated_home / ".config" / "notelog" / "config.json"
