"""Tests for settings and file locations."""

import json
from pathlib import Path

from termskin.settings import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SKIN_FILE,
    Settings,
    get_config_dir,
    get_settings_path,
    get_skin_path,
    load_settings,
)


def test_config_dir_override(tmp_path: Path, monkeypatch) -> None:
    """TERMSKIN_CONFIG_DIR wins over everything else."""
    monkeypatch.setenv("TERMSKIN_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", "/somewhere/else")
    assert get_config_dir() == tmp_path


def test_config_dir_xdg(tmp_path: Path, monkeypatch) -> None:
    """XDG_CONFIG_HOME is used when there is no override."""
    monkeypatch.delenv("TERMSKIN_CONFIG_DIR", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_config_dir() == tmp_path / "termskin"


def test_config_dir_home(tmp_path: Path, monkeypatch) -> None:
    """Without environment overrides the config lives under ~/.config."""
    monkeypatch.delenv("TERMSKIN_CONFIG_DIR", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    assert get_config_dir() == tmp_path / ".config" / "termskin"


def test_load_settings_defaults_when_missing(tmp_path: Path, monkeypatch) -> None:
    """Defaults are returned when no settings file exists."""
    monkeypatch.setenv("TERMSKIN_CONFIG_DIR", str(tmp_path))
    assert load_settings() == Settings()
    assert load_settings().skin == DEFAULT_SKIN_FILE


def test_load_settings_skin(tmp_path: Path, monkeypatch) -> None:
    """The skin setting is read from the settings file."""
    monkeypatch.setenv("TERMSKIN_CONFIG_DIR", str(tmp_path))
    get_settings_path().write_text(json.dumps({"skin": "dracula.yml"}))
    assert load_settings().skin == "dracula.yml"


def test_load_settings_invalid_values(tmp_path: Path, monkeypatch) -> None:
    """Invalid settings fall back to defaults."""
    monkeypatch.setenv("TERMSKIN_CONFIG_DIR", str(tmp_path))
    get_settings_path().write_text(json.dumps({"skin": 42}))
    assert load_settings().skin == DEFAULT_SKIN_FILE


def test_load_settings_broken_json(tmp_path: Path, monkeypatch) -> None:
    """Unparseable settings files fall back to defaults."""
    monkeypatch.setenv("TERMSKIN_CONFIG_DIR", str(tmp_path))
    get_settings_path().write_text("{not json")
    assert load_settings() == Settings()


def test_load_settings_non_mapping(tmp_path: Path, monkeypatch) -> None:
    """A settings file that is not an object falls back to defaults."""
    monkeypatch.setenv("TERMSKIN_CONFIG_DIR", str(tmp_path))
    get_settings_path().write_text(json.dumps(["skin.yml"]))
    assert load_settings() == Settings()


def test_settings_to_dict_roundtrip() -> None:
    """Settings serialize to a mapping that reads back the same."""
    original = Settings(skin="mine.yml", log_level="DEBUG")
    assert Settings.from_mapping(original.to_dict()) == original


def test_skin_path_default(tmp_path: Path, monkeypatch) -> None:
    """The skin file defaults to skin.yml in the config dir."""
    monkeypatch.setenv("TERMSKIN_CONFIG_DIR", str(tmp_path))
    assert get_skin_path() == tmp_path / "skin.yml"


def test_skin_path_relative(tmp_path: Path, monkeypatch) -> None:
    """Relative skin settings resolve against the config dir."""
    monkeypatch.setenv("TERMSKIN_CONFIG_DIR", str(tmp_path))
    assert get_skin_path(Settings(skin="skins/nord.yml")) == tmp_path / "skins" / "nord.yml"


def test_skin_path_absolute(tmp_path: Path) -> None:
    """Absolute skin settings are used as they are."""
    skin_file = tmp_path / "abs.yml"
    assert get_skin_path(Settings(skin=str(skin_file))) == skin_file


def test_log_level_default() -> None:
    """The log level defaults to WARNING."""
    assert Settings().log_level == DEFAULT_LOG_LEVEL == "WARNING"
    assert Settings.from_mapping({}).log_level == DEFAULT_LOG_LEVEL


def test_log_level_valid(tmp_path: Path, monkeypatch) -> None:
    """A known log level is read from the settings file."""
    monkeypatch.setenv("TERMSKIN_CONFIG_DIR", str(tmp_path))
    get_settings_path().write_text(json.dumps({"log_level": "DEBUG"}))
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.to_dict() == {"skin": DEFAULT_SKIN_FILE, "log_level": "DEBUG"}


def test_log_level_invalid() -> None:
    """Unknown or mistyped log levels fall back to the default."""
    assert Settings.from_mapping({"log_level": "VERBOSE"}).log_level == DEFAULT_LOG_LEVEL
    assert Settings.from_mapping({"log_level": "debug"}).log_level == DEFAULT_LOG_LEVEL
    assert Settings.from_mapping({"log_level": 10}).log_level == DEFAULT_LOG_LEVEL
