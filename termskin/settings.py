"""Settings and file locations for skins."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from termskin.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SKIN_FILE = "skin.yml"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """User-configurable settings stored on disk."""

    # Skin file name or path; relative paths are resolved against the config dir
    skin: str = DEFAULT_SKIN_FILE
    # Minimum level forwarded to TUI log sinks
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Settings:
        """Create settings from a mapping, applying defaults for invalid values.

        Args:
            data: Mapping containing raw settings values.

        Returns:
            A Settings instance with validated values.
        """
        skin = _coerce_str(data.get("skin"))
        if not skin:
            skin = DEFAULT_SKIN_FILE

        log_level_value = _coerce_str(data.get("log_level"))
        log_level = (
            log_level_value if log_level_value is not None and log_level_value in LOG_LEVELS else DEFAULT_LOG_LEVEL
        )
        return cls(skin=skin, log_level=log_level)

    def to_dict(self) -> dict[str, object]:
        """Serialize settings to a dictionary.

        Returns:
            Dictionary representation of settings.
        """
        return {"skin": self.skin, "log_level": self.log_level}


def get_config_dir() -> Path:
    """Get the directory used for persistent configuration.

    Returns:
        Path to the configuration directory.
    """
    override_dir = os.environ.get("TERMSKIN_CONFIG_DIR")
    if override_dir:
        return Path(override_dir).expanduser()

    base_dir = os.environ.get("XDG_CONFIG_HOME")
    if base_dir:
        return Path(base_dir).expanduser() / "termskin"

    return Path.home() / ".config" / "termskin"


def get_settings_path() -> Path:
    """Get the full path to the settings file.

    Returns:
        Path to the settings JSON file.
    """
    return get_config_dir() / "settings.json"


def load_settings() -> Settings:
    """Load settings from disk.

    Returns:
        Loaded settings, or defaults if none exist.
    """
    settings_path = get_settings_path()
    if not settings_path.exists():
        return Settings()

    try:
        raw = json.loads(settings_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        logger.warning(f"Failed to parse settings file {settings_path}: {exc}")
        return Settings()
    except OSError as exc:
        logger.warning(f"Failed to read settings file {settings_path}: {exc}")
        return Settings()

    if not isinstance(raw, dict):
        logger.warning(f"Settings file {settings_path} contains invalid data")
        return Settings()

    return Settings.from_mapping(raw)


def get_skin_path(settings: Settings | None = None) -> Path:
    """Get the path of the skin file to load.

    Args:
        settings: Settings to use (loaded from disk when omitted).

    Returns:
        Path to the skin file. The file may not exist.
    """
    if settings is None:
        settings = load_settings()
    skin_path = Path(settings.skin).expanduser()
    if not skin_path.is_absolute():
        skin_path = get_config_dir() / skin_path
    return skin_path


def _coerce_str(value: object) -> str | None:
    """Coerce a value into a string if possible.

    Args:
        value: Raw value to coerce.

    Returns:
        String value or None.
    """
    if isinstance(value, str):
        return value
    return None
