"""Logging configuration using loguru.

Logs are stored in the logs/ folder and kept for 1 week.
Output goes to file only by default (to avoid interfering with the TUI that
hosts the skin).
"""

import os
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

# Remove default handler
logger.remove()

# Define log directory (default ~/.local/share/termskin/logs, overridable via TERMSKIN_LOG_DIR)
_default_log_dir = Path.home() / ".local" / "share" / "termskin" / "logs"
LOG_DIR = Path(os.environ.get("TERMSKIN_LOG_DIR", str(_default_log_dir))).expanduser().resolve()
LOG_DIR.mkdir(parents=True, exist_ok=True)

# Configure file handler with rotation and retention
logger.add(
    LOG_DIR / "termskin_{time:YYYY-MM-DD}.log",
    level="DEBUG",
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    rotation="00:00",  # New file at midnight
    retention="1 week",  # Keep logs for 1 week
    compression="gz",  # Compress old logs
    backtrace=True,
    diagnose=False,
)


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def add_tui_sink(sink_func: Callable[[object], None], level: str | None = None) -> int:
    """Add a sink that forwards log records to a TUI widget.

    Args:
        sink_func: A callable that accepts loguru message objects.
        level: Minimum log level for the TUI sink. Defaults to the
            ``log_level`` from the user's settings.

    Returns:
        The sink ID that can be used to remove the sink later.
    """
    if level is None:
        # Imported here, settings logs through this module
        from termskin.settings import load_settings

        level = load_settings().log_level
    return logger.add(sink_func, level=level, format="{message}")


def remove_tui_sink(sink_id: int) -> None:
    """Remove a sink added with add_tui_sink.

    Args:
        sink_id: The sink ID returned by add_tui_sink.
    """
    logger.remove(sink_id)
