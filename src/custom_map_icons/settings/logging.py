"""
Logging switches read by `setup_logging`.

Values live under ``logging/`` in the active profile. The log file location
is fixed and relative to the working directory.
"""

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/custom_map_icons.csv"

DEFAULT_CONSOLE_LEVEL = "INFO"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# key -> default
FLAGS = {
    "logging/console_enabled": True,
    "logging/console_use_colors": True,
    "logging/file_enabled": False,
}


def normalize_level(value: Any) -> str | None:
    """Return the upper-case level name, or None if value is not a level."""
    name = str(value).strip().upper() if value is not None else ""
    return name if name in LEVEL_NAMES else None


class LoggingSettings:
    """Console and file logging configuration."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _flag(self, key: str) -> bool:
        # INI files hand booleans back as strings
        value = self.settings.value(key, FLAGS[key])
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes")
        return bool(value)

    def _set_flag(self, key: str, value: bool) -> None:
        self.settings.setValue(key, bool(value))
        self.settings.sync()

    @property
    def console_logging(self) -> bool:
        return self._flag("logging/console_enabled")

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set_flag("logging/console_enabled", value)

    @property
    def console_use_colors(self) -> bool:
        """ANSI-colored level names on the console."""
        return self._flag("logging/console_use_colors")

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set_flag("logging/console_use_colors", value)

    @property
    def file_logging(self) -> bool:
        """Write a rotating CSV log to `LOG_FILE_PATH`."""
        return self._flag("logging/file_enabled")

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set_flag("logging/file_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Console level name. A stored value that is not a level reads as INFO."""
        stored = self.settings.value("logging/console_level", DEFAULT_CONSOLE_LEVEL)
        return normalize_level(stored) or DEFAULT_CONSOLE_LEVEL

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = normalize_level(value)
        if level is None:
            logger.warning(f"Ignoring unknown console log level {value!r}")
            return
        self.settings.setValue("logging/console_level", level)
        self.settings.sync()

    @property
    def console_level_number(self) -> int:
        """Numeric `logging` level for the console handler."""
        return logging.getLevelName(self.console_log_level)

    @property
    def log_file_path(self) -> str:
        return LOG_FILE_PATH
