"""
Core settings management for custom_map_icons.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from .types import ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to settings with cross-platform storage.
    Pass settings_file to keep everything in a single INI file instead of
    the platform's native store.
    """

    def __init__(
        self,
        profile: str = "default",
        settings_file: Optional[Union[str, Path]] = None,
    ):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Optional INI file to use instead of the native store
        """
        if settings_file:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("custom_map_icons", "custom_map_icons")
        self.profile = profile

        # Use profile as a group: custom_map_icons/default/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def default_resources_path(self) -> Optional[Path]:
        """Get bundled resources directory."""
        return self._paths.default_resources_path

    @default_resources_path.setter
    def default_resources_path(self, value: Optional[Path]) -> None:
        """Set bundled resources directory."""
        self._paths.default_resources_path = value

    @property
    def plugins_path(self) -> Optional[Path]:
        """Get plugins directory scanned for mod textures."""
        return self._paths.plugins_path

    @plugins_path.setter
    def plugins_path(self, value: Optional[Path]) -> None:
        """Set plugins directory scanned for mod textures."""
        self._paths.plugins_path = value

    @property
    def injected_resources_path(self) -> Optional[Path]:
        """Get injected override resources directory."""
        return self._paths.injected_resources_path

    @injected_resources_path.setter
    def injected_resources_path(self, value: Optional[Path]) -> None:
        """Set injected override resources directory."""
        self._paths.injected_resources_path = value

    @property
    def translations_file(self) -> Optional[Path]:
        """Get translations JSON file."""
        return self._paths.translations_file

    @translations_file.setter
    def translations_file(self, value: Optional[Path]) -> None:
        """Set translations JSON file."""
        self._paths.translations_file = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        """Set console logging enabled state."""
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        """Set console color usage."""
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        """Set file logging enabled state."""
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only)."""
        return self._logging.log_file_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
