"""
Settings package for custom_map_icons.

Provides type-safe configuration management using Qt's QSettings for
cross-platform storage.

Usage:
    from custom_map_icons.settings import AppSettings

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigError, ValidationResult
from .paths import PathSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigError",
    "ValidationResult",
    "PathSettings",
    "LoggingSettings",
]
