"""
Settings validation system for custom_map_icons.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        paths = self.settings.paths

        # Bundled defaults are required when configured
        default_path = paths.default_resources_path
        if default_path:
            if not default_path.exists():
                errors.append(f"Default resources path does not exist: {default_path}")
            elif not (paths.default_textures_dir and paths.default_textures_dir.is_dir()):
                warnings.append(
                    f"Default resources path has no 'Textures' directory: {default_path}"
                )
        else:
            warnings.append("Default resources path not set")

        for label, path in paths.configured_paths()[1:]:
            if path and not path.exists():
                warnings.append(f"Configured {label} path does not exist: {path}")

        if errors:
            logger.debug(f"Settings validation failed with {len(errors)} errors")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
