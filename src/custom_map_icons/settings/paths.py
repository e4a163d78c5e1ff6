"""
Path-related settings for custom_map_icons.
"""

from pathlib import Path
from typing import List, Optional, TYPE_CHECKING

from ..icons.catalog import TEXTURES_DIR_NAME

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class PathSettings:
    """Manages locations of icon definitions and translations."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_path(self, key: str) -> Optional[Path]:
        """Type-safe optional path retrieval from settings."""
        value = self.settings.value(key, "")
        path_str = str(value) if value is not None else ""
        return Path(path_str) if path_str else None

    def _set_path(self, key: str, value: Optional[Path]) -> None:
        self.settings.setValue(key, str(value) if value else "")
        self.settings.sync()

    @property
    def default_resources_path(self) -> Optional[Path]:
        """Directory holding the bundled resources (with a `Textures` subdirectory)."""
        return self._get_path("paths/default_resources")

    @default_resources_path.setter
    def default_resources_path(self, value: Optional[Path]) -> None:
        self._set_path("paths/default_resources", value)

    @property
    def plugins_path(self) -> Optional[Path]:
        """Directory whose subdirectories are scanned for mod `Textures`."""
        return self._get_path("paths/plugins")

    @plugins_path.setter
    def plugins_path(self, value: Optional[Path]) -> None:
        self._set_path("paths/plugins", value)

    @property
    def injected_resources_path(self) -> Optional[Path]:
        """Directory with the final override layer (with a `Textures` subdirectory)."""
        return self._get_path("paths/injected_resources")

    @injected_resources_path.setter
    def injected_resources_path(self, value: Optional[Path]) -> None:
        self._set_path("paths/injected_resources", value)

    @property
    def translations_file(self) -> Optional[Path]:
        """Flat JSON file with translations for internal names."""
        return self._get_path("paths/translations")

    @translations_file.setter
    def translations_file(self, value: Optional[Path]) -> None:
        self._set_path("paths/translations", value)

    @property
    def default_textures_dir(self) -> Optional[Path]:
        """Get bundled textures directory (derived from default_resources_path)."""
        if self.default_resources_path:
            return self.default_resources_path / TEXTURES_DIR_NAME
        return None

    @property
    def injected_textures_dir(self) -> Optional[Path]:
        """Get injected textures directory (derived from injected_resources_path)."""
        if self.injected_resources_path:
            return self.injected_resources_path / TEXTURES_DIR_NAME
        return None

    def configured_paths(self) -> List[tuple[str, Optional[Path]]]:
        """Return (setting name, path) pairs for validation and display."""
        return [
            ("default resources", self.default_resources_path),
            ("plugins", self.plugins_path),
            ("injected resources", self.injected_resources_path),
            ("translations", self.translations_file),
        ]
