"""
Ordered catalog of custom icon definitions.

Collects legacy and structured entries from every `Textures` directory in
load order. A directory that is missing or holds a malformed file is logged
and skipped; the remaining sources still load.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ..errors import IconLoadError
from .loaders import CustomIconLoader, LegacyIconLoader, SpriteLoader
from .models import CustomIcon, IconEntry, LegacyIcon

TEXTURES_DIR_NAME = "Textures"


class IconCatalog:
    """In-memory collection of loaded icon definitions.

    Both generations share one ordered list. Within a directory the legacy
    table is loaded before the structured document.
    """

    def __init__(self, default_textures_dir: Optional[str | Path] = None):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.default_textures_dir = Path(default_textures_dir) if default_textures_dir else None

        sprite_loader = SpriteLoader()
        self.legacy_loader = LegacyIconLoader(sprite_loader)
        self.custom_loader = CustomIconLoader(sprite_loader)

        self._entries: List[IconEntry] = []
        self.loaded_sources: List[Path] = []

    def clear(self) -> None:
        """Drop every loaded entry."""
        self._entries.clear()
        self.loaded_sources.clear()

    def load_defaults(self) -> int:
        """Load the bundled default textures directory, if configured."""
        if self.default_textures_dir is None:
            self.logger.debug("No default textures directory configured")
            return 0
        return self.load_overrides(self.default_textures_dir)

    def load_mod_directories(self, plugins_path: Optional[str | Path]) -> int:
        """Load `<mod>/Textures` for every mod directory under plugins_path.

        Mod directories are visited in name order.

        Returns:
            Number of entries added
        """
        if not plugins_path:
            return 0

        plugins_path = Path(plugins_path)
        if not plugins_path.is_dir():
            self.logger.warning(f"Plugins path not found: {plugins_path}")
            return 0

        mod_dirs = sorted(d for d in plugins_path.iterdir() if d.is_dir())
        self.logger.debug(f"total {len(mod_dirs)} mod dirs found")

        added = 0
        for mod_dir in mod_dirs:
            added += self.load_overrides(mod_dir / TEXTURES_DIR_NAME)
        return added

    def load_overrides(self, textures_dir: Optional[str | Path]) -> int:
        """Load both definition files from one textures directory.

        Returns:
            Number of entries added
        """
        if not textures_dir:
            return 0

        textures_dir = Path(textures_dir)
        if not textures_dir.is_dir():
            self.logger.debug(f"Textures directory not found: {textures_dir}")
            return 0

        added = 0
        for loader in (self.legacy_loader, self.custom_loader):
            try:
                icons = loader.load(textures_dir)
            except IconLoadError as e:
                self.logger.error(f"Failed to load custom icon data: {e.path}\n{e.__cause__!r}")
                continue
            self.add_entries(icons)
            added += len(icons)

        if added:
            self.loaded_sources.append(textures_dir)
        return added

    def add_entries(self, entries: Iterable[IconEntry]) -> None:
        """Append entries to the end of the load order."""
        self._entries.extend(entries)

    def all_entries(self) -> List[IconEntry]:
        """Return a copy of every entry in load order."""
        return list(self._entries)

    def custom_icons(self) -> List[CustomIcon]:
        """Return the structured entries in load order."""
        return [e for e in self._entries if isinstance(e, CustomIcon)]

    def legacy_icons(self) -> List[LegacyIcon]:
        """Return the legacy entries in load order."""
        return [e for e in self._entries if isinstance(e, LegacyIcon)]

    def __len__(self) -> int:
        return len(self._entries)
