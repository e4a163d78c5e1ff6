"""
Registration of custom icons with the host minimap.

Extends the host's visibility table and sprite table once, after all
definitions are loaded, and stamps each catalog entry with its icon type.
"""

import logging
from typing import List, Sequence

from ..minimap.host import MinimapHost
from ..errors import RegistrationError
from .models import IconEntry

# Visibility of newly appended icon slots
DEFAULT_VISIBILITY = True


class IconRegistry:
    """Assigns runtime icon types above the host's built-in range."""

    def __init__(self, host: MinimapHost, default_visibility: bool = DEFAULT_VISIBILITY):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.host = host
        self.default_visibility = default_visibility
        self.registered: List[IconEntry] = []

    def register_all(self, entries: Sequence[IconEntry]) -> List[int]:
        """Register entries in order and return their icon types.

        Entry j receives ``original_length + j``. Calling with no entries
        leaves the host untouched. On failure the visibility table is
        restored and no entry is stamped.

        Raises:
            RegistrationError: If the host tables are missing or malformed
        """
        if not entries:
            return []

        self.host.ensure_ready()
        table = self.host.get_visibility_table()
        if not all(isinstance(v, bool) for v in table):
            raise RegistrationError("Host visibility table holds non-boolean values")

        original_size = len(table)
        expanded = list(table) + [self.default_visibility] * len(entries)
        self.host.set_visibility_table(expanded)

        pin_types = list(range(original_size, original_size + len(entries)))
        try:
            for pin_type, entry in zip(pin_types, entries):
                self.host.add_sprite(pin_type, entry.sprite)
        except RegistrationError:
            self.host.set_visibility_table(table)
            raise

        self.logger.info(f"Visible icon types expanded: {original_size} -> {len(expanded)}")
        for pin_type, entry in zip(pin_types, entries):
            entry.pin_type = pin_type
            self.logger.info(f"Register new sprite data: ({pin_type}, {entry.sprite.file})")

        self.registered.extend(entries)
        return pin_types
