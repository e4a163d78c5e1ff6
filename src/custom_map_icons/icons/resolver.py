"""
Custom icon resolution.

Picks the icon type and display options for a pinning target. Structured
entries are tried first, ordered by metadata specificity; legacy entries are
the fallback; the default icon is used when nothing matches. Resolution is a
pure function of the target and the catalog contents at call time.
"""

import logging
from typing import Iterable, Optional

from ..l10n import Localization
from .catalog import IconCatalog
from .models import DEFAULT_ICON, CustomIcon, MetaData, Options, PinningTarget, ResolvedIcon


class IconResolver:
    """Resolves pinning targets against an `IconCatalog`."""

    def __init__(self, catalog: IconCatalog, l10n: Optional[Localization] = None):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.catalog = catalog
        self.l10n = l10n or Localization()

    def is_name_match(self, pattern: str, internal_name: str, display_name: str) -> bool:
        """Check a catalog name against a target.

        Internal-form patterns must equal the internal name exactly. Display
        patterns match as a case-insensitive substring of the display name.
        """
        if self.l10n.is_internal_name(pattern):
            return internal_name == pattern
        return pattern.casefold() in display_name.casefold()

    @staticmethod
    def is_metadata_match(constraint: Optional[MetaData], metadata: Optional[MetaData]) -> bool:
        """An absent constraint matches anything, otherwise levels must be equal."""
        if constraint is None:
            return True
        if metadata is None:
            return False
        return constraint.level == metadata.level

    def resolve(self, target: PinningTarget) -> ResolvedIcon:
        """Return the icon type and options to use for target."""
        display_name = self.l10n.translate_internal_name_only(target.name)

        icon = self._resolve_custom(target, display_name)
        if icon is not None:
            return ResolvedIcon(pin_type=icon.pin_type, options=icon.options)

        pin_type = self._resolve_legacy(target.name, display_name)
        if pin_type is not None:
            return ResolvedIcon(pin_type=pin_type, options=Options())

        self.logger.debug(f"No custom icon matches {target.name}, using default")
        return DEFAULT_ICON

    def _resolve_custom(self, target: PinningTarget, display_name: str) -> Optional[CustomIcon]:
        icons = self.catalog.custom_icons()
        if not icons:
            return None

        candidates = [
            icon
            for icon in icons
            if self.is_name_match(icon.target.name, target.name, display_name)
            and self.is_metadata_match(icon.target.metadata, target.metadata)
        ]
        if not candidates:
            return None

        # sorted() is stable, catalog order breaks remaining ties
        candidates.sort(key=_specificity_key)
        return candidates[0]

    def _resolve_legacy(self, internal_name: str, display_name: str) -> Optional[int]:
        for icon in self.catalog.legacy_icons():
            if self.is_name_match(icon.name, internal_name, display_name):
                return icon.pin_type
        return None

    def matching_entries(self, target: PinningTarget) -> Iterable[CustomIcon]:
        """Yield every structured entry whose name and metadata match target.

        Catalog order, no specificity ordering. Meant for diagnostics.
        """
        display_name = self.l10n.translate_internal_name_only(target.name)
        for icon in self.catalog.custom_icons():
            if self.is_name_match(icon.target.name, target.name, display_name) and \
                    self.is_metadata_match(icon.target.metadata, target.metadata):
                yield icon


def _specificity_key(icon: CustomIcon) -> tuple[bool, int]:
    metadata = icon.target.metadata
    if metadata is None:
        return (True, 0)
    return (False, metadata.level)
