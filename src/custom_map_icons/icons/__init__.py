"""
Custom icon package.

Provides loading of icon definitions (legacy CSV tables and structured JSON
documents), registration of icons with the host minimap and resolution of
the icon to use for a pinning target.
"""

from .models import (
    MetaData,
    PinningTarget,
    SpriteInfo,
    Options,
    CustomIconData,
    Sprite,
    LegacyIcon,
    CustomIcon,
    IconEntry,
    ResolvedIcon,
    DEFAULT_ICON,
    NO_LEVEL,
)
from .loaders import SpriteLoader, LegacyIconLoader, CustomIconLoader
from .catalog import IconCatalog
from .registry import IconRegistry, DEFAULT_VISIBILITY
from .resolver import IconResolver

__all__ = [
    # Data models
    'MetaData',
    'PinningTarget',
    'SpriteInfo',
    'Options',
    'CustomIconData',
    'Sprite',
    'LegacyIcon',
    'CustomIcon',
    'IconEntry',
    'ResolvedIcon',
    'DEFAULT_ICON',
    'NO_LEVEL',

    # Loading
    'SpriteLoader',
    'LegacyIconLoader',
    'CustomIconLoader',
    'IconCatalog',

    # Registration and resolution
    'IconRegistry',
    'DEFAULT_VISIBILITY',
    'IconResolver',
]
