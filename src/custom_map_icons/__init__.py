"""
custom_map_icons: data-driven custom icons for a game minimap.

Loads icon definitions from texture directories, registers them with the
host minimap and resolves the icon to use when a pin is placed for a target.
"""

__version__ = "0.1.0"
__author__ = "custom_map_icons Contributors"

# Core service imports
from .service import MapIconService
from .l10n import Localization
from .utils.logging_config import setup_logging

# Main data models
from .icons.models import MetaData, PinningTarget, Options, ResolvedIcon
from .minimap.models import PinType, PinData, Vector3, DEFAULT_PIN_TYPE
from .minimap.host import MinimapHost, InMemoryMinimap, ReflectiveMinimapAdapter
from .minimap.pins import PinManager
from .errors import (
    MapIconError, IconLoadError, SpriteLoadError,
    RegistrationError, HostUnavailableError
)

__all__ = [
    # Services
    'MapIconService',
    'PinManager',
    'Localization',

    # Logging
    'setup_logging',

    # Data models
    'MetaData',
    'PinningTarget',
    'Options',
    'ResolvedIcon',
    'PinType',
    'PinData',
    'Vector3',
    'DEFAULT_PIN_TYPE',

    # Host adapters
    'MinimapHost',
    'InMemoryMinimap',
    'ReflectiveMinimapAdapter',

    # Errors
    'MapIconError',
    'IconLoadError',
    'SpriteLoadError',
    'RegistrationError',
    'HostUnavailableError',
]
