"""
Host minimap package.

Pin models and the adapters used to reach the host's pin store, sprite table
and visibility table. The pin facade lives in `custom_map_icons.minimap.pins`.
"""

from .models import PinType, PinData, SpriteData, Vector3, DEFAULT_PIN_TYPE, distance_xz
from .host import MinimapHost, InMemoryMinimap, ReflectiveMinimapAdapter

__all__ = [
    'PinType',
    'PinData',
    'SpriteData',
    'Vector3',
    'DEFAULT_PIN_TYPE',
    'distance_xz',
    'MinimapHost',
    'InMemoryMinimap',
    'ReflectiveMinimapAdapter',
]
