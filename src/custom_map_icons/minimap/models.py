"""
Data models for the host minimap.

Mirrors the minimal shape of the host's pin store: built-in icon types,
3-D positions and pin records. No host access or I/O lives here.
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, NamedTuple, Sequence


class PinType(IntEnum):
    """Built-in icon types of the host minimap.

    Values are indices into the host's sprite and visibility tables. Custom
    icons are assigned identifiers above this range at registration time.
    """
    Icon0 = 0
    Icon1 = 1
    Icon2 = 2
    Icon3 = 3
    Death = 4
    Bed = 5
    Icon4 = 6
    Shout = 7
    None_ = 8
    Boss = 9
    Player = 10
    RandomEvent = 11
    Ping = 12
    EventArea = 13


# Icon used when no custom icon matches a target
DEFAULT_PIN_TYPE = int(PinType.Icon3)


class Vector3(NamedTuple):
    """World position. The y axis is height."""
    x: float
    y: float
    z: float


def distance_xz(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the distance between two positions on the horizontal plane."""
    return math.hypot(a[0] - b[0], a[2] - b[2])


@dataclass(eq=False)
class PinData:
    """A single marker on the map overlay.

    Compared by identity: two pins with identical fields are still distinct
    markers in the host store.
    """
    pos: Vector3
    type: int
    name: str = ""
    save: bool = True
    checked: bool = False

    def __repr__(self) -> str:
        return (
            f"PinData(name={self.name!r}, pos=({self.pos.x}, {self.pos.y}, {self.pos.z}), "
            f"icon={self.type}, save={self.save})"
        )


@dataclass
class SpriteData:
    """Host sprite table record mapping an icon type to its image."""
    name: int
    icon: Any
