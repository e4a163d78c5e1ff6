"""
Data models for custom map icons.

Contains the dataclasses shared by the loaders, the catalog, the registry
and the resolver. Definition records (`PinningTarget`, `SpriteInfo`,
`Options`) are immutable; catalog entries carry a `pin_type` slot that is
filled exactly once by the registry.
"""

import logging
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, ClassVar, Optional, Union

from PIL import Image

from ..minimap.models import DEFAULT_PIN_TYPE

logger = logging.getLogger(__name__)


# Level value meaning "no level given"
NO_LEVEL = -1


@total_ordering
@dataclass(frozen=True)
class MetaData:
    """Structured target metadata. Orderable by level."""
    level: int = NO_LEVEL

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Optional["MetaData"]:
        """Create MetaData from a JSON dict, or None when absent."""
        if not isinstance(data, dict):
            return None
        try:
            level = int(data.get("level", NO_LEVEL))
        except (TypeError, ValueError):
            level = NO_LEVEL
        return cls(level=level)

    def __lt__(self, other: object) -> bool:
        if other is None:
            return False
        if not isinstance(other, MetaData):
            return NotImplemented
        return self.level < other.level


@dataclass(frozen=True)
class PinningTarget:
    """What a pin is being created for.

    name is the internal (non-localized) name of the object, for example
    ``$piece_deposit_copper``. metadata optionally narrows the match.
    """
    name: str
    metadata: Optional[MetaData] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PinningTarget":
        """Create PinningTarget from the `target` object of a JSON record."""
        return cls(
            name=str(data.get("name") or ""),
            metadata=MetaData.from_dict(data.get("metadata")),
        )


@dataclass(frozen=True)
class SpriteInfo:
    """Reference to a sprite image beside its definition file."""
    file: str
    width: int = 0
    height: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SpriteInfo":
        """Create SpriteInfo from JSON dict. Bad sizes become 0."""
        return cls(
            file=str(data.get("file") or ""),
            width=parse_int(data.get("width")),
            height=parse_int(data.get("height")),
        )


@dataclass(frozen=True)
class Options:
    """Display options applied to pins using an icon."""
    hide_name_tag: bool = False

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "Options":
        """Create Options from a JSON dict. Non-boolean flags fall back to defaults."""
        if not isinstance(data, dict):
            return cls()
        hide_name_tag = data.get("hideNameTag", False)
        if not isinstance(hide_name_tag, bool):
            logger.warning(f"Ignoring non-boolean hideNameTag value: {hide_name_tag!r}")
            hide_name_tag = False
        return cls(hide_name_tag=hide_name_tag)


@dataclass(frozen=True)
class CustomIconData:
    """One record of a structured `custom-map-icon.json` document."""
    target: PinningTarget
    sprite: SpriteInfo
    options: Options = Options()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CustomIconData":
        """Create CustomIconData from a raw JSON record.

        Raises:
            ValueError: If the record has no target name or no sprite file
        """
        target_raw = data.get("target")
        sprite_raw = data.get("sprite")
        if not isinstance(target_raw, dict) or not target_raw.get("name"):
            raise ValueError("record has no target name")
        if not isinstance(sprite_raw, dict) or not sprite_raw.get("file"):
            raise ValueError(f"record for {target_raw['name']} has no sprite file")

        return cls(
            target=PinningTarget.from_dict(target_raw),
            sprite=SpriteInfo.from_dict(sprite_raw),
            options=Options.from_dict(data.get("options")),
        )


@dataclass
class Sprite:
    """Decoded sprite ready to hand over to the host."""
    file: str
    image: Image.Image

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size


@dataclass(eq=False)
class LegacyIcon:
    """Catalog entry from a legacy `CustomMapIcon.csv` table.

    Matches on name only and always uses default options.
    """
    kind: ClassVar[str] = "legacy"

    name: str
    sprite: Sprite
    source: str = ""
    pin_type: int = DEFAULT_PIN_TYPE
    options: Options = field(default_factory=Options)

    @property
    def metadata(self) -> Optional[MetaData]:
        return None


@dataclass(eq=False)
class CustomIcon:
    """Catalog entry from a structured `custom-map-icon.json` document."""
    kind: ClassVar[str] = "custom"

    target: PinningTarget
    sprite: Sprite
    options: Options = field(default_factory=Options)
    source: str = ""
    pin_type: int = DEFAULT_PIN_TYPE

    @property
    def name(self) -> str:
        return self.target.name

    @property
    def metadata(self) -> Optional[MetaData]:
        return self.target.metadata


IconEntry = Union[LegacyIcon, CustomIcon]
"""A catalog entry of either generation."""


@dataclass(frozen=True)
class ResolvedIcon:
    """Result of icon resolution for a target."""
    pin_type: int = DEFAULT_PIN_TYPE
    options: Options = Options()


DEFAULT_ICON = ResolvedIcon()


def parse_int(value: Any) -> int:
    """Parse an integer field, treating anything malformed as 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return 0
