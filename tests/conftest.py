"""Shared fixtures for custom_map_icons tests."""

from pathlib import Path
from typing import Callable, Optional

import pytest
from PIL import Image

from custom_map_icons.icons.catalog import IconCatalog
from custom_map_icons.icons.models import CustomIcon, LegacyIcon, MetaData, Options, PinningTarget, Sprite
from custom_map_icons.minimap.host import InMemoryMinimap


def write_png(path: Path, size: tuple[int, int] = (32, 32), color: str = "red") -> Path:
    """Write a small RGBA PNG to path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", size, color).save(path)
    return path


TexturesFactory = Callable[..., Path]


@pytest.fixture
def make_textures(tmp_path: Path) -> TexturesFactory:
    """Factory creating a `Textures` directory with definition files and images.

    Usage: make_textures("mod_a", csv=..., json=..., images=["a.png"])
    """

    def factory(
        name: str = "default",
        csv: Optional[str] = None,
        json: Optional[str] = None,
        images: tuple[str, ...] | list[str] = (),
    ) -> Path:
        textures = tmp_path / name / "Textures"
        textures.mkdir(parents=True, exist_ok=True)
        if csv is not None:
            (textures / "CustomMapIcon.csv").write_text(csv, encoding="utf-8")
        if json is not None:
            (textures / "custom-map-icon.json").write_text(json, encoding="utf-8")
        for image in images:
            write_png(textures / image)
        return textures

    return factory


@pytest.fixture
def sprite() -> Sprite:
    """A decoded 32x32 sprite."""
    return Sprite(file="icon.png", image=Image.new("RGBA", (32, 32)))


@pytest.fixture
def host() -> InMemoryMinimap:
    """An in-memory host minimap with the built-in icon types."""
    return InMemoryMinimap()


class CatalogBuilder:
    """Builds an `IconCatalog` in memory without touching the filesystem."""

    def __init__(self, sprite: Sprite):
        self.catalog = IconCatalog()
        self.sprite = sprite
        self.next_pin_type = 100

    def _stamp(self, entry):
        entry.pin_type = self.next_pin_type
        self.next_pin_type += 1
        self.catalog.add_entries([entry])
        return entry

    def custom(self, name: str, level: Optional[int] = None, hide_name_tag: bool = False) -> CustomIcon:
        metadata = MetaData(level=level) if level is not None else None
        return self._stamp(
            CustomIcon(
                target=PinningTarget(name=name, metadata=metadata),
                sprite=self.sprite,
                options=Options(hide_name_tag=hide_name_tag),
            )
        )

    def legacy(self, name: str) -> LegacyIcon:
        return self._stamp(LegacyIcon(name=name, sprite=self.sprite))


@pytest.fixture
def builder(sprite: Sprite) -> CatalogBuilder:
    """In-memory catalog builder assigning icon types from 100 upwards."""
    return CatalogBuilder(sprite)
