"""
File loaders for custom icon definitions.

Reads the legacy `CustomMapIcon.csv` table and the structured
`custom-map-icon.json` document from a `Textures` directory and decodes the
referenced sprite images with Pillow. Per-record problems drop only that
record; unreadable files raise `IconLoadError` for the catalog to log.
"""

import csv
import io
import logging
import re
from pathlib import Path
from typing import Any, List, cast

import orjson
from PIL import Image, UnidentifiedImageError

from ..errors import IconLoadError, SpriteLoadError
from .models import CustomIcon, CustomIconData, LegacyIcon, Sprite, SpriteInfo, parse_int

LEGACY_ICONS_FILE = "CustomMapIcon.csv"
CUSTOM_ICONS_FILE = "custom-map-icon.json"

# Strings are matched first so comment markers inside them survive
_JSON_COMMENT_RE = re.compile(
    r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.DOTALL
)


def strip_json_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments outside of string literals."""
    return _JSON_COMMENT_RE.sub(lambda m: m.group(1) or "", text)


class SpriteLoader:
    """Decodes sprite images referenced by icon definitions."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load(self, textures_dir: Path, info: SpriteInfo) -> Sprite:
        """Load the sprite image located beside the definition file.

        The image is converted to RGBA. When both declared dimensions are
        positive and differ from the image size it is resized to them.

        Raises:
            SpriteLoadError: If the file is missing or cannot be decoded
        """
        image_path = textures_dir / info.file
        if not info.file or not image_path.is_file():
            raise SpriteLoadError(f"Sprite file not found: {image_path}")

        try:
            with Image.open(image_path) as img:
                image = img.convert("RGBA")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise SpriteLoadError(f"Cannot decode sprite {image_path}: {e}") from e

        if info.width > 0 and info.height > 0 and image.size != (info.width, info.height):
            self.logger.debug(
                f"Resizing {info.file} from {image.size} to {(info.width, info.height)}"
            )
            image = image.resize((info.width, info.height))

        return Sprite(file=info.file, image=image)


class LegacyIconLoader:
    """Loads legacy icon rows ``name,file,width,height`` from a CSV table."""

    def __init__(self, sprite_loader: SpriteLoader | None = None):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.sprite_loader = sprite_loader or SpriteLoader()

    @staticmethod
    def parse_rows(text: str) -> dict[str, SpriteInfo]:
        """Parse the table body into name -> sprite info.

        The header row is skipped and short rows are ignored. A name that
        repeats keeps its first position and takes the values of its last row.
        """
        sprites: dict[str, SpriteInfo] = {}
        reader = csv.reader(io.StringIO(text))
        next(reader, None)
        for row in reader:
            if len(row) < 4:
                continue
            sprites[row[0]] = SpriteInfo(
                file=row[1].strip(),
                width=parse_int(row[2]),
                height=parse_int(row[3]),
            )
        return sprites

    def load(self, textures_dir: Path) -> List[LegacyIcon]:
        """Load all legacy icons defined in a textures directory.

        Returns an empty list when the directory has no legacy table.

        Raises:
            IconLoadError: If the table exists but cannot be read
        """
        table = textures_dir / LEGACY_ICONS_FILE
        if not table.is_file():
            return []

        self.logger.info(f"Load custom icon data from {table}")
        try:
            rows = self.parse_rows(table.read_text(encoding="utf-8-sig"))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise IconLoadError(table, str(e)) from e

        icons: List[LegacyIcon] = []
        for name, info in rows.items():
            try:
                sprite = self.sprite_loader.load(textures_dir, info)
            except SpriteLoadError as e:
                self.logger.warning(f"Skip custom icon for {name}: {e}")
                continue

            icons.append(LegacyIcon(name=name, sprite=sprite, source=str(table)))
            self.logger.info(f"* Loaded custom icon for {name}")

        return icons


class CustomIconLoader:
    """Loads structured icon records from a JSON document with comments."""

    def __init__(self, sprite_loader: SpriteLoader | None = None):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.sprite_loader = sprite_loader or SpriteLoader()

    @staticmethod
    def parse_document(raw: bytes) -> List[Any]:
        """Parse a structured document into its list of raw records.

        Raises:
            ValueError: If the document is not a JSON array
        """
        text = strip_json_comments(raw.decode("utf-8-sig"))
        data = orjson.loads(text)
        if not isinstance(data, list):
            raise ValueError("document must be a JSON array of icon records")
        return cast(List[Any], data)

    def load(self, textures_dir: Path) -> List[CustomIcon]:
        """Load all structured icons defined in a textures directory.

        Returns an empty list when the directory has no document.

        Raises:
            IconLoadError: If the document exists but cannot be read or parsed
        """
        document = textures_dir / CUSTOM_ICONS_FILE
        if not document.is_file():
            return []

        self.logger.info(f"Load custom icon data from {document}")
        try:
            with document.open("rb") as f:
                records = self.parse_document(f.read())
        except (OSError, UnicodeDecodeError, ValueError) as e:
            # orjson.JSONDecodeError is a ValueError
            raise IconLoadError(document, str(e)) from e

        icons: List[CustomIcon] = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                self.logger.warning(f"Skip record #{index} in {document}: not an object")
                continue

            try:
                data = CustomIconData.from_dict(cast(dict[str, Any], record))
                sprite = self.sprite_loader.load(textures_dir, data.sprite)
            except (ValueError, SpriteLoadError) as e:
                self.logger.warning(f"Skip record #{index} in {document}: {e}")
                continue

            icons.append(
                CustomIcon(
                    target=data.target,
                    sprite=sprite,
                    options=data.options,
                    source=str(document),
                )
            )
            self.logger.info(f"* Loaded custom icon data for {data.target.name}")

        return icons
