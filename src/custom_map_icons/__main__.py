"""
Command line preview for custom map icons.
Usage: python -m custom_map_icons [options] {list,resolve} ...

Loads the configured icon sources into an in-memory minimap and prints the
registered catalog or the icon a target resolves to.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .errors import MapIconError
from .icons.models import MetaData, PinningTarget
from .l10n import Localization
from .minimap.host import InMemoryMinimap
from .service import MapIconService
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="custom_map_icons",
        description="Preview custom minimap icon definitions and resolution.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--settings", type=Path, help="INI settings file to use")
    parser.add_argument("--textures", type=Path, help="bundled textures directory")
    parser.add_argument("--plugins", type=Path, help="directory of mods with Textures folders")
    parser.add_argument("--injected", type=Path, help="final override textures directory")
    parser.add_argument("--translations", type=Path, help="JSON translations file")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="print every registered icon as JSON")

    resolve = commands.add_parser("resolve", help="resolve the icon for a target name")
    resolve.add_argument("name", help="internal target name, e.g. $piece_deposit_copper")
    resolve.add_argument("--level", type=int, help="target metadata level")
    resolve.add_argument(
        "--explain", action="store_true", help="also list every matching custom entry"
    )
    return parser


def build_service(args: argparse.Namespace, settings: AppSettings) -> MapIconService:
    """Create the service from settings, with command line overrides applied."""
    host = InMemoryMinimap()
    if not (args.textures or args.plugins or args.injected or args.translations):
        return MapIconService.from_settings(settings, host)

    l10n = Localization()
    translations = args.translations or settings.translations_file
    if translations:
        l10n.load_file(translations)

    return MapIconService(
        host=host,
        l10n=l10n,
        default_textures_dir=args.textures or settings.paths.default_textures_dir,
        plugins_path=args.plugins or settings.plugins_path,
        injected_textures_dir=args.injected or settings.paths.injected_textures_dir,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main command line entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    try:
        settings = AppSettings(settings_file=args.settings)
        setup_logging(settings)

        service = build_service(args, settings)
        service.initialize()

        if args.command == "list":
            print(service.describe().decode("utf-8"))
            return 0

        metadata = MetaData(level=args.level) if args.level is not None else None
        target = PinningTarget(name=args.name, metadata=metadata)
        icon = service.resolve(target)
        print(f"{target.name}: icon={icon.pin_type} hide_name_tag={icon.options.hide_name_tag}")

        if args.explain:
            for entry in service.resolver.matching_entries(target):
                level = entry.metadata.level if entry.metadata else "-"
                print(f"  candidate: icon={entry.pin_type} level={level} source={entry.source}")
        return 0

    except ConfigError as e:
        logger.error(f"Configuration validation failed: {e}")
        return 1
    except (MapIconError, OSError, ValueError):
        logger.exception("Unhandled error in custom_map_icons")
        return 1


if __name__ == "__main__":
    sys.exit(main())
