"""
Main service for custom map icons.

`MapIconService` is the context object the embedding application builds once
at startup. It owns the icon catalog and registry, wires them into the host
minimap and exposes resolution and the pin facade.
"""

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

import orjson

from .icons.catalog import IconCatalog
from .icons.models import PinningTarget, ResolvedIcon
from .icons.registry import IconRegistry
from .icons.resolver import IconResolver
from .errors import RegistrationError
from .l10n import Localization
from .minimap.host import MinimapHost
from .minimap.pins import PinManager
from .settings.types import ConfigError

if TYPE_CHECKING:
    from .settings import AppSettings


class MapIconService:
    """Loads, registers and resolves custom map icons.

    Loading precedence is fixed: bundled defaults, then every mod directory
    under plugins_path, then the injected override directory.
    """

    def __init__(
        self,
        host: MinimapHost,
        l10n: Optional[Localization] = None,
        default_textures_dir: Optional[str | Path] = None,
        plugins_path: Optional[str | Path] = None,
        injected_textures_dir: Optional[str | Path] = None,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.host = host
        self.l10n = l10n or Localization()
        self.plugins_path = Path(plugins_path) if plugins_path else None
        self.injected_textures_dir = Path(injected_textures_dir) if injected_textures_dir else None

        self.catalog = IconCatalog(default_textures_dir)
        self.registry = IconRegistry(host)
        self.resolver = IconResolver(self.catalog, self.l10n)
        self.pins = PinManager(host, self.resolver)

        self.initialized = False

    @classmethod
    def from_settings(cls, settings: "AppSettings", host: MinimapHost) -> "MapIconService":
        """Build a service from application settings.

        Raises:
            ConfigError: If the settings fail validation
        """
        validation = settings.validate()
        for warning in validation.warnings:
            logging.getLogger(__name__).warning(f"  {warning}")
        if not validation.is_valid:
            raise ConfigError("; ".join(validation.errors))

        l10n = Localization()
        translations = settings.translations_file
        if translations and translations.is_file():
            try:
                l10n.load_file(translations)
            except (OSError, ValueError) as e:
                # orjson.JSONDecodeError is a ValueError
                logging.getLogger(__name__).error(
                    f"Failed to load translations: {translations}\n{e!r}"
                )

        return cls(
            host=host,
            l10n=l10n,
            default_textures_dir=settings.paths.default_textures_dir,
            plugins_path=settings.plugins_path,
            injected_textures_dir=settings.paths.injected_textures_dir,
        )

    def initialize(self) -> None:
        """Load every icon source and register the icons with the host.

        Runs once; further calls are ignored.

        Raises:
            RegistrationError: If the host minimap cannot be extended
        """
        if self.initialized:
            self.logger.warning("Custom map icons already initialized, skipping")
            return

        self.logger.info("Loading custom map icons...")
        self.catalog.clear()
        self.catalog.load_defaults()
        self.catalog.load_mod_directories(self.plugins_path)
        self.catalog.load_overrides(self.injected_textures_dir)

        entries = self.catalog.all_entries()
        try:
            self.registry.register_all(entries)
        except RegistrationError:
            self.logger.exception("Failed to register custom map icons with the host minimap")
            raise
        self.initialized = True

        self.logger.info(
            f"Custom map icons ready: {len(self.catalog.custom_icons())} custom, "
            f"{len(self.catalog.legacy_icons())} legacy, "
            f"from {len(self.catalog.loaded_sources)} directories"
        )

    def resolve(self, target: PinningTarget) -> ResolvedIcon:
        """Return the icon type and options for target."""
        return self.resolver.resolve(target)

    def describe(self) -> bytes:
        """Serialize the registered catalog as JSON for diagnostics."""
        return orjson.dumps(
            [
                {
                    "pin_type": entry.pin_type,
                    "kind": entry.kind,
                    "name": entry.name,
                    "level": entry.metadata.level if entry.metadata else None,
                    "file": entry.sprite.file,
                    "hide_name_tag": entry.options.hide_name_tag,
                    "source": entry.source,
                }
                for entry in self.catalog.all_entries()
            ],
            option=orjson.OPT_INDENT_2,
        )
