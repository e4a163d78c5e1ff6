"""End-to-end tests for MapIconService."""

import logging

import orjson
import pytest

from custom_map_icons import MapIconService
from custom_map_icons.errors import RegistrationError
from custom_map_icons.icons.models import MetaData, PinningTarget
from custom_map_icons.minimap.host import InMemoryMinimap
from custom_map_icons.minimap.models import DEFAULT_PIN_TYPE, PinType
from custom_map_icons.settings import AppSettings, ConfigError

DEFAULT_DOCUMENT = """[
  {"target": {"name": "$piece_deposit_copper"}, "sprite": {"file": "copper.png"}},
  {"target": {"name": "$piece_deposit_copper", "metadata": {"level": 2}},
   "sprite": {"file": "copper.png"}, "options": {"hideNameTag": true}}
]"""

MOD_DOCUMENT = """[
  {"target": {"name": "Tin"}, "sprite": {"file": "tin.png"}}
]"""

INJECTED_TABLE = "name,file,width,height\nSilver,silver.png,32,32\n"


@pytest.fixture
def layout(tmp_path, make_textures):
    """Bundled defaults, one mod and an injected override directory."""
    make_textures("default", json=DEFAULT_DOCUMENT, images=["copper.png"])
    make_textures("plugins/tin_mod", json=MOD_DOCUMENT, images=["tin.png"])
    make_textures("injected", csv=INJECTED_TABLE, images=["silver.png"])
    return tmp_path


@pytest.fixture
def service(layout, host) -> MapIconService:
    return MapIconService(
        host=host,
        default_textures_dir=layout / "default" / "Textures",
        plugins_path=layout / "plugins",
        injected_textures_dir=layout / "injected" / "Textures",
    )


class TestInitialize:
    """Loading and registration."""

    def test_loads_in_precedence_order(self, service, host) -> None:
        service.initialize()

        names = [entry.name for entry in service.catalog.all_entries()]
        assert names == ["$piece_deposit_copper", "$piece_deposit_copper", "Tin", "Silver"]
        assert service.initialized is True

    def test_registers_every_entry(self, service, host) -> None:
        service.initialize()

        base = len(PinType)
        assert [e.pin_type for e in service.catalog.all_entries()] == [base, base + 1, base + 2, base + 3]
        assert len(host.visible_icon_types) == base + 4
        assert len(host.icons) == 4

    def test_second_initialize_is_ignored(self, service, host, caplog) -> None:
        service.initialize()

        with caplog.at_level(logging.WARNING):
            service.initialize()

        assert len(host.visible_icon_types) == len(PinType) + 4
        assert "already initialized" in caplog.text

    def test_no_sources(self, host) -> None:
        service = MapIconService(host=host)
        service.initialize()

        assert len(service.catalog) == 0
        assert host.visible_icon_types == [True] * len(PinType)

    def test_registration_failure_propagates(self, layout) -> None:
        host = InMemoryMinimap(visibility=[True, None])
        service = MapIconService(host=host, default_textures_dir=layout / "default" / "Textures")

        with pytest.raises(RegistrationError):
            service.initialize()

        assert service.initialized is False


class TestResolve:
    """Resolution and pins through the service."""

    def test_resolve(self, service) -> None:
        service.initialize()
        base = len(PinType)

        assert service.resolve(PinningTarget("$piece_deposit_copper")).pin_type == base
        leveled = service.resolve(PinningTarget("$piece_deposit_copper", MetaData(2)))
        assert leveled.pin_type == base + 1
        assert leveled.options.hide_name_tag is True
        assert service.resolve(PinningTarget("Raw silver ore")).pin_type == base + 3
        assert service.resolve(PinningTarget("$unknown")).pin_type == DEFAULT_PIN_TYPE

    def test_pin_for_target(self, service, host) -> None:
        service.initialize()

        pin = service.pins.add_pin_for_target(
            (1, 0, 1), PinningTarget("$piece_deposit_copper", MetaData(2)), "Copper", True
        )

        assert host.pins == [pin]
        assert pin.name == ""

    def test_describe(self, service) -> None:
        service.initialize()

        described = orjson.loads(service.describe())

        assert [d["kind"] for d in described] == ["custom", "custom", "custom", "legacy"]
        assert described[1]["level"] == 2
        assert described[1]["hide_name_tag"] is True
        assert described[3]["name"] == "Silver"
        assert described[3]["file"] == "silver.png"


class TestFromSettings:
    """Building the service from AppSettings."""

    def test_from_settings(self, layout, host, tmp_path) -> None:
        translations = tmp_path / "en.json"
        translations.write_bytes(orjson.dumps({"piece_deposit_tin": "Tin deposit"}))

        settings = AppSettings(settings_file=tmp_path / "settings.ini")
        settings.default_resources_path = layout / "default"
        settings.plugins_path = layout / "plugins"
        settings.injected_resources_path = layout / "injected"
        settings.translations_file = translations

        service = MapIconService.from_settings(settings, host)
        service.initialize()

        assert len(service.catalog) == 4
        tin = service.resolve(PinningTarget("$piece_deposit_tin"))
        assert tin.pin_type == len(PinType) + 2

    def test_invalid_settings_raise(self, host, tmp_path) -> None:
        settings = AppSettings(settings_file=tmp_path / "settings.ini")
        settings.default_resources_path = tmp_path / "missing"

        with pytest.raises(ConfigError):
            MapIconService.from_settings(settings, host)

    def test_bad_translations_are_logged(self, layout, host, tmp_path, caplog) -> None:
        translations = tmp_path / "en.json"
        translations.write_text("{ not json")

        settings = AppSettings(settings_file=tmp_path / "settings.ini")
        settings.default_resources_path = layout / "default"
        settings.translations_file = translations

        with caplog.at_level(logging.ERROR):
            service = MapIconService.from_settings(settings, host)

        assert service.l10n.translations == {}
        assert "Failed to load translations" in caplog.text
