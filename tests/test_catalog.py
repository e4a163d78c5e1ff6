"""Tests for the icon catalog."""

import logging

from custom_map_icons.icons.catalog import IconCatalog
from custom_map_icons.icons.models import CustomIcon, LegacyIcon

LEGACY_TABLE = "name,file,width,height\nCopper,copper.png,32,32\n"


def structured(*names: str, image: str = "icon.png") -> str:
    records = ",".join(
        f'{{"target": {{"name": "{name}"}}, "sprite": {{"file": "{image}"}}}}' for name in names
    )
    return f"[{records}]"


class TestIconCatalog:
    """Loading order and partial-failure tolerance."""

    def test_load_defaults(self, make_textures) -> None:
        textures = make_textures(json=structured("A", "B"), images=["icon.png"])
        catalog = IconCatalog(textures)

        assert catalog.load_defaults() == 2
        assert [e.name for e in catalog.all_entries()] == ["A", "B"]
        assert catalog.loaded_sources == [textures]

    def test_load_defaults_without_directory(self) -> None:
        catalog = IconCatalog()

        assert catalog.load_defaults() == 0
        assert len(catalog) == 0

    def test_legacy_loaded_before_structured_within_directory(self, make_textures) -> None:
        textures = make_textures(
            csv=LEGACY_TABLE, json=structured("A"), images=["icon.png", "copper.png"]
        )
        catalog = IconCatalog()
        catalog.load_overrides(textures)

        entries = catalog.all_entries()
        assert isinstance(entries[0], LegacyIcon)
        assert isinstance(entries[1], CustomIcon)
        assert [e.name for e in catalog.legacy_icons()] == ["Copper"]
        assert [e.name for e in catalog.custom_icons()] == ["A"]

    def test_mod_directories_loaded_in_name_order(self, tmp_path, make_textures) -> None:
        make_textures("plugins/zeta", json=structured("Z"), images=["icon.png"])
        make_textures("plugins/alpha", json=structured("A"), images=["icon.png"])
        (tmp_path / "plugins" / "no_textures").mkdir()
        (tmp_path / "plugins" / "readme.txt").write_text("not a mod")

        catalog = IconCatalog()
        added = catalog.load_mod_directories(tmp_path / "plugins")

        assert added == 2
        assert [e.name for e in catalog.all_entries()] == ["A", "Z"]

    def test_missing_plugins_path(self, tmp_path) -> None:
        catalog = IconCatalog()

        assert catalog.load_mod_directories(tmp_path / "nope") == 0
        assert catalog.load_mod_directories(None) == 0

    def test_missing_directory_is_skipped(self, tmp_path) -> None:
        catalog = IconCatalog()

        assert catalog.load_overrides(tmp_path / "nope") == 0
        assert catalog.load_overrides(None) == 0

    def test_malformed_file_does_not_stop_other_sources(self, make_textures, caplog) -> None:
        """One bad document is logged as an error, everything else loads."""
        bad = make_textures("bad", csv=LEGACY_TABLE, json="[ {", images=["copper.png"])
        good = make_textures("good", json=structured("B"), images=["icon.png"])
        catalog = IconCatalog()

        with caplog.at_level(logging.ERROR):
            catalog.load_overrides(bad)
            catalog.load_overrides(good)

        assert [e.name for e in catalog.all_entries()] == ["Copper", "B"]
        assert any(
            r.levelno == logging.ERROR and "custom-map-icon.json" in r.getMessage()
            for r in caplog.records
        )

    def test_clear(self, make_textures) -> None:
        textures = make_textures(json=structured("A"), images=["icon.png"])
        catalog = IconCatalog(textures)
        catalog.load_defaults()

        catalog.clear()

        assert catalog.all_entries() == []
        assert catalog.loaded_sources == []

    def test_all_entries_returns_copy(self, make_textures) -> None:
        textures = make_textures(json=structured("A"), images=["icon.png"])
        catalog = IconCatalog(textures)
        catalog.load_defaults()

        catalog.all_entries().clear()

        assert len(catalog) == 1
