"""Tests for the command line preview tool."""

import logging

import orjson
import pytest

from custom_map_icons.__main__ import main
from custom_map_icons.minimap.models import DEFAULT_PIN_TYPE, PinType
from custom_map_icons.settings import AppSettings

DOCUMENT = """[
  {"target": {"name": "$piece_deposit_copper"}, "sprite": {"file": "copper.png"}},
  {"target": {"name": "copper", "metadata": {"level": 1}},
   "sprite": {"file": "copper.png"}, "options": {"hideNameTag": true}}
]"""


@pytest.fixture
def settings_file(tmp_path):
    """Quiet settings file so the CLI does not install console handlers."""
    path = tmp_path / "settings.ini"
    settings = AppSettings(settings_file=path)
    settings.console_logging = False
    settings.sync()
    return path


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def textures(make_textures):
    return make_textures(json=DOCUMENT, images=["copper.png"])


class TestCli:
    """Subcommands and exit codes."""

    def test_list(self, settings_file, textures, capsys) -> None:
        code = main(["--settings", str(settings_file), "--textures", str(textures), "list"])

        assert code == 0
        listed = orjson.loads(capsys.readouterr().out)
        assert [d["name"] for d in listed] == ["$piece_deposit_copper", "copper"]
        assert listed[0]["pin_type"] == len(PinType)

    def test_resolve(self, settings_file, textures, capsys) -> None:
        code = main(
            ["--settings", str(settings_file), "--textures", str(textures), "resolve", "$piece_deposit_copper"]
        )

        assert code == 0
        assert capsys.readouterr().out.strip() == (
            f"$piece_deposit_copper: icon={len(PinType)} hide_name_tag=False"
        )

    def test_resolve_with_level_and_explain(self, settings_file, textures, tmp_path, capsys) -> None:
        translations = tmp_path / "en.json"
        translations.write_bytes(orjson.dumps({"piece_deposit_copper": "Copper deposit"}))

        code = main(
            [
                "--settings", str(settings_file),
                "--textures", str(textures),
                "--translations", str(translations),
                "resolve", "$piece_deposit_copper", "--level", "1", "--explain",
            ]
        )

        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == f"$piece_deposit_copper: icon={len(PinType) + 1} hide_name_tag=True"
        assert len([line for line in lines if "candidate" in line]) == 2

    def test_resolve_unknown_gets_default(self, settings_file, capsys) -> None:
        code = main(["--settings", str(settings_file), "resolve", "$unknown"])

        assert code == 0
        assert f"icon={DEFAULT_PIN_TYPE}" in capsys.readouterr().out

    def test_invalid_settings_exit_code(self, tmp_path, settings_file) -> None:
        settings = AppSettings(settings_file=settings_file)
        settings.default_resources_path = tmp_path / "missing"
        settings.sync()

        assert main(["--settings", str(settings_file), "list"]) == 1

    def test_missing_translations_exit_code(self, settings_file, tmp_path) -> None:
        code = main(
            ["--settings", str(settings_file), "--translations", str(tmp_path / "none.json"), "list"]
        )

        assert code == 1

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])
