"""Tests for the settings manager."""

import json

import pytest

from nova.config import DEFAULT_CONFIG, Config


@pytest.fixture
def nova_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    monkeypatch.setenv("NOVA_HOME", str(home))
    return home


@pytest.mark.asyncio
async def test_load_without_file_returns_defaults(nova_home):
    cfg = await Config.load()

    assert cfg.data == DEFAULT_CONFIG
    assert cfg.path == nova_home / "config.json"
    assert cfg.db_path == nova_home / "nova.db"


@pytest.mark.asyncio
async def test_user_values_merge_over_defaults(nova_home):
    nova_home.mkdir()
    (nova_home / "config.json").write_text(json.dumps({"editor": {"command": "nvim"}}))

    cfg = await Config.load()

    assert cfg.get("editor.command") == "nvim"
    assert cfg.get("editor.temp_suffix") == ".temp"
    assert cfg.get("logging.level") == "WARNING"


@pytest.mark.asyncio
async def test_malformed_file_falls_back_to_defaults(nova_home):
    nova_home.mkdir()
    (nova_home / "config.json").write_text("{not json")

    cfg = await Config.load()

    assert cfg.data == DEFAULT_CONFIG


@pytest.mark.asyncio
async def test_set_and_save_round_trip(nova_home, tmp_path):
    cfg = await Config.load()
    cfg.set("store.path", str(tmp_path / "custom.db"))
    cfg.set("editor.keep_temp_on_error", True)
    await cfg.save()

    reloaded = await Config.load()
    assert reloaded.db_path == tmp_path / "custom.db"
    assert reloaded.get("editor.keep_temp_on_error") is True


def test_get_missing_key_returns_default():
    cfg = Config({"a": {"b": 1}})
    assert cfg.get("a.b") == 1
    assert cfg.get("a.c", "x") == "x"
    assert cfg.get("a.b.c") is None


def test_set_creates_intermediate_sections():
    cfg = Config({})
    cfg.set("editor.command", "vim")
    assert cfg.data == {"editor": {"command": "vim"}}
