"""Tests for editor resolution and the subprocess launcher."""

import sys

import pytest

from nova.errors import EditorError
from nova.registry import EditorLauncher, resolve_editor_command


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)


def test_setting_wins_over_environment(clean_env, monkeypatch):
    monkeypatch.setenv("VISUAL", "emacs")
    assert resolve_editor_command("nvim -u NONE") == ["nvim", "-u", "NONE"]


def test_setting_may_be_a_list(clean_env):
    assert resolve_editor_command(["code", "--wait"]) == ["code", "--wait"]


def test_visual_before_editor(clean_env, monkeypatch):
    monkeypatch.setenv("VISUAL", "emacs")
    monkeypatch.setenv("EDITOR", "nano")
    assert resolve_editor_command(None) == ["emacs"]


def test_editor_variable(clean_env, monkeypatch):
    monkeypatch.setenv("EDITOR", "code --wait")
    assert resolve_editor_command(None) == ["code", "--wait"]


def test_blank_values_fall_through_to_vi(clean_env, monkeypatch):
    monkeypatch.setenv("EDITOR", "   ")
    assert resolve_editor_command("") == ["vi"]


@pytest.mark.asyncio
async def test_launcher_runs_command_on_file(tmp_path):
    script = tmp_path / "append.py"
    script.write_text(
        "import sys\n"
        "with open(sys.argv[1], 'a') as f:\n"
        "    f.write('edited\\n')\n"
    )
    target = tmp_path / "file.temp"
    target.write_text("start\n")

    await EditorLauncher([sys.executable, str(script)]).edit(target)

    assert target.read_text() == "start\nedited\n"


@pytest.mark.asyncio
async def test_launcher_nonzero_exit_raises(tmp_path):
    launcher = EditorLauncher([sys.executable, "-c", "import sys; sys.exit(3)"])

    with pytest.raises(EditorError) as exc_info:
        await launcher.edit(tmp_path / "x.temp")
    assert exc_info.value.stage == "wait editor"
    assert exc_info.value.returncode == 3


@pytest.mark.asyncio
async def test_launcher_missing_program_raises(tmp_path):
    launcher = EditorLauncher([str(tmp_path / "no-such-editor")])

    with pytest.raises(EditorError) as exc_info:
        await launcher.edit(tmp_path / "x.temp")
    assert exc_info.value.stage == "spawn editor"
    assert isinstance(exc_info.value.cause, OSError)


@pytest.mark.parametrize("configured", [5, True, {"cmd": "vim"}, ["vim", 3]])
def test_non_string_setting_raises(clean_env, configured):
    with pytest.raises(EditorError) as exc_info:
        resolve_editor_command(configured)
    assert exc_info.value.stage == "resolve editor"


def test_empty_list_setting_falls_through(clean_env, monkeypatch):
    monkeypatch.setenv("EDITOR", "nano")
    assert resolve_editor_command([]) == ["nano"]


def test_unbalanced_quotes_raise(clean_env, monkeypatch):
    monkeypatch.setenv("EDITOR", "'vim")

    with pytest.raises(EditorError) as exc_info:
        resolve_editor_command(None)
    assert exc_info.value.stage == "resolve editor"
    assert isinstance(exc_info.value.cause, ValueError)
