"""nova settings — view, edit, and reset nova's own settings."""

from __future__ import annotations

import asyncio
import copy
import json

import click
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from nova.cli.common import CliState, console, fail, load_settings
from nova.config.config import Config
from nova.config.defaults import DEFAULT_CONFIG
from nova.errors import NovaError
from nova.registry import EditorLauncher, resolve_editor_command


async def _show_settings(state: CliState) -> None:
    """Pretty-print the current settings."""
    cfg = await load_settings(state)
    raw = json.dumps(cfg.data, indent=2, default=str)
    syntax = Syntax(raw, "json", theme="monokai", line_numbers=True)
    console.print(Panel(syntax, title=str(cfg.path), border_style="bright_cyan"))


async def _open_settings(state: CliState) -> None:
    """Open the settings file in the user's editor."""
    cfg = await load_settings(state)
    await cfg.save()  # make sure the file exists with defaults
    try:
        launcher = EditorLauncher(resolve_editor_command(cfg.get("editor.command")))
        await launcher.edit(cfg.path)
    except NovaError as exc:
        fail(exc)


async def _set_value(state: CliState, key: str, value: str) -> None:
    """Set a single settings value."""
    cfg = await load_settings(state)

    # Try to parse as JSON (for booleans, numbers, null)
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        parsed = value

    cfg.set(key, parsed)
    await cfg.save()
    console.print(f"[green]✓[/green] set [bold]{escape(key)}[/bold] = {escape(repr(parsed))}")


async def _reset_settings() -> None:
    """Reset settings to defaults."""
    cfg = Config(copy.deepcopy(DEFAULT_CONFIG))
    await cfg.save()
    console.print("[green]✓[/green] settings reset to defaults.")


@click.command("settings")
@click.argument("action", required=False, default=None)
@click.argument("args", nargs=-1)
@click.pass_obj
def settings_cmd(state: CliState, action: str | None, args: tuple[str, ...]) -> None:
    """View or edit nova's settings.

    \b
    Actions:
      (none)    open settings in $EDITOR
      edit      same as (none)
      show      pretty-print current settings
      set K V   set a settings key
      reset     restore defaults
      path      print the settings file location
    """
    if action is None or action == "edit":
        asyncio.run(_open_settings(state))
    elif action == "show":
        asyncio.run(_show_settings(state))
    elif action == "set":
        if len(args) < 2:
            console.print("[red]usage:[/red] nova settings set <key> <value>")
            raise SystemExit(1)
        asyncio.run(_set_value(state, args[0], " ".join(args[1:])))
    elif action == "reset":
        asyncio.run(_reset_settings())
    elif action == "path":
        click.echo(str(Config.config_path()))
    else:
        console.print(f"[red]unknown action:[/red] {escape(action)}")
        raise SystemExit(1)
