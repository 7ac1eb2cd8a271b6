"""nova config — list, clone, edit, add and remove stored config files."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from nova.cli.common import CliState, console, fail, load_settings, open_store, report_error
from nova.errors import EditorError, FileIOError, NovaError
from nova.registry import (
    EditorLauncher,
    add_record,
    clone_records,
    edit_record,
    remove_record,
    resolve_editor_command,
    temp_path_for,
)


async def _list(state: CliState) -> None:
    cfg = await load_settings(state)
    with open_store(cfg, state) as store:
        try:
            records = store.list()
        except NovaError as exc:
            fail(exc)

    if not records:
        console.print("[dim]no configs stored.[/dim]")
        return

    table = Table(
        border_style="bright_cyan",
        header_style="bold bright_cyan",
        row_styles=["", "dim"],
    )
    table.add_column("Shorthand", style="bold")
    table.add_column("Filename")
    table.add_column("Content Length", justify="right")
    for record in records:
        table.add_row(
            escape(record.shorthand),
            escape(record.filename),
            str(record.content_length),
        )
    console.print(table)


async def _clone(state: CliState, shorthands: tuple[str, ...], workdir: Path) -> None:
    cfg = await load_settings(state)
    with open_store(cfg, state) as store:
        results = await clone_records(store, shorthands, workdir)

    failed = 0
    for result in results:
        if result.ok:
            console.print(f"[green]✓[/green] wrote to file: {escape(str(result.path))}")
        else:
            failed += 1
            report_error(result.error)
    if failed:
        raise SystemExit(1)


async def _vim(state: CliState, filename: str, workdir: Path) -> None:
    cfg = await load_settings(state)
    try:
        launcher = EditorLauncher(resolve_editor_command(cfg.get("editor.command")))
    except NovaError as exc:
        fail(exc)
    suffix = cfg.get("editor.temp_suffix") or ".temp"
    keep_temp = bool(cfg.get("editor.keep_temp_on_error", False))

    with open_store(cfg, state) as store:
        try:
            result = await edit_record(
                store,
                filename,
                launcher,
                workdir,
                temp_suffix=suffix,
                keep_temp_on_error=keep_temp,
            )
        except NovaError as exc:
            report_error(exc)
            temp = temp_path_for(workdir, filename, suffix)
            staged = isinstance(exc, EditorError) or (
                isinstance(exc, FileIOError) and exc.stage != "write temp file"
            )
            if keep_temp and staged and temp.exists():
                console.print(f"[yellow]temp file kept: {escape(str(temp))}[/yellow]")
            raise SystemExit(1)

    if result.changed:
        console.print(f"[green]✓[/green] updated config: {escape(result.record.filename)}")
    else:
        console.print(f"[dim]no changes made to file: {escape(result.record.filename)}[/dim]")


async def _add(state: CliState, filename: str, shorthand: str, workdir: Path) -> None:
    cfg = await load_settings(state)
    with open_store(cfg, state) as store:
        try:
            result = await add_record(store, filename, shorthand, workdir)
        except NovaError as exc:
            fail(exc)

    if not result.source_read:
        console.print(
            f"[yellow]could not read file data: {escape(filename)} (stored empty)[/yellow]"
        )
    console.print(
        f"[green]✓[/green] config created: {escape(filename)} ({escape(shorthand)})"
    )


async def _remove(state: CliState, filename: str) -> None:
    cfg = await load_settings(state)
    with open_store(cfg, state) as store:
        try:
            deleted = remove_record(store, filename)
        except NovaError as exc:
            fail(exc)

    if deleted == 0:
        console.print(f"[yellow]unknown config filename: {escape(filename)}[/yellow]")
    else:
        console.print(f"[green]✓[/green] config removed: {escape(filename)}")


# ── Commands ────────────────────────────────────────────────────────

_dir_option = click.option(
    "-C",
    "--dir",
    "workdir",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Working directory to read from / write to.",
)


@click.group("config")
def config_cmd() -> None:
    """Manage reusable project configuration files."""


@config_cmd.command("list")
@click.pass_obj
def config_list(state: CliState) -> None:
    """List all stored configuration files and their shorthands."""
    asyncio.run(_list(state))


@config_cmd.command("clone")
@click.argument("shorthands", nargs=-1, required=True)
@_dir_option
@click.pass_obj
def config_clone(state: CliState, shorthands: tuple[str, ...], workdir: Path) -> None:
    """Clone configuration files into the working directory."""
    asyncio.run(_clone(state, shorthands, workdir))


@config_cmd.command("vim")
@click.argument("filename")
@_dir_option
@click.pass_obj
def config_vim(state: CliState, filename: str, workdir: Path) -> None:
    """Edit a stored configuration file in your editor."""
    asyncio.run(_vim(state, filename, workdir))


@config_cmd.command("add")
@click.argument("filename")
@click.argument("shorthand")
@_dir_option
@click.pass_obj
def config_add(state: CliState, filename: str, shorthand: str, workdir: Path) -> None:
    """Add a configuration file, using its content if the file exists."""
    asyncio.run(_add(state, filename, shorthand, workdir))


@config_cmd.command("remove")
@click.argument("filename")
@click.pass_obj
def config_remove(state: CliState, filename: str) -> None:
    """Remove a stored configuration file."""
    asyncio.run(_remove(state, filename))
