"""Shared plumbing for the CLI commands: console, settings, store, errors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

from rich.console import Console
from rich.markup import escape

from nova.config.config import Config
from nova.errors import NovaError
from nova.store import RecordStore

console = Console()

_LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass(slots=True)
class CliState:
    """Global options, carried on ``click.Context.obj``."""

    db_path: Optional[Path] = None
    verbose: bool = False


def setup_logging(level: str | int, verbose: bool = False) -> None:
    """Configure root logging once per process."""
    if verbose:
        level = logging.DEBUG
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT, datefmt=_LOG_DATEFMT)


async def load_settings(state: CliState) -> Config:
    """Load settings and configure logging."""
    cfg = await Config.load()
    setup_logging(cfg.get("logging.level", "WARNING"), state.verbose)
    return cfg


def open_store(cfg: Config, state: CliState) -> RecordStore:
    """Open the record store (``--db`` or the settings), or exit with an error."""
    try:
        return RecordStore.open(state.db_path or cfg.db_path)
    except NovaError as exc:
        fail(exc)


def report_error(err: NovaError) -> None:
    """Print *err* and its underlying cause."""
    console.print(f"[red]{escape(err.message)}[/red]")
    if err.cause is not None:
        console.print(f"[dim]error: {escape(str(err.cause))}[/dim]")


def fail(err: NovaError) -> NoReturn:
    report_error(err)
    raise SystemExit(1)
