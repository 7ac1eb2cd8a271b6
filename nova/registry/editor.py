"""External editor resolution and invocation."""

from __future__ import annotations

import asyncio
import logging
import os
import shlex
from pathlib import Path
from typing import Optional

from nova.errors import EditorError

logger = logging.getLogger("nova.editor")

_FALLBACK_EDITOR = "vi"


def resolve_editor_command(configured: Optional[str | list[str]] = None) -> list[str]:
    """Pick the editor argv: the setting, then ``$VISUAL``, ``$EDITOR``, ``vi``.

    The setting may be a string or a list of argv words.  Anything else, or
    a string that does not split cleanly, raises :class:`EditorError`.
    """
    if isinstance(configured, list):
        if configured and all(isinstance(part, str) and part for part in configured):
            return list(configured)
        if configured:
            raise EditorError("resolve editor", [repr(configured)])
        configured = None
    elif configured is not None and not isinstance(configured, str):
        raise EditorError("resolve editor", [repr(configured)])

    candidates = [
        configured,
        os.environ.get("VISUAL"),
        os.environ.get("EDITOR"),
        _FALLBACK_EDITOR,
    ]
    for candidate in candidates:
        if candidate and candidate.strip():
            try:
                return shlex.split(candidate)
            except ValueError as exc:
                raise EditorError("resolve editor", [candidate], cause=exc) from exc
    return [_FALLBACK_EDITOR]


class EditorLauncher:
    """Runs the editor on a file and blocks until it exits.

    Usage::

        launcher = EditorLauncher(resolve_editor_command(cfg.get("editor.command")))
        await launcher.edit(Path("ruff.toml.temp"))
    """

    __slots__ = ("_command",)

    def __init__(self, command: list[str]) -> None:
        self._command = list(command)

    @property
    def command(self) -> list[str]:
        return list(self._command)

    async def edit(self, path: Path) -> None:
        """Open *path* in the editor and wait for it to close."""
        argv = [*self._command, str(path)]
        logger.debug("spawning editor: %s", argv)
        try:
            proc = await asyncio.create_subprocess_exec(*argv)
        except OSError as exc:
            raise EditorError("spawn editor", self._command, cause=exc) from exc

        try:
            returncode = await proc.wait()
        except OSError as exc:
            raise EditorError("wait editor", self._command, cause=exc) from exc

        if returncode != 0:
            raise EditorError("wait editor", self._command, returncode=returncode)
        logger.debug("editor exited cleanly")
