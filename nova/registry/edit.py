"""Edit a stored config in an external editor and save what changed.

The workflow stages the record's content in a sibling ``<filename>.temp``
file, runs the editor on it, reads the file back, removes it and, only if
the text differs from what is stored, writes the new content to the store.

Any failing stage raises and nothing after it runs.  The temp file never
outlives the workflow: it is removed on success and on every failure after
it was created, unless ``keep_temp_on_error`` asks for it to be left in
place so edits can be recovered by hand.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Protocol

import aiofiles
import aiofiles.os

from nova.errors import FileIOError
from nova.store import ConfigRecord, RecordStore

logger = logging.getLogger("nova.edit")

DEFAULT_TEMP_SUFFIX = ".temp"


class Editor(Protocol):
    async def edit(self, path: Path) -> None: ...


@dataclass(slots=True)
class EditResult:
    """The record as stored after editing, and whether it changed."""

    record: ConfigRecord
    changed: bool


def temp_path_for(workdir: Path, filename: str, suffix: str = DEFAULT_TEMP_SUFFIX) -> Path:
    """Where the editable copy of *filename* is staged."""
    return workdir / f"{filename}{suffix}"


async def edit_record(
    store: RecordStore,
    filename: str,
    editor: Editor,
    workdir: Path,
    *,
    temp_suffix: str = DEFAULT_TEMP_SUFFIX,
    keep_temp_on_error: bool = False,
) -> EditResult:
    """Run the edit workflow for the record stored under *filename*.

    Raises:
        NotFoundError: no record has that filename.
        FileIOError: the temp file could not be written, read or removed.
        EditorError: the editor failed to start or exited non-zero.
        PersistenceError: the changed content could not be stored.
    """
    record = store.find_by_filename(filename)
    temp = temp_path_for(workdir, record.filename, temp_suffix)

    async with _staged(temp, record.content, keep_temp_on_error):
        await editor.edit(temp)
        content = await _read_temp(temp)
        await _remove_temp(temp)

    if content == record.content:
        logger.info("no changes to %s", filename)
        return EditResult(record=record, changed=False)

    store.update_content(record.filename, content)
    return EditResult(record=record.with_content(content), changed=True)


# ── Temp file handling ──────────────────────────────────────────────


@asynccontextmanager
async def _staged(path: Path, content: str, keep_on_error: bool) -> AsyncIterator[Path]:
    """Write *content* to *path* and remove it if the body fails.

    A file already sitting at *path* that cannot be overwritten is left alone.
    """
    existed = path.exists()
    try:
        async with aiofiles.open(path, "w", encoding="utf-8", newline="") as f:
            await f.write(content)
    except OSError as exc:
        if not existed:
            await _discard(path)
        raise FileIOError("write temp file", path, exc) from exc
    logger.debug("staged %d chars at %s", len(content), path)

    try:
        yield path
    except BaseException:
        if keep_on_error:
            logger.warning("leaving temp file for recovery: %s", path)
        else:
            await _discard(path)
        raise


async def _read_temp(path: Path) -> str:
    try:
        async with aiofiles.open(path, "r", encoding="utf-8", newline="") as f:
            return await f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileIOError("read temp file", path, exc) from exc


async def _remove_temp(path: Path) -> None:
    try:
        await aiofiles.os.remove(path)
    except OSError as exc:
        raise FileIOError("remove temp file", path, exc) from exc


async def _discard(path: Path) -> None:
    """Best-effort removal on a failure path; never masks the original error."""
    try:
        await aiofiles.os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("could not remove temp file %s: %s", path, exc)
