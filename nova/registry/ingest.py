"""Create new records from files in the working directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import aiofiles

from nova.errors import ConflictError
from nova.store import ConfigRecord, RecordStore

logger = logging.getLogger("nova.ingest")


@dataclass(slots=True)
class AddResult:
    """The stored record and whether its source file could be read."""

    record: ConfigRecord
    source_read: bool


async def add_record(
    store: RecordStore,
    filename: str,
    shorthand: str,
    workdir: Path,
) -> AddResult:
    """Store ``workdir / filename`` under *filename* and *shorthand*.

    A missing or unreadable source file is not an error: the record is
    created with empty content.  Both keys are checked before anything is
    written, and either clash raises :class:`ConflictError`.
    """
    source = workdir / filename
    source_read = True
    try:
        async with aiofiles.open(source, "r", encoding="utf-8", newline="") as f:
            content = await f.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.info("could not read %s, storing empty content: %s", source, exc)
        content = ""
        source_read = False

    if store.exists_by_filename(filename):
        raise ConflictError("filename", filename)
    if store.exists_by_shorthand(shorthand):
        raise ConflictError("shorthand", shorthand)

    record = ConfigRecord(filename=filename, shorthand=shorthand, content=content)
    store.insert(record)
    return AddResult(record=record, source_read=source_read)
