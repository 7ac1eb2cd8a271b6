"""Export stored configs into a working directory by shorthand."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import aiofiles

from nova.errors import FileIOError, NovaError
from nova.store import RecordStore

logger = logging.getLogger("nova.clone")


@dataclass(slots=True)
class CloneResult:
    """Outcome of exporting one shorthand."""

    shorthand: str
    path: Optional[Path] = None
    error: Optional[NovaError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def clone_records(
    store: RecordStore,
    shorthands: Iterable[str],
    workdir: Path,
) -> list[CloneResult]:
    """Write each shorthand's content to ``workdir / filename``.

    Every shorthand is handled on its own: an unknown alias or a failed
    write is recorded in its result and the rest still run.
    """
    results: list[CloneResult] = []
    for shorthand in shorthands:
        try:
            record = store.find_by_shorthand(shorthand)
        except NovaError as exc:
            logger.warning("clone %s: %s", shorthand, exc)
            results.append(CloneResult(shorthand, error=exc))
            continue

        target = workdir / record.filename
        try:
            async with aiofiles.open(target, "w", encoding="utf-8", newline="") as f:
                await f.write(record.content)
        except OSError as exc:
            err = FileIOError("write file", target, exc)
            logger.warning("clone %s: %s", shorthand, err)
            results.append(CloneResult(shorthand, path=target, error=err))
            continue

        logger.info("cloned %s to %s", shorthand, target)
        results.append(CloneResult(shorthand, path=target))
    return results
