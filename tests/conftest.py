"""Shared fixtures: a fresh store, a working directory, a scripted editor."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

from nova.store import RecordStore


class FakeEditor:
    """Stands in for the external editor.

    Records the staged text it was handed and optionally rewrites the file
    (``new_content`` as text, ``new_bytes`` as raw bytes) or raises.
    """

    def __init__(
        self,
        new_content: Optional[str] = None,
        new_bytes: Optional[bytes] = None,
        error: Optional[BaseException] = None,
        delete: bool = False,
    ) -> None:
        self.new_content = new_content
        self.new_bytes = new_bytes
        self.error = error
        self.delete = delete
        self.calls: list[Path] = []
        self.seen: list[str] = []

    async def edit(self, path: Path) -> None:
        self.calls.append(path)
        self.seen.append(path.read_text(encoding="utf-8"))
        if self.error is not None:
            raise self.error
        if self.new_content is not None:
            path.write_text(self.new_content, encoding="utf-8")
        if self.new_bytes is not None:
            path.write_bytes(self.new_bytes)
        if self.delete:
            path.unlink()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "store" / "nova.db"


@pytest.fixture
def store(db_path: Path):
    with RecordStore.open(db_path) as s:
        yield s


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path
