"""Delete records by filename."""

from __future__ import annotations

from nova.store import RecordStore


def remove_record(store: RecordStore, filename: str) -> int:
    """Delete the record stored under *filename*; returns rows removed.

    Removing an unknown filename returns 0 rather than raising.
    """
    return store.delete(filename)
