"""Record store — SQLite-backed storage of config records."""

from nova.store.models import ConfigRecord
from nova.store.records import RecordStore

__all__ = ["ConfigRecord", "RecordStore"]
