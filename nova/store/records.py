"""SQLite record store.

One ``configs`` table holds every record.  Both keys carry a uniqueness
constraint, and :meth:`RecordStore.insert` runs its existence checks and
the insert inside a single ``BEGIN IMMEDIATE`` transaction, so two
processes adding the same key cannot both succeed.

The store is opened by the caller and handed to each operation::

    with RecordStore.open(cfg.db_path) as store:
        record = store.find_by_shorthand("lint")
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from nova.errors import ConflictError, NotFoundError, PersistenceError
from nova.store.models import ConfigRecord

logger = logging.getLogger("nova.store")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS configs (
    filename  TEXT PRIMARY KEY,
    shorthand TEXT NOT NULL UNIQUE,
    content   TEXT NOT NULL DEFAULT ''
)
"""

_COLUMNS = "filename, shorthand, content"


class RecordStore:
    """Keyed storage of :class:`ConfigRecord` rows."""

    __slots__ = ("_conn",)

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    # ── Lifecycle ───────────────────────────────────────────────────

    @classmethod
    def open(cls, db_path: Path) -> "RecordStore":
        """Open (and if needed create) the database at *db_path*."""
        try:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            # Autocommit mode: transactions are issued explicitly.
            conn = sqlite3.connect(str(db_path), isolation_level=None)
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute(_SCHEMA)
        except (OSError, sqlite3.Error) as exc:
            raise PersistenceError(f"open config store {db_path}", exc) from exc
        logger.debug("opened store at %s", db_path)
        return cls(conn)

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "RecordStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ── Queries ─────────────────────────────────────────────────────

    def list(self) -> list[ConfigRecord]:
        """Return every record, ordered by shorthand."""
        rows = self._fetchall(
            f"SELECT {_COLUMNS} FROM configs ORDER BY shorthand",
            (),
            "fetch configs",
        )
        return [ConfigRecord(*row) for row in rows]

    def count(self) -> int:
        rows = self._fetchall("SELECT COUNT(*) FROM configs", (), "count configs")
        return rows[0][0]

    def find_by_shorthand(self, shorthand: str) -> ConfigRecord:
        rows = self._fetchall(
            f"SELECT {_COLUMNS} FROM configs WHERE shorthand = ?",
            (shorthand,),
            "fetch config",
        )
        if not rows:
            raise NotFoundError("shorthand", shorthand)
        return ConfigRecord(*rows[0])

    def find_by_filename(self, filename: str) -> ConfigRecord:
        rows = self._fetchall(
            f"SELECT {_COLUMNS} FROM configs WHERE filename = ?",
            (filename,),
            "fetch config",
        )
        if not rows:
            raise NotFoundError("filename", filename)
        return ConfigRecord(*rows[0])

    def exists_by_filename(self, filename: str) -> bool:
        rows = self._fetchall(
            "SELECT 1 FROM configs WHERE filename = ? LIMIT 1",
            (filename,),
            "fetch configs",
        )
        return bool(rows)

    def exists_by_shorthand(self, shorthand: str) -> bool:
        rows = self._fetchall(
            "SELECT 1 FROM configs WHERE shorthand = ? LIMIT 1",
            (shorthand,),
            "fetch configs",
        )
        return bool(rows)

    # ── Mutations ───────────────────────────────────────────────────

    def insert(self, record: ConfigRecord) -> None:
        """Store a new record; both keys must be unused."""
        try:
            self._conn.execute("BEGIN IMMEDIATE")
            try:
                if self.exists_by_filename(record.filename):
                    raise ConflictError("filename", record.filename)
                if self.exists_by_shorthand(record.shorthand):
                    raise ConflictError("shorthand", record.shorthand)
                self._conn.execute(
                    f"INSERT INTO configs ({_COLUMNS}) VALUES (?, ?, ?)",
                    (record.filename, record.shorthand, record.content),
                )
            except BaseException:
                self._conn.execute("ROLLBACK")
                raise
            self._conn.execute("COMMIT")
        except sqlite3.IntegrityError as exc:
            # Another writer won the race between our checks and the insert.
            field = "shorthand" if "shorthand" in str(exc) else "filename"
            value = record.shorthand if field == "shorthand" else record.filename
            raise ConflictError(field, value, exc) from exc
        except sqlite3.Error as exc:
            raise PersistenceError(
                f"store new config: {record.filename} ({record.shorthand})", exc
            ) from exc
        logger.info("inserted %s (%s)", record.filename, record.shorthand)

    def update_content(self, filename: str, content: str) -> None:
        """Replace the content of the record stored under *filename*."""
        try:
            cur = self._conn.execute(
                "UPDATE configs SET content = ? WHERE filename = ?",
                (content, filename),
            )
        except sqlite3.Error as exc:
            raise PersistenceError(f"update config: {filename}", exc) from exc
        if cur.rowcount == 0:
            raise NotFoundError("filename", filename)
        logger.info("updated content of %s (%d chars)", filename, len(content))

    def delete(self, filename: str) -> int:
        """Remove the record stored under *filename*; returns rows deleted."""
        try:
            cur = self._conn.execute(
                "DELETE FROM configs WHERE filename = ?", (filename,)
            )
        except sqlite3.Error as exc:
            raise PersistenceError(f"delete config: {filename}", exc) from exc
        logger.info("deleted %s (%d rows)", filename, cur.rowcount)
        return cur.rowcount

    # ── Internals ───────────────────────────────────────────────────

    def _fetchall(self, sql: str, params: tuple, operation: str) -> list[tuple]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise PersistenceError(operation, exc) from exc
