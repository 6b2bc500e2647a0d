"""
WORKLOG — History Store.

Persists recorded history entries in a local SQLite file and loads them
back as a fully materialized list for search.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sqlite3
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

import aiosqlite

from worklog import config
from worklog.exceptions import HistoryLoadError, HistoryWriteError
from worklog.models import HistoryEntry
from worklog.temporal import to_iso_z

logger = logging.getLogger("worklog.storage")


@runtime_checkable
class HistoryStore(Protocol):
    """Anything that can yield the recorded history entries."""

    async def load_history(self) -> list[HistoryEntry]: ...


class SqliteHistoryStore:
    """History entries stored one row per entry, payload as JSON."""

    def __init__(self, db_path: str | Path | None = None):
        self._db_path = Path(db_path or config.DB_PATH).expanduser()
        self._conn: Optional[aiosqlite.Connection] = None
        self._conn_lock = asyncio.Lock()
        self._initialized = False

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ─── Connection ───────────────────────────────────────────────

    async def get_conn(self) -> aiosqlite.Connection:
        """Returns the async database connection, creating the file if needed."""
        async with self._conn_lock:
            if self._conn is not None:
                return self._conn

            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = await aiosqlite.connect(str(self._db_path), timeout=30)
            await self._conn.execute("PRAGMA journal_mode=WAL")
            return self._conn

    async def close(self) -> None:
        if self._conn is not None:
            await self._conn.close()
            self._conn = None

    async def __aenter__(self) -> SqliteHistoryStore:
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    # ─── Schema ───────────────────────────────────────────────────

    async def init_db(self) -> None:
        """Initialize database schema. Safe to call multiple times."""
        from worklog.schema import ALL_SCHEMA, get_init_meta

        conn = await self.get_conn()
        for stmt in ALL_SCHEMA:
            await conn.executescript(stmt)
        for k, v in get_init_meta():
            await conn.execute(
                "INSERT OR IGNORE INTO worklog_meta (key, value) VALUES (?, ?)",
                (k, v),
            )
        await conn.commit()
        self._initialized = True
        logger.info("History store initialized at %s", self._db_path)

    # ─── Writes ───────────────────────────────────────────────────

    async def save_entry(self, entry: HistoryEntry) -> None:
        """Insert or replace an entry by id.

        Raises:
            HistoryWriteError: If the database cannot be opened or written.
        """
        try:
            if not self._initialized:
                await self.init_db()
            conn = await self.get_conn()
            await conn.execute(
                "INSERT OR REPLACE INTO history_entries "
                "(id, recorded_at, range_start, range_end, sources, payload) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (
                    entry.id,
                    to_iso_z(entry.timestamp),
                    to_iso_z(entry.date_range.start),
                    to_iso_z(entry.date_range.end),
                    json.dumps([s.value for s in entry.sources]),
                    json.dumps(entry.to_dict(), ensure_ascii=False),
                ),
            )
            await conn.commit()
        except (sqlite3.Error, OSError) as e:
            logger.error("Failed to save history entry %s to %s: %s", entry.id, self._db_path, e)
            raise HistoryWriteError(f"Cannot write history database {self._db_path}") from e
        logger.debug("Saved history entry %s (%d items)", entry.id, entry.item_count())

    # ─── Reads ────────────────────────────────────────────────────

    async def load_history(self) -> list[HistoryEntry]:
        """Load every entry, oldest first.

        A store that was never written loads as an empty history.

        Raises:
            HistoryLoadError: If the database or a stored payload is unreadable.
        """
        if self._conn is None and not self._db_path.exists():
            logger.debug("No history database at %s", self._db_path)
            return []

        try:
            conn = await self.get_conn()
            cursor = await conn.execute(
                "SELECT payload FROM history_entries ORDER BY recorded_at ASC, id ASC"
            )
            rows = await cursor.fetchall()
        except (sqlite3.Error, OSError) as e:
            logger.error("Failed to read history from %s: %s", self._db_path, e)
            raise HistoryLoadError(f"Cannot read history database {self._db_path}") from e

        entries: list[HistoryEntry] = []
        for (payload,) in rows:
            try:
                entries.append(HistoryEntry.from_dict(json.loads(payload)))
            except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                logger.error("Corrupt history payload in %s: %s", self._db_path, e)
                raise HistoryLoadError(f"Corrupt history entry in {self._db_path}") from e

        logger.debug("Loaded %d history entries from %s", len(entries), self._db_path)
        return entries

    async def count(self) -> int:
        """Number of stored entries (0 if the store was never written)."""
        return len(await self._summary_rows())

    async def list_entries(self, limit: int | None = None) -> list[tuple[str, str, str, str, list[str]]]:
        """Lightweight listing: (id, recorded_at, range_start, range_end, sources), newest first."""
        rows = await self._summary_rows()
        listing = [(r[0], r[1], r[2], r[3], json.loads(r[4] or "[]")) for r in rows]
        return listing[:limit] if limit else listing

    async def _summary_rows(self) -> list[tuple]:
        if self._conn is None and not self._db_path.exists():
            return []
        try:
            conn = await self.get_conn()
            cursor = await conn.execute(
                "SELECT id, recorded_at, range_start, range_end, sources "
                "FROM history_entries ORDER BY recorded_at DESC, id DESC"
            )
            return list(await cursor.fetchall())
        except (sqlite3.Error, OSError) as e:
            logger.error("Failed to list history in %s: %s", self._db_path, e)
            raise HistoryLoadError(f"Cannot read history database {self._db_path}") from e
