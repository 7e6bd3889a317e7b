"""Primary cache tier — a single-table SQLite database."""
from __future__ import annotations

import asyncio
import logging
import threading
from pathlib import Path
from sqlite3 import Connection, connect

logger = logging.getLogger(__name__)

_SCHEMA = "CREATE TABLE IF NOT EXISTS cache (key TEXT PRIMARY KEY, value TEXT NOT NULL)"


class SqliteBackend:
    """Key/value store backed by SQLite.

    The connection is opened on first use and kept until :meth:`close`.
    Every write is committed immediately, so each key is updated atomically
    and the last writer wins. Queries run in a worker thread so the event
    loop is never blocked on disk I/O.

    Args:
        path: Database file; created with its schema if absent.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._connection: Connection | None = None
        self._lock = threading.RLock()

    def _connect(self) -> Connection:
        with self._lock:
            if self._connection is None:
                conn = connect(str(self.path), check_same_thread=False)
                conn.execute(_SCHEMA)
                conn.commit()
                logger.debug("Opened cache database at %s", self.path)
                self._connection = conn
            return self._connection

    def _get(self, key: str) -> str | None:
        with self._lock:
            row = self._connect().execute(
                "SELECT value FROM cache WHERE key = ?", (key,)
            ).fetchone()
        return row[0] if row else None

    def _set(self, key: str, value: str) -> None:
        with self._lock:
            conn = self._connect()
            conn.execute(
                "INSERT OR REPLACE INTO cache (key, value) VALUES (?, ?)", (key, value)
            )
            conn.commit()

    def _remove(self, key: str) -> None:
        with self._lock:
            conn = self._connect()
            conn.execute("DELETE FROM cache WHERE key = ?", (key,))
            conn.commit()

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(self._get, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._set, key, value)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._remove, key)

    def close(self) -> None:
        with self._lock:
            if self._connection is not None:
                self._connection.close()
                self._connection = None
