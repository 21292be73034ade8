"""SQLite implementation of the DataEntityRepository."""

from __future__ import annotations

import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from ..domain.exceptions import StorageUnavailableError
from ..domain.models import DataEntity
from ..ports.storage import DataEntityRepository

_SCHEMA = """
CREATE TABLE IF NOT EXISTS core_datastore (
    entity_key TEXT NOT NULL PRIMARY KEY,
    entity_value TEXT
)
"""


class SqliteDataEntityRepository(DataEntityRepository):
    """Repository storing entities in a single SQLite table.

    Each thread gets its own connection to a database file, opened in WAL
    mode. For ``":memory:"`` databases a single shared connection is used
    instead, because every in-memory connection would otherwise see its own
    empty database. Operations are serialized with a lock within the process.

    Driver errors are surfaced as ``StorageUnavailableError``, except
    ``IntegrityError``, which propagates unchanged. ``create`` is an upsert:
    concurrent creates of the same key leave the last writer's value.
    """

    def __init__(self, db_path: str = ":memory:", timeout: float = 10.0) -> None:
        self._db_path = db_path
        self._timeout = timeout
        self._local = threading.local()
        self._shared: sqlite3.Connection | None = None
        self._lock = threading.RLock()
        self._connections: list[sqlite3.Connection] = []
        self._connections_lock = threading.Lock()
        with self._cursor("initialize") as conn:
            conn.execute(_SCHEMA)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path, timeout=self._timeout, check_same_thread=False)
        if self._db_path != ":memory:":
            conn.execute("PRAGMA journal_mode = WAL")
            conn.execute(f"PRAGMA busy_timeout = {int(self._timeout * 1000)}")
        with self._connections_lock:
            self._connections.append(conn)
        return conn

    def _get_conn(self) -> sqlite3.Connection:
        if self._db_path == ":memory:":
            if self._shared is None:
                self._shared = self._connect()
            return self._shared

        conn: sqlite3.Connection | None = getattr(self._local, "conn", None)
        if conn is None:
            conn = self._connect()
            self._local.conn = conn
        return conn

    @contextmanager
    def _cursor(self, operation: str, key: str | None = None) -> Iterator[sqlite3.Connection]:
        """Yield a connection inside a transaction, mapping driver errors."""
        with self._lock:
            try:
                conn = self._get_conn()
                with conn:
                    yield conn
            except sqlite3.IntegrityError:
                raise
            except sqlite3.Error as e:
                raise StorageUnavailableError(
                    f"SQLite datastore failure during '{operation}': {e}",
                    operation=operation,
                    key=key,
                ) from e

    def find_by_key(self, key: str) -> DataEntity | None:
        with self._cursor("find_by_key", key) as conn:
            row = conn.execute(
                "SELECT entity_key, entity_value FROM core_datastore WHERE entity_key = ?",
                (key,),
            ).fetchone()
        if row is None:
            return None
        return DataEntity(key=row[0], value=row[1] or "")

    def find_all(self) -> list[DataEntity]:
        with self._cursor("find_all") as conn:
            rows = conn.execute(
                "SELECT entity_key, entity_value FROM core_datastore ORDER BY rowid"
            ).fetchall()
        return [DataEntity(key=row[0], value=row[1] or "") for row in rows]

    def create(self, entity: DataEntity) -> None:
        with self._cursor("create", entity.key) as conn:
            conn.execute(
                "INSERT INTO core_datastore (entity_key, entity_value) VALUES (?, ?) "
                "ON CONFLICT(entity_key) DO UPDATE SET entity_value = excluded.entity_value",
                (entity.key, entity.value),
            )

    def update(self, entity: DataEntity) -> None:
        with self._cursor("update", entity.key) as conn:
            conn.execute(
                "UPDATE core_datastore SET entity_value = ? WHERE entity_key = ?",
                (entity.value, entity.key),
            )

    def delete(self, key: str) -> None:
        with self._cursor("delete", key) as conn:
            conn.execute("DELETE FROM core_datastore WHERE entity_key = ?", (key,))

    def close(self) -> None:
        """Close every connection opened by this repository."""
        with self._connections_lock:
            connections, self._connections = self._connections, []
        for conn in connections:
            conn.close()
        self._shared = None
        self._local = threading.local()
