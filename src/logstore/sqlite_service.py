"""SQLite implementation of DatabaseService."""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from logstore.service import DatabaseService, Params, Row

logger = logging.getLogger(__name__)


class SQLiteDatabaseService(DatabaseService):
    """Record store backed by a single stdlib sqlite3 connection."""

    def __init__(self, db_path: str):
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._in_transaction = False

    def connect(self) -> None:
        self._conn = sqlite3.connect(self._db_path)
        self._conn.row_factory = sqlite3.Row
        logger.debug("Opened SQLite database %s", self._db_path)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database is not connected. Call connect() first.")
        return self._conn

    @contextmanager
    def transaction(self) -> Iterator[None]:
        conn = self._connection()
        self._in_transaction = True
        try:
            yield
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            self._in_transaction = False

    def execute_ddl(self, sql: str) -> None:
        conn = self._connection()
        conn.executescript(sql)
        conn.commit()

    def batch_insert(self, table: str, columns: list[str], rows: list[tuple]) -> None:
        if not self._in_transaction:
            raise RuntimeError(
                "No active transaction. Wrap calls in a `with service.transaction():` block."
            )
        if not rows:
            return
        placeholders = ", ".join("?" for _ in columns)
        sql = f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})"
        self._connection().executemany(sql, rows)
        logger.debug("Inserted %d rows into %s", len(rows), table)

    def query(self, sql: str, params: Params | None = None) -> list[Row]:
        cursor = self._connection().execute(sql, params or ())
        return [dict(row) for row in cursor.fetchall()]
