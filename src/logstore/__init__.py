"""SQLite record store for parsed log data."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from logstore.service import DatabaseService
from logstore.sqlite_service import SQLiteDatabaseService

__all__ = ["DatabaseService", "SQLiteDatabaseService", "open_store"]


@contextmanager
def open_store(db_path: str | Path) -> Iterator[DatabaseService]:
    """Connect to the SQLite file at ``db_path`` and close it on exit.

    The file is created if it does not exist.
    """
    service = SQLiteDatabaseService(str(db_path))
    service.connect()
    try:
        yield service
    finally:
        service.close()
