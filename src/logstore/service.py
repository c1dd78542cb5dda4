"""Interface to the store that parsed log records are written to."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator

Row = dict[str, Any]
Params = tuple | list | dict


class DatabaseService(ABC):
    """Write-once record store.

    A run creates its table with ``execute_ddl`` and then writes every record
    with one ``batch_insert`` inside ``transaction()``. Nothing is updated or
    deleted afterwards; ``query`` reads results back.
    """

    @abstractmethod
    def connect(self) -> None:
        """Open the underlying connection."""

    @abstractmethod
    def close(self) -> None:
        """Close the connection. Safe to call twice."""

    @abstractmethod
    def execute_ddl(self, sql: str) -> None:
        """Run schema statements and commit them immediately."""

    @abstractmethod
    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit on success, roll back and re-raise on error."""

    @abstractmethod
    def batch_insert(self, table: str, columns: list[str], rows: list[tuple]) -> None:
        """Insert rows into a table. Must be called inside ``transaction()``."""

    @abstractmethod
    def query(self, sql: str, params: Params | None = None) -> list[Row]:
        """Run a SELECT and return its rows as dicts keyed by column name."""
