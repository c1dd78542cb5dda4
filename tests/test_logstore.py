"""Tests for the SQLite record store, exercised against the log_data table."""

import sqlite3
import uuid

import pytest

from ingestion.schema import LOG_DATA_COLUMNS, LOG_DATA_TABLE, LOG_DATA_TABLE_DDL
from logstore import open_store


def _row(name="Speed", value=1.0, row_id=None):
    return (row_id or str(uuid.uuid4()), "2024-01-01T00:00:00", name, 1, value)


@pytest.fixture
def log_store(db_service):
    db_service.execute_ddl(LOG_DATA_TABLE_DDL)
    return db_service


class TestOpenStore:
    def test_creates_database_file(self, tmp_path):
        db_path = tmp_path / "LogData.db"
        with open_store(db_path) as service:
            service.execute_ddl(LOG_DATA_TABLE_DDL)
        assert db_path.exists()

    def test_closed_on_exit(self, tmp_path):
        with open_store(tmp_path / "LogData.db") as service:
            pass
        with pytest.raises(RuntimeError, match="not connected"):
            service.query("SELECT 1")

    def test_closed_when_body_raises(self, tmp_path):
        with pytest.raises(KeyError):
            with open_store(tmp_path / "LogData.db") as service:
                raise KeyError("boom")
        with pytest.raises(RuntimeError, match="not connected"):
            service.execute_ddl(LOG_DATA_TABLE_DDL)

    def test_rows_survive_reopen(self, tmp_path):
        db_path = tmp_path / "LogData.db"
        with open_store(db_path) as service:
            service.execute_ddl(LOG_DATA_TABLE_DDL)
            with service.transaction():
                service.batch_insert(LOG_DATA_TABLE, LOG_DATA_COLUMNS, [_row(), _row()])

        with open_store(db_path) as service:
            rows = service.query("SELECT COUNT(*) AS cnt FROM log_data")
        assert rows[0]["cnt"] == 2


class TestLogDataWrites:
    def test_schema_creation_is_repeatable(self, log_store):
        log_store.execute_ddl(LOG_DATA_TABLE_DDL)
        assert log_store.query("SELECT * FROM log_data") == []

    def test_query_returns_dicts_by_column(self, log_store):
        with log_store.transaction():
            log_store.batch_insert(LOG_DATA_TABLE, LOG_DATA_COLUMNS, [_row("Boost", 12.5, "a")])
        rows = log_store.query("SELECT * FROM log_data WHERE name = ?", ("Boost",))
        assert rows == [
            {
                "id": "a",
                "time": "2024-01-01T00:00:00",
                "name": "Boost",
                "measurement_type": 1,
                "value": 12.5,
            }
        ]

    def test_batch_insert_requires_transaction(self, log_store):
        with pytest.raises(RuntimeError, match="No active transaction"):
            log_store.batch_insert(LOG_DATA_TABLE, LOG_DATA_COLUMNS, [_row()])

    def test_empty_batch_writes_nothing(self, log_store):
        with log_store.transaction():
            log_store.batch_insert(LOG_DATA_TABLE, LOG_DATA_COLUMNS, [])
        assert log_store.query("SELECT * FROM log_data") == []

    def test_failed_batch_rolls_back_whole_run(self, log_store):
        rows = [_row("A", row_id="dup"), _row("B"), _row("C", row_id="dup")]
        with pytest.raises(sqlite3.IntegrityError):
            with log_store.transaction():
                log_store.batch_insert(LOG_DATA_TABLE, LOG_DATA_COLUMNS, rows)
        assert log_store.query("SELECT * FROM log_data") == []

    def test_error_after_insert_rolls_back(self, log_store):
        with pytest.raises(ValueError):
            with log_store.transaction():
                log_store.batch_insert(LOG_DATA_TABLE, LOG_DATA_COLUMNS, [_row()])
                raise ValueError("simulated failure")
        assert log_store.query("SELECT * FROM log_data") == []

    def test_value_is_required(self, log_store):
        with pytest.raises(sqlite3.IntegrityError, match="NOT NULL"):
            with log_store.transaction():
                log_store.batch_insert(LOG_DATA_TABLE, LOG_DATA_COLUMNS, [_row(value=None)])
