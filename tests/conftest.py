"""Shared test fixtures."""

from pathlib import Path

import pytest

from logstore import open_store


@pytest.fixture
def db_service(tmp_path):
    """Provide a fresh SQLite DatabaseService for each test."""
    with open_store(tmp_path / "test.db") as service:
        yield service


@pytest.fixture
def write_log(tmp_path):
    """Write an OBDLink-style export and return its path."""

    def _write(
        headers: list[str],
        rows: list[list[str]],
        name: str = "obd2.csv",
        directory: Path | None = None,
    ) -> Path:
        path = (directory or tmp_path) / name
        lines = ["OBDLink log export", ",".join(headers)]
        lines.extend(",".join(row) for row in rows)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
