"""CLI entry point for OBDLink log ingestion.

Reads ~/Downloads/obd2.csv and writes its records to LogData.db in the
current directory.

Usage:
    python -m scripts.ingest_csv [-v]
"""

import argparse
import logging
import sqlite3
import sys
from pathlib import Path

from ingestion.csv_ingest import ParseError, load_records, store_records
from logstore import open_store

DB_PATH = "LogData.db"

logger = logging.getLogger(__name__)


def default_csv_path() -> Path:
    """Location the OBDLink app exports to: ~/Downloads/obd2.csv."""
    return Path.home() / "Downloads" / "obd2.csv"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=f"Ingest {default_csv_path()} into {DB_PATH}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    csv_path = default_csv_path()
    try:
        # The database file is only created once the export has parsed.
        records = load_records(csv_path)
        with open_store(DB_PATH) as service:
            total = store_records(service, records)
    except (OSError, ParseError, sqlite3.Error) as e:
        logger.error("Ingestion of %s failed: %s", csv_path, e)
        sys.exit(1)
    logger.info("Done. %d records ingested.", total)


if __name__ == "__main__":
    main()
