"""OBDLink CSV parsing and ingestion into the log_data table.

The export has a banner line, a header line, then one line per sample:

    <banner>
    Time,Vehicle speed (MPH),Engine RPM (RPM),...
    2024-01-01T00:00:00,55.5,NODATA,...

Every non-NODATA cell becomes one Record.
"""

import io
import logging
import math
from datetime import datetime
from pathlib import Path
from typing import Iterable

from ingestion.measurement import MeasurementType, classify_header
from ingestion.schema import LOG_DATA_COLUMNS, LOG_DATA_TABLE, LOG_DATA_TABLE_DDL, Record
from logstore import DatabaseService

logger = logging.getLogger(__name__)

NODATA = "NODATA"

TIMESTAMP_FORMATS = (
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %I:%M:%S.%f %p",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M:%S.%f",
    "%m/%d/%Y",
)


class ParseError(ValueError):
    """Raised when an export file cannot be parsed."""

    def __init__(self, message: str, line_num: int | None = None):
        self.line_num = line_num
        if line_num is not None:
            message = f"line {line_num}: {message}"
        super().__init__(message)


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO 8601 or US-locale date-time string."""
    text = text.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError(f"unrecognised timestamp {text!r}")


def parse_header(line: str) -> list[tuple[str, MeasurementType]]:
    """Classify every data column of a header line.

    Column 0 is the timestamp and is not included.
    """
    return [classify_header(header) for header in line.split(",")[1:]]


def parse_row(
    fields: list[str],
    columns: list[tuple[str, MeasurementType]],
    line_num: int,
) -> list[Record]:
    """Turn the split fields of one data line into records."""
    if len(fields) != len(columns) + 1:
        raise ParseError(
            f"expected {len(columns) + 1} fields, got {len(fields)}", line_num
        )

    try:
        timestamp = parse_timestamp(fields[0])
    except ValueError as e:
        raise ParseError(str(e), line_num) from e

    records = []
    for (name, measurement_type), text in zip(columns, fields[1:]):
        if text == NODATA:
            continue
        try:
            value = float(text)
        except ValueError as e:
            raise ParseError(f"invalid value {text!r} for {name!r}", line_num) from e
        if not math.isfinite(value):
            raise ParseError(f"non-finite value {text!r} for {name!r}", line_num)
        records.append(Record(timestamp, name, measurement_type, value))
    return records


def parse_lines(lines: Iterable[str]) -> list[Record]:
    """Parse an export given as an iterable of lines (a file object works)."""
    it = iter(lines)
    if next(it, None) is None:
        raise ParseError("missing banner line", 1)
    header_line = next(it, None)
    if header_line is None:
        raise ParseError("missing header line", 2)

    columns = parse_header(header_line.rstrip("\r\n"))

    records: list[Record] = []
    rows = 0
    for line_num, line in enumerate(it, start=3):
        fields = line.rstrip("\r\n").split(",")
        records.extend(parse_row(fields, columns, line_num))
        rows += 1

    logger.info("Parsed %d rows into %d records (%d columns)", rows, len(records), len(columns))
    return records


def parse_content(content: str) -> list[Record]:
    """Parse a whole export held in memory."""
    return parse_lines(io.StringIO(content, newline=None))


def load_records(file_path: str | Path) -> list[Record]:
    """Read and parse an export file."""
    logger.info("Reading %s", file_path)
    with open(file_path, encoding="utf-8-sig") as f:
        try:
            return parse_lines(f)
        except UnicodeDecodeError as e:
            raise ParseError(f"{file_path} is not valid UTF-8: {e}") from e


def store_records(service: DatabaseService, records: list[Record]) -> int:
    """Write records to log_data in a single transaction.

    Returns the number of records written.
    """
    service.execute_ddl(LOG_DATA_TABLE_DDL)

    rows = [record.as_row() for record in records]
    with service.transaction():
        service.batch_insert(LOG_DATA_TABLE, LOG_DATA_COLUMNS, rows)
    logger.info("Stored %d records in %s", len(rows), LOG_DATA_TABLE)
    return len(rows)


def ingest_csv(service: DatabaseService, file_path: str | Path) -> int:
    """Parse an export file and store its records.

    The whole file is parsed before anything is written, so a parse failure
    leaves the database untouched.

    Returns the number of records stored.
    """
    records = load_records(file_path)
    return store_records(service, records)
