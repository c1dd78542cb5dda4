"""OBDLink CSV ingestion: header classification, parsing and storage."""

from ingestion.csv_ingest import (
    NODATA,
    ParseError,
    ingest_csv,
    load_records,
    parse_content,
    parse_lines,
    parse_timestamp,
    store_records,
)
from ingestion.measurement import MeasurementType, classify_header
from ingestion.schema import Record

__all__ = [
    "NODATA",
    "MeasurementType",
    "ParseError",
    "Record",
    "classify_header",
    "ingest_csv",
    "load_records",
    "parse_content",
    "parse_lines",
    "parse_timestamp",
    "store_records",
]
