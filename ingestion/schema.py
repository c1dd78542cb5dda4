"""Log data table schema and the record type stored in it."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime

from ingestion.measurement import MeasurementType

LOG_DATA_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS log_data (
    id               TEXT     PRIMARY KEY,
    time             TEXT     NOT NULL,
    name             TEXT     NOT NULL,
    measurement_type INTEGER  NOT NULL,
    value            REAL     NOT NULL
);
"""

LOG_DATA_TABLE = "log_data"
LOG_DATA_COLUMNS = ["id", "time", "name", "measurement_type", "value"]


@dataclass(frozen=True)
class Record:
    """One reading of one signal at one point in time."""

    timestamp: datetime
    name: str
    measurement_type: MeasurementType
    value: float
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def as_row(self) -> tuple:
        """Return a tuple matching LOG_DATA_COLUMNS."""
        return (
            str(self.id),
            self.timestamp.isoformat(),
            self.name,
            int(self.measurement_type),
            self.value,
        )
