"""Measurement types and header classification for OBDLink exports."""

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)


class MeasurementType(IntEnum):
    """Unit category of a logged signal. The integer value is what gets stored."""

    DEG = 0
    MPH = 1
    MPG = 2
    GAL_HR = 3
    LB_MILE = 4
    LBS = 5
    LB_MIN = 6
    FT_S_SQR = 7
    DEG_S = 8
    UT = 9
    PERCENT = 10
    DEG_F = 11
    IN_HG = 12
    RPM = 13
    V = 14
    SEC = 15
    MILES = 16
    IN_H2O = 17
    MA = 18
    PSI = 19
    HP = 20
    LB_FT = 21
    GAL = 22
    MIN = 23
    FT = 24
    UNKNOWN = 25


# Checked in order, first hit wins. Each annotation includes both parentheses,
# so none of them can occur inside another one.
UNIT_ANNOTATIONS: tuple[tuple[str, MeasurementType], ...] = (
    ("(deg)", MeasurementType.DEG),
    ("(MPH)", MeasurementType.MPH),
    ("(MPG)", MeasurementType.MPG),
    ("(gal/hr)", MeasurementType.GAL_HR),
    ("(lb/mile)", MeasurementType.LB_MILE),
    ("(lbs)", MeasurementType.LBS),
    ("(lb/min)", MeasurementType.LB_MIN),
    ("(ft/s²)", MeasurementType.FT_S_SQR),
    ("(deg/s)", MeasurementType.DEG_S),
    ("(µT)", MeasurementType.UT),
    ("(%)", MeasurementType.PERCENT),
    ("(°F)", MeasurementType.DEG_F),
    ("(inHg)", MeasurementType.IN_HG),
    ("(RPM)", MeasurementType.RPM),
    ("(V)", MeasurementType.V),
    ("(sec)", MeasurementType.SEC),
    ("(miles)", MeasurementType.MILES),
    ("(inH2O)", MeasurementType.IN_H2O),
    ("(mA)", MeasurementType.MA),
    ("(psi)", MeasurementType.PSI),
    ("(hp)", MeasurementType.HP),
    ("(lb•ft)", MeasurementType.LB_FT),
    ("(gal)", MeasurementType.GAL),
    ("(min)", MeasurementType.MIN),
    ("(ft)", MeasurementType.FT),
)


def measurement_type_of(header: str) -> MeasurementType:
    """Return the type of the first unit annotation found in ``header``."""
    for annotation, measurement_type in UNIT_ANNOTATIONS:
        if annotation in header:
            return measurement_type
    return MeasurementType.UNKNOWN


def classify_header(header: str) -> tuple[str, MeasurementType]:
    """Split a column header into its display name and measurement type.

    ``"Vehicle speed (MPH)"`` becomes ``("Vehicle speed", MeasurementType.MPH)``.
    When a unit is recognised, the name is everything before the last ``(``,
    trimmed. Headers without a recognised unit come back untouched with
    ``MeasurementType.UNKNOWN``.
    """
    measurement_type = measurement_type_of(header)
    if measurement_type is MeasurementType.UNKNOWN:
        logger.debug("No unit annotation in header %r", header)
        return header, measurement_type

    name = header[: header.rfind("(")].strip()
    logger.debug("Header %r -> %s (%s)", header, name, measurement_type.name)
    return name, measurement_type
