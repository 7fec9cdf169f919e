"""
Coordinate validation.

Failures are returned as a ``ValidationResult`` carrying a
``CoordinateError`` code, never raised, so callers can tell
``NOT_A_NUMBER`` from ``OUT_OF_RANGE`` without parsing messages.

String input must be a plain ASCII decimal (optional sign, fraction and
exponent).  Digit-group underscores, non-ASCII digits and the ``nan`` /
``inf`` spellings that ``float()`` would otherwise accept are rejected.
"""

from __future__ import annotations

import math
import re
from numbers import Real
from typing import Any, Optional

from .entities import GeoPoint, ValidationResult
from .enums import CoordinateError

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

NOT_A_NUMBER_MESSAGE = "Latitude and longitude must be valid numbers"
LATITUDE_RANGE_MESSAGE = "Latitude must be between -90 and 90 degrees"
LONGITUDE_RANGE_MESSAGE = "Longitude must be between -180 and 180 degrees"

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _as_finite_float(value: Any) -> Optional[float]:
    """Coerce *value* to a finite float, or return ``None``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not _DECIMAL.fullmatch(value):
            return None
    elif not isinstance(value, Real):
        return None
    try:
        value = float(value)
    except (OverflowError, ValueError):
        return None
    return value if math.isfinite(value) else None


def validate_coordinates(latitude: Any, longitude: Any) -> ValidationResult:
    lat = _as_finite_float(latitude)
    lng = _as_finite_float(longitude)
    if lat is None or lng is None:
        return ValidationResult.fail(CoordinateError.NOT_A_NUMBER, NOT_A_NUMBER_MESSAGE)

    if not LATITUDE_RANGE[0] <= lat <= LATITUDE_RANGE[1]:
        return ValidationResult.fail(CoordinateError.OUT_OF_RANGE, LATITUDE_RANGE_MESSAGE)
    if not LONGITUDE_RANGE[0] <= lng <= LONGITUDE_RANGE[1]:
        return ValidationResult.fail(CoordinateError.OUT_OF_RANGE, LONGITUDE_RANGE_MESSAGE)

    return ValidationResult.ok(GeoPoint(latitude=lat, longitude=lng))
