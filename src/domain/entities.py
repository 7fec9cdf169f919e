"""
Domain value objects.

All types here are immutable: a ``QiblaResult`` is derived from a single
``GeoPoint`` and is never updated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import CoordinateError


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


# The Kaaba, Masjid al-Haram, Mecca
KAABA = GeoPoint(latitude=21.4225, longitude=39.8262)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of ``validate_coordinates``; ``point`` is set only on success."""

    is_valid: bool
    error: Optional[CoordinateError] = None
    message: Optional[str] = None
    point: Optional[GeoPoint] = None

    @classmethod
    def ok(cls, point: GeoPoint) -> ValidationResult:
        return cls(is_valid=True, point=point)

    @classmethod
    def fail(cls, error: CoordinateError, message: str) -> ValidationResult:
        return cls(is_valid=False, error=error, message=message)


@dataclass(frozen=True)
class QiblaResult:
    origin: GeoPoint
    reference_point: GeoPoint
    bearing_degrees: float
    compass_label: str
    distance_km: float

    @property
    def rounded_bearing(self) -> float:
        return round(self.bearing_degrees, 2)

    @property
    def rounded_distance(self) -> float:
        return round(self.distance_km, 2)
