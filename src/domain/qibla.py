"""
Qibla calculation facade
========================

Combines bearing, distance and compass quantization toward the fixed
reference point ``KAABA``.  Inputs must already have passed
``validate_coordinates``; on a valid ``GeoPoint`` this never fails.
"""

from __future__ import annotations

from .bearing import bearing_to_compass, compute_bearing
from .distance import compute_distance
from .entities import KAABA, GeoPoint, QiblaResult


def calculate_qibla(origin: GeoPoint) -> QiblaResult:
    bearing = compute_bearing(origin, KAABA)
    return QiblaResult(
        origin=origin,
        reference_point=KAABA,
        bearing_degrees=bearing,
        compass_label=bearing_to_compass(bearing),
        distance_km=compute_distance(origin, KAABA),
    )
