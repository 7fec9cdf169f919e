"""
Great-circle distance on a spherical Earth.

    a = sin²(Δφ/2) + cos φ1 · cos φ2 · sin²(Δλ/2)
    c = 2 · atan2(√a, √(1 − a))
    d = R · c

``a`` is clamped to 1.0 because rounding can push it just past 1 for
near-antipodal points, and ``√(1 − a)`` would then leave the real domain.
Equal points give ``a == 0`` and therefore exactly 0 km.
"""

import math

from .entities import GeoPoint

EARTH_RADIUS_KM = 6_371.0


def central_angle(origin: GeoPoint, destination: GeoPoint) -> float:
    """Angle in radians subtended at the Earth's centre by the two points."""
    phi1 = math.radians(origin.latitude)
    phi2 = math.radians(destination.latitude)
    half_dphi = math.radians(destination.latitude - origin.latitude) / 2
    half_dlmb = math.radians(destination.longitude - origin.longitude) / 2

    hav = math.sin(half_dphi) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(half_dlmb) ** 2
    hav = min(hav, 1.0)
    return 2 * math.atan2(math.sqrt(hav), math.sqrt(1 - hav))


def compute_distance(origin: GeoPoint, destination: GeoPoint) -> float:
    """Distance in km from *origin* to *destination*."""
    return EARTH_RADIUS_KM * central_angle(origin, destination)
