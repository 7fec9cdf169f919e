"""
Initial great-circle bearing (forward azimuth)
==============================================

Formula
-------
  y = sin(Δλ) · cos(φ2)
  x = cos(φ1) · sin(φ2) − sin(φ1) · cos(φ2) · cos(Δλ)
  θ = atan2(y, x)
  bearing = (θ° + 360) mod 360

Edge cases
----------
* **Same point** -- ``y == x == 0`` and ``atan2(0, 0)`` is 0 under IEEE-754,
  so the bearing is 0° (north).
* **Pole origin** -- ``cos(φ1)`` is ~6e-17 rather than exactly 0, so the
  result is driven by the relative longitude.  It stays finite and needs
  no branch.
* **Antimeridian** -- Δλ is fed straight to sin/cos, which are periodic,
  so a Δλ of -358° behaves like +2°.

Compass quantization
--------------------
Sixteen 22.5° sectors centred on N, NNE, ... NNW.  The sector index is
rounded half **up** (11.25° -> NNE), matching ``Math.round`` semantics;
Python's built-in ``round`` is half-to-even and would move those
boundaries.

Complexity: O(1) per call.
"""

import math

from .entities import GeoPoint
from .enums import COMPASS_POINTS

SECTOR_DEGREES = 360.0 / len(COMPASS_POINTS)


def initial_bearing(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the bearing in degrees, in ``[0, 360)``, from point 1 to point 2."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dlng = math.radians(lng2 - lng1)

    y = math.sin(dlng) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlng)

    return (math.degrees(math.atan2(y, x)) + 360.0) % 360.0


def compute_bearing(origin: GeoPoint, destination: GeoPoint) -> float:
    return initial_bearing(
        origin.latitude, origin.longitude,
        destination.latitude, destination.longitude,
    )


def bearing_to_compass(bearing: float) -> str:
    """Map a bearing in degrees to the nearest of the 16 compass points."""
    index = math.floor(bearing / SECTOR_DEGREES + 0.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]
