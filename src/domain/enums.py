"""Domain enumerations and the compass rose."""

import enum


class CoordinateError(str, enum.Enum):
    NOT_A_NUMBER = "NOT_A_NUMBER"
    OUT_OF_RANGE = "OUT_OF_RANGE"


# Clockwise from true north, one entry per 22.5° sector
COMPASS_POINTS: tuple[str, ...] = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)
