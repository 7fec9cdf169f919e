"""Unit tests for coordinate validation and the Qibla facade."""

import math

import pytest

from src.domain.entities import KAABA, GeoPoint
from src.domain.enums import CoordinateError
from src.domain.qibla import calculate_qibla
from src.domain.validation import (
    LATITUDE_RANGE_MESSAGE,
    LONGITUDE_RANGE_MESSAGE,
    NOT_A_NUMBER_MESSAGE,
    validate_coordinates,
)


class TestValidateCoordinates:
    def test_valid_floats(self):
        result = validate_coordinates(40.7128, -74.0060)
        assert result.is_valid
        assert result.error is None
        assert result.point == GeoPoint(40.7128, -74.0060)

    def test_numeric_strings_are_parsed(self):
        result = validate_coordinates("51.5074", " -0.1278 ")
        assert result.is_valid
        assert result.point == GeoPoint(51.5074, -0.1278)

    @pytest.mark.parametrize("raw", ["+21.5", "-.5", "3.", "2e1", "1E-3"])
    def test_plain_decimal_strings_accepted(self, raw):
        result = validate_coordinates(raw, "0")
        assert result.is_valid
        assert result.point.latitude == float(raw)

    def test_ints_accepted(self):
        result = validate_coordinates(45, 100)
        assert result.point == GeoPoint(45.0, 100.0)

    def test_bounds_are_inclusive(self):
        for lat, lng in [(90, 180), (-90, -180), (0, 0)]:
            assert validate_coordinates(lat, lng).is_valid

    def test_latitude_out_of_range(self):
        result = validate_coordinates(95, 0)
        assert not result.is_valid
        assert result.error is CoordinateError.OUT_OF_RANGE
        assert result.message == LATITUDE_RANGE_MESSAGE
        assert result.point is None

    def test_longitude_out_of_range(self):
        result = validate_coordinates(0, -180.5)
        assert result.error is CoordinateError.OUT_OF_RANGE
        assert result.message == LONGITUDE_RANGE_MESSAGE

    @pytest.mark.parametrize(
        "lat, lng",
        [
            ("abc", 0),
            (0, "def"),
            (math.nan, 0),
            (0, math.inf),
            ("-Infinity", 0),
            ("nan", "nan"),
            (None, 0),
            (True, 0),
            ("", 0),
            (10**400, 0),
            (0, -(10**400)),
            ("1e400", 0),
            ("1_0", 0),
            ("١٢", 0),
            ("0x1A", 0),
        ],
    )
    def test_not_a_number(self, lat, lng):
        result = validate_coordinates(lat, lng)
        assert not result.is_valid
        assert result.error is CoordinateError.NOT_A_NUMBER
        assert result.message == NOT_A_NUMBER_MESSAGE

    def test_not_a_number_checked_before_range(self):
        result = validate_coordinates("abc", 500)
        assert result.error is CoordinateError.NOT_A_NUMBER


class TestCalculateQibla:
    def test_new_york(self):
        result = calculate_qibla(GeoPoint(40.7128, -74.0060))
        assert result.bearing_degrees == pytest.approx(58.48, abs=0.1)
        assert result.compass_label == "ENE"
        assert result.distance_km > 0
        assert result.origin == GeoPoint(40.7128, -74.0060)
        assert result.reference_point == KAABA

    def test_rounding_is_presentation_only(self):
        result = calculate_qibla(GeoPoint(40.7128, -74.0060))
        assert result.rounded_bearing == round(result.bearing_degrees, 2)
        assert result.rounded_distance == round(result.distance_km, 2)
        assert result.bearing_degrees != result.rounded_bearing

    def test_at_the_kaaba(self):
        result = calculate_qibla(KAABA)
        assert result.bearing_degrees == 0.0
        assert result.compass_label == "N"
        assert result.distance_km == 0.0
        assert result.rounded_distance == 0.0

    def test_north_pole(self):
        result = calculate_qibla(GeoPoint(90, 0))
        assert math.isfinite(result.bearing_degrees)
        assert 0 <= result.bearing_degrees < 360
        assert math.isfinite(result.distance_km)

    def test_deterministic(self):
        origin = GeoPoint(-33.8688, 151.2093)
        assert calculate_qibla(origin) == calculate_qibla(origin)

    def test_result_is_frozen(self):
        result = calculate_qibla(KAABA)
        with pytest.raises(AttributeError):
            result.bearing_degrees = 1.0
