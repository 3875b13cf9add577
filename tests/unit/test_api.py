"""
Tests for the whole-string API functions.
"""

import logging

import pytest

import latlonparse
from latlonparse.api import (
    candidate_readings,
    parse_angle,
    parse_lat_long,
    parse_latitude,
    parse_longitude,
    parse_position,
    try_parse_lat_long,
)
from latlonparse.core.angles import angle
from latlonparse.validation.base_models import GeoPoint
from latlonparse.validation.exceptions import CoordinateParseError


class TestParseFunctions:
    """Test the parse_* entry points."""

    def test_parse_angle(self):
        """Test an angle with unit marks."""
        assert parse_angle("40° 30' 15\"") == pytest.approx(40 + 30 / 60 + 15 / 3600)

    def test_parse_latitude_and_longitude(self):
        """Test single lettered values."""
        assert parse_latitude("40 30N") == pytest.approx(40.5)
        assert parse_longitude("170 15W") == pytest.approx(-170.25)

    def test_surrounding_whitespace_ignored(self):
        """Test that leading and trailing whitespace is stripped."""
        assert parse_lat_long("  40N, 170E \n") == (40.0, 170.0)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("40N, 170E", (40.0, 170.0)),
            ("170E, 40N", (40.0, 170.0)),
            ("-40.5, 170.2", (-40.5, 170.2)),
            ("0, 350", (0.0, -10.0)),
        ],
    )
    def test_parse_lat_long(self, text, expected):
        """Test the documented pair forms."""
        assert parse_lat_long(text) == expected

    def test_error_is_value_error(self):
        """Test that failures can be caught as ValueError."""
        with pytest.raises(ValueError, match="No valid lat_long reading of 'nonsense'"):
            parse_lat_long("nonsense")

    def test_none_input(self):
        """Test that None is rejected with the parse error."""
        with pytest.raises(CoordinateParseError):
            parse_angle(None)

    def test_try_parse(self):
        """Test the non-raising variant."""
        assert try_parse_lat_long("40N 170W") == (40.0, -170.0)
        assert try_parse_lat_long("40N") is None

    def test_parse_position(self):
        """Test conversion to a validated point."""
        point = parse_position("0, 350")
        assert isinstance(point, GeoPoint)
        assert point.as_tuple() == (0.0, -10.0)

    def test_rejection_is_logged(self, caplog):
        """Test debug logging of rejected input."""
        with caplog.at_level(logging.DEBUG, logger="latlonparse.api"):
            with pytest.raises(CoordinateParseError):
                parse_angle("x")
        assert "Rejected 'x'" in caplog.text


class TestCandidateReadings:
    """Test enumeration of complete readings."""

    def test_single_reading(self):
        """Test an unambiguous angle."""
        assert candidate_readings("40 30", rule=angle) == [40.5]

    def test_first_reading_matches_parse(self):
        """Test that the parse functions return the first candidate."""
        text = "52° 49.99' N, 51° 32.81' W"
        readings = candidate_readings(text)
        assert readings[0] == parse_lat_long(text)

    def test_no_reading(self):
        """Test that unreadable text gives an empty list."""
        assert candidate_readings("40N") == []


class TestPackageExports:
    """Test the top-level package namespace."""

    def test_rules_exported(self):
        """Test that grammar rules are reachable from the package."""
        assert latlonparse.dms7("0452312").value == pytest.approx(45 + 23 / 60 + 12 / 3600)
        assert latlonparse.latitude_ns("40S xyz") == latlonparse.ParseResult(-40.0, " xyz")
        assert latlonparse.parse_lat_long("40N, 170E") == (40.0, 170.0)
