"""
Signed latitudes, longitudes and coordinate pairs.

Signs come either from a hemisphere letter after an unsigned angle or from a
leading ``+``/``-`` on a plain decimal. All results are in degrees with
latitude in [-90, 90] and longitude in [-180, 180].
"""

from latlonparse.core.angles import angle
from latlonparse.core.cursor import Cursor
from latlonparse.core.primitives import sign_char, signed_decimal
from latlonparse.core.rules import Candidates, choice, optional_char, rule
from latlonparse.utils.constants import (
    DEGREE_SIGN,
    EAST_WEST,
    LONGITUDE_WRAP_DEG,
    MAX_LATITUDE_DEG,
    MAX_LONGITUDE_DEG,
    NORTH_SOUTH,
    PAIR_SEPARATOR,
)
from latlonparse.validation.validators import normalize_longitude

north_south = sign_char(*NORTH_SOUTH)
east_west = sign_char(*EAST_WEST)


def _hemisphere_angle(cursor: Cursor, limit: float, hemisphere) -> Candidates:
    for magnitude, rest in angle.run(cursor):
        if magnitude > limit:
            continue
        for sign, after in hemisphere.run(rest.skip_spaces()):
            yield sign * magnitude, after


@rule
def latitude_ns(cursor: Cursor) -> Candidates:
    """Unsigned angle up to 90 followed by ``N`` or ``S``, e.g. ``"40 30'S"``."""
    yield from _hemisphere_angle(cursor, MAX_LATITUDE_DEG, north_south)


@rule
def longitude_ew(cursor: Cursor) -> Candidates:
    """Unsigned angle up to 180 followed by ``E`` or ``W``, e.g. ``"170.2E"``."""
    yield from _hemisphere_angle(cursor, MAX_LONGITUDE_DEG, east_west)


def _separator(cursor: Cursor):
    """Whitespace, then an optional comma with its own trailing whitespace."""
    cursor = cursor.skip_spaces()
    matched = cursor.expect(PAIR_SEPARATOR)
    if matched is not None:
        yield matched[1].skip_spaces()
    yield cursor


def _signed_degrees(cursor: Cursor) -> Candidates:
    for value, rest in signed_decimal.run(cursor):
        for after in optional_char(rest, DEGREE_SIGN):
            yield value, after


@rule
def signed_lat_long(cursor: Cursor) -> Candidates:
    """
    Latitude and longitude as signed decimals, optionally comma separated.

    Western longitudes may be written either as negative values down to -180
    or in the 0-360 convention; values above 180 are wrapped into the
    negative range.

    Examples
    --------
    >>> signed_lat_long("0, 350").value
    (0.0, -10.0)
    """
    for latitude, rest in _signed_degrees(cursor):
        if not -MAX_LATITUDE_DEG <= latitude <= MAX_LATITUDE_DEG:
            continue
        for middle in _separator(rest):
            for longitude, after in _signed_degrees(middle):
                if -MAX_LONGITUDE_DEG <= longitude < LONGITUDE_WRAP_DEG:
                    yield (latitude, normalize_longitude(longitude)), after


@rule
def latitude_first(cursor: Cursor) -> Candidates:
    """Hemisphere-lettered latitude, then longitude, e.g. ``"40N, 170E"``."""
    for latitude, rest in latitude_ns.run(cursor):
        for middle in _separator(rest):
            for longitude, after in longitude_ew.run(middle):
                yield (latitude, longitude), after


@rule
def longitude_first(cursor: Cursor) -> Candidates:
    """Hemisphere-lettered longitude, then latitude, e.g. ``"170E 40N"``."""
    for longitude, rest in longitude_ew.run(cursor):
        for middle in _separator(rest):
            for latitude, after in latitude_ns.run(middle):
                yield (latitude, longitude), after


lat_long = choice("lat_long", latitude_first, longitude_first, signed_lat_long)
lat_long.__doc__ = """
Latitude and longitude in any supported notation, returned as (lat, lon).

Tried in order: latitude then longitude with hemisphere letters, longitude
then latitude with hemisphere letters, signed decimal pair.
"""
