"""
latlonparse: fast parser for latitude/longitude strings.

Reads coordinates written as signed decimal degrees, degrees/minutes/seconds
(space separated or with unit marks), degrees and decimal minutes, or the
compact DDDMMSS.ss form, without the caller naming the format.

Whole-string API
================

    import latlonparse

    latlonparse.parse_lat_long("40N, 170E")         # (40.0, 170.0)
    latlonparse.parse_lat_long("-40.5, 170.2")      # (-40.5, 170.2)
    latlonparse.parse_angle("40° 30' 15\\"")        # 40.50416...

Grammar rules
=============

Each rule can also be called on a string prefix, returning the first reading
and the unconsumed input, or None:

    from latlonparse import dms7, latitude_ns

    dms7("0452312")        # ParseResult(value=45.3866..., remaining='')
    latitude_ns("40S xyz") # ParseResult(value=-40.0, remaining=' xyz')
"""

from latlonparse.api import (
    candidate_readings,
    parse_angle,
    parse_lat_long,
    parse_latitude,
    parse_longitude,
    parse_position,
    try_parse_lat_long,
)
from latlonparse.core import (
    Cursor,
    ParseResult,
    Rule,
    angle,
    degrees_decimal_minutes,
    degrees_decimal_minutes_units,
    degrees_minutes_seconds,
    degrees_minutes_seconds_units,
    dms7,
    lat_long,
    latitude_ns,
    longitude_ew,
    signed_lat_long,
)
from latlonparse.validation import CoordinateParseError
from latlonparse.validation.base_models import FlexibleLocationModel, GeoPoint

__version__ = "0.1.0"

__all__ = [
    "CoordinateParseError",
    "Cursor",
    "FlexibleLocationModel",
    "GeoPoint",
    "ParseResult",
    "Rule",
    "angle",
    "candidate_readings",
    "degrees_decimal_minutes",
    "degrees_decimal_minutes_units",
    "degrees_minutes_seconds",
    "degrees_minutes_seconds_units",
    "dms7",
    "lat_long",
    "latitude_ns",
    "longitude_ew",
    "parse_angle",
    "parse_lat_long",
    "parse_latitude",
    "parse_longitude",
    "parse_position",
    "signed_lat_long",
    "try_parse_lat_long",
]
