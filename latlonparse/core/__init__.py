"""
Grammar rules for coordinate strings.

Rules are layered bottom-up: lexical primitives, unsigned angle notations,
then signed latitudes, longitudes and pairs.
"""

from .angles import (
    angle,
    degrees_decimal_minutes,
    degrees_decimal_minutes_units,
    degrees_minutes_seconds,
    degrees_minutes_seconds_units,
    dms7,
)
from .cursor import Cursor, ParseResult
from .positions import lat_long, latitude_ns, longitude_ew, signed_lat_long
from .rules import Rule

__all__ = [
    "Cursor",
    "ParseResult",
    "Rule",
    # Angles
    "angle",
    "degrees_decimal_minutes",
    "degrees_decimal_minutes_units",
    "degrees_minutes_seconds",
    "degrees_minutes_seconds_units",
    "dms7",
    # Positions
    "lat_long",
    "latitude_ns",
    "longitude_ew",
    "signed_lat_long",
]
