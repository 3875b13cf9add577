"""
Whole-string entry points.

Thin wrappers over the grammar rules for callers holding a complete
coordinate string. Surrounding whitespace is ignored; everything else must
be consumed by a single reading. Each function raises
:class:`~latlonparse.validation.exceptions.CoordinateParseError` when no
reading exists.
"""

import logging
from typing import List, Optional, Tuple

from latlonparse.core.angles import angle
from latlonparse.core.positions import lat_long, latitude_ns, longitude_ew
from latlonparse.core.rules import Rule
from latlonparse.validation.base_models import GeoPoint
from latlonparse.validation.exceptions import CoordinateParseError

logger = logging.getLogger(__name__)


def _parse_whole(rule: Rule, text: str):
    if text is None:
        raise CoordinateParseError("", rule.name)
    text = str(text).strip()
    try:
        value = rule.parse(text)
    except CoordinateParseError:
        logger.debug(f"Rejected '{text}': no {rule.name} reading")
        raise
    logger.debug(f"Read '{text}' with {rule.name} as {value}")
    return value


def parse_angle(text: str) -> float:
    """
    Parse an unsigned angle in any supported notation.

    Parameters
    ----------
    text : str
        Angle such as ``"40.5"``, ``"40 30 15"``, ``"40° 30' 15\""``,
        ``"40 30.25"`` or ``"0403015"``.

    Returns
    -------
    float
        Angle in degrees.

    Raises
    ------
    CoordinateParseError
        If the text is not a complete angle.

    Examples
    --------
    >>> parse_angle("40 30 0")
    40.5
    """
    return _parse_whole(angle, text)


def parse_latitude(text: str) -> float:
    """Parse a latitude with a trailing ``N``/``S``, e.g. ``"40 30N"``."""
    return _parse_whole(latitude_ns, text)


def parse_longitude(text: str) -> float:
    """Parse a longitude with a trailing ``E``/``W``, e.g. ``"170 15.5W"``."""
    return _parse_whole(longitude_ew, text)


def parse_lat_long(text: str) -> Tuple[float, float]:
    """
    Parse a coordinate pair in any supported notation.

    Parameters
    ----------
    text : str
        Pair such as ``"40N, 170E"``, ``"170E 40N"`` or ``"-40.5, 170.2"``.

    Returns
    -------
    tuple of float
        ``(latitude, longitude)`` in degrees, longitude in [-180, 180].

    Raises
    ------
    CoordinateParseError
        If the text is not a complete coordinate pair.

    Examples
    --------
    >>> parse_lat_long("170E, 40N")
    (40.0, 170.0)
    """
    return _parse_whole(lat_long, text)


def try_parse_lat_long(text: str) -> Optional[Tuple[float, float]]:
    """Like :func:`parse_lat_long` but return None instead of raising."""
    try:
        return parse_lat_long(text)
    except CoordinateParseError:
        return None


def parse_position(text: str) -> GeoPoint:
    """Parse a coordinate pair into a validated :class:`GeoPoint`."""
    lat, lon = parse_lat_long(text)
    return GeoPoint(latitude=lat, longitude=lon)


def candidate_readings(text: str, rule: Rule = lat_long) -> List:
    """
    Return every complete reading of ``text`` by ``rule``, in declared order.

    The first element is what the ``parse_*`` functions return. More than
    one element means the notation is ambiguous for this input.

    Examples
    --------
    >>> candidate_readings("12", rule=angle)
    [12.0]
    """
    text = str(text).strip()
    readings = rule.complete_readings(text)
    logger.debug(f"{len(readings)} {rule.name} reading(s) of '{text}'")
    return readings
