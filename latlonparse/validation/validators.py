"""
Range validation for latitudes and longitudes.

Provides standalone validation functions used both by the grammar rules and
by the pydantic models, so every entry point applies the same bounds.
"""

from latlonparse.utils.constants import (
    LONGITUDE_WRAP_DEG,
    MAX_LATITUDE_DEG,
    MAX_LONGITUDE_DEG,
)


def validate_range(value: float, low: float, high: float, field_name: str) -> float:
    """
    Validate that a number lies in the closed interval [low, high].

    Parameters
    ----------
    value : float
        Value to validate.
    low, high : float
        Inclusive bounds.
    field_name : str
        Name of the field for error messages.

    Returns
    -------
    float
        The validated value.

    Raises
    ------
    ValueError
        If value is outside the interval.
    """
    if not (low <= value <= high):
        msg = f"{field_name} must be between {low} and {high}, got {value}"
        raise ValueError(msg)
    return value


def normalize_longitude(value: float) -> float:
    """
    Wrap a longitude given in the 0-360 convention into [-180, 180].

    Values up to and including 180 are returned unchanged.

    Examples
    --------
    >>> normalize_longitude(350.0)
    -10.0
    >>> normalize_longitude(180.0)
    180.0
    """
    if value > MAX_LONGITUDE_DEG:
        return value - LONGITUDE_WRAP_DEG
    return value


def validate_latitude(value: float) -> float:
    """Validate a latitude in [-90, 90]."""
    return validate_range(value, -MAX_LATITUDE_DEG, MAX_LATITUDE_DEG, "latitude")


def validate_longitude(value: float) -> float:
    """
    Validate a longitude and normalize it into [-180, 180].

    Accepts [-180, 360); values above 180 are wrapped.

    Raises
    ------
    ValueError
        If value is below -180 or at least 360.
    """
    if not (-MAX_LONGITUDE_DEG <= value < LONGITUDE_WRAP_DEG):
        msg = (
            f"longitude must be between {-MAX_LONGITUDE_DEG} and "
            f"{LONGITUDE_WRAP_DEG} (exclusive), got {value}"
        )
        raise ValueError(msg)
    return normalize_longitude(value)
