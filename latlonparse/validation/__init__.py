"""
Validation module for coordinate values.

Provides the parse error type and range validators. The pydantic models
live in :mod:`latlonparse.validation.base_models`, which depends on the
grammar and is therefore not imported here.
"""

from .exceptions import CoordinateParseError
from .validators import (
    normalize_longitude,
    validate_latitude,
    validate_longitude,
    validate_range,
)

__all__ = [
    # Exceptions
    "CoordinateParseError",
    # Validation Utilities
    "normalize_longitude",
    "validate_latitude",
    "validate_longitude",
    "validate_range",
]
