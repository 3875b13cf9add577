"""
Pydantic models for validated coordinate pairs.

Provides the geographic point produced by a successful parse and a model
that accepts a position either as explicit fields or as free text in any
notation the grammar understands.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from latlonparse.core.positions import lat_long
from latlonparse.validation.exceptions import CoordinateParseError
from latlonparse.validation.validators import validate_latitude, validate_longitude

logger = logging.getLogger(__name__)


class GeoPoint(BaseModel):
    """
    A latitude/longitude pair in degrees.

    Attributes
    ----------
    latitude : float
        Latitude in decimal degrees (-90 to 90).
    longitude : float
        Longitude in decimal degrees (-180 to 180). Values up to 360 are
        accepted and wrapped.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    @field_validator("latitude")
    @classmethod
    def validate_lat(cls, v):
        return validate_latitude(v)

    @field_validator("longitude")
    @classmethod
    def validate_lon(cls, v):
        return validate_longitude(v)

    def as_tuple(self) -> tuple[float, float]:
        """Return ``(latitude, longitude)``."""
        return self.latitude, self.longitude


class FlexibleLocationModel(BaseModel):
    """
    Location given either as latitude/longitude fields or a position string.

    The position string may use any notation accepted by
    :data:`~latlonparse.core.positions.lat_long`, e.g. ``"40N, 170E"``,
    ``"52° 49.99' N 51° 32.81' W"`` or ``"-40.5, 170.2"``.

    Attributes
    ----------
    latitude : Optional[float]
        Latitude in decimal degrees.
    longitude : Optional[float]
        Longitude in decimal degrees.
    """

    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @model_validator(mode="before")
    @classmethod
    def unify_coordinates(cls, data: Any) -> Any:
        """
        Unify the field and string input formats.

        Parameters
        ----------
        data : Any
            Input data dictionary to process.

        Returns
        -------
        Any
            Processed data with latitude and longitude fields.

        Raises
        ------
        ValueError
            If only one of latitude/longitude is given, or the position
            string cannot be read.
        """
        if isinstance(data, dict):
            has_lat = "latitude" in data
            has_lon = "longitude" in data

            if has_lat != has_lon:
                msg = "Both latitude and longitude must be provided together"
                raise ValueError(msg)

            if "position" in data and isinstance(data["position"], str):
                data = dict(data)
                position = data.pop("position")
                try:
                    lat, lon = lat_long.parse(position.strip())
                except CoordinateParseError as exc:
                    msg = f"Invalid position string: '{position}'"
                    raise ValueError(msg) from exc
                logger.debug(f"Position '{position}' read as ({lat}, {lon})")
                data["latitude"] = lat
                data["longitude"] = lon
        return data

    @field_validator("latitude")
    @classmethod
    def validate_lat(cls, v):
        return None if v is None else validate_latitude(v)

    @field_validator("longitude")
    @classmethod
    def validate_lon(cls, v):
        return None if v is None else validate_longitude(v)

    def to_geopoint(self) -> GeoPoint:
        """
        Convert to a :class:`GeoPoint`.

        Raises
        ------
        ValueError
            If no location was given.
        """
        if self.latitude is None or self.longitude is None:
            raise ValueError("Location has no coordinates")
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)
