"""
Global test configuration and fixtures.

Provides renderers that write an unsigned angle in each supported notation,
used to check that parsing a rendered angle gives the angle back.
"""

import pytest


def _dms_parts(value: float):
    """Split degrees into (degrees, minutes, seconds) on a 0.01 second grid."""
    total = round(value * 360000)
    degrees, rest = divmod(total, 360000)
    minutes, rest = divmod(rest, 6000)
    return degrees, minutes, rest / 100


def _dm_parts(value: float):
    """Split degrees into (degrees, minutes) on a 0.0001 minute grid."""
    total = round(value * 600000)
    degrees, rest = divmod(total, 600000)
    return degrees, rest / 10000


def render_decimal(value: float) -> str:
    return f"{value:.6f}"


def render_dms(value: float) -> str:
    d, m, s = _dms_parts(value)
    return f"{d} {m} {s:.2f}"


def render_dms_units(value: float) -> str:
    d, m, s = _dms_parts(value)
    return f"{d}° {m}' {s:.2f}\""


def render_dm(value: float) -> str:
    d, m = _dm_parts(value)
    return f"{d} {m:.4f}"


def render_dm_units(value: float) -> str:
    d, m = _dm_parts(value)
    return f"{d}°{m:.4f}′"


def render_compact(value: float) -> str:
    d, m, s = _dms_parts(value)
    return f"{d:03d}{m:02d}{s:05.2f}"


RENDERERS = {
    "decimal": render_decimal,
    "dms": render_dms,
    "dms_units": render_dms_units,
    "decimal_minutes": render_dm,
    "decimal_minutes_units": render_dm_units,
    "compact": render_compact,
}


@pytest.fixture(params=sorted(RENDERERS))
def renderer(request):
    """Each angle renderer in turn."""
    return RENDERERS[request.param]


@pytest.fixture
def sample_angles():
    """Unsigned angles spread over [0, 360] including the ends."""
    return [0.0, 0.001, 0.5, 12.345678, 45.386667, 89.999, 90.0, 179.5, 180.0, 270.25, 359.999, 360.0]
