"""
Tests that an angle rendered in any supported notation parses back to itself.
"""

import pytest

from latlonparse.core.angles import angle
from latlonparse.core.positions import latitude_ns


def test_rendered_angle_parses_back(renderer, sample_angles):
    """Test every sample angle through one renderer."""
    for value in sample_angles:
        text = renderer(value)
        assert angle.parse(text) == pytest.approx(value, abs=1e-5), text


def test_rendered_latitudes_keep_sign(renderer):
    """Test lettered latitudes built from rendered angles."""
    for value in (0.25, 45.386667, 90.0):
        assert latitude_ns.parse(renderer(value) + "S") == pytest.approx(-value, abs=1e-5)
        assert latitude_ns.parse(renderer(value) + " N") == pytest.approx(value, abs=1e-5)
