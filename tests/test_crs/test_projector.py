"""
Tests for the pyproj-backed projector.
"""

import numpy as np
import pytest

from geoconvert.core.crs.projector import PyprojProjector
from geoconvert.core.crs.registry import CRSRegistry, get_registry

AMSTERDAM = (4.9041, 52.3676)


class TestPyprojProjector:
    """Tests for PyprojProjector."""

    def test_wgs84_to_web_mercator(self, sample_registry: CRSRegistry) -> None:
        """Test projecting Amsterdam to Web Mercator."""
        projector = sample_registry.get_transform(4326, 3857)

        x, y = projector(*AMSTERDAM)

        assert 545000 < x < 547000
        assert 6860000 < y < 6875000

    def test_round_trip(self, sample_registry: CRSRegistry) -> None:
        """Test forward then inverse projection returns the input."""
        forward = sample_registry.get_transform(4326, 3857)
        inverse = sample_registry.get_transform(3857, 4326)

        lon, lat = inverse(*forward(*AMSTERDAM))

        assert lon == pytest.approx(AMSTERDAM[0], abs=1e-9)
        assert lat == pytest.approx(AMSTERDAM[1], abs=1e-9)

    def test_axis_order_is_xy(self, sample_registry: CRSRegistry) -> None:
        """Test longitude is taken as the first axis of geographic CRS."""
        projector = sample_registry.get_transform(4326, 32631)

        easting, northing = projector(2.3522, 48.8566)

        assert 440000 < easting < 460000
        assert 5400000 < northing < 5420000

    def test_array_input(self, sample_registry: CRSRegistry) -> None:
        """Test arrays are projected element-wise."""
        projector = sample_registry.get_transform(4326, 3857)

        xs, ys = projector(np.array([0.0, 4.9041]), np.array([0.0, 52.3676]))

        assert xs.shape == (2,)
        assert xs[0] == pytest.approx(0.0, abs=1e-6)
        assert ys[0] == pytest.approx(0.0, abs=1e-6)
        assert xs[1] > 545000

    def test_rd_new(self) -> None:
        """Test projecting Amsterdam to the Dutch national grid."""
        projector = get_registry().get_transform(4326, 28992)

        x, y = projector(*AMSTERDAM)

        assert 120000 < x < 124000
        assert 485000 < y < 490000

    def test_repr(self, sample_registry: CRSRegistry) -> None:
        """Test repr names both codes."""
        projector = sample_registry.get_transform(4326, 3857)
        assert isinstance(projector, PyprojProjector)
        assert repr(projector) == "PyprojProjector(EPSG:4326 -> EPSG:3857)"
