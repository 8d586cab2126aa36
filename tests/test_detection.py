"""
Tests for input format detection.
"""

import pytest

from geoconvert.core.detection import detect_format, looks_like_wkt
from geoconvert.models.conversion import InputFormat


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        "text",
        [
            '{"type": "Point", "coordinates": [1, 2]}',
            '  \n{"type":"FeatureCollection","features":[]}',
            '{"properties": {}, "type": "Feature"}',
        ],
    )
    def test_geojson(self, text: str) -> None:
        assert detect_format(text) is InputFormat.GEOJSON

    @pytest.mark.parametrize(
        "text",
        [
            "POINT (30 10)",
            "point(30 10)",
            "  LineString (0 0, 1 1)",
            "POLYGON ((0 0, 1 0, 1 1, 0 0))",
            "MULTIPOINT ((1 1), (2 2))",
            "MULTILINESTRING ((0 0, 1 1))",
            "MULTIPOLYGON (((0 0, 1 0, 1 1, 0 0)))",
            "GEOMETRYCOLLECTION (POINT (1 1))",
        ],
    )
    def test_wkt(self, text: str) -> None:
        assert detect_format(text) is InputFormat.WKT

    @pytest.mark.parametrize(
        "text",
        [None, "", "   ", "hello", '{"coordinates": [1, 2]}', "[1, 2]", "CIRCLE (1 2)"],
    )
    def test_undetected(self, text) -> None:
        """Test anything else yields None."""
        assert detect_format(text) is None


class TestLooksLikeWkt:
    """Tests for the lenient WKT check."""

    def test_accepts_text(self) -> None:
        assert looks_like_wkt("POINT (1 2)")
        assert looks_like_wkt("anything else")

    @pytest.mark.parametrize("text", [None, "", "  ", "4326", " 28992 "])
    def test_rejects_blank_and_integers(self, text) -> None:
        assert not looks_like_wkt(text)
