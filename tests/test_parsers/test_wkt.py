"""
Tests for WKT parsing, writing and batch transformation.
"""

import os
import threading

import pytest
import shapely
from shapely.errors import EmptyPartError
from shapely.geometry import LineString, Point, Polygon

from geoconvert.core.errors import ConversionCancelledError, InvalidInputError
from geoconvert.core.parsers.wkt import (
    parse_wkt,
    split_lines,
    to_wkt,
    transform_wkt_batch,
    transform_wkt_line,
)


def shift(x, y):
    return x + 1, y * 2


class TestParseWkt:
    """Tests for parse_wkt."""

    def test_point(self) -> None:
        geometry = parse_wkt("POINT (30 10)")
        assert isinstance(geometry, Point)
        assert (geometry.x, geometry.y) == (30.0, 10.0)

    def test_case_insensitive_and_whitespace(self) -> None:
        """Test keywords ignore case and extra whitespace is accepted."""
        geometry = parse_wkt("  linestring(  0 0 ,1   1 )  ")
        assert isinstance(geometry, LineString)
        assert list(geometry.coords) == [(0.0, 0.0), (1.0, 1.0)]

    def test_polygon_with_hole(self) -> None:
        geometry = parse_wkt(
            "POLYGON ((35 10, 45 45, 15 40, 10 20, 35 10), (20 30, 35 35, 30 20, 20 30))"
        )
        assert isinstance(geometry, Polygon)
        assert len(geometry.interiors) == 1

    def test_geometry_collection(self) -> None:
        geometry = parse_wkt("GEOMETRYCOLLECTION (POINT (40 10), LINESTRING (10 10, 20 20))")
        assert [g.geom_type for g in geometry.geoms] == ["Point", "LineString"]

    @pytest.mark.parametrize("text", ["", "   ", "POINT (a b)", "CIRCLE (1 2)", "{}"])
    def test_invalid(self, text: str) -> None:
        """Test malformed WKT raises InvalidInputError."""
        with pytest.raises(InvalidInputError) as exc_info:
            parse_wkt(text)

        assert exc_info.value.message.startswith("Invalid WKT")


class TestToWkt:
    """Tests for to_wkt."""

    def test_trailing_zeros_trimmed(self) -> None:
        assert to_wkt(Point(30.0, 10.0)) == "POINT (30 10)"

    def test_full_precision(self) -> None:
        assert to_wkt(Point(4.904123456789, 52.3676)) == "POINT (4.904123456789 52.3676)"

    def test_z(self) -> None:
        assert to_wkt(Point(1, 2, 3)) == "POINT Z (1 2 3)"

    def test_polygon(self) -> None:
        polygon = Polygon([(30, 10), (40, 40), (20, 40), (10, 20), (30, 10)])
        assert to_wkt(polygon) == "POLYGON ((30 10, 40 40, 20 40, 10 20, 30 10))"


class TestSplitLines:
    """Tests for batch line splitting."""

    def test_mixed_line_endings(self) -> None:
        """Test CR, LF and CRLF all separate lines; blanks are dropped."""
        text = "POINT (1 1)\r\nPOINT (2 2)\rPOINT (3 3)\n\n   \nPOINT (4 4)  "
        assert split_lines(text) == ["POINT (1 1)", "POINT (2 2)", "POINT (3 3)", "POINT (4 4)"]

    def test_blank(self) -> None:
        assert split_lines(" \n\r\n ") == []


class TestTransformWktBatch:
    """Tests for line-oriented WKT transformation."""

    def test_single_line(self) -> None:
        assert transform_wkt_line("POINT (1 2)", shift) == "POINT (2 4)"

    def test_three_lines(self) -> None:
        """Test every line is transformed in order."""
        output = transform_wkt_batch(
            "POINT (4.9 52.3)\nPOINT (5.0 52.4)\nPOINT (5.1 52.5)", shift
        )

        lines = output.split(os.linesep)
        assert len(lines) == 3
        assert all(line.startswith("POINT") for line in lines)
        assert lines[1] == "POINT (6 104.8)"

    def test_bad_line_marked_in_place(self) -> None:
        """Test a failing line becomes an error marker and the batch continues."""
        output = transform_wkt_batch("POINT (1 1)\nPOINT (oops)\nPOINT (3 3)", shift)

        lines = output.split(os.linesep)
        assert lines[0] == "POINT (2 2)"
        assert lines[1].startswith("<Error: Invalid WKT")
        assert lines[1].endswith(">")
        assert lines[2] == "POINT (4 6)"

    def test_cancelled(self) -> None:
        """Test a set cancel event stops the batch."""
        event = threading.Event()
        event.set()

        with pytest.raises(ConversionCancelledError):
            transform_wkt_batch("POINT (1 1)", shift, cancel_event=event)

    def test_unset_cancel_event(self) -> None:
        event = threading.Event()
        assert transform_wkt_batch("POINT (1 1)", shift, cancel_event=event) == "POINT (2 2)"

    def test_empty_member_line(self) -> None:
        """Test a multi-part line with an EMPTY member keeps both members."""
        output = transform_wkt_batch("MULTILINESTRING ((0 0, 1 1), EMPTY)\nPOINT (1 2)", shift)

        lines = output.split(os.linesep)
        assert len(lines) == 2
        assert len(parse_wkt(lines[0]).geoms) == 2
        assert "EMPTY" in lines[0]
        assert lines[1] == "POINT (2 4)"

    def test_rebuild_failure_marked_in_place(self, monkeypatch) -> None:
        """Test a geometry that cannot be rebuilt fails only its own line."""

        def reject(parts):
            raise EmptyPartError("Can't create MultiPoint with empty component")

        monkeypatch.setattr(shapely, "multipoints", reject)

        output = transform_wkt_batch("MULTIPOINT ((1 1), (2 2))\nPOINT (1 2)", shift)

        lines = output.split(os.linesep)
        assert lines[0].startswith("<Error: Cannot rebuild MultiPoint")
        assert lines[1] == "POINT (2 4)"
