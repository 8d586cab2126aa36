"""
GeoJSON and WKT codecs.
"""

from geoconvert.core.parsers.geojson import (
    dumps as dump_geojson,
    geometry_to_dict,
    parse_geojson,
    transform_geojson,
)
from geoconvert.core.parsers.wkt import (
    parse_wkt,
    split_lines,
    to_wkt,
    transform_wkt_batch,
)

__all__ = [
    # GeoJSON
    "dump_geojson",
    "geometry_to_dict",
    "parse_geojson",
    "transform_geojson",
    # WKT
    "parse_wkt",
    "split_lines",
    "to_wkt",
    "transform_wkt_batch",
]
