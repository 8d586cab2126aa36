"""
geoconvert - GeoJSON/WKT conversion and EPSG re-projection.

This package parses GeoJSON and Well-Known Text into shapely geometries,
re-projects every coordinate between EPSG coordinate reference systems and
writes the result back with deterministic formatting.
"""

__version__ = "0.1.0"
