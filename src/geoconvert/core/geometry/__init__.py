"""
Geometry transformation.
"""

from geoconvert.core.geometry.transform import transform_coordinates, transform_geometry

__all__ = ["transform_coordinates", "transform_geometry"]
