"""
Geometry model shared by the codecs and the transform.

Geometries are shapely objects; their concrete classes form the closed set of
variants below. GeoJSON features wrap a geometry with opaque properties.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from shapely.geometry import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from shapely.geometry.base import BaseGeometry

# (x, y) or (x, y, z)
Coordinate = Union[Tuple[float, float], Tuple[float, float, float]]


class GeometryType(str, Enum):
    """Geometry variants, valued by their GeoJSON type name."""

    POINT = "Point"
    LINE_STRING = "LineString"
    LINEAR_RING = "LinearRing"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"

    @classmethod
    def of(cls, geometry: BaseGeometry) -> "GeometryType":
        """
        Classify a shapely geometry.

        Raises:
            TypeError: If the object is not one of the known variants
        """
        # LinearRing subclasses LineString, so it must be tested first
        for shapely_type, geometry_type in _SHAPELY_TYPES:
            if isinstance(geometry, shapely_type):
                return geometry_type
        raise TypeError(f"Unsupported geometry variant: {type(geometry).__name__}")


_SHAPELY_TYPES = (
    (Point, GeometryType.POINT),
    (LinearRing, GeometryType.LINEAR_RING),
    (LineString, GeometryType.LINE_STRING),
    (Polygon, GeometryType.POLYGON),
    (MultiPoint, GeometryType.MULTI_POINT),
    (MultiLineString, GeometryType.MULTI_LINE_STRING),
    (MultiPolygon, GeometryType.MULTI_POLYGON),
    (GeometryCollection, GeometryType.GEOMETRY_COLLECTION),
)

GEOJSON_GEOMETRY_TYPES = frozenset(
    t.value for t in GeometryType if t is not GeometryType.LINEAR_RING
)


@dataclass
class Feature:
    """
    GeoJSON Feature.

    Attributes:
        geometry: Feature geometry, None for a null geometry
        properties: Opaque properties, passed through untouched
        id: Optional feature identifier
        has_bbox: Whether the source carried a ``bbox`` member
    """

    geometry: Optional[BaseGeometry]
    properties: Optional[Dict[str, Any]] = field(default_factory=dict)
    id: Optional[Union[str, int, float]] = None
    has_bbox: bool = False


@dataclass
class FeatureCollection:
    """
    Ordered GeoJSON FeatureCollection.

    Attributes:
        features: Member features in document order
        has_bbox: Whether the source carried a ``bbox`` member
    """

    features: List[Feature] = field(default_factory=list)
    has_bbox: bool = False

    def geometries(self) -> List[BaseGeometry]:
        """Non-null member geometries in order."""
        return [f.geometry for f in self.features if f.geometry is not None]


GeoJSONObject = Union[BaseGeometry, Feature, FeatureCollection]
