"""
Recursive re-projection of shapely geometries.

Every variant is rebuilt with the same structure: polygon shells and holes,
multi-part members and nested collections keep their order. Only x/y go
through the projector; z values are copied unchanged. Empty members of
multi-part geometries and collections are kept in place.
"""

import logging

import numpy as np
import shapely
from shapely.errors import ShapelyError
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

from geoconvert.core.crs.projector import Projector
from geoconvert.core.errors import TransformationError

logger = logging.getLogger(__name__)


def transform_coordinates(coords: np.ndarray, projector: Projector) -> np.ndarray:
    """
    Project an (N, 2) or (N, 3) coordinate array.

    Args:
        coords: Coordinate array, one row per vertex
        projector: Projector applied to the x and y columns

    Returns:
        New array of the same shape with the z column, if any, copied

    Raises:
        TransformationError: If the projector yields non-finite values
    """
    xs, ys = projector(coords[:, 0], coords[:, 1])
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)

    if not (np.isfinite(xs).all() and np.isfinite(ys).all()):
        bad = int(np.flatnonzero(~(np.isfinite(xs) & np.isfinite(ys)))[0])
        raise TransformationError(
            f"Coordinate ({coords[bad, 0]}, {coords[bad, 1]}) cannot be projected",
            details={"index": bad},
        )

    result = coords.astype(float, copy=True)
    result[:, 0] = xs
    result[:, 1] = ys
    return result


def _project_sequence(geometry: BaseGeometry, projector: Projector) -> np.ndarray:
    return transform_coordinates(np.asarray(geometry.coords, dtype=float), projector)


def transform_geometry(geometry: BaseGeometry, projector: Projector) -> BaseGeometry:
    """
    Re-project a geometry through a projector.

    Args:
        geometry: Any supported shapely geometry
        projector: Projector for the source/target CRS pair

    Returns:
        New geometry of the same variant; empty geometries are returned as is

    Raises:
        TypeError: If the geometry is not a supported variant
        TransformationError: If a coordinate cannot be projected
    """
    try:
        return _transform(geometry, projector)
    except ShapelyError as e:
        raise TransformationError(
            f"Cannot rebuild {geometry.geom_type}: {e}",
            details={"geometry_type": geometry.geom_type},
        )


def _parts(geometry: BaseGeometry, projector: Projector) -> list:
    return [_transform(part, projector) for part in geometry.geoms]


def _transform(geometry: BaseGeometry, projector: Projector) -> BaseGeometry:
    if not isinstance(geometry, BaseGeometry):
        raise TypeError(f"Unsupported geometry variant: {type(geometry).__name__}")

    if geometry.is_empty:
        return geometry

    if isinstance(geometry, Point):
        return Point(_project_sequence(geometry, projector)[0])

    # LinearRing subclasses LineString
    if isinstance(geometry, LinearRing):
        return LinearRing(_project_sequence(geometry, projector))

    if isinstance(geometry, LineString):
        return LineString(_project_sequence(geometry, projector))

    if isinstance(geometry, Polygon):
        shell = _transform(geometry.exterior, projector)
        holes = [_transform(ring, projector) for ring in geometry.interiors]
        return Polygon(shell, holes)

    # The vectorized constructors accept EMPTY members; the classes reject or drop them
    if isinstance(geometry, MultiPoint):
        return shapely.multipoints(_parts(geometry, projector))

    if isinstance(geometry, MultiLineString):
        return shapely.multilinestrings(_parts(geometry, projector))

    if isinstance(geometry, MultiPolygon):
        return shapely.multipolygons(_parts(geometry, projector))

    if isinstance(geometry, GeometryCollection):
        return shapely.geometrycollections(_parts(geometry, projector))

    raise TypeError(f"Unsupported geometry variant: {type(geometry).__name__}")
