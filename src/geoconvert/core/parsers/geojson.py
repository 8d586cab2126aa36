"""
GeoJSON reading and writing.

Parsed documents are shapely geometries, or ``Feature``/``FeatureCollection``
wrappers around them. Output is deterministic: members are written in a
fixed order and coordinates always carry a decimal point (``10`` becomes
``10.0``).
"""

import json
import logging
from typing import Any, Dict, List, Optional

from shapely.errors import ShapelyError
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry

from geoconvert.core.crs.projector import Projector
from geoconvert.core.errors import InvalidInputError
from geoconvert.core.geometry.transform import transform_geometry
from geoconvert.models.conversion import Indentation
from geoconvert.models.geometry import (
    GEOJSON_GEOMETRY_TYPES,
    Feature,
    FeatureCollection,
    GeoJSONObject,
    GeometryType,
)

logger = logging.getLogger(__name__)

FORMAT_NAME = "GeoJSON"

# Everything shapely.geometry.shape raises on malformed members
_SHAPE_ERRORS = (ShapelyError, ValueError, TypeError, KeyError, IndexError, AttributeError)


def _invalid(message: str, **details: Any) -> InvalidInputError:
    return InvalidInputError(f"Invalid GeoJSON: {message}", input_format=FORMAT_NAME, details=details)


def parse_geometry(obj: Dict[str, Any]) -> BaseGeometry:
    """
    Build a shapely geometry from a GeoJSON geometry object.

    Raises:
        InvalidInputError: If the type is unknown or the coordinates are malformed
    """
    geometry_type = obj.get("type")
    if geometry_type not in GEOJSON_GEOMETRY_TYPES:
        raise _invalid(f"unsupported geometry type {geometry_type!r}")

    try:
        return shape(obj)
    except _SHAPE_ERRORS as e:
        raise _invalid(f"malformed {geometry_type}: {e}", geometry_type=geometry_type)


def parse_feature(obj: Any) -> Feature:
    """
    Build a Feature from a GeoJSON Feature object.

    A missing or null ``geometry`` member yields a Feature without geometry.

    Raises:
        InvalidInputError: If the object is not a Feature or its geometry is malformed
    """
    if not isinstance(obj, dict) or obj.get("type") != "Feature":
        raise _invalid("expected a Feature object")

    geometry_obj = obj.get("geometry")
    if geometry_obj is not None and not isinstance(geometry_obj, dict):
        raise _invalid("Feature geometry must be an object or null")

    return Feature(
        geometry=parse_geometry(geometry_obj) if geometry_obj is not None else None,
        properties=obj.get("properties"),
        id=obj.get("id"),
        has_bbox="bbox" in obj,
    )


def parse_geojson(text: str) -> GeoJSONObject:
    """
    Parse GeoJSON text.

    Args:
        text: GeoJSON document holding a geometry, Feature or FeatureCollection

    Returns:
        Shapely geometry, Feature or FeatureCollection

    Raises:
        InvalidInputError: If the text is not JSON, has no recognised ``type``
            or contains malformed members
    """
    try:
        obj = json.loads(text)
    except ValueError as e:
        raise _invalid(str(e))

    if not isinstance(obj, dict):
        raise _invalid("top-level value must be an object")

    object_type = obj.get("type")
    if object_type is None:
        raise _invalid("missing 'type' member")

    if object_type == "FeatureCollection":
        features = obj.get("features")
        if not isinstance(features, list):
            raise _invalid("FeatureCollection 'features' must be an array")
        return FeatureCollection(
            features=[parse_feature(feature) for feature in features],
            has_bbox="bbox" in obj,
        )

    if object_type == "Feature":
        return parse_feature(obj)

    return parse_geometry(obj)


def geometry_to_dict(geometry: BaseGeometry) -> Dict[str, Any]:
    """
    Convert a shapely geometry to a GeoJSON geometry object.

    Linear rings are written as LineString, which is the closest GeoJSON type.
    """
    geometry_type = GeometryType.of(geometry)

    if geometry_type is GeometryType.GEOMETRY_COLLECTION:
        return {
            "type": geometry_type.value,
            "geometries": [geometry_to_dict(part) for part in geometry.geoms],
        }

    if geometry_type is GeometryType.LINEAR_RING:
        geometry_type = GeometryType.LINE_STRING

    return {
        "type": geometry_type.value,
        "coordinates": mapping(geometry)["coordinates"],
    }


def _bbox(geometries: List[BaseGeometry]) -> Optional[List[float]]:
    bounds = [g.bounds for g in geometries if not g.is_empty]
    if not bounds:
        return None
    return [
        min(b[0] for b in bounds),
        min(b[1] for b in bounds),
        max(b[2] for b in bounds),
        max(b[3] for b in bounds),
    ]


def feature_to_dict(feature: Feature) -> Dict[str, Any]:
    """Convert a Feature to a GeoJSON Feature object."""
    result: Dict[str, Any] = {"type": "Feature"}

    if feature.id is not None:
        result["id"] = feature.id

    if feature.has_bbox and feature.geometry is not None:
        bbox = _bbox([feature.geometry])
        if bbox is not None:
            result["bbox"] = bbox

    result["geometry"] = (
        geometry_to_dict(feature.geometry) if feature.geometry is not None else None
    )
    result["properties"] = feature.properties
    return result


def to_dict(obj: GeoJSONObject) -> Dict[str, Any]:
    """Convert a parsed GeoJSON object back to its JSON-compatible form."""
    if isinstance(obj, FeatureCollection):
        result: Dict[str, Any] = {"type": "FeatureCollection"}
        if obj.has_bbox:
            bbox = _bbox(obj.geometries())
            if bbox is not None:
                result["bbox"] = bbox
        result["features"] = [feature_to_dict(feature) for feature in obj.features]
        return result

    if isinstance(obj, Feature):
        return feature_to_dict(obj)

    return geometry_to_dict(obj)


def dumps(obj: GeoJSONObject, indentation: Indentation = Indentation.TWO_SPACES) -> str:
    """
    Serialize a parsed GeoJSON object.

    Args:
        obj: Geometry, Feature or FeatureCollection
        indentation: Output layout; compact output has no whitespace

    Returns:
        GeoJSON text; non-ASCII property text is written verbatim
    """
    data = to_dict(obj)

    if indentation.width is None:
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))

    return json.dumps(data, ensure_ascii=False, indent=indentation.width)


def transform_object(obj: GeoJSONObject, projector: Projector) -> GeoJSONObject:
    """
    Re-project every geometry in a parsed GeoJSON object.

    Feature properties and ids are carried over unchanged.
    """
    if isinstance(obj, FeatureCollection):
        return FeatureCollection(
            features=[transform_object(feature, projector) for feature in obj.features],
            has_bbox=obj.has_bbox,
        )

    if isinstance(obj, Feature):
        return Feature(
            geometry=(
                transform_geometry(obj.geometry, projector)
                if obj.geometry is not None
                else None
            ),
            properties=obj.properties,
            id=obj.id,
            has_bbox=obj.has_bbox,
        )

    return transform_geometry(obj, projector)


def transform_geojson(
    text: str,
    projector: Projector,
    indentation: Indentation = Indentation.TWO_SPACES,
) -> str:
    """
    Parse, re-project and serialize a GeoJSON document.

    Raises:
        InvalidInputError: If the document cannot be parsed
        TransformationError: If a coordinate cannot be projected
    """
    parsed = parse_geojson(text)
    logger.debug(f"Parsed GeoJSON {type(parsed).__name__}")
    return dumps(transform_object(parsed, projector), indentation)
