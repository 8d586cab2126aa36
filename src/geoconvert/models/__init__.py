"""
Data models and schemas.
"""

from .conversion import Conversion, ConversionResult, Indentation, InputFormat
from .crs import (
    DEFAULT_SOURCE_EPSG,
    DEFAULT_TARGET_EPSG,
    EPSG_PRESETS,
    CrsDefinition,
    EpsgPreset,
    EpsgRegistryEntry,
    find_preset,
)
from .errors import ErrorDetail, ErrorResponse
from .geometry import Coordinate, Feature, FeatureCollection, GeometryType

__all__ = [
    # Conversion
    "Conversion",
    "ConversionResult",
    "Indentation",
    "InputFormat",
    # CRS
    "DEFAULT_SOURCE_EPSG",
    "DEFAULT_TARGET_EPSG",
    "EPSG_PRESETS",
    "CrsDefinition",
    "EpsgPreset",
    "EpsgRegistryEntry",
    "find_preset",
    # Errors
    "ErrorDetail",
    "ErrorResponse",
    # Geometry
    "Coordinate",
    "Feature",
    "FeatureCollection",
    "GeometryType",
]
