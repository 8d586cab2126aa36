"""
Coordinate Reference System (CRS) module.

This module provides:
- The EPSG registry resolving codes to pyproj CRS definitions
- Cached projectors between pairs of EPSG codes
- Module-level queries against the default registry
"""

from geoconvert.core.crs.projector import Projector, PyprojProjector
from geoconvert.core.crs.registry import (
    CRSRegistry,
    build_crs,
    get_registry,
    is_valid_epsg_code,
    parse_database,
    supported_epsg_codes,
    supported_epsg_codes_with_names,
    supported_epsg_count,
)

__all__ = [
    # Projector
    "Projector",
    "PyprojProjector",
    # Registry
    "CRSRegistry",
    "build_crs",
    "get_registry",
    "parse_database",
    # Default registry queries
    "is_valid_epsg_code",
    "supported_epsg_codes",
    "supported_epsg_codes_with_names",
    "supported_epsg_count",
]
