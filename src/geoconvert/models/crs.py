"""
Data models for EPSG coordinate reference systems.

This module defines the curated preset list offered to users, the raw
registry entry shape and the resolved CRS definition shared by transforms.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from pyproj import CRS

# Matches "+key=value" and bare "+flag" tokens of a PROJ string
_PROJ_PARAM_PATTERN = re.compile(r"\+([A-Za-z_0-9]+)(?:=(\S+))?")
_QUOTED_NAME_PATTERN = re.compile(r'"([^"]*)"')

UNKNOWN_CRS_NAME = "Unknown"


@dataclass(frozen=True)
class EpsgPreset:
    """
    Commonly used CRS offered for quick selection.

    Attributes:
        code: EPSG code
        name: Short display name
        description: One-line description of the area or purpose
    """

    code: int
    name: str
    description: str

    def __str__(self) -> str:
        return f"EPSG:{self.code} - {self.name}"


EPSG_PRESETS: Tuple[EpsgPreset, ...] = (
    EpsgPreset(4326, "WGS 84", "World Geodetic System 1984 (GPS)"),
    EpsgPreset(4269, "NAD83", "North American Datum 1983"),
    EpsgPreset(4258, "ETRS89", "European Terrestrial Reference System 1989"),
    EpsgPreset(3857, "Web Mercator", "Google Maps, OpenStreetMap, Bing"),
    EpsgPreset(28992, "RD New", "Amersfoort / RD New (Netherlands)"),
    EpsgPreset(2154, "Lambert 93", "RGF93 / Lambert-93 (France)"),
    EpsgPreset(27700, "British National Grid", "OSGB 1936 (United Kingdom)"),
    EpsgPreset(2056, "LV95", "CH1903+ / LV95 (Switzerland)"),
    EpsgPreset(31370, "Belgian Lambert 72", "Belge 1972 (Belgium)"),
    EpsgPreset(3035, "ETRS89-LAEA", "Europe Lambert Azimuthal Equal Area"),
    EpsgPreset(25832, "ETRS89 / UTM 32N", "Central Europe, UTM zone 32N"),
    EpsgPreset(25833, "ETRS89 / UTM 33N", "Central Europe, UTM zone 33N"),
    EpsgPreset(32610, "WGS 84 / UTM 10N", "US West Coast, UTM zone 10N"),
    EpsgPreset(32611, "WGS 84 / UTM 11N", "US West, UTM zone 11N"),
    EpsgPreset(32617, "WGS 84 / UTM 17N", "US East, UTM zone 17N"),
    EpsgPreset(32618, "WGS 84 / UTM 18N", "US East Coast, UTM zone 18N"),
    EpsgPreset(32632, "WGS 84 / UTM 32N", "Central Europe, UTM zone 32N"),
    EpsgPreset(32633, "WGS 84 / UTM 33N", "Central Europe, UTM zone 33N"),
)

DEFAULT_SOURCE_EPSG = 4326
DEFAULT_TARGET_EPSG = 3857


def find_preset(code: int) -> Optional[EpsgPreset]:
    """
    Look up a preset by EPSG code.

    Args:
        code: EPSG code

    Returns:
        Matching preset, or None if the code is not a preset
    """
    for preset in EPSG_PRESETS:
        if preset.code == code:
            return preset
    return None


def extract_crs_name(definition: str) -> str:
    """Return the first quoted substring of a definition, or "Unknown"."""
    match = _QUOTED_NAME_PATTERN.search(definition)
    if match is None:
        return UNKNOWN_CRS_NAME
    return match.group(1)


@dataclass(frozen=True)
class EpsgRegistryEntry:
    """
    Raw record from the EPSG database.

    Attributes:
        code: EPSG code
        definition: Definition text, either WKT or a named PROJ string
    """

    code: int
    definition: str

    @property
    def name(self) -> str:
        return extract_crs_name(self.definition)


@dataclass(frozen=True)
class CrsDefinition:
    """
    Resolved coordinate reference system for one EPSG code.

    Instances are built once by the registry and shared read-only by every
    transform that uses the code.

    Attributes:
        epsg: EPSG code
        name: Human-readable name taken from the definition text
        definition: Definition text the CRS was built from
        crs: Constructed pyproj CRS
    """

    epsg: int
    name: str
    definition: str
    crs: CRS = field(compare=False, repr=False)

    @property
    def parameters(self) -> Dict[str, Optional[str]]:
        """
        PROJ parameters of the definition.

        Flags without a value (``+no_defs``) map to None. WKT definitions
        yield an empty mapping.
        """
        if not self.is_proj_string:
            return {}
        return {
            key: value or None
            for key, value in _PROJ_PARAM_PATTERN.findall(self.definition_body)
        }

    @property
    def definition_body(self) -> str:
        """Definition text with the leading quoted name removed."""
        return _QUOTED_NAME_PATTERN.sub("", self.definition, count=1).strip()

    @property
    def is_proj_string(self) -> bool:
        return self.definition_body.startswith("+")

    @property
    def is_geographic(self) -> bool:
        return bool(self.crs.is_geographic)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "epsg": self.epsg,
            "name": self.name,
            "definition": self.definition,
            "is_geographic": self.is_geographic,
        }
