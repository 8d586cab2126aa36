"""
Heuristic input format detection.

Detection only looks at the leading characters; it does not parse.
"""

from typing import Optional

from geoconvert.models.conversion import InputFormat

WKT_KEYWORDS = (
    "POINT",
    "LINESTRING",
    "POLYGON",
    "MULTIPOINT",
    "MULTILINESTRING",
    "MULTIPOLYGON",
    "GEOMETRYCOLLECTION",
)


def detect_format(text: Optional[str]) -> Optional[InputFormat]:
    """
    Classify raw text as GeoJSON or WKT.

    Args:
        text: Raw input, may be None

    Returns:
        GEOJSON for an object with a "type" member, WKT for text starting with
        a geometry keyword, otherwise None
    """
    if text is None:
        return None

    trimmed = text.strip()
    if not trimmed:
        return None

    if trimmed.startswith("{") and '"type"' in trimmed:
        return InputFormat.GEOJSON

    if trimmed.upper().startswith(WKT_KEYWORDS):
        return InputFormat.WKT

    return None


def looks_like_wkt(text: Optional[str]) -> bool:
    """
    Lenient WKT check: any non-blank text that is not a bare integer.

    Used to decide whether free text is worth handing to the WKT parser.
    """
    if text is None or not text.strip():
        return False

    try:
        int(text.strip())
    except ValueError:
        return True
    return False
