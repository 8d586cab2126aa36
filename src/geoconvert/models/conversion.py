"""
Conversion request options and the result type returned by every operation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class InputFormat(str, Enum):
    """Text encodings accepted as conversion input."""

    GEOJSON = "geojson"
    WKT = "wkt"


class Indentation(str, Enum):
    """Whitespace layout of GeoJSON output."""

    TWO_SPACES = "two_spaces"
    FOUR_SPACES = "four_spaces"
    COMPACT = "compact"

    @property
    def width(self) -> Optional[int]:
        """Indent width in spaces, None for compact output."""
        if self is Indentation.TWO_SPACES:
            return 2
        if self is Indentation.FOUR_SPACES:
            return 4
        return None


class Conversion(str, Enum):
    """Direction of a GeoJSON/WKT conversion without re-projection."""

    GEOJSON_TO_WKT = "geojson_to_wkt"
    WKT_TO_GEOJSON = "wkt_to_geojson"

    @property
    def source_format(self) -> InputFormat:
        if self is Conversion.GEOJSON_TO_WKT:
            return InputFormat.GEOJSON
        return InputFormat.WKT


@dataclass(frozen=True)
class ConversionResult(Generic[T]):
    """
    Outcome of a conversion.

    Expected failures (blank input, unparsable text, unsupported EPSG codes,
    cancellation) are reported through ``succeeded`` rather than raised.

    Attributes:
        data: Converted output, or a human-readable message on failure
        succeeded: Whether the conversion completed
    """

    data: T
    succeeded: bool

    @classmethod
    def ok(cls, data: T) -> "ConversionResult[T]":
        return cls(data=data, succeeded=True)

    @classmethod
    def failed(cls, data: T) -> "ConversionResult[T]":
        return cls(data=data, succeeded=False)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {"data": self.data, "succeeded": self.succeeded}
