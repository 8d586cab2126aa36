"""
Request and response schemas for the HTTP API.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from geoconvert.core.config import settings
from geoconvert.models.conversion import Conversion, Indentation, InputFormat


class TransformRequest(BaseModel):
    """Re-projection request; the format is detected when omitted."""

    input: str = Field(..., max_length=settings.max_input_length, description="GeoJSON or WKT text")
    input_format: Optional[InputFormat] = Field(None, description="Input encoding")
    source_epsg: int = Field(settings.default_source_epsg, description="EPSG code of the input")
    target_epsg: int = Field(settings.default_target_epsg, description="EPSG code to project to")
    indentation: Indentation = Field(
        Indentation(settings.default_indentation),
        description="GeoJSON output layout",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "input": '{"type": "Point", "coordinates": [4.9041, 52.3676]}',
                "input_format": "geojson",
                "source_epsg": 4326,
                "target_epsg": 28992,
                "indentation": "two_spaces",
            }
        }
    )


class ConvertRequest(BaseModel):
    """GeoJSON/WKT conversion request."""

    input: str = Field(..., max_length=settings.max_input_length, description="GeoJSON or WKT text")
    conversion: Conversion = Field(..., description="Conversion direction")
    indentation: Indentation = Field(Indentation.COMPACT, description="GeoJSON output layout")


class DetectRequest(BaseModel):
    input: str = Field(..., max_length=settings.max_input_length)


class ConversionResponse(BaseModel):
    """Result of a transform or convert request."""

    data: str = Field(..., description="Output text, or an error message when not succeeded")
    succeeded: bool


class DetectResponse(BaseModel):
    format: Optional[InputFormat] = Field(None, description="Detected format, null if unknown")


class EpsgPresetResponse(BaseModel):
    code: int
    name: str
    description: str
    label: str = Field(..., description="Display label, e.g. 'EPSG:4326 - WGS 84'")


class EpsgCodeResponse(BaseModel):
    """Registry entry for one EPSG code."""

    code: int
    name: str
    definition: str
    is_geographic: Optional[bool] = Field(
        None, description="Null when the definition cannot be constructed"
    )


class EpsgListItem(BaseModel):
    code: int
    name: str


class EpsgListResponse(BaseModel):
    total: int = Field(..., description="Number of matching codes before the limit")
    items: List[EpsgListItem]
