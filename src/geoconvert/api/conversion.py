"""
Conversion and EPSG lookup endpoints.
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Query

from geoconvert.core.crs.registry import get_registry
from geoconvert.core.detection import detect_format, looks_like_wkt
from geoconvert.core.errors import InvalidInputError, UnsupportedCRSError
from geoconvert.core.orchestrator import convert_async, transform_async
from geoconvert.models.api import (
    ConversionResponse,
    ConvertRequest,
    DetectRequest,
    DetectResponse,
    EpsgCodeResponse,
    EpsgListItem,
    EpsgListResponse,
    EpsgPresetResponse,
    TransformRequest,
)
from geoconvert.models.conversion import InputFormat
from geoconvert.models.crs import EPSG_PRESETS
from geoconvert.models.errors import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conversion"])


@router.post(
    "/transform",
    response_model=ConversionResponse,
    responses={422: {"model": ErrorResponse, "description": "Undetectable input format"}},
    summary="Re-project GeoJSON or WKT",
)
async def transform_endpoint(request: TransformRequest) -> ConversionResponse:
    """
    Re-project geometry text between two EPSG codes.

    Failures of the conversion itself are reported with ``succeeded=false``.
    Without an explicit format, text that is neither GeoJSON nor a WKT
    keyword is still tried as WKT unless it is a bare number; only such
    input is rejected outright.
    """
    input_format = request.input_format or detect_format(request.input)
    if input_format is None and looks_like_wkt(request.input):
        input_format = InputFormat.WKT
    if input_format is None:
        if not request.input.strip():
            return ConversionResponse(data="", succeeded=False)
        raise InvalidInputError(
            "Input format could not be detected; pass input_format explicitly"
        )

    result = await transform_async(
        request.input,
        input_format,
        request.source_epsg,
        request.target_epsg,
        request.indentation,
    )
    return ConversionResponse(**result.to_dict())


@router.post("/convert", response_model=ConversionResponse, summary="Convert between GeoJSON and WKT")
async def convert_endpoint(request: ConvertRequest) -> ConversionResponse:
    """Convert geometry text between GeoJSON and WKT without re-projection."""
    result = await convert_async(request.input, request.conversion, request.indentation)
    return ConversionResponse(**result.to_dict())


@router.post("/detect", response_model=DetectResponse, summary="Detect input format")
async def detect_endpoint(request: DetectRequest) -> DetectResponse:
    return DetectResponse(format=detect_format(request.input))


@router.get("/epsg/presets", response_model=list[EpsgPresetResponse], summary="List EPSG presets")
async def list_presets() -> list[EpsgPresetResponse]:
    """Commonly used coordinate reference systems, in display order."""
    return [
        EpsgPresetResponse(
            code=preset.code,
            name=preset.name,
            description=preset.description,
            label=str(preset),
        )
        for preset in EPSG_PRESETS
    ]


@router.get(
    "/epsg/{code}",
    response_model=EpsgCodeResponse,
    responses={404: {"model": ErrorResponse, "description": "EPSG code not supported"}},
    summary="Look up an EPSG code",
)
async def get_epsg_code(code: int) -> EpsgCodeResponse:
    """
    Look up one EPSG code in the registry.

    Raises:
        UnsupportedCRSError: If the code is not in the database (404)
    """
    registry = get_registry()
    try:
        entry = registry.get_entry(code)
    except UnsupportedCRSError as e:
        e.status_code = 404
        raise

    try:
        definition = await asyncio.to_thread(registry.resolve, code)
        is_geographic: Optional[bool] = definition.is_geographic
    except UnsupportedCRSError:
        is_geographic = None

    return EpsgCodeResponse(
        code=entry.code,
        name=entry.name,
        definition=entry.definition,
        is_geographic=is_geographic,
    )


@router.get("/epsg", response_model=EpsgListResponse, summary="List supported EPSG codes")
async def list_epsg_codes(
    search: Optional[str] = Query(None, description="Case-insensitive code or name filter"),
    limit: int = Query(100, ge=1, le=10000),
) -> EpsgListResponse:
    """List supported codes with their names, sorted by code."""
    items = get_registry().list_codes_with_names()

    if search:
        needle = search.strip().lower()
        items = [
            (code, name)
            for code, name in items
            if needle in str(code) or needle in name.lower()
        ]

    return EpsgListResponse(
        total=len(items),
        items=[EpsgListItem(code=code, name=name) for code, name in items[:limit]],
    )
