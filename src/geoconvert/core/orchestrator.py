"""
Conversion entry points.

``transform`` re-projects GeoJSON or WKT between EPSG codes; ``convert``
switches a geometry between GeoJSON and WKT without touching coordinates.
Both report expected failures through ``ConversionResult`` and never raise
for bad input, unsupported codes or cancellation.
"""

import asyncio
import logging
import threading
from typing import Optional

from shapely.geometry import GeometryCollection

from geoconvert.core.crs.registry import CRSRegistry, get_registry
from geoconvert.core.errors import (
    ConversionCancelledError,
    InvalidInputError,
    TransformationError,
    UnsupportedCRSError,
)
from geoconvert.core.logging_config import LogContext
from geoconvert.core.parsers import geojson, wkt
from geoconvert.models.conversion import (
    Conversion,
    ConversionResult,
    Indentation,
    InputFormat,
)
from geoconvert.models.geometry import Feature, FeatureCollection
from geoconvert.utils.logging import PerformanceTimer

logger = logging.getLogger(__name__)

TRANSFORMATION_ERROR_PREFIX = "Transformation error: "


def _check_cancelled(cancel_event: Optional[threading.Event]) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise ConversionCancelledError()


def transform(
    input_text: str,
    input_format: InputFormat,
    source_epsg: int,
    target_epsg: int,
    indentation: Indentation = Indentation.TWO_SPACES,
    cancel_event: Optional[threading.Event] = None,
    registry: Optional[CRSRegistry] = None,
) -> ConversionResult[str]:
    """
    Re-project GeoJSON or WKT from one EPSG code to another.

    Args:
        input_text: GeoJSON document, or WKT with one geometry per line
        input_format: Encoding of input_text
        source_epsg: EPSG code of the input coordinates
        target_epsg: EPSG code to project to
        indentation: GeoJSON output layout, ignored for WKT
        cancel_event: Cooperative cancellation signal
        registry: Registry to resolve codes with; the default registry when None

    Returns:
        Transformed text on success. Blank input and cancellation fail with
        empty data; other failures carry a "Transformation error: ..." message.
        Identical codes return the input unchanged.

    Raises:
        EpsgDatabaseError: If the EPSG database cannot be loaded
    """
    if input_text is None or not input_text.strip():
        return ConversionResult.failed("")

    if source_epsg == target_epsg:
        return ConversionResult.ok(input_text)

    registry = registry or get_registry()
    input_format = InputFormat(input_format)
    indentation = Indentation(indentation)

    with LogContext(
        source_epsg=source_epsg,
        target_epsg=target_epsg,
        input_format=input_format.value,
    ):
        try:
            projector = registry.get_transform(source_epsg, target_epsg)

            _check_cancelled(cancel_event)

            with PerformanceTimer(
                f"{input_format.value} EPSG:{source_epsg} -> EPSG:{target_epsg}"
            ):
                if input_format is InputFormat.GEOJSON:
                    output = geojson.transform_geojson(input_text, projector, indentation)
                else:
                    output = wkt.transform_wkt_batch(input_text, projector, cancel_event)

            _check_cancelled(cancel_event)

        except ConversionCancelledError:
            logger.info("Transformation cancelled")
            return ConversionResult.failed("")
        except (InvalidInputError, UnsupportedCRSError, TransformationError) as e:
            logger.error(f"Transformation failed: {e}")
            return ConversionResult.failed(f"{TRANSFORMATION_ERROR_PREFIX}{e.message}")

    return ConversionResult.ok(output)


async def transform_async(
    input_text: str,
    input_format: InputFormat,
    source_epsg: int,
    target_epsg: int,
    indentation: Indentation = Indentation.TWO_SPACES,
    cancel_event: Optional[threading.Event] = None,
    registry: Optional[CRSRegistry] = None,
) -> ConversionResult[str]:
    """Run ``transform`` in a worker thread."""
    return await asyncio.to_thread(
        transform,
        input_text,
        input_format,
        source_epsg,
        target_epsg,
        indentation,
        cancel_event,
        registry,
    )


def _geojson_to_wkt(input_text: str) -> str:
    parsed = geojson.parse_geojson(input_text)

    if isinstance(parsed, FeatureCollection):
        return wkt.to_wkt(GeometryCollection(parsed.geometries()))

    if isinstance(parsed, Feature):
        if parsed.geometry is None:
            raise InvalidInputError(
                "Invalid GeoJSON: Feature has no geometry",
                input_format=geojson.FORMAT_NAME,
            )
        return wkt.to_wkt(parsed.geometry)

    return wkt.to_wkt(parsed)


def _wkt_to_geojson(input_text: str, indentation: Indentation) -> str:
    return geojson.dumps(wkt.parse_wkt(input_text), indentation)


def convert(
    input_text: str,
    conversion: Conversion,
    indentation: Indentation = Indentation.COMPACT,
    cancel_event: Optional[threading.Event] = None,
) -> ConversionResult[str]:
    """
    Convert a geometry between GeoJSON and WKT.

    Args:
        input_text: Text in the conversion's source format
        conversion: Conversion direction
        indentation: GeoJSON output layout for WKT_TO_GEOJSON
        cancel_event: Cooperative cancellation signal

    Returns:
        Converted text, or the parse error message on failure. A Feature
        converts to its geometry; a FeatureCollection converts to a
        GEOMETRYCOLLECTION of its non-null geometries.
    """
    if input_text is None or not input_text.strip():
        return ConversionResult.failed("")

    conversion = Conversion(conversion)
    indentation = Indentation(indentation)

    with LogContext(conversion=conversion.value, input_format=conversion.source_format.value):
        try:
            _check_cancelled(cancel_event)

            with PerformanceTimer(f"convert {conversion.value}"):
                if conversion is Conversion.GEOJSON_TO_WKT:
                    output = _geojson_to_wkt(input_text)
                else:
                    output = _wkt_to_geojson(input_text, indentation)

            _check_cancelled(cancel_event)

        except ConversionCancelledError:
            logger.info("Conversion cancelled")
            return ConversionResult.failed("")
        except InvalidInputError as e:
            logger.error(f"Conversion failed: {e}")
            return ConversionResult.failed(e.message)

    return ConversionResult.ok(output)


async def convert_async(
    input_text: str,
    conversion: Conversion,
    indentation: Indentation = Indentation.COMPACT,
    cancel_event: Optional[threading.Event] = None,
) -> ConversionResult[str]:
    """Run ``convert`` in a worker thread."""
    return await asyncio.to_thread(convert, input_text, conversion, indentation, cancel_event)
