"""
Well-Known Text reading and writing, including line-oriented batches.
"""

import logging
import os
import re
import threading
from typing import List, Optional

import shapely.wkt
from shapely.errors import ShapelyError
from shapely.geometry.base import BaseGeometry

from geoconvert.core.crs.projector import Projector
from geoconvert.core.errors import (
    ConversionCancelledError,
    InvalidInputError,
    TransformationError,
)
from geoconvert.core.geometry.transform import transform_geometry

logger = logging.getLogger(__name__)

FORMAT_NAME = "WKT"

_LINE_SPLIT = re.compile(r"[\r\n]+")


def parse_wkt(text: str) -> BaseGeometry:
    """
    Parse a single WKT geometry.

    Keywords are case-insensitive and surrounding whitespace is ignored.

    Raises:
        InvalidInputError: If the text is not valid WKT
    """
    if not text or not text.strip():
        raise InvalidInputError("Invalid WKT: empty input", input_format=FORMAT_NAME)

    try:
        return shapely.wkt.loads(text.strip())
    except (ShapelyError, ValueError) as e:
        raise InvalidInputError(
            f"Invalid WKT: {e}",
            input_format=FORMAT_NAME,
        )


def to_wkt(geometry: BaseGeometry) -> str:
    """
    Write a geometry as WKT.

    Coordinates keep full precision with trailing zeros trimmed, so
    ``POINT (30.0 10.0)`` is written as ``POINT (30 10)``.
    """
    return shapely.wkt.dumps(geometry, trim=True, rounding_precision=-1)


def split_lines(text: str) -> List[str]:
    """Split text on CR/LF into trimmed, non-empty lines."""
    return [line.strip() for line in _LINE_SPLIT.split(text) if line.strip()]


def error_marker(message: str) -> str:
    return f"<Error: {message}>"


def transform_wkt_line(line: str, projector: Projector) -> str:
    """
    Re-project one WKT geometry.

    Raises:
        InvalidInputError: If the line is not valid WKT
        TransformationError: If a coordinate cannot be projected
    """
    return to_wkt(transform_geometry(parse_wkt(line), projector))


def transform_wkt_batch(
    text: str,
    projector: Projector,
    cancel_event: Optional[threading.Event] = None,
) -> str:
    """
    Re-project newline-delimited WKT, one geometry per line.

    A line that fails to parse or project is replaced by an
    ``<Error: message>`` marker in place; the remaining lines are still
    processed. Output lines keep input order and are joined with the
    platform line separator.

    Args:
        text: WKT lines
        projector: Projector for the source/target CRS pair
        cancel_event: Checked before each line

    Returns:
        Transformed lines and error markers

    Raises:
        ConversionCancelledError: If cancel_event is set between lines
    """
    results: List[str] = []
    failures = 0

    for number, line in enumerate(split_lines(text), start=1):
        if cancel_event is not None and cancel_event.is_set():
            raise ConversionCancelledError()

        try:
            results.append(transform_wkt_line(line, projector))
        except (InvalidInputError, TransformationError) as e:
            failures += 1
            logger.warning(f"WKT line {number} failed: {e.message}")
            results.append(error_marker(e.message))

    logger.debug(f"Transformed {len(results)} WKT lines, {failures} failed")
    return os.linesep.join(results)
