"""
FastAPI error handlers for consistent error responses.

Every handler answers with an ``ErrorResponse`` body.
"""

import logging
import traceback
from typing import Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from geoconvert.core.config import settings
from geoconvert.core.errors import GeoConvertException
from geoconvert.models.errors import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def get_request_id(request: Request) -> Union[str, None]:
    """
    Extract request ID from request state.

    Args:
        request: FastAPI request object

    Returns:
        Request ID if available, None otherwise
    """
    return getattr(request.state, "request_id", None)


async def geoconvert_exception_handler(
    request: Request, exc: GeoConvertException
) -> JSONResponse:
    """
    Handle GeoConvertException and its subclasses.

    Args:
        request: FastAPI request object
        exc: GeoConvertException instance

    Returns:
        JSONResponse with the exception's status code and error details
    """
    request_id = get_request_id(request)

    logger.error(
        f"GeoConvertException: {exc.error_code} - {exc.message}",
        extra={
            "error_code": exc.error_code,
            "status_code": exc.status_code,
            "details": exc.details,
        },
    )

    error_response = ErrorResponse(
        error_code=exc.error_code,
        message=exc.message,
        details=exc.details if exc.details else None,
        request_id=request_id,
        suggestions=exc.suggestions if exc.suggestions else None,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode="json", exclude_none=True),
    )


async def validation_error_handler(
    request: Request, exc: Union[RequestValidationError, PydanticValidationError]
) -> JSONResponse:
    """
    Handle Pydantic validation errors from FastAPI.

    Args:
        request: FastAPI request object
        exc: Pydantic ValidationError

    Returns:
        JSONResponse (422) listing every failing field
    """
    request_id = get_request_id(request)

    errors = []
    for error in exc.errors():
        field_path = ".".join(str(loc) for loc in error.get("loc", []))
        errors.append(
            ErrorDetail(
                field=field_path,
                message=error.get("msg", "Validation error"),
                code=error.get("type", "validation_error"),
            )
        )

    logger.warning(
        f"Validation error: {len(errors)} field(s) failed validation",
        extra={"error_count": len(errors)},
    )

    error_response = ErrorResponse(
        error_code="VALIDATION_ERROR",
        message="Request validation failed",
        request_id=request_id,
        suggestions=["Check the request format and field values"],
        errors=errors,
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response.model_dump(mode="json", exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Internal details are only exposed in development.
    """
    request_id = get_request_id(request)

    logger.error(
        f"Unhandled exception: {type(exc).__name__} - {str(exc)}",
        exc_info=True,
        extra={"exception_type": type(exc).__name__},
    )

    details = None
    if settings.environment == "development":
        details = {
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
            "traceback": traceback.format_exc(),
        }

    error_response = ErrorResponse(
        error_code="INTERNAL_ERROR",
        message="An unexpected error occurred",
        details=details,
        request_id=request_id,
        suggestions=["Try again later"],
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(mode="json", exclude_none=True),
    )


def register_error_handlers(app: FastAPI) -> None:
    """
    Register all error handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(GeoConvertException, geoconvert_exception_handler)

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(PydanticValidationError, validation_error_handler)

    app.add_exception_handler(Exception, generic_exception_handler)

    logger.debug("Error handlers registered")
