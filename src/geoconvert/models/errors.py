"""
Pydantic models for standardized error responses.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ErrorDetail(BaseModel):
    """
    Detailed information about a specific error.

    Used for validation errors with multiple field-level issues.
    """

    field: Optional[str] = Field(None, description="Field name that caused the error")
    message: str = Field(..., description="Error message for this field")
    code: Optional[str] = Field(None, description="Error code for this specific issue")


class ErrorResponse(BaseModel):
    """
    Standardized error response model for all API errors.

    Attributes:
        error_code: Machine-readable error identifier (e.g., 'UNSUPPORTED_CRS')
        message: Human-readable error message
        details: Optional dictionary with additional technical details
        timestamp: When the error occurred (UTC)
        request_id: Optional request correlation ID for tracing
        suggestions: Optional list of actionable suggestions for resolution
        errors: Optional list of detailed field-level errors
    """

    error_code: str = Field(
        ...,
        description="Machine-readable error code",
        examples=["VALIDATION_ERROR", "INVALID_INPUT", "UNSUPPORTED_CRS"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["EPSG:99999 is not supported."],
    )
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional technical details about the error",
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the error occurred (UTC)",
    )
    request_id: Optional[str] = Field(
        None,
        description="Request correlation ID for tracing",
    )
    suggestions: Optional[List[str]] = Field(
        None,
        description="Actionable suggestions for resolving the error",
    )
    errors: Optional[List[ErrorDetail]] = Field(
        None,
        description="Detailed field-level errors (for validation)",
    )

    @field_serializer("timestamp")
    def serialize_timestamp(self, timestamp: datetime, _info) -> str:
        """Serialize timestamp to ISO format string."""
        return timestamp.isoformat() + "Z" if timestamp.tzinfo is None else timestamp.isoformat()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_code": "UNSUPPORTED_CRS",
                "message": "EPSG:99999 is not supported.",
                "details": {"epsg": 99999},
                "timestamp": "2026-01-10T15:30:00+00:00",
                "request_id": "550e8400-e29b-41d4-a716-446655440000",
                "suggestions": ["Pick an EPSG code from the supported code list"],
            }
        }
    )
