"""
Custom exception hierarchy for geoconvert.

Expected failures (bad input, unknown EPSG codes, projection failures) are
raised internally and converted to failed ``ConversionResult`` values at the
orchestrator boundary. Configuration errors are fatal and propagate.
"""

from typing import Any, Dict, List, Optional


class GeoConvertException(Exception):
    """
    Base exception for all geoconvert-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        status_code: HTTP status code for API responses
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeoConvertException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            status_code: HTTP status code (default: 500)
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}', "
            f"status_code={self.status_code})"
        )


class InvalidInputError(GeoConvertException):
    """
    Raised when GeoJSON or WKT text cannot be parsed.

    Covers malformed JSON, a missing or unknown ``type`` member, and WKT
    that does not follow the grammar.
    Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str,
        input_format: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize InvalidInputError.

        Args:
            message: User-friendly error message
            input_format: Format being parsed ('GeoJSON' or 'WKT')
            details: Technical details about the parsing failure
            suggestions: List of suggestions for fixing the input
        """
        error_details = details or {}
        if input_format:
            error_details["input_format"] = input_format

        default_suggestions = [
            "Check the input is valid GeoJSON or WKT",
            "Make sure GeoJSON objects carry a 'type' member",
        ]

        super().__init__(
            message=message,
            error_code="INVALID_INPUT",
            status_code=422,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class UnsupportedCRSError(GeoConvertException):
    """
    Raised when an EPSG code cannot be resolved by the registry.

    The message always contains "not supported" so callers can match on it.
    Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        epsg: int,
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize UnsupportedCRSError.

        Args:
            epsg: EPSG code that could not be resolved
            reason: Explanation appended to the message
            details: Technical details about the failure
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        error_details["epsg"] = epsg

        message = f"EPSG:{epsg} is not supported."
        if reason:
            message = f"{message} {reason}"

        super().__init__(
            message=message,
            error_code="UNSUPPORTED_CRS",
            status_code=422,
            details=error_details,
            suggestions=suggestions
            or ["Pick an EPSG code from the supported code list"],
        )
        self.epsg = epsg


class TransformationError(GeoConvertException):
    """
    Raised when the projector fails on a coordinate.

    Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str,
        source_epsg: Optional[int] = None,
        target_epsg: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize TransformationError.

        Args:
            message: User-friendly error message
            source_epsg: Source EPSG code
            target_epsg: Target EPSG code
            details: Technical details about the failure
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if source_epsg is not None:
            error_details["source_epsg"] = source_epsg
        if target_epsg is not None:
            error_details["target_epsg"] = target_epsg

        default_suggestions = [
            "Verify the coordinates lie inside the area of use of both CRS",
            "Check the axis order is x/longitude first",
        ]

        super().__init__(
            message=message,
            error_code="TRANSFORMATION_ERROR",
            status_code=422,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class ConversionCancelledError(GeoConvertException):
    """Raised when a caller cancels a conversion in flight."""

    def __init__(self, message: str = "Conversion was cancelled"):
        super().__init__(
            message=message,
            error_code="CANCELLED",
            status_code=499,
        )


class ConfigurationError(GeoConvertException):
    """
    Raised when application configuration is invalid.

    Maps to HTTP 500 Internal Server Error.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: User-friendly error message
            config_key: Configuration key that is invalid
            details: Technical details about the configuration error
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        default_suggestions = [
            "Check environment variables are set correctly",
            "Reinstall the package to restore bundled data files",
        ]

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            status_code=500,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class EpsgDatabaseError(ConfigurationError):
    """Raised when the EPSG database resource cannot be read."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            message=message,
            config_key="epsg_database_path",
            details={"path": path} if path else None,
        )
