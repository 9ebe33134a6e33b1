# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors tell the client how to fix the request, not just what failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class PropertyApiException(Exception):
    """
    Base exception for the Property API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PROPERTY_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Property Exceptions
# =============================================================================

class PropertyNotFoundError(PropertyApiException):
    """Raised when a property ID doesn't exist or isn't a valid ID."""

    def __init__(self, property_id: str):
        super().__init__(
            message=f"Property not found: {property_id}",
            code="PROPERTY_NOT_FOUND",
            status_code=404,
            suggestion="Check that the property id is correct",
            details={"property_id": property_id}
        )


class DuplicatePropertyNameError(PropertyApiException):
    """Raised when a property name is already taken."""

    def __init__(self, name: str):
        super().__init__(
            message="Property name must be unique",
            code="DUPLICATE_PROPERTY_NAME",
            status_code=400,
            suggestion="Choose a different name for the property",
            details={"name": name}
        )


class AreaComputationError(PropertyApiException):
    """Raised when a stored boundary can't produce a meaningful area."""

    def __init__(self, property_id: str, reason: str):
        super().__init__(
            message=f"Cannot compute area for property {property_id}: {reason}",
            code="AREA_NOT_COMPUTABLE",
            status_code=422,
            suggestion="Update the property with a boundary of valid numeric points",
            details={"property_id": property_id, "reason": reason}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def property_api_exception_handler(
    request: Request,
    exc: PropertyApiException
) -> JSONResponse:
    """
    Convert PropertyApiException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Malformed property submissions are rejected with 400 and the list
    of offending fields.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        })
    )
