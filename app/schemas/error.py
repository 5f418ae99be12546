"""
Error response schemas for API documentation and consistent error formatting.
Provides standardized error response models for OpenAPI documentation.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Any, Dict


class ErrorDetail(BaseModel):
    """Schema for individual error detail."""

    field: Optional[str] = Field(
        None,
        description="Field name that caused the error",
        examples=["email"]
    )

    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["email is required"]
    )

    type: Optional[str] = Field(
        None,
        description="Error type identifier",
        examples=["missing"]
    )

    input: Optional[Any] = Field(
        None,
        description="Input value that caused the error"
    )


class ErrorResponse(BaseModel):
    """Schema for standardized error responses."""

    code: str = Field(
        ...,
        description="Error code identifier",
        examples=["VALIDATION_ERROR"]
    )

    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Request validation failed"]
    )

    timestamp: str = Field(
        ...,
        description="Error timestamp in ISO format",
        examples=["2023-01-01T00:00:00Z"]
    )

    request_id: Optional[str] = Field(
        None,
        description="Unique request identifier for tracking",
        examples=["abc12345"]
    )

    details: Optional[List[ErrorDetail]] = Field(
        None,
        description="Detailed error information for validation errors"
    )


class APIErrorResponse(BaseModel):
    """Schema for API error response wrapper."""

    error: ErrorResponse = Field(
        ...,
        description="Error information"
    )


def _example(code: str, message: str) -> Dict[str, Any]:
    return {
        "error": {
            "code": code,
            "message": message,
            "timestamp": "2023-01-01T00:00:00Z",
            "request_id": "abc12345"
        }
    }


# Common error response examples for documentation
COMMON_ERROR_RESPONSES = {
    400: {
        "description": "Bad Request - Invalid request parameters",
        "model": APIErrorResponse,
        "content": {"application/json": {"example": _example("BAD_REQUEST", "Invalid request parameters")}}
    },
    404: {
        "description": "Not Found - Resource does not exist",
        "model": APIErrorResponse,
        "content": {"application/json": {"example": _example("NOT_FOUND", "Listing not found with ID: 42")}}
    },
    409: {
        "description": "Conflict - Uniqueness constraint violated",
        "model": APIErrorResponse,
        "content": {
            "application/json": {
                "example": _example("CONFLICT", "Entity with email 'jane@example.com' already exists")
            }
        }
    },
    422: {
        "description": "Unprocessable Entity - Validation failed",
        "model": APIErrorResponse,
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "VALIDATION_ERROR",
                        "message": "Invalid Listing: city is required",
                        "timestamp": "2023-01-01T00:00:00Z",
                        "request_id": "abc12345",
                        "details": [{"field": "address.city", "message": "city is required"}]
                    }
                }
            }
        }
    },
    500: {
        "description": "Internal Server Error - Unexpected server error",
        "model": APIErrorResponse,
        "content": {
            "application/json": {
                "example": _example("INTERNAL_SERVER_ERROR", "An unexpected error occurred. Please try again later.")
            }
        }
    }
}


def get_error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """
    Get error response schemas for specific status codes.

    Args:
        status_codes: HTTP status codes to include

    Returns:
        Dictionary of error response schemas
    """
    return {
        code: COMMON_ERROR_RESPONSES[code]
        for code in status_codes
        if code in COMMON_ERROR_RESPONSES
    }


def get_read_error_responses() -> Dict[int, Dict[str, Any]]:
    """Get error response schemas for lookups by identity."""
    return get_error_responses(404, 422, 500)


def get_crud_error_responses() -> Dict[int, Dict[str, Any]]:
    """Get error response schemas for CRUD operations."""
    return get_error_responses(400, 404, 409, 422, 500)
