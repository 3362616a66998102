"""
ParamBinder Backend — Shared Response Schemas
==============================================

What:  Pydantic models for the error envelope and the health check.
Why:   Clients need a consistent structure to parse errors programmatically,
       and OpenAPI docs are generated from these models.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "missing_required")
        message: Human-readable description
        details: Optional extra context (e.g., which parameter failed)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "missing_required",
            "message": "Required request parameter 'username' is not present",
            "details": {"param": "username", "reason": "missing_required"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response: the service has no external dependencies."""
    status: str = Field(description="Overall service status: healthy")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since service started")
