"""
Pydantic schemas for the API contract.

The set endpoints exchange bare JSON values (a boolean, an array of
strings), so only the health and error envelopes need models here.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str = Field(..., description="Application status")
    version: str = Field(..., description="Application version")


class ErrorResponse(BaseModel):
    """JSON error envelope used for 429 and 500 responses."""

    error: str
    detail: str | None = None
