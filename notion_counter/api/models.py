"""Pydantic models for API responses."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned by the count endpoint.

    Only the fields relevant to the failure are serialised.
    """

    error: str = Field(..., description="Error description")
    details: Any = Field(None, description="Upstream response body")
    fix: str | None = Field(None, description="How to resolve the error")
    used_property: str | None = None
    used_type: str | None = None
    used_filter: dict[str, Any] | None = None
