"""Pydantic models for the count endpoint."""

from pydantic import BaseModel, Field


class CountResponse(BaseModel):
    """Count of finished records and the filter that produced it.

    Which of the used_* fields are present depends on the counter mode.
    """

    count: int = Field(..., ge=0, description="Number of matching records")
    used_property: str = Field(..., description="Property the filter applies to")
    used_type: str = Field(..., description="Type of that property")
    used_option: str | None = Field(None, description="Detected option (auto mode)")
    used_options: list[str] | None = Field(None, description="Configured options (static mode)")
    used_prefix: str | None = Field(None, description="Configured prefix (prefix mode)")


class PropertyInspectionResponse(BaseModel):
    """Type and options of one property."""

    type: str
    options: list[str] | None = None


class InspectionResponse(BaseModel):
    """Schema view returned in debug mode."""

    database_title: str = Field(..., description="Database title")
    properties: dict[str, PropertyInspectionResponse] = Field(
        ..., description="Property name to type and option names"
    )
    hint: str
