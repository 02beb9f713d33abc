"""Pydantic models for counter results."""

from typing import Any

from pydantic import BaseModel, Field

from notion_counter.counter.filters import FilterSpec


class FilterSelection(BaseModel):
    """The filter chosen for a request, with what it was built from."""

    filter: FilterSpec
    used_property: str
    used_type: str
    used_option: str | None = None
    used_options: list[str] | None = None
    used_prefix: str | None = None

    def diagnostics(self) -> dict[str, Any]:
        """Describe the filter for API responses, omitting unset fields."""
        return self.model_dump(exclude={"filter"}, exclude_none=True)


class CountResult(BaseModel):
    """Number of records matching the selected filter."""

    count: int = Field(..., ge=0)
    selection: FilterSelection
    pages: int = Field(..., ge=0, description="Number of query calls made")


class PropertyInspection(BaseModel):
    """Type and option names of a property, as shown in debug output."""

    type: str
    options: list[str] | None = None


class SchemaInspection(BaseModel):
    """Debug view of a database schema."""

    database_title: str
    properties: dict[str, PropertyInspection]
    hint: str
