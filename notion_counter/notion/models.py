"""Pydantic models for Notion API data."""

from pydantic import BaseModel, Field


class PropertySchema(BaseModel):
    """A single property definition from a database schema."""

    name: str = Field(..., description="Property name")
    type: str = Field(..., description="Notion property type")
    options: list[str] = Field(
        default_factory=list,
        description="Option names for status, select and multi_select properties",
    )


class DatabaseSchema(BaseModel):
    """Database metadata with properties in the order the API returned them."""

    title: str = Field(..., description="Database title")
    properties: list[PropertySchema] = Field(default_factory=list)


class QueryPage(BaseModel):
    """One page of a database query.

    Only the number of results is kept, the counter never needs the records.
    """

    result_count: int = Field(default=0, ge=0)
    has_more: bool = Field(default=False)
    next_cursor: str | None = Field(None)
