"""Filter specifications sent to the Notion database query endpoint.

Each filter is an immutable model that renders itself to Notion's filter JSON.
"""

from abc import ABC, abstractmethod
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from notion_counter.notion.enums import PropertyType, TextPropertyType


class _FilterBase(BaseModel, ABC):
    model_config = ConfigDict(frozen=True)

    property: str = Field(..., min_length=1, description="Property name")

    @abstractmethod
    def to_notion(self) -> dict[str, Any]:
        """Render the filter in Notion's query format."""
        ...


class StatusEquals(_FilterBase):
    """Match records whose status property equals an option."""

    kind: Literal["status_equals"] = "status_equals"
    value: str

    def to_notion(self) -> dict[str, Any]:
        """Render the filter in Notion's query format."""
        return {"property": self.property, "status": {"equals": self.value}}


class SelectEquals(_FilterBase):
    """Match records whose select property equals an option."""

    kind: Literal["select_equals"] = "select_equals"
    value: str

    def to_notion(self) -> dict[str, Any]:
        """Render the filter in Notion's query format."""
        return {"property": self.property, "select": {"equals": self.value}}


class MultiSelectContains(_FilterBase):
    """Match records whose multi-select property contains an option."""

    kind: Literal["multi_select_contains"] = "multi_select_contains"
    value: str

    def to_notion(self) -> dict[str, Any]:
        """Render the filter in Notion's query format."""
        return {"property": self.property, "multi_select": {"contains": self.value}}


class TextStartsWith(_FilterBase):
    """Match records whose text property starts with a prefix.

    Works for rich_text and title properties.
    """

    kind: Literal["text_starts_with"] = "text_starts_with"
    prefix: str = Field(..., min_length=1)
    text_type: TextPropertyType = "rich_text"

    def to_notion(self) -> dict[str, Any]:
        """Render the filter in Notion's query format."""
        return {"property": self.property, self.text_type: {"starts_with": self.prefix}}


class AnySelectEquals(_FilterBase):
    """Match records whose select property equals any of several options."""

    kind: Literal["any_select_equals"] = "any_select_equals"
    values: tuple[str, ...] = Field(..., min_length=1)

    def to_notion(self) -> dict[str, Any]:
        """Render the filter in Notion's query format."""
        return {
            "or": [
                {"property": self.property, "select": {"equals": value}} for value in self.values
            ]
        }


FilterSpec = Annotated[
    StatusEquals | SelectEquals | MultiSelectContains | TextStartsWith | AnySelectEquals,
    Field(discriminator="kind"),
]


def option_filter(property_name: str, property_type: str, option: str) -> FilterSpec:
    """Build the equality filter for an option-bearing property.

    :param property_name: Property name.
    :param property_type: One of status, select, multi_select.
    :param option: Exact option name.
    :returns: The matching filter.
    :raises ValueError: If the property type has no options.
    """
    if property_type == PropertyType.STATUS:
        return StatusEquals(property=property_name, value=option)
    if property_type == PropertyType.SELECT:
        return SelectEquals(property=property_name, value=option)
    if property_type == PropertyType.MULTI_SELECT:
        return MultiSelectContains(property=property_name, value=option)
    raise ValueError(f"Property type has no options: {property_type}")
