"""Parser functions for Notion API responses.

This module converts the raw database and query payloads returned by the
Notion API into the Pydantic models used by the counter.
"""

from typing import Any

from notion_counter.notion.enums import OPTION_PROPERTY_TYPES
from notion_counter.notion.models import DatabaseSchema, PropertySchema, QueryPage

UNTITLED = "(untitled)"


def parse_database_schema(data: dict[str, Any]) -> DatabaseSchema:
    """Parse a database object into a DatabaseSchema.

    Property order follows the response, which is the order detection scans in.

    :param data: Raw database object from the Notion API.
    :returns: Parsed schema.
    """
    properties = [
        _parse_property(name, prop) for name, prop in (data.get("properties") or {}).items()
    ]
    return DatabaseSchema(title=_extract_title(data.get("title") or []), properties=properties)


def parse_query_page(data: dict[str, Any]) -> QueryPage:
    """Parse a query response into a QueryPage.

    :param data: Raw query response from the Notion API.
    :returns: Parsed page with result count and pagination info.
    """
    return QueryPage(
        result_count=len(data.get("results") or []),
        has_more=bool(data.get("has_more", False)),
        next_cursor=data.get("next_cursor"),
    )


def _parse_property(name: str, prop: dict[str, Any]) -> PropertySchema:
    prop_type = prop.get("type", "")
    options: list[str] = []
    if prop_type in OPTION_PROPERTY_TYPES:
        config = prop.get(prop_type) or {}
        options = [option.get("name") or "" for option in config.get("options") or []]
    return PropertySchema(name=name, type=prop_type, options=options)


def _extract_title(title_items: list[dict[str, Any]]) -> str:
    title = "".join(item.get("plain_text", "") for item in title_items)
    return title or UNTITLED
