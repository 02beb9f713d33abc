"""Filter strategies, one per counting mode.

A strategy turns configuration, and for auto-detection the database schema,
into a FilterSelection. Strategies that need the schema load it through the
callable they are given, so the others never fetch it.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Protocol

from notion_counter.counter.exceptions import DetectionError
from notion_counter.counter.filters import AnySelectEquals, TextStartsWith, option_filter
from notion_counter.counter.models import FilterSelection
from notion_counter.notion.enums import OPTION_PROPERTY_TYPES, PropertyType, TextPropertyType
from notion_counter.notion.models import DatabaseSchema, PropertySchema

logger = logging.getLogger(__name__)

DEFAULT_KEYWORD = "finished"

SchemaLoader = Callable[[], DatabaseSchema]


class FilterStrategy(Protocol):
    """Protocol for building the filter used to count records."""

    def select(self, load_schema: SchemaLoader) -> FilterSelection:
        """Build the filter selection.

        :param load_schema: Fetches the database schema when called.
        :returns: The filter and its diagnostics.
        """
        ...


def find_matching_option(
    properties: Sequence[PropertySchema], keyword: str
) -> tuple[PropertySchema, str] | None:
    """Find the first option-bearing property with an option containing keyword.

    Properties are scanned in the given order, options in declared order.
    Matching is a case-insensitive substring test.

    :param properties: Properties in schema order.
    :param keyword: Text to look for in option names.
    :returns: The property and exact option name, or None.
    """
    needle = keyword.lower()
    for prop in properties:
        if prop.type not in OPTION_PROPERTY_TYPES:
            continue
        for option in prop.options:
            if needle in option.lower():
                return prop, option
    return None


class AutoDetectStrategy:
    """Detect the status property from the schema."""

    def __init__(self, keyword: str = DEFAULT_KEYWORD) -> None:
        self.keyword = keyword

    def select(self, load_schema: SchemaLoader) -> FilterSelection:
        """Build a filter on the first property offering a matching option.

        :raises DetectionError: If no property qualifies.
        """
        schema = load_schema()
        match = find_matching_option(schema.properties, self.keyword)
        if match is None:
            raise DetectionError(self.keyword)

        prop, option = match
        logger.info(f"Detected property={prop.name!r}, type={prop.type}, option={option!r}")
        return FilterSelection(
            filter=option_filter(prop.name, prop.type, option),
            used_property=prop.name,
            used_type=prop.type,
            used_option=option,
        )


class StaticOptionsStrategy:
    """Match any of a fixed list of select options."""

    def __init__(self, property_name: str, options: Sequence[str]) -> None:
        self.property_name = property_name
        self.options = tuple(options)

    def select(self, load_schema: SchemaLoader) -> FilterSelection:
        """Build an OR of select-equals clauses."""
        return FilterSelection(
            filter=AnySelectEquals(property=self.property_name, values=self.options),
            used_property=self.property_name,
            used_type=PropertyType.SELECT.value,
            used_options=list(self.options),
        )


class PrefixMatchStrategy:
    """Match a text property by prefix.

    One marker such as "📘" then covers its suffixed variants ("📘✨", ...).
    """

    def __init__(
        self,
        property_name: str,
        prefix: str,
        text_type: TextPropertyType = "rich_text",
    ) -> None:
        self.property_name = property_name
        self.prefix = prefix
        self.text_type = text_type

    def select(self, load_schema: SchemaLoader) -> FilterSelection:
        """Build a starts-with filter."""
        return FilterSelection(
            filter=TextStartsWith(
                property=self.property_name, prefix=self.prefix, text_type=self.text_type
            ),
            used_property=self.property_name,
            used_type=self.text_type,
            used_prefix=self.prefix,
        )
