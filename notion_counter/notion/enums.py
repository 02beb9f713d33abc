"""Enums for Notion property types."""

from enum import StrEnum
from typing import Literal


class PropertyType(StrEnum):
    """Property types whose schema lists allowed options."""

    STATUS = "status"
    SELECT = "select"
    MULTI_SELECT = "multi_select"


OPTION_PROPERTY_TYPES = tuple(PropertyType)

# Text property types that support starts_with filters
TextPropertyType = Literal["rich_text", "title"]
