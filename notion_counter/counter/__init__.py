"""Count records of a Notion database that are marked as finished."""

from notion_counter.counter.exceptions import (
    ConfigError,
    CounterError,
    DetectionError,
    UpstreamError,
)
from notion_counter.counter.factory import build_counter
from notion_counter.counter.models import CountResult, FilterSelection, SchemaInspection
from notion_counter.counter.service import Counter

__all__ = [
    "ConfigError",
    "CountResult",
    "Counter",
    "CounterError",
    "DetectionError",
    "FilterSelection",
    "SchemaInspection",
    "UpstreamError",
    "build_counter",
]
