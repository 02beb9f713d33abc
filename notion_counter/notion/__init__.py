"""Notion API integration module for reading schemas and querying databases."""

from notion_counter.notion.base import NotionTransport
from notion_counter.notion.client import NotionClient
from notion_counter.notion.exceptions import NotionClientError
from notion_counter.notion.models import DatabaseSchema, PropertySchema, QueryPage

__all__ = [
    "DatabaseSchema",
    "NotionClient",
    "NotionClientError",
    "NotionTransport",
    "PropertySchema",
    "QueryPage",
]
