"""Shared test fixtures for counter tests.

FakeTransport replays canned schemas and query pages and records every call,
so tests can assert exactly which requests the counter made.
"""

from typing import Any

from notion_counter.notion.exceptions import NotionClientError
from notion_counter.notion.models import DatabaseSchema, PropertySchema, QueryPage


class FakeTransport:
    """In-memory NotionTransport.

    :param schema: Schema returned by fetch_schema, or an error to raise.
    :param pages: Query pages (or errors) returned in order by query_page.
    """

    def __init__(
        self,
        schema: DatabaseSchema | NotionClientError | None = None,
        pages: list[QueryPage | NotionClientError] | None = None,
    ) -> None:
        self.schema = schema
        self.pages = list(pages or [])
        self.schema_calls: list[str] = []
        self.query_calls: list[dict[str, Any]] = []

    def fetch_schema(self, database_id: str) -> DatabaseSchema:
        self.schema_calls.append(database_id)
        if isinstance(self.schema, NotionClientError):
            raise self.schema
        if self.schema is None:
            raise AssertionError("fetch_schema called without a schema configured")
        return self.schema

    def query_page(
        self,
        database_id: str,
        *,
        filter_: dict[str, Any],
        start_cursor: str | None = None,
        page_size: int = 100,
    ) -> QueryPage:
        self.query_calls.append(
            {
                "database_id": database_id,
                "filter": filter_,
                "start_cursor": start_cursor,
                "page_size": page_size,
            }
        )
        if not self.pages:
            raise AssertionError("query_page called more times than pages configured")
        page = self.pages.pop(0)
        if isinstance(page, NotionClientError):
            raise page
        return page


def make_schema(*properties: PropertySchema, title: str = "Reading List") -> DatabaseSchema:
    """Build a schema with properties in the given order."""
    return DatabaseSchema(title=title, properties=list(properties))


def make_pages(*counts: int) -> list[QueryPage]:
    """Build a page sequence where every page but the last has more results."""
    last = len(counts) - 1
    return [
        QueryPage(
            result_count=count,
            has_more=index < last,
            next_cursor=f"cursor-{index + 1}" if index < last else None,
        )
        for index, count in enumerate(counts)
    ]


STATUS_PROPERTY = PropertySchema(
    name="Status", type="status", options=["Reading", "Finished", "Dropped"]
)
