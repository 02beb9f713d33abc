"""Base protocol for Notion transports."""

from typing import Any, Protocol

from notion_counter.notion.models import DatabaseSchema, QueryPage


class NotionTransport(Protocol):
    """Protocol for the two Notion calls the counter makes.

    Implementations raise NotionClientError on failure. Tests substitute an
    in-memory implementation to avoid network access.
    """

    def fetch_schema(self, database_id: str) -> DatabaseSchema:
        """Retrieve the database schema.

        :param database_id: Notion database ID.
        :returns: Parsed database schema.
        """
        ...

    def query_page(
        self,
        database_id: str,
        *,
        filter_: dict[str, Any],
        start_cursor: str | None = None,
        page_size: int = 100,
    ) -> QueryPage:
        """Query a single page of matching records.

        :param database_id: Notion database ID.
        :param filter_: Filter object for the query.
        :param start_cursor: Cursor returned by the previous page, if any.
        :param page_size: Number of results per page.
        :returns: Parsed query page.
        """
        ...
