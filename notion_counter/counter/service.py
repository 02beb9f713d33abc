"""Count the records of a Notion database that match a filter strategy."""

import logging
import time

from notion_counter.counter.exceptions import ConfigError, UpstreamError
from notion_counter.counter.models import (
    CountResult,
    FilterSelection,
    PropertyInspection,
    SchemaInspection,
)
from notion_counter.counter.strategies import FilterStrategy
from notion_counter.notion.base import NotionTransport
from notion_counter.notion.client import MAX_PAGE_SIZE
from notion_counter.notion.enums import OPTION_PROPERTY_TYPES
from notion_counter.notion.exceptions import NotionClientError
from notion_counter.notion.models import DatabaseSchema

logger = logging.getLogger(__name__)

INSPECTION_HINT = (
    "Find the property that contains the Finished options and set it as "
    "COUNTER_PROPERTY, or keep COUNTER_MODE=auto if it is a status/select property."
)


class Counter:
    """Counts matching records in one database.

    Credentials live in the transport, so the counter holds no ambient state
    and every call starts from scratch.
    """

    def __init__(
        self,
        transport: NotionTransport,
        database_id: str,
        strategy: FilterStrategy | None = None,
        *,
        page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        """Initialise the counter.

        :param transport: Notion transport used for all calls.
        :param database_id: Notion database ID.
        :param strategy: Builds the filter for each count. Without one the
            counter can only inspect the schema.
        :param page_size: Results requested per query call.
        """
        self._transport = transport
        self._database_id = database_id
        self._strategy = strategy
        self._page_size = page_size

    def count(self) -> CountResult:
        """Count the records matching the strategy's filter.

        Counting is all-or-nothing: the first failed call aborts the count.

        :returns: The total count with the filter diagnostics.
        :raises UpstreamError: If the schema fetch or a query call fails.
        :raises DetectionError: If auto-detection finds no property.
        :raises ConfigError: If the counter was built without a strategy.
        """
        if self._strategy is None:
            raise ConfigError("No filter strategy configured")

        start = time.perf_counter()
        selection = self._strategy.select(self._load_schema)
        count, pages = self._count_pages(selection)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"Count complete: database={self._database_id}, count={count}, "
            f"pages={pages}, property={selection.used_property!r}, elapsed={elapsed_ms:.0f}ms"
        )
        return CountResult(count=count, selection=selection, pages=pages)

    def inspect(self) -> SchemaInspection:
        """Describe the database properties without querying any records.

        :returns: Property types, with option names for option-bearing types.
        :raises UpstreamError: If the schema fetch fails.
        """
        schema = self._load_schema()
        properties = {
            prop.name: PropertyInspection(
                type=prop.type,
                options=list(prop.options) if prop.type in OPTION_PROPERTY_TYPES else None,
            )
            for prop in schema.properties
        }
        return SchemaInspection(
            database_title=schema.title, properties=properties, hint=INSPECTION_HINT
        )

    def _load_schema(self) -> DatabaseSchema:
        try:
            return self._transport.fetch_schema(self._database_id)
        except NotionClientError as e:
            if e.status_code is None:
                raise
            raise UpstreamError(UpstreamError.SCHEMA, e.status_code, e.details) from e

    def _count_pages(self, selection: FilterSelection) -> tuple[int, int]:
        """Run the paginated query and sum the page sizes.

        :returns: Tuple of (count, number of query calls).
        """
        filter_ = selection.filter.to_notion()
        count = 0
        pages = 0
        start_cursor: str | None = None

        while True:
            try:
                page = self._transport.query_page(
                    self._database_id,
                    filter_=filter_,
                    start_cursor=start_cursor,
                    page_size=self._page_size,
                )
            except NotionClientError as e:
                if e.status_code is None:
                    raise
                logger.warning(f"Query failed after {pages} pages: status={e.status_code}")
                raise UpstreamError(UpstreamError.QUERY, e.status_code, e.details, selection) from e

            pages += 1
            count += page.result_count

            if not page.has_more:
                break

            if page.next_cursor is None:
                logger.warning("Query reported more pages without a cursor, stopping")
                break

            start_cursor = page.next_cursor

        return count, pages
