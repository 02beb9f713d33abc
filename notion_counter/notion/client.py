"""Notion API client for reading database schemas and querying databases."""

import logging
from typing import Any

import requests

from notion_counter.notion.exceptions import NotionClientError
from notion_counter.notion.models import DatabaseSchema, QueryPage
from notion_counter.notion.parser import parse_database_schema, parse_query_page

logger = logging.getLogger(__name__)

# Notion API timeout in seconds
REQUEST_TIMEOUT = 30

# Notion API version, the last one serving databases/{id}/query
NOTION_VERSION = "2022-06-28"

# Maximum page size accepted by the query endpoint
MAX_PAGE_SIZE = 100


class NotionClient:
    """Client for the Notion database endpoints.

    Implements the NotionTransport protocol used by the counter.
    """

    BASE_URL = "https://api.notion.com/v1"

    def __init__(self, *, token: str) -> None:
        """Initialise the Notion client.

        :param token: Notion integration token.
        :raises ValueError: If token is empty.
        """
        if not token:
            raise ValueError("Notion integration token not provided.")

        self._token = token
        logger.debug("NotionClient initialised")

    @property
    def _headers(self) -> dict[str, str]:
        """Headers for Notion API requests.

        :returns: Dictionary of required headers.
        """
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "Notion-Version": NOTION_VERSION,
        }

    def _request(
        self, method: str, endpoint: str, payload: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Make a request to the Notion API.

        :param method: HTTP method.
        :param endpoint: API endpoint path (without base URL).
        :param payload: Optional JSON request body.
        :returns: JSON response as dictionary.
        :raises NotionClientError: If the request fails.
        """
        url = f"{self.BASE_URL}/{endpoint}"
        logger.debug(f"Making {method} request to endpoint={endpoint}")

        try:
            response = requests.request(
                method,
                url,
                headers=self._headers,
                json=payload,
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
            return response.json()

        except requests.exceptions.Timeout as e:
            raise NotionClientError(f"Notion API request timed out after {REQUEST_TIMEOUT}s") from e
        except requests.exceptions.HTTPError as e:
            details = self._extract_error_body(e.response)
            raise NotionClientError(
                f"Notion API request failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=details,
            ) from e
        except requests.exceptions.RequestException as e:
            raise NotionClientError(f"Notion API request failed: {e}") from e

    def _extract_error_body(self, response: requests.Response) -> Any:
        """Extract the error body from a Notion API error response.

        :param response: Response object from failed request.
        :returns: Decoded JSON body, or the raw text if it is not JSON.
        """
        try:
            return response.json()
        except ValueError:
            return response.text

    # Database endpoints

    def get_database(self, database_id: str) -> dict[str, Any]:
        """Retrieve database structure and properties.

        :param database_id: Notion database ID.
        :returns: Database object with properties schema.
        :raises NotionClientError: If the request fails.
        """
        logger.info(f"Retrieving database: {database_id}")
        return self._request("GET", f"databases/{database_id}")

    def query_database(
        self,
        database_id: str,
        *,
        filter_: dict[str, Any] | None = None,
        start_cursor: str | None = None,
        page_size: int = MAX_PAGE_SIZE,
    ) -> dict[str, Any]:
        """Query pages from a database with filters.

        :param database_id: Notion database ID.
        :param filter_: Optional filter object for the query.
        :param start_cursor: Cursor for pagination.
        :param page_size: Number of results per page (max 100).
        :returns: Query results with pages and pagination info.
        :raises NotionClientError: If the request fails.
        """
        logger.debug(f"Querying database: {database_id}, start_cursor={start_cursor}")
        payload: dict[str, Any] = {"page_size": min(page_size, MAX_PAGE_SIZE)}

        if filter_ is not None:
            payload["filter"] = filter_

        if start_cursor is not None:
            payload["start_cursor"] = start_cursor

        return self._request("POST", f"databases/{database_id}/query", payload)

    # NotionTransport

    def fetch_schema(self, database_id: str) -> DatabaseSchema:
        """Retrieve and parse the database schema.

        :param database_id: Notion database ID.
        :returns: Parsed database schema.
        :raises NotionClientError: If the request fails.
        """
        return parse_database_schema(self.get_database(database_id))

    def query_page(
        self,
        database_id: str,
        *,
        filter_: dict[str, Any],
        start_cursor: str | None = None,
        page_size: int = MAX_PAGE_SIZE,
    ) -> QueryPage:
        """Query and parse one page of matching records.

        :param database_id: Notion database ID.
        :param filter_: Filter object for the query.
        :param start_cursor: Cursor for pagination.
        :param page_size: Number of results per page (max 100).
        :returns: Parsed query page.
        :raises NotionClientError: If the request fails.
        """
        data = self.query_database(
            database_id, filter_=filter_, start_cursor=start_cursor, page_size=page_size
        )
        return parse_query_page(data)
