"""Custom exceptions for the counter module."""

from typing import Any

from notion_counter.counter.models import FilterSelection


class CounterError(Exception):
    """Base exception for counter errors."""


class ConfigError(CounterError):
    """Raised when credentials or mode settings are missing or invalid."""


class DetectionError(CounterError):
    """Raised when auto-detection finds no property with a matching option."""

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        super().__init__(
            f"Could not auto-detect a Status/Select property with a '{keyword.title()}' option."
        )


class UpstreamError(CounterError):
    """Raised when the Notion API answers with a non-success status.

    :param stage: Either "schema" or "query".
    :param status_code: Upstream HTTP status code, passed through to the caller.
    :param details: Upstream response body, passed through verbatim.
    :param selection: The filter in use when a query failed.
    """

    SCHEMA = "schema"
    QUERY = "query"

    def __init__(
        self,
        stage: str,
        status_code: int,
        details: Any,
        selection: FilterSelection | None = None,
    ) -> None:
        self.stage = stage
        self.status_code = status_code
        self.details = details
        self.selection = selection
        super().__init__(f"Notion {stage} request failed with status {status_code}")
