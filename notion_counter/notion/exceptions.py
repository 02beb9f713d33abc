"""Custom exceptions for the Notion API client."""

from typing import Any


class NotionClientError(Exception):
    """Raised when a Notion API request fails.

    HTTP errors carry the upstream status code and the decoded response body
    so callers can pass them through unchanged. Timeouts and connection
    failures leave both unset.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details
