"""Finished-record count endpoint."""

from notion_counter.api.count.endpoints import router

__all__ = ["router"]
