"""Serverless entrypoint mapped to /api/count."""

from notion_counter.api.app import app

__all__ = ["app"]
