"""Count finished records in a Notion database over HTTP."""

__version__ = "0.1.0"
