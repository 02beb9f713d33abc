"""Logging configuration for the counter service."""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Server loggers that should reach the root handler instead of their own
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# HTTP client loggers; urllib3 logs one line per Notion request at DEBUG
HTTP_CLIENT_LOGGERS = ("urllib3", "requests")


def parse_level(level: str) -> int:
    """Convert a level name such as "info" to its logging constant.

    :param level: Level name, case-insensitive.
    :returns: Numeric logging level.
    :raises ValueError: If the name is not a logging level.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def configure_logging(level: str | None = None) -> None:
    """Send all logs to stdout, where serverless runtimes collect them.

    :param level: Level name; defaults to the LOG_LEVEL env var, then INFO.
    :raises ValueError: If the level name is invalid.
    """
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    numeric_level = parse_level(level_name)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

    # Connection chatter only when explicitly debugging
    client_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)

    logging.getLogger(__name__).info("Logging configured: level=%s", level_name)
