"""Build a Counter from settings."""

import logging

from notion_counter.counter.exceptions import ConfigError
from notion_counter.counter.service import Counter
from notion_counter.counter.strategies import (
    AutoDetectStrategy,
    FilterStrategy,
    PrefixMatchStrategy,
    StaticOptionsStrategy,
)
from notion_counter.notion.base import NotionTransport
from notion_counter.notion.client import NotionClient
from notion_counter.utils.config import CounterMode, CounterSettings

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = "Missing Notion env vars"


def build_strategy(settings: CounterSettings) -> FilterStrategy:
    """Create the filter strategy for the configured mode.

    :param settings: Counter settings.
    :returns: The strategy instance.
    :raises ConfigError: If the mode's settings are incomplete.
    """
    if settings.mode == CounterMode.AUTO:
        return AutoDetectStrategy(settings.keyword)

    if not settings.property_name:
        raise ConfigError(f"COUNTER_PROPERTY is required in {settings.mode} mode")

    if settings.mode == CounterMode.STATIC:
        if not settings.options_list:
            raise ConfigError("COUNTER_OPTIONS is required in static mode")
        return StaticOptionsStrategy(settings.property_name, settings.options_list)

    if not settings.prefix:
        raise ConfigError("COUNTER_PREFIX is required in prefix mode")
    return PrefixMatchStrategy(settings.property_name, settings.prefix, settings.property_type)


def build_counter(
    settings: CounterSettings,
    transport: NotionTransport | None = None,
    *,
    validate_strategy: bool = True,
) -> Counter:
    """Create a Counter for the configured database.

    Schema inspection only needs the credentials, so callers that only inspect
    pass validate_strategy=False and get a counter without a filter strategy.

    :param settings: Counter settings.
    :param transport: Optional transport; a NotionClient is created when omitted.
    :param validate_strategy: Build the filter strategy for the configured mode.
    :returns: Configured Counter.
    :raises ConfigError: If credentials are missing or the mode is misconfigured.
    """
    if not settings.notion_token or not settings.database_id:
        raise ConfigError(MISSING_CREDENTIALS)

    strategy = build_strategy(settings) if validate_strategy else None
    if transport is None:
        transport = NotionClient(token=settings.notion_token)

    logger.debug(f"Counter built: mode={settings.mode}, database={settings.database_id}")
    return Counter(transport, settings.database_id, strategy)
