"""Count endpoint dependencies."""

from fastapi import Depends, Query
from pydantic import ValidationError

from notion_counter.counter import ConfigError, Counter, build_counter
from notion_counter.utils.config import CounterSettings, get_counter_settings

# Query parameter values that do not enable debug mode
FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


def get_settings() -> CounterSettings:
    """Load the cached counter settings.

    :raises ConfigError: If an environment value fails validation.
    """
    try:
        return get_counter_settings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(f"Invalid counter configuration: {problems}") from e


def is_truthy(value: str | None) -> bool:
    """Interpret a query parameter flag such as ?debug=1."""
    return value is not None and value.strip().lower() not in FALSE_VALUES


def get_counter(
    debug: str | None = Query(None, description="Return the schema instead of a count"),
    settings: CounterSettings = Depends(get_settings),
) -> Counter:
    """Create a Counter from the configured settings.

    Debug requests only inspect the schema, so the mode settings are not
    checked for them.

    :raises ConfigError: If credentials are missing or the mode is misconfigured.
    """
    return build_counter(settings, validate_strategy=not is_truthy(debug))
