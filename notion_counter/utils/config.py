"""Configuration for the counter using pydantic-settings."""

from enum import StrEnum
from functools import cached_property, lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from notion_counter.notion.enums import TextPropertyType
from notion_counter.paths import PROJECT_ROOT

_ENV_FILE = PROJECT_ROOT / ".env"


class CounterMode(StrEnum):
    """How the counter builds its filter."""

    AUTO = "auto"
    STATIC = "static"
    PREFIX = "prefix"


class CounterSettings(BaseSettings):
    """Configuration for the counter.

    Notion credentials are read from NOTION_TOKEN and NOTION_DATABASE_ID, all
    other settings from environment variables with the COUNTER_ prefix.
    Credentials are optional here so that a missing value is reported by the
    endpoint rather than at import time.

    :param notion_token: Notion integration token.
    :param database_id: Notion database ID.
    :param mode: Filter strategy (auto, static or prefix).
    :param keyword: Text that auto mode looks for in option names.
    :param property_name: Property name for static and prefix modes.
    :param options: Comma-separated select options for static mode.
    :param prefix: Text prefix for prefix mode.
    :param property_type: Text property type for prefix mode.
    :param cache_max_age: Shared-cache freshness window in seconds.
    :param cache_stale_while_revalidate: Window in seconds during which a
        stale response may be served while it is refreshed.
    """

    model_config = SettingsConfigDict(
        env_prefix="COUNTER_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    notion_token: str | None = Field(default=None, validation_alias="NOTION_TOKEN")
    database_id: str | None = Field(default=None, validation_alias="NOTION_DATABASE_ID")
    mode: CounterMode = Field(default=CounterMode.AUTO, description="Filter strategy")
    keyword: str = Field(
        default="finished",
        min_length=1,
        description="Option name fragment to auto-detect",
    )
    property_name: str | None = Field(
        default=None,
        validation_alias="COUNTER_PROPERTY",
        description="Property for static/prefix modes",
    )
    options: str = Field(default="", description="Comma-separated select options")
    prefix: str | None = Field(default=None, description="Text prefix for prefix mode")
    property_type: TextPropertyType = Field(
        default="rich_text",
        description="Text property type for prefix mode",
    )
    cache_max_age: int = Field(default=300, ge=60, le=300)
    cache_stale_while_revalidate: int = Field(default=600, ge=300, le=600)

    @cached_property
    def options_list(self) -> list[str]:
        """Get the static options as a list.

        :returns: Non-empty, stripped option values in configured order.
        """
        return [option.strip() for option in self.options.split(",") if option.strip()]

    @property
    def cache_control(self) -> str:
        """Cache-Control header value for successful counts."""
        return (
            f"s-maxage={self.cache_max_age}, "
            f"stale-while-revalidate={self.cache_stale_while_revalidate}"
        )


@lru_cache
def get_counter_settings() -> CounterSettings:
    """Get cached counter settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured CounterSettings instance.
    """
    return CounterSettings()
