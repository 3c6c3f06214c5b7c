"""Configuration for the ClickUp client using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.clickup.com/api/v2"


class ClickUpSettings(BaseSettings):
    """Configuration for the ClickUp API connection.

    All settings are loaded from environment variables with the CLICKUP_ prefix.

    :param api_token: Personal API token or OAuth access token.
    :param base_url: Base URL of the ClickUp v2 API.
    :param request_timeout: Timeout in seconds for each HTTP request.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLICKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_token: str = Field(..., min_length=1, description="ClickUp API token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="ClickUp API base URL")
    request_timeout: int = Field(
        default=30,
        ge=1,
        le=300,
        description="HTTP request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise the base URL so endpoint paths can be appended with a slash.

        :param v: Raw base URL.
        :returns: The base URL without a trailing slash.
        """
        return v.rstrip("/")


@lru_cache
def get_clickup_settings() -> ClickUpSettings:
    """Get cached ClickUp settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured ClickUpSettings instance.
    """
    return ClickUpSettings()  # type: ignore[call-arg]
