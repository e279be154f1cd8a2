# shelfloom/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_BATCH_SIZE, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


class ShelfloomSettings(BaseSettings):
    """
    Manages user-configurable settings for the shelfloom client,
    primarily loaded from environment variables or a .env file.

    Settings are loaded from environment variables (prefixed with 'SHELFLOOM_')
    or .env/secrets.env files.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="SHELFLOOM_",
        extra="ignore",
        case_sensitive=False,
    )

    # --- Connection Settings ---
    base_url: str | None = Field(
        default=None,
        description="BookStack API root, e.g. https://wiki.example.org/api/",
    )
    token_id: str | None = Field(default=None, description="API token id")
    token_secret: str | None = Field(default=None, description="API token secret")

    # --- Client Behavior Settings ---
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT, description="Default request timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for requests",
    )

    # --- Rate Limiting Settings ---
    max_try_count: int | None = Field(
        default=None,
        ge=1,
        description="Maximum attempts per call while rate limited (None = unbounded)",
    )
    rate_limit_retry_after_default: int = Field(
        default=60,
        ge=0,
        description="Wait time in seconds if a 429 response carries no Retry-After header",
    )

    # --- Enumeration Settings ---
    batch_count: int = Field(
        default=DEFAULT_BATCH_SIZE,
        gt=0,
        description="Number of items fetched per page when enumerating a collection",
    )

    # --- Caching Settings ---
    enable_caching: bool = Field(
        default=False, description="Enable/disable client-side caching of GET reads"
    )
    cache_ttl_seconds: int = Field(
        default=300,
        description="TTL for cache entries in seconds",
    )
    cache_max_size: int = Field(
        default=128, description="Maximum number of items in the TTL cache"
    )


@lru_cache
def get_settings() -> ShelfloomSettings:
    """
    Provides access to the application settings.

    The instance is cached; call ``get_settings.cache_clear()`` after changing
    the environment to pick up new values.

    Returns:
        ShelfloomSettings: The application settings instance.
    """
    return ShelfloomSettings()
