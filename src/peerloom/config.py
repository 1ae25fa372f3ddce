# peerloom/config.py
"""Configuration for peerloom clients.

Two layers are involved:

* ``ApiSettings`` holds user-configurable defaults loaded from environment
  variables (prefixed ``PEERLOOM_``) or a ``.env``/``secrets.env`` file.
* ``ClientConfig`` is the frozen configuration a client runs with. It is
  built once by :func:`build_config`, starting from the settings and applying
  functional options (``with_url``, ``with_api_key``, ...) in order.
"""

from collections.abc import MutableMapping
from functools import lru_cache
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .auth import AuthStrategy
from .constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, PEERINGDB_API_BASE_URL
from .log_config import logger
from .types import ConfigOption


class ApiSettings(BaseSettings):
    """
    Manages user-configurable settings for the peerloom client, loaded from
    environment variables or a .env file.

    Environment variables are prefixed, e.g. ``PEERLOOM_API_KEY``.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="PEERLOOM_",
        extra="ignore",
        case_sensitive=False,
    )

    base_url: str = Field(
        default=PEERINGDB_API_BASE_URL,
        description="PeeringDB API root, must end with '/'",
    )
    api_key: str | None = Field(default=None, description="PeeringDB API key (optional)")
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT, description="Default request timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for requests",
    )


@lru_cache
def get_settings() -> ApiSettings:
    """
    Provides access to the library settings.

    Settings are loaded from environment variables (prefixed with 'PEERLOOM_')
    or .env/secrets.env files. The instance is cached for performance.

    Returns:
        ApiSettings: The settings instance.
    """
    return ApiSettings()


class ClientConfig(BaseModel):
    """Immutable configuration used by a ``PeerloomClient``.

    Attributes:
        base_url: The API root every namespace is appended to.
        api_key: Optional PeeringDB API key.
        http_client: Optional externally managed ``httpx.AsyncClient``.
        auth_strategy: Optional explicit authentication strategy. Takes
            precedence over ``api_key`` when both are set.
        request_timeout: Default per-call deadline in seconds.
        user_agent: User-Agent header sent with every request.
    """

    base_url: str = PEERINGDB_API_BASE_URL
    api_key: str | None = None
    http_client: httpx.AsyncClient | None = None
    auth_strategy: AuthStrategy | None = None
    request_timeout: float | None = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __repr__(self) -> str:
        return (
            f"ClientConfig(base_url={self.base_url!r}, "
            f"api_key={'***' if self.api_key else None}, "
            f"http_client={'custom' if self.http_client else None}, "
            f"auth_strategy={type(self.auth_strategy).__name__ if self.auth_strategy else None}, "
            f"request_timeout={self.request_timeout})"
        )


def with_url(url: str) -> ConfigOption:
    """Sets a custom API endpoint URL (e.g. a local PeeringDB mirror)."""

    def option(fields: MutableMapping[str, Any]) -> None:
        fields["base_url"] = url

    return option


def with_api_key(api_key: str) -> ConfigOption:
    """Sets the API key for authentication."""

    def option(fields: MutableMapping[str, Any]) -> None:
        fields["api_key"] = api_key

    return option


def with_http_client(http_client: httpx.AsyncClient) -> ConfigOption:
    """Sets a custom HTTP client. The caller stays responsible for closing it."""

    def option(fields: MutableMapping[str, Any]) -> None:
        fields["http_client"] = http_client

    return option


def with_auth_strategy(auth_strategy: AuthStrategy) -> ConfigOption:
    """Sets an explicit authentication strategy, overriding any API key."""

    def option(fields: MutableMapping[str, Any]) -> None:
        fields["auth_strategy"] = auth_strategy

    return option


def with_timeout(seconds: float | None) -> ConfigOption:
    """Sets the default per-call deadline. ``None`` disables it."""

    def option(fields: MutableMapping[str, Any]) -> None:
        fields["request_timeout"] = seconds

    return option


def with_user_agent(user_agent: str) -> ConfigOption:
    """Sets the User-Agent header."""

    def option(fields: MutableMapping[str, Any]) -> None:
        fields["user_agent"] = user_agent

    return option


def build_config(
    *options: ConfigOption, settings: ApiSettings | None = None
) -> ClientConfig:
    """Builds a frozen ``ClientConfig`` from settings and options.

    Args:
        *options: Configuration options, applied in order.
        settings: Optional settings supplying the defaults. If None, the
            cached global settings from :func:`get_settings` are used.

    Returns:
        ClientConfig: The resulting immutable configuration.
    """
    settings = settings or get_settings()
    fields: dict[str, Any] = {
        "base_url": settings.base_url,
        "api_key": settings.api_key,
        "request_timeout": settings.request_timeout,
        "user_agent": settings.user_agent,
    }
    for option in options:
        option(fields)

    config = ClientConfig(**fields)
    logger.debug(f"Built {config!r}")
    return config
