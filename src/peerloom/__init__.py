"""Peerloom: asynchronous, read-only client for the PeeringDB API.

The package exposes a single entry point, :class:`PeerloomClient`, configured
through functional options (``with_url``, ``with_api_key``, ...). Every
PeeringDB collection is reachable as a typed resource client, and every
failure is reported through the :class:`PeerloomError` hierarchy.
"""

from . import auth, client, config, exceptions, log_config, models, resources, types
from .constants import PEERLOOM_VERSION as __version__
from .auth import ApiKeyAuth, AuthStrategy, BasicAuth, NoAuth
from .client import PeerloomClient
from .config import (
    ApiSettings,
    ClientConfig,
    build_config,
    get_settings,
    with_api_key,
    with_auth_strategy,
    with_http_client,
    with_timeout,
    with_url,
    with_user_agent,
)
from .exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    InvalidIDError,
    NetworkError,
    NotFoundError,
    PeerloomError,
    QueryError,
    QueryTimeoutError,
    RateLimitError,
    RequestBuildError,
    RequestError,
    ValidationError,
)
from .log_config import configure_logging

__all__ = [
    "__version__",
    "auth",
    "client",
    "config",
    "exceptions",
    "log_config",
    "models",
    "resources",
    "types",
    "APIError",
    "ApiKeyAuth",
    "ApiSettings",
    "AuthStrategy",
    "BasicAuth",
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "InvalidIDError",
    "NetworkError",
    "NoAuth",
    "NotFoundError",
    "PeerloomClient",
    "PeerloomError",
    "QueryError",
    "QueryTimeoutError",
    "RateLimitError",
    "RequestBuildError",
    "RequestError",
    "ValidationError",
    "build_config",
    "configure_logging",
    "get_settings",
    "with_api_key",
    "with_auth_strategy",
    "with_http_client",
    "with_timeout",
    "with_url",
    "with_user_agent",
]
