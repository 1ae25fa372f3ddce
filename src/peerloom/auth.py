from typing import Protocol, runtime_checkable

import httpx

from .exceptions import ConfigurationError
from .log_config import logger


@runtime_checkable
class AuthStrategy(Protocol):
    """Protocol defining the interface for authentication strategies.

    Concrete implementations add authentication information (usually an
    ``Authorization`` header) to an outgoing request.
    """

    async def async_authenticate(self, request: httpx.Request) -> None:
        """
        Asynchronously modifies the request to add authentication information.

        Args:
            request: The httpx.Request object to modify.
        """
        ...


class NoAuth:
    """Implements the AuthStrategy protocol for anonymous requests.

    This strategy makes no modifications to the outgoing request.
    """

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Does nothing as no authentication is needed."""
        logger.trace("Using NoAuth strategy, no authentication applied.")


class ApiKeyAuth:
    """Implements AuthStrategy using a PeeringDB API key.

    The key is sent as ``Authorization: Api-Key <key>``. API keys are created
    in the PeeringDB user profile and raise the anonymous rate limits.

    Attributes:
        _api_key: The API key.
    """

    def __init__(self, api_key: str | None):
        """Initializes ApiKeyAuth with the provided key.

        Args:
            api_key: The PeeringDB API key.

        Raises:
            ConfigurationError: If the key is None or empty.
        """
        if not api_key:
            raise ConfigurationError("ApiKeyAuth requires a non-empty 'api_key'.")
        self._api_key: str = api_key
        logger.debug("ApiKeyAuth initialized.")

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Adds the 'Authorization: Api-Key <key>' header to the request."""
        logger.trace("Authenticating request using ApiKeyAuth.")
        request.headers["Authorization"] = f"Api-Key {self._api_key}"

    def __repr__(self) -> str:
        return "ApiKeyAuth(api_key='***')"


class BasicAuth:
    """Implements AuthStrategy using HTTP Basic credentials.

    PeeringDB still accepts username/password authentication for accounts
    without an API key.
    """

    def __init__(self, username: str | None, password: str | None):
        if not username or password is None:
            raise ConfigurationError("BasicAuth requires 'username' and 'password'.")
        self._auth = httpx.BasicAuth(username=username, password=password)
        self._username = username

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Adds a Basic 'Authorization' header to the request."""
        logger.trace(f"Authenticating request using BasicAuth for {self._username}.")
        # httpx.BasicAuth.auth_flow is a generator that yields the signed request
        next(self._auth.auth_flow(request))

    def __repr__(self) -> str:
        return f"BasicAuth(username={self._username!r})"
