"""Asynchronous client for the PeeringDB API.

This module provides the PeerloomClient class. It turns a namespace and a set
of search parameters into a GET request, sends it through httpx, maps the
HTTP outcome onto the peerloom exception hierarchy and decodes the JSON
envelope into Pydantic models. Every PeeringDB collection is reachable through
a resource client exposed as a property (``client.networks``, ...).
"""

import asyncio
import ssl
from datetime import UTC, datetime as dt
from email.utils import parsedate_to_datetime
from http import HTTPStatus
from typing import Self

import certifi
import httpx
from pydantic import ValidationError as PydanticValidationError

from .auth import ApiKeyAuth, AuthStrategy, NoAuth
from .config import ApiSettings, ClientConfig, build_config
from .constants import CLIENT_HEADERS
from .exceptions import (
    DecodeError,
    InvalidIDError,
    NetworkError,
    QueryError,
    QueryTimeoutError,
    RateLimitError,
    RequestBuildError,
    RequestError,
)
from .log_config import logger
from .models import ApiResponse, EntityT, Network
from .query import build_url
from .resources import (
    CampusesClient,
    CarrierFacilitiesClient,
    CarriersClient,
    FacilitiesClient,
    InternetExchangesClient,
    IXFacilitiesClient,
    IXLANsClient,
    IXPrefixesClient,
    NetworkContactsClient,
    NetworkFacilitiesClient,
    NetworkIXLANsClient,
    NetworksClient,
    OrganizationsClient,
)
from .types import ConfigOption, SearchParams


def parse_retry_after(value: str | None) -> float | None:
    """Parses a ``Retry-After`` header value into seconds.

    The header is either a number of seconds or an HTTP date.

    Returns:
        float | None: Seconds to wait (never negative), or None when the
            header is missing or unparsable.
    """
    if not value:
        return None
    value = value.strip()
    if value.isdigit():
        return float(value)
    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        logger.warning(f"Could not parse Retry-After header: {value!r}")
        return None
    if retry_at.tzinfo is None or retry_at.tzinfo.utcoffset(retry_at) is None:
        retry_at = retry_at.replace(tzinfo=UTC)
    return max(0.0, (retry_at - dt.now(UTC)).total_seconds())


class PeerloomClient:
    """Asynchronous, read-only client for the PeeringDB API.

    The client is configured once, through functional options, and never
    mutated afterwards, so a single instance can serve any number of
    concurrent calls.

    Typical usage:
    ```python
    async with PeerloomClient(with_api_key("...")) as client:
        network = await client.get_asn(65536)
        for netixlan_id in network.netixlan_set:
            connection = await client.network_ix_lans.get(netixlan_id)
    ```

    Attributes:
        _config: The frozen configuration of this client.
        _auth_strategy: Authentication strategy applied to every request.
        _http_client: The underlying httpx.AsyncClient.
        _should_close_client: Whether this instance owns ``_http_client``.
    """

    def __init__(
        self,
        *options: ConfigOption,
        settings: ApiSettings | None = None,
        config: ClientConfig | None = None,
    ):
        """Initialize the PeerloomClient.

        Args:
            *options: Configuration options such as ``with_url``,
                ``with_api_key`` or ``with_http_client``, applied in order.
            settings: Optional settings used as defaults. If None, settings
                are loaded from the environment via ``get_settings()``.
            config: A ready-made ``ClientConfig``. When given, ``options`` and
                ``settings`` are not used.
        """
        self._config: ClientConfig = config or build_config(
            *options, settings=settings
        )
        self._auth_strategy: AuthStrategy = self._resolve_auth_strategy()
        logger.debug(
            f"Using authentication strategy: {type(self._auth_strategy).__name__}"
        )

        self._should_close_client = self._config.http_client is None
        self._http_client = (
            self._config.http_client or self._create_default_http_client()
        )

        self._organizations = OrganizationsClient(api_client=self)
        self._campuses = CampusesClient(api_client=self)
        self._facilities = FacilitiesClient(api_client=self)
        self._carriers = CarriersClient(api_client=self)
        self._carrier_facilities = CarrierFacilitiesClient(api_client=self)
        self._internet_exchanges = InternetExchangesClient(api_client=self)
        self._ix_lans = IXLANsClient(api_client=self)
        self._ix_prefixes = IXPrefixesClient(api_client=self)
        self._ix_facilities = IXFacilitiesClient(api_client=self)
        self._networks = NetworksClient(api_client=self)
        self._network_facilities = NetworkFacilitiesClient(api_client=self)
        self._network_ix_lans = NetworkIXLANsClient(api_client=self)
        self._network_contacts = NetworkContactsClient(api_client=self)

        logger.debug(f"PeerloomClient initialized for {self._config.base_url}")

    @property
    def config(self) -> ClientConfig:
        """The frozen configuration of this client."""
        return self._config

    def _resolve_auth_strategy(self) -> AuthStrategy:
        """Picks the explicit strategy, then the API key, then no auth."""
        if self._config.auth_strategy is not None:
            return self._config.auth_strategy
        if self._config.api_key:
            return ApiKeyAuth(api_key=self._config.api_key)
        return NoAuth()

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create a default httpx.AsyncClient with configured settings.

        Returns:
            httpx.AsyncClient: HTTP client using the certifi CA bundle and the
                configured timeout, following redirects.
        """
        try:
            verify_ssl: ssl.SSLContext | bool = ssl.create_default_context(
                cafile=certifi.where()
            )
            logger.trace("Using certifi SSL context.")
        except (OSError, ssl.SSLError):
            verify_ssl = True
            logger.warning(
                "certifi CA bundle could not be loaded. Using default SSL verification."
            )

        return httpx.AsyncClient(
            timeout=self._config.request_timeout,
            verify=verify_ssl,
            follow_redirects=True,
        )

    def _build_request(self, url: str) -> httpx.Request:
        """Builds the GET request for ``url``.

        Raises:
            RequestBuildError: If the URL is invalid or not an http(s) URL.
        """
        headers = {**CLIENT_HEADERS, "User-Agent": self._config.user_agent}
        try:
            request = self._http_client.build_request("GET", url, headers=headers)
        except httpx.InvalidURL as e:
            raise RequestBuildError(
                f"Error building request for {url!r}: {e}"
            ) from e
        if request.url.scheme not in ("http", "https"):
            raise RequestBuildError(
                f"Error building request for {url!r}: unsupported URL scheme "
                f"{request.url.scheme!r}"
            )
        return request

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Maps a non-2xx response onto the exception hierarchy.

        Raises:
            RateLimitError: On 429 Too Many Requests.
            RequestError: On any other non-2xx status.
        """
        if response.status_code == HTTPStatus.TOO_MANY_REQUESTS:
            retry_after = parse_retry_after(response.headers.get("Retry-After"))
            logger.warning(
                f"Rate limit hit (429) for {response.request.url}. "
                f"Retry-After hint: {retry_after}"
            )
            raise RateLimitError(
                "API rate limit exceeded.",
                response=response,
                request=response.request,
                retry_after=retry_after,
            )
        if not response.is_success:
            status_line = f"{response.status_code} {response.reason_phrase}".strip()
            body = response.text
            logger.error(f"Request failed with {status_line}: {response.request.url}")
            raise RequestError(
                f"{status_line}: {body}",
                response=response,
                request=response.request,
                status_line=status_line,
                body=body,
            )

    async def _invoke(self, url: str, *, timeout: float | None = None) -> bytes:
        """Sends a GET request to ``url`` and returns the response body.

        The response is always read and closed before this method returns or
        raises, so no connection is leaked. Only deadline expiry is reported as
        ``QueryTimeoutError``; cancelling the calling task propagates
        ``asyncio.CancelledError`` unchanged and leaves other calls on the same
        client running.

        Args:
            url: The full request URL.
            timeout: Deadline in seconds for the whole exchange. Falls back to
                the configured ``request_timeout``.

        Returns:
            bytes: The body of a 2xx response.

        Raises:
            RequestBuildError: If the request cannot be built.
            QueryTimeoutError: If the deadline expires.
            NetworkError: For connection level failures.
            QueryError: For any other transport failure.
            RateLimitError: On HTTP 429.
            RequestError: On any other non-2xx status.
        """
        request = self._build_request(url)
        await self._auth_strategy.async_authenticate(request)
        deadline = timeout if timeout is not None else self._config.request_timeout

        logger.debug(f"Sending request: {request.method} {request.url}")
        logger.trace(f"Request Headers: {request.headers}")
        try:
            async with asyncio.timeout(deadline):
                response = await self._http_client.send(request, stream=True)
                try:
                    await response.aread()
                finally:
                    await response.aclose()
        except (TimeoutError, httpx.TimeoutException) as e:
            logger.error(f"Request timed out: {request.url}")
            raise QueryTimeoutError(
                f"Request to {request.url} timed out", request=request
            ) from e
        except httpx.NetworkError as e:
            logger.error(f"Network error occurred for {request.url}: {e}")
            raise NetworkError(
                f"Network error for {request.url}: {e}", request=request
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"HTTP request error for {request.url}: {e}")
            raise QueryError(
                f"Error querying {request.url}: {e}", request=request
            ) from e

        logger.debug(f"Received response: {response.status_code} for {request.url}")
        self._raise_for_status(response)
        return response.content

    async def fetch(
        self,
        model: type[EntityT],
        namespace: str,
        search: SearchParams | None = None,
        *,
        timeout: float | None = None,
    ) -> list[EntityT]:
        """Queries a namespace and decodes the results into ``model``.

        Args:
            model: The Pydantic model of one result (e.g. ``Network``).
            namespace: The namespace to query (e.g. ``"net"``).
            search: Optional search parameters.
            timeout: Optional deadline in seconds for this call.

        Returns:
            list[EntityT]: The decoded results; empty when nothing matched.

        Raises:
            DecodeError: If the body is not a valid envelope of ``model``.
            Any error raised by the transport, unchanged.
        """
        url = build_url(self._config.base_url, namespace, search)
        body = await self._invoke(url, timeout=timeout)

        try:
            envelope = ApiResponse[model].model_validate_json(body)
        except PydanticValidationError as e:
            logger.error(f"Response decoding failed for {url}: {e}")
            raise DecodeError(
                f"Could not decode {model.__name__} response from {url}: {e}"
            ) from e

        logger.debug(f"Decoded {len(envelope.data)} {model.__name__} object(s)")
        return envelope.data

    async def fetch_by_id(
        self,
        model: type[EntityT],
        namespace: str,
        entity_id: int,
        *,
        timeout: float | None = None,
    ) -> EntityT | None:
        """Queries a namespace for the object with the given ID.

        Args:
            model: The Pydantic model of the object.
            namespace: The namespace to query.
            entity_id: The object ID, must be a positive integer.
            timeout: Optional deadline in seconds for this call.

        Returns:
            EntityT | None: The object, or None if it does not exist. If the
                API returns several objects the first one is used.

        Raises:
            InvalidIDError: If ``entity_id`` is not a positive integer. No
                request is made in that case.
        """
        if (
            isinstance(entity_id, bool)
            or not isinstance(entity_id, int)
            or entity_id <= 0
        ):
            raise InvalidIDError(entity_id)

        results = await self.fetch(
            model, namespace, {"id": entity_id}, timeout=timeout
        )
        if not results:
            logger.debug(f"No {model.__name__} found with ID {entity_id}")
            return None
        if len(results) > 1:
            logger.warning(
                f"{len(results)} {model.__name__} objects returned for ID "
                f"{entity_id}, using the first one."
            )
        return results[0]

    async def get_asn(self, asn: int, *, timeout: float | None = None) -> Network:
        """Returns the network matching the given AS number.

        Raises:
            NotFoundError: If no network has this AS number.
        """
        return await self._networks.get_by_asn(asn, timeout=timeout)

    @property
    def organizations(self) -> OrganizationsClient:
        """Provides access to the ``org`` endpoint."""
        return self._organizations

    @property
    def campuses(self) -> CampusesClient:
        """Provides access to the ``campus`` endpoint."""
        return self._campuses

    @property
    def facilities(self) -> FacilitiesClient:
        """Provides access to the ``fac`` endpoint."""
        return self._facilities

    @property
    def carriers(self) -> CarriersClient:
        """Provides access to the ``carrier`` endpoint."""
        return self._carriers

    @property
    def carrier_facilities(self) -> CarrierFacilitiesClient:
        """Provides access to the ``carrierfac`` endpoint."""
        return self._carrier_facilities

    @property
    def internet_exchanges(self) -> InternetExchangesClient:
        """Provides access to the ``ix`` endpoint."""
        return self._internet_exchanges

    @property
    def ix_lans(self) -> IXLANsClient:
        """Provides access to the ``ixlan`` endpoint."""
        return self._ix_lans

    @property
    def ix_prefixes(self) -> IXPrefixesClient:
        """Provides access to the ``ixpfx`` endpoint."""
        return self._ix_prefixes

    @property
    def ix_facilities(self) -> IXFacilitiesClient:
        """Provides access to the ``ixfac`` endpoint."""
        return self._ix_facilities

    @property
    def networks(self) -> NetworksClient:
        """Provides access to the ``net`` endpoint."""
        return self._networks

    @property
    def network_facilities(self) -> NetworkFacilitiesClient:
        """Provides access to the ``netfac`` endpoint."""
        return self._network_facilities

    @property
    def network_ix_lans(self) -> NetworkIXLANsClient:
        """Provides access to the ``netixlan`` endpoint."""
        return self._network_ix_lans

    @property
    def network_contacts(self) -> NetworkContactsClient:
        """Provides access to the ``poc`` endpoint."""
        return self._network_contacts

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it.

        An HTTP client injected with ``with_http_client`` is left open.
        """
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug(f"PeerloomClient internal HTTP client closed. Client ID: {id(self)}")

    async def __aenter__(self) -> Self:
        """Enter the async context manager."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Exit the async context manager and close owned resources."""
        await self.aclose()
