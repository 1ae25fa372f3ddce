"""Custom exception classes for the peerloom library."""

import httpx


class PeerloomError(Exception):
    """Base exception class for all peerloom errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            # Prefer response info if available
            url_info = getattr(getattr(self.response, "request", None), "url", "N/A")
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class ConfigurationError(PeerloomError):
    """Represents an error in the library's configuration."""

    def __init__(self, message: str):
        super().__init__(message, response=None)


class ValidationError(PeerloomError):
    """Represents a client-side validation issue detected before sending a request."""


class InvalidIDError(ValidationError):
    """Raised when a resource ID is not a positive integer.

    No request is made when this error is raised.
    """

    def __init__(self, entity_id: object):
        super().__init__(f"Invalid resource ID: {entity_id!r}")
        self.entity_id = entity_id


class RequestBuildError(PeerloomError):
    """Raised when the HTTP request to call the API cannot be built."""


class QueryError(PeerloomError):
    """Represents a failure while making the request to the API.

    Covers transport-level problems such as DNS resolution failures, refused
    connections and timeouts. No HTTP response is associated with this error.
    """

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class NetworkError(QueryError):
    """Represents a network connection error (DNS failure, connection refused, ...)."""


class QueryTimeoutError(QueryError):
    """Raised when a request does not complete before its deadline."""


class APIError(PeerloomError):
    """Represents an error response returned by the API."""

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


class RateLimitError(APIError):
    """Represents hitting the API rate limit (429 Too Many Requests).

    The client never waits or retries on its own. ``retry_after`` holds the
    server hint in seconds when a ``Retry-After`` header was sent.
    """

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
        retry_after: float | None = None,
    ):
        super().__init__(message, response=response, request=request)
        self.retry_after = retry_after


class RequestError(APIError):
    """Represents any non-2xx response other than 429.

    Attributes:
        status_line: The HTTP status line, e.g. ``"500 Internal Server Error"``.
        body: The response body text, kept for diagnostics.
    """

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
        status_line: str = "",
        body: str = "",
    ):
        super().__init__(message, response=response, request=request)
        self.status_line = status_line
        self.body = body


class DecodeError(PeerloomError):
    """Raised when a response body is not a valid PeeringDB envelope."""


class NotFoundError(PeerloomError):
    """Raised when an operation requiring exactly one match finds none."""
