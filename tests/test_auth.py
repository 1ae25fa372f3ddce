"""Tests for the authentication strategies in peerloom."""

import base64

import httpx
import pytest

from peerloom.auth import ApiKeyAuth, AuthStrategy, BasicAuth, NoAuth
from peerloom.exceptions import ConfigurationError


@pytest.mark.asyncio
async def test_no_auth_authenticate():
    """Test NoAuth strategy does not modify the request."""
    request = httpx.Request("GET", "http://example.com")
    original_headers = dict(request.headers)
    await NoAuth().async_authenticate(request)
    assert dict(request.headers) == original_headers


def test_api_key_auth_init_no_key():
    """Test ApiKeyAuth raises ConfigurationError if no key is provided."""
    with pytest.raises(
        ConfigurationError, match="ApiKeyAuth requires a non-empty 'api_key'."
    ):
        ApiKeyAuth(api_key="")
    with pytest.raises(
        ConfigurationError, match="ApiKeyAuth requires a non-empty 'api_key'."
    ):
        ApiKeyAuth(api_key=None)


@pytest.mark.asyncio
async def test_api_key_auth_authenticate():
    """Test ApiKeyAuth adds the Api-Key Authorization header."""
    auth = ApiKeyAuth(api_key="abc123")
    request = httpx.Request("GET", "http://example.com")
    await auth.async_authenticate(request)
    assert request.headers["Authorization"] == "Api-Key abc123"


def test_api_key_auth_repr_hides_key():
    assert "abc123" not in repr(ApiKeyAuth(api_key="abc123"))


def test_basic_auth_init_missing_credentials():
    with pytest.raises(ConfigurationError, match="BasicAuth requires"):
        BasicAuth(username="", password="pw")
    with pytest.raises(ConfigurationError, match="BasicAuth requires"):
        BasicAuth(username="user", password=None)


@pytest.mark.asyncio
async def test_basic_auth_authenticate():
    """Test BasicAuth adds a Basic Authorization header."""
    request = httpx.Request("GET", "http://example.com")
    await BasicAuth(username="user", password="pw").async_authenticate(request)
    expected = base64.b64encode(b"user:pw").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"


def test_strategies_satisfy_protocol():
    assert isinstance(NoAuth(), AuthStrategy)
    assert isinstance(ApiKeyAuth(api_key="k"), AuthStrategy)
    assert isinstance(BasicAuth(username="u", password="p"), AuthStrategy)
