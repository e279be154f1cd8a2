"""Tests for the authentication strategies in shelfloom."""

import httpx
import pytest

from shelfloom.auth import NoAuth, TokenAuth
from shelfloom.exceptions import ConfigurationError


@pytest.mark.asyncio
async def test_no_auth_authenticate():
    """Test NoAuth strategy does not modify the request."""
    request = httpx.Request("GET", "http://example.com")
    original_headers = dict(request.headers)
    await NoAuth().async_authenticate(request)
    assert dict(request.headers) == original_headers


@pytest.mark.asyncio
async def test_no_auth_close():
    """Test NoAuth strategy close method does nothing."""
    await NoAuth().async_close()


def test_token_auth_init_success():
    auth = TokenAuth("id123", "secret456")
    assert auth._token_id == "id123"
    assert auth._token_secret == "secret456"


@pytest.mark.parametrize(
    ("token_id", "token_secret"),
    [("", "secret"), ("id", ""), (None, "secret"), ("id", None)],
)
def test_token_auth_init_incomplete_token(token_id, token_secret):
    """Test TokenAuth raises ConfigurationError if either part is missing."""
    with pytest.raises(
        ConfigurationError,
        match="TokenAuth requires a non-empty 'token_id' and 'token_secret'.",
    ):
        TokenAuth(token_id, token_secret)


@pytest.mark.asyncio
async def test_token_auth_authenticate():
    """Test TokenAuth adds the BookStack Authorization header."""
    auth = TokenAuth("id123", "secret456")
    request = httpx.Request("GET", "http://example.com")
    await auth.async_authenticate(request)
    assert request.headers["Authorization"] == "Token id123:secret456"


@pytest.mark.asyncio
async def test_token_auth_close():
    await TokenAuth("id123", "secret456").async_close()
