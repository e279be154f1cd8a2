from typing import Protocol

import httpx

from .exceptions import ConfigurationError
from .log_config import logger


class AuthStrategy(Protocol):
    """Protocol defining the interface for authentication strategies.

    Concrete implementations add authentication information (headers, tokens)
    to an outgoing HTTP request.
    """

    async def async_authenticate(self, request: httpx.Request) -> None:
        """
        Asynchronously modifies the request to add authentication information.

        Args:
            request: The httpx.Request object to modify.
        """
        ...

    async def async_close(self) -> None:
        """
        Asynchronously closes any resources held by the strategy.
        This method should be idempotent.
        """
        ...


class NoAuth:
    """Implements the AuthStrategy protocol for requests requiring no authentication."""

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Does nothing as no authentication is needed."""
        logger.trace("Using NoAuth strategy, no authentication applied.")

    async def async_close(self) -> None:
        """No resources to close for NoAuth, this method is a no-op."""


class TokenAuth:
    """Implements AuthStrategy using a BookStack API token.

    BookStack API tokens consist of an id and a secret, both generated from a
    user's profile page. They are sent together as
    ``Authorization: Token <token_id>:<token_secret>``.

    Attributes:
        _token_id: The API token id.
        _token_secret: The API token secret.
    """

    def __init__(self, token_id: str | None, token_secret: str | None):
        """Initializes TokenAuth with the provided token pair.

        Args:
            token_id: The API token id.
            token_secret: The API token secret.

        Raises:
            ConfigurationError: If either part of the token is None or empty.
        """
        if not token_id or not token_secret:
            raise ConfigurationError(
                "TokenAuth requires a non-empty 'token_id' and 'token_secret'."
            )
        self._token_id: str = token_id
        self._token_secret: str = token_secret
        logger.debug("TokenAuth initialized.")

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Adds the 'Authorization: Token <id>:<secret>' header to the request."""
        logger.trace("Authenticating request using TokenAuth.")
        request.headers["Authorization"] = (
            f"Token {self._token_id}:{self._token_secret}"
        )

    async def async_close(self) -> None:
        """No resources to close for TokenAuth, this method is a no-op."""
