"""Custom exception classes for the shelfloom library.

Every failure surfaced by the client is one of four kinds: a transport failure
(with rate limiting as a distinct subtype), an application error reported by
BookStack inside a successful response, or a decode failure when the payload
does not have the expected shape. Callers tell them apart by type.
"""

import httpx


class ShelfloomError(Exception):
    """Base exception class for all shelfloom errors."""

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
            try:
                url_info = self.response.request.url
            except RuntimeError:  # response built without a request
                url_info = "N/A"
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class TransportError(ShelfloomError):
    """The request did not produce a successful (2xx) HTTP response."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        super().__init__(message, response=response, request=request)
        self.status_code: int | None = (
            response.status_code if response is not None else None
        )


class TimeoutError(TransportError):
    """The request did not complete within the configured timeout."""


class NetworkError(TransportError):
    """A connection could not be established or was lost mid-request."""


class RateLimitedError(TransportError):
    """BookStack rejected the request because the per-minute quota is spent.

    Attributes:
        limit_per_minute: The quota reported by ``X-RateLimit-Limit``.
        retry_after: Whole seconds to wait before the quota is available again.
    """

    def __init__(
        self,
        limit_per_minute: int,
        retry_after: int,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        super().__init__(message, response=response, request=request)
        self.limit_per_minute = limit_per_minute
        self.retry_after = retry_after


class ApplicationError(ShelfloomError):
    """BookStack reported an error object (``{"error": {...}}``) in its response body."""

    def __init__(
        self,
        code: int,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        super().__init__(message, response=response, request=request)
        self.code = code

    def __str__(self) -> str:
        return f"[{self.code}] {super().__str__()}"


class DecodeError(ShelfloomError):
    """The response payload could not be turned into the expected value."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        super().__init__(message, response=response, request=request)
        self.cause = cause


class ConfigurationError(ShelfloomError):
    """Represents an error in the library's configuration."""

    def __init__(self, message: str):
        super().__init__(message, response=None)
