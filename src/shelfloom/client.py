"""Asynchronous BookStack API client.

This module provides the BookStackClient class. It owns the HTTP connection,
applies authentication, and routes every response through the response
interpreter so callers only ever see decoded values or typed shelfloom errors.
It also exposes the rate-limit governor and the collection enumerator bound to
the client's settings.
"""

import copy
import hashlib
import ssl
from collections.abc import AsyncIterator, Mapping
from typing import Any, Self, TypeVar

import certifi
import httpx
from cachetools import TTLCache  # type: ignore[import-untyped]
from pydantic import BaseModel

from .auth import AuthStrategy, NoAuth, TokenAuth
from .config import ShelfloomSettings, get_settings
from .endpoints import ListingOptions, SearchOptions, resolve_endpoint
from .exceptions import (
    ConfigurationError,
    NetworkError,
    ShelfloomError,
    TimeoutError,
)
from .interpreter import interpret_response
from .log_config import logger
from .pagination import enumerate_all, enumerate_pages
from .resources import (
    AttachmentsClient,
    AuditLogClient,
    BooksClient,
    ChaptersClient,
    ContentPermissionsClient,
    DocsClient,
    ImageGalleryClient,
    ImportsClient,
    PagesClient,
    RecycleBinClient,
    RolesClient,
    SearchClient,
    ShelvesClient,
    SystemClient,
    UsersClient,
)
from .retry import try_call
from .types import Operation, PageFetcher, RateLimitHook, RequestData, ResponseKind

T = TypeVar("T")


def _detached(value: Any) -> Any:
    """Deep copy of a decoded value, so cached entries are never shared."""
    if isinstance(value, BaseModel):
        return value.model_copy(deep=True)
    return copy.deepcopy(value)


class BookStackClient:
    """Asynchronous client for the BookStack REST API.

    Resource clients for the different BookStack entities are available as
    properties (``client.books``, ``client.pages``, ...). Every call made through
    them returns a decoded value or raises one of the shelfloom error types.

    Throttling is not retried implicitly. Wrap a call in ``try_call`` to wait out
    the rate limiter, or use a resource's ``iterate`` method, which does so for
    every page it fetches.

    Typical usage:
    ```python
    async with BookStackClient(base_url="https://wiki.example.org/api/") as client:
        book = await client.try_call(lambda: client.books.read(3))
        async for page in client.pages.iterate(filters=[("book_id", "3")]):
            print(page.name)
    ```

    Attributes:
        on_rate_limited: Optional hook called on each throttling event, before
            the governor waits.
        _settings: The resolved settings for this client instance.
        _base_url: Absolute API root that endpoint paths are joined onto.
        _cache: Optional TTL cache for GET reads.
        _auth_strategy: Authentication strategy instance.
        _http_client: The underlying httpx.AsyncClient.
        _should_close_client: Whether this instance owns ``_http_client``.
    """

    def __init__(
        self,
        settings: ShelfloomSettings | None = None,
        auth_strategy: AuthStrategy | None = None,
        *,
        base_url: str | None = None,
        token_id: str | None = None,
        token_secret: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        on_rate_limited: RateLimitHook | None = None,
    ):
        """Initializes the BookStackClient.

        Authentication Strategy Resolution:
        - If `auth_strategy` is explicitly provided, it is used.
        - Otherwise a token pair passed to this constructor takes precedence over
          the one in `settings`.
        - With both a token id and secret available, TokenAuth is used, else
          NoAuth.

        Args:
            settings: Optional settings instance. If None, global settings are
                loaded via `shelfloom.config.get_settings()`.
            auth_strategy: Optional explicit authentication strategy.
            base_url: API root, e.g. ``https://wiki.example.org/api/``. Takes
                precedence over `settings.base_url`. Paths are resolved against
                it as relative references, so it should end with ``/``.
            token_id: Optional API token id.
            token_secret: Optional API token secret.
            http_client: Optional pre-configured httpx.AsyncClient. It is not
                closed by `aclose()`.
            on_rate_limited: Optional sync or async hook for throttling events.

        Raises:
            ConfigurationError: If no base URL is configured.
        """
        self._settings: ShelfloomSettings = settings or get_settings()

        resolved_base_url = base_url or self._settings.base_url
        if not resolved_base_url:
            raise ConfigurationError(
                "A BookStack API base URL is required (argument or SHELFLOOM_BASE_URL)."
            )
        self._base_url: str = resolved_base_url
        if not self._base_url.endswith("/"):
            logger.warning(
                f"Base URL '{self._base_url}' has no trailing slash; its last path "
                "segment will be replaced when resolving endpoints."
            )

        # Initialize cache
        self._cache: TTLCache[str, Any] | None = None
        if self._settings.enable_caching and self._settings.cache_ttl_seconds > 0:
            logger.info(
                f"Client-side caching enabled. Max size: {self._settings.cache_max_size}, "
                f"TTL: {self._settings.cache_ttl_seconds}s"
            )
            self._cache = TTLCache(  # type: ignore[type-arg]
                maxsize=self._settings.cache_max_size,
                ttl=self._settings.cache_ttl_seconds,
            )
        else:
            logger.debug("Client-side caching is disabled.")

        if auth_strategy:
            resolved_auth_strategy = auth_strategy
        else:
            _token_id = token_id or self._settings.token_id
            _token_secret = token_secret or self._settings.token_secret
            if _token_id and _token_secret:
                resolved_auth_strategy = TokenAuth(_token_id, _token_secret)
            else:
                logger.info("No API token found, using NoAuth.")
                resolved_auth_strategy = NoAuth()
        self._auth_strategy: AuthStrategy = resolved_auth_strategy
        logger.info(
            f"Using authentication strategy: {type(self._auth_strategy).__name__}"
        )

        self._should_close_client = http_client is None
        self._http_client = http_client or self._create_default_http_client()

        self.on_rate_limited = on_rate_limited

        self._system = SystemClient(api_client=self)
        self._docs = DocsClient(api_client=self)
        self._books = BooksClient(api_client=self)
        self._chapters = ChaptersClient(api_client=self)
        self._pages = PagesClient(api_client=self)
        self._shelves = ShelvesClient(api_client=self)
        self._attachments = AttachmentsClient(api_client=self)
        self._image_gallery = ImageGalleryClient(api_client=self)
        self._search = SearchClient(api_client=self)
        self._users = UsersClient(api_client=self)
        self._roles = RolesClient(api_client=self)
        self._content_permissions = ContentPermissionsClient(api_client=self)
        self._recycle_bin = RecycleBinClient(api_client=self)
        self._audit_log = AuditLogClient(api_client=self)
        self._imports = ImportsClient(api_client=self)

        logger.debug("BookStackClient initialized.")

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create a default httpx.AsyncClient with configured settings.

        Returns:
            httpx.AsyncClient: Configured HTTP client with SSL verification,
                timeout settings, and user agent header.
        """
        try:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            verify_ssl: ssl.SSLContext | bool = ssl_context
            logger.debug("Using certifi SSL context.")
        except (OSError, ssl.SSLError):
            verify_ssl = True
            logger.warning(
                "certifi bundle failed to load. Using default SSL verification."
            )

        return httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            verify=verify_ssl,
            headers={"User-Agent": self._settings.user_agent},
        )

    @property
    def settings(self) -> ShelfloomSettings:
        return self._settings

    @property
    def base_url(self) -> str:
        return self._base_url

    def endpoint(
        self, path: str, options: ListingOptions | SearchOptions | None = None
    ) -> str:
        """Absolute request URI for ``path`` under this client's API root."""
        return resolve_endpoint(path, self._base_url, options)

    async def _send(self, request_data: RequestData) -> httpx.Response:
        """Authenticate and send one request, mapping httpx failures.

        Raises:
            TimeoutError: If the request times out.
            NetworkError: For connection and other transport-level failures.
            ShelfloomError: For other unexpected errors.
        """
        request = request_data.build_request()
        try:
            await self._auth_strategy.async_authenticate(request)

            if "User-Agent" not in request.headers or not request.headers["User-Agent"]:
                request.headers["User-Agent"] = self._settings.user_agent

            logger.debug(f"Sending request: {request.method} {request.url}")
            response = await self._http_client.send(request)
            logger.debug(f"Received response: {response.status_code} for {request.url}")
            logger.trace(f"Response Headers: {response.headers}")
            return response
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {request.url}")
            raise TimeoutError("Request timed out", request=request) from e
        except httpx.NetworkError as e:
            logger.error(f"Network error occurred for {request.url}: {e}")
            raise NetworkError(
                f"Network error for {request.url}: {e}", request=request
            ) from e
        except httpx.RequestError as e:
            logger.error(f"HTTP request error for {request.url}: {e}")
            raise NetworkError(
                f"HTTP request error for {request.url}: {e}", request=request
            ) from e
        except ShelfloomError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error sending request to {request.url}: {e}")
            raise ShelfloomError(
                f"An unexpected error occurred during request execution: {e}",
                request=request,
            ) from e

    def _generate_cache_key(self, method: str, url: str) -> str:
        """Generate a cache key from the request method and full URL."""
        cache_key_string = f"{method.upper()}|{url}"
        return hashlib.md5(cache_key_string.encode("utf-8")).hexdigest()

    async def request(
        self,
        method: str,
        path: str,
        *,
        options: ListingOptions | SearchOptions | None = None,
        kind: ResponseKind = ResponseKind.JSON,
        model: type[BaseModel] | None = None,
        json: Any | None = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> Any:
        """Perform one API call and interpret its response.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            path: Resource path relative to the API root.
            options: Listing or search options appended as the query string.
            kind: Expected kind of response body.
            model: Pydantic model the JSON body is validated into.
            json: JSON request body.
            data: Form fields; sent as multipart when `files` is given.
            files: Files for a multipart upload, as httpx accepts them.

        Returns:
            Any: The decoded value, see `interpret_response`.

        Raises:
            RateLimitedError: The per-minute quota is exhausted.
            TransportError: Non-2xx response, timeout or network failure.
            ApplicationError: BookStack reported an error in the body.
            DecodeError: The body could not be decoded as expected.

        Note:
            Successful GET requests expecting JSON are cached when caching is
            enabled. Cache hits return the decoded value without a request.
        """
        url = self.endpoint(path, options)

        cache_key: str | None = None
        if (
            self._cache is not None
            and method.upper() == "GET"
            and kind is ResponseKind.JSON
        ):
            cache_key = self._generate_cache_key(method, url)
            cached_item = self._cache.get(cache_key)
            if cached_item is not None:
                logger.debug(f"Cache hit for key: {cache_key}")
                return _detached(cached_item)

        response = await self._send(
            RequestData(method=method, url=url, json_data=json, data=data, files=files)
        )
        result = interpret_response(
            response,
            kind,
            model,
            retry_after_default=self._settings.rate_limit_retry_after_default,
        )

        if cache_key is not None and self._cache is not None:
            self._cache[cache_key] = _detached(result)
            logger.debug(f"Cached decoded response for key: {cache_key}")
        return result

    async def try_call(
        self, operation: Operation[T], *, max_attempts: int | None = None
    ) -> T:
        """Run ``operation`` under the rate-limit governor.

        Args:
            operation: Zero-argument callable returning a fresh awaitable per call.
            max_attempts: Attempt cap; defaults to `settings.max_try_count`.
        """
        return await try_call(
            operation,
            max_attempts=(
                self._settings.max_try_count if max_attempts is None else max_attempts
            ),
            on_rate_limited=self.on_rate_limited,
        )

    def enumerate(
        self, fetch_page: PageFetcher, *, batch_size: int | None = None
    ) -> AsyncIterator[Any]:
        """Enumerate an offset-paged collection with this client's settings."""
        return enumerate_all(
            fetch_page,
            batch_size=self._settings.batch_count if batch_size is None else batch_size,
            max_attempts=self._settings.max_try_count,
            on_rate_limited=self.on_rate_limited,
        )

    def enumerate_pages(
        self, fetch_page: PageFetcher, *, batch_size: int | None = None
    ) -> AsyncIterator[Any]:
        """Enumerate a page-numbered collection with this client's settings."""
        return enumerate_pages(
            fetch_page,
            batch_size=self._settings.batch_count if batch_size is None else batch_size,
            max_attempts=self._settings.max_try_count,
            on_rate_limited=self.on_rate_limited,
        )

    @property
    def system(self) -> SystemClient:
        """Provides access to the SystemClient for instance information."""
        return self._system

    @property
    def docs(self) -> DocsClient:
        """Provides access to the DocsClient for the API documentation."""
        return self._docs

    @property
    def books(self) -> BooksClient:
        return self._books

    @property
    def chapters(self) -> ChaptersClient:
        return self._chapters

    @property
    def pages(self) -> PagesClient:
        return self._pages

    @property
    def shelves(self) -> ShelvesClient:
        return self._shelves

    @property
    def attachments(self) -> AttachmentsClient:
        return self._attachments

    @property
    def image_gallery(self) -> ImageGalleryClient:
        return self._image_gallery

    @property
    def search(self) -> SearchClient:
        return self._search

    @property
    def users(self) -> UsersClient:
        return self._users

    @property
    def roles(self) -> RolesClient:
        return self._roles

    @property
    def content_permissions(self) -> ContentPermissionsClient:
        """Provides access to the ContentPermissionsClient for per-item permissions."""
        return self._content_permissions

    @property
    def recycle_bin(self) -> RecycleBinClient:
        return self._recycle_bin

    @property
    def audit_log(self) -> AuditLogClient:
        return self._audit_log

    @property
    def imports(self) -> ImportsClient:
        """Provides access to the ImportsClient for ZIP content imports."""
        return self._imports

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug(f"BookStackClient HTTP client closed. Client ID: {id(self)}.")
        await self._auth_strategy.async_close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()
