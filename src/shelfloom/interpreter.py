"""Turning raw BookStack HTTP responses into values or typed failures.

BookStack reports failures in two ways. Some arrive as non-2xx statuses. The
rate limiter is one of these: it answers 429 with ``X-RateLimit-*`` headers.
Others arrive as a 2xx response whose JSON body is
``{"error": {"code": ..., "message": ...}}``. ``interpret_response`` sorts
every response into exactly one outcome:

* ``RateLimitedError`` or ``TransportError`` for non-2xx statuses
* ``ApplicationError`` for an embedded error object
* ``DecodeError`` when the body does not match what was expected
* otherwise the decoded value (model, text, bytes or None)
"""

import math
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from http import HTTPStatus
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from .constants import (
    RATE_LIMIT_LIMIT_HEADER,
    RATE_LIMIT_REMAINING_HEADER,
    RETRY_AFTER_HEADER,
)
from .exceptions import (
    ApplicationError,
    DecodeError,
    RateLimitedError,
    ShelfloomError,
    TransportError,
)
from .log_config import logger
from .types import ResponseKind


def _request_url(response: httpx.Response) -> str:
    try:
        return str(response.request.url)
    except RuntimeError:
        return "N/A"


def _header_int(response: httpx.Response, name: str) -> int | None:
    """First value of header ``name`` that parses as an integer."""
    for value in response.headers.get_list(name):
        try:
            return int(value.strip())
        except ValueError:
            continue
    return None


def _retry_after_seconds(response: httpx.Response) -> int | None:
    """Parse ``Retry-After`` (delta seconds or HTTP date) into whole seconds."""
    header = response.headers.get(RETRY_AFTER_HEADER)
    if not header:
        return None
    header = header.strip()
    if header.isdigit():
        return int(header)
    try:
        retry_at = parsedate_to_datetime(header)
    except (TypeError, ValueError):
        logger.warning(f"Could not parse Retry-After header: {header}")
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=UTC)
    delta = (retry_at - datetime.now(UTC)).total_seconds()
    return max(0, math.ceil(delta))


def _reason(response: httpx.Response) -> str:
    return response.reason_phrase or f"HTTP {response.status_code}"


def _embedded_error(response: httpx.Response) -> dict[str, Any]:
    """The ``error`` object of a JSON error body, or an empty dict."""
    try:
        document = response.json()
    except ValueError:
        return {}
    if isinstance(document, dict) and isinstance(document.get("error"), dict):
        return document["error"]
    return {}


def _body_retry_after(error: dict[str, Any]) -> int | None:
    """Whole seconds from a numeric ``error.retry_after`` field."""
    value = error.get("retry_after")
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return max(0, math.ceil(value))


def raise_for_transport(
    response: httpx.Response, *, retry_after_default: int = 60
) -> None:
    """Raise the transport failure for a non-2xx response; return otherwise.

    A 429 response counts as rate limiting only when it reports both the
    per-minute limit and zero remaining requests. The cool-down is taken from
    the first of these that is present: a numeric ``retry_after`` in the error
    body, the ``Retry-After`` header, then ``retry_after_default``.

    Raises:
        RateLimitedError: The per-minute quota is exhausted.
        TransportError: Any other non-2xx status.
    """
    if response.is_success:
        return

    if response.status_code == HTTPStatus.TOO_MANY_REQUESTS:
        limit = _header_int(response, RATE_LIMIT_LIMIT_HEADER)
        remaining = _header_int(response, RATE_LIMIT_REMAINING_HEADER)
        if limit is not None and remaining == 0:
            error = _embedded_error(response)
            retry_after = _body_retry_after(error)
            if retry_after is None:
                retry_after = _retry_after_seconds(response)
            if retry_after is None:
                retry_after = retry_after_default
            message = error.get("message")
            if not isinstance(message, str) or not message:
                message = _reason(response)
            logger.info(
                f"Rate limit reached ({limit}/min) for {_request_url(response)}; "
                f"retry after {retry_after}s"
            )
            raise RateLimitedError(limit, retry_after, message, response=response)

    logger.debug(
        f"Request to {_request_url(response)} failed with status {response.status_code}"
    )
    raise TransportError(_reason(response), response=response)


def _decode_json(response: httpx.Response, model: type[BaseModel] | None) -> Any:
    document = response.json()

    if isinstance(document, dict) and "error" in document:
        error = document["error"]
        code = error.get("code") if isinstance(error, dict) else None
        message = error.get("message") if isinstance(error, dict) else None
        if (
            not isinstance(code, int)
            or isinstance(code, bool)
            or not isinstance(message, str)
        ):
            raise DecodeError(
                f"Malformed error object in response: {error!r}", response=response
            )
        raise ApplicationError(code, message, response=response)

    if model is None:
        if document is None:
            raise DecodeError("Response body decoded to null", response=response)
        return document

    try:
        result = model.model_validate(document)
    except ValidationError as e:
        raise DecodeError(
            f"Response does not match {model.__name__}", e, response=response
        ) from e
    if result is None:
        raise DecodeError(
            f"Response decoded to no {model.__name__}", response=response
        )
    return result


def interpret_response(
    response: httpx.Response,
    kind: ResponseKind = ResponseKind.JSON,
    model: type[BaseModel] | None = None,
    *,
    retry_after_default: int = 60,
) -> Any:
    """Classify a received response and decode its body.

    Args:
        response: A fully read httpx response.
        kind: What the body of a successful response is expected to hold.
        model: Target model for ``ResponseKind.JSON``; None returns the parsed
            JSON document as-is.
        retry_after_default: Cool-down used for 429 responses that give
            neither a body ``retry_after`` nor ``Retry-After``.

    Returns:
        None for ``EMPTY``, the model instance (or JSON document) for ``JSON``,
        ``str`` for ``TEXT`` and ``bytes`` for ``BINARY``.

    Raises:
        RateLimitedError: Throttled by the server.
        TransportError: Any other non-2xx status.
        ApplicationError: The body holds an error object.
        DecodeError: The body could not be decoded as expected.
    """
    try:
        raise_for_transport(response, retry_after_default=retry_after_default)

        if kind is ResponseKind.EMPTY:
            return None
        if kind is ResponseKind.TEXT:
            return response.text
        if kind is ResponseKind.BINARY:
            return response.content
        return _decode_json(response, model)
    except ShelfloomError:
        raise
    except Exception as e:
        raise DecodeError(
            "An error occurred in the interpretation of the response data.",
            e,
            response=response,
        ) from e
