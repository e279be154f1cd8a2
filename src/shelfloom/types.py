# shelfloom/types.py
"""Core type definitions shared across the shelfloom package.

This module defines the value object describing one HTTP call, the kinds of
response body a call can expect, and the callable shapes accepted by the
retry governor and the collection enumerator.
"""

import os
from collections.abc import Awaitable, Callable, Mapping
from enum import Enum
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import RateLimitedError

T = TypeVar("T")


class ResponseKind(Enum):
    """What a successful response body is expected to contain."""

    EMPTY = "empty"
    JSON = "json"
    TEXT = "text"
    BINARY = "binary"


class RequestData(BaseModel):
    """Everything needed to perform one HTTP call against the API.

    ``url`` is already absolute (see ``resolve_endpoint``). At most one of
    ``json_data`` or ``data``/``files`` is used as the body.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    method: str
    url: str
    json_data: Any | None = None
    data: Mapping[str, Any] | None = None
    files: Mapping[str, Any] | None = None
    headers: dict[str, str] = Field(default_factory=dict)

    def build_request(self) -> httpx.Request:
        """Builds an httpx.Request object from the stored data."""
        return httpx.Request(
            method=self.method,
            url=self.url,
            json=self.json_data,
            data=self.data,
            files=self.files,
            headers=self.headers,
        )


RateLimitHook = Callable[[RateLimitedError], Awaitable[None] | None]
"""Callback invoked on every throttling event before the governor waits.

It receives the ``RateLimitedError`` that triggered the wait and may be a plain
function or a coroutine function. Time spent in the hook counts towards the
cool-down.
"""

Operation = Callable[[], Awaitable[T]]
"""A zero-argument coroutine factory; called once per attempt."""

PageFetcher = Callable[[int, int], Awaitable[Any]]
"""Fetches one page given ``(offset, count)``.

The result must expose ``data`` (the page items) and ``total``.
"""

FileInput = str | os.PathLike[str] | tuple[str, bytes]
"""A file to upload: a filesystem path, or a ``(filename, content)`` pair."""
