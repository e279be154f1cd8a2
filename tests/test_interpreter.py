"""Tests for classifying and decoding BookStack responses."""

from datetime import UTC, datetime, timedelta
from email.utils import format_datetime

import httpx
import pytest

from shelfloom.exceptions import (
    ApplicationError,
    DecodeError,
    RateLimitedError,
    ShelfloomError,
    TransportError,
)
from shelfloom.interpreter import interpret_response, raise_for_transport
from shelfloom.models import SystemInfo
from shelfloom.types import ResponseKind

REQUEST = httpx.Request("GET", "https://wiki.example.org/api/system")
SYSTEM_INFO = {
    "version": "v24.05.1",
    "instance_id": "1234",
    "app_name": "BookStack",
    "app_logo": None,
    "base_url": "https://wiki.example.org",
}


def make_response(status_code: int = 200, **kwargs) -> httpx.Response:
    return httpx.Response(status_code, request=REQUEST, **kwargs)


def rate_limited_response(**headers: str) -> httpx.Response:
    return make_response(
        429,
        headers={"X-RateLimit-Limit": "180", "X-RateLimit-Remaining": "0", **headers},
    )


def test_success_decodes_model():
    info = interpret_response(make_response(json=SYSTEM_INFO), model=SystemInfo)
    assert isinstance(info, SystemInfo)
    assert info.app_name == "BookStack"


def test_success_without_model_returns_document():
    assert interpret_response(make_response(json={"a": [1, 2]})) == {"a": [1, 2]}


def test_rate_limited_with_retry_after_header():
    with pytest.raises(RateLimitedError) as exc_info:
        interpret_response(rate_limited_response(**{"Retry-After": "42"}))
    error = exc_info.value
    assert error.limit_per_minute == 180
    assert error.retry_after == 42
    assert error.status_code == 429
    assert error.message == "Too Many Requests"


def test_rate_limited_without_retry_after_uses_default():
    with pytest.raises(RateLimitedError) as exc_info:
        interpret_response(rate_limited_response(), retry_after_default=15)
    assert exc_info.value.retry_after == 15


def test_rate_limited_with_http_date_retry_after():
    retry_at = datetime.now(UTC) + timedelta(seconds=30)
    response = rate_limited_response(
        **{"Retry-After": format_datetime(retry_at, usegmt=True)}
    )
    with pytest.raises(RateLimitedError) as exc_info:
        interpret_response(response)
    assert 0 < exc_info.value.retry_after <= 31


def test_rate_limited_message_prefers_error_body():
    response = make_response(
        429,
        headers={"X-RateLimit-Limit": "180", "X-RateLimit-Remaining": "0"},
        json={"error": {"code": 429, "message": "Too many attempts"}},
    )
    with pytest.raises(RateLimitedError, match="Too many attempts"):
        interpret_response(response)


def test_rate_limited_prefers_retry_interval_from_error_body():
    response = make_response(
        429,
        headers={
            "X-RateLimit-Limit": "180",
            "X-RateLimit-Remaining": "0",
            "Retry-After": "42",
        },
        json={"error": {"code": 429, "message": "Slow down", "retry_after": 12.5}},
    )
    with pytest.raises(RateLimitedError) as exc_info:
        interpret_response(response)
    assert exc_info.value.retry_after == 13


def test_rate_limited_ignores_non_numeric_body_retry_interval():
    response = make_response(
        429,
        headers={
            "X-RateLimit-Limit": "180",
            "X-RateLimit-Remaining": "0",
            "Retry-After": "42",
        },
        json={"error": {"code": 429, "message": "Slow down", "retry_after": "soon"}},
    )
    with pytest.raises(RateLimitedError) as exc_info:
        interpret_response(response)
    assert exc_info.value.retry_after == 42


def test_429_with_remaining_quota_is_plain_transport_error():
    response = make_response(
        429, headers={"X-RateLimit-Limit": "180", "X-RateLimit-Remaining": "3"}
    )
    with pytest.raises(TransportError) as exc_info:
        interpret_response(response)
    assert not isinstance(exc_info.value, RateLimitedError)


def test_429_without_limit_header_is_plain_transport_error():
    response = make_response(429, headers={"X-RateLimit-Remaining": "0"})
    with pytest.raises(TransportError) as exc_info:
        interpret_response(response)
    assert not isinstance(exc_info.value, RateLimitedError)


def test_non_success_status_raises_transport_error_with_reason():
    with pytest.raises(TransportError) as exc_info:
        interpret_response(make_response(404, json={"error": {"code": 404}}))
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Not Found"
    assert "URL: https://wiki.example.org/api/system" in str(exc_info.value)


def test_unknown_status_reason_falls_back_to_code():
    with pytest.raises(TransportError, match="HTTP 599"):
        raise_for_transport(make_response(599))


def test_error_object_in_success_raises_application_error():
    response = make_response(json={"error": {"code": 403, "message": "denied"}})
    with pytest.raises(ApplicationError) as exc_info:
        interpret_response(response, model=SystemInfo)
    assert exc_info.value.code == 403
    assert exc_info.value.message == "denied"
    assert str(exc_info.value).startswith("[403] denied")


@pytest.mark.parametrize(
    "error",
    [
        "denied",
        {"code": "403", "message": "denied"},
        {"code": 403},
        {"code": True, "message": "denied"},
    ],
)
def test_malformed_error_object_raises_decode_error(error):
    with pytest.raises(DecodeError, match="Malformed error object"):
        interpret_response(make_response(json={"error": error}))


def test_model_mismatch_raises_decode_error():
    with pytest.raises(DecodeError) as exc_info:
        interpret_response(make_response(json={"version": 1}), model=SystemInfo)
    assert exc_info.value.cause is not None


def test_null_document_raises_decode_error():
    with pytest.raises(DecodeError):
        interpret_response(make_response(content=b"null"), model=SystemInfo)


def test_invalid_json_is_wrapped_as_decode_error():
    with pytest.raises(DecodeError) as exc_info:
        interpret_response(make_response(content=b"<html>oops</html>"))
    assert exc_info.value.message == (
        "An error occurred in the interpretation of the response data."
    )
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_empty_kind_ignores_body():
    response = make_response(content=b"this is not json")
    assert interpret_response(response, ResponseKind.EMPTY) is None


def test_empty_kind_still_reports_transport_failure():
    with pytest.raises(TransportError):
        interpret_response(make_response(500), ResponseKind.EMPTY)


def test_text_and_binary_bodies_are_returned_verbatim():
    text = "# Title\n\nBody"
    assert interpret_response(make_response(text=text), ResponseKind.TEXT) == text
    blob = b"%PDF-1.7\x00\x01"
    assert interpret_response(make_response(content=blob), ResponseKind.BINARY) == blob


def test_every_failure_is_a_shelfloom_error():
    for response in (
        rate_limited_response(),
        make_response(500),
        make_response(json={"error": {"code": 1, "message": "m"}}),
        make_response(content=b"{"),
    ):
        with pytest.raises(ShelfloomError):
            interpret_response(response, model=SystemInfo)
