"""
Tests for HTTP transport: retry timing, headers and error mapping.
"""

import httpx
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ghexplorer.exceptions import (
    AuthenticationError,
    BadURLError,
    DecodingError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from ghexplorer.transport import HTTPTransport, RetryConfig

backoff_factor_strategy = st.floats(min_value=1.1, max_value=5.0)
attempt_strategy = st.integers(min_value=0, max_value=5)


def make_transport(handler, **kwargs) -> HTTPTransport:
    return HTTPTransport(http_transport=httpx.MockTransport(handler), **kwargs)


@given(backoff_factor=backoff_factor_strategy, attempt=attempt_strategy)
@settings(max_examples=100)
def test_exponential_backoff_timing(backoff_factor: float, attempt: int) -> None:
    """Wait before attempt N is backoff_factor ** N within the jitter range, capped at max_backoff."""
    transport = HTTPTransport(
        retry_config=RetryConfig(backoff_factor=backoff_factor, jitter=0.1, max_backoff=1000.0)
    )

    max_backoff = transport.retry_config.max_backoff
    expected_base = backoff_factor ** attempt
    actual = transport._get_backoff_time(attempt, None)

    assert min(expected_base * 0.9, max_backoff) <= actual <= min(expected_base * 1.1, max_backoff)
    transport.close()


@given(retry_after=st.integers(min_value=1, max_value=120))
@settings(max_examples=50)
def test_retry_after_header_respected(retry_after: int) -> None:
    transport = HTTPTransport(retry_config=RetryConfig(respect_retry_after=True))

    assert transport._get_backoff_time(0, str(retry_after)) == float(retry_after)
    transport.close()


@given(
    status_code=st.sampled_from([400, 401, 403, 404, 422]),
    attempt=st.integers(min_value=0, max_value=2),
)
@settings(max_examples=50)
def test_no_retry_on_non_retryable_errors(status_code: int, attempt: int) -> None:
    transport = HTTPTransport(retry_config=RetryConfig(max_retries=3))

    assert not transport._should_retry(status_code, attempt)
    transport.close()


def test_retries_disabled_by_default() -> None:
    transport = HTTPTransport()

    assert transport.retry_config.max_retries == 0
    assert not transport._should_retry(503, 0)
    transport.close()


def test_default_headers_without_token() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"items": []})

    with make_transport(handler) as transport:
        transport.get("/search/repositories", params={"q": "swift"})

    request = captured[0]
    assert request.headers["Accept"] == "application/vnd.github+json"
    assert request.headers["X-GitHub-Api-Version"] == "2022-11-28"
    assert "Authorization" not in request.headers


def test_token_sent_as_bearer() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={})

    with make_transport(handler, token="ghp_example") as transport:
        transport.get("/repositories/1")

    assert captured[0].headers["Authorization"] == "Bearer ghp_example"


def test_query_is_url_encoded() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"items": []})

    with make_transport(handler) as transport:
        transport.get("/search/repositories", params={"q": "iOS Interview language:swift"})

    assert captured[0].url.params["q"] == "iOS Interview language:swift"
    assert " " not in str(captured[0].url)


@pytest.mark.parametrize(
    "status_code,headers,error_type",
    [
        (401, {}, AuthenticationError),
        (403, {"X-RateLimit-Remaining": "0"}, RateLimitedError),
        (403, {}, ValidationError),
        (404, {}, NotFoundError),
        (422, {}, ValidationError),
        (429, {"Retry-After": "7"}, RateLimitedError),
        (500, {}, ServerError),
        (503, {}, ServerError),
    ],
)
def test_error_responses_are_typed(status_code: int, headers: dict, error_type: type) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"message": "nope"}, headers=headers)

    with make_transport(handler) as transport:
        with pytest.raises(error_type) as exc_info:
            transport.get("/repositories/1")

    assert exc_info.value.message == "nope"
    assert exc_info.value.status_code == status_code


def test_rate_limit_retry_after_parsed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"message": "slow down"}, headers={"Retry-After": "7"})

    with make_transport(handler) as transport:
        with pytest.raises(RateLimitedError) as exc_info:
            transport.get("/search/repositories")

    assert exc_info.value.retry_after == 7


def test_error_without_json_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, content=b"<html>Bad gateway</html>")

    with make_transport(handler) as transport:
        with pytest.raises(ServerError) as exc_info:
            transport.get("/repositories/1")

    assert exc_info.value.message == "HTTP 502"


def test_invalid_json_raises_decoding_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"not json")

    with make_transport(handler) as transport:
        with pytest.raises(DecodingError):
            transport.get("/repositories/1")


def test_connection_error_becomes_server_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with make_transport(handler) as transport:
        with pytest.raises(ServerError) as exc_info:
            transport.get("/repositories/1")

    assert exc_info.value.code == "CONNECTION_ERROR"


def test_retries_transient_errors_when_enabled(monkeypatch) -> None:
    monkeypatch.setattr("ghexplorer.transport.time.sleep", lambda seconds: None)
    responses = iter([
        httpx.Response(503, json={"message": "busy"}),
        httpx.Response(200, json={"id": 1}),
    ])

    def handler(request: httpx.Request) -> httpx.Response:
        return next(responses)

    with make_transport(handler, retry_config=RetryConfig(max_retries=2)) as transport:
        assert transport.get("/repositories/1") == {"id": 1}


def test_invalid_base_url_rejected() -> None:
    with pytest.raises(BadURLError):
        HTTPTransport(base_url="api.github.com")


def test_logs_requests_without_token(caplog) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": []})

    caplog.set_level("DEBUG", logger="ghexplorer.http")
    with make_transport(handler, token="ghp_supersecretvalue1234567890") as transport:
        transport.get("/search/repositories", params={"q": "swift"})

    logged = "\n".join(record.getMessage() for record in caplog.records)
    assert "GET https://api.github.com/search/repositories" in logged
    assert "Response 200" in logged
    assert "ghp_supersecretvalue1234567890" not in logged
    assert "params={'q': 'swift'}" in logged


def test_backoff_is_capped_at_max_backoff() -> None:
    transport = HTTPTransport(
        retry_config=RetryConfig(backoff_factor=5.0, jitter=0.1, max_backoff=1000.0)
    )

    assert transport._get_backoff_time(5, None) == 1000.0
    transport.close()
