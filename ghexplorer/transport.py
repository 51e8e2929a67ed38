"""
HTTP Transport for GitHub Explorer.

Handles HTTP communication with the GitHub REST API: default headers,
optional retry with backoff, and mapping of error responses to typed
exceptions.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from ghexplorer.exceptions import (
    AuthenticationError,
    BadURLError,
    DecodingError,
    GitHubExplorerError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from ghexplorer.logging import log_http_request, log_http_response

DEFAULT_BASE_URL = "https://api.github.com"
API_VERSION = "2022-11-28"
USER_AGENT = "ghexplorer/0.1.0"


@dataclass
class RetryConfig:
    """
    Configuration for automatic retry behavior.

    Retries are disabled by default: a failed request is reported
    immediately and the caller decides whether to try again.
    """

    max_retries: int = 0
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


class BaseTransport:
    """
    Configuration and response handling shared by the sync and async
    transports.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize the transport configuration.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Optional GitHub token sent as a Bearer credential
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior

        Raises:
            BadURLError: If base_url is not an absolute http(s) URL
        """
        self.base_url = base_url.rstrip("/")
        if not self.base_url.startswith(("http://", "https://")):
            raise BadURLError(f"Invalid base URL: {base_url!r}")
        self.token = token
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

    def _default_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": USER_AGENT,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(self, attempt: int, retry_after: str | None) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    def _log_response(self, response: httpx.Response, started: float) -> None:
        log_http_response(
            response.status_code,
            str(response.request.url),
            elapsed_ms=(time.perf_counter() - started) * 1000,
            rate_limit_remaining=response.headers.get("X-RateLimit-Remaining"),
        )

    def _decode_json(self, response: httpx.Response) -> Any:
        """
        Parse a successful response body.

        Raises:
            DecodingError: If the body is not valid JSON
        """
        try:
            return response.json()
        except ValueError as e:
            raise DecodingError(
                f"Response from {response.request.url.path} is not valid JSON",
                response.status_code,
            ) from e

    def _parse_error_response(self, response: httpx.Response) -> GitHubExplorerError:
        """
        Parse an error response into a typed exception.

        GitHub error bodies look like ``{"message": ..., "documentation_url": ...}``.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate GitHubExplorerError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        message = data.get("message") or f"HTTP {status_code}"

        if status_code in (403, 429) and (
            status_code == 429 or response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            return RateLimitedError(
                "RATE_LIMITED", message, self._retry_after_seconds(response), status_code
            )
        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, status_code)
        if status_code == 404:
            return NotFoundError("NOT_FOUND", message, status_code)
        if status_code >= 500:
            return ServerError("SERVER_ERROR", message, status_code)
        return ValidationError("REQUEST_REJECTED", message, status_code)

    def _retry_after_seconds(self, response: httpx.Response) -> int:
        retry_after = response.headers.get("Retry-After")
        if retry_after is not None:
            try:
                return int(retry_after)
            except ValueError:
                pass
        reset = response.headers.get("X-RateLimit-Reset")
        if reset is not None:
            try:
                return max(int(reset) - int(time.time()), 0)
            except ValueError:
                pass
        return 60


class HTTPTransport(BaseTransport):
    """
    Synchronous HTTP transport layer.

    Handles:
    - Default GitHub headers and optional token authentication
    - Exponential backoff with jitter for retries (when enabled)
    - Retry-After header respect for rate limiting
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests
            token: Optional GitHub token
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            http_transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        super().__init__(base_url, token, timeout, retry_config)
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=self._default_headers(),
            transport=http_transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Make a GET request with automatic retry.

        Args:
            path: API path (e.g., "/search/repositories")
            params: Query parameters, URL-encoded by httpx

        Returns:
            Parsed JSON response

        Raises:
            GitHubExplorerError: On API, URL or decoding errors
        """
        def make_request() -> httpx.Response:
            log_http_request("GET", f"{self.base_url}{path}", dict(self._client.headers), params)
            return self._client.get(path, params=params)

        return self._execute_with_retry(make_request)

    def _execute_with_retry(self, request_fn: Callable[[], httpx.Response]) -> Any:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request

        Returns:
            Parsed JSON response

        Raises:
            GitHubExplorerError: On non-retryable errors or after max retries
        """
        for attempt in range(self.retry_config.max_retries + 1):
            started = time.perf_counter()
            try:
                response = request_fn()
            except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
                raise BadURLError(str(e)) from e
            except httpx.RequestError as e:
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e
                time.sleep(self._get_backoff_time(attempt, None))
                continue

            self._log_response(response, started)

            if response.status_code < 400:
                return self._decode_json(response)

            error = self._parse_error_response(response)
            if not self._should_retry(response.status_code, attempt):
                raise error

            retry_after = response.headers.get("Retry-After")
            time.sleep(self._get_backoff_time(attempt, retry_after))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")
