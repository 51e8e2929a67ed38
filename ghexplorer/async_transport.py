"""
Async HTTP Transport for GitHub Explorer.

Handles async HTTP communication with optional retry logic and error
handling using httpx async client.
"""

import asyncio
import time
from collections.abc import Callable, Coroutine
from typing import Any

import httpx

from ghexplorer.exceptions import BadURLError, ServerError
from ghexplorer.logging import log_http_request
from ghexplorer.transport import DEFAULT_BASE_URL, BaseTransport, RetryConfig


class AsyncHTTPTransport(BaseTransport):
    """
    Async HTTP transport layer.

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
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests
            token: Optional GitHub token
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            http_transport: Optional httpx async transport (e.g. httpx.MockTransport)
        """
        super().__init__(base_url, token, timeout, retry_config)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=self._default_headers(),
            transport=http_transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
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
        async def make_request() -> httpx.Response:
            log_http_request("GET", f"{self.base_url}{path}", dict(self._client.headers), params)
            return await self._client.get(path, params=params)

        return await self._execute_with_retry(make_request)

    async def _execute_with_retry(
        self, request_fn: Callable[[], Coroutine[Any, Any, httpx.Response]]
    ) -> Any:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Async function that makes the HTTP request

        Returns:
            Parsed JSON response

        Raises:
            GitHubExplorerError: On non-retryable errors or after max retries
        """
        for attempt in range(self.retry_config.max_retries + 1):
            started = time.perf_counter()
            try:
                response = await request_fn()
            except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
                raise BadURLError(str(e)) from e
            except httpx.RequestError as e:
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e
                await asyncio.sleep(self._get_backoff_time(attempt, None))
                continue

            self._log_response(response, started)

            if response.status_code < 400:
                return self._decode_json(response)

            error = self._parse_error_response(response)
            if not self._should_retry(response.status_code, attempt):
                raise error

            retry_after = response.headers.get("Retry-After")
            await asyncio.sleep(self._get_backoff_time(attempt, retry_after))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")
