"""
GitHub Explorer async client.

Provides the async interface for interacting with the GitHub API. This is the
client the view-models use by default.
"""

from typing import Any

import httpx

from ghexplorer.async_clients import AsyncReposClient
from ghexplorer.async_transport import AsyncHTTPTransport
from ghexplorer.client import DEFAULT_TIMEOUT, settings_from_env
from ghexplorer.transport import DEFAULT_BASE_URL, RetryConfig


class AsyncGitHubClient:
    """
    Async client for the GitHub repository API.

    Example:
        ```python
        import asyncio
        from ghexplorer import AsyncGitHubClient

        async def main():
            async with AsyncGitHubClient.from_env() as client:
                repos = await client.repos.search_repositories("user:apple")

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the async client.

        Args:
            token: Optional GitHub token (raises the rate limit)
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
            http_transport: Optional httpx async transport, mainly for tests
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
            http_transport=http_transport,
        )

        self.repos = AsyncReposClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float | None = None,
        retry_config: RetryConfig | None = None,
    ) -> "AsyncGitHubClient":
        """
        Create an async client from environment variables (see settings_from_env).

        Raises:
            ConfigurationError: If an environment variable is invalid
        """
        return cls(**settings_from_env(timeout), retry_config=retry_config)

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGitHubClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
