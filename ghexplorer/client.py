"""
GitHub Explorer main client.

Provides the synchronous interface for interacting with the GitHub API.
"""

import os
from typing import Any

import httpx

from ghexplorer.clients import ReposClient
from ghexplorer.exceptions import ConfigurationError
from ghexplorer.transport import DEFAULT_BASE_URL, HTTPTransport, RetryConfig

DEFAULT_TIMEOUT = 30.0


def settings_from_env(timeout: float | None = None) -> dict[str, Any]:
    """
    Read client settings from environment variables.

    Environment variables:
        GITHUB_TOKEN: Token sent as a Bearer credential (optional)
        GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)
        GHEXPLORER_TIMEOUT: Request timeout in seconds (optional, default: 30)

    Args:
        timeout: Explicit timeout, takes precedence over GHEXPLORER_TIMEOUT

    Returns:
        Keyword arguments for GitHubClient / AsyncGitHubClient

    Raises:
        ConfigurationError: If GHEXPLORER_TIMEOUT is not a positive number
    """
    if timeout is None:
        raw_timeout = os.environ.get("GHEXPLORER_TIMEOUT")
        if raw_timeout is None:
            timeout = DEFAULT_TIMEOUT
        else:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid GHEXPLORER_TIMEOUT: {raw_timeout!r}. Must be a number"
                ) from None
            if timeout <= 0:
                raise ConfigurationError(
                    f"Invalid GHEXPLORER_TIMEOUT: {raw_timeout!r}. Must be positive"
                )

    return {
        "token": os.environ.get("GITHUB_TOKEN") or None,
        "base_url": os.environ.get("GITHUB_API_URL", DEFAULT_BASE_URL),
        "timeout": timeout,
    }


class GitHubClient:
    """
    Main client for the GitHub repository API.

    Example:
        ```python
        from ghexplorer import GitHubClient
        from ghexplorer.types import RepoCategory

        with GitHubClient.from_env() as client:
            repos = client.repos.fetch_repositories(RepoCategory.SWIFT)
            detail = client.repos.fetch_repository_details(repos[0].id)
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
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: Optional GitHub token (raises the rate limit)
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
            http_transport: Optional httpx transport, mainly for tests
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
            http_transport=http_transport,
        )

        self.repos = ReposClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float | None = None,
        retry_config: RetryConfig | None = None,
    ) -> "GitHubClient":
        """
        Create a client from environment variables (see settings_from_env).

        Raises:
            ConfigurationError: If an environment variable is invalid
        """
        return cls(**settings_from_env(timeout), retry_config=retry_config)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
