"""GitHub Explorer - browse, search and sort GitHub repositories."""

from ghexplorer.async_client import AsyncGitHubClient
from ghexplorer.client import GitHubClient
from ghexplorer.exceptions import (
    APIError,
    AuthenticationError,
    BadURLError,
    ConfigurationError,
    DecodingError,
    GitHubExplorerError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from ghexplorer.formatting import format_count
from ghexplorer.logging import configure_logging, get_logger
from ghexplorer.search import filter_repositories, sort_by_forks, sort_by_stars
from ghexplorer.service import RepositoryService
from ghexplorer.transport import HTTPTransport, RetryConfig
from ghexplorer.types import DisplayState, Owner, RepoCategory, Repository, SearchResponse
from ghexplorer.viewmodels import HomeViewModel, OwnerDetailViewModel, RepositoryDetailViewModel

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Clients
    "GitHubClient",
    "AsyncGitHubClient",
    "RepositoryService",
    # View-models
    "HomeViewModel",
    "RepositoryDetailViewModel",
    "OwnerDetailViewModel",
    # Types
    "Owner",
    "Repository",
    "SearchResponse",
    "RepoCategory",
    "DisplayState",
    # Search and display helpers
    "filter_repositories",
    "sort_by_stars",
    "sort_by_forks",
    "format_count",
    # Exceptions
    "GitHubExplorerError",
    "ConfigurationError",
    "BadURLError",
    "DecodingError",
    "APIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
