"""Shared fixtures for the test suite."""

from ghexplorer.testing.fixtures import (  # noqa: F401
    mock_service,
    sample_owner,
    sample_repositories,
    sample_repository,
    sample_search_payload,
)
