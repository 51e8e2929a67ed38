"""
Pytest plugin for GitHub Explorer testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ghexplorer.testing.conftest"]
"""

from ghexplorer.testing.fixtures import (
    mock_service,
    sample_owner,
    sample_repositories,
    sample_repository,
    sample_search_payload,
)

__all__ = [
    "mock_service",
    "sample_owner",
    "sample_repository",
    "sample_repositories",
    "sample_search_payload",
]
