"""GitHub Explorer testing utilities.

Provides a mock repository service and sample-data helpers for testing
applications built on the view-models.
"""

from ghexplorer.testing.fixtures import create_mock_owner, create_mock_repository
from ghexplorer.testing.mock import MockCall, MockRepositoryService, MockResponse

__all__ = [
    # Mock service
    "MockRepositoryService",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_owner",
    "create_mock_repository",
]
