"""
Pytest fixtures for GitHub Explorer testing.

Provides sample data and a mock service for tests of code that uses the
view-models or the clients.
"""

from typing import Generator

import pytest

from ghexplorer.testing.mock import MockRepositoryService
from ghexplorer.types.repos import Owner, Repository

_DEFAULT_AVATAR = "https://example.com/avatar.png"

_DEFAULT_OWNER = Owner(id=1, login="testuser", avatar_url=_DEFAULT_AVATAR)


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_owner(
    id: int = 1,
    login: str | None = "testuser",
    avatar_url: str | None = _DEFAULT_AVATAR,
) -> Owner:
    """Create an Owner with sensible test defaults."""
    return Owner(id=id, login=login, avatar_url=avatar_url)


def create_mock_repository(
    id: int = 1,
    name: str | None = "TestRepo",
    forks_count: int | None = 0,
    stargazers_count: int | None = 0,
    description: str | None = "Test Description",
    owner: Owner | None = _DEFAULT_OWNER,
) -> Repository:
    """
    Create a Repository with sensible test defaults.

    The owner defaults to ``create_mock_owner()``; pass ``owner=None`` for a
    repository without one.

    Example:
        ```python
        repo = create_mock_repository(id=7, stargazers_count=1500)
        assert repo.is_popular
        ```
    """
    return Repository(
        id=id,
        name=name,
        owner=owner,
        forks_count=forks_count,
        stargazers_count=stargazers_count,
        description=description,
    )


# ============================================================================
# Mock Service Fixtures
# ============================================================================


@pytest.fixture
def mock_service() -> Generator[MockRepositoryService, None, None]:
    """Provide a MockRepositoryService, reset after the test."""
    service = MockRepositoryService()
    yield service
    service.reset()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_owner() -> Owner:
    """Provide a sample Owner object."""
    return create_mock_owner()


@pytest.fixture
def sample_repository() -> Repository:
    """Provide a sample Repository object."""
    return create_mock_repository()


@pytest.fixture
def sample_repositories() -> list[Repository]:
    """Two repositories with distinct star and fork counts."""
    return [
        create_mock_repository(
            id=1,
            name="SwiftUI",
            forks_count=2500,
            stargazers_count=15000,
            description="UI Framework",
        ),
        create_mock_repository(
            id=2,
            name="Combine",
            forks_count=1200,
            stargazers_count=800,
            description="Reactive Framework",
        ),
    ]


@pytest.fixture
def sample_search_payload(sample_repositories: list[Repository]) -> dict:
    """Search response body in the GitHub wire format."""
    return {
        "total_count": len(sample_repositories),
        "incomplete_results": False,
        "items": [repo.to_dict() for repo in sample_repositories],
    }
