"""
Repository service contract consumed by the view-models.

Also holds the search-query builders shared by the HTTP clients and the
view-models so that request shapes stay in one place.
"""

from abc import ABC, abstractmethod

from ghexplorer.types.categories import RepoCategory
from ghexplorer.types.repos import Repository

LANGUAGE_QUALIFIER = "language:swift"


def category_query(category: RepoCategory) -> str:
    """Query used to list a category: ``"{category} language:swift"``."""
    return f"{category.value} {LANGUAGE_QUALIFIER}"


def search_query(text: str, category: RepoCategory) -> str:
    """Query used for free-text search within a category."""
    return f"{text} {LANGUAGE_QUALIFIER} {category.value}"


def owner_query(login: str | None) -> str:
    """Query listing every repository of a user."""
    return f"user:{login or ''}"


class RepositoryService(ABC):
    """
    Async source of repository data.

    Implementations raise a GitHubExplorerError subclass on failure.
    """

    @abstractmethod
    async def fetch_repositories(self, category: RepoCategory) -> list[Repository]:
        """List the most-starred repositories of a category."""

    @abstractmethod
    async def search_repositories(self, query: str) -> list[Repository]:
        """Run a raw repository search query."""

    @abstractmethod
    async def fetch_repository_details(self, id: int) -> Repository:
        """Fetch one repository by its numeric id."""
