"""Repositories resource client."""

from typing import TYPE_CHECKING

from ghexplorer.exceptions import BadURLError
from ghexplorer.service import category_query
from ghexplorer.types.categories import RepoCategory
from ghexplorer.types.repos import Repository, SearchResponse

if TYPE_CHECKING:
    from ghexplorer.transport import HTTPTransport

SEARCH_PATH = "/search/repositories"


def repository_path(id: int) -> str:
    """
    Build the detail path for a repository id.

    Raises:
        BadURLError: If id is not an integer
    """
    if isinstance(id, bool) or not isinstance(id, int):
        raise BadURLError(f"Invalid repository id: {id!r}")
    return f"/repositories/{id}"


class ReposClient:
    """Client for repository search and lookup."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def fetch_repositories(self, category: RepoCategory) -> list[Repository]:
        """
        List repositories of a category, most-starred first.

        Args:
            category: Listing category

        Returns:
            Repositories from the first page of search results
        """
        response = self.transport.get(
            SEARCH_PATH,
            params={"q": category_query(category), "sort": "stars", "order": "desc"},
        )
        return SearchResponse.from_dict(response).items

    def search_repositories(self, query: str) -> list[Repository]:
        """
        Search repositories.

        Args:
            query: GitHub search query, qualifiers included

        Returns:
            Matching repositories in API relevance order
        """
        response = self.transport.get(SEARCH_PATH, params={"q": query})
        return SearchResponse.from_dict(response).items

    def fetch_repository_details(self, id: int) -> Repository:
        """
        Get repository information.

        Args:
            id: Numeric repository id

        Returns:
            Repository with current counts
        """
        response = self.transport.get(repository_path(id))
        return Repository.from_dict(response)
