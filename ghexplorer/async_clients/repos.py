"""Async Repositories resource client."""

from typing import TYPE_CHECKING

from ghexplorer.clients.repos import SEARCH_PATH, repository_path
from ghexplorer.service import RepositoryService, category_query
from ghexplorer.types.categories import RepoCategory
from ghexplorer.types.repos import Repository, SearchResponse

if TYPE_CHECKING:
    from ghexplorer.async_transport import AsyncHTTPTransport


class AsyncReposClient(RepositoryService):
    """Async client for repository search and lookup."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repos client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def fetch_repositories(self, category: RepoCategory) -> list[Repository]:
        """
        List repositories of a category, most-starred first.

        Args:
            category: Listing category

        Returns:
            Repositories from the first page of search results
        """
        response = await self.transport.get(
            SEARCH_PATH,
            params={"q": category_query(category), "sort": "stars", "order": "desc"},
        )
        return SearchResponse.from_dict(response).items

    async def search_repositories(self, query: str) -> list[Repository]:
        """
        Search repositories.

        Args:
            query: GitHub search query, qualifiers included

        Returns:
            Matching repositories in API relevance order
        """
        response = await self.transport.get(SEARCH_PATH, params={"q": query})
        return SearchResponse.from_dict(response).items

    async def fetch_repository_details(self, id: int) -> Repository:
        """
        Get repository information.

        Args:
            id: Numeric repository id

        Returns:
            Repository with current counts
        """
        response = await self.transport.get(repository_path(id))
        return Repository.from_dict(response)
