"""
Home listing view-model: category listing, free-text search and sorting.
"""

from ghexplorer.logging import get_logger
from ghexplorer.search import sort_by_forks, sort_by_stars
from ghexplorer.service import RepositoryService, search_query
from ghexplorer.types.categories import RepoCategory
from ghexplorer.types.repos import Repository
from ghexplorer.types.state import DisplayState
from ghexplorer.viewmodels.base import ViewModel, describe_error

logger = get_logger("viewmodels")


class HomeViewModel(ViewModel):
    """
    State behind the repository listing screen.

    ``repositories`` holds the listing of ``selected_category``;
    ``search_results`` is only filled by an explicit search. Sorting applies
    to both lists.

    Operations never raise on service failure; errors are reported through
    ``display_state`` and ``error_message``. Concurrent ``fetch_repositories``
    and ``search_repositories`` calls are not serialized, and whichever
    finishes last wins.
    """

    published = (
        "repositories",
        "search_results",
        "display_state",
        "error_message",
        "search_text",
        "selected_category",
    )

    def __init__(self, api_service: RepositoryService | None = None) -> None:
        super().__init__()
        self.api_service = self._service_or_default(api_service)
        self.repositories: list[Repository] = []
        self.search_results: list[Repository] = []
        self.display_state = DisplayState.idle()
        self.error_message: str | None = None
        self.search_text = ""
        self.selected_category = RepoCategory.SWIFT

    async def fetch_repositories(self) -> None:
        """Load the listing for the selected category."""
        self._bind_loop()
        self.display_state = DisplayState.loading()
        try:
            repositories = await self.api_service.fetch_repositories(
                self.selected_category
            )
        except Exception as e:
            message = describe_error(e)
            logger.warning("Fetching %s repositories failed: %s", self.selected_category, message)
            self.display_state = DisplayState.error(message)
            self.error_message = message
            return
        self.repositories = repositories
        self.display_state = DisplayState.success()

    async def search_repositories(self) -> None:
        """
        Search within the selected category using ``search_text``.

        A blank query clears ``search_results`` without a request.
        """
        self._bind_loop()
        query = self.search_text.strip()
        if not query:
            self.search_results = []
            return
        try:
            results = await self.api_service.search_repositories(
                search_query(query, self.selected_category)
            )
        except Exception as e:
            message = describe_error(e)
            logger.warning("Search for %r failed: %s", query, message)
            self.error_message = f"Search failed: {message}"
            return
        self.search_results = results

    def sort_repositories_by_stars(self, ascending: bool) -> None:
        self.repositories = sort_by_stars(self.repositories, ascending)
        self.search_results = sort_by_stars(self.search_results, ascending)

    def sort_repositories_by_forks(self, ascending: bool) -> None:
        self.repositories = sort_by_forks(self.repositories, ascending)
        self.search_results = sort_by_forks(self.search_results, ascending)
