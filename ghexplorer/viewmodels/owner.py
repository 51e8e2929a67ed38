"""Owner detail view-model: an owner's repositories and totals."""

from ghexplorer.logging import get_logger
from ghexplorer.search import sort_by_stars
from ghexplorer.service import RepositoryService, owner_query
from ghexplorer.types.repos import Owner, Repository
from ghexplorer.viewmodels.base import ViewModel, describe_error

logger = get_logger("viewmodels")

UNKNOWN_USER = "Unknown User"


class OwnerDetailViewModel(ViewModel):
    """State behind the owner screen. The owner itself never changes."""

    published = ("repositories", "is_loading", "error_message")

    def __init__(
        self,
        owner: Owner,
        api_service: RepositoryService | None = None,
    ) -> None:
        super().__init__()
        self._owner = owner
        self._api_service = self._service_or_default(api_service)
        self._repositories: list[Repository] = []
        self._is_loading = False
        self._error_message: str | None = None

    @property
    def owner(self) -> Owner:
        return self._owner

    @property
    def repositories(self) -> list[Repository]:
        return self._repositories

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def owner_name(self) -> str:
        return self._owner.login if self._owner.login is not None else UNKNOWN_USER

    @property
    def total_stars(self) -> int:
        return sum(repo.stars for repo in self._repositories)

    @property
    def repository_count(self) -> int:
        return len(self._repositories)

    @property
    def sorted_repositories(self) -> list[Repository]:
        """New list, most-starred first; ``repositories`` is left as is."""
        return sort_by_stars(self._repositories, ascending=False)

    async def fetch_owner_repositories(self) -> None:
        """Load every repository owned by ``owner``."""
        self._bind_loop()
        self._is_loading = True
        self._error_message = None
        try:
            repositories = await self._api_service.search_repositories(
                owner_query(self._owner.login)
            )
        except Exception as e:
            message = describe_error(e)
            logger.warning("Loading repositories of %s failed: %s", self.owner_name, message)
            self._error_message = f"Failed to load repositories: {message}"
        else:
            self._repositories = repositories
        finally:
            self._is_loading = False
