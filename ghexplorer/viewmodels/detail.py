"""Repository detail view-model."""

from urllib.parse import quote

from ghexplorer.logging import get_logger
from ghexplorer.service import RepositoryService
from ghexplorer.types.repos import Repository
from ghexplorer.viewmodels.base import ViewModel, describe_error

logger = get_logger("viewmodels")

GITHUB_WEB_URL = "https://github.com"
UNKNOWN_OWNER = "Unknown Owner"
UNNAMED_REPOSITORY = "Unnamed Repository"


class RepositoryDetailViewModel(ViewModel):
    """State behind the repository detail screen."""

    published = ("repository", "is_loading", "error_message", "is_description_expanded")

    def __init__(
        self,
        repository: Repository,
        api_service: RepositoryService | None = None,
    ) -> None:
        super().__init__()
        self._api_service = self._service_or_default(api_service)
        self._repository = repository
        self._is_loading = False
        self._error_message: str | None = None
        self.is_description_expanded = False

    @property
    def repository(self) -> Repository:
        return self._repository

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def owner_name(self) -> str:
        owner = self._repository.owner
        if owner is None or owner.login is None:
            return UNKNOWN_OWNER
        return owner.login

    @property
    def repository_name(self) -> str:
        if self._repository.name is None:
            return UNNAMED_REPOSITORY
        return self._repository.name

    @property
    def description(self) -> str | None:
        return self._repository.description

    @property
    def star_count(self) -> str:
        return str(self._repository.stars)

    @property
    def fork_count(self) -> str:
        return str(self._repository.forks)

    @property
    def is_popular(self) -> bool:
        return self._repository.is_popular

    @property
    def owner_avatar_url(self) -> str:
        owner = self._repository.owner
        if owner is None or owner.avatar_url is None:
            return ""
        return owner.avatar_url

    @property
    def repository_url(self) -> str:
        """
        Web page of the repository, or the GitHub home page if a segment is empty.

        A missing owner or name is not an empty segment: the display
        defaults are used, so a repository without an owner links to
        ``https://github.com/Unknown%20Owner/<name>``.
        """
        owner, name = self.owner_name, self.repository_name
        if not owner or not name:
            return GITHUB_WEB_URL
        return f"{GITHUB_WEB_URL}/{quote(owner)}/{quote(name)}"

    def toggle_description(self) -> None:
        self.is_description_expanded = not self.is_description_expanded

    async def refresh_repository_details(self) -> None:
        """Reload the repository by id; keeps the current value on failure."""
        self._bind_loop()
        self._is_loading = True
        self._error_message = None
        try:
            repository = await self._api_service.fetch_repository_details(
                self._repository.id
            )
        except Exception as e:
            message = describe_error(e)
            logger.warning("Refreshing repository %s failed: %s", self._repository.id, message)
            self._error_message = f"Failed to refresh repository details: {message}"
        else:
            self._repository = repository
        finally:
            self._is_loading = False
