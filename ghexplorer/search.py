"""In-memory search and sort over repository listings."""

from collections.abc import Iterable

from ghexplorer.types.repos import Repository


def searchable_text(repository: Repository) -> str:
    """Lower-cased name and description joined by a space; absent fields are skipped."""
    parts = [repository.name, repository.description]
    return " ".join(part.lower() for part in parts if part is not None)


def filter_repositories(
    repositories: Iterable[Repository], query: str
) -> list[Repository]:
    """
    Case-insensitive substring filter on name and description.

    An empty query matches nothing.
    """
    if not query:
        return []
    needle = query.lower()
    return [repo for repo in repositories if needle in searchable_text(repo)]


def sort_by_stars(
    repositories: Iterable[Repository], ascending: bool = False
) -> list[Repository]:
    # sorted() is stable for both directions when reverse= is used
    return sorted(repositories, key=lambda repo: repo.stars, reverse=not ascending)


def sort_by_forks(
    repositories: Iterable[Repository], ascending: bool = False
) -> list[Repository]:
    return sorted(repositories, key=lambda repo: repo.forks, reverse=not ascending)
