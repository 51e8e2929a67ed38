"""View-models driving the listing, repository and owner screens."""

from ghexplorer.viewmodels.base import ViewModel
from ghexplorer.viewmodels.detail import RepositoryDetailViewModel
from ghexplorer.viewmodels.home import HomeViewModel
from ghexplorer.viewmodels.owner import OwnerDetailViewModel

__all__ = [
    "ViewModel",
    "HomeViewModel",
    "RepositoryDetailViewModel",
    "OwnerDetailViewModel",
]
