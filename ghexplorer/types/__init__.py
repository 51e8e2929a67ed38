"""GitHub Explorer type definitions.

This module exports all data model types used by the package.
"""

from ghexplorer.types.categories import RepoCategory
from ghexplorer.types.repos import Owner, Repository, SearchResponse
from ghexplorer.types.state import DisplayState, DisplayStateKind

__all__ = [
    # Repository types
    "Owner",
    "Repository",
    "SearchResponse",
    # Listing types
    "RepoCategory",
    "DisplayState",
    "DisplayStateKind",
]
