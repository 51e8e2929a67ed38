"""Repository listing categories."""

from enum import Enum


class RepoCategory(str, Enum):
    """Fixed set of categories the home listing can be filtered by."""

    SWIFT = "Swift"
    IOS = "iOS"
    ALGORITHM = "Algorithm"
    IOS_INTERVIEW = "iOS Interview"

    def __str__(self) -> str:
        return self.value
