"""Repository and owner data models.

Field names follow the GitHub REST API wire format: ``forks_count``,
``stargazers_count`` and ``avatar_url`` map one-to-one onto the JSON keys.
"""

from dataclasses import dataclass, field
from typing import Any

from ghexplorer.exceptions import DecodingError

STARS_PER_RATING_GLYPH = 2000
MAX_RATING_GLYPHS = 5
POPULAR_STAR_THRESHOLD = 1000
RATING_GLYPH = "⭐"


def _require_int(data: dict[str, Any], key: str, context: str) -> int:
    if key not in data or data[key] is None:
        raise DecodingError(f"{context}: missing required key '{key}'")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodingError(f"{context}: '{key}' must be an integer")
    return value


def _optional(data: dict[str, Any], key: str, kind: type, context: str) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if (isinstance(value, bool) and kind is not bool) or not isinstance(value, kind):
        raise DecodingError(f"{context}: '{key}' must be {kind.__name__}")
    return value


def _require_object(data: Any, context: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodingError(f"{context}: expected a JSON object")
    return data


@dataclass(frozen=True)
class Owner:
    """Repository owner (a user or an organisation)."""

    id: int
    login: str | None = None
    avatar_url: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Owner":
        """
        Decode an owner from its API representation.

        Raises:
            DecodingError: If ``id`` is missing or a field has the wrong type
        """
        data = _require_object(data, "owner")
        return cls(
            id=_require_int(data, "id", "owner"),
            login=_optional(data, "login", str, "owner"),
            avatar_url=_optional(data, "avatar_url", str, "owner"),
        )


@dataclass(frozen=True)
class Repository:
    """Repository information as returned by search and detail endpoints."""

    id: int
    name: str | None = None
    owner: Owner | None = None
    forks_count: int | None = None
    stargazers_count: int | None = None
    description: str | None = None

    @property
    def stars(self) -> int:
        return self.stargazers_count or 0

    @property
    def forks(self) -> int:
        return self.forks_count or 0

    @property
    def star_rating(self) -> str:
        """One glyph per 2000 stars, capped at five."""
        count = self.stars // STARS_PER_RATING_GLYPH
        return RATING_GLYPH * min(max(count, 0), MAX_RATING_GLYPHS)

    @property
    def is_popular(self) -> bool:
        return self.stars >= POPULAR_STAR_THRESHOLD

    @property
    def formatted_forks(self) -> str:
        return f"{self.forks} forks"

    @classmethod
    def from_dict(cls, data: Any) -> "Repository":
        """
        Decode a repository from its API representation.

        Args:
            data: Parsed JSON object for a single repository

        Returns:
            Repository with absent optional fields set to None

        Raises:
            DecodingError: If ``id`` is missing or a field has the wrong type
        """
        data = _require_object(data, "repository")
        owner = data.get("owner")
        return cls(
            id=_require_int(data, "id", "repository"),
            name=_optional(data, "name", str, "repository"),
            owner=Owner.from_dict(owner) if owner is not None else None,
            forks_count=_optional(data, "forks_count", int, "repository"),
            stargazers_count=_optional(data, "stargazers_count", int, "repository"),
            description=_optional(data, "description", str, "repository"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Encode back to the API key layout."""
        return {
            "id": self.id,
            "name": self.name,
            "owner": (
                {
                    "id": self.owner.id,
                    "login": self.owner.login,
                    "avatar_url": self.owner.avatar_url,
                }
                if self.owner is not None
                else None
            ),
            "forks_count": self.forks_count,
            "stargazers_count": self.stargazers_count,
            "description": self.description,
        }


@dataclass
class SearchResponse:
    """Response envelope of ``GET /search/repositories``."""

    items: list[Repository] = field(default_factory=list)
    total_count: int = 0
    incomplete_results: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "SearchResponse":
        """
        Decode a search response.

        Raises:
            DecodingError: If ``items`` is missing or is not a list
        """
        data = _require_object(data, "search response")
        items = data.get("items")
        if not isinstance(items, list):
            raise DecodingError("search response: 'items' must be a list")
        return cls(
            items=[Repository.from_dict(item) for item in items],
            total_count=_optional(data, "total_count", int, "search response") or 0,
            incomplete_results=bool(
                _optional(data, "incomplete_results", bool, "search response")
            ),
        )
