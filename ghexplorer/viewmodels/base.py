"""
Shared view-model plumbing: change notification and event-loop confinement.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from ghexplorer.async_client import AsyncGitHubClient
from ghexplorer.async_clients.repos import AsyncReposClient
from ghexplorer.service import RepositoryService

Observer = Callable[["ViewModel", str], None]


class ViewModel:
    """
    Base class for observable view-models.

    Assigning to an attribute listed in ``published`` notifies every
    subscriber with ``(view_model, attribute_name)``.

    A service built because none was passed in is owned by the view-model
    and closed by ``aclose()`` (or ``async with``). Injected services are
    left to their owner.

    State is confined to one event loop: the first async operation binds the
    view-model to the running loop, and operations started from any other
    loop raise RuntimeError.
    """

    published: tuple[str, ...] = ()

    def __init__(self) -> None:
        object.__setattr__(self, "_observers", [])
        object.__setattr__(self, "_loop", None)
        object.__setattr__(self, "_owned_service", None)

    def __setattr__(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)
        if name.lstrip("_") in self.published:
            for observer in list(self._observers):
                observer(self, name.lstrip("_"))

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a change observer.

        Returns:
            Function that removes the observer again
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _service_or_default(
        self, api_service: RepositoryService | None
    ) -> RepositoryService:
        """Use api_service, or build a default one that aclose() will close."""
        if api_service is None:
            api_service = default_service()
            object.__setattr__(self, "_owned_service", api_service)
        return api_service

    async def aclose(self) -> None:
        """Close the HTTP client of a service this view-model created itself."""
        service = self._owned_service
        if service is not None:
            object.__setattr__(self, "_owned_service", None)
            await service.transport.close()

    async def __aenter__(self) -> "ViewModel":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _bind_loop(self) -> None:
        loop = asyncio.get_running_loop()
        if self._loop is None:
            object.__setattr__(self, "_loop", loop)
        elif self._loop is not loop:
            raise RuntimeError(
                f"{type(self).__name__} is bound to a different event loop"
            )


def default_service() -> AsyncReposClient:
    """Repository service used when a view-model is built without one."""
    return AsyncGitHubClient.from_env().repos


def describe_error(error: Exception) -> str:
    """User-facing message for a failed operation."""
    message = getattr(error, "message", None)
    return message or str(error) or type(error).__name__
