"""GitHub Explorer async resource clients."""

from ghexplorer.async_clients.repos import AsyncReposClient

__all__ = [
    "AsyncReposClient",
]
