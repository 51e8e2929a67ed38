"""GitHub Explorer resource clients."""

from ghexplorer.clients.repos import ReposClient

__all__ = [
    "ReposClient",
]
