"""GitLit SDK async resource clients."""

from gitlit.async_clients.auth import AsyncAuthClient
from gitlit.async_clients.branches import AsyncBranchesClient
from gitlit.async_clients.commits import AsyncCommitsClient
from gitlit.async_clients.contents import AsyncContentsClient
from gitlit.async_clients.repos import AsyncReposClient

__all__ = [
    "AsyncAuthClient",
    "AsyncReposClient",
    "AsyncBranchesClient",
    "AsyncCommitsClient",
    "AsyncContentsClient",
]
