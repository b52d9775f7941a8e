"""GitLit SDK resource clients."""

from gitlit.clients.auth import AuthClient
from gitlit.clients.branches import BranchesClient
from gitlit.clients.commits import CommitsClient
from gitlit.clients.contents import ContentsClient
from gitlit.clients.repos import ReposClient

__all__ = [
    "AuthClient",
    "ReposClient",
    "BranchesClient",
    "CommitsClient",
    "ContentsClient",
]
