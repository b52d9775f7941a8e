"""Commits resource client."""

from typing import TYPE_CHECKING

from gitlit.parsing import parse_commits
from gitlit.types.branches import CommitInfo

if TYPE_CHECKING:
    from gitlit.transport import HTTPTransport


class CommitsClient:
    """Client for commit history."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def list(
        self,
        id: str,
        branch: str | None = None,
        limit: int | None = None,
    ) -> list[CommitInfo]:
        """
        List commits of a repository, newest first as ordered by the server.

        Args:
            id: Repository identifier
            branch: Branch to walk (server default when omitted)
            limit: Maximum number of commits (non-negative)

        Returns:
            List of CommitInfo objects

        Raises:
            ValueError: If limit is negative
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        return self.transport.request_json(
            "GET",
            "commits",
            operation="commits",
            parser=parse_commits,
            params={"id": id, "branch": branch, "limit": limit},
        )
