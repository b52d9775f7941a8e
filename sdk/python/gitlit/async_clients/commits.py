"""Async Commits resource client."""

from typing import TYPE_CHECKING

from gitlit.parsing import parse_commits
from gitlit.types.branches import CommitInfo

if TYPE_CHECKING:
    from gitlit.async_transport import AsyncHTTPTransport


class AsyncCommitsClient:
    """Async client for commit history."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def list(
        self,
        id: str,
        branch: str | None = None,
        limit: int | None = None,
    ) -> list[CommitInfo]:
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        return await self.transport.request_json(
            "GET",
            "commits",
            operation="commits",
            parser=parse_commits,
            params={"id": id, "branch": branch, "limit": limit},
        )
