"""Async Branches resource client."""

from typing import TYPE_CHECKING

from gitlit.parsing import parse_branches, parse_message
from gitlit.types.branches import BranchesResponse

if TYPE_CHECKING:
    from gitlit.async_transport import AsyncHTTPTransport


class AsyncBranchesClient:
    """Async client for branch operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def list(self, id: str) -> BranchesResponse:
        """List the branches of a repository."""
        return await self.transport.request_json(
            "GET",
            "branches",
            operation="branches",
            parser=parse_branches,
            params={"id": id},
        )

    async def delete(self, id: str, branch: str) -> str:
        """Delete a branch and return the server's message."""
        return await self.transport.request_json(
            "DELETE",
            "branch",
            operation="delete_branch",
            parser=parse_message,
            params={"id": id, "branch": branch},
            authenticated=True,
        )
