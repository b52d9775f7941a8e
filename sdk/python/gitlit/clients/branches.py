"""Branches resource client."""

from typing import TYPE_CHECKING

from gitlit.parsing import parse_branches, parse_message
from gitlit.types.branches import BranchesResponse

if TYPE_CHECKING:
    from gitlit.transport import HTTPTransport


class BranchesClient:
    """Client for branch operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def list(self, id: str) -> BranchesResponse:
        """
        List the branches of a repository.

        The server flags its current branch with ``is_head``; the client only
        reflects that flag.
        """
        return self.transport.request_json(
            "GET",
            "branches",
            operation="branches",
            parser=parse_branches,
            params={"id": id},
        )

    def delete(self, id: str, branch: str) -> str:
        """
        Delete a branch.

        Returns:
            The server's confirmation message

        Raises:
            MissingTokenError: If not logged in (no request is sent)
            AuthError: On any non-2xx status
        """
        return self.transport.request_json(
            "DELETE",
            "branch",
            operation="delete_branch",
            parser=parse_message,
            params={"id": id, "branch": branch},
            authenticated=True,
        )
