"""Repositories resource client."""

from typing import TYPE_CHECKING

from gitlit.parsing import parse_ok, parse_repositories, parse_repository
from gitlit.types.repos import CreateRepoRequest, OkResponse, Repository

if TYPE_CHECKING:
    from gitlit.transport import HTTPTransport


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list(
        self,
        owner: str | None = None,
        filter: str | None = None,
        q: str | None = None,
    ) -> list[Repository]:
        """
        List repositories. No token is needed.

        Args:
            owner: Only repositories of this user
            filter: Server-side filter name
            q: Search query

        Returns:
            List of Repository objects

        Raises:
            AuthError: On any non-2xx status
        """
        return self.transport.request_json(
            "GET",
            "repos",
            operation="list_repos",
            parser=parse_repositories,
            params={"owner": owner, "filter": filter, "q": q},
        )

    def create(
        self,
        name: str,
        description: str | None = None,
        is_private: bool | None = None,
    ) -> Repository:
        """
        Create a new repository.

        Args:
            name: Repository name
            description: Optional repository description
            is_private: Optional visibility flag (server default when omitted)

        Returns:
            The created Repository

        Raises:
            MissingTokenError: If not logged in (no request is sent)
            AuthError: Unless the server answers 201
        """
        request = CreateRepoRequest(
            name=name, description=description, is_private=is_private
        )
        return self.transport.request_json(
            "POST",
            "create",
            operation="create_repo",
            parser=parse_repository,
            body=request.to_dict(),
            authenticated=True,
            expected_status=201,
        )

    def delete(self, id: str) -> OkResponse:
        """
        Delete a repository.

        Args:
            id: Repository identifier

        Raises:
            MissingTokenError: If not logged in (no request is sent)
            AuthError: On any non-2xx status
        """
        return self.transport.request_json(
            "DELETE",
            "delete",
            operation="delete_repo",
            parser=parse_ok,
            params={"id": id},
            authenticated=True,
        )
