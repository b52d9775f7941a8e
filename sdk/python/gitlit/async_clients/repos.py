"""Async Repositories resource client."""

from typing import TYPE_CHECKING

from gitlit.parsing import parse_ok, parse_repositories, parse_repository
from gitlit.types.repos import CreateRepoRequest, OkResponse, Repository

if TYPE_CHECKING:
    from gitlit.async_transport import AsyncHTTPTransport


class AsyncReposClient:
    """Async client for repository-related operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repos client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def create(
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
            is_private: Optional visibility flag

        Returns:
            The created Repository
        """
        request = CreateRepoRequest(
            name=name, description=description, is_private=is_private
        )
        return await self.transport.request_json(
            "POST",
            "create",
            operation="create_repo",
            parser=parse_repository,
            body=request.to_dict(),
            authenticated=True,
            expected_status=201,
        )

    async def delete(self, id: str) -> OkResponse:
        """Delete a repository."""
        return await self.transport.request_json(
            "DELETE",
            "delete",
            operation="delete_repo",
            parser=parse_ok,
            params={"id": id},
            authenticated=True,
        )

    async def list(
        self,
        owner: str | None = None,
        filter: str | None = None,
        q: str | None = None,
    ) -> list[Repository]:
        """List repositories, optionally narrowed by owner, filter or query."""
        return await self.transport.request_json(
            "GET",
            "repos",
            operation="list_repos",
            parser=parse_repositories,
            params={"owner": owner, "filter": filter, "q": q},
        )
