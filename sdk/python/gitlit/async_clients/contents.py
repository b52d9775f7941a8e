"""Async Contents resource client."""

from typing import TYPE_CHECKING

from gitlit.parsing import parse_content
from gitlit.types.contents import ContentResponse

if TYPE_CHECKING:
    from gitlit.async_transport import AsyncHTTPTransport


class AsyncContentsClient:
    """Async client for file and tree content."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def get(
        self,
        id: str,
        path: str | None = None,
        branch: str | None = None,
        commit: str | None = None,
    ) -> ContentResponse:
        """Fetch a directory listing or file blob at a path."""
        return await self.transport.request_json(
            "GET",
            "content",
            operation="content",
            parser=parse_content,
            params={"id": id, "path": path, "branch": branch, "commit": commit},
        )

    async def download(
        self,
        id: str,
        path: str | None = None,
        branch: str | None = None,
        commit: str | None = None,
    ) -> bytes:
        """Download raw bytes at a path."""
        response = await self.transport.request(
            "GET",
            "download",
            operation="download",
            params={"id": id, "path": path, "branch": branch, "commit": commit},
        )
        return response.content
