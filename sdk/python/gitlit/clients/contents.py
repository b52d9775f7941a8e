"""Contents resource client.

``get`` returns a directory listing or a file blob depending on what the
path points at; ``download`` returns the raw bytes.
"""

from typing import TYPE_CHECKING

from gitlit.parsing import parse_content
from gitlit.types.contents import ContentResponse

if TYPE_CHECKING:
    from gitlit.transport import HTTPTransport


class ContentsClient:
    """Client for file and tree content."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get(
        self,
        id: str,
        path: str | None = None,
        branch: str | None = None,
        commit: str | None = None,
    ) -> ContentResponse:
        """
        Fetch the content at a path.

        Args:
            id: Repository identifier
            path: Path inside the repository (root when omitted)
            branch: Branch to read from
            commit: Commit to read from

        Returns:
            TreeContent for directories, BlobContent for files

        Raises:
            AuthError: On any non-2xx status
            SerializationError: If the payload kind is unknown
        """
        return self.transport.request_json(
            "GET",
            "content",
            operation="content",
            parser=parse_content,
            params={"id": id, "path": path, "branch": branch, "commit": commit},
        )

    def download(
        self,
        id: str,
        path: str | None = None,
        branch: str | None = None,
        commit: str | None = None,
    ) -> bytes:
        """Download raw bytes at a path. Takes the same arguments as ``get``."""
        response = self.transport.request(
            "GET",
            "download",
            operation="download",
            params={"id": id, "path": path, "branch": branch, "commit": commit},
        )
        return response.content
