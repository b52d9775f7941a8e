"""File and tree content data models.

``ContentResponse`` is a union of two variants. The server tags each payload
with ``kind`` and each variant only carries the fields valid for its tag.
"""

import base64
from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True)
class TreeEntry:
    """One entry of a directory listing."""

    mode: str
    kind: Any  # raw value, the server may add kinds
    oid: str
    path: str
    size: int | None = None  # absent for directories


@dataclass(frozen=True)
class TreeContent:
    """Directory listing."""

    kind: ClassVar[str] = "tree"

    entries: list[TreeEntry] = field(default_factory=list)


@dataclass(frozen=True)
class BlobContent:
    """File content, base64 encoded."""

    kind: ClassVar[str] = "blob"

    content_base64: str

    def decode(self) -> bytes:
        """Return the raw file bytes."""
        return base64.b64decode(self.content_base64)


ContentResponse = TreeContent | BlobContent
