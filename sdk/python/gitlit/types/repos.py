"""Repository-related data models."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Repository:
    """Repository information."""

    id: str
    user: str
    name: str
    description: str
    is_private: bool
    created_at: str  # opaque server timestamp, not parsed
    updated_at: str
    forked_from: str | None = None


@dataclass(frozen=True)
class CreateRepoRequest:
    """Body of a repository creation request."""

    name: str
    description: str | None = None
    is_private: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Encode for the wire, leaving out unset optionals."""
        body: dict[str, Any] = {"name": self.name}
        if self.description is not None:
            body["description"] = self.description
        if self.is_private is not None:
            body["is_private"] = self.is_private
        return body


@dataclass(frozen=True)
class OkResponse:
    """Response from delete operations."""

    ok: bool
