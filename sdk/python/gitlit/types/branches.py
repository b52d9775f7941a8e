"""Branch and commit data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Branch:
    """A branch as reported by the server."""

    name: str
    oid: str
    is_head: bool
    upstream: str | None = None


@dataclass(frozen=True)
class BranchesResponse:
    """Branches of one repository."""

    branches: list[Branch] = field(default_factory=list)


@dataclass(frozen=True)
class CommitInfo:
    """Summary of a single commit."""

    hash: str
    name: str
    email: str
    timestamp_secs: int
    subject: str
