"""GitLit SDK type definitions.

This module exports all data model types used by the SDK.
"""

from gitlit.types.branches import Branch, BranchesResponse, CommitInfo
from gitlit.types.contents import BlobContent, ContentResponse, TreeContent, TreeEntry
from gitlit.types.repos import CreateRepoRequest, OkResponse, Repository

__all__ = [
    # Repository types
    "Repository",
    "CreateRepoRequest",
    "OkResponse",
    # Branch and commit types
    "Branch",
    "BranchesResponse",
    "CommitInfo",
    # Content types
    "ContentResponse",
    "TreeContent",
    "BlobContent",
    "TreeEntry",
]
