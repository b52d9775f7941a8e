"""
Pytest fixtures for GitLit SDK testing.

Provides common fixtures for testing applications that use the GitLit SDK.
"""

from collections.abc import Generator
from typing import Any

import pytest

from gitlit.testing.mock import InMemoryCredentialStore, MockGitLitClient
from gitlit.types.branches import Branch, BranchesResponse, CommitInfo
from gitlit.types.contents import BlobContent, TreeContent, TreeEntry
from gitlit.types.repos import Repository


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitLitClient, None, None]:
    """
    Provide a MockGitLitClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repos.configure("list", response=[my_repo])
            result = my_function(mock_client)
            assert mock_client.was_called("repos.list")
        ```
    """
    client = MockGitLitClient()
    yield client
    client.reset()


@pytest.fixture
def logged_in_mock_client(mock_client: MockGitLitClient) -> MockGitLitClient:
    """Provide a MockGitLitClient that already holds a token."""
    mock_client.auth.login("test-user", "test-password")
    return mock_client


@pytest.fixture
def memory_credential_store() -> InMemoryCredentialStore:
    """Provide an empty in-memory credential store."""
    return InMemoryCredentialStore()


@pytest.fixture
def mock_repo_id() -> str:
    """Provide a test repository ID."""
    return "test-repo-id"


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_repository() -> Repository:
    """Provide a sample Repository object."""
    return create_mock_repository()


@pytest.fixture
def sample_branches() -> BranchesResponse:
    """Provide a sample BranchesResponse with a head and a feature branch."""
    return BranchesResponse(
        branches=[
            Branch(name="main", oid="a" * 40, is_head=True, upstream="origin/main"),
            Branch(name="feature", oid="b" * 40, is_head=False),
        ]
    )


@pytest.fixture
def sample_commit() -> CommitInfo:
    """Provide a sample CommitInfo object."""
    return CommitInfo(
        hash="c" * 40,
        name="Test User",
        email="test@example.com",
        timestamp_secs=1705314600,
        subject="Initial commit",
    )


@pytest.fixture
def sample_tree() -> TreeContent:
    """Provide a sample directory listing."""
    return TreeContent(
        entries=[
            TreeEntry(mode="040000", kind="tree", oid="d" * 40, path="src"),
            TreeEntry(mode="100644", kind="blob", oid="e" * 40, path="README.md", size=12),
        ]
    )


@pytest.fixture
def sample_blob() -> BlobContent:
    """Provide a sample file blob containing ``hello world\\n``."""
    return BlobContent(content_base64="aGVsbG8gd29ybGQK")


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_repository(
    id: str = "test-repo-id",
    name: str = "test-repo",
    user: str = "test-user",
    **kwargs: Any,
) -> Repository:
    """
    Create a Repository with customizable fields.

    Args:
        id: Repository ID
        name: Repository name
        user: Owner
        **kwargs: Additional fields to override

    Returns:
        Repository object
    """
    defaults: dict[str, Any] = {
        "description": "",
        "is_private": False,
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-01-15T10:30:00Z",
        "forked_from": None,
    }
    defaults.update(kwargs)
    return Repository(id=id, user=user, name=name, **defaults)


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "logged_in_mock_client",
    "memory_credential_store",
    "mock_repo_id",
    "sample_repository",
    "sample_branches",
    "sample_commit",
    "sample_tree",
    "sample_blob",
    # Helper functions
    "create_mock_repository",
]
