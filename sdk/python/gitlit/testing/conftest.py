"""
Pytest plugin for GitLit SDK testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["gitlit.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from gitlit.testing.fixtures import (
    logged_in_mock_client,
    memory_credential_store,
    mock_client,
    mock_repo_id,
    sample_blob,
    sample_branches,
    sample_commit,
    sample_repository,
    sample_tree,
)

__all__ = [
    "mock_client",
    "logged_in_mock_client",
    "memory_credential_store",
    "mock_repo_id",
    "sample_repository",
    "sample_branches",
    "sample_commit",
    "sample_tree",
    "sample_blob",
]
