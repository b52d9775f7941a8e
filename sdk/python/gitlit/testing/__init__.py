"""GitLit SDK testing utilities.

Provides mock clients, an in-memory credential store and fixtures for testing
applications that use the GitLit SDK.
"""

from gitlit.testing.fixtures import create_mock_repository
from gitlit.testing.mock import (
    InMemoryCredentialStore,
    MockCall,
    MockGitLitClient,
    MockResponse,
)

__all__ = [
    # Mock client
    "MockGitLitClient",
    "MockCall",
    "MockResponse",
    # Credential store
    "InMemoryCredentialStore",
    # Helper functions
    "create_mock_repository",
]
