"""
GitLit SDK async client.

Provides an async interface for interacting with the GitLit API.
"""

from typing import Any

import httpx

from gitlit.async_clients import (
    AsyncAuthClient,
    AsyncBranchesClient,
    AsyncCommitsClient,
    AsyncContentsClient,
    AsyncReposClient,
)
from gitlit.async_transport import AsyncHTTPTransport
from gitlit.client import DEFAULT_TIMEOUT, settings_from_env
from gitlit.credentials import CredentialStore


class AsyncGitLitClient:
    """
    Async client for interacting with the GitLit API.

    Example:
        ```python
        from gitlit import AsyncGitLitClient

        async with AsyncGitLitClient("https://gitlit.example.com") as client:
            await client.auth.login("alice", "secret")
            repos = await client.repos.list(owner="alice")
        ```
    """

    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        base_url: str,
        credential_store: CredentialStore | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the async GitLit client.

        Args:
            base_url: Base URL of the server (one trailing slash is stripped)
            credential_store: Token store (default: FileCredentialStore())
            timeout: Request timeout in seconds (default: 30.0)
            http_transport: Custom httpx async transport (optional)
        """
        # Create async transport layer
        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            credential_store=credential_store,
            timeout=timeout,
            http_transport=http_transport,
        )
        self.base_url = self._transport.base_url
        self.timeout = timeout

        # Initialize async resource clients
        self.auth = AsyncAuthClient(self._transport)
        self.repos = AsyncReposClient(self._transport)
        self.branches = AsyncBranchesClient(self._transport)
        self.commits = AsyncCommitsClient(self._transport)
        self.contents = AsyncContentsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        credential_store: CredentialStore | None = None,
    ) -> "AsyncGitLitClient":
        """
        Create an async client from environment variables.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        base_url, timeout = settings_from_env()
        return cls(base_url=base_url, credential_store=credential_store, timeout=timeout)

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGitLitClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
