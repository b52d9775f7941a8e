"""
GitLit SDK main client.

Provides the primary interface for interacting with the GitLit API.
"""

import os
from typing import Any

import httpx

from gitlit.clients import (
    AuthClient,
    BranchesClient,
    CommitsClient,
    ContentsClient,
    ReposClient,
)
from gitlit.credentials import CredentialStore
from gitlit.exceptions import ConfigurationError
from gitlit.transport import HTTPTransport, normalize_url

DEFAULT_TIMEOUT = 30.0


def normalize_base_url(url: str) -> str:
    """
    Normalize a user supplied server address.

    Adds ``https://`` when no http(s) scheme is given and strips one trailing
    slash. The result is also the key under which the token is stored, so
    ``api.example.com`` and ``https://api.example.com/`` share a login.

    Args:
        url: Address as typed by the user (e.g., "api.example.com")

    Returns:
        Base URL such as "https://api.example.com"
    """
    if not url.startswith(("http://", "https://")):
        url = f"https://{url}"
    return normalize_url(url)


def settings_from_env() -> tuple[str, float]:
    """
    Read base URL and timeout from the environment.

    Environment variables:
        GITLIT_URL: Server address (required, scheme optional)
        GITLIT_TIMEOUT: Request timeout in seconds (optional, default: 30)

    Raises:
        ConfigurationError: If GITLIT_URL is unset or GITLIT_TIMEOUT is not a number
    """
    url = os.environ.get("GITLIT_URL")
    if not url:
        raise ConfigurationError("GITLIT_URL environment variable not set")

    raw_timeout = os.environ.get("GITLIT_TIMEOUT")
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid GITLIT_TIMEOUT: {raw_timeout}. Must be a number of seconds"
            ) from e

    return normalize_base_url(url), timeout


class GitLitClient:
    """
    Main client for interacting with the GitLit API.

    Aggregates all resource clients around one transport and credential store.

    Example:
        ```python
        from gitlit import GitLitClient

        client = GitLitClient("https://gitlit.example.com")
        client.auth.login("alice", "secret")

        repo = client.repos.create("demo", is_private=True)
        for branch in client.branches.list(repo.id).branches:
            print(branch.name, branch.is_head)

        client.auth.logout()
        ```
    """

    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        base_url: str,
        credential_store: CredentialStore | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the GitLit client.

        Nothing is sent at construction; the server is not contacted until the
        first operation.

        Args:
            base_url: Base URL of the server (one trailing slash is stripped)
            credential_store: Token store (default: FileCredentialStore())
            timeout: Request timeout in seconds (default: 30.0)
            http_transport: Custom httpx transport (optional)
        """
        self._transport = HTTPTransport(
            base_url=base_url,
            credential_store=credential_store,
            timeout=timeout,
            http_transport=http_transport,
        )
        self.base_url = self._transport.base_url
        self.timeout = timeout

        # Initialize resource clients
        self.auth = AuthClient(self._transport)
        self.repos = ReposClient(self._transport)
        self.branches = BranchesClient(self._transport)
        self.commits = CommitsClient(self._transport)
        self.contents = ContentsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        credential_store: CredentialStore | None = None,
    ) -> "GitLitClient":
        """
        Create a client from environment variables.

        See ``settings_from_env`` for the variables read.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        base_url, timeout = settings_from_env()
        return cls(base_url=base_url, credential_store=credential_store, timeout=timeout)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitLitClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
