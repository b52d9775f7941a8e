"""GitLit SDK - Python client for the GitLit source hosting API."""

from gitlit.async_client import AsyncGitLitClient
from gitlit.client import GitLitClient, normalize_base_url
from gitlit.credentials import CredentialStore, FileCredentialStore, default_config_dir
from gitlit.exceptions import (
    AuthError,
    ConfigurationError,
    CredentialStoreError,
    GitLitError,
    MissingTokenError,
    SerializationError,
    TransportError,
    UnauthorizedError,
)
from gitlit.logging import configure_logging, get_logger
from gitlit.transport import HTTPTransport
from gitlit.types import (
    BlobContent,
    Branch,
    BranchesResponse,
    CommitInfo,
    ContentResponse,
    CreateRepoRequest,
    OkResponse,
    Repository,
    TreeContent,
    TreeEntry,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "GitLitClient",
    "AsyncGitLitClient",
    "normalize_base_url",
    # Credentials
    "CredentialStore",
    "FileCredentialStore",
    "default_config_dir",
    # Exceptions
    "GitLitError",
    "TransportError",
    "CredentialStoreError",
    "SerializationError",
    "UnauthorizedError",
    "AuthError",
    "MissingTokenError",
    "ConfigurationError",
    # Types
    "Repository",
    "CreateRepoRequest",
    "OkResponse",
    "Branch",
    "BranchesResponse",
    "CommitInfo",
    "ContentResponse",
    "TreeContent",
    "BlobContent",
    "TreeEntry",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
