"""GitLit SDK exception classes."""


class GitLitError(Exception):
    """Base exception for all GitLit SDK errors."""

    def __init__(
        self, code: str, message: str, status_code: int | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GitLitError):
    """Raised when SDK configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class TransportError(GitLitError):
    """Raised on network, TLS or timeout failures from the HTTP layer."""

    def __init__(self, message: str) -> None:
        super().__init__("TRANSPORT_ERROR", message)


class CredentialStoreError(GitLitError):
    """Raised when the local token file cannot be read, written or removed."""

    def __init__(self, message: str) -> None:
        super().__init__("IO_ERROR", message)


class SerializationError(GitLitError):
    """Raised when a response body does not match the expected JSON shape."""

    def __init__(self, message: str) -> None:
        super().__init__("SERIALIZATION_ERROR", message)


class UnauthorizedError(GitLitError):
    """Raised when a credential is rejected or absent where required."""

    def __init__(
        self, message: str = "unauthorized", status_code: int | None = None
    ) -> None:
        super().__init__("UNAUTHORIZED", message, status_code)


class AuthError(GitLitError):
    """Raised on any unexpected response status.

    The numeric status is kept on ``status_code``; the response body is not
    inspected.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("AUTH_ERROR", message, status_code)


class MissingTokenError(AuthError, UnauthorizedError):
    """Raised before sending an authenticated request when no token is cached.

    No network call has been made when this is raised.
    """

    def __init__(self) -> None:
        GitLitError.__init__(self, "NO_TOKEN", "notoken")
