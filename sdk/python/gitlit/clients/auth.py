"""Authentication resource client.

Owns the token lifecycle: ``login`` stores the token, ``logout`` removes it,
and a 401 on logout removes it as well so a stale token does not linger.
"""

from typing import TYPE_CHECKING

from gitlit.exceptions import CredentialStoreError, UnauthorizedError
from gitlit.logging import get_logger
from gitlit.parsing import parse_token
from gitlit.transport import check_status, parse_json

if TYPE_CHECKING:
    from gitlit.transport import HTTPTransport

logger = get_logger("auth")


class AuthClient:
    """Client for account and session operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the auth client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def login(self, login: str, password: str) -> str:
        """
        Log in and cache the returned bearer token.

        Args:
            login: Username or email
            password: Account password

        Returns:
            The new token

        Raises:
            AuthError: On any non-2xx status
            SerializationError: If the response has no token (nothing is stored)
            CredentialStoreError: If the token cannot be written
        """
        response = self.transport.request(
            "POST",
            "login",
            operation="login",
            body={"login": login, "password": password},
        )
        token = parse_json(response, parse_token)
        self.transport.credential_store.save(self.transport.identity, token)
        return token

    def register(self, username: str, email: str, password: str) -> str:
        """
        Register a new account.

        Returns:
            The server's response body as text

        Raises:
            AuthError: Unless the server answers 201
        """
        response = self.transport.request(
            "POST",
            "register",
            operation="register",
            body={"username": username, "email": email, "password": password},
            expected_status=201,
        )
        return response.text

    def logout(self) -> None:
        """
        Invalidate the session and forget the cached token.

        Raises:
            UnauthorizedError: If no token is cached, or the server answers 401
                (the cached token is removed first)
            AuthError: On any other non-2xx status
            CredentialStoreError: If the token cannot be removed after success
        """
        token = self.transport.token()
        response = self.transport.send(
            "POST",
            "logout",
            token=token,
            headers={"Accept": "application/json", "Content-Length": "0"},
        )

        if response.status_code == 401:
            try:
                self.transport.credential_store.delete(self.transport.identity)
            except CredentialStoreError as e:
                logger.debug("could not remove rejected token: %s", e)
            raise UnauthorizedError(status_code=401)

        check_status(response, "logout")
        self.transport.credential_store.delete(self.transport.identity)
