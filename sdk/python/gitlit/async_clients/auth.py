"""Async authentication resource client."""

from typing import TYPE_CHECKING

from gitlit.exceptions import CredentialStoreError, UnauthorizedError
from gitlit.logging import get_logger
from gitlit.parsing import parse_token
from gitlit.transport import check_status, parse_json

if TYPE_CHECKING:
    from gitlit.async_transport import AsyncHTTPTransport

logger = get_logger("auth")


class AsyncAuthClient:
    """Async client for account and session operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async auth client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def login(self, login: str, password: str) -> str:
        """Log in and cache the returned bearer token."""
        response = await self.transport.request(
            "POST",
            "login",
            operation="login",
            body={"login": login, "password": password},
        )
        token = parse_json(response, parse_token)
        self.transport.credential_store.save(self.transport.identity, token)
        return token

    async def register(self, username: str, email: str, password: str) -> str:
        """Register a new account and return the response text."""
        response = await self.transport.request(
            "POST",
            "register",
            operation="register",
            body={"username": username, "email": email, "password": password},
            expected_status=201,
        )
        return response.text

    async def logout(self) -> None:
        """Invalidate the session and forget the cached token."""
        token = self.transport.token()
        response = await self.transport.send(
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
