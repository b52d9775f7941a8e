"""
Async HTTP Transport for GitLit SDK.

Same request, token and status handling as ``HTTPTransport``, using the httpx
async client.
"""

import time
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import httpx

from gitlit.credentials import CredentialStore, FileCredentialStore
from gitlit.exceptions import MissingTokenError, TransportError
from gitlit.logging import log_http_request, log_http_response
from gitlit.transport import (
    API_PREFIX,
    USER_AGENT,
    build_query,
    check_status,
    normalize_url,
    parse_json,
)

T = TypeVar("T")


class AsyncHTTPTransport:
    """
    Async HTTP transport layer with bearer token handling.

    The credential store is file based and read synchronously; token files are
    tiny and only touched once per authenticated call.
    """

    def __init__(
        self,
        base_url: str,
        credential_store: CredentialStore | None = None,
        timeout: float = 30.0,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://gitlit.example.com")
            credential_store: Token store (default: FileCredentialStore())
            timeout: Request timeout in seconds
            http_transport: Custom httpx async transport (e.g. httpx.MockTransport in tests)
        """
        self.base_url = normalize_url(base_url)
        self.credential_store = (
            credential_store if credential_store is not None else FileCredentialStore()
        )
        self.timeout = timeout

        try:
            self._client = httpx.AsyncClient(
                timeout=timeout,
                headers={"User-Agent": USER_AGENT},
                transport=http_transport,
            )
        except OSError as e:
            raise TransportError(f"cannot initialize HTTP client: {e}") from e

    @property
    def identity(self) -> str:
        """Key under which this endpoint's token is stored."""
        return self.base_url

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def url(self, endpoint: str) -> str:
        return f"{self.base_url}{API_PREFIX}/{endpoint}"

    def token(self) -> str:
        token = self.credential_store.load(self.identity)
        if not token:
            raise MissingTokenError()
        return token

    async def send(
        self,
        method: str,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        token: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send exactly one request and return the raw response."""
        url = self.url(endpoint)
        request_headers = dict(headers or {})
        if token is not None:
            request_headers["Authorization"] = f"Bearer {token}"

        log_http_request(method, url, request_headers, body)
        started = time.monotonic()
        try:
            response = await self._client.request(
                method,
                url,
                params=build_query(params),
                json=body,
                headers=request_headers,
            )
        except httpx.RequestError as e:
            raise TransportError(f"{method} {url}: {e}") from e

        log_http_response(
            response.status_code, url, (time.monotonic() - started) * 1000
        )
        return response

    async def request(
        self,
        method: str,
        endpoint: str,
        operation: str,
        params: Mapping[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        authenticated: bool = False,
        expected_status: int | None = None,
    ) -> httpx.Response:
        """Make a request and enforce the status policy."""
        token = self.token() if authenticated else None
        response = await self.send(
            method, endpoint, params=params, body=body, token=token
        )
        check_status(response, operation, expected_status)
        return response

    async def request_json(
        self,
        method: str,
        endpoint: str,
        operation: str,
        parser: Callable[[Any], T],
        params: Mapping[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        authenticated: bool = False,
        expected_status: int | None = None,
    ) -> T:
        """Make a request and decode the JSON body with ``parser``."""
        response = await self.request(
            method,
            endpoint,
            operation,
            params=params,
            body=body,
            authenticated=authenticated,
            expected_status=expected_status,
        )
        return parse_json(response, parser)
