"""
HTTP Transport for GitLit SDK.

Builds requests against ``{base_url}/api/v1/{endpoint}``, attaches the cached
bearer token for authenticated endpoints and maps unexpected statuses and
network failures into typed exceptions. Every call is a single round trip.
"""

import json
import time
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import httpx

from gitlit.credentials import CredentialStore, FileCredentialStore
from gitlit.exceptions import (
    AuthError,
    MissingTokenError,
    SerializationError,
    TransportError,
)
from gitlit.logging import log_http_request, log_http_response
from gitlit.parsing import decode

T = TypeVar("T")

API_PREFIX = "/api/v1"
USER_AGENT = "gitlit"


def normalize_url(base_url: str) -> str:
    """Strip a single trailing slash."""
    return base_url[:-1] if base_url.endswith("/") else base_url


def build_query(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """
    Turn keyword parameters into query pairs.

    Parameters whose value is None are left out entirely rather than sent
    empty; the server treats the two differently.
    """
    if not params:
        return []
    return [(name, str(value)) for name, value in params.items() if value is not None]


def check_status(
    response: httpx.Response, operation: str, expected_status: int | None = None
) -> None:
    """
    Raise AuthError unless the response has the expected status.

    Args:
        response: HTTP response
        operation: Operation name used in the error message
        expected_status: Exact status required, or None for any 2xx
    """
    status_code = response.status_code
    if expected_status is None:
        ok = response.is_success
    else:
        ok = status_code == expected_status

    if not ok:
        raise AuthError(f"{operation} failed: {status_code}", status_code=status_code)


def parse_json(response: httpx.Response, parser: Callable[[Any], T]) -> T:
    """
    Decode a JSON response body with one of the ``gitlit.parsing`` parsers.

    Raises:
        SerializationError: If the body is not JSON or has the wrong shape
    """
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SerializationError(f"invalid JSON body: {e}") from e
    return decode(parser, data)


class HTTPTransport:
    """
    HTTP transport layer with bearer token handling.

    Handles:
    - Building URLs and query strings for the GitLit API
    - Looking up the cached token for authenticated endpoints
    - Mapping non-success statuses and network errors into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        credential_store: CredentialStore | None = None,
        timeout: float = 30.0,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://gitlit.example.com")
            credential_store: Token store (default: FileCredentialStore())
            timeout: Request timeout in seconds
            http_transport: Custom httpx transport (e.g. httpx.MockTransport in tests)

        Raises:
            TransportError: If the HTTP client cannot be built
        """
        self.base_url = normalize_url(base_url)
        self.credential_store = (
            credential_store if credential_store is not None else FileCredentialStore()
        )
        self.timeout = timeout

        try:
            self._client = httpx.Client(
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

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def url(self, endpoint: str) -> str:
        return f"{self.base_url}{API_PREFIX}/{endpoint}"

    def token(self) -> str:
        """
        Get the cached token for this endpoint.

        Raises:
            MissingTokenError: If no token is cached (no request is made)
            CredentialStoreError: If the store cannot be read
        """
        token = self.credential_store.load(self.identity)
        if not token:
            raise MissingTokenError()
        return token

    def send(
        self,
        method: str,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        token: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """
        Send exactly one request and return the raw response.

        Args:
            method: HTTP method
            endpoint: Path below /api/v1 (e.g., "repos")
            params: Query parameters; None values are dropped
            body: JSON body
            token: Bearer token to attach
            headers: Extra request headers

        Returns:
            The response, whatever its status

        Raises:
            TransportError: On network, TLS or timeout failures
        """
        url = self.url(endpoint)
        request_headers = dict(headers or {})
        if token is not None:
            request_headers["Authorization"] = f"Bearer {token}"

        log_http_request(method, url, request_headers, body)
        started = time.monotonic()
        try:
            response = self._client.request(
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

    def request(
        self,
        method: str,
        endpoint: str,
        operation: str,
        params: Mapping[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        authenticated: bool = False,
        expected_status: int | None = None,
    ) -> httpx.Response:
        """
        Make a request and enforce the status policy.

        Args:
            method: HTTP method
            endpoint: Path below /api/v1
            operation: Operation name for error messages (e.g., "list_repos")
            params: Query parameters; None values are dropped
            body: JSON body
            authenticated: Attach the cached bearer token
            expected_status: Exact success status, or None for any 2xx

        Returns:
            The successful response

        Raises:
            MissingTokenError: If authenticated and no token is cached
            AuthError: On any other status
            TransportError: On network failures
        """
        token = self.token() if authenticated else None
        response = self.send(method, endpoint, params=params, body=body, token=token)
        check_status(response, operation, expected_status)
        return response

    def request_json(
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
        response = self.request(
            method,
            endpoint,
            operation,
            params=params,
            body=body,
            authenticated=authenticated,
            expected_status=expected_status,
        )
        return parse_json(response, parser)
