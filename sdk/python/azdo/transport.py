"""
HTTP Transport for the Azure DevOps REST API.

Handles HTTP communication, personal-access-token authentication and error
handling. Requests are never retried: comment posts and merges are not
idempotent, so retry policy belongs to the caller.
"""

import time
from typing import Any

import httpx

from azdo.exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from azdo.logging import log_http_request, log_http_response

DEFAULT_HOSTNAME = "dev.azure.com"
DEFAULT_API_VERSION = "6.0"


def base_url_for_hostname(hostname: str) -> str:
    """Return the REST base URL for an Azure DevOps host name."""
    hostname = hostname.strip().rstrip("/") or DEFAULT_HOSTNAME
    return f"https://{hostname}/"


class HTTPTransport:
    """
    HTTP transport layer with basic-auth PAT authentication.

    Handles:
    - Basic authentication with an empty user name and the PAT as password
    - The ``api-version`` query parameter required by every endpoint
    - Error response parsing into typed exceptions annotated with the
      operation name and the HTTP status observed
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://dev.azure.com/")
            token: Personal access token, surrounding whitespace is ignored
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            auth=httpx.BasicAuth("", token.strip()),
            headers={"Content-Type": "application/json", "Accept": "application/json"},
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        operation: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | list[Any] | None = None,
        api_version: str = DEFAULT_API_VERSION,
    ) -> dict[str, Any]:
        """
        Make a single request and return the parsed JSON body.

        Args:
            method: HTTP method (GET, POST, PATCH, ...)
            path: API path relative to the base URL
            operation: Human readable operation name used in error messages
            params: Query parameters
            body: JSON request body
            api_version: Value of the api-version query parameter

        Returns:
            Parsed JSON response (an empty dict for empty bodies)

        Raises:
            APIError: On connection failures and non-2xx responses
        """
        query: dict[str, Any] = {"api-version": api_version}
        if params:
            query.update(params)

        log_http_request(method, path, params=query, body=body if isinstance(body, dict) else None)
        started = time.monotonic()
        try:
            response = self._client.request(method, path, params=query, json=body)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e), operation=operation) from e

        # 203 carries the sign-in page served for a rejected token.
        if not response.is_success or response.status_code == 203:
            log_http_response(response.status_code, path, elapsed_ms=(time.monotonic() - started) * 1000)
            raise self._parse_error_response(response, operation)

        data = self._parse_body(response, operation)
        log_http_response(
            response.status_code,
            path,
            body=data,
            elapsed_ms=(time.monotonic() - started) * 1000,
        )
        return data

    def _parse_body(self, response: httpx.Response, operation: str) -> dict[str, Any]:
        """
        Decode a successful response body.

        Raises:
            ValidationError: If the body is not JSON
        """
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise ValidationError(
                "INVALID_RESPONSE",
                f"response body is not JSON: {e}",
                status_code=response.status_code,
                operation=operation,
                request_id=response.headers.get("ActivityId"),
            ) from e
        if isinstance(data, list):
            return {"value": data, "count": len(data)}
        return data

    def _parse_error_response(self, response: httpx.Response, operation: str) -> APIError:
        """
        Parse an error response into a typed exception.

        Azure DevOps error bodies look like
        ``{"message": "...", "typeKey": "GitPullRequestNotFoundException"}``.
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        code = data.get("typeKey") or "UNKNOWN_ERROR"
        message = data.get("message") or response.reason_phrase or f"HTTP {response.status_code}"
        request_id = response.headers.get("ActivityId")

        status_code = response.status_code
        kwargs: dict[str, Any] = {
            "status_code": status_code,
            "operation": operation,
            "request_id": request_id,
        }

        if status_code in (203, 401):
            return AuthenticationError(code, message, **kwargs)
        elif status_code == 403:
            return AuthorizationError(code, message, **kwargs)
        elif status_code == 404:
            return NotFoundError(code, message, **kwargs)
        elif status_code == 409:
            return ConflictError(code, message, **kwargs)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(code, message, retry_after, **kwargs)
        elif status_code >= 500:
            return ServerError(code, message, **kwargs)
        else:
            return ValidationError(code, message, **kwargs)
