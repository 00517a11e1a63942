"""Request dispatcher: one validated outbound HTTP call per invocation."""

import asyncio
import json
import os
import time
from typing import Any

import httpx

from zephyr_api._internal.http import DEFAULT_TIMEOUT, create_async_http_client
from zephyr_api._internal.request.models import (
    HttpMethod,
    RequestDescription,
    ResponseEnvelope,
)
from zephyr_api._internal.request.redaction import redact_headers
from zephyr_api._internal.request.urls import build_url
from zephyr_api.exceptions import (
    HttpStatusError,
    InvalidInputError,
    InvalidResponseError,
    NetworkError,
)

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)
JSON_CONTENT_TYPE = "application/json"


class RequestDispatcher:
    """Validates a request description, sends it and normalizes the response.

    Each call to `dispatch` builds its own client, so concurrent dispatches
    share no state. Failures raise a `ZephyrError` subclass whose message is
    the text shown to the front-end.

    Use `RequestDispatcher.from_env()` to create a dispatcher from environment
    variables.
    """

    def __init__(
        self,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: httpx.AsyncBaseTransport | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            timeout_ms: Total request timeout in milliseconds.
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests).
            debug: Enable debug logging to stderr.
        """
        self._timeout_ms = timeout_ms
        self._transport = transport
        self._debug = debug

    @classmethod
    def from_env(cls) -> "RequestDispatcher":
        """Create a dispatcher from environment variables.

        Optional environment variables:
            ZEPHYR_DEBUG: Set to "1" to enable debug logging.
            ZEPHYR_TIMEOUT_MS: Total request timeout in milliseconds.

        Returns:
            A configured RequestDispatcher.
        """
        debug = os.environ.get("ZEPHYR_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("ZEPHYR_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        return cls(timeout_ms=timeout_ms, debug=debug)

    @property
    def timeout(self) -> float:
        """Total request timeout in seconds."""
        return self._timeout_ms / 1000

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[zephyr-api] {message}", file=sys.stderr)

    async def dispatch(self, request: RequestDescription) -> ResponseEnvelope:
        """Send one HTTP request and return its normalized envelope.

        Args:
            request: The request to send.

        Returns:
            The response envelope for a 2xx response with a JSON body.

        Raises:
            InvalidInputError: Blank URL, unsupported method or unserializable body.
            NetworkError: Transport failure, including timeout.
            HttpStatusError: Non-2xx status. The response body is discarded.
            InvalidResponseError: 2xx status whose body is not JSON.
        """
        method = validate_request(request)

        headers = dict(request.headers or {})
        content: bytes | None = None
        if request.sends_body:
            content = serialize_body(request.body)
            if not any(key.lower() == "content-type" for key in headers):
                headers["Content-Type"] = JSON_CONTENT_TYPE

        full_url = build_url(request.url, request.query_params)
        self._log_debug(f"{method.value} {full_url} headers={redact_headers(headers)}")

        start = time.perf_counter()
        async with create_async_http_client(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                http_request = client.build_request(
                    method.value, full_url, headers=headers, content=content
                )
            except (httpx.InvalidURL, ValueError) as e:
                self._log_debug(f"Request build failed: {e}")
                raise NetworkError(f"Network error: builder error: {e}") from e
            response = await self._send(client, http_request)

        status_code = response.status_code
        response_headers = collect_headers(response.headers)

        if not response.is_success:
            self._log_debug(f"Request failed with status {status_code}")
            raise HttpStatusError(f"HTTP error: {status_code}", status_code=status_code)

        try:
            body = response.json(parse_constant=reject_json_constant)
        except ValueError as e:
            self._log_debug(f"Response body is not JSON: {e}")
            raise InvalidResponseError(f"Invalid JSON response: {e}") from e

        duration_ms = int((time.perf_counter() - start) * 1000)
        self._log_debug(f"Request succeeded with status {status_code} in {duration_ms}ms")

        return ResponseEnvelope(
            status_code=status_code,
            headers=response_headers,
            body=body,
            duration_ms=duration_ms,
        )

    async def _send(self, client: httpx.AsyncClient, request: httpx.Request) -> httpx.Response:
        """Send the request, bounded by the total timeout."""
        try:
            return await asyncio.wait_for(client.send(request), timeout=self.timeout)
        except TimeoutError:
            self._log_debug("Request timed out")
            raise NetworkError(
                f"Network error: request timed out after {self.timeout:g}s"
            ) from None
        except httpx.HTTPError as e:
            self._log_debug(f"Request error: {e!r}")
            raise NetworkError(f"Network error: {describe_error(e)}") from e


def validate_request(request: RequestDescription) -> HttpMethod:
    """Check a request before any I/O and return its resolved method."""
    if not request.url.strip():
        raise InvalidInputError("URL cannot be empty")

    method = request.method.upper()
    try:
        return HttpMethod(method)
    except ValueError:
        raise InvalidInputError(f"Unsupported HTTP method: {method}") from None


def serialize_body(body: Any) -> bytes:
    """Serialize a request body as compact JSON."""
    try:
        return json.dumps(
            body, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        ).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Request body is not valid JSON: {e}") from e


def reject_json_constant(name: str) -> Any:
    """Reject NaN, Infinity and -Infinity, which json.loads accepts but JSON does not."""
    raise ValueError(f"{name} is not valid JSON")


def collect_headers(headers: httpx.Headers) -> dict[str, str]:
    """Flatten response headers to a name -> value mapping.

    Names are lower-cased. Repeated headers keep the last value, and values
    that are not visible ASCII text are dropped.
    """
    collected: dict[str, str] = {}
    for raw_key, raw_value in headers.raw:
        value = raw_value.decode("latin-1")
        if not is_visible_text(value):
            continue
        collected[raw_key.decode("latin-1").lower()] = value
    return collected


def is_visible_text(value: str) -> bool:
    return all(char == "\t" or " " <= char <= "~" for char in value)


def describe_error(error: Exception) -> str:
    # Some httpx errors carry an empty message
    return str(error) or type(error).__name__


def get_request_dispatcher() -> RequestDispatcher:
    """Get a request dispatcher configured from environment variables.

    Returns:
        A configured RequestDispatcher instance.
    """
    return RequestDispatcher.from_env()
