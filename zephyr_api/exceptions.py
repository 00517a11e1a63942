"""Public exceptions for the Zephyr API backend."""


class ZephyrError(Exception):
    """Base exception for all request errors."""

    kind = "Error"


class InvalidInputError(ZephyrError):
    """Request rejected before any network I/O (empty URL, bad method, bad body)."""

    kind = "InvalidInput"


class NetworkError(ZephyrError):
    """Transport-level failure: connection, DNS, TLS or timeout."""

    kind = "NetworkError"


class HttpStatusError(ZephyrError):
    """Server answered with a non-2xx status."""

    kind = "HttpStatusError"

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidResponseError(ZephyrError):
    """2xx response whose body is not valid JSON."""

    kind = "InvalidResponse"


class CommandError(Exception):
    """Failure handed back to the front-end as plain text."""
