"""Redaction of sensitive header values in debug output."""

from collections.abc import Mapping

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
    "api-key",
    "x-auth-token",
    "x-access-token",
    "x-csrf-token",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    """Return a copy of headers with sensitive values replaced by "[REDACTED]".

    Header names are matched case-insensitively. The original mapping is never
    mutated.

    Args:
        headers: The headers to redact. None is treated as empty.

    Returns:
        A new dictionary safe to write to logs.
    """
    if not headers:
        return {}
    return {
        key: REDACTED_VALUE if key.lower() in REDACT_HEADERS else value
        for key, value in headers.items()
    }
