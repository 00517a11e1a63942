"""Query string construction for outbound requests."""

from collections.abc import Sequence
from urllib.parse import quote


def encode_component(value: str) -> str:
    """Percent-encode everything except the unreserved set (A-Z a-z 0-9 - . _ ~)."""
    return quote(value, safe="")


def build_url(url: str, query_params: Sequence[tuple[str, str]] | None = None) -> str:
    """Append encoded query parameters to a URL.

    Pairs keep their order and duplicates are preserved. The query string is
    joined with "&" when the URL already carries a "?", with "?" otherwise.

    Args:
        url: The base URL, used as given.
        query_params: Ordered (key, value) pairs. Ignored when empty.

    Returns:
        The URL with the query string appended.
    """
    if not query_params:
        return url

    query_string = "&".join(
        f"{encode_component(key)}={encode_component(value)}" for key, value in query_params
    )
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query_string}"
