"""Helpers that turn the request editor's rows into fetch_json arguments.

The desktop UI edits query parameters, headers and form bodies as lists of
key/value rows, with blank rows left in place for the user to fill in.
"""

import json
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from zephyr_api._internal.request.dispatcher import reject_json_constant
from zephyr_api.exceptions import InvalidInputError

# PATCH gets a body editor in the UI even though the dispatcher rejects it.
BODY_EDITOR_METHODS = frozenset({"POST", "PUT", "PATCH"})


class KeyValuePair(BaseModel):
    """One editable row of the request editor."""

    key: str = ""
    value: str = ""


def _filled(rows: Iterable[KeyValuePair]) -> list[KeyValuePair]:
    return [row for row in rows if row.key.strip()]


def build_query_params(rows: Iterable[KeyValuePair]) -> list[tuple[str, str]] | None:
    """Return ordered query pairs, or None when every row is blank."""
    pairs = [(row.key, row.value) for row in _filled(rows)]
    return pairs or None


def build_headers(rows: Iterable[KeyValuePair]) -> dict[str, str] | None:
    """Return a header mapping, or None when every row is blank.

    A later row with the same key replaces an earlier one.
    """
    headers = {row.key: row.value for row in _filled(rows)}
    return headers or None


def build_form_body(rows: Iterable[KeyValuePair]) -> dict[str, Any] | None:
    """Build a JSON object body from form rows.

    Values that parse as JSON ("42", "true", "[1, 2]") are sent as parsed;
    anything else is sent as the literal string.
    """
    body: dict[str, Any] = {}
    for row in _filled(rows):
        try:
            body[row.key] = json.loads(row.value, parse_constant=reject_json_constant)
        except ValueError:
            body[row.key] = row.value
    return body or None


def parse_raw_body(text: str) -> Any:
    """Parse the raw JSON body editor's contents.

    Args:
        text: Text typed by the user.

    Returns:
        The parsed value, or None when the editor is blank.

    Raises:
        InvalidInputError: If the text is not valid JSON.
    """
    if not text.strip():
        return None
    try:
        return json.loads(text, parse_constant=reject_json_constant)
    except ValueError as e:
        raise InvalidInputError(f"Invalid JSON in request body: {e}") from e


def method_accepts_body(method: str) -> bool:
    return method.upper() in BODY_EDITOR_METHODS
