"""Pydantic models for outbound requests and their response envelopes.

These models match the shapes exchanged with the desktop front-end.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# Constants
# =============================================================================

STATUS_CODE_MAX = 65535
BODY_METHODS = frozenset({"POST", "PUT"})


class HttpMethod(str, Enum):
    """HTTP verbs the dispatcher is able to send."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# =============================================================================
# Request / Response
# =============================================================================


class RequestDescription(BaseModel):
    """Caller-supplied description of one outbound call.

    Required fields:
        url: Target URL, must not be blank
        method: HTTP verb, case-insensitive

    Optional fields:
        headers: Header name to value, attached verbatim
        query_params: Ordered (key, value) pairs, duplicates allowed
        body: JSON-compatible value, only sent for POST and PUT
    """

    url: str
    method: str

    headers: dict[str, str] | None = None
    query_params: list[tuple[str, str]] | None = None
    body: Any = None

    @property
    def sends_body(self) -> bool:
        return self.body is not None and self.method.upper() in BODY_METHODS


class ResponseEnvelope(BaseModel):
    """Normalized result of a successful call."""

    status_code: int = Field(ge=0, le=STATUS_CODE_MAX)
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None
    duration_ms: int = Field(ge=0)
