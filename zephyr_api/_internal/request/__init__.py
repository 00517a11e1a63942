"""Outbound request dispatch for the fetch_json command.

WARNING: This is an internal module. Use zephyr_api.commands from
front-end glue code.
"""

from zephyr_api._internal.request.dispatcher import RequestDispatcher, get_request_dispatcher
from zephyr_api._internal.request.models import (
    HttpMethod,
    RequestDescription,
    ResponseEnvelope,
)
from zephyr_api._internal.request.urls import build_url

__all__ = [
    "RequestDispatcher",
    "get_request_dispatcher",
    "HttpMethod",
    "RequestDescription",
    "ResponseEnvelope",
    "build_url",
]
