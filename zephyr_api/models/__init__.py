"""Public models exchanged with the front-end.

    from zephyr_api.models import RequestDescription, ResponseEnvelope

    request = RequestDescription(url="https://api.example.com/items", method="get")
"""

from zephyr_api._internal.request.models import (
    HttpMethod,
    RequestDescription,
    ResponseEnvelope,
)
from zephyr_api.builder import KeyValuePair

__all__ = ["HttpMethod", "KeyValuePair", "RequestDescription", "ResponseEnvelope"]
