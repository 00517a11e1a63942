"""Zephyr API backend.

Commands exposed to the desktop front-end.

Public API:
    greet - Fixed-format greeting
    fetch_json - HTTP request proxy returning a ResponseEnvelope
    invoke - Front-end style command call (errors become CommandError text)

Internal (not for direct use):
    _internal.request - Request dispatcher
"""

from zephyr_api._version import __version__
from zephyr_api.commands import fetch_json, greet, invoke

__all__ = ["__version__", "fetch_json", "greet", "invoke"]
