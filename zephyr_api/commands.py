"""Commands callable from the desktop front-end.

    from zephyr_api.commands import invoke

    greeting = await invoke("greet", {"name": "Ada"})
    response = await invoke("fetch_json", {"url": "https://api.example.com", "method": "GET"})

`invoke` mirrors the front-end contract: a successful command yields a
JSON-compatible value, a failed one raises `CommandError` carrying only the
error text.
"""

import inspect
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ValidationError

from zephyr_api._internal.request.dispatcher import RequestDispatcher, get_request_dispatcher
from zephyr_api._internal.request.models import RequestDescription, ResponseEnvelope
from zephyr_api.exceptions import CommandError, ZephyrError


def greet(name: str) -> str:
    """Return the greeting shown by the front-end's hello form."""
    return f"Hello, {name}! You've been greeted from Python!"


async def fetch_json(
    url: str,
    method: str,
    headers: dict[str, str] | None = None,
    query_params: list[tuple[str, str]] | None = None,
    body: Any = None,
    *,
    dispatcher: RequestDispatcher | None = None,
) -> ResponseEnvelope:
    """Send one HTTP request on behalf of the front-end.

    Args:
        url: Target URL.
        method: GET, POST, PUT or DELETE (any case).
        headers: Optional request headers.
        query_params: Optional ordered (key, value) pairs appended to the URL.
        body: Optional JSON body, only sent for POST and PUT.
        dispatcher: Dispatcher to use. Defaults to one configured from env.

    Returns:
        The normalized response envelope.

    Raises:
        ZephyrError: On invalid input, transport failure, non-2xx status or
            a non-JSON response body.
    """
    request = RequestDescription(
        url=url,
        method=method,
        headers=headers,
        query_params=query_params,
        body=body,
    )
    dispatcher = dispatcher or get_request_dispatcher()
    return await dispatcher.dispatch(request)


COMMANDS: dict[str, Callable[..., Any]] = {
    "greet": greet,
    "fetch_json": fetch_json,
}


async def invoke(
    command: str,
    args: dict[str, Any] | None = None,
    *,
    dispatcher: RequestDispatcher | None = None,
) -> Any:
    """Run a registered command the way the front-end calls it.

    Only a command's positional-or-keyword parameters are accepted from
    `args`; keyword-only parameters such as `dispatcher` are host-side and
    come from `invoke`'s own arguments.

    Args:
        command: Command name ("greet" or "fetch_json").
        args: Keyword arguments sent by the front-end.
        dispatcher: Dispatcher handed to commands that take one.

    Returns:
        The command's result as a JSON-compatible value.

    Raises:
        CommandError: With the failure's text as its only payload.
    """
    handler = COMMANDS.get(command)
    if handler is None:
        raise CommandError(f"Unknown command: {command}")

    signature = inspect.signature(handler)
    kwargs = dict(args or {})
    host_only = sorted(
        name
        for name in kwargs
        if name in signature.parameters
        and signature.parameters[name].kind is inspect.Parameter.KEYWORD_ONLY
    )
    if host_only:
        raise CommandError(
            f"Invalid args for command {command}: unexpected argument {', '.join(host_only)}"
        )
    try:
        signature.bind(**kwargs)
    except TypeError as e:
        raise CommandError(f"Invalid args for command {command}: {e}") from e

    if dispatcher is not None and "dispatcher" in signature.parameters:
        kwargs["dispatcher"] = dispatcher

    try:
        result = handler(**kwargs)
        if inspect.isawaitable(result):
            result = await result
    except ValidationError as e:
        raise CommandError(f"Invalid args for command {command}: {e}") from e
    except ZephyrError as e:
        raise CommandError(str(e)) from e

    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    return result
