"""Invoke helper — call sync or async controller methods uniformly.

Controller methods and error handlers can be ``def`` or ``async def``.
The sync/async check lives here so callers never repeat it.

Usage::

    from greeter._internal.invoke import invoke

    result = await invoke(method, **kwargs)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
