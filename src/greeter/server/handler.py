"""ASGI handler — the entry point for every HTTP request.

The only component that touches raw ASGI directly. Converts the scope
into a Request, matches it against the router, builds the controller
through a fresh container, calls the controller method with the matched
params, and sends the captured output back through ASGI send().
"""

from collections.abc import Callable
from typing import Any

from greeter._internal.asgi import Receive, Scope, Send
from greeter.container import Container
from greeter.errors import HTTPError
from greeter.http.output import Output
from greeter.http.request import Request
from greeter.http.response import Response
from greeter.routing.route import RouteMatch
from greeter.routing.router import Router
from greeter.server.errors import handle_http_error, handle_internal_error
from greeter.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    container_factory: Callable[[], Container],
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        match = router.match(request.raw_path, request)
        response = await dispatch(match, request, container_factory())
    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, debug)

    await send_response(response, send)


async def dispatch(match: RouteMatch, request: Request, container: Container) -> Response:
    """Resolve the matched controller and call it.

    The container gets the request-scoped ``Request`` and ``Output``
    before the controller is built, so either can be a constructor
    dependency. A controller may also return a ``Response`` (sent as is)
    or a string (appended to the output).
    """
    output = Output()
    container.instance(Request, request)
    container.instance(Output, output)

    ref = match.controller
    controller = container.get(ref.handler)
    result = await container.call(getattr(controller, ref.method), match.params)

    if isinstance(result, Response):
        return result
    if isinstance(result, str):
        output.write(result)
    return Response(body=output.getvalue())
