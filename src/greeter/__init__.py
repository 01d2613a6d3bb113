"""Greeter — a hello-world web application.

Resolves the request path against a static route table, builds the
matched controller through a per-request dependency container, and
echoes a greeting back::

    GET /       -> Hello, world!
    GET /Alice  -> Hello, Alice!

Serve it with any ASGI server::

    greeter run
    uvicorn greeter.main:app
"""

__version__ = "0.1.0"

# name -> module that defines it; imported on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    "App": "greeter.app",
    "AppConfig": "greeter.config",
    "ConfigurationError": "greeter.errors",
    "Container": "greeter.container",
    "ControllerRef": "greeter.routing.route",
    "GreeterError": "greeter.errors",
    "GreetingService": "greeter.services.greeting",
    "HTTPError": "greeter.errors",
    "HomeController": "greeter.controllers.home",
    "Output": "greeter.http.output",
    "Request": "greeter.http.request",
    "ResolutionError": "greeter.errors",
    "Response": "greeter.http.response",
    "Route": "greeter.routing.route",
    "RouteMatch": "greeter.routing.route",
    "RouteNotFound": "greeter.errors",
    "Router": "greeter.routing.router",
    "create_app": "greeter.main",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import greeter`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_path), name)
