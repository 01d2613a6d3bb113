"""Greeter application class.

Mutable during setup (routes, container definitions, error handlers,
lifecycle hooks). Frozen at runtime when app.run() or __call__() is
first invoked.
"""

import inspect
import logging
import threading
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from greeter._internal.asgi import Receive, Scope, Send
from greeter.config import AppConfig
from greeter.container import Container
from greeter.routing.route import Route
from greeter.routing.router import Router
from greeter.server.handler import handle_request

logger = logging.getLogger("greeter.app")

ErrorHandler = Callable[..., Any]


class App:
    """The greeter application: an ASGI callable.

    Routes come from a route table loaded once at startup. Container
    definitions map keys to factories; a new container is built from
    them for every request.

    Thread safety:
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the router, even when several workers receive
        their first request at the same time.
    """

    __slots__ = (
        "_definitions",
        "_error_handlers",
        "_freeze_lock",
        "_frozen",
        "_pending_routes",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        routes: Iterable[Route] = (),
        definitions: Mapping[Hashable, Callable[..., Any]] | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self._pending_routes: list[Route] = list(routes)
        self._definitions: dict[Hashable, Callable[..., Any]] = dict(definitions or {})
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._router: Router | None = None

    # -- Setup --

    def add_route(self, route: Route) -> None:
        """Append a route after those from the route table."""
        self._check_not_frozen()
        self._pending_routes.append(route)

    def provide(self, key: Hashable, factory: Callable[..., Any]) -> None:
        """Register a container factory for *key*.

        Every request's container calls *factory* (at most once) when a
        controller or another factory needs *key*::

            app.provide(GreetingService, lambda: GreetingService("Hi, {name}."))
        """
        self._check_not_frozen()
        self._definitions[key] = factory

    def error(
        self,
        code_or_exception: int | type[Exception],
    ) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register an error handler via decorator."""

        def decorator(func: ErrorHandler) -> ErrorHandler:
            self._check_not_frozen()
            self._error_handlers[code_or_exception] = func
            return func

        return decorator

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook via decorator."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Introspection --

    @property
    def router(self) -> Router:
        """The compiled router (freezes the app on first access)."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    def url_for(self, name: str, **params: Any) -> str:
        """Build the path of the route called *name*."""
        return self.router.url_for(name, **params)

    def container(self) -> Container:
        """Build a fresh container from the registered definitions."""
        return Container(self._definitions)

    # -- Server --

    def run(
        self,
        host: str | None = None,
        port: int | None = None,
        *,
        app_path: str | None = None,
    ) -> None:
        """Freeze the app and serve it with uvicorn.

        Args:
            host: Override bind host.
            port: Override bind port.
            app_path: Import string for reload mode (``"greeter.main:app"``).
        """
        self._ensure_frozen()

        from greeter.server.dev import run_server

        run_server(
            self,
            self.config.host if host is None else host,
            self.config.port if port is None else port,
            reload=self.config.reload,
            log_level=self.config.log_level,
            app_path=app_path,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan scopes directly and delegates HTTP scopes to the
        request pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        self._ensure_frozen()
        assert self._router is not None

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            container_factory=self.container,
            error_handlers=self._error_handlers,
            debug=self.config.debug,
        )

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (so route table errors surface before
        the first request), then runs startup/shutdown hooks.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                    await self.startup()
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        """Run the startup hooks in registration order."""
        for hook in self._startup_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result
        logger.info("Serving %d route(s)", len(self.router.routes))

    async def shutdown(self) -> None:
        """Run the shutdown hooks in registration order."""
        for hook in self._shutdown_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the route table into the router.

        MUST only be called while holding _freeze_lock.
        """
        router = Router()
        for route in self._pending_routes:
            router.add(route)
        router.compile()
        self._router = router
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, definitions, and handlers before calling app.run()."
            )
            raise RuntimeError(msg)
