"""Tests for greeter.app — App lifecycle, registration, and ASGI entry."""

from typing import Any

import pytest

from greeter.app import App
from greeter.config import AppConfig
from greeter.errors import ConfigurationError
from greeter.http.output import Output
from greeter.http.response import Response
from greeter.main import create_app
from greeter.routing.route import ControllerRef, Route
from greeter.services.greeting import GreetingService
from greeter.testing import TestClient


class EchoController:
    def __init__(self, output: Output) -> None:
        self.output = output

    def echo(self, word: str = "none") -> None:
        self.output.write(word)


def _echo_route(name: str = "echo", pattern: str = "/echo/{word}") -> Route:
    return Route(name=name, pattern=pattern, controller=ControllerRef(EchoController, "echo"))


class TestAppRegistration:
    def test_routes_from_constructor(self) -> None:
        app = App(routes=[_echo_route()])
        assert [r.name for r in app.router.routes] == ["echo"]

    def test_add_route(self) -> None:
        app = App()
        app.add_route(_echo_route())
        assert app.router.routes[0].pattern == "/echo/{word}"

    def test_error_decorator(self) -> None:
        app = App()

        @app.error(404)
        def not_found():
            return "Not found"

        assert 404 in app._error_handlers

    def test_provide(self) -> None:
        app = App()
        app.provide(GreetingService, lambda: GreetingService("Hey {name}"))
        assert app.container().get(GreetingService).greet("x") == "Hey x"

    def test_containers_are_fresh(self) -> None:
        app = App()
        assert app.container() is not app.container()

    def test_default_config(self) -> None:
        assert App().config == AppConfig()


class TestFreeze:
    def test_cannot_add_route_after_freeze(self) -> None:
        app = App()
        app._ensure_frozen()
        with pytest.raises(RuntimeError, match="Cannot modify"):
            app.add_route(_echo_route())

    def test_cannot_provide_after_freeze(self) -> None:
        app = App()
        app._ensure_frozen()
        with pytest.raises(RuntimeError):
            app.provide(GreetingService, GreetingService)

    def test_duplicate_route_names_fail_at_freeze(self) -> None:
        app = App(routes=[_echo_route(), _echo_route(pattern="/other")])
        with pytest.raises(ConfigurationError, match="Duplicate route name"):
            app._ensure_frozen()

    def test_controller_placeholder_fails_at_freeze(self) -> None:
        app = App(routes=[_echo_route(pattern="/{controller}")])
        with pytest.raises(ConfigurationError, match="reserved"):
            app._ensure_frozen()

    def test_url_for(self) -> None:
        app = create_app(AppConfig())
        assert app.url_for("hello", name="Alice") == "/Alice"
        assert app.url_for("home") == "/"


class TestGreetingApp:
    @pytest.mark.asyncio
    async def test_root(self) -> None:
        async with TestClient(create_app(AppConfig())) as client:
            response = await client.get("/")
        assert response.status == 200
        assert response.text == "Hello, world!"
        assert response.content_type == "text/plain; charset=utf-8"

    @pytest.mark.asyncio
    async def test_name(self) -> None:
        async with TestClient(create_app(AppConfig())) as client:
            response = await client.get("/Alice")
        assert response.status == 200
        assert response.text == "Hello, Alice!"

    @pytest.mark.asyncio
    async def test_two_segments_is_404_with_empty_body(self) -> None:
        async with TestClient(create_app(AppConfig())) as client:
            response = await client.get("/a/b")
        assert response.status == 404
        assert response.text == ""
        assert response.header("content-length") == "0"

    @pytest.mark.asyncio
    async def test_encoded_slash_is_part_of_name(self) -> None:
        async with TestClient(create_app(AppConfig())) as client:
            response = await client.get("/a%2Fb")
        assert response.status == 200
        assert response.text == "Hello, a/b!"

    @pytest.mark.asyncio
    async def test_encoded_space_in_name(self) -> None:
        async with TestClient(create_app(AppConfig())) as client:
            response = await client.get("/Alice%20Smith")
        assert response.text == "Hello, Alice Smith!"

    @pytest.mark.asyncio
    async def test_query_string_is_not_part_of_path(self) -> None:
        async with TestClient(create_app(AppConfig())) as client:
            response = await client.get("/Alice?x=1")
        assert response.text == "Hello, Alice!"

    @pytest.mark.asyncio
    async def test_any_method(self) -> None:
        async with TestClient(create_app(AppConfig())) as client:
            response = await client.post("/Bob")
        assert response.text == "Hello, Bob!"

    @pytest.mark.asyncio
    async def test_repeated_requests_identical(self) -> None:
        async with TestClient(create_app(AppConfig())) as client:
            first = await client.get("/Alice")
            second = await client.get("/Alice")
        assert first.text == second.text == "Hello, Alice!"
        assert first.status == second.status

    @pytest.mark.asyncio
    async def test_custom_greeting_definition(self) -> None:
        app = create_app(AppConfig())
        app.provide(GreetingService, lambda: GreetingService("Howdy, {name}."))
        async with TestClient(app) as client:
            response = await client.get("/Sam")
        assert response.text == "Howdy, Sam."


class TestErrorHandlers:
    @pytest.mark.asyncio
    async def test_custom_404(self) -> None:
        app = create_app(AppConfig())

        @app.error(404)
        def not_found(request):
            return f"nothing at {request.path}"

        async with TestClient(app) as client:
            response = await client.get("/a/b")
        assert response.status == 404
        assert response.text == "nothing at /a/b"

    @pytest.mark.asyncio
    async def test_debug_404_has_detail(self) -> None:
        async with TestClient(create_app(AppConfig(debug=True))) as client:
            response = await client.get("/a/b")
        assert response.status == 404
        assert "No route matches '/a/b'" in response.text

    @pytest.mark.asyncio
    async def test_unresolvable_controller_is_500(self) -> None:
        app = App(routes=[Route("x", "/", ControllerRef("missing", "index"))])
        async with TestClient(app) as client:
            response = await client.get("/")
        assert response.status == 500
        assert response.text == "Internal Server Error"

    @pytest.mark.asyncio
    async def test_custom_500(self) -> None:
        app = App(routes=[Route("x", "/", ControllerRef("missing", "index"))])

        @app.error(500)
        def oops(request, exc):
            return Response(f"failed: {type(exc).__name__}", status=503)

        async with TestClient(app) as client:
            response = await client.get("/")
        assert response.status == 503
        assert response.text == "failed: ResolutionError"


class TestControllerResults:
    @pytest.mark.asyncio
    async def test_returned_string_is_appended(self) -> None:
        class Shout:
            def index(self, name: str = "x") -> str:
                return name.upper()

        app = App(routes=[Route("shout", "/{name}", ControllerRef(Shout, "index"))])
        async with TestClient(app) as client:
            response = await client.get("/hey")
        assert response.text == "HEY"

    @pytest.mark.asyncio
    async def test_returned_response_is_sent(self) -> None:
        class Teapot:
            async def index(self) -> Response:
                return Response("short and stout", status=418)

        app = App(routes=[Route("pot", "/", ControllerRef(Teapot, "index"))])
        async with TestClient(app) as client:
            response = await client.get("/")
        assert response.status == 418
        assert response.text == "short and stout"

    @pytest.mark.asyncio
    async def test_echo_controller(self) -> None:
        app = App(routes=[_echo_route()])
        async with TestClient(app) as client:
            response = await client.get("/echo/hi")
        assert response.text == "hi"


class TestLifespan:
    @pytest.mark.asyncio
    async def test_startup_and_shutdown(self) -> None:
        app = create_app(AppConfig())
        events: list[str] = []

        @app.on_startup
        async def start() -> None:
            events.append("start")

        @app.on_shutdown
        def stop() -> None:
            events.append("stop")

        messages = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return next(messages)

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)

        assert events == ["start", "stop"]
        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]

    @pytest.mark.asyncio
    async def test_startup_failure_reported(self) -> None:
        app = App(routes=[_echo_route(), _echo_route()])
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return {"type": "lifespan.startup"}

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)

        assert sent[0]["type"] == "lifespan.startup.failed"
        assert "Duplicate route name" in sent[0]["message"]
