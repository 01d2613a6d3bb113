"""Tests for greeter.services.greeting — the greeting template."""

import pytest

from greeter.services.greeting import GREETING_TEMPLATE, GreetingService


class TestGreet:
    def test_default_template(self) -> None:
        assert GreetingService().greet("world") == "Hello, world!"

    def test_name(self) -> None:
        assert GreetingService().greet("Alice") == "Hello, Alice!"

    def test_empty_name(self) -> None:
        assert GreetingService().greet("") == "Hello, !"

    @pytest.mark.parametrize(
        "name",
        [
            "Zoë",
            "<script>alert(1)</script>",
            "{name}",
            "100% {0} %s",
            "a b\tc",
            "名前",
        ],
    )
    def test_name_is_verbatim(self, name: str) -> None:
        greeting = GreetingService().greet(name)
        assert name in greeting
        assert greeting == f"Hello, {name}!"
        assert greeting.endswith("!")

    def test_custom_template(self) -> None:
        service = GreetingService("Hi {name}.")
        assert service.greet("Bob") == "Hi Bob."

    def test_template_constant(self) -> None:
        assert GREETING_TEMPLATE == "Hello, {name}!"

    def test_repeated_calls_are_identical(self) -> None:
        service = GreetingService()
        assert service.greet("Alice") == service.greet("Alice")
