"""Tests for greeter.http.output — per-request output buffer."""

from greeter.http.output import Output


class TestOutput:
    def test_empty(self) -> None:
        output = Output()
        assert output.getvalue() == ""
        assert not output

    def test_write_appends(self) -> None:
        output = Output()
        output.write("Hello, ")
        output.write("world!")
        assert output.getvalue() == "Hello, world!"
        assert output

    def test_write_returns_length(self) -> None:
        assert Output().write("abc") == 3

    def test_instances_are_independent(self) -> None:
        first, second = Output(), Output()
        first.write("x")
        assert second.getvalue() == ""
