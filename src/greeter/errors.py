"""Greeter exception hierarchy.

Shared across Router, Container, App, and the request handler so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class GreeterError(Exception):
    """Base for all greeter-specific errors."""


class ConfigurationError(GreeterError):
    """Raised when the route table or app wiring is invalid.

    Typically raised while routes are added, before the first request.
    """


class ResolutionError(GreeterError):
    """Raised when the container cannot build a requested dependency."""


@dataclass(frozen=True, slots=True)
class HTTPError(GreeterError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or controllers. The ASGI handler catches these
    and dispatches to the matching ``@app.error()`` handler.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class RouteNotFound(HTTPError):  # noqa: N818
    """404 — no route pattern matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
