"""Immutable HTTP request.

Frozen metadata parsed from the ASGI scope. The greeting routes never
read a body, so the request carries only what routing and controllers
can look at.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from greeter.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    This is the request context handed to ``Router.match`` and, through
    the container, to any controller that asks for it.

    ``path`` is the decoded path. ``raw_path`` is the path as sent, still
    percent-encoded, so an encoded ``/`` stays inside its segment.
    """

    method: str
    path: str
    raw_path: str
    headers: Headers
    query_string: bytes = b""

    @classmethod
    def from_asgi(cls, scope: dict[str, Any] | Any) -> Request:
        """Create a Request from an ASGI HTTP scope.

        ``raw_path`` is optional in ASGI; without it the decoded path is
        re-encoded.
        """
        path = scope["path"]
        raw_path = scope.get("raw_path")
        return cls(
            method=scope["method"].upper(),
            path=path,
            raw_path=raw_path.decode("latin-1") if raw_path else quote(path),
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
        )
