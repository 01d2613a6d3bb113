"""The route table.

Ordered: the router tries entries top to bottom and the first pattern
that fits the request path wins. Names are unique.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from greeter.controllers.home import HomeController
from greeter.routing.route import ControllerRef, Route

ROUTES: Mapping[str, Mapping[str, Any]] = MappingProxyType({
    "home": {
        "pattern": "/",
        "controller": (HomeController, "homepage"),
    },
    "hello": {
        "pattern": "/{name}",
        "controller": (HomeController, "homepage"),
    },
})


def routes_from_table(table: Mapping[str, Mapping[str, Any]]) -> tuple[Route, ...]:
    """Convert a route table into ``Route`` objects, preserving order.

    Each entry needs a ``pattern`` and a ``controller`` pair of
    ``(handler, method_name)``. Optional keys: ``defaults`` (static
    params merged into every match) and ``methods``.
    """
    routes: list[Route] = []
    for name, entry in table.items():
        handler, method = entry["controller"]
        methods = entry.get("methods")
        routes.append(
            Route(
                name=name,
                pattern=entry["pattern"],
                controller=ControllerRef(handler, method),
                defaults=MappingProxyType(dict(entry.get("defaults", {}))),
                methods=frozenset(m.upper() for m in methods) if methods else None,
            )
        )
    return tuple(routes)
