"""Route, ControllerRef, and RouteMatch frozen dataclasses."""

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal:      ``/users``  (is_param=False)
    Placeholder:  ``/{name}`` (is_param=True, param_name="name")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class ControllerRef:
    """Which object and method handle a matched request.

    ``handler`` is the container key (normally the controller class).
    """

    handler: Hashable
    method: str

    @property
    def label(self) -> str:
        name = getattr(self.handler, "__qualname__", None) or repr(self.handler)
        return f"{name}.{self.method}"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created from the route table at startup, compiled into the router
    when the app freezes.
    """

    name: str
    pattern: str
    controller: ControllerRef
    defaults: Mapping[str, Any] = field(default_factory=dict)
    methods: frozenset[str] | None = None

    def allows(self, method: str) -> bool:
        """True if this route accepts *method* (``None`` accepts any)."""
        return self.methods is None or method.upper() in self.methods


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``params`` holds the route defaults, the ``controller`` reference,
    and every bound placeholder, in that order of precedence (later wins).
    """

    route: Route
    params: dict[str, Any]
    path_params: dict[str, str] = field(default_factory=dict)

    @property
    def controller(self) -> ControllerRef:
        return self.params["controller"]
