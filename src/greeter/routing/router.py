"""Ordered router with segment-by-segment path matching.

Routes are added during setup and frozen when the app compiles.
Matching walks the routes in table order; the first route whose pattern
fits the path wins.
"""

from typing import Any
from urllib.parse import quote, unquote

from greeter.errors import ConfigurationError, RouteNotFound
from greeter.http.request import Request
from greeter.routing.route import PathSegment, Route, RouteMatch

# Key under which a match carries the controller reference
CONTROLLER_KEY = "controller"


def split_path(path: str) -> list[str]:
    """Split a URL path into its non-empty segments."""
    return [part for part in path.strip("/").split("/") if part]


def parse_path(pattern: str) -> list[PathSegment]:
    """Parse a route pattern string into segments.

    Examples::

        "/"        -> []
        "/users"   -> [PathSegment("users")]
        "/{name}"  -> [PathSegment("{name}", is_param=True, param_name="name")]

    Raises ``ConfigurationError`` for Flask-style ``<param>`` segments,
    unbalanced braces, empty or repeated placeholder names, and a
    placeholder named after the reserved ``controller`` key.
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in split_path(pattern):
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route pattern {pattern!r} uses <param> syntax. "
                "Use {param} for path placeholders."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            param_name = part[1:-1].strip()
            if not param_name or "{" in param_name or "}" in param_name:
                msg = f"Route pattern {pattern!r} has an invalid placeholder {part!r}."
                raise ConfigurationError(msg)
            if param_name == CONTROLLER_KEY:
                msg = f"Route pattern {pattern!r} uses the reserved placeholder {part!r}."
                raise ConfigurationError(msg)
            if param_name in seen:
                msg = f"Route pattern {pattern!r} binds {param_name!r} more than once."
                raise ConfigurationError(msg)
            seen.add(param_name)
            segments.append(PathSegment(value=part, is_param=True, param_name=param_name))
        elif "{" in part or "}" in part:
            msg = f"Route pattern {pattern!r} has unbalanced braces in {part!r}."
            raise ConfigurationError(msg)
        else:
            segments.append(PathSegment(value=part))
    return segments


def match_segments(segments: list[PathSegment], parts: list[str]) -> dict[str, str] | None:
    """Compare pattern segments with path parts.

    Returns the bound placeholders, or ``None`` when the path does not fit.
    """
    if len(segments) != len(parts):
        return None
    bound: dict[str, str] = {}
    for seg, part in zip(segments, parts, strict=True):
        if seg.is_param:
            bound[seg.param_name or ""] = part
        elif seg.value != part:
            return None
    return bound


class Router:
    """Ordered, first-match router.

    Usage::

        router = Router()
        router.add(Route("home", "/", ControllerRef(HomeController, "homepage")))
        router.add(Route("hello", "/{name}", ControllerRef(HomeController, "homepage")))
        router.compile()
        match = router.match("/Alice")
        match.params  # {"controller": ControllerRef(...), "name": "Alice"}
    """

    __slots__ = ("_compiled", "_entries", "_names")

    def __init__(self) -> None:
        self._entries: list[tuple[Route, list[PathSegment]]] = []
        self._names: set[str] = set()
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile().

        Route names are unique: adding a second route under an existing
        name raises ``ConfigurationError``.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        if route.name in self._names:
            msg = f"Duplicate route name {route.name!r}."
            raise ConfigurationError(msg)

        segments = parse_path(route.pattern)
        self._names.add(route.name)
        self._entries.append((route, segments))

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in table order."""
        return [route for route, _ in self._entries]

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, path: str, request: Request | None = None) -> RouteMatch:
        """Match a request path against the routes, in order.

        *path* is the raw, percent-encoded path. It is split on ``/`` first
        and each segment is decoded afterwards, so ``/a%2Fb`` is a single
        segment binding ``"a/b"``.

        When *request* is given, routes that restrict their methods are
        skipped for other methods. Returns a ``RouteMatch`` for the first
        route that fits. Raises ``RouteNotFound`` if none does.
        """
        parts = [unquote(part) for part in split_path(path)]
        for route, segments in self._entries:
            if request is not None and not route.allows(request.method):
                continue
            bound = match_segments(segments, parts)
            if bound is None:
                continue
            params: dict[str, Any] = {
                **route.defaults,
                CONTROLLER_KEY: route.controller,
                **bound,
            }
            return RouteMatch(route=route, params=params, path_params=bound)

        raise RouteNotFound(f"No route matches {path!r}")

    def url_for(self, name: str, **params: Any) -> str:
        """Build the path for the route called *name*.

        Raises ``KeyError`` for an unknown name and ``ValueError`` when a
        placeholder has no value.
        """
        for route, segments in self._entries:
            if route.name != name:
                continue
            parts: list[str] = []
            for seg in segments:
                if not seg.is_param:
                    parts.append(seg.value)
                    continue
                if seg.param_name not in params:
                    msg = f"Route {name!r} needs a value for {seg.param_name!r}."
                    raise ValueError(msg)
                parts.append(quote(str(params[seg.param_name]), safe=""))
            return "/" + "/".join(parts)
        raise KeyError(name)
