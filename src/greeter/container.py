"""Dependency container — builds controllers and calls their methods.

A container maps keys (usually classes) to zero-argument factories or
ready instances. Classes that were never registered are autowired: their
constructor parameters are resolved from type annotations, recursively.

The app builds a fresh container for every request, so instances never
outlive the request that created them::

    container = Container({GreetingService: GreetingService})
    container.instance(Output, Output())
    controller = container.get(HomeController)
    await container.call(controller.homepage, {"name": "Alice"})

Resolution order for a constructor parameter:

1. Registered key matching the parameter's annotation
2. Unregistered class annotation (autowired)
3. The parameter's declared default
"""

import inspect
from collections.abc import Callable, Hashable, Mapping
from typing import Any

from greeter._internal.invoke import invoke
from greeter.errors import ResolutionError

# Annotations that are never autowired, even though they are classes
_SCALARS: frozenset[type] = frozenset({str, int, float, bool, bytes, dict, list, tuple, set})


class Container:
    """Per-request dependency registry with constructor autowiring."""

    __slots__ = ("_factories", "_instances", "_resolving")

    def __init__(self, definitions: Mapping[Hashable, Callable[..., Any]] | None = None) -> None:
        self._factories: dict[Hashable, Callable[..., Any]] = dict(definitions or {})
        self._instances: dict[Hashable, Any] = {}
        self._resolving: list[Hashable] = []

    def provide(self, key: Hashable, factory: Callable[..., Any]) -> None:
        """Register a factory for *key*.

        Factories are called at most once per container; their parameters
        are resolved the same way constructor parameters are.
        """
        self._factories[key] = factory
        self._instances.pop(key, None)

    def instance(self, key: Hashable, value: Any) -> None:
        """Register an already-built *value* for *key*."""
        self._instances[key] = value

    def get(self, key: Hashable) -> Any:
        """Return the instance for *key*, building it on first use.

        Raises ``ResolutionError`` when *key* is neither registered nor
        an autowirable class, or when the dependency graph has a cycle.
        """
        if key in self._instances:
            return self._instances[key]

        if key in self._resolving:
            chain = " -> ".join(_describe(k) for k in (*self._resolving, key))
            msg = f"Circular dependency: {chain}"
            raise ResolutionError(msg)

        factory = self._factories.get(key)
        if factory is None:
            if not _autowirable(key):
                msg = f"No definition for {_describe(key)} and it is not a class to autowire."
                raise ResolutionError(msg)
            factory = key  # type: ignore[assignment]

        self._resolving.append(key)
        try:
            value = factory(**self._build_kwargs(factory))
        finally:
            self._resolving.pop()

        self._instances[key] = value
        return value

    async def call(self, method: Callable[..., Any], params: Mapping[str, Any]) -> Any:
        """Call *method* with arguments taken from *params* by name.

        Only params whose names match the method's parameters are bound;
        extras are ignored. Parameters missing from *params* are resolved
        from the container by annotation, else left to their default.
        Sync and async methods both work.
        """
        return await invoke(method, **self._build_kwargs(method, params))

    def _build_kwargs(
        self,
        func: Callable[..., Any],
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Inspect *func*'s signature and build its keyword arguments."""
        target = func.__init__ if inspect.isclass(func) else func  # type: ignore[misc]
        try:
            sig = inspect.signature(target, eval_str=True)
        except NameError as exc:
            msg = f"Cannot evaluate annotations of {_describe(func)}: {exc}"
            raise ResolutionError(msg) from exc
        except (TypeError, ValueError):
            # Builtins without an introspectable signature take no injected args
            return {}

        kwargs: dict[str, Any] = {}
        for name, param in sig.parameters.items():
            if name == "self" or param.kind in (
                inspect.Parameter.VAR_POSITIONAL,
                inspect.Parameter.VAR_KEYWORD,
            ):
                continue
            if params is not None and name in params:
                kwargs[name] = params[name]
                continue

            annotation = param.annotation
            if annotation is not inspect.Parameter.empty and (
                annotation in self._instances
                or annotation in self._factories
                or _autowirable(annotation)
            ):
                kwargs[name] = self.get(annotation)
            elif param.default is inspect.Parameter.empty:
                msg = (
                    f"Cannot resolve parameter {name!r} of {_describe(func)}: "
                    "no matching value, definition, or default."
                )
                raise ResolutionError(msg)
        return kwargs


def _autowirable(key: Any) -> bool:
    return inspect.isclass(key) and key not in _SCALARS and not inspect.isabstract(key)


def _describe(key: Any) -> str:
    return getattr(key, "__qualname__", None) or repr(key)
