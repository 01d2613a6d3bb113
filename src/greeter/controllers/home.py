"""Home controller — the single entry page of the app."""

from greeter.http.output import Output
from greeter.services.greeting import GreetingService


class HomeController:
    """Greets whoever is named in the URL.

    Both ``/`` and ``/{name}`` dispatch to ``homepage``; the root route
    binds no ``name``, so the default applies.
    """

    __slots__ = ("_greetings", "_output")

    def __init__(self, greetings: GreetingService, output: Output) -> None:
        self._greetings = greetings
        self._output = output

    def homepage(self, name: str = "world") -> None:
        self._output.write(self._greetings.greet(name))
