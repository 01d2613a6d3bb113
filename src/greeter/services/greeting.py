"""Greeting service — turns a name into the text sent back to the client."""

GREETING_TEMPLATE = "Hello, {name}!"


class GreetingService:
    """Formats greetings.

    ``greet`` is total: every string, including the empty string, is
    interpolated verbatim. There is nothing to validate and nothing
    that can fail.
    """

    __slots__ = ("_template",)

    def __init__(self, template: str = GREETING_TEMPLATE) -> None:
        self._template = template

    def greet(self, name: str) -> str:
        # str.replace, not str.format: braces inside *name* stay literal
        return self._template.replace("{name}", name)
