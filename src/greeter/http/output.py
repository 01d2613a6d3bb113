"""Per-request output buffer.

Controllers write text here instead of building a Response. The request
handler turns whatever was written into the response body once the
controller returns.
"""

from io import StringIO


class Output:
    """Write-only text sink scoped to a single request.

    Usage::

        output = Output()
        output.write("Hello, ")
        output.write("world!")
        output.getvalue()  # "Hello, world!"
    """

    __slots__ = ("_buffer",)

    def __init__(self) -> None:
        self._buffer = StringIO()

    def write(self, text: str) -> int:
        """Append *text*; returns the number of characters written."""
        return self._buffer.write(text)

    def getvalue(self) -> str:
        return self._buffer.getvalue()
