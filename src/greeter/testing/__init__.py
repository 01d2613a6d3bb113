"""Test utilities for greeter applications.

Provides an in-process ASGI test client::

    from greeter.testing import TestClient
"""

from greeter.testing.client import TestClient

__all__ = ["TestClient"]
