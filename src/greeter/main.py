"""Application wiring — the route table plus container definitions.

``greeter.main:app`` is the ASGI callable servers import::

    uvicorn greeter.main:app
    greeter run greeter.main:app
"""

from greeter.app import App
from greeter.config import AppConfig
from greeter.routes import ROUTES, routes_from_table
from greeter.services.greeting import GreetingService


def create_app(config: AppConfig | None = None) -> App:
    """Build the greeter App from the static route table."""
    return App(
        config or AppConfig.from_env(),
        routes=routes_from_table(ROUTES),
        definitions={GreetingService: GreetingService},
    )


app = create_app()
