"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from greeter.errors import ConfigurationError

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})

LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Reload (development only)
    reload: bool = False

    # Logging, forwarded to the ASGI server
    log_level: str = "info"

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            raise ConfigurationError(msg)
        if not 0 <= self.port <= 65535:
            msg = f"port must be between 0 and 65535, got {self.port}"
            raise ConfigurationError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        """Build a config from ``GREETER_*`` environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        if "GREETER_HOST" in env:
            overrides["host"] = env["GREETER_HOST"]
        if "GREETER_PORT" in env:
            try:
                overrides["port"] = int(env["GREETER_PORT"])
            except ValueError as exc:
                msg = f"GREETER_PORT must be an integer, got {env['GREETER_PORT']!r}"
                raise ConfigurationError(msg) from exc
        if "GREETER_DEBUG" in env:
            overrides["debug"] = _parse_bool("GREETER_DEBUG", env["GREETER_DEBUG"])
        if "GREETER_LOG_LEVEL" in env:
            overrides["log_level"] = env["GREETER_LOG_LEVEL"].lower()
        return cls(**overrides)  # type: ignore[arg-type]


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    msg = f"{name} must be a boolean (true/false), got {value!r}"
    raise ConfigurationError(msg)
