"""Server runner.

Starts a uvicorn ASGI server with a greeter App. With reload enabled,
uvicorn needs an import string instead of the live App object so it can
re-import the application after a change on disk.
"""

from __future__ import annotations


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    log_level: str = "info",
    app_path: str | None = None,
) -> None:
    """Serve *app* with uvicorn until interrupted.

    Args:
        app: ASGI callable (greeter App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on file changes. Requires *app_path*.
        log_level: uvicorn log level (``"info"``, ``"debug"``, ...).
        app_path: Optional ``"module:attribute"`` import string, passed
            to uvicorn instead of *app* when reload is on.
    """
    import uvicorn

    if reload and app_path is None:
        msg = "reload=True needs app_path (e.g. 'greeter.main:app')."
        raise ValueError(msg)

    target = app_path if reload else app
    uvicorn.run(
        target,  # type: ignore[arg-type]
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        lifespan="on",
    )
