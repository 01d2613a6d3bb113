"""``greeter run`` — serve the app with uvicorn."""

import argparse

from greeter.cli._resolve import resolve_or_exit


def run_server(args: argparse.Namespace) -> None:
    """Start the server for ``args.app``.

    CLI flags override the app's config. ``--reload`` hands uvicorn the
    import string so it can re-import the app after changes.
    """
    app = resolve_or_exit(args)
    app._ensure_frozen()  # route table errors abort before binding

    from greeter.server.dev import run_server as serve

    serve(
        app,
        app.config.host if args.host is None else args.host,
        app.config.port if args.port is None else args.port,
        reload=args.reload or app.config.reload,
        log_level=app.config.log_level,
        app_path=args.app,
    )
