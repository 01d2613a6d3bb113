"""``greeter call`` — answer a single request without a server.

Runs one GET request through the app in-process and writes the body to
stdout: one process, one request, one response.
"""

import argparse
import logging
import sys

import anyio

from greeter.cli._resolve import resolve_or_exit
from greeter.testing.client import TestClient


def run_call(args: argparse.Namespace) -> None:
    """Dispatch ``GET args.path`` to ``args.app`` and print the body.

    Exits 1 (with the status on stderr) when the response is not 2xx.
    """
    app = resolve_or_exit(args)
    level = "DEBUG" if app.config.log_level == "trace" else app.config.log_level.upper()
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path = args.path if args.path.startswith("/") else f"/{args.path}"

    async def _call() -> tuple[int, str]:
        async with TestClient(app) as client:
            response = await client.get(path)
        return response.status, response.text

    status, body = anyio.run(_call)
    sys.stdout.write(body)
    if body and not body.endswith("\n"):
        sys.stdout.write("\n")

    if not 200 <= status < 300:
        print(f"HTTP {status}", file=sys.stderr)
        raise SystemExit(1)
