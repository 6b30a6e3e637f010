"""``trellis request`` — dispatch a single request through a stack.

Runs the full pipeline in-process and prints the resulting status,
captured params, headers, and body. No server, no sockets.
"""

import argparse
import sys
from functools import partial

import anyio

from trellis.cli._resolve import configure_logging, resolve_stack
from trellis.errors import TrellisError
from trellis.http.context import Context


def _parse_headers(raw: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for item in raw:
        name, sep, value = item.partition(":")
        if not sep or not name.strip():
            msg = f"Malformed header {item!r}, expected NAME:VALUE"
            raise ValueError(msg)
        headers[name.strip()] = value.strip()
    return headers


def run_request(args: argparse.Namespace) -> None:
    """Dispatch ``args.method args.url`` and print the outcome."""
    try:
        stack = resolve_stack(args.stack)
        headers = _parse_headers(args.header)
    except (ModuleNotFoundError, AttributeError, TypeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    configure_logging(args.log_level, stack)

    try:
        ctx: Context = anyio.run(partial(stack.dispatch, args.method, args.url, headers=headers))
    except TrellisError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"{ctx.status} {ctx.request.method} {ctx.request.url}")
    if ctx.params:
        print("params: " + ", ".join(f"{k}={v}" for k, v in ctx.params.items()))
    for name, value in ctx.headers.items():
        print(f"{name}: {value}")
    if ctx.body:
        print()
        print(ctx.body)
