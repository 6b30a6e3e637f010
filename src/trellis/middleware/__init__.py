"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(ctx: Context, next: Next) -> None

Route handlers share the same shape, so a rule's handler chain and the
stack's middleware list run on the same chain driver.
"""

from trellis.middleware.chain import run_chain
from trellis.middleware.protocol import Handler, Middleware, Next

__all__ = ["Handler", "Middleware", "Next", "run_chain"]
