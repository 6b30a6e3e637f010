"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(ctx: Context, next: Next) -> None: ...

No base class required. The stack checks the shape, not the lineage.

``next`` takes no arguments: the context is shared, so a middleware
mutates ``ctx`` before and after awaiting it.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from trellis.http.context import Context

# The continuation handed to every middleware and handler
Next: TypeAlias = Callable[[], Awaitable[None]]

# A rule handler has the same shape as a middleware
Handler: TypeAlias = Callable[[Context, Next], Awaitable[None]]


class Middleware(Protocol):
    """Protocol for trellis middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def timing(ctx: Context, next: Next) -> None:
            start = time.monotonic()
            await next()
            ctx.headers["X-Time"] = f"{time.monotonic() - start:.3f}"

        # Class middleware
        class Greeter:
            async def __call__(self, ctx: Context, next: Next) -> None:
                ...
    """

    async def __call__(self, ctx: Context, next: Next) -> None: ...
