"""Async-callable detection.

Handlers and middleware must be ``async def`` functions or objects with
an ``async def __call__``. This module keeps that check in exactly one
place.
"""

import inspect
from typing import Any


def is_async_callable(obj: Any) -> bool:
    """True if calling *obj* returns a coroutine.

    Accepts coroutine functions, ``functools.partial`` wrappers around
    them, and instances whose ``__call__`` is a coroutine function::

        async def handler(ctx, next): ...

        class Greeter:
            async def __call__(self, ctx, next): ...
    """
    if inspect.iscoroutinefunction(obj):
        return True
    if inspect.isfunction(obj) or inspect.ismethod(obj):
        return False
    call = getattr(obj, "__call__", None)  # noqa: B004
    return call is not None and inspect.iscoroutinefunction(call)
