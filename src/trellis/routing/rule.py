"""Route rules — method + path pattern + handler chain as one middleware.

A rule is transparent to requests it does not apply to: it awaits the
enclosing ``next`` and does nothing else. When it applies, it writes the
captured parameters to ``ctx.params`` and runs its handlers in order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from trellis._internal.callables import is_async_callable
from trellis.errors import EmptyHandlerChain, InvalidHandler
from trellis.http.context import Context
from trellis.middleware.chain import run_chain
from trellis.middleware.protocol import Handler, Next
from trellis.routing.methods import method_matches, normalize_method
from trellis.routing.pattern import RoutePattern, compile_pattern, match_path

logger = logging.getLogger("trellis.routing")


@dataclass(frozen=True, slots=True)
class RouteRule:
    """A frozen routing rule.

    Created once at registration time, invoked once per request, and
    never holds request state. Build one with ``mount()``.
    """

    method: str | None
    pattern: RoutePattern
    handlers: tuple[Handler, ...]
    strict: bool = True

    @classmethod
    def build(
        cls,
        method: str | None,
        pattern: str,
        handlers: tuple[Handler, ...],
        *,
        strict: bool = True,
    ) -> RouteRule:
        """Validate and compile a rule.

        Raises ``UnsupportedMethod``, ``EmptyHandlerChain`` or
        ``InvalidHandler`` before anything can be installed.
        """
        normalized = normalize_method(method)
        if not handlers:
            raise EmptyHandlerChain(pattern)
        for handler in handlers:
            if not is_async_callable(handler):
                raise InvalidHandler(handler)
        return cls(
            method=normalized,
            pattern=compile_pattern(pattern),
            handlers=tuple(handlers),
            strict=strict,
        )

    def matches(self, ctx: Context) -> dict[str, str] | None:
        """Return captured params if this rule applies to *ctx*, else ``None``."""
        request = ctx.request
        if not method_matches(self.method, request.method):
            return None
        path = request.path.split("?", 1)[0]
        return match_path(self.pattern, path)

    async def __call__(self, ctx: Context, next: Next) -> None:
        params = self.matches(ctx)
        if params is None:
            await next()
            return

        ctx.params = params
        request = ctx.request
        logger.debug(
            "%s %s matched %s %s", request.method, request.path, self.method or "*", self.pattern.raw
        )
        outcome = await run_chain(self.handlers, ctx, next, strict=self.strict)
        logger.debug("%s %s chain ended: %s", request.method, request.path, outcome.value)

    def as_middleware(self) -> Callable[[Context, Next], Any]:
        """The rule in its pluggable form. Rules are already middleware."""
        return self

    def __repr__(self) -> str:
        names = ", ".join(getattr(h, "__name__", type(h).__name__) for h in self.handlers)
        return f"RouteRule({self.method or '*'} {self.pattern.raw!r} -> [{names}])"


def mount(method_or_path: str | None, *args: Any, strict: bool = True) -> RouteRule:
    """Mount a handler chain on an optional method and a path pattern.

    The method may be omitted::

        mount("/foo/bar", handler)
        mount("POST", "/foo/bar", handler)
        mount(None, "/posts/:id", load_post, render_post)

    Raises ``UnsupportedMethod`` for methods outside ``ALLOWED_METHODS``,
    ``EmptyHandlerChain`` when no handler is given, and ``InvalidHandler``
    for handlers that are not ``async def``.

    ``strict=False`` relaxes only the hops between this rule's own
    handlers. The last handler's ``next`` belongs to the enclosing stack
    and follows its ``StackConfig.strict_continuations``.
    """
    if args and isinstance(args[0], str):
        method: str | None = method_or_path
        path = args[0]
        handlers = args[1:]
    elif method_or_path is None:
        msg = "mount(None, ...) requires a path pattern as its second argument"
        raise TypeError(msg)
    else:
        method = None
        path = method_or_path
        handlers = args
    return RouteRule.build(method, path, tuple(handlers), strict=strict)


def _shortcut(method: str) -> Callable[..., RouteRule]:
    def shortcut(path: str, *handlers: Handler, strict: bool = True) -> RouteRule:
        return RouteRule.build(method, path, handlers, strict=strict)

    shortcut.__name__ = method.lower()
    shortcut.__qualname__ = method.lower()
    shortcut.__doc__ = f"Mount *handlers* on ``{method}`` requests for *path*."
    return shortcut


get = _shortcut("GET")
post = _shortcut("POST")
put = _shortcut("PUT")
patch = _shortcut("PATCH")
delete = _shortcut("DELETE")
head = _shortcut("HEAD")
options = _shortcut("OPTIONS")
trace = _shortcut("TRACE")
