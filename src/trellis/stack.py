"""The middleware stack, an ordered pipeline that rules plug into.

Mutable during setup (``use``), frozen on the first request. Each request
gets its own ``Context`` and walks the middleware tuple with the same
chain driver rules use internally. The innermost continuation does
nothing; a request that leaves the context untouched is answered with
``NotFound`` once the walk ends.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping

from trellis._internal.callables import is_async_callable
from trellis.config import StackConfig
from trellis.errors import ConfigurationError, HTTPError, InvalidHandler, NotFound
from trellis.http.context import Context
from trellis.http.request import Request
from trellis.middleware.chain import run_chain
from trellis.middleware.protocol import Middleware
from trellis.routing.rule import RouteRule

logger = logging.getLogger("trellis.server")


async def _end_of_stack() -> None:
    return None


def _write_http_error(ctx: Context, exc: HTTPError) -> None:
    logger.debug("%d %s %s: %s", exc.status, ctx.method, ctx.path, exc.detail)
    ctx.status = exc.status
    ctx.body = exc.detail or f"Error {exc.status}"
    ctx.headers.update(exc.headers)


class Stack:
    """An ordered middleware pipeline.

    Usage::

        stack = Stack()
        stack.use(mount("GET", "/posts/:id", show_post))
        stack.use(mount("POST", "/posts", create_post))

        ctx = await stack.dispatch("GET", "/posts/42")
        assert ctx.params == {"id": "42"}
    """

    __slots__ = ("_freeze_lock", "_frozen", "_middleware", "_middleware_list", "config")

    def __init__(self, config: StackConfig | None = None) -> None:
        self.config = config or StackConfig()
        self._middleware_list: list[Middleware] = []
        self._middleware: tuple[Middleware, ...] = ()
        self._frozen = False
        self._freeze_lock = threading.Lock()

    # -- Setup --

    def use(self, middleware: Middleware) -> Stack:
        """Append a middleware (or rule) to the pipeline."""
        self._check_not_frozen()
        if not is_async_callable(middleware):
            raise InvalidHandler(middleware)
        self._middleware_list.append(middleware)
        return self

    @property
    def rules(self) -> list[RouteRule]:
        """Installed rules, in registration order."""
        return [mw for mw in self._middleware_list if isinstance(mw, RouteRule)]

    # -- Request handling --

    async def handle(self, ctx: Context) -> Context:
        """Run *ctx* through the pipeline and return it."""
        self._ensure_frozen()
        cfg = self.config
        try:
            await run_chain(self._middleware, ctx, _end_of_stack, strict=cfg.strict_continuations)
        except HTTPError as exc:
            _write_http_error(ctx, exc)
        except Exception:
            if cfg.debug:
                raise
            logger.exception("500 %s %s", ctx.method, ctx.path)
            ctx.status = 500
            ctx.body = "Internal Server Error"

        if ctx.status == 404 and not ctx.body:
            _write_http_error(ctx, NotFound(cfg.not_found_body))
        return ctx

    async def dispatch(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Context:
        """Build a Context for ``method url`` and handle it."""
        request = Request.from_url(method.upper(), url, headers)
        return await self.handle(Context(request))

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Freeze once, even if the first requests race."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._middleware = tuple(self._middleware_list)
            self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the stack after it has started handling requests. "
                "Install rules and middleware before the first dispatch."
            )
            raise ConfigurationError(msg)
