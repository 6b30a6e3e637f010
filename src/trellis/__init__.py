"""Trellis — method and path rules for async middleware stacks.

Mount an ordered handler chain on an optional HTTP method and a path
pattern; the resulting rule is a plain middleware that either runs its
chain or passes the request along untouched.

Basic usage::

    from trellis import Stack, mount

    async def load(ctx, next):
        ctx.state["post"] = ctx.params["post_id"]
        await next()

    async def render(ctx, next):
        ctx.body = f"post {ctx.state['post']} as {ctx.params['format']}"

    stack = Stack()
    stack.use(mount("GET", "/posts/:post_id.:format", load, render))

    ctx = await stack.dispatch("GET", "/posts/7.html")
"""

__version__ = "0.1.0"
__all__ = [
    "ALLOWED_METHODS",
    "ConfigurationError",
    "Context",
    "EmptyHandlerChain",
    "HTTPError",
    "InvalidContinuationUse",
    "InvalidHandler",
    "Middleware",
    "Next",
    "NotFound",
    "Request",
    "RouteRule",
    "Stack",
    "StackConfig",
    "TrellisError",
    "UnsupportedMethod",
    "compile_pattern",
    "match_path",
    "mount",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import trellis`` fast while providing a clean top-level API.
    """
    if name == "Stack":
        from trellis.stack import Stack

        return Stack

    if name == "StackConfig":
        from trellis.config import StackConfig

        return StackConfig

    if name in ("Context", "Request"):
        from trellis import http as _http

        return getattr(_http, name)

    if name in ("ALLOWED_METHODS", "RouteRule", "compile_pattern", "match_path", "mount"):
        from trellis import routing as _routing

        return getattr(_routing, name)

    if name in ("Middleware", "Next"):
        from trellis.middleware import protocol as _mw

        return getattr(_mw, name)

    if name in (
        "ConfigurationError",
        "EmptyHandlerChain",
        "HTTPError",
        "InvalidContinuationUse",
        "InvalidHandler",
        "NotFound",
        "TrellisError",
        "UnsupportedMethod",
    ):
        from trellis import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
