"""Mutable per-request context.

One Context is created per request and threaded through every
middleware and handler. Nothing keeps a reference to it after the
request finishes.
"""

from typing import Any

from trellis.http.request import Request


class Context:
    """Request-scoped state shared along a single middleware pipeline.

    ``status`` starts at 404. Assigning ``body`` while the status has
    never been set explicitly moves it to 200, so a handler that only
    writes a body produces a successful response::

        async def hello(ctx: Context, next: Next) -> None:
            ctx.body = "Hello World!"
    """

    __slots__ = ("_body", "_explicit_status", "_status", "headers", "params", "request", "state")

    def __init__(self, request: Request) -> None:
        self.request = request
        self.params: dict[str, str] = {}
        self.state: dict[str, Any] = {}
        self.headers: dict[str, str] = {}
        self._status = 404
        self._explicit_status = False
        self._body = ""

    @property
    def method(self) -> str:
        return self.request.method

    @property
    def path(self) -> str:
        return self.request.path

    @property
    def status(self) -> int:
        return self._status

    @status.setter
    def status(self, value: int) -> None:
        self._status = value
        self._explicit_status = True

    @property
    def body(self) -> str:
        return self._body

    @body.setter
    def body(self, value: str) -> None:
        self._body = value
        if not self._explicit_status:
            self._status = 200

    def append(self, text: str) -> None:
        """Append *text* to the body."""
        self.body = self._body + text

    def __repr__(self) -> str:
        return f"<Context {self.request.method} {self.request.path} status={self._status}>"
