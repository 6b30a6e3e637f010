"""Chain driver — runs an ordered handler tuple with one shared continuation.

The walk is an explicit state machine over an immutable tuple. Each
continuation carries the fixed index of the handler it was given to;
handler ``n`` receives one that moves the walk to ``n + 1``; the last handler's
continuation hands control to the enclosing ``next`` instead. A handler
that returns without awaiting its continuation terminates the walk.

    0 -> 1 -> ... -> N-1 -> ENCLOSING
    any state ----------> TERMINATED

The index only ever grows, so the chain never loops.
"""

from collections.abc import Sequence
from enum import Enum

from trellis.errors import InvalidContinuationUse
from trellis.http.context import Context
from trellis.middleware.protocol import Handler, Next


class ChainExit(Enum):
    """How a chain walk ended."""

    ENCLOSING = "enclosing"
    TERMINATED = "terminated"


class _Walk:
    """Mutable bookkeeping for a single walk. Lives for one request."""

    __slots__ = ("ctx", "exit", "handlers", "outer", "strict")

    def __init__(
        self,
        handlers: Sequence[Handler],
        ctx: Context,
        outer: Next,
        strict: bool,
    ) -> None:
        self.handlers = handlers
        self.ctx = ctx
        self.outer = outer
        self.strict = strict
        self.exit = ChainExit.TERMINATED

    async def step(self, index: int) -> None:
        await self.handlers[index](self.ctx, _Continuation(self, index))


class _Continuation:
    """The ``next`` handed to the handler at ``index``."""

    __slots__ = ("_index", "_used", "_walk")

    def __init__(self, walk: _Walk, index: int) -> None:
        self._walk = walk
        self._index = index
        self._used = False

    async def __call__(self) -> None:
        walk = self._walk
        if self._used and walk.strict:
            raise InvalidContinuationUse(self._index)
        self._used = True

        following = self._index + 1
        if following < len(walk.handlers):
            await walk.step(following)
        else:
            walk.exit = ChainExit.ENCLOSING
            await walk.outer()


async def run_chain(
    handlers: Sequence[Handler],
    ctx: Context,
    outer: Next,
    *,
    strict: bool = True,
) -> ChainExit:
    """Run *handlers* in order against *ctx*.

    Returns ``ChainExit.ENCLOSING`` when the last handler handed control
    to *outer*, ``ChainExit.TERMINATED`` when some handler stopped the
    walk early. Handler exceptions propagate unchanged.
    """
    if not handlers:
        await outer()
        return ChainExit.ENCLOSING

    walk = _Walk(handlers, ctx, outer, strict)
    await walk.step(0)
    return walk.exit
