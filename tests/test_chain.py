"""Tests for trellis.middleware.chain — ordered handler walk."""

import pytest

from trellis.errors import InvalidContinuationUse
from trellis.http.context import Context
from trellis.http.request import Request
from trellis.middleware.chain import ChainExit, run_chain
from trellis.middleware.protocol import Handler, Next


def _ctx() -> Context:
    return Context(Request.from_url("GET", "/"))


def _recorder(log: list[str], name: str, *, call_next: bool = True) -> Handler:
    async def handler(ctx: Context, next: Next) -> None:
        log.append(f"{name}:before")
        if call_next:
            await next()
        log.append(f"{name}:after")

    handler.__name__ = name
    return handler


class TestRunChain:
    async def test_registration_order(self) -> None:
        log: list[str] = []

        async def outer() -> None:
            log.append("outer")

        handlers = [_recorder(log, "h0"), _recorder(log, "h1"), _recorder(log, "h2")]
        outcome = await run_chain(handlers, _ctx(), outer)

        assert outcome is ChainExit.ENCLOSING
        assert log == [
            "h0:before",
            "h1:before",
            "h2:before",
            "outer",
            "h2:after",
            "h1:after",
            "h0:after",
        ]

    async def test_short_circuit(self) -> None:
        log: list[str] = []

        async def outer() -> None:
            log.append("outer")

        handlers = [
            _recorder(log, "h0"),
            _recorder(log, "h1", call_next=False),
            _recorder(log, "h2"),
        ]
        outcome = await run_chain(handlers, _ctx(), outer)

        assert outcome is ChainExit.TERMINATED
        assert log == ["h0:before", "h1:before", "h1:after", "h0:after"]

    async def test_only_last_reaches_outer(self) -> None:
        reached: list[bool] = []

        async def outer() -> None:
            reached.append(True)

        log: list[str] = []
        await run_chain([_recorder(log, "only")], _ctx(), outer)
        assert reached == [True]

    async def test_last_may_skip_outer(self) -> None:
        reached: list[bool] = []

        async def outer() -> None:
            reached.append(True)

        log: list[str] = []
        outcome = await run_chain([_recorder(log, "only", call_next=False)], _ctx(), outer)
        assert outcome is ChainExit.TERMINATED
        assert reached == []

    async def test_empty_chain_goes_straight_out(self) -> None:
        reached: list[bool] = []

        async def outer() -> None:
            reached.append(True)

        outcome = await run_chain([], _ctx(), outer)
        assert outcome is ChainExit.ENCLOSING
        assert reached == [True]

    async def test_shared_context(self) -> None:
        async def a(ctx: Context, next: Next) -> None:
            ctx.body = "Hello "
            await next()

        async def b(ctx: Context, next: Next) -> None:
            ctx.append("World")
            await next()

        async def final(ctx: Context, next: Next) -> None:
            ctx.append("!")

        async def outer() -> None:
            pass

        ctx = _ctx()
        await run_chain([a, b, final], ctx, outer)
        assert ctx.body == "Hello World!"

    async def test_exception_propagates(self) -> None:
        async def boom(ctx: Context, next: Next) -> None:
            raise RuntimeError("boom")

        async def outer() -> None:
            pass

        with pytest.raises(RuntimeError, match="boom"):
            await run_chain([boom], _ctx(), outer)


class TestContinuationReuse:
    async def _twice(self, ctx: Context, next: Next) -> None:
        await next()
        await next()

    async def test_strict_rejects_second_call(self) -> None:
        calls: list[int] = []

        async def outer() -> None:
            calls.append(1)

        with pytest.raises(InvalidContinuationUse) as exc_info:
            await run_chain([self._twice], _ctx(), outer)
        assert exc_info.value.index == 0
        assert calls == [1]

    async def test_lenient_allows_second_call(self) -> None:
        calls: list[int] = []

        async def outer() -> None:
            calls.append(1)

        await run_chain([self._twice], _ctx(), outer, strict=False)
        assert calls == [1, 1]
