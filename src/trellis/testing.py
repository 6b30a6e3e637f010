"""Test client for trellis stacks.

Uses the same Context type as production. No wrapper translation layer.
"""

from __future__ import annotations

from collections.abc import Mapping

from trellis.http.context import Context
from trellis.stack import Stack


def assert_params(ctx: Context, expected: Mapping[str, str]) -> None:
    """Assert the context carries exactly *expected* as its path params."""
    assert dict(ctx.params) == dict(expected), (
        f"Expected params {dict(expected)!r}, got {ctx.params!r}"
    )


class TestClient:
    __test__ = False  # Tell pytest this is not a test class
    """Async test client for trellis stacks.

    Returns the request's ``Context`` after the pipeline ran. No
    sockets, no serialization.

    Usage::

        async with TestClient(stack) as client:
            ctx = await client.get("/posts/42")
            assert ctx.status == 200
    """

    __slots__ = ("stack",)

    def __init__(self, stack: Stack) -> None:
        self.stack = stack

    async def __aenter__(self) -> TestClient:
        self.stack._ensure_frozen()
        return self

    async def __aexit__(self, *args: object) -> None:
        pass

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        query: Mapping[str, str] | None = None,
    ) -> Context:
        """Send a request with any method."""
        if query:
            from urllib.parse import urlencode

            separator = "&" if "?" in url else "?"
            url = f"{url}{separator}{urlencode(dict(query))}"
        return await self.stack.dispatch(method, url, headers=headers)

    async def get(self, url: str, **kwargs: object) -> Context:
        """Send a GET request."""
        return await self.request("GET", url, **kwargs)  # type: ignore[arg-type]

    async def post(self, url: str, **kwargs: object) -> Context:
        """Send a POST request."""
        return await self.request("POST", url, **kwargs)  # type: ignore[arg-type]

    async def put(self, url: str, **kwargs: object) -> Context:
        """Send a PUT request."""
        return await self.request("PUT", url, **kwargs)  # type: ignore[arg-type]

    async def patch(self, url: str, **kwargs: object) -> Context:
        """Send a PATCH request."""
        return await self.request("PATCH", url, **kwargs)  # type: ignore[arg-type]

    async def delete(self, url: str, **kwargs: object) -> Context:
        """Send a DELETE request."""
        return await self.request("DELETE", url, **kwargs)  # type: ignore[arg-type]

    async def head(self, url: str, **kwargs: object) -> Context:
        """Send a HEAD request."""
        return await self.request("HEAD", url, **kwargs)  # type: ignore[arg-type]

    async def options(self, url: str, **kwargs: object) -> Context:
        """Send an OPTIONS request."""
        return await self.request("OPTIONS", url, **kwargs)  # type: ignore[arg-type]
