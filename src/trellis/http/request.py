"""Immutable request descriptor.

Frozen metadata only. Body parsing belongs to the surrounding server.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request descriptor.

    ``path`` never carries the query component; it lives in
    ``query_string`` instead.
    """

    method: str
    path: str
    query_string: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        """Full request URL (path + query string)."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    @classmethod
    def from_url(
        cls,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
    ) -> Request:
        """Create a Request from a method and a raw request target."""
        path, _, query_string = url.partition("?")
        lowered = {name.lower(): value for name, value in (headers or {}).items()}
        return cls(
            method=method,
            path=path or "/",
            query_string=query_string,
            headers=lowered,
        )
