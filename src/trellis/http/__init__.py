"""Request and per-request context types."""

from trellis.http.context import Context
from trellis.http.request import Request

__all__ = ["Context", "Request"]
