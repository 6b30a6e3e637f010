"""Trellis exception hierarchy.

Shared across rules, the chain driver, and the stack so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class TrellisError(Exception):
    """Base for all trellis-specific errors."""


class ConfigurationError(TrellisError):
    """Raised when a rule or stack is set up incorrectly.

    Always raised at registration time, before anything is installed.
    """


class UnsupportedMethod(ConfigurationError):  # noqa: N818
    """A rule was declared with a method outside the allowed set."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Unsupported HTTP method: {method!r}")


class EmptyHandlerChain(ConfigurationError):  # noqa: N818
    """A rule was declared without any handlers."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"Rule for {pattern!r} needs at least one handler")


class InvalidHandler(ConfigurationError):  # noqa: N818
    """A handler is not an async callable."""

    def __init__(self, handler: object) -> None:
        self.handler = handler
        name = getattr(handler, "__name__", type(handler).__name__)
        super().__init__(f"handler function must be a coroutine function, got {name!r}")


class InvalidContinuationUse(TrellisError):  # noqa: N818
    """A handler awaited its ``next`` continuation more than once."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Continuation of handler #{index} was invoked more than once")


@dataclass(frozen=True, slots=True)
class HTTPError(TrellisError):
    """A status code a handler wants written instead of its own output.

    Raising one from any middleware or rule handler unwinds the chain;
    ``Stack.handle`` copies ``status``, ``detail`` and ``headers`` onto
    the context.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        return f"HTTP {self.status} {self.detail}".rstrip()


class NotFound(HTTPError):  # noqa: N818
    """404. Written by the stack when no middleware answered the request."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
