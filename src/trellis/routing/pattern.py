"""Path patterns: compile once, match by segment.

A pattern such as ``/posts/:post_id/comments/:id.:format`` is split into
tokens, each an optional separator (``/`` or ``.``) followed by a
non-empty run of other characters::

    "/posts/:post_id/comments/:id.:format"
        -> ["/posts", "/:post_id", "/comments", "/:id", ".:format"]

Tokens whose body is ``:name`` become parameter segments. A pattern with
no parameter segment is literal and is compared to the request path as a
plain string. Request paths are tokenized with the same rule and compared
position by position; no regex is built per pattern or per request.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

SEPARATORS = frozenset("/.")

_PARAM_NAME = re.compile(r"[a-z0-9_]+")


class PatternKind(Enum):
    LITERAL = "literal"
    PARAMETERIZED = "parameterized"


class SegmentKind(Enum):
    LITERAL = "literal"
    PARAM = "param"


@dataclass(frozen=True, slots=True)
class Segment:
    """One token of a parameterized pattern.

    Literal: ``/comments`` (kind=LITERAL, separator="/", text="comments")
    Param:   ``.:format``  (kind=PARAM, separator=".", text="format")
    """

    kind: SegmentKind
    separator: str
    text: str

    @property
    def token(self) -> str:
        """The segment rendered back to pattern text."""
        if self.kind is SegmentKind.PARAM:
            return f"{self.separator}:{self.text}"
        return f"{self.separator}{self.text}"


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A compiled path pattern. Immutable, shareable across requests."""

    raw: str
    kind: PatternKind
    segments: tuple[Segment, ...] = ()

    @property
    def is_literal(self) -> bool:
        return self.kind is PatternKind.LITERAL

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(s.text for s in self.segments if s.kind is SegmentKind.PARAM)


def _scan(path: str) -> list[tuple[str, str]]:
    """Split *path* into ``(separator, body)`` pairs.

    Empty bodies (trailing or doubled separators) produce no token.
    """
    tokens: list[tuple[str, str]] = []
    separator = ""
    start = 0
    for i, char in enumerate(path):
        if char in SEPARATORS:
            if i > start:
                tokens.append((separator, path[start:i]))
            separator = char
            start = i + 1
    if len(path) > start:
        tokens.append((separator, path[start:]))
    return tokens


def tokenize(path: str) -> list[str]:
    """Tokenize *path*, keeping each token's leading separator.

    Examples::

        "/posts/123"          -> ["/posts", "/123"]
        "/posts/123/"         -> ["/posts", "/123"]
        "/comments/456.html"  -> ["/comments", "/456", ".html"]
    """
    return [separator + body for separator, body in _scan(path)]


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> RoutePattern:
    """Compile a pattern string. Total over all strings."""
    segments: list[Segment] = []
    has_param = False
    for separator, body in _scan(pattern):
        if body.startswith(":") and _PARAM_NAME.fullmatch(body, 1):
            segments.append(Segment(SegmentKind.PARAM, separator, body[1:]))
            has_param = True
        else:
            segments.append(Segment(SegmentKind.LITERAL, separator, body))

    if not has_param:
        return RoutePattern(raw=pattern, kind=PatternKind.LITERAL)
    return RoutePattern(raw=pattern, kind=PatternKind.PARAMETERIZED, segments=tuple(segments))


def match_path(compiled: RoutePattern, request_path: str) -> dict[str, str] | None:
    """Match a query-free request path against a compiled pattern.

    Returns the captured parameters (empty for literal patterns) on
    success, ``None`` otherwise. Partial captures are never returned.
    """
    if compiled.kind is PatternKind.LITERAL:
        return {} if request_path == compiled.raw else None

    segments = compiled.segments
    tokens = _scan(request_path)
    # Short paths are rejected before any comparison; the filled-in pattern
    # must reproduce the request token for token, so surplus tokens fail too.
    if len(tokens) != len(segments):
        return None

    params: dict[str, str] = {}
    for segment, (separator, body) in zip(segments, tokens, strict=True):
        if segment.separator != separator:
            return None
        if segment.kind is SegmentKind.PARAM:
            params[segment.text] = body
        elif segment.text != body:
            return None
    return params
