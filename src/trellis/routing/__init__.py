"""Routing — method predicate, compiled path patterns, and route rules.

Rules are built during setup and installed into a stack as plain
middleware; each one checks a single request and either runs its own
handler chain or passes the request along.
"""

from trellis.routing.methods import ALLOWED_METHODS, method_matches, normalize_method
from trellis.routing.pattern import (
    PatternKind,
    RoutePattern,
    Segment,
    SegmentKind,
    compile_pattern,
    match_path,
    tokenize,
)
from trellis.routing.rule import RouteRule, delete, get, head, mount, options, patch, post, put, trace

__all__ = [
    "ALLOWED_METHODS",
    "PatternKind",
    "RoutePattern",
    "RouteRule",
    "Segment",
    "SegmentKind",
    "compile_pattern",
    "delete",
    "get",
    "head",
    "match_path",
    "method_matches",
    "mount",
    "normalize_method",
    "options",
    "patch",
    "post",
    "put",
    "tokenize",
    "trace",
]
