"""Locating the stack a CLI command works on.

A target is ``module`` or ``module:attribute``. The attribute may be a
``Stack``, a single ``RouteRule``, or a list/tuple of rules; bare rules
are installed, in order, into a fresh default ``Stack`` so they can be
listed or dry-run without an application around them.
"""

import importlib
import logging
from collections.abc import Sequence

from trellis.routing.rule import RouteRule
from trellis.stack import Stack

DEFAULT_ATTRIBUTE = "stack"


def _wrap_rules(rules: Sequence[RouteRule]) -> Stack:
    stack = Stack()
    for rule in rules:
        stack.use(rule)
    return stack


def resolve_stack(target: str) -> Stack:
    """Return the Stack named by *target*.

    Raises ``ModuleNotFoundError`` or ``AttributeError`` when the name
    does not exist, and ``TypeError`` when it is neither a stack nor
    rules.
    """
    module_path, _, attr_name = target.partition(":")
    obj = getattr(importlib.import_module(module_path), attr_name or DEFAULT_ATTRIBUTE)

    if isinstance(obj, Stack):
        return obj
    if isinstance(obj, RouteRule):
        return _wrap_rules([obj])
    if isinstance(obj, (list, tuple)) and obj and all(isinstance(r, RouteRule) for r in obj):
        return _wrap_rules(obj)

    msg = f"{target!r} is a {type(obj).__name__}; expected a Stack, a RouteRule or a list of rules"
    raise TypeError(msg)


def configure_logging(level: str | None, stack: Stack) -> None:
    """Apply *level*, or the stack's configured level, to the root logger."""
    logging.basicConfig(level=(level or stack.config.log_level).upper())
