"""``trellis routes`` — list installed rules.

Prints every rule of a stack with its method, pattern, and handler chain,
in the order the stack evaluates them.
"""

import argparse
import sys

from trellis.cli._resolve import configure_logging, resolve_stack


def run_routes(args: argparse.Namespace) -> None:
    """List installed rules for a trellis stack."""
    try:
        stack = resolve_stack(args.stack)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    configure_logging(args.log_level, stack)

    rules = stack.rules
    if not rules:
        print("No rules installed.")
        return

    rows: list[tuple[str, str, str]] = []
    for rule in rules:
        chain = " -> ".join(getattr(h, "__name__", type(h).__name__) for h in rule.handlers)
        rows.append((rule.method or "*", rule.pattern.raw, chain))

    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATTERN", "HANDLERS"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, chain in rows:
        print(fmt.format(method, path, chain))
