"""Method predicate: whitelist validation and case-insensitive matching."""

from trellis.errors import UnsupportedMethod

ALLOWED_METHODS: frozenset[str] = frozenset(
    {"GET", "POST", "PUT", "HEAD", "DELETE", "OPTIONS", "TRACE", "PATCH"}
)


def normalize_method(method: str | None) -> str | None:
    """Validate a rule's method and return it upper-cased.

    ``None`` means "any method" and passes through untouched.
    Raises ``UnsupportedMethod`` naming *method* as given when it is
    not in ``ALLOWED_METHODS``.
    """
    if method is None:
        return None
    upper = method.upper()
    if upper not in ALLOWED_METHODS:
        raise UnsupportedMethod(method)
    return upper


def method_matches(configured: str | None, requested: str) -> bool:
    """True if a rule declared with *configured* applies to *requested*."""
    if configured is None:
        return True
    return configured.upper() == requested.upper()
