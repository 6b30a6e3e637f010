"""Stack configuration.

StackConfig is a frozen dataclass and cannot change once a stack holds it.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StackConfig:
    """Stack configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = StackConfig(debug=True, not_found_body="nope")
    """

    # Re-raise unexpected handler errors instead of answering 500
    debug: bool = False

    # Fail with InvalidContinuationUse when a middleware awaits next() twice
    strict_continuations: bool = True

    # Body written when no middleware produced one and the status is still 404
    not_found_body: str = "Not Found"

    # Root log level applied by the CLI
    log_level: str = "warning"
