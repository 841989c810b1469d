"""Public exceptions surface for end-users.

Re-exports core exception types under a dedicated, discoverable module.
"""

from __future__ import annotations

from verdict.core.exceptions import (
    InvalidReasonError,
    InvariantViolationError,
    VerdictError,
)

__all__ = [
    "InvalidReasonError",
    "InvariantViolationError",
    "VerdictError",
]
