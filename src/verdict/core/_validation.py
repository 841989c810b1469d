"""Internal validation helpers used across core modules.

These helpers centralize the invariant checks of the result variants so every
constructor reports problems the same way. They are pure: the outcome depends
only on the arguments.
"""

from __future__ import annotations

from verdict.core.exceptions import HINTS, InvalidReasonError, InvariantViolationError


def is_reason_type(value: object) -> bool:
    """Return True for a str label or an int code (bool excluded)."""
    return isinstance(value, str) or (
        isinstance(value, int) and not isinstance(value, bool)
    )


def require_value(value: object, *, variant: str) -> None:
    """Reject the absence sentinel where a variant must carry a value."""
    if value is None:
        raise InvariantViolationError(
            "value must not be None", variant=variant, hint=HINTS["missing_value"]
        )


def check_reason(reason: object, *, variant: str) -> None:
    """Validate a failure reason.

    Raises:
        InvariantViolationError: If ``reason`` is None.
        InvalidReasonError: If the reason is not a str label or an int code.
    """
    if reason is None:
        raise InvariantViolationError(
            "reason must not be None", variant=variant, hint=HINTS["missing_reason"]
        )
    if not is_reason_type(reason):
        raise InvalidReasonError(
            f"reason must be str or int, got {type(reason).__name__}",
            reason,
            hint=HINTS["reason_type"],
        )
