"""Core exceptions for verdict.

Results describe expected, recoverable failures. Everything in this module is
the other half: faults that indicate a programming error and are
therefore raised instead of being returned as a ``Bad`` result.
"""


class VerdictError(Exception):
    """Base exception for all library-specific errors."""

    def __init__(self, message: str, hint: str | None = None):
        """Keep ``message`` as the sole exception arg; ``hint`` is rendered by str()."""
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        if self.hint is None:
            return self.message
        return f"{self.message}. {self.hint}"


# --- Actionable Hints ---

HINTS = {
    "reason_type": (
        "Reasons must be a str label or an int code, e.g. bad('NOT_FOUND') or bad(404)"
    ),
    "missing_value": (
        "Use ok() or bad(reason) when there is no value; None is never carried"
    ),
    "missing_reason": "Failures always carry a reason; use bad(reason)",
}


class InvalidReasonError(VerdictError):
    """Raised when a failure reason is not a str label or an int code."""

    def __init__(self, message: str, reason: object, hint: str | None = None):
        """Create an invalid-reason error.

        Args:
            message: Human-readable description of the problem.
            reason: The rejected reason, kept for programmatic access.
            hint: Optional actionable hint for resolution.
        """
        self.reason = reason
        super().__init__(message, hint=hint)


class InvariantViolationError(VerdictError):
    """Raised when a result is built with fields that contradict its variant.

    Used to signal impossible states, e.g. an ``OkWithValue`` without a value
    or a ``Bad`` without a reason.
    """

    def __init__(
        self, message: str, variant: str | None = None, hint: str | None = None
    ):
        """Create an invariant violation error.

        Args:
            message: Human-readable description of the violated invariant.
            variant: Optional name of the variant being constructed.
            hint: Optional actionable hint for resolution.
        """
        self.variant = variant
        msg = message if variant is None else f"[{variant}] {message}"
        super().__init__(msg, hint=hint)
