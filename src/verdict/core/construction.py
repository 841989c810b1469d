"""Constructors for success and failure results.

``ok`` and ``bad`` are the everyday entry points. Both treat ``None`` as
"no value": ``ok(None)`` is ``ok()`` and ``bad(r, None)`` is ``bad(r)``.
Presence is an identity check, so falsy values such as ``0`` or ``""`` are
carried like any other.
"""

from __future__ import annotations

import typing

from verdict.core.exceptions import HINTS, InvariantViolationError
from verdict.core.result_primitives import (
    Bad,
    BadWithValue,
    Ok,
    OkWithValue,
    ReasonType,
    Result,
)


@typing.overload
def ok(value: None = None) -> Ok: ...
@typing.overload
def ok[T](value: T) -> OkWithValue[T]: ...


def ok(value: typing.Any = None) -> Ok | OkWithValue[typing.Any]:
    """Return a successful result, carrying ``value`` unless it is None.

    Example:
        ok()  # Ok()
        ok(42)  # OkWithValue(value=42)
    """
    if value is None:
        return Ok()
    return OkWithValue(value)


@typing.overload
def bad[R: ReasonType](reason: R, value: None = None) -> Bad[R]: ...
@typing.overload
def bad[R: ReasonType, T](reason: R, value: T) -> BadWithValue[R, T]: ...


def bad(
    reason: ReasonType, value: typing.Any = None
) -> Bad[typing.Any] | BadWithValue[typing.Any, typing.Any]:
    """Return a failed result with ``reason``, carrying ``value`` unless it is None.

    This builds a value describing the failure; it never raises for a
    well-formed reason.

    Example:
        bad("NOT_FOUND")  # Bad(reason='NOT_FOUND')
        bad("VALIDATION_FAILED", {"field": "email"})
    """
    if value is None:
        return Bad(reason)
    return BadWithValue(reason, value)


def from_fields(
    *,
    success: bool,
    value: typing.Any = None,
    reason: ReasonType | None = None,
    has_value: bool | None = None,
) -> Result[typing.Any, typing.Any]:
    """Build the variant matching loose flag/field input.

    ``has_value`` defaults to ``value is not None``. Input whose flags
    contradict its fields is a programming error and raises.

    Raises:
        InvariantViolationError: If the flags and fields cannot describe a
            single variant.
    """
    if has_value is None:
        has_value = value is not None
    if has_value and value is None:
        raise InvariantViolationError(
            "has_value=True requires a value", hint=HINTS["missing_value"]
        )
    if not has_value and value is not None:
        raise InvariantViolationError("has_value=False but a value was given")
    if success:
        if reason is not None:
            raise InvariantViolationError(
                f"successful results carry no reason, got {reason!r}"
            )
        return ok(value)
    if reason is None:
        raise InvariantViolationError(
            "failed results require a reason", hint=HINTS["missing_reason"]
        )
    return bad(reason, value)
