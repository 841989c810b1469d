"""Result variants for expected, recoverable outcomes.

A result is exactly one of four immutable shapes, discriminated by the
``success`` and ``has_value`` flags:

    ============== ======= ========= ==================
    Variant        success has_value carries
    ============== ======= ========= ==================
    Ok             True    False     nothing
    OkWithValue    True    True      value
    Bad            False   False     reason
    BadWithValue   False   True      reason, value
    ============== ======= ========= ==================

The flags are class-level constants, so they can never disagree with the
fields a variant carries. ``None`` is the absence sentinel and is never
carried as a value; failures always carry a ``ReasonType`` reason.

Unrecoverable faults are not results. They are raised.
"""

from __future__ import annotations

import dataclasses
import typing

from verdict.core._validation import check_reason, require_value

ReasonType = str | int

T = typing.TypeVar("T")
R = typing.TypeVar("R", bound=ReasonType)


@dataclasses.dataclass(frozen=True, slots=True)
class Ok:
    """A successful outcome without a value."""

    success: typing.ClassVar[typing.Literal[True]] = True
    has_value: typing.ClassVar[typing.Literal[False]] = False

    def as_dict(self) -> dict[str, typing.Any]:
        """Return the flag shape as a plain dict."""
        return {"success": True, "has_value": False}


@dataclasses.dataclass(frozen=True, slots=True)
class OkWithValue[T]:
    """A successful outcome carrying a value."""

    value: T

    success: typing.ClassVar[typing.Literal[True]] = True
    has_value: typing.ClassVar[typing.Literal[True]] = True

    def __post_init__(self) -> None:
        require_value(self.value, variant="OkWithValue")

    def as_dict(self) -> dict[str, typing.Any]:
        """Return the flag shape as a plain dict."""
        return {"success": True, "has_value": True, "value": self.value}


@dataclasses.dataclass(frozen=True, slots=True)
class Bad[R: ReasonType]:
    """A predictable failure described by a reason."""

    reason: R

    success: typing.ClassVar[typing.Literal[False]] = False
    has_value: typing.ClassVar[typing.Literal[False]] = False

    def __post_init__(self) -> None:
        check_reason(self.reason, variant="Bad")

    def as_dict(self) -> dict[str, typing.Any]:
        """Return the flag shape as a plain dict."""
        return {"success": False, "has_value": False, "reason": self.reason}


@dataclasses.dataclass(frozen=True, slots=True)
class BadWithValue[R: ReasonType, T]:
    """A predictable failure with a reason and an auxiliary value.

    The value is whatever helps the caller act on the failure: a diagnostic
    payload, the offending input, or a partial result.
    """

    reason: R
    value: T

    success: typing.ClassVar[typing.Literal[False]] = False
    has_value: typing.ClassVar[typing.Literal[True]] = True

    def __post_init__(self) -> None:
        check_reason(self.reason, variant="BadWithValue")
        require_value(self.value, variant="BadWithValue")

    def as_dict(self) -> dict[str, typing.Any]:
        """Return the flag shape as a plain dict."""
        return {
            "success": False,
            "has_value": True,
            "reason": self.reason,
            "value": self.value,
        }


OkResult = Ok | OkWithValue[T]
BadResult = Bad[R] | BadWithValue[R, T]
Result = Ok | OkWithValue[T] | Bad[R] | BadWithValue[R, T]

# Runtime counterparts of the aliases above, usable with isinstance()
OK_VARIANTS: tuple[type, ...] = (Ok, OkWithValue)
BAD_VARIANTS: tuple[type, ...] = (Bad, BadWithValue)
RESULT_VARIANTS: tuple[type, ...] = OK_VARIANTS + BAD_VARIANTS
