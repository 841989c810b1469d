"""Type guards and structural checks for results.

Callers branch on ``success`` first, then ``has_value``. The guards here do
the same while narrowing the static type. ``explain_invalid_result`` is the
diagnostic counterpart: it also accepts the ``as_dict()`` shape, which is
convenient when a result has been flattened for logging or test fixtures.
"""

from __future__ import annotations

from collections.abc import Mapping
import typing
from typing import TypeGuard

from verdict.core._validation import is_reason_type
from verdict.core.result_primitives import (
    BAD_VARIANTS,
    RESULT_VARIANTS,
    BadResult,
    OkResult,
    Result,
)

_SHAPE_KEYS = frozenset({"success", "has_value", "reason", "value"})


def is_ok(result: Result[typing.Any, typing.Any]) -> TypeGuard[OkResult[typing.Any]]:
    """Return True if ``result`` is a success (with or without a value)."""
    return result.success


def is_bad(
    result: Result[typing.Any, typing.Any],
) -> TypeGuard[BadResult[typing.Any, typing.Any]]:
    """Return True if ``result`` is a failure (with or without a value)."""
    return not result.success


def _validate_instance(obj: object) -> str | None:
    name = type(obj).__name__
    if isinstance(obj, BAD_VARIANTS):
        reason = getattr(obj, "reason", None)
        if not is_reason_type(reason):
            return f"{name}.reason must be str or int, got {type(reason).__name__}"
    if getattr(obj, "has_value", False) and getattr(obj, "value", None) is None:
        return f"{name}.value must not be None"
    return None


def _validate_mapping(obj: Mapping[typing.Any, typing.Any]) -> str | None:
    unknown = set(obj) - _SHAPE_KEYS
    if unknown:
        return f"unknown keys: {sorted(map(str, unknown))}"
    success = obj.get("success")
    if not isinstance(success, bool):
        return "'success' must be a bool"
    has_value = obj.get("has_value")
    if not isinstance(has_value, bool):
        return "'has_value' must be a bool"
    if success and "reason" in obj:
        return "'reason' must be absent when success is True"
    if not success:
        if "reason" not in obj:
            return "'reason' is required when success is False"
        if not is_reason_type(obj["reason"]):
            return f"'reason' must be str or int, got {type(obj['reason']).__name__}"
    if has_value and obj.get("value") is None:
        return "'value' must be present and not None when has_value is True"
    if not has_value and "value" in obj:
        return "'value' must be absent when has_value is False"
    return None


def explain_invalid_result(obj: object) -> str | None:
    """Return a concise reason when ``obj`` is not a valid result.

    Accepts variant instances and mappings in the ``as_dict()`` shape.
    Returns None when the object satisfies the result invariants.

    Instances are rechecked as well, since frozen dataclasses can still be
    altered through ``object.__setattr__``.
    """
    if isinstance(obj, RESULT_VARIANTS):
        return _validate_instance(obj)
    if isinstance(obj, Mapping):
        return _validate_mapping(obj)
    return (
        "result must be Ok, OkWithValue, Bad, BadWithValue or a mapping, "
        f"got {type(obj).__name__}"
    )


def is_result(obj: object) -> TypeGuard[Result[typing.Any, typing.Any]]:
    """Return True if ``obj`` is a variant instance satisfying the invariants."""
    return isinstance(obj, RESULT_VARIANTS) and explain_invalid_result(obj) is None

