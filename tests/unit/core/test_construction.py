from __future__ import annotations

import pytest

from verdict import (
    Bad,
    BadWithValue,
    InvariantViolationError,
    Ok,
    OkWithValue,
    bad,
    from_fields,
    ok,
)

pytestmark = pytest.mark.unit


# =============================================================================
# ok()
# =============================================================================


@pytest.mark.smoke
def test_ok_without_value() -> None:
    result = ok()

    assert result == Ok()
    assert result.as_dict() == {"success": True, "has_value": False}


def test_ok_with_value() -> None:
    result = ok(42)

    assert isinstance(result, OkWithValue)
    assert result.as_dict() == {"success": True, "has_value": True, "value": 42}


def test_ok_none_is_the_same_as_no_value() -> None:
    """Passing None collapses to ok(); None is never carried as a payload."""
    assert ok(None) == ok()
    assert not hasattr(ok(None), "value")


def test_ok_keeps_the_same_object() -> None:
    payload = {"id": 1}
    assert ok(payload).value is payload


@pytest.mark.parametrize("falsy", [0, "", False, [], 0.0])
def test_ok_carries_falsy_values(falsy: object) -> None:
    result = ok(falsy)
    assert result.has_value is True
    assert result.value == falsy


# =============================================================================
# bad()
# =============================================================================


@pytest.mark.smoke
def test_bad_without_value() -> None:
    result = bad("NOT_FOUND")

    assert result == Bad("NOT_FOUND")
    assert result.as_dict() == {
        "success": False,
        "has_value": False,
        "reason": "NOT_FOUND",
    }


def test_bad_with_value() -> None:
    result = bad("VALIDATION_FAILED", {"field": "email"})

    assert isinstance(result, BadWithValue)
    assert result.reason == "VALIDATION_FAILED"
    assert result.value == {"field": "email"}


def test_bad_none_value_degrades_to_bad() -> None:
    assert bad("NOT_FOUND", None) == bad("NOT_FOUND")


def test_bad_accepts_numeric_codes() -> None:
    result = bad(404, "/missing")
    assert result.reason == 404
    assert result.value == "/missing"


def test_bad_does_not_raise_for_failures() -> None:
    """Building a failure is just building a value."""
    result = bad("FORBIDDEN")
    assert result.success is False


def test_bad_without_reason_is_a_fault() -> None:
    with pytest.raises(InvariantViolationError):
        bad(None)  # type: ignore[call-overload]


# =============================================================================
# from_fields()
# =============================================================================


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({"success": True}, Ok()),
        ({"success": True, "value": 1}, OkWithValue(1)),
        ({"success": False, "reason": "X"}, Bad("X")),
        ({"success": False, "reason": "X", "value": 1}, BadWithValue("X", 1)),
        ({"success": True, "value": 0, "has_value": True}, OkWithValue(0)),
    ],
)
def test_from_fields_builds_matching_variant(
    kwargs: dict[str, object], expected: object
) -> None:
    assert from_fields(**kwargs) == expected  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"success": True, "reason": "X"},
        {"success": False},
        {"success": True, "has_value": True},
        {"success": False, "reason": "X", "value": 1, "has_value": False},
    ],
)
def test_from_fields_rejects_contradictions(kwargs: dict[str, object]) -> None:
    with pytest.raises(InvariantViolationError):
        from_fields(**kwargs)  # type: ignore[arg-type]
