"""verdict: value-based results for operations that can predictably fail.

Public API:
    - ok(): Successful result, optionally carrying a value
    - bad(): Failed result with a reason, optionally carrying a value
    - make_reason_factory(): Reusable failure constructor for one reason
    - forbidden / not_authorized / not_found / validation_failed: Catalog
    - Ok, OkWithValue, Bad, BadWithValue: The four result variants

Expected failures are returned; faults are raised::

    from verdict import BadWithValue, OkWithValue, not_found, ok

    def find_user(user_id):
        user = repo.get(user_id)
        if user is None:
            return not_found(user_id)
        return ok(user)

    match find_user(7):
        case OkWithValue(user):
            ...
        case BadWithValue("NOT_FOUND", user_id):
            ...
"""

from __future__ import annotations

import logging

from verdict.core.construction import bad, from_fields, ok
from verdict.core.exceptions import (
    InvalidReasonError,
    InvariantViolationError,
    VerdictError,
)
from verdict.core.inspection import explain_invalid_result, is_bad, is_ok, is_result
from verdict.core.reasons import (
    CATALOG,
    FORBIDDEN,
    NOT_AUTHORIZED,
    NOT_FOUND,
    VALIDATION_FAILED,
    ReasonFactory,
    forbidden,
    make_reason_factory,
    not_authorized,
    not_found,
    validation_failed,
)
from verdict.core.result_primitives import (
    Bad,
    BadResult,
    BadWithValue,
    Ok,
    OkResult,
    OkWithValue,
    ReasonType,
    Result,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("verdict")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("verdict").addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Constructors
    "ok",
    "bad",
    "from_fields",
    "make_reason_factory",
    # Catalog
    "forbidden",
    "not_authorized",
    "not_found",
    "validation_failed",
    "CATALOG",
    "FORBIDDEN",
    "NOT_AUTHORIZED",
    "NOT_FOUND",
    "VALIDATION_FAILED",
    # Variants and aliases
    "Ok",
    "OkWithValue",
    "Bad",
    "BadWithValue",
    "OkResult",
    "BadResult",
    "Result",
    "ReasonType",
    "ReasonFactory",
    # Inspection
    "is_ok",
    "is_bad",
    "is_result",
    "explain_invalid_result",
    # Exceptions
    "VerdictError",
    "InvalidReasonError",
    "InvariantViolationError",
]
