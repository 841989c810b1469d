"""Public type aliases and re-exports for end-users.

This module provides a stable surface for annotating code that produces or
consumes results.

Example:
    ```python
    from verdict import bad, ok, types


    def find_user(user_id: int) -> types.Result[User, str]:
        user = repo.get(user_id)
        if user is None:
            return bad("NOT_FOUND", user_id)
        return ok(user)
    ```
"""

from __future__ import annotations

from verdict.core.reasons import ReasonFactory
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

__all__ = [  # noqa: RUF022
    # Variants
    "Ok",
    "OkWithValue",
    "Bad",
    "BadWithValue",
    # Aliases
    "OkResult",
    "BadResult",
    "Result",
    "ReasonType",
    # Factories
    "ReasonFactory",
]
