"""Reusable failure constructors bound to a fixed reason.

``make_reason_factory`` lets a module name its own failures once::

    rate_limited = make_reason_factory("RATE_LIMITED")
    return rate_limited(retry_after_s)

The catalog below covers the cross-cutting categories most callers need.
The entries are ordinary top-level names and are also available by label
through ``CATALOG``.
"""

from __future__ import annotations

import dataclasses
import logging
from types import MappingProxyType
import typing

from verdict.core._validation import check_reason
from verdict.core.construction import bad
from verdict.core.result_primitives import Bad, BadWithValue, ReasonType

log = logging.getLogger(__name__)

FORBIDDEN: typing.Final = "FORBIDDEN"
NOT_AUTHORIZED: typing.Final = "NOT_AUTHORIZED"
NOT_FOUND: typing.Final = "NOT_FOUND"
VALIDATION_FAILED: typing.Final = "VALIDATION_FAILED"


@dataclasses.dataclass(frozen=True, slots=True)
class ReasonFactory[R: ReasonType]:
    """Callable that builds failures for one fixed reason.

    ``factory()`` equals ``bad(reason)`` and ``factory(value)`` equals
    ``bad(reason, value)``.
    """

    reason: R
    description: str | None = dataclasses.field(default=None, compare=False)

    @typing.overload
    def __call__(self, value: None = None) -> Bad[R]: ...
    @typing.overload
    def __call__[T](self, value: T) -> BadWithValue[R, T]: ...

    def __call__(
        self, value: typing.Any = None
    ) -> Bad[typing.Any] | BadWithValue[typing.Any, typing.Any]:
        return bad(self.reason, value)


def make_reason_factory[R: ReasonType](
    reason: R, *, description: str | None = None
) -> ReasonFactory[R]:
    """Return a reusable failure constructor bound to ``reason``.

    The reason is checked once here, so a malformed label fails where the
    factory is defined rather than at its first use.

    Args:
        reason: The fixed label or code of every failure the factory builds.
        description: Optional human-readable meaning of the reason.

    Raises:
        InvariantViolationError: If ``reason`` is None.
        InvalidReasonError: If ``reason`` is not a str label or an int code.
    """
    check_reason(reason, variant="ReasonFactory")
    log.debug("Created reason factory for %r", reason)
    return ReasonFactory(reason, description=description)


# --- Catalog ---

forbidden = ReasonFactory(
    FORBIDDEN,
    description="The current actor does not have sufficient rights to perform this operation.",
)
not_authorized = ReasonFactory(
    NOT_AUTHORIZED,
    description="The current actor is not authenticated, or its authentication cannot be verified.",
)
not_found = ReasonFactory(
    NOT_FOUND,
    description="The requested entity was not found.",
)
validation_failed = ReasonFactory(
    VALIDATION_FAILED,
    description="Validation of the input parameters has failed.",
)

CATALOG: typing.Mapping[str, ReasonFactory[str]] = MappingProxyType(
    {
        factory.reason: factory
        for factory in (forbidden, not_authorized, not_found, validation_failed)
    }
)
