"""Explicit lookup results for service calls that may come back empty.

``lookup`` awaits a service call and folds every way of not getting a record
into ``Absent``: a falsy return value, or any exception raised by the call.
Callers therefore cannot tell a failed service call from a missing record;
the original exception is kept on ``Absent.cause`` and logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """The service produced a record."""

    record: T


@dataclass(frozen=True)
class Absent:
    """The service produced nothing usable."""

    cause: BaseException | None = None


LookupResult = Union[Found[T], Absent]


async def lookup(call: Awaitable[T | None], **log_context: object) -> LookupResult[T]:
    """Await ``call`` and classify its outcome.

    Parameters
    ----------
    call:
        Awaitable service call, e.g. ``service.find_one(7)``.
    log_context:
        Extra fields attached to the warning logged when the call raises.
    """
    try:
        record = await call
    except Exception as exc:
        logger.warning(
            "Service call failed, treating as absent: %s",
            exc,
            extra={"error_reason": type(exc).__name__, **log_context},
        )
        return Absent(cause=exc)

    if not record:
        return Absent()
    return Found(record)
