"""Outcome of a reconciliation and the shared error-handling policy."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    """What a reconciler asks of the controller after one pass."""

    requeue: bool = False
    requeue_after: float = 0.0


def _flatten(err: BaseException) -> Iterator[BaseException]:
    if isinstance(err, BaseExceptionGroup):
        for inner in err.exceptions:
            yield from _flatten(inner)
    else:
        yield err


def retry_if_error(err: BaseException | None) -> Result:
    """Log every error held in ``err`` and ask for a requeue if there was one.

    Exception groups are unpacked, so each contained error is logged on its own.
    """
    if err is None:
        return Result()
    for single in _flatten(err):
        logger.error("Failed reconciliation, %s", single)
    return Result(requeue=True)