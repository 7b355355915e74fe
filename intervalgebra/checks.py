"""Debug-only precondition checks for operations that require ordered input.

Operations such as ``insert_and_merge`` and ``intersect`` are linear because
they trust their caller to pass sorted (or fully normalized) sequences. The
checks here are skipped unless ``INTERVALGEBRA_CHECK_PRECONDITIONS`` is set,
so the default hot path never re-validates.
"""

import logging
from collections.abc import Sequence

from intervalgebra.config import settings
from intervalgebra.interval import Interval, sort_key

logger = logging.getLogger(__name__)


class PreconditionViolation(AssertionError):
    """Raised when checks are enabled and an input ordering contract is broken."""


def is_sorted(intervals: Sequence[Interval]) -> bool:
    return all(
        sort_key(prev) <= sort_key(nxt) for prev, nxt in zip(intervals, intervals[1:])
    )


def is_normalized(intervals: Sequence[Interval]) -> bool:
    """True if sorted by start with no two neighbours overlapping or touching."""
    return all(prev.end < nxt.start for prev, nxt in zip(intervals, intervals[1:]))


def require_sorted(intervals: Sequence[Interval], operation: str) -> None:
    if not settings.check_preconditions:
        return
    if not is_sorted(intervals):
        logger.debug("%s received unsorted input of %d intervals", operation, len(intervals))
        raise PreconditionViolation(
            f"{operation}() requires intervals sorted by (start, end).\n"
            f"Hint: sort first: sorted(intervals, key=sort_key)\n"
            f"      or normalize: normalize(intervals)"
        )


def require_normalized(intervals: Sequence[Interval], operation: str) -> None:
    if not settings.check_preconditions:
        return
    if not is_normalized(intervals):
        logger.debug(
            "%s received non-normalized input of %d intervals", operation, len(intervals)
        )
        raise PreconditionViolation(
            f"{operation}() requires a normalized sequence "
            f"(sorted, no overlapping or touching neighbours).\n"
            f"Hint: normalize first: {operation}(normalize(intervals), ...)"
        )
