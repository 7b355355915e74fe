"""Reduce interval collections to sorted, non-overlapping canonical form."""

import bisect
import logging
from collections.abc import Iterable, Sequence

from intervalgebra.checks import require_normalized, require_sorted
from intervalgebra.interval import Interval, Ivl, sort_key

logger = logging.getLogger(__name__)


def normalize(intervals: Iterable[Interval]) -> list[Interval]:
    """Sort and merge intervals into a normalized list.

    Intervals that overlap, including ones that only share a boundary point
    (``[1, 3]`` and ``[3, 5]``), are coalesced into their hull. The result is
    ordered by start and neighbours never overlap or touch.

    Note: Returns plain Interval objects (subclass fields are lost).

    Example:
        >>> normalize(from_pairs([(1, 3), (2, 6), (8, 10), (15, 18)]))
        [Interval(start=1, end=6), Interval(start=8, end=10), Interval(start=15, end=18)]
    """
    ordered = sorted(intervals, key=sort_key)
    if not ordered:
        return []

    merged: list[Interval] = []
    lo, hi = ordered[0].start, ordered[0].end
    for interval in ordered[1:]:
        if interval.start <= hi:
            hi = max(hi, interval.end)
        else:
            merged.append(Interval(start=lo, end=hi))
            lo, hi = interval.start, interval.end
    merged.append(Interval(start=lo, end=hi))

    logger.debug("normalized %d intervals into %d", len(ordered), len(merged))
    return merged


def insert_and_merge(normalized: Sequence[Interval], new: Interval) -> list[Interval]:
    """Insert ``new`` into a normalized sequence, merging whatever it overlaps.

    ``normalized`` must already be normalized; this is not checked unless
    precondition checks are enabled in settings. Runs in O(n) and leaves the
    input untouched.
    """
    require_normalized(normalized, "insert_and_merge")

    result: list[Interval] = []
    i = 0
    count = len(normalized)

    # Strictly before the new interval
    while i < count and normalized[i].end < new.start:
        result.append(normalized[i])
        i += 1

    lo, hi = new.start, new.end
    while i < count and normalized[i].start <= hi:
        lo = min(lo, normalized[i].start)
        hi = max(hi, normalized[i].end)
        i += 1
    result.append(Interval(start=lo, end=hi))

    result.extend(normalized[i:])
    return result


def insert_sorted(intervals: Sequence[Ivl], new: Ivl) -> list[Ivl]:
    """Return a copy of sorted ``intervals`` with ``new`` at its ordered position.

    No merging happens; overlapping neighbours are kept as they are.
    """
    require_sorted(intervals, "insert_sorted")

    position = bisect.bisect_right(intervals, sort_key(new), key=sort_key)
    return [*intervals[:position], new, *intervals[position:]]
