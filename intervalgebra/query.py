"""Point and range containment queries."""

import bisect
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic

from intervalgebra.checks import require_normalized
from intervalgebra.interval import Interval, Ivl, sort_key


def point_query(intervals: Iterable[Ivl], point: Any) -> list[Ivl]:
    """Return every interval containing ``point``, in input order."""
    return [interval for interval in intervals if interval.contains_point(point)]


def covers(normalized: Sequence[Interval], target: Interval) -> bool:
    """True if a single interval of ``normalized`` fully contains ``target``.

    Callers must normalize first: two unmerged neighbours that jointly span
    the target do not count as containing it.
    """
    require_normalized(normalized, "covers")

    # Last interval starting at or before the target
    idx = bisect.bisect_right(normalized, target.start, key=lambda iv: iv.start) - 1
    return idx >= 0 and normalized[idx].contains(target)


class IntervalIndex(Generic[Ivl]):
    """Immutable sorted index over a static collection of intervals.

    Intervals are kept sorted by (start, end) together with a running max-end
    prefix, so lookups can skip everything that ends before the query and stop
    at the first interval starting after it.
    """

    def __init__(self, intervals: Iterable[Ivl]):
        self._intervals: tuple[Ivl, ...] = tuple(sorted(intervals, key=sort_key))

        # max_end_prefix[i] = max(interval.end for interval in intervals[:i+1])
        self._max_end_prefix: list[Any] = []
        for interval in self._intervals:
            if self._max_end_prefix:
                self._max_end_prefix.append(max(self._max_end_prefix[-1], interval.end))
            else:
                self._max_end_prefix.append(interval.end)

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self) -> Iterator[Ivl]:
        return iter(self._intervals)

    def overlapping(self, query: Interval) -> list[Ivl]:
        """All indexed intervals sharing at least one point with ``query``."""
        # Everything before the first max_end >= query.start ends too early
        start_idx = bisect.bisect_left(self._max_end_prefix, query.start)
        end_idx = bisect.bisect_right(
            self._intervals, query.end, key=lambda interval: interval.start
        )
        return [
            interval
            for interval in self._intervals[start_idx:end_idx]
            if interval.end >= query.start
        ]

    def at(self, point: Any) -> list[Ivl]:
        """All indexed intervals containing ``point``, ordered by (start, end)."""
        return self.overlapping(Interval(start=point, end=point))
