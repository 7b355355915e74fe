"""Aggregate measurements over interval collections."""

from collections.abc import Iterable

from intervalgebra.gaps import Bounds, gaps, window
from intervalgebra.interval import Interval, Ivl
from intervalgebra.normalize import normalize


def total_length(intervals: Iterable[Interval]) -> int:
    """Total ``length`` covered, counting overlapping stretches once.

    Example:
        >>> total_length(from_pairs([(1, 4), (3, 6), (8, 10), (9, 12)]))
        9
    """
    return sum(interval.length for interval in normalize(intervals))


def count_intervals(intervals: Iterable[Interval], bounds: Bounds | None = None) -> int:
    """Number of intervals, or of those overlapping ``bounds`` when given."""
    if bounds is None:
        return sum(1 for _ in intervals)
    limits = window(bounds)
    return sum(1 for interval in intervals if interval.overlaps(limits))


def max_length(intervals: Iterable[Ivl]) -> Ivl | None:
    """The longest interval (first one on ties), or None if empty."""
    return max(intervals, key=lambda interval: interval.length, default=None)


def min_length(intervals: Iterable[Ivl]) -> Ivl | None:
    """The shortest interval (first one on ties), or None if empty."""
    return min(intervals, key=lambda interval: interval.length, default=None)


def coverage_ratio(intervals: Iterable[Interval], bounds: Bounds) -> float:
    """Fraction of the points in ``bounds`` covered by at least one interval.

    Bounds are inclusive, so the window ``(0, 9)`` holds ten points.
    """
    limits = window(bounds)
    span = limits.end - limits.start + 1
    free = sum(gap.end - gap.start + 1 for gap in gaps(normalize(intervals), limits))
    return (span - free) / span
