"""Sweep-line concurrency counting.

Every interval contributes a ``+1`` event where it opens and a ``-1`` event
where it closes. Events are kept as a sorted list of ``(point, delta)``
pairs with one entry per distinct point, and a running sum over that list
gives the number of active intervals.

Two closing conventions are supported:

- closed (default): an interval covers ``[start, end]`` inclusively, so it
  closes at ``end + 1``. Intervals that touch at a shared point count as
  concurrent there, matching how ``normalize`` merges touching intervals.
- handoff (``handoff=True``): an interval occupies ``[start, end)`` and closes
  at ``end``, so a slot ending at ``T`` frees its resource for one starting at
  ``T``. Zero-length intervals occupy nothing under this convention. This is
  the convention used for scheduling (meeting rooms).
"""

from collections import defaultdict
from collections.abc import Iterable

from intervalgebra.interval import Interval


def sweep_events(
    intervals: Iterable[Interval], *, handoff: bool = False
) -> list[tuple[int, int]]:
    """Return ``(point, net_delta)`` pairs sorted by point, zero deltas dropped."""
    deltas: defaultdict[int, int] = defaultdict(int)
    closing = 0 if handoff else 1
    for interval in intervals:
        deltas[interval.start] += 1
        deltas[interval.end + closing] -= 1
    return sorted((point, delta) for point, delta in deltas.items() if delta)


def overlap_counts(
    intervals: Iterable[Interval], *, handoff: bool = False
) -> dict[int, int]:
    """Map each event point to the number of intervals active from it onwards.

    Keys are ascending. The count at point ``p`` holds on ``[p, q - 1]`` where
    ``q`` is the next key; after the last key the count is zero.

    Example:
        >>> overlap_counts(from_pairs([(1, 4), (2, 6), (3, 5), (7, 9)]))
        {1: 1, 2: 2, 3: 3, 5: 2, 6: 1, 10: 0}
    """
    counts: dict[int, int] = {}
    running = 0
    for point, delta in sweep_events(intervals, handoff=handoff):
        running += delta
        counts[point] = running
    return counts


def depth_segments(
    intervals: Iterable[Interval], *, handoff: bool = False
) -> list[tuple[Interval, int]]:
    """Split covered space into maximal segments of constant, positive depth."""
    points = list(overlap_counts(intervals, handoff=handoff).items())
    segments: list[tuple[Interval, int]] = []
    for (point, count), (nxt, _) in zip(points, points[1:]):
        if count > 0:
            segments.append((Interval(start=point, end=nxt - 1), count))
    return segments


def peak_concurrency(
    intervals: Iterable[Interval], *, handoff: bool = False
) -> tuple[int, int | None]:
    """Return ``(count, point)`` for the first point of maximum concurrency.

    ``count`` is the minimum number of concurrent resources needed to host
    every interval. Empty input yields ``(0, None)``.
    """
    peak, peak_point = 0, None
    running = 0
    for point, delta in sweep_events(intervals, handoff=handoff):
        running += delta
        if running > peak:
            peak, peak_point = running, point
    return peak, peak_point
