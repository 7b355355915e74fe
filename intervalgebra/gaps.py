"""Uncovered sub-ranges of normalized interval sequences."""

from collections.abc import Iterable, Sequence

from intervalgebra.checks import require_normalized
from intervalgebra.interval import Interval
from intervalgebra.normalize import normalize

Bounds = Interval | tuple[int, int]


def window(bounds: Bounds) -> Interval:
    """Coerce ``(lower, upper)`` or an Interval into a plain window Interval.

    Raises:
        ValidationError: If lower > upper
    """
    if isinstance(bounds, Interval):
        return Interval(start=bounds.start, end=bounds.end)
    lower, upper = bounds
    return Interval(start=lower, end=upper)


def gaps(
    normalized: Sequence[Interval], bounds: Bounds | None = None
) -> list[Interval]:
    """Return the maximal uncovered ranges of a normalized sequence.

    Without bounds only the holes between neighbours are reported. With
    ``bounds=(lower, upper)`` the sequence is inverted inside that window:
    intervals are clipped to it and leading/trailing free space is included.

    Example:
        >>> busy = normalize(from_pairs([(1, 5), (3, 7), (10, 14), (18, 22)]))
        >>> gaps(busy)
        [Interval(start=8, end=9), Interval(start=15, end=17)]
        >>> gaps(busy, (0, 24))
        [Interval(start=0, end=0), Interval(start=8, end=9), ...]
    """
    require_normalized(normalized, "gaps")

    if bounds is None:
        return [
            Interval(start=prev.end + 1, end=nxt.start - 1)
            for prev, nxt in zip(normalized, normalized[1:])
            if prev.end + 1 < nxt.start
        ]

    return list(_invert(normalized, window(bounds)))


def _invert(intervals: Iterable[Interval], bounds: Interval) -> Iterable[Interval]:
    # Cursor tracks the start of the next potential gap
    lower, upper = bounds.start, bounds.end
    cursor = lower

    for interval in intervals:
        if interval.end < lower:
            continue
        if interval.start > upper:
            break

        segment_start = max(interval.start, lower)
        segment_end = min(interval.end, upper)

        if segment_end < cursor:
            continue

        if segment_start > cursor:
            yield Interval(start=cursor, end=segment_start - 1)

        cursor = max(cursor, segment_end + 1)

        if cursor > upper:
            return

    if cursor <= upper:
        yield Interval(start=cursor, end=upper)


def free_slots(*calendars: Iterable[Interval], bounds: Bounds) -> list[Interval]:
    """Find time that is free in every calendar within ``bounds``.

    Busy intervals from all sources are unioned, then inverted inside the
    window.

    Example:
        >>> alice = from_pairs([(9, 10), (12, 14)])
        >>> bob = from_pairs([(10, 11), (13, 15)])
        >>> free_slots(alice, bob, bounds=(9, 18))
        [Interval(start=16, end=18)]
    """
    busy = normalize(interval for calendar in calendars for interval in calendar)
    return list(_invert(busy, window(bounds)))
