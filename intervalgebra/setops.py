"""Union, intersection and difference between interval collections."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace
from functools import reduce

from intervalgebra.checks import require_sorted
from intervalgebra.gaps import _invert
from intervalgebra.interval import Interval, Ivl
from intervalgebra.normalize import normalize

logger = logging.getLogger(__name__)


def intersect(sorted_a: Sequence[Interval], sorted_b: Sequence[Interval]) -> list[Interval]:
    """Compute pairwise overlaps of two sorted lists with a two-pointer sweep.

    Algorithm: At each step the overlap of the current pair is
    ``[max(starts), min(ends)]``; it is emitted when non-empty. The pointer whose
    interval ends first then advances (either one on a tie).

    Both inputs must be sorted and internally non-overlapping for the result to
    be exact; this is only checked when precondition checks are enabled.

    Example:
        >>> a = from_pairs([(0, 2), (5, 10), (13, 23), (24, 25)])
        >>> b = from_pairs([(1, 5), (8, 12), (15, 24), (25, 26)])
        >>> to_pairs(intersect(a, b))
        [(1, 2), (5, 5), (8, 10), (15, 23), (24, 24), (25, 25)]
    """
    require_sorted(sorted_a, "intersect")
    require_sorted(sorted_b, "intersect")

    result: list[Interval] = []
    i = j = 0
    while i < len(sorted_a) and j < len(sorted_b):
        a, b = sorted_a[i], sorted_b[j]
        lo = max(a.start, b.start)
        hi = min(a.end, b.end)
        if lo <= hi:
            result.append(Interval(start=lo, end=hi))
        if a.end < b.end:
            i += 1
        else:
            j += 1
    return result


def union(*collections: Iterable[Interval]) -> list[Interval]:
    """Merge any number of collections into one normalized list."""

    if not collections:
        raise ValueError(
            f"union() requires at least one collection argument.\n"
            f"Example: union(busy_a, busy_b, busy_c)"
        )

    return normalize(interval for collection in collections for interval in collection)


def intersection(*collections: Iterable[Interval]) -> list[Interval]:
    """Points covered by every collection, as a normalized list.

    Each collection is normalized first, so unsorted or overlapping input is
    fine here (unlike :func:`intersect`).
    """

    if not collections:
        raise ValueError(
            f"intersection() requires at least one collection argument.\n"
            f"Example: intersection(shifts_a, shifts_b, shifts_c)"
        )

    # intersect() of two normalized lists is itself normalized
    return reduce(
        lambda acc, nxt: intersect(acc, normalize(nxt)),
        collections[1:],
        normalize(collections[0]),
    )


def difference(a: Iterable[Ivl], b: Iterable[Interval]) -> list[Ivl]:
    """Subtract the points covered by ``b`` from ``a``.

    Algorithm: For each interval of ``a`` (sorted), the normalized subtractors
    that touch it are inverted inside the interval's own bounds, which is the
    bounded gap search applied locally. Fragments are ``dataclasses.replace``
    copies, so subclass fields of ``a`` survive.

    Note: ``a`` is sorted but not merged; overlapping source intervals each
    produce their own fragments.
    """
    sources = sorted(a, key=lambda event: (event.start, event.end))
    subtractors = normalize(b)
    result: list[Ivl] = []

    k = 0
    for event in sources:
        # Sources are sorted by start, so subtractors ending before this
        # event cannot reach any later event either
        while k < len(subtractors) and subtractors[k].end < event.start:
            k += 1

        j = k
        while j < len(subtractors) and subtractors[j].start <= event.end:
            j += 1

        if j == k:
            result.append(event)
            continue

        for fragment in _invert(subtractors[k:j], event):
            result.append(replace(event, start=fragment.start, end=fragment.end))

    logger.debug(
        "difference of %d sources left %d fragments", len(sources), len(result)
    )
    return result


def pairwise_overlaps(
    intervals: Sequence[Ivl],
) -> list[tuple[Ivl, Ivl, Interval]]:
    """Every pair of overlapping intervals together with their shared range.

    Pairs are reported in input order ``(intervals[i], intervals[j])`` with
    ``i < j``. This is quadratic and meant for small rosters such as
    employee shifts.

    Example:
        >>> shifts = from_pairs([(8, 16), (10, 18), (12, 20)])
        >>> [str(shared) for _, _, shared in pairwise_overlaps(shifts)]
        ['[10, 16]', '[12, 16]', '[12, 18]']
    """
    found: list[tuple[Ivl, Ivl, Interval]] = []
    for i, first in enumerate(intervals):
        for second in intervals[i + 1 :]:
            shared = first.intersect(second)
            if shared is not None:
                found.append((first, second, shared))
    return found
