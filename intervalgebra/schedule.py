"""Greedy interval scheduling.

Scheduling uses the handoff convention: an interval ending at ``T`` does not
conflict with one starting at ``T``.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic

from intervalgebra.interval import Ivl
from intervalgebra.sweep import peak_concurrency


@dataclass(frozen=True)
class Selection(Generic[Ivl]):
    """Result of an activity selection.

    Attributes:
        kept: Mutually compatible intervals, ordered by end
        removed_count: How many input intervals had to be dropped
    """

    kept: list[Ivl]
    removed_count: int


def max_non_overlapping(intervals: Iterable[Ivl]) -> Selection[Ivl]:
    """Select a maximum set of mutually compatible intervals.

    Algorithm (earliest finish time): sort by ``(end, start)`` and keep each
    interval that starts no earlier than the end of the last kept one. Ties on
    end go to the earlier start, so a zero-length ``[t, t]`` is considered
    after any ``[s, t]`` and both are kept. Keeping the earliest finisher never
    hurts, so the selection is maximal in size and the removal count minimal.
    """
    kept: list[Ivl] = []
    removed = 0
    last_end = None
    for interval in sorted(intervals, key=lambda iv: (iv.end, iv.start)):
        if last_end is None or interval.start >= last_end:
            kept.append(interval)
            last_end = interval.end
        else:
            removed += 1
    return Selection(kept=kept, removed_count=removed)


def min_removal_for_no_overlap(intervals: Iterable[Ivl]) -> tuple[int, list[Ivl]]:
    """Return ``(removed_count, kept)`` for the fewest removals leaving no conflicts."""
    selection = max_non_overlapping(intervals)
    return selection.removed_count, selection.kept


def can_attend_all(intervals: Iterable[Ivl]) -> bool:
    """True if no two intervals conflict, so one person could attend them all."""
    return max_non_overlapping(intervals).removed_count == 0


def min_meeting_rooms(intervals: Iterable[Ivl]) -> int:
    """Minimum number of rooms needed to host every meeting.

    This is peak concurrency under the handoff convention; a meeting ending
    at ``T`` frees its room for one starting at ``T``.
    """
    rooms, _ = peak_concurrency(intervals, handoff=True)
    return rooms
