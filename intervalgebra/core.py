import bisect
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, Generic, Literal, overload

from typing_extensions import override

from intervalgebra.gaps import gaps
from intervalgebra.interval import Interval, IvlIn
from intervalgebra.normalize import insert_and_merge, normalize
from intervalgebra.query import covers
from intervalgebra.setops import difference, intersect, union


class IntervalSet:
    """Immutable normalized collection with set-algebra operators.

    ``|`` is union, ``&`` intersection (or filtering when given a Filter),
    ``-`` difference. Slicing clips to a window: ``busy[lo:hi]``.

    Example:
        >>> busy = IntervalSet(from_pairs([(9, 10), (12, 14)]))
        >>> more = IntervalSet(from_pairs([(10, 11), (13, 15)]))
        >>> list(busy | more)
        [Interval(start=9, end=11), Interval(start=12, end=15)]
        >>> list((busy | more).complement(9, 18))
        [Interval(start=16, end=18)]
    """

    def __init__(self, intervals: Iterable[Interval] = ()):
        self._intervals: tuple[Interval, ...] = tuple(normalize(intervals))

    @classmethod
    def _from_normalized(cls, intervals: Iterable[Interval]) -> "IntervalSet":
        instance = cls.__new__(cls)
        instance._intervals = tuple(intervals)
        return instance

    @property
    def intervals(self) -> list[Interval]:
        return list(self._intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def __contains__(self, point: Any) -> bool:
        idx = bisect.bisect_right(self._intervals, point, key=lambda iv: iv.start) - 1
        return idx >= 0 and self._intervals[idx].contains_point(point)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self._intervals == other._intervals

    @override
    def __hash__(self) -> int:
        return hash(self._intervals)

    @override
    def __repr__(self) -> str:
        return f"IntervalSet({', '.join(str(iv) for iv in self._intervals)})"

    def __getitem__(self, item: slice) -> "IntervalSet":
        if not isinstance(item, slice):
            raise TypeError(
                f"IntervalSet only supports slicing, got {type(item).__name__!r}.\n"
                f"Hint: clip with a window: busy[start:end]\n"
                f"      or iterate: list(busy)"
            )
        start = self._coerce_bound(item.start, "start")
        end = self._coerce_bound(item.stop, "end")
        clipped: list[Interval] = []
        for interval in self._intervals:
            if start is not None and interval.end < start:
                continue
            if end is not None and interval.start > end:
                break
            lo = interval.start if start is None else max(interval.start, start)
            hi = interval.end if end is None else min(interval.end, end)
            clipped.append(Interval(start=lo, end=hi))
        return IntervalSet._from_normalized(clipped)

    def _coerce_bound(self, bound: Any, edge: Literal["start", "end"]) -> int | None:
        if bound is None:
            return None
        if isinstance(bound, int) and not isinstance(bound, bool):
            return bound
        raise TypeError(
            f"IntervalSet slice {edge} bound must be int or None.\n"
            f"Got {type(bound).__name__!r}: {bound!r}\n"
            f"Hint: convert wall-clock times to integers before slicing:\n"
            f"  busy[int(start_dt.timestamp()):int(end_dt.timestamp())]"
        )

    def __or__(self, other: "IntervalSet | Filter[Any]") -> "IntervalSet":
        if isinstance(other, Filter):
            raise TypeError(
                f"Cannot union (|) an IntervalSet with a Filter.\n"
                f"Got: IntervalSet | {type(other).__name__}\n"
                f"Hint: Use & to apply filters: busy & (length >= 2)\n"
                f"      Use | to combine sets: busy_a | busy_b"
            )
        return IntervalSet._from_normalized(union(self._intervals, other._intervals))

    @overload
    def __and__(self, other: "IntervalSet") -> "IntervalSet": ...

    @overload
    def __and__(self, other: "Filter[Interval]") -> "IntervalSet": ...

    def __and__(self, other: "IntervalSet | Filter[Interval]") -> "IntervalSet":
        if isinstance(other, Filter):
            return IntervalSet._from_normalized(select(self._intervals, other))
        return IntervalSet._from_normalized(intersect(self._intervals, other._intervals))

    def __sub__(self, other: "IntervalSet") -> "IntervalSet":
        return IntervalSet._from_normalized(difference(self._intervals, other._intervals))

    def __invert__(self) -> "IntervalSet":
        raise ValueError(
            f"Complement (~) requires finite bounds.\n"
            f"Complement inverts a set, which requires a bounded universe.\n"
            f"Fix: Use explicit bounds: busy.complement(start, end)\n"
            f"Example: busy.complement(9, 18)"
        )

    def complement(self, lower: int, upper: int) -> "IntervalSet":
        """Free space within ``[lower, upper]``."""
        return IntervalSet._from_normalized(gaps(self._intervals, (lower, upper)))

    def gaps(self) -> list[Interval]:
        """Holes between neighbouring intervals (no outer window)."""
        return gaps(self._intervals)

    def covers(self, target: Interval) -> bool:
        return covers(self._intervals, target)

    def insert(self, interval: Interval) -> "IntervalSet":
        """Return a new set with ``interval`` merged in."""
        return IntervalSet._from_normalized(insert_and_merge(self._intervals, interval))


class Filter(ABC, Generic[IvlIn]):

    @abstractmethod
    def apply(self, event: IvlIn) -> bool:
        pass

    @overload
    def __or__(self, other: "Filter[IvlIn]") -> "Filter[IvlIn]": ...

    @overload
    def __or__(self, other: IntervalSet) -> "Filter[IvlIn]": ...

    def __or__(self, other: "Filter[IvlIn] | IntervalSet") -> "Filter[IvlIn]":
        if isinstance(other, IntervalSet):
            raise TypeError(
                f"Cannot union (|) a Filter with an IntervalSet.\n"
                f"Got: {type(self).__name__} | IntervalSet\n"
                f"Hint: Use & to apply filters: busy & (length >= 2)\n"
                f"      Use | to combine filters: (length >= 2) | (start < 30)"
            )
        return Or(self, other)

    @overload
    def __and__(self, other: "Filter[IvlIn]") -> "Filter[IvlIn]": ...

    @overload
    def __and__(self, other: IntervalSet) -> IntervalSet: ...

    def __and__(
        self, other: "Filter[IvlIn] | IntervalSet"
    ) -> "Filter[IvlIn] | IntervalSet":
        if isinstance(other, IntervalSet):
            return other & self  # pyright: ignore[reportOperatorIssue]
        return And(self, other)


class Or(Filter[IvlIn]):
    def __init__(self, *filters: Filter[IvlIn]):
        super().__init__()
        self.filters: tuple[Filter[IvlIn], ...] = filters

    @override
    def apply(self, event: IvlIn) -> bool:
        return any(f.apply(event) for f in self.filters)


class And(Filter[IvlIn]):
    def __init__(self, *filters: Filter[IvlIn]):
        super().__init__()
        self.filters: tuple[Filter[IvlIn], ...] = filters

    @override
    def apply(self, event: IvlIn) -> bool:
        return all(f.apply(event) for f in self.filters)


def select(intervals: Iterable[Any], filter: Filter[Any]) -> list[Any]:
    """Keep the intervals accepted by ``filter``, preserving order and subclass.

    Example:
        >>> select(meetings, (length >= 30) & (start >= 540))
    """
    return [interval for interval in intervals if filter.apply(interval)]

