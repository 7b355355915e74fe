"""Named projections of an interval and the filters built by comparing them.

A ``Property`` reads one value off an interval. Comparing it with ``<``,
``<=``, ``==``, ``!=``, ``>=`` or ``>`` does not evaluate anything; it builds a
``Comparison`` filter that ``select`` or ``IntervalSet & filter`` applies later.

Example:
    >>> select(from_pairs([(1, 2), (4, 9), (12, 13)]), (length >= 3) | (start > 10))
    [Interval(start=4, end=9), Interval(start=12, end=13)]
"""

import operator as op
from collections.abc import Callable, Hashable, Iterable
from typing import Any, Generic

from typing_extensions import override

from intervalgebra.core import Filter
from intervalgebra.interval import Interval, IvlIn

RELATIONS: dict[str, Callable[[Any, Any], bool]] = {
    "<": op.lt,
    "<=": op.le,
    "==": op.eq,
    "!=": op.ne,
    ">=": op.ge,
    ">": op.gt,
    "in": lambda value, values: value in values,
}


class Property(Generic[IvlIn]):
    def __init__(self, name: str, read: Callable[[IvlIn], Any]):
        self.name: str = name
        self._read: Callable[[IvlIn], Any] = read

    def value(self, interval: IvlIn) -> Any:
        return self._read(interval)

    @override
    def __repr__(self) -> str:
        return self.name

    def __lt__(self, operand: Any) -> "Comparison[IvlIn]":
        return Comparison(self, "<", operand)

    def __le__(self, operand: Any) -> "Comparison[IvlIn]":
        return Comparison(self, "<=", operand)

    def __gt__(self, operand: Any) -> "Comparison[IvlIn]":
        return Comparison(self, ">", operand)

    def __ge__(self, operand: Any) -> "Comparison[IvlIn]":
        return Comparison(self, ">=", operand)

    @override
    def __eq__(  # pyright: ignore[reportIncompatibleMethodOverride]
        self, operand: Any
    ) -> "Comparison[IvlIn]":
        return Comparison(self, "==", operand)

    @override
    def __ne__(  # pyright: ignore[reportIncompatibleMethodOverride]
        self, operand: Any
    ) -> "Comparison[IvlIn]":
        return Comparison(self, "!=", operand)


class Comparison(Filter[IvlIn]):
    """Accepts intervals whose ``prop`` value stands in ``relation`` to ``operand``.

    ``operand`` may itself be a Property, in which case it is read off the same
    interval, so ``start == end`` selects zero-length intervals.
    """

    def __init__(self, prop: Property[IvlIn], relation: str, operand: Any):
        if relation not in RELATIONS:
            raise ValueError(
                f"Unknown relation {relation!r}.\n"
                f"Expected one of: {', '.join(RELATIONS)}"
            )
        self.prop: Property[IvlIn] = prop
        self.relation: str = relation
        self.operand: Any = operand

    @override
    def apply(self, event: IvlIn) -> bool:
        right = (
            self.operand.value(event)
            if isinstance(self.operand, Property)
            else self.operand
        )
        return RELATIONS[self.relation](self.prop.value(event), right)

    @override
    def __repr__(self) -> str:
        return f"{self.prop!r} {self.relation} {self.operand!r}"


start: Property[Interval] = Property("start", lambda interval: interval.start)
end: Property[Interval] = Property("end", lambda interval: interval.end)
length: Property[Interval] = Property("length", lambda interval: interval.length)


def one_of(prop: Property[IvlIn], values: Iterable[Hashable]) -> Comparison[IvlIn]:
    return Comparison(prop, "in", frozenset(values))


class ContainsPoint(Filter[Interval]):
    def __init__(self, point: Any):
        self.point: Any = point

    @override
    def apply(self, event: Interval) -> bool:
        return event.contains_point(self.point)


def contains_point(point: Any) -> ContainsPoint:
    """Filter accepting intervals that contain ``point``."""
    return ContainsPoint(point)
