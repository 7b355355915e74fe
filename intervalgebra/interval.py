from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypeVar


class ValidationError(ValueError):
    """Raised when an interval is constructed with start > end."""


@dataclass(frozen=True, kw_only=True)
class Interval:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValidationError(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"

    @property
    def length(self) -> int:
        return self.end - self.start

    def overlaps(self, other: "Interval") -> bool:
        """True if the two closed ranges share at least one point."""
        return self.start <= other.end and other.start <= self.end

    def contains(self, other: "Interval") -> bool:
        return self.start <= other.start and self.end >= other.end

    def contains_point(self, point: Any) -> bool:
        return self.start <= point <= self.end

    def merge(self, other: "Interval") -> "Interval":
        """Return the hull of both ranges as a plain Interval."""
        return Interval(
            start=min(self.start, other.start), end=max(self.end, other.end)
        )

    def intersect(self, other: "Interval") -> "Interval | None":
        lo = max(self.start, other.start)
        hi = min(self.end, other.end)
        return Interval(start=lo, end=hi) if lo <= hi else None

    # Natural order is (start, end) regardless of subclass fields
    def __lt__(self, other: "Interval") -> bool:
        return sort_key(self) < sort_key(other)

    def __le__(self, other: "Interval") -> bool:
        return sort_key(self) <= sort_key(other)

    def __gt__(self, other: "Interval") -> bool:
        return sort_key(self) > sort_key(other)

    def __ge__(self, other: "Interval") -> bool:
        return sort_key(self) >= sort_key(other)


def sort_key(interval: Interval) -> tuple[Any, Any]:
    return (interval.start, interval.end)


def from_pairs(pairs: Iterable[tuple[int, int] | list[int]]) -> list[Interval]:
    """Build intervals from ``[(start, end), ...]`` style input.

    Example:
        >>> from_pairs([(1, 3), (2, 6)])
        [Interval(start=1, end=3), Interval(start=2, end=6)]
    """
    return [Interval(start=lo, end=hi) for lo, hi in pairs]


def to_pairs(intervals: Iterable[Interval]) -> list[tuple[int, int]]:
    return [(interval.start, interval.end) for interval in intervals]


IvlIn = TypeVar("IvlIn", bound="Interval", contravariant=True)
Ivl = TypeVar("Ivl", bound="Interval")
