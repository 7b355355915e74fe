import random
from dataclasses import dataclass

import pytest

from intervalgebra.checks import PreconditionViolation, is_normalized
from intervalgebra.interval import Interval, from_pairs, to_pairs
from intervalgebra.normalize import insert_and_merge, insert_sorted, normalize


@dataclass(frozen=True, kw_only=True)
class LabeledInterval(Interval):
    label: str


def random_intervals(rng: random.Random, count: int, span: int = 60) -> list[Interval]:
    result = []
    for _ in range(count):
        start = rng.randint(0, span)
        result.append(Interval(start=start, end=start + rng.randint(0, 8)))
    return result


def covered_points(intervals: list[Interval]) -> set[int]:
    return {p for interval in intervals for p in range(interval.start, interval.end + 1)}


def test_merges_overlapping_intervals() -> None:
    merged = normalize(from_pairs([(1, 3), (2, 6), (8, 10), (15, 18)]))

    assert to_pairs(merged) == [(1, 6), (8, 10), (15, 18)]


def test_touching_boundaries_merge() -> None:
    merged = normalize(from_pairs([(1, 3), (3, 5), (5, 7)]))

    assert to_pairs(merged) == [(1, 7)]


def test_adjacent_but_not_touching_stay_separate() -> None:
    merged = normalize(from_pairs([(1, 2), (3, 4)]))

    assert to_pairs(merged) == [(1, 2), (3, 4)]


def test_all_overlapping_collapse_to_one() -> None:
    merged = normalize(from_pairs([(1, 4), (2, 5), (3, 7), (6, 8)]))

    assert to_pairs(merged) == [(1, 8)]


def test_unsorted_and_nested_input() -> None:
    merged = normalize(from_pairs([(15, 18), (1, 10), (2, 3), (11, 12), (9, 11)]))

    assert to_pairs(merged) == [(1, 12), (15, 18)]


def test_empty_and_single() -> None:
    assert normalize([]) == []
    assert normalize([Interval(start=4, end=9)]) == [Interval(start=4, end=9)]


def test_accepts_generators_and_leaves_lists_untouched() -> None:
    source = from_pairs([(5, 6), (1, 2)])
    snapshot = list(source)

    assert to_pairs(normalize(iv for iv in source)) == [(1, 2), (5, 6)]
    assert source == snapshot


def test_returns_plain_intervals() -> None:
    merged = normalize(
        [
            LabeledInterval(start=1, end=3, label="a"),
            LabeledInterval(start=2, end=5, label="b"),
        ]
    )

    assert merged == [Interval(start=1, end=5)]
    assert all(type(interval) is Interval for interval in merged)


@pytest.mark.parametrize("seed", range(20))
def test_normalize_invariants(seed: int) -> None:
    rng = random.Random(seed)
    intervals = random_intervals(rng, rng.randint(0, 25))

    once = normalize(intervals)

    assert normalize(once) == once
    assert is_normalized(once)
    assert all(prev.end < nxt.start for prev, nxt in zip(once, once[1:]))
    assert covered_points(once) == covered_points(intervals)


def test_insert_and_merge_bridges_neighbours() -> None:
    existing = from_pairs([(1, 3), (6, 9), (12, 15)])

    result = insert_and_merge(existing, Interval(start=2, end=7))

    assert to_pairs(result) == [(1, 9), (12, 15)]
    assert to_pairs(existing) == [(1, 3), (6, 9), (12, 15)]


def test_insert_and_merge_into_gap() -> None:
    result = insert_and_merge(from_pairs([(1, 3), (6, 9)]), Interval(start=4, end=5))

    assert to_pairs(result) == [(1, 3), (4, 5), (6, 9)]


def test_insert_and_merge_touching_boundary() -> None:
    result = insert_and_merge(from_pairs([(1, 3), (6, 9)]), Interval(start=3, end=6))

    assert to_pairs(result) == [(1, 9)]


@pytest.mark.parametrize(
    "new, expected",
    [
        ((0, 0), [(0, 0), (2, 3), (6, 9)]),
        ((20, 25), [(2, 3), (6, 9), (20, 25)]),
        ((0, 30), [(0, 30)]),
        ((7, 8), [(2, 3), (6, 9)]),
    ],
)
def test_insert_and_merge_edges(new: tuple[int, int], expected: list[tuple[int, int]]) -> None:
    existing = from_pairs([(2, 3), (6, 9)])

    result = insert_and_merge(existing, Interval(start=new[0], end=new[1]))

    assert to_pairs(result) == expected


def test_insert_and_merge_into_empty() -> None:
    assert insert_and_merge([], Interval(start=1, end=2)) == [Interval(start=1, end=2)]


@pytest.mark.parametrize("seed", range(10))
def test_insert_and_merge_matches_normalize(seed: int) -> None:
    rng = random.Random(seed)
    existing = normalize(random_intervals(rng, 10))
    new = random_intervals(rng, 1)[0]

    assert insert_and_merge(existing, new) == normalize([*existing, new])


def test_insert_and_merge_precondition_checked(checked: None) -> None:
    with pytest.raises(PreconditionViolation, match="normalized"):
        insert_and_merge(from_pairs([(6, 9), (1, 3)]), Interval(start=4, end=4))


def test_insert_and_merge_precondition_unchecked_by_default() -> None:
    # Undefined output, but no exception on the hot path
    insert_and_merge(from_pairs([(6, 9), (1, 3)]), Interval(start=4, end=4))


def test_insert_sorted_places_without_merging() -> None:
    existing = from_pairs([(1, 3), (6, 9), (12, 15)])

    result = insert_sorted(existing, Interval(start=4, end=5))

    assert to_pairs(result) == [(1, 3), (4, 5), (6, 9), (12, 15)]
    assert len(existing) == 3


def test_insert_sorted_keeps_overlaps_and_subclass() -> None:
    existing = [
        LabeledInterval(start=1, end=5, label="a"),
        LabeledInterval(start=8, end=9, label="b"),
    ]
    new = LabeledInterval(start=1, end=6, label="c")

    result = insert_sorted(existing, new)

    assert [iv.label for iv in result] == ["a", "c", "b"]


def test_insert_sorted_precondition_checked(checked: None) -> None:
    with pytest.raises(PreconditionViolation, match="sorted"):
        insert_sorted(from_pairs([(6, 9), (1, 3)]), Interval(start=4, end=4))
