from .checks import PreconditionViolation
from .core import Filter, IntervalSet, select
from .gaps import free_slots, gaps
from .interval import Interval, ValidationError, from_pairs, sort_key, to_pairs
from .metrics import (
    count_intervals,
    coverage_ratio,
    max_length,
    min_length,
    total_length,
)
from .normalize import insert_and_merge, insert_sorted, normalize
from .properties import (
    Comparison,
    Property,
    contains_point,
    end,
    length,
    one_of,
    start,
)
from .query import IntervalIndex, covers, point_query
from .schedule import (
    Selection,
    can_attend_all,
    max_non_overlapping,
    min_meeting_rooms,
    min_removal_for_no_overlap,
)
from .setops import difference, intersect, intersection, pairwise_overlaps, union
from .sweep import depth_segments, overlap_counts, peak_concurrency, sweep_events

__all__ = [
    "Interval",
    "ValidationError",
    "PreconditionViolation",
    "from_pairs",
    "to_pairs",
    "sort_key",
    "normalize",
    "insert_and_merge",
    "insert_sorted",
    "intersect",
    "intersection",
    "union",
    "difference",
    "pairwise_overlaps",
    "gaps",
    "free_slots",
    "sweep_events",
    "overlap_counts",
    "depth_segments",
    "peak_concurrency",
    "Selection",
    "max_non_overlapping",
    "min_removal_for_no_overlap",
    "can_attend_all",
    "min_meeting_rooms",
    "point_query",
    "covers",
    "IntervalIndex",
    "IntervalSet",
    "Filter",
    "Property",
    "Comparison",
    "select",
    "one_of",
    "contains_point",
    "start",
    "end",
    "length",
    "total_length",
    "count_intervals",
    "max_length",
    "min_length",
    "coverage_ratio",
]
