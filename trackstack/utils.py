"""
Utility functions

General-purpose interval helpers used across TrackStack modules.
"""

from __future__ import annotations
from itertools import count
from typing import Any, Dict, Iterable, Iterator, List, Set

from .layout.graph import OverlapGraph, intervals_overlap
from .layout.types import Interval, as_intervals

__all__ = ['intervals_overlap', 'max_overlap_depth', 'condense_intervals', 'IdGenerator']


class IdGenerator:
    """
    Per-call source of '{prefix}-{n}' ids

    Counters start at 0 for every prefix and live only as long as the
    generator, so the same input always yields the same ids. Ids passed as
    taken, or handed out earlier, are never generated.

    Args:
        taken: Ids already in use
    """

    def __init__(self, taken: Iterable[str] = ()):
        self.taken: Set[str] = set(taken)
        self._counters: Dict[str, Iterator[int]] = {}

    def __call__(self, prefix: str) -> str:
        counter = self._counters.setdefault(prefix, count())
        while True:
            candidate = f"{prefix}-{next(counter)}"
            if candidate not in self.taken:
                self.taken.add(candidate)
                return candidate


def max_overlap_depth(intervals: Iterable[Any], tolerance: float = 0) -> int:
    """
    Largest number of intervals that pairwise overlap at a single point

    This is the clique number of the interval graph, and so the minimum
    number of rows any layout can use. Intervals are padded by tolerance/2
    on each side, which reproduces the overlap test with tolerance; touching
    endpoints count as overlapping. Inverted intervals (end < start) are
    counted over their sorted span, so with any of them present the result
    is only approximate and no longer a bound on the row count.

    Args:
        intervals: Intervals (or anything Interval.coerce accepts)
        tolerance: Same tolerance as passed to the layout

    Returns:
        Maximum overlap depth (0 for empty input)
    """
    pad = tolerance / 2
    events = []
    for iv in as_intervals(intervals):
        lo, hi = sorted((iv.start - pad, iv.end + pad))
        # Opens sort before closes at the same coordinate
        events.append((lo, 0))
        events.append((hi, 1))
    events.sort()

    depth = 0
    deepest = 0
    for _, kind in events:
        if kind == 0:
            depth += 1
            deepest = max(deepest, depth)
        else:
            depth -= 1
    return deepest


def condense_intervals(intervals: Iterable[Any], tolerance: float = 0) -> List[Interval]:
    """
    Merge intervals that are near each other into single spanning intervals

    Intervals end up in the same group when they are connected in the
    overlap graph. Saves rendering work in dense views; doing this as a
    pre-processing step on the data is preferable when possible.

    Args:
        intervals: Intervals (or anything Interval.coerce accepts)
        tolerance: Overlap tolerance used to build the graph

    Returns:
        One Interval per connected component, spanning all its members,
        with a 'condensed-group-N' id numbered from 0 on every call
    """
    graph = OverlapGraph(intervals, tolerance)
    new_id = IdGenerator()
    groups: List[Interval] = []
    for component in graph.components():
        groups.append(Interval(
            new_id('condensed-group'),
            min(iv.start for iv in component),
            max(iv.end for iv in component),
        ))
    return groups
