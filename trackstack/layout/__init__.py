"""
Layout Module for TrackStack
Row assignment for overlapping genomic annotations

Public API:
    - LayoutEngine: Config-driven entry point
    - OverlapGraph: Overlap relation over a set of intervals
    - IntervalSweepLayout: Exact sweep, optimal for interval overlap
    - GreedyColoringLayout: Deterministic independent-set coloring
    - HeuristicColoringLayout: Best of N randomized colorings
    - RowAssignment: Row per interval id plus row count
"""

from .types import Interval, RowAssignment, TrialResult, as_intervals
from .graph import OverlapGraph, intervals_overlap
from .coloring import VERTEX_ORDERS, widest_first, narrowest_first, leftmost_first, most_neighbors_first
from .strategy import LayoutStrategy
from .sweep import IntervalSweepLayout
from .greedy import GreedyColoringLayout
from .heuristic import HeuristicColoringLayout
from .engine import LayoutEngine, STRATEGIES, make_strategy

__all__ = [
    'Interval',
    'RowAssignment',
    'TrialResult',
    'as_intervals',
    'OverlapGraph',
    'intervals_overlap',
    'VERTEX_ORDERS',
    'widest_first',
    'narrowest_first',
    'leftmost_first',
    'most_neighbors_first',
    'LayoutStrategy',
    'IntervalSweepLayout',
    'GreedyColoringLayout',
    'HeuristicColoringLayout',
    'LayoutEngine',
    'STRATEGIES',
    'make_strategy',
]
