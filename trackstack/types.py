"""
Type definitions for TrackStack

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from typing import TypedDict, Literal, List, Tuple, Union, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from .layout.graph import OverlapGraph

# Type aliases
IntervalId = str
"""Identity of an annotation, unique within one layout call"""

Coordinate = Union[int, float]
"""Genomic coordinate in semantic (not pixel) space"""

StrategyName = Literal['interval', 'greedy', 'heuristic']
"""Name of a row assignment strategy"""

IntervalTuple = Tuple[IntervalId, Coordinate, Coordinate]
"""Interval as (id, start, end) tuple"""

VertexOrder = Callable[[List[IntervalId], 'OverlapGraph'], List[IntervalId]]
"""Orders the remaining vertex ids of a coloring round"""

EdgeFunction = Callable[..., bool]
"""Edge predicate called as f(a, b, tolerance) on two Intervals"""


# Structured data types

class IntervalRecord(TypedDict):
    """Interval as a plain mapping"""
    id: IntervalId
    start: Coordinate
    end: Coordinate
