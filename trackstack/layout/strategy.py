"""
Base class for row assignment strategies
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional
import logging

from .graph import OverlapGraph
from .types import Interval, RowAssignment, as_intervals
from ..types import EdgeFunction, IntervalId

logger = logging.getLogger(__name__)


class LayoutStrategy(ABC):
    """
    Computes a RowAssignment from a list of intervals

    Subclasses implement _assign_rows() on a non-empty overlap graph. The
    base class handles input coercion, the empty-input short circuit and
    packaging the result.
    """

    name: str = 'abstract'

    def __init__(
        self,
        tolerance: float = 0,
        strict: bool = False,
        edge_function: Optional[EdgeFunction] = None
    ):
        """
        Args:
            tolerance: Padding applied to both ends of every interval
            strict: Produce assignments that raise KeyError on unknown ids
            edge_function: Custom overlap predicate passed to OverlapGraph
        """
        if tolerance < 0:
            raise ValueError(f"Tolerance must be non-negative, got {tolerance}")
        self.tolerance = tolerance
        self.strict = strict
        self.edge_function = edge_function

    def layout(self, intervals: Iterable[Any]) -> RowAssignment:
        """
        Assign a row to every interval

        Args:
            intervals: Intervals (or anything Interval.coerce accepts)

        Returns:
            RowAssignment; row_count is 0 for an empty input
        """
        ivs = as_intervals(intervals)
        if not ivs:
            logger.debug(f"{self.name}: empty input, 0 rows")
            return RowAssignment.empty(self.name, self.strict)

        graph = self.build_graph(ivs)
        row_map = self._assign_rows(graph)

        stats = {'n_intervals': graph.n_vertices, 'n_edges': graph.n_edges}
        stats.update(self._extra_stats(graph))
        result = RowAssignment.from_rows(row_map, self.name, self.strict, stats)

        logger.info(f"{self.name} layout: {len(ivs)} intervals, {graph.n_edges} overlaps "
                    f"-> {result.row_count} rows")
        return result

    __call__ = layout

    def build_graph(self, intervals: List[Interval]) -> OverlapGraph:
        return OverlapGraph(intervals, self.tolerance, self.edge_function)

    @abstractmethod
    def _assign_rows(self, graph: OverlapGraph) -> Dict[IntervalId, int]:
        """Row per interval id for a non-empty graph"""

    def _extra_stats(self, graph: OverlapGraph) -> Dict[str, Any]:
        return {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tolerance={self.tolerance})"
