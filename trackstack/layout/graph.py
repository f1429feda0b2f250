"""
Overlap graph for TrackStack

Represents annotations as a graph in which two annotations share an edge
if they horizontally overlap in semantic coordinate space.

Storage is arena style: intervals live in a tuple in input order, ids map to
indices, and adjacency is a boolean numpy matrix plus per-vertex neighbor
index arrays. Strategies that remove vertices while they work keep their own
removal mask and never touch the graph.
"""
from __future__ import annotations
from collections import deque
from typing import Dict, Iterable, List, Optional, Tuple, Any
import logging

import numpy as np

from .types import Interval, as_intervals
from ..types import EdgeFunction, IntervalId

logger = logging.getLogger(__name__)

_FLOAT_EXACT = 2 ** 53


def intervals_overlap(a: Interval, b: Interval, tolerance: float = 0) -> bool:
    """Default edge predicate: overlap after padding both ends by tolerance"""
    return a.overlaps(b, tolerance)


class OverlapGraph:
    """
    Overlap relation over a set of intervals

    Built once per layout call and read-only afterwards. Adjacency is
    symmetric and has no self-loops.
    """

    def __init__(
        self,
        intervals: Iterable[Any],
        tolerance: float = 0,
        edge_function: Optional[EdgeFunction] = None
    ):
        """
        Build the overlap graph

        Args:
            intervals: Intervals (or anything Interval.coerce accepts)
            tolerance: Padding applied to both ends of every interval
            edge_function: Custom predicate f(a, b, tolerance); the vectorised
                           overlap test is used when None

        Raises:
            ValueError: If two intervals share an id
        """
        self.tolerance = tolerance
        self._intervals: Tuple[Interval, ...] = tuple(as_intervals(intervals))
        self._index: Dict[IntervalId, int] = {}

        for idx, interval in enumerate(self._intervals):
            if interval.id in self._index:
                raise ValueError(f"Duplicate interval id: {interval.id}")
            self._index[interval.id] = idx

        if edge_function is None:
            self.adjacency = self._overlap_matrix(self._intervals, tolerance)
        else:
            self.adjacency = self._predicate_matrix(self._intervals, tolerance, edge_function)

        self._neighbors: List[np.ndarray] = [np.flatnonzero(row) for row in self.adjacency]

        logger.debug(f"OverlapGraph built: {self.n_vertices} vertices, {self.n_edges} edges, "
                     f"tolerance={tolerance}")

    @staticmethod
    def _overlap_matrix(intervals: Tuple[Interval, ...], tolerance: float) -> np.ndarray:
        """Pairwise overlap test over all intervals at once"""
        n = len(intervals)
        if n == 0:
            return np.zeros((0, 0), dtype=bool)
        coords = [c for iv in intervals for c in (iv.start, iv.end)]
        # float64 is exact only up to 2**53; larger ints compare as Python ints
        exact = any(isinstance(c, (int, np.integer)) and abs(int(c)) > _FLOAT_EXACT for c in coords)
        dtype = object if exact else float
        starts = np.array([iv.start for iv in intervals], dtype=dtype)
        ends = np.array([iv.end for iv in intervals], dtype=dtype)
        # Padded only when needed, so exact ints stay ints
        padded_starts, padded_ends = (starts - tolerance, ends + tolerance) if tolerance else (starts, ends)

        adjacency = ((padded_starts[:, None] <= ends[None, :])
                     & (padded_ends[:, None] >= starts[None, :])).astype(bool)
        np.fill_diagonal(adjacency, False)
        return adjacency

    @staticmethod
    def _predicate_matrix(
        intervals: Tuple[Interval, ...],
        tolerance: float,
        edge_function: EdgeFunction
    ) -> np.ndarray:
        """Pairwise evaluation of a custom predicate, symmetrised"""
        n = len(intervals)
        adjacency = np.zeros((n, n), dtype=bool)
        for i, a in enumerate(intervals):
            for j, b in enumerate(intervals):
                if i == j:
                    continue
                if edge_function(a, b, tolerance):
                    adjacency[i, j] = True
        return adjacency | adjacency.T

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    @property
    def n_vertices(self) -> int:
        return len(self._intervals)

    @property
    def n_edges(self) -> int:
        """Number of undirected edges"""
        return int(self.adjacency.sum()) // 2

    def __len__(self) -> int:
        return self.n_vertices

    def __contains__(self, interval_id: object) -> bool:
        return interval_id in self._index

    # ------------------------------------------------------------------
    # Queries by id
    # ------------------------------------------------------------------

    def vertices(self) -> List[IntervalId]:
        """Vertex ids in input order"""
        return [iv.id for iv in self._intervals]

    def neighbors(self, interval_id: IntervalId) -> List[IntervalId]:
        """Ids of the vertices sharing an edge with interval_id (empty if unknown)"""
        idx = self._index.get(interval_id)
        if idx is None:
            return []
        return [self._intervals[j].id for j in self._neighbors[idx]]

    def interval(self, interval_id: IntervalId) -> Interval:
        """
        Interval object for a vertex id

        Raises:
            KeyError: If the id is not in the graph
        """
        try:
            return self._intervals[self._index[interval_id]]
        except KeyError:
            raise KeyError(f"No interval with id: {interval_id} in overlap graph") from None

    def degree(self, interval_id: IntervalId) -> int:
        return len(self.neighbors(interval_id))

    def are_adjacent(self, a: IntervalId, b: IntervalId) -> bool:
        if a not in self._index or b not in self._index:
            return False
        return bool(self.adjacency[self._index[a], self._index[b]])

    # ------------------------------------------------------------------
    # Queries by index (used by the strategies)
    # ------------------------------------------------------------------

    @property
    def intervals(self) -> Tuple[Interval, ...]:
        return self._intervals

    def index_of(self, interval_id: IntervalId) -> int:
        return self._index[interval_id]

    def neighbor_indices(self, idx: int) -> np.ndarray:
        return self._neighbors[idx]

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def components(self) -> List[List[Interval]]:
        """
        Connected components, breadth first from the lowest unvisited index

        Returns:
            One list of Intervals per component, components in order of
            their first member
        """
        visited = np.zeros(self.n_vertices, dtype=bool)
        components: List[List[Interval]] = []

        for root in range(self.n_vertices):
            if visited[root]:
                continue
            visited[root] = True
            members = [root]
            queue = deque([root])
            while queue:
                v = queue.popleft()
                for u in self._neighbors[v]:
                    if not visited[u]:
                        visited[u] = True
                        members.append(int(u))
                        queue.append(int(u))
            components.append([self._intervals[i] for i in members])

        return components
