"""
Independent-set coloring shared by the greedy and heuristic strategies

Each round takes the remaining vertices in some order, walks them once and
gives the current color to every vertex none of whose neighbors has already
taken it this round. Colored vertices are then removed and the next round
works on what is left. Removal is a boolean mask over the graph's arena, so
the graph itself is never copied or modified.
"""
from __future__ import annotations
from collections import Counter
from typing import Callable, Dict, List, Sequence
import logging

import numpy as np

from .graph import OverlapGraph
from ..types import IntervalId, VertexOrder

logger = logging.getLogger(__name__)

IndexOrder = Callable[[np.ndarray], Sequence[int]]
"""Orders the remaining vertex indices of one round"""


def color_by_rounds(graph: OverlapGraph, order: IndexOrder) -> Dict[int, int]:
    """
    Color the graph one maximal independent set per round

    Args:
        graph: Overlap graph to color
        order: Called with the remaining vertex indices (ascending) at the
               start of each round; returns them in the order to visit

    Returns:
        Dict mapping vertex index to color (row)
    """
    n = graph.n_vertices
    remaining = np.ones(n, dtype=bool)
    colors: Dict[int, int] = {}
    color = 0

    while remaining.any():
        available = remaining.copy()
        for v in order(np.flatnonzero(remaining)):
            if not available[v]:
                continue
            colors[int(v)] = color
            available[graph.neighbor_indices(v)] = False
            available[v] = False
            remaining[v] = False
        color += 1

    logger.debug(f"Colored {n} vertices in {color} rounds")
    return colors


def id_order_as_index_order(graph: OverlapGraph, vertex_order: VertexOrder) -> IndexOrder:
    """
    Adapt an id-level vertex order to the index level used by color_by_rounds

    Raises:
        ValueError: If the order does not return exactly the remaining ids
    """
    def order(remaining: np.ndarray) -> List[int]:
        remaining_ids = [graph.intervals[i].id for i in remaining]
        ordered = list(vertex_order(list(remaining_ids), graph))
        if Counter(ordered) != Counter(remaining_ids):
            raise ValueError("Vertex order must return each remaining vertex id exactly once")
        return [graph.index_of(v) for v in ordered]

    return order


# ============================================================
# VERTEX ORDERS
# ============================================================
# Python's sort is stable, so ties keep input order and every order below
# is total and deterministic.

def widest_first(verts: List[IntervalId], graph: OverlapGraph) -> List[IntervalId]:
    """Larger width first"""
    return sorted(verts, key=lambda v: -graph.interval(v).width)


def narrowest_first(verts: List[IntervalId], graph: OverlapGraph) -> List[IntervalId]:
    return sorted(verts, key=lambda v: graph.interval(v).width)


def leftmost_first(verts: List[IntervalId], graph: OverlapGraph) -> List[IntervalId]:
    return sorted(verts, key=lambda v: graph.interval(v).start)


def most_neighbors_first(verts: List[IntervalId], graph: OverlapGraph) -> List[IntervalId]:
    """Highest degree in the full graph first (Welsh-Powell)"""
    return sorted(verts, key=lambda v: -graph.degree(v))


VERTEX_ORDERS: Dict[str, VertexOrder] = {
    'widest_first': widest_first,
    'narrowest_first': narrowest_first,
    'leftmost_first': leftmost_first,
    'most_neighbors_first': most_neighbors_first,
}


def get_vertex_order(name: str) -> VertexOrder:
    """Look up a built-in vertex order by name"""
    try:
        return VERTEX_ORDERS[name]
    except KeyError:
        raise ValueError(f"Unknown vertex order: {name}. "
                         f"Use one of {sorted(VERTEX_ORDERS)}") from None
