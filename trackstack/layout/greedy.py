"""
Greedy coloring layout

Deterministic coloring that assigns a whole independent set per round. With
the default order, wide features land in lower-numbered rows first, which
gives a stable visual ordering at the cost of sometimes using more rows than
the sweep.
"""
from __future__ import annotations
from typing import Dict, Optional, Union
import logging

from .coloring import color_by_rounds, get_vertex_order, id_order_as_index_order, widest_first
from .graph import OverlapGraph
from .strategy import LayoutStrategy
from ..types import EdgeFunction, IntervalId, VertexOrder

logger = logging.getLogger(__name__)


class GreedyColoringLayout(LayoutStrategy):
    """
    Per-round maximal independent set coloring with a pluggable vertex order

    The vertex order is called at the start of every round with the ids
    still uncolored and the full graph; it must return those ids in a total,
    deterministic order.
    """

    name = 'greedy'

    def __init__(
        self,
        tolerance: float = 0,
        vertex_order: Union[str, VertexOrder] = widest_first,
        strict: bool = False,
        edge_function: Optional[EdgeFunction] = None
    ):
        """
        Args:
            tolerance: Padding applied to both ends of every interval
            vertex_order: Callable (remaining_ids, graph) -> ordered ids, or
                          the name of a built-in order
            strict: Produce assignments that raise KeyError on unknown ids
            edge_function: Custom overlap predicate passed to OverlapGraph
        """
        super().__init__(tolerance, strict, edge_function)
        if isinstance(vertex_order, str):
            vertex_order = get_vertex_order(vertex_order)
        self.vertex_order = vertex_order

    def _assign_rows(self, graph: OverlapGraph) -> Dict[IntervalId, int]:
        colors = color_by_rounds(graph, id_order_as_index_order(graph, self.vertex_order))
        return {graph.intervals[v].id: c for v, c in colors.items()}
