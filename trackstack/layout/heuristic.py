"""
Heuristic coloring layout

Repeats the per-round independent set coloring with a fresh random vertex
order every round and keeps the trial that used the fewest rows. More
trials never make the result worse and cost linear time.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator, Optional, Union
import logging

import numpy as np

from .coloring import color_by_rounds
from .graph import OverlapGraph
from .strategy import LayoutStrategy
from .types import RowAssignment, TrialResult, as_intervals
from ..types import EdgeFunction, IntervalId

logger = logging.getLogger(__name__)

RandomSource = Union[None, int, np.random.Generator]
"""None (fresh entropy), an integer seed, or a numpy Generator"""


class HeuristicColoringLayout(LayoutStrategy):
    """
    Best of n_iters randomized colorings

    Trials draw from one generator in sequence, so with the same seed the
    first k trials are identical whatever n_iters is. Ties between trials
    keep the earliest one.
    """

    name = 'heuristic'

    def __init__(
        self,
        tolerance: float = 0,
        n_iters: int = 100,
        rng: RandomSource = None,
        strict: bool = False,
        edge_function: Optional[EdgeFunction] = None
    ):
        """
        Args:
            tolerance: Padding applied to both ends of every interval
            n_iters: Number of trials (at least 1)
            rng: Random source; a seed or Generator makes trials reproducible
            strict: Produce assignments that raise KeyError on unknown ids
            edge_function: Custom overlap predicate passed to OverlapGraph
        """
        super().__init__(tolerance, strict, edge_function)
        if n_iters < 1:
            raise ValueError(f"n_iters must be at least 1, got {n_iters}")
        self.n_iters = n_iters
        self.rng = rng

    def _generator(self) -> np.random.Generator:
        # A Generator is used as is (and advanced); seeds and None get a new one per call
        if isinstance(self.rng, np.random.Generator):
            return self.rng
        return np.random.default_rng(self.rng)

    def iter_trials(self, intervals: Iterable[Any]) -> Iterator[TrialResult]:
        """
        Lazily run the trials and yield every outcome

        Args:
            intervals: Intervals (or anything Interval.coerce accepts)

        Yields:
            TrialResult per trial, in trial order (nothing for empty input)
        """
        ivs = as_intervals(intervals)
        if not ivs:
            return
        graph = self.build_graph(ivs)
        yield from self._trials(graph, self._generator())

    def _trials(self, graph: OverlapGraph, rng: np.random.Generator) -> Iterator[TrialResult]:
        for trial in range(self.n_iters):
            colors = color_by_rounds(graph, rng.permutation)
            row_map = {graph.intervals[v].id: c for v, c in colors.items()}
            row_count = max(colors.values()) + 1
            logger.debug(f"Trial {trial}: {row_count} rows")
            yield TrialResult(trial, row_count, row_map)

    def _assign_rows(self, graph: OverlapGraph) -> Dict[IntervalId, int]:
        best = _fewest_rows(self._trials(graph, self._generator()))
        logger.debug(f"Best of {self.n_iters} trials: trial {best.trial} with {best.row_count} rows")
        return dict(best.row_map)

    def _extra_stats(self, graph: OverlapGraph) -> Dict[str, Any]:
        return {'n_trials': self.n_iters}

    def best_of(self, trials: Iterable[TrialResult]) -> RowAssignment:
        """
        Reduce a stream of trial outcomes to the assignment with fewest rows

        Useful with iter_trials() when the trials are inspected as they run.
        """
        best = _fewest_rows(trials)
        if best is None:
            return RowAssignment.empty(self.name, self.strict)
        return RowAssignment.from_rows(best.row_map, self.name, self.strict,
                                       {'n_intervals': len(best.row_map), 'best_trial': best.trial})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tolerance={self.tolerance}, n_iters={self.n_iters})"


def _fewest_rows(trials: Iterable[TrialResult]) -> Optional[TrialResult]:
    """Trial with the fewest rows; the earliest one wins ties"""
    best: Optional[TrialResult] = None
    for result in trials:
        if best is None or result.row_count < best.row_count:
            best = result
    return best
