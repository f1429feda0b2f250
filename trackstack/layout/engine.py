"""
Layout Engine for TrackStack
Picks and runs a row assignment strategy from a LayoutConfig

The rendering layer calls calculate_layout() once per render cycle and
positions every annotation at row * row_height.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, Optional
import logging

import pandas as pd

from .greedy import GreedyColoringLayout
from .heuristic import HeuristicColoringLayout
from .strategy import LayoutStrategy
from .sweep import IntervalSweepLayout
from .types import Interval, RowAssignment, as_intervals
from ..config import LayoutConfig
from ..utils import max_overlap_depth

logger = logging.getLogger(__name__)


def _interval_strategy(config: LayoutConfig) -> LayoutStrategy:
    return IntervalSweepLayout(config.tolerance, strict=config.strict_lookup)


def _greedy_strategy(config: LayoutConfig) -> LayoutStrategy:
    return GreedyColoringLayout(config.tolerance, config.vertex_order,
                                strict=config.strict_lookup)


def _heuristic_strategy(config: LayoutConfig) -> LayoutStrategy:
    return HeuristicColoringLayout(config.tolerance, config.n_iters, config.seed,
                                   strict=config.strict_lookup)


STRATEGIES: Dict[str, Callable[[LayoutConfig], LayoutStrategy]] = {
    'interval': _interval_strategy,
    'greedy': _greedy_strategy,
    'heuristic': _heuristic_strategy,
}


def make_strategy(config: LayoutConfig) -> LayoutStrategy:
    """
    Build the strategy named by config.strategy

    Raises:
        ValueError: If the strategy name is unknown
    """
    try:
        factory = STRATEGIES[config.strategy]
    except KeyError:
        raise ValueError(f"Invalid strategy: {config.strategy}. "
                         f"Use one of {sorted(STRATEGIES)}") from None
    return factory(config)


class LayoutEngine:
    """
    Row assignment for annotation tracks

    Algorithm (per call):
    1. Coerce the caller's records to Intervals
    2. Build the overlap graph with the configured tolerance
    3. Run the configured strategy to get a row per interval
    4. Return a fresh, read-only RowAssignment
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        """
        Initialize layout engine

        Args:
            config: Layout configuration (defaults if None)
        """
        self.config = config or LayoutConfig()
        self.strategy = make_strategy(self.config)

        logger.info(f"LayoutEngine initialized ({self.strategy!r})")

    def calculate_layout(self, intervals: Iterable[Any]) -> RowAssignment:
        """
        Calculate a row for every interval

        Args:
            intervals: Intervals, (id, start, end) tuples, mappings or
                       objects with id/start/end attributes

        Returns:
            RowAssignment (row_count 0 for empty input)
        """
        ivs = as_intervals(intervals)
        result = self.strategy.layout(ivs)

        if result.row_count and self.config.strategy != 'interval':
            if any(iv.width < 0 for iv in ivs):
                # Depth is not a lower bound once an end precedes its start
                logger.debug("Inverted intervals present, skipping overlap depth check")
            else:
                depth = max_overlap_depth(ivs, self.config.tolerance)
                if result.row_count > depth:
                    logger.warning(f"{self.config.strategy} layout used {result.row_count} rows, "
                                   f"{result.row_count - depth} more than the overlap depth {depth}")

        return result

    def layout_frame(
        self,
        df: pd.DataFrame,
        id_col: Optional[str] = 'id',
        start_col: str = 'start',
        end_col: str = 'end',
        row_col: str = 'row'
    ) -> pd.DataFrame:
        """
        Lay out the rows of a DataFrame

        Args:
            df: One annotation per row
            id_col: Column holding interval ids (None = use the index)
            start_col: Column holding start coordinates
            end_col: Column holding end coordinates
            row_col: Name of the output row column

        Returns:
            Copy of df with row_col added; df itself is left untouched
        """
        result_df = df.copy()
        if df.empty:
            result_df[row_col] = pd.Series(dtype=int)
            return result_df

        ids = df.index if id_col is None else df[id_col]
        intervals = [
            Interval(str(i), s, e)
            for i, s, e in zip(ids, df[start_col].tolist(), df[end_col].tolist())
        ]
        assignment = self.calculate_layout(intervals)

        result_df[row_col] = [assignment.row(iv.id) for iv in intervals]
        logger.info(f"Laid out {len(result_df)} annotations in {assignment.row_count} rows")
        return result_df
