"""
TrackStack Configuration
Layout parameters supplied by the caller as plain in-memory values
"""
from dataclasses import dataclass
from typing import Optional

from .types import StrategyName


@dataclass
class LayoutConfig:
    """
    Row assignment configuration

    Selects the layout strategy and the parameters each strategy reads.
    Fields that a strategy does not use are ignored by it.
    """

    # ============================================================
    # STRATEGY
    # ============================================================
    strategy: StrategyName = 'interval'
    """Row assignment strategy: 'interval', 'greedy' or 'heuristic'"""

    # ============================================================
    # OVERLAP
    # ============================================================
    tolerance: float = 0.0
    """Padding added to both ends of each interval before testing overlap (coordinate units)"""

    # ============================================================
    # GREEDY COLORING
    # ============================================================
    vertex_order: str = 'widest_first'
    """Name of the vertex order used by the greedy strategy (see VERTEX_ORDERS)"""

    # ============================================================
    # HEURISTIC COLORING
    # ============================================================
    n_iters: int = 100
    """Number of randomized trials run by the heuristic strategy"""

    seed: Optional[int] = None
    """Seed for the heuristic random source (None = fresh entropy on every call)"""

    # ============================================================
    # LOOKUPS
    # ============================================================
    strict_lookup: bool = False
    """Raise KeyError when a row is requested for an unknown id (False = row 0)"""

    def __post_init__(self) -> None:
        if self.tolerance < 0:
            raise ValueError(f"Tolerance must be non-negative, got {self.tolerance}")
        if self.n_iters < 1:
            raise ValueError(f"n_iters must be at least 1, got {self.n_iters}")

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def padded(cls, tolerance: float) -> 'LayoutConfig':
        """
        Exact layout with visual breathing room between features

        Example:
            >>> config = LayoutConfig.padded(50)
            >>> engine = LayoutEngine(config)
        """
        return cls(tolerance=tolerance)

    @classmethod
    def reproducible(cls, seed: int = 0) -> 'LayoutConfig':
        """
        Heuristic layout with a fixed seed, for tests and screenshots
        """
        return cls(strategy='heuristic', seed=seed)

    @classmethod
    def thorough(cls) -> 'LayoutConfig':
        """
        Heuristic layout with many trials

        - 1000 trials instead of 100
        - Strict lookups so stale ids surface as errors
        """
        return cls(strategy='heuristic', n_iters=1000, strict_lookup=True)
