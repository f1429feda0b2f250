"""TrackStack: Row assignment layout engine for genomic annotation tracks"""

from .config import LayoutConfig
from .layout import (
    Interval,
    RowAssignment,
    OverlapGraph,
    IntervalSweepLayout,
    GreedyColoringLayout,
    HeuristicColoringLayout,
    LayoutEngine,
)
from . import utils
from .features import intervals_from_features

__version__ = "0.1.0"
__all__ = ["LayoutConfig", "Interval", "RowAssignment", "OverlapGraph", "IntervalSweepLayout",
           "GreedyColoringLayout", "HeuristicColoringLayout", "LayoutEngine", "utils",
           "intervals_from_features"]
