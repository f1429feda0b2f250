"""
Layout types for TrackStack
Data structures consumed and produced by the layout strategies

All types are immutable (frozen) for safety and testability.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..types import Coordinate, IntervalId, IntervalRecord, IntervalTuple


@dataclass(frozen=True)
class Interval:
    """
    Annotation extent in genomic coordinates

    Attributes:
        id: Identity, unique within one layout call
        start: Start coordinate
        end: End coordinate (half-open; end < start is accepted)
    """
    id: IntervalId
    start: Coordinate
    end: Coordinate

    @property
    def width(self) -> Coordinate:
        """Width in coordinate units (negative for inverted intervals)"""
        return self.end - self.start

    def overlaps(self, other: 'Interval', tolerance: float = 0) -> bool:
        """Whether the two intervals overlap once padded by tolerance"""
        if not tolerance:
            return self.start <= other.end and self.end >= other.start
        return (self.start - tolerance <= other.end
                and self.end + tolerance >= other.start)

    @classmethod
    def coerce(cls, obj: Union['Interval', IntervalRecord, IntervalTuple, Any]) -> 'Interval':
        """
        Build an Interval from a tuple, mapping or attribute-bearing object

        Args:
            obj: Interval, (id, start, end) tuple, mapping with id/start/end
                 keys, or any object with id/start/end attributes

        Returns:
            Interval (obj itself when it already is one)
        """
        if isinstance(obj, Interval):
            return obj
        if isinstance(obj, Mapping):
            try:
                return cls(obj['id'], obj['start'], obj['end'])
            except KeyError as e:
                raise ValueError(f"Interval mapping is missing key {e}") from e
        if all(hasattr(obj, attr) for attr in ('id', 'start', 'end')):
            return cls(obj.id, obj.start, obj.end)
        if isinstance(obj, (tuple, list)):
            if len(obj) != 3:
                raise ValueError(f"Interval tuple must be (id, start, end), got {obj!r}")
            return cls(obj[0], obj[1], obj[2])
        raise ValueError(f"Cannot interpret {obj!r} as an interval")


def as_intervals(items: Iterable[Any]) -> List[Interval]:
    """Coerce every item to an Interval, keeping input order"""
    return [Interval.coerce(item) for item in items]


@dataclass(frozen=True)
class TrialResult:
    """
    Outcome of one randomized coloring trial

    Attributes:
        trial: Zero-based trial index
        row_count: Number of rows the trial used
        row_map: Row index per interval id
    """
    trial: int
    row_count: int
    row_map: Mapping[IntervalId, int]


@dataclass(frozen=True)
class RowAssignment:
    """
    Row index per interval identity plus the number of rows used

    This is the output of every layout strategy and the only thing the
    rendering layer depends on.

    Attributes:
        row_map: Read-only mapping from interval id to row index
        row_count: 1 + highest row index used (0 for an empty layout)
        strategy: Name of the strategy that produced the assignment
        strict: Raise KeyError on lookups of unknown ids instead of returning 0
        layout_stats: Statistics about the layout
    """
    row_map: Mapping[IntervalId, int]
    row_count: int
    strategy: str = 'default'
    strict: bool = False
    layout_stats: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'row_map', MappingProxyType(dict(self.row_map)))

    @classmethod
    def from_rows(
        cls,
        row_map: Mapping[IntervalId, int],
        strategy: str,
        strict: bool = False,
        layout_stats: Optional[Dict[str, Any]] = None
    ) -> 'RowAssignment':
        """Build an assignment whose row count is derived from the map"""
        row_count = max(row_map.values()) + 1 if row_map else 0
        return cls(row_map, row_count, strategy, strict, layout_stats or {})

    @classmethod
    def empty(cls, strategy: str, strict: bool = False) -> 'RowAssignment':
        """Assignment for an empty input"""
        return cls({}, 0, strategy, strict, {'n_intervals': 0, 'n_edges': 0})

    @classmethod
    def default(cls) -> 'RowAssignment':
        """Flat layout used before any strategy has run: everything on row 0"""
        return cls({}, 1)

    def row(self, interval_id: IntervalId) -> int:
        """
        Row index for an interval id

        Unknown ids get row 0, unless the assignment is strict.
        """
        try:
            return self.row_map[interval_id]
        except KeyError:
            if self.strict:
                raise KeyError(f"No interval with id: {interval_id} in row assignment") from None
            return 0

    def rows(self) -> Dict[int, List[IntervalId]]:
        """Interval ids grouped by row, rows in ascending order"""
        grouped: Dict[int, List[IntervalId]] = {r: [] for r in range(self.row_count)}
        for interval_id, r in self.row_map.items():
            grouped[r].append(interval_id)
        return grouped

    def __getitem__(self, interval_id: IntervalId) -> int:
        return self.row(interval_id)

    def __contains__(self, interval_id: object) -> bool:
        return interval_id in self.row_map

    def __len__(self) -> int:
        return len(self.row_map)
