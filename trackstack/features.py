"""
Biopython feature adapter

Turns in-memory Bio.SeqFeature.SeqFeature objects (as produced by SeqIO or
BCBio.GFF) into Intervals for layout. Reading the files themselves is left
to the caller.
"""

from __future__ import annotations
from typing import Iterable, List, Optional
import logging

from Bio.SeqFeature import SeqFeature

from .layout.types import Interval
from .utils import IdGenerator

logger = logging.getLogger(__name__)


def feature_id(feature: SeqFeature, id_qualifier: str = 'ID') -> Optional[str]:
    """
    Identity of a feature: its id, else the first value of id_qualifier

    Returns:
        The id, or None if the feature carries neither
    """
    if feature.id and feature.id != '<unknown id>':
        return str(feature.id)
    values = feature.qualifiers.get(id_qualifier)
    if values:
        return str(values[0]) if isinstance(values, (list, tuple)) else str(values)
    return None


def intervals_from_features(
    features: Iterable[SeqFeature],
    id_qualifier: str = 'ID'
) -> List[Interval]:
    """
    Convert Biopython features to Intervals

    Args:
        features: SeqFeature objects with a location
        id_qualifier: Qualifier consulted when feature.id is unset

    Returns:
        Intervals in input order; features without a location are skipped.
        Features with no id get '{type}-{n}', numbered from 0 per call and
        skipping ids other features already carry
    """
    features = list(features)
    located = [f for f in features if f.location is not None]
    skipped = len(features) - len(located)
    ids = [feature_id(f, id_qualifier) for f in located]
    new_id = IdGenerator(taken=[i for i in ids if i is not None])

    intervals: List[Interval] = []
    for feature, interval_id in zip(located, ids):
        intervals.append(Interval(
            interval_id or new_id(feature.type or 'feature'),
            int(feature.location.start),
            int(feature.location.end),
        ))

    if skipped:
        logger.warning(f"Skipped {skipped} features without a location")
    logger.debug(f"Converted {len(intervals)} features to intervals")
    return intervals
