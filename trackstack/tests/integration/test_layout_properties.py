"""
TrackStack Integration Tests

Runs every strategy on generated interval sets and checks the properties
the rendering layer relies on:
- No two overlapping intervals share a row
- The sweep uses exactly the overlap depth
- No strategy beats the overlap depth
- Row indices are dense (0 .. row_count-1) and cover every interval

Run: pytest trackstack/tests/integration/ -v
"""
import pytest

from trackstack import LayoutConfig, LayoutEngine
from trackstack.utils import max_overlap_depth

STRATEGIES = ['interval', 'greedy', 'heuristic']
SEEDS = [0, 1, 2, 3, 4]
TOLERANCES = [0, 7]


def _engine(strategy, tolerance):
    return LayoutEngine(LayoutConfig(strategy=strategy, tolerance=tolerance, n_iters=20, seed=99))


# ============================================================================
# NO-COLLISION INVARIANT
# ============================================================================

@pytest.mark.integration
@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("tolerance", TOLERANCES)
def test_no_collisions(random_intervals, no_collisions, strategy, seed, tolerance):
    intervals = random_intervals(seed)
    result = _engine(strategy, tolerance).calculate_layout(intervals)
    no_collisions(intervals, result, tolerance)


# ============================================================================
# ROW COUNTS
# ============================================================================

@pytest.mark.integration
@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("tolerance", TOLERANCES)
def test_sweep_matches_overlap_depth(random_intervals, seed, tolerance):
    intervals = random_intervals(seed)
    result = _engine('interval', tolerance).calculate_layout(intervals)
    assert result.row_count == max_overlap_depth(intervals, tolerance)


@pytest.mark.integration
@pytest.mark.parametrize("strategy", ['greedy', 'heuristic'])
@pytest.mark.parametrize("seed", SEEDS)
def test_coloring_never_beats_depth(random_intervals, strategy, seed):
    intervals = random_intervals(seed)
    result = _engine(strategy, 0).calculate_layout(intervals)
    assert result.row_count >= max_overlap_depth(intervals)


@pytest.mark.integration
@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("seed", SEEDS)
def test_rows_are_dense_and_complete(random_intervals, strategy, seed):
    intervals = random_intervals(seed, n=40)
    result = _engine(strategy, 0).calculate_layout(intervals)
    assert set(result.row_map) == {iv.id for iv in intervals}
    assert set(result.row_map.values()) == set(range(result.row_count))


# ============================================================================
# CONCRETE SCENARIOS
# ============================================================================

@pytest.mark.integration
@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("tolerance, expected_rows", [(0, 2), (3, 3)])
def test_abc_scenario(abc_intervals, strategy, tolerance, expected_rows):
    result = _engine(strategy, tolerance).calculate_layout(abc_intervals)
    assert result.row_count == expected_rows
    assert result.row('A') != result.row('B')
    assert result.row('B') != result.row('C')


@pytest.mark.integration
@pytest.mark.parametrize("strategy", STRATEGIES)
def test_dense_pileup(strategy):
    """Twenty reads stacked on one locus plus scattered neighbours"""
    pileup = [(f"read{i}", 100 + i, 200 + i) for i in range(20)]
    scattered = [(f"s{i}", 300 + 50 * i, 320 + 50 * i) for i in range(10)]
    result = _engine(strategy, 0).calculate_layout(pileup + scattered)
    assert result.row_count >= 20
    if strategy == 'interval':
        assert result.row_count == 20
