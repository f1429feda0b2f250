"""
Unit tests for HeuristicColoringLayout
"""
import numpy as np
import pytest

from trackstack import HeuristicColoringLayout, IntervalSweepLayout
from trackstack.layout import TrialResult


class TestHeuristicColoringLayout:

    def test_empty_input(self):
        result = HeuristicColoringLayout(rng=0).layout([])
        assert result.row_count == 0
        assert dict(result.row_map) == {}

    def test_empty_input_yields_no_trials(self):
        assert list(HeuristicColoringLayout(rng=0).iter_trials([])) == []

    def test_abc(self, abc_intervals):
        """A path of three always colors in two rows"""
        result = HeuristicColoringLayout(n_iters=10, rng=1).layout(abc_intervals)
        assert result.row_count == 2
        assert result.row('A') != result.row('B')
        assert result.row('B') != result.row('C')

    def test_abc_with_tolerance(self, abc_intervals):
        result = HeuristicColoringLayout(tolerance=3, n_iters=5, rng=1).layout(abc_intervals)
        assert result.row_count == 3

    def test_finds_optimum_on_greedy_trap(self, greedy_trap):
        """Some random order colors P or Q in round 0, giving two rows"""
        result = HeuristicColoringLayout(n_iters=200, rng=42).layout(greedy_trap)
        assert result.row_count == 2

    def test_seeded_runs_are_reproducible(self, random_intervals):
        intervals = random_intervals(5)
        first = HeuristicColoringLayout(n_iters=20, rng=123).layout(intervals)
        second = HeuristicColoringLayout(n_iters=20, rng=123).layout(intervals)
        assert dict(first.row_map) == dict(second.row_map)

    def test_trial_stream(self, random_intervals):
        intervals = random_intervals(9)
        trials = list(HeuristicColoringLayout(n_iters=7, rng=3).iter_trials(intervals))
        assert [t.trial for t in trials] == list(range(7))
        assert all(isinstance(t, TrialResult) for t in trials)
        for t in trials:
            assert t.row_count == max(t.row_map.values()) + 1
            assert len(t.row_map) == len(intervals)

    def test_trial_prefix_is_stable(self, random_intervals):
        """With the same seed, n_iters=k+1 replays the k trials of n_iters=k first"""
        intervals = random_intervals(21)
        short = list(HeuristicColoringLayout(n_iters=4, rng=8).iter_trials(intervals))
        long = list(HeuristicColoringLayout(n_iters=5, rng=8).iter_trials(intervals))
        assert long[:4] == short

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_more_trials_never_worse(self, random_intervals, seed):
        intervals = random_intervals(100 + seed, n=80)
        counts = [
            HeuristicColoringLayout(n_iters=k, rng=seed).layout(intervals).row_count
            for k in range(1, 15)
        ]
        assert counts == sorted(counts, reverse=True)

    def test_layout_is_best_trial(self, random_intervals):
        intervals = random_intervals(17)
        heuristic = HeuristicColoringLayout(n_iters=12, rng=4)
        trials = list(heuristic.iter_trials(intervals))
        best = min(trials, key=lambda t: t.row_count)
        result = HeuristicColoringLayout(n_iters=12, rng=4).layout(intervals)
        assert result.row_count == best.row_count
        assert dict(result.row_map) == dict(best.row_map)

    def test_best_of(self, random_intervals):
        intervals = random_intervals(17)
        heuristic = HeuristicColoringLayout(n_iters=12, rng=4)
        reduced = heuristic.best_of(heuristic.iter_trials(intervals))
        assert reduced.row_count == HeuristicColoringLayout(n_iters=12, rng=4).layout(intervals).row_count
        assert heuristic.best_of([]).row_count == 0

    def test_ties_keep_first_trial(self):
        trials = [
            TrialResult(0, 2, {'a': 0, 'b': 1}),
            TrialResult(1, 2, {'a': 1, 'b': 0}),
            TrialResult(2, 3, {'a': 2, 'b': 0}),
        ]
        result = HeuristicColoringLayout().best_of(trials)
        assert result.row('a') == 0
        assert result.layout_stats['best_trial'] == 0

    def test_generator_is_advanced(self, abc_intervals):
        """A shared Generator keeps drawing across calls"""
        rng = np.random.default_rng(0)
        state_before = rng.bit_generator.state['state']['state']
        HeuristicColoringLayout(n_iters=3, rng=rng).layout(abc_intervals)
        assert rng.bit_generator.state['state']['state'] != state_before

    def test_never_below_overlap_depth(self, random_intervals):
        intervals = random_intervals(31)
        optimum = IntervalSweepLayout().layout(intervals).row_count
        result = HeuristicColoringLayout(n_iters=25, rng=5).layout(intervals)
        assert result.row_count >= optimum

    def test_stats(self, abc_intervals):
        result = HeuristicColoringLayout(n_iters=6, rng=0).layout(abc_intervals)
        assert result.strategy == 'heuristic'
        assert result.layout_stats['n_trials'] == 6

    def test_invalid_n_iters(self):
        with pytest.raises(ValueError):
            HeuristicColoringLayout(n_iters=0)
