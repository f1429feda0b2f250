"""
Shared pytest fixtures for TrackStack tests

Supports both development mode (pytest from the repo root) and installed mode (pip install -e .)
"""
import pytest
import numpy as np
from pathlib import Path
import sys

from typing import List


@pytest.fixture(scope="session", autouse=True)
def setup_trackstack_path():
    """
    Add repository root to Python path for development mode

    Structure:
      trackstack-repo/              <- repo root (need to add this to sys.path)
      └── trackstack/               <- package
          ├── __init__.py
          ├── layout/
          └── tests/
              └── conftest.py       <- we are here
    """
    repo_root = Path(__file__).parent.parent.parent

    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


@pytest.fixture
def abc_intervals():
    """
    A=[0,10), B=[5,15), C=[12,20)

    A-B and B-C overlap, A-C do not (until tolerance >= 2).
    """
    from trackstack import Interval
    return [Interval('A', 0, 10), Interval('B', 5, 15), Interval('C', 12, 20)]


@pytest.fixture
def greedy_trap():
    """
    Overlap depth 2, but widest-first greedy needs 3 rows

    The two wide flanks S' and S are colored first and exclude both P and Q,
    which overlap each other and so need two more rows.
    """
    from trackstack import Interval
    return [
        Interval("S'", -20, 2),
        Interval('P', 0, 10),
        Interval('Q', 5, 15),
        Interval('S', 12, 30),
    ]


def _random_intervals(seed: int, n: int = 60, span: int = 1000, max_width: int = 120):
    from trackstack import Interval
    rng = np.random.default_rng(seed)
    starts = rng.integers(0, span, size=n)
    widths = rng.integers(0, max_width, size=n)
    return [Interval(f"f{i}", int(s), int(s + w)) for i, (s, w) in enumerate(zip(starts, widths))]


@pytest.fixture
def random_intervals():
    """Factory for reproducible random interval sets"""
    return _random_intervals


def assert_no_collisions(intervals: List, assignment, tolerance: float = 0) -> None:
    """Every overlapping pair must be on different rows"""
    for i, a in enumerate(intervals):
        for b in intervals[i + 1:]:
            if a.overlaps(b, tolerance):
                assert assignment.row(a.id) != assignment.row(b.id), \
                    f"{a.id} and {b.id} overlap but share row {assignment.row(a.id)}"


@pytest.fixture
def no_collisions():
    return assert_no_collisions


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual classes and functions"
    )
    config.addinivalue_line(
        "markers", "integration: Property tests running all strategies on generated data"
    )
