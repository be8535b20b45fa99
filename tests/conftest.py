"""
Shared fixtures for the paired t-test tutor tests.
"""

import sys
from pathlib import Path

import pytest

# Make the package importable when running from a plain checkout
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))


@pytest.fixture
def scenario_a():
    """Five paired observations; differences [2, 3, 2, 1, 4]."""
    return [
        {"X": 10, "Y": 8},
        {"X": 12, "Y": 9},
        {"X": 9, "Y": 7},
        {"X": 11, "Y": 10},
        {"X": 13, "Y": 9},
    ]


@pytest.fixture
def null_effect():
    """Differences [-0.5, 0.5, -0.5, 0.5]: mean difference of exactly zero."""
    return [
        {"Subject": "s1", "Before": 10, "After": 10.5},
        {"Subject": "s2", "Before": 11, "After": 10.5},
        {"Subject": "s3", "Before": 12, "After": 12.5},
        {"Subject": "s4", "Before": 13, "After": 12.5},
    ]


@pytest.fixture
def long_series():
    """Seven rows, enough to trigger preview truncation."""
    before = [20, 22, 19, 24, 21, 23, 25]
    after = [18, 21, 19, 20, 20, 19, 22]
    return [{"Pre": b, "Post": a} for b, a in zip(before, after)]


@pytest.fixture
def first_option():
    """Deterministic hypothesis chooser: always the first template."""
    return lambda options: options[0]
