"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def repeated_integers(rng):
    """Integer sample small enough in range that many values repeat."""
    return rng.integers(-20, 20, size=150)


@pytest.fixture
def normal_floats(rng):
    """Float sample with no repeats."""
    return rng.standard_normal(101)
