"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from statplayground.core import GroupSummary


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def control_group():
    """Default control group of the z-test panel."""
    return GroupSummary(mean=45.0, std_dev=10.0, size=100)


@pytest.fixture
def experimental_group():
    """Default experimental group of the z-test panel."""
    return GroupSummary(mean=55.0, std_dev=10.0, size=100)
