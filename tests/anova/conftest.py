"""
Shared fixtures for ANOVA tests.

Group summaries for the ANOVA panel, plus a helper that builds raw data
with exactly a given mean and standard deviation so summary-based results
can be checked against scipy's sample-based one-way ANOVA.
"""

import numpy as np
import pytest

from statplayground.core import GroupSummary


@pytest.fixture
def data_matching(rng):
    """Build a sample whose mean and sd (ddof=1) equal a group's exactly."""
    def build(group: GroupSummary) -> np.ndarray:
        z = rng.standard_normal(group.size)
        z = (z - z.mean()) / z.std(ddof=1)
        return group.mean + group.std_dev * z
    return build


@pytest.fixture
def panel_groups():
    """Default three groups of the ANOVA panel."""
    return [
        GroupSummary(mean=40.0, std_dev=8.0, size=50),
        GroupSummary(mean=50.0, std_dev=8.0, size=50),
        GroupSummary(mean=60.0, std_dev=8.0, size=50),
    ]


@pytest.fixture
def identical_groups():
    """Three identical groups, no effect."""
    return [GroupSummary(mean=50.0, std_dev=10.0, size=30) for _ in range(3)]


@pytest.fixture
def separated_groups():
    """Three tight, far-apart groups."""
    return [
        GroupSummary(mean=0.0, std_dev=1.0, size=50),
        GroupSummary(mean=10.0, std_dev=1.0, size=50),
        GroupSummary(mean=20.0, std_dev=1.0, size=50),
    ]


@pytest.fixture
def unbalanced_groups():
    """3-group unbalanced design (n=5, 10, 15) with unequal spreads."""
    return [
        GroupSummary(mean=10.0, std_dev=2.0, size=5),
        GroupSummary(mean=12.5, std_dev=3.0, size=10),
        GroupSummary(mean=11.0, std_dev=1.5, size=15),
    ]
