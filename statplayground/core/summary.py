"""
Parametric group descriptors.

GroupSummary is the input every test in the engine works from: a mean, a
standard deviation and a count describing a population or sample. No raw
observations are ever held.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from statplayground.core.validation import (
    check_finite_scalar,
    check_int_at_least,
    check_non_negative,
)


@dataclass(frozen=True)
class GroupSummary:
    """
    Summary description of one group.

    Attributes:
        mean: Group mean (any finite real)
        std_dev: Standard deviation, >= 0. Zero is a legal degenerate
            group and is handled by the tests as a boundary case.
        size: Number of units, >= 1

    Raises:
        ValidationError: On construction, if any field is out of range
    """
    mean: float
    std_dev: float
    size: int

    def __post_init__(self) -> None:
        # frozen: write the normalised values through object.__setattr__
        object.__setattr__(self, 'mean', check_finite_scalar(self.mean, 'mean'))
        object.__setattr__(
            self, 'std_dev', check_non_negative(self.std_dev, 'std_dev')
        )
        object.__setattr__(self, 'size', check_int_at_least(self.size, 1, 'size'))

    @property
    def variance(self) -> float:
        return self.std_dev ** 2

    @property
    def standard_error(self) -> float:
        """Standard error of the mean, sd / sqrt(n)."""
        return self.std_dev / math.sqrt(self.size)

    def with_mean(self, mean: float) -> GroupSummary:
        """Copy of this group with a different mean."""
        return GroupSummary(mean=mean, std_dev=self.std_dev, size=self.size)


def combined_standard_error(a: GroupSummary, b: GroupSummary) -> float:
    """sqrt(sd_a^2/n_a + sd_b^2/n_b), the SE of a difference in means."""
    return math.sqrt(a.variance / a.size + b.variance / b.size)
