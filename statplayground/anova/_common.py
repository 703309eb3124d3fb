"""
Common data types for ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnovaTableRow:
    """One row of an ANOVA table (Groups or Residuals)."""
    term: str
    df: int
    sum_sq: float
    mean_sq: float
    f_value: float | None    # None for Residuals row
    p_value: float | None    # None for Residuals row


@dataclass(frozen=True)
class AnovaParams:
    """
    Parameter payload for one-way ANOVA over group summaries.

    The within-group sum of squares is reconstructed from each group's
    standard deviation, sum((n_i - 1) * sd_i^2), since no raw data exists.
    """
    table: tuple[AnovaTableRow, ...]
    f_value: float
    p_value: float
    n_obs: int
    n_groups: int
    grand_mean: float
    group_means: tuple[float, ...]
    df_between: int
    df_within: int
    eta_squared: float
