"""
Common types for hypothesis testing.

Defines TestParams (the payload every test returns) and the valid
alternative hypotheses.
"""

from __future__ import annotations

from dataclasses import dataclass


VALID_ALTERNATIVES = ("two.sided", "less", "greater")


@dataclass(frozen=True)
class TestParams:
    """
    Parameter payload for hypothesis tests.

    Every test in the engine returns this same structure.

    Attributes
    ----------
    statistic : float
        Test statistic value. Any real for z; finite sentinel on the
        zero-variance boundary.
    statistic_name : str
        Name of the statistic ("z").
    p_value : float
        p-value, clamped to [0, 1].
    alternative : str
        "two.sided", "less", or "greater".
    method : str
        Human-readable method name, e.g. "Two Sample z-test".
    data_name : str
        Description of the inputs, e.g. "group a and group b".
    estimate : dict or None
        Point estimate(s), e.g. {"mean of a": 45.0, "mean of b": 55.0}.
    null_value : dict or None
        Hypothesised value under H0, e.g. {"difference in means": 0}.
    std_error : float or None
        Standard error used to scale the statistic.
    """
    __test__ = False  # not a pytest test class

    statistic: float
    statistic_name: str
    p_value: float
    alternative: str
    method: str
    data_name: str
    estimate: dict[str, float] | None = None
    null_value: dict[str, float] | None = None
    std_error: float | None = None
