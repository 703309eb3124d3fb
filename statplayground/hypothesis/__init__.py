"""
Hypothesis testing from group summaries.

Public API:
    z_test(a, b, alternative="two.sided") -> TestResult
    solve_mean_for_target_p(target_p, fixed, moving_std_dev, moving_size,
                            current_moving_mean) -> float
    coin_fairness_test(heads, flips, p0=0.5) -> TestResult
    simulate_coin_flips(bias, count, rng) -> tuple[str, ...]
    z_interval(group, conf_level=0.95) -> (lower, upper)
    clamp_to_range(value, lower, upper) -> float
"""

from statplayground.hypothesis.solvers import (
    clamp_to_range,
    coin_fairness_test,
    simulate_coin_flips,
    solve_mean_for_target_p,
    z_interval,
    z_test,
)
from statplayground.hypothesis.solution import TestResult
from statplayground.hypothesis._common import TestParams

__all__ = [
    "clamp_to_range",
    "coin_fairness_test",
    "simulate_coin_flips",
    "solve_mean_for_target_p",
    "z_interval",
    "z_test",
    "TestResult",
    "TestParams",
]
