"""
Hypothesis test solvers.

Public API:
    z_test(a, b, ...) -> TestResult
    solve_mean_for_target_p(target_p, fixed, ...) -> float
    coin_fairness_test(heads, flips, ...) -> TestResult
    simulate_coin_flips(bias, count, rng) -> tuple[str, ...]
    z_interval(group, conf_level) -> (lower, upper)
    clamp_to_range(value, lower, upper) -> float

All tests work from GroupSummary descriptors, never raw observations.
"""

from __future__ import annotations

import math
import time
import warnings

import numpy as np

from statplayground.core.compute.tolerances import (
    DEFAULT_ROOT_FIND,
    RootFindSettings,
    Z_SENTINEL,
)
from statplayground.core.exceptions import (
    NumericalBoundaryWarning,
    ValidationError,
)
from statplayground.core.result import Result
from statplayground.core.summary import GroupSummary, combined_standard_error
from statplayground.core.validation import (
    check_finite_scalar,
    check_int_at_least,
    check_probability,
)
from statplayground.distributions import normal_cdf, normal_ppf, upper_tail_z
from statplayground.hypothesis._common import TestParams, VALID_ALTERNATIVES
from statplayground.hypothesis.solution import TestResult


def z_test(
    a: GroupSummary,
    b: GroupSummary,
    *,
    alternative: str = "two.sided",
) -> TestResult:
    """
    Two-sample Z-test from summary parameters.

    z = (a.mean - b.mean) / sqrt(a.sd^2/a.n + b.sd^2/b.n)

    Args:
        a: First group
        b: Second group
        alternative: "two.sided" (default), "less", or "greater".
            "greater" tests a.mean > b.mean.

    Returns:
        TestResult with the z statistic and p-value in [0, 1]

    Boundary:
        When the combined standard error is zero (both groups have zero
        variance), or so small that z overflows, nothing non-finite is
        returned. Equal means give z = 0 and the
        p-value of z = 0 (1 for two-sided). Different means give
        z = +/-Z_SENTINEL in the sign of (a.mean - b.mean), and the
        p-value of an infinitely extreme statistic (0 for two-sided).
        The result is flagged with boundary=True.

    Examples:
        >>> result = z_test(GroupSummary(45, 10, 100), GroupSummary(55, 10, 100))
        >>> result.statistic
        -7.0710678...
    """
    t0 = time.perf_counter()
    _check_group(a, 'a')
    _check_group(b, 'b')
    _check_alternative(alternative)
    warnings_list: list[str] = []

    diff = a.mean - b.mean
    se = combined_standard_error(a, b)

    z_stat = diff / se if se > 0.0 else math.nan
    boundary = not math.isfinite(z_stat)
    if boundary:
        if diff == 0.0:
            z_stat = 0.0
            warnings_list.append(
                "both groups have zero variance and equal means"
            )
        else:
            z_stat = math.copysign(Z_SENTINEL, diff)
            warnings_list.append(
                "zero variance in both groups (or standard error too small "
                f"to divide by); statistic set to {z_stat:g}"
            )

    params = TestParams(
        statistic=float(z_stat),
        statistic_name="z",
        p_value=_z_pvalue(z_stat, alternative),
        alternative=alternative,
        method="Two Sample z-test",
        data_name="a and b",
        estimate={"mean of a": a.mean, "mean of b": b.mean},
        null_value={"difference in means": 0.0},
        std_error=se,
    )
    return _wrap(params, boundary, warnings_list, t0)


def solve_mean_for_target_p(
    target_p: float,
    fixed: GroupSummary,
    moving_std_dev: float,
    moving_size: int,
    current_moving_mean: float,
    *,
    settings: RootFindSettings = DEFAULT_ROOT_FIND,
) -> float:
    """
    Find the moving group's mean that gives a target two-sided p-value.

    The two-sided p-value depends on the moving mean only through
    |mean - fixed.mean|, and decreases as that distance grows. So the
    solve is: |z| from the inverse normal, then

        mean = fixed.mean +/- |z| * SE

    keeping the moving group on the side of fixed.mean it is on now
    (ties go to +).

    Args:
        target_p: Desired two-sided p-value in (0, 1]
        fixed: The group that stays put
        moving_std_dev: Standard deviation of the moving group
        moving_size: Size of the moving group
        current_moving_mean: Where the moving group's mean is now
        settings: Root-finder settings

    Returns:
        The analytic mean, not clamped to any display range (see
        clamp_to_range).

    Boundary:
        If target_p is below what the search domain can reach, |z| is the
        search bound and NumericalBoundaryWarning is emitted. If the
        combined standard error is zero, the mean of the fixed group is
        returned (again with a warning unless target_p == 1).

    Raises:
        ValidationError: If target_p is outside (0, 1] or a group
            parameter is invalid
    """
    target_p = check_probability(target_p, 'target_p', include_one=True)
    _check_group(fixed, 'fixed')
    moving = GroupSummary(
        mean=current_moving_mean, std_dev=moving_std_dev, size=moving_size
    )

    se = combined_standard_error(fixed, moving)
    solution = upper_tail_z(target_p, settings)

    if solution.saturated:
        warnings.warn(
            f"target_p={target_p:g} is beyond the solver's reach; "
            f"using |z| = {settings.search_bound:g}",
            NumericalBoundaryWarning,
            stacklevel=2,
        )
    if se == 0.0 and target_p < 1.0:
        warnings.warn(
            "combined standard error is zero; no finite mean gives the "
            "target p-value, returning the fixed mean",
            NumericalBoundaryWarning,
            stacklevel=2,
        )

    offset = solution.value * se
    if moving.mean >= fixed.mean:
        return fixed.mean + offset
    return fixed.mean - offset


def clamp_to_range(value: float, lower: float, upper: float) -> float:
    """Clamp a solved mean into a display range such as a slider's."""
    value = check_finite_scalar(value, 'value')
    lower = check_finite_scalar(lower, 'lower')
    upper = check_finite_scalar(upper, 'upper')
    if upper < lower:
        raise ValidationError(
            f"upper: must be >= lower ({lower}), got {upper}"
        )
    return min(upper, max(lower, value))


def coin_fairness_test(
    heads: int,
    flips: int,
    *,
    p0: float = 0.5,
) -> TestResult:
    """
    Test whether a coin is fair from a heads count.

    Uses the normal approximation to the binomial,

        z = (heads - n p0) / sqrt(n p0 (1 - p0))

    with a two-sided p-value. Good enough for a visual demo beyond a
    handful of flips.

    Args:
        heads: Number of heads observed, 0 <= heads <= flips
        flips: Total flips, >= 1
        p0: Probability of heads under H0, in (0, 1)

    Raises:
        ValidationError: On out-of-range counts or p0
    """
    t0 = time.perf_counter()
    flips = check_int_at_least(flips, 1, 'flips')
    heads = check_int_at_least(heads, 0, 'heads')
    if heads > flips:
        raise ValidationError(
            f"heads: must be <= flips ({flips}), got {heads}"
        )
    p0 = check_probability(p0, 'p0')

    expected = flips * p0
    sd = math.sqrt(flips * p0 * (1.0 - p0))
    z_stat = (heads - expected) / sd

    params = TestParams(
        statistic=float(z_stat),
        statistic_name="z",
        p_value=_z_pvalue(z_stat, "two.sided"),
        alternative="two.sided",
        method="Normal approximation to the binomial test",
        data_name=f"{heads} heads out of {flips} flips",
        estimate={"proportion of heads": heads / flips},
        null_value={"probability of heads": p0},
        std_error=sd / flips,
    )
    return _wrap(params, False, [], t0)


def simulate_coin_flips(
    bias: float,
    count: int,
    rng: np.random.Generator | int | None = None,
) -> tuple[str, ...]:
    """
    Flip a possibly biased coin.

    Args:
        bias: Probability of heads, in [0, 1]
        count: Number of flips, >= 0
        rng: Generator, or seed for numpy.random.default_rng

    Returns:
        Tuple of "H" / "T" in flip order
    """
    bias = check_probability(bias, 'bias', include_zero=True, include_one=True)
    count = check_int_at_least(count, 0, 'count')
    gen = np.random.default_rng(rng)
    draws = gen.random(count) < bias
    return tuple("H" if d else "T" for d in draws)


def z_interval(
    group: GroupSummary,
    conf_level: float = 0.95,
) -> tuple[float, float]:
    """
    Normal-theory confidence interval for a group mean.

    mean +/- z_(1 - alpha/2) * sd / sqrt(n)

    Args:
        group: Group summary
        conf_level: Confidence level in (0, 1)

    Returns:
        (lower, upper). A zero-variance group gives a zero-width interval.
    """
    _check_group(group, 'group')
    conf_level = check_probability(conf_level, 'conf_level')
    z_crit = normal_ppf(1.0 - (1.0 - conf_level) / 2.0)
    half_width = z_crit * group.standard_error
    return group.mean - half_width, group.mean + half_width


# --- Helpers ---

def _z_pvalue(z_stat: float, alternative: str) -> float:
    """p-value of a z statistic, clamped to [0, 1]."""
    if alternative == "two.sided":
        p = 2.0 * normal_cdf(-abs(z_stat))
    elif alternative == "less":
        p = normal_cdf(z_stat)
    else:  # greater
        p = normal_cdf(-z_stat)
    return min(1.0, max(0.0, float(p)))


def _check_group(group: object, name: str) -> None:
    if not isinstance(group, GroupSummary):
        raise ValidationError(
            f"{name}: expected GroupSummary, got {type(group).__name__}"
        )


def _check_alternative(alternative: str) -> None:
    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative: must be one of {VALID_ALTERNATIVES}, "
            f"got {alternative!r}"
        )


def _wrap(
    params: TestParams,
    boundary: bool,
    warnings_list: list[str],
    t0: float,
) -> TestResult:
    elapsed = time.perf_counter() - t0
    result = Result(
        params=params,
        info={'method': params.method, 'boundary': boundary},
        timing={'total_seconds': elapsed},
        backend_name='analytic',
        warnings=tuple(warnings_list),
    )
    return TestResult(_result=result)
