"""
Standard normal CDF and density.

normal_cdf is the single normal CDF in the package: the z-test, the coin
test, the inverse solver and the confidence interval all go through it.

The CDF uses the Zelen & Severo rational approximation (Abramowitz &
Stegun 26.2.17):

    Phi(-|x|) = phi(x) * t * (b1 t + b2 t^2 + b3 t^3 + b4 t^4 + b5 t^5)
    t = 1 / (1 + p |x|)

with absolute error below 7.5e-8 everywhere. That is ample for drawing
curves and driving sliders; it is not meant for regulatory-grade inference.
For x > 0 the upper tail is reflected, Phi(x) = 1 - Phi(-x). phi(x)
underflows to 0 for large |x|, so the function is total over the reals
(including +/-inf) and never overflows.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statplayground.core.summary import GroupSummary
from statplayground.core.validation import (
    check_finite_scalar,
    check_int_at_least,
)
from statplayground.core.exceptions import ValidationError


_P = 0.2316419
_B = (0.319381530, -0.356563782, 1.781477937, -1.821255978, 1.330274429)
_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def normal_cdf(x: ArrayLike):
    """
    Standard normal cumulative distribution function, Phi(x).

    Args:
        x: Scalar or array-like of reals

    Returns:
        float for scalar input, float64 ndarray otherwise. Values lie in
        [0, 1]; Phi(0) = 0.5 and Phi(-x) = 1 - Phi(x).
    """
    arr = np.asarray(x, dtype=np.float64)
    abs_x = np.abs(arr)

    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        t = 1.0 / (1.0 + _P * abs_x)
        density = _INV_SQRT_2PI * np.exp(-0.5 * abs_x * abs_x)
    poly = t * (_B[0] + t * (_B[1] + t * (_B[2] + t * (_B[3] + t * _B[4]))))
    lower_tail = density * poly

    # lower_tail is Phi(-|x|); reflect for positive x
    prob = np.where(arr > 0, 1.0 - lower_tail, lower_tail)

    if prob.ndim == 0:
        return float(prob)
    return prob


def normal_pdf(x: ArrayLike, mean: float = 0.0, std_dev: float = 1.0):
    """
    Normal probability density function.

    Args:
        x: Scalar or array-like evaluation points
        mean: Distribution mean
        std_dev: Standard deviation, must be > 0

    Returns:
        float for scalar input, float64 ndarray otherwise

    Raises:
        ValidationError: If std_dev <= 0
    """
    mean = check_finite_scalar(mean, 'mean')
    std_dev = check_finite_scalar(std_dev, 'std_dev')
    if std_dev <= 0:
        raise ValidationError(f"std_dev: must be > 0, got {std_dev}")

    arr = np.asarray(x, dtype=np.float64)
    z = (arr - mean) / std_dev
    dens = _INV_SQRT_2PI / std_dev * np.exp(-0.5 * z * z)
    if dens.ndim == 0:
        return float(dens)
    return dens


def density_curve(
    group: GroupSummary,
    lower: float = 0.0,
    upper: float = 100.0,
    num: int = 201,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Evaluate a group's normal density on an evenly spaced grid.

    This is the curve the UI draws for each group. A zero-variance group
    has no density; it is returned as all zeros except a unit spike at
    the grid point nearest the mean.

    Args:
        group: Group to draw
        lower: Left end of the grid
        upper: Right end of the grid, must exceed lower
        num: Number of grid points, >= 2

    Returns:
        (x, y) arrays of length num
    """
    lower = check_finite_scalar(lower, 'lower')
    upper = check_finite_scalar(upper, 'upper')
    num = check_int_at_least(num, 2, 'num')
    if upper <= lower:
        raise ValidationError(
            f"upper: must exceed lower ({lower}), got {upper}"
        )

    xs = np.linspace(lower, upper, num)
    if group.std_dev == 0.0:
        ys = np.zeros(num)
        ys[int(np.argmin(np.abs(xs - group.mean)))] = 1.0
        return xs, ys
    return xs, normal_pdf(xs, group.mean, group.std_dev)
