"""
Input validation utilities for statplayground.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion of out-of-range values
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Integral, Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statplayground.core.exceptions import ValidationError


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Verify value is a finite real number and return it as float.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number or is NaN/Inf
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    result = float(value)
    if not math.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_non_negative(value: Any, name: str) -> float:
    """
    Verify value is a finite real number >= 0.

    Raises:
        ValidationError: If value is negative or not finite
    """
    result = check_finite_scalar(value, name)
    if result < 0:
        raise ValidationError(f"{name}: must be >= 0, got {result}")
    return result


def check_int_at_least(value: Any, minimum: int, name: str) -> int:
    """
    Verify value is an integer >= minimum.

    Integral floats (e.g. 30.0 from a slider) are accepted; fractional
    values are rejected.

    Raises:
        ValidationError: If value is not integral or is below minimum
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got bool")
    if isinstance(value, Integral):
        result = int(value)
    elif isinstance(value, Real) and float(value).is_integer():
        result = int(value)
    else:
        raise ValidationError(f"{name}: expected an integer, got {value!r}")
    if result < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {result}")
    return result


def check_probability(
    value: Any,
    name: str,
    *,
    include_zero: bool = False,
    include_one: bool = False,
) -> float:
    """
    Verify value lies in the unit interval with the requested endpoints.

    Args:
        value: Input to validate
        name: Parameter name for error messages
        include_zero: Whether 0 is allowed
        include_one: Whether 1 is allowed

    Raises:
        ValidationError: If value lies outside the interval
    """
    result = check_finite_scalar(value, name)
    low_ok = result >= 0.0 if include_zero else result > 0.0
    high_ok = result <= 1.0 if include_one else result < 1.0
    if not (low_ok and high_ok):
        left = '[' if include_zero else '('
        right = ']' if include_one else ')'
        raise ValidationError(
            f"{name}: must be in {left}0, 1{right}, got {result}"
        )
    return result


def check_stochastic_matrix(
    matrix: ArrayLike,
    name: str,
    *,
    atol: float = 1e-9,
) -> NDArray[np.float64]:
    """
    Verify a 2D array is row-stochastic (non-negative rows summing to 1).

    Args:
        matrix: Candidate transition or emission table
        name: Parameter name for error messages
        atol: Absolute tolerance on each row sum

    Returns:
        The validated matrix as a float64 ndarray

    Raises:
        ValidationError: If the table is not 2D, has negative or non-finite
            entries, or a row does not sum to 1
    """
    try:
        result = np.asarray(matrix, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.ndim != 2 or result.shape[0] == 0 or result.shape[1] == 0:
        raise ValidationError(
            f"{name}: expected a non-empty 2D table, got shape {result.shape}"
        )
    if not np.all(np.isfinite(result)):
        raise ValidationError(f"{name}: contains non-finite values")
    if np.any(result < 0):
        raise ValidationError(f"{name}: contains negative probabilities")

    sums = result.sum(axis=1)
    bad = np.where(np.abs(sums - 1.0) > atol)[0]
    if len(bad) > 0:
        raise ValidationError(
            f"{name}: rows {bad.tolist()} do not sum to 1 "
            f"(sums={sums[bad].tolist()})"
        )
    return result
