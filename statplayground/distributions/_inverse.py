"""
Inverse of the normal CDF by bracketing root-finding.

The inverse is solved numerically against normal_cdf itself rather than
through a separate closed-form approximation, so forward and inverse agree
to solver tolerance and cannot drift apart.

The search works on the upper tail: for a two-sided p-value p, find z >= 0
with 2 * Phi(-z) = p. Phi(-z) is the lower-tail branch of the polynomial,
which keeps full relative precision for tiny p where 1 - p/2 would round to 1.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass

from scipy import optimize

from statplayground.core.compute.tolerances import (
    DEFAULT_ROOT_FIND,
    RootFindSettings,
)
from statplayground.core.exceptions import (
    ConvergenceError,
    NumericalBoundaryWarning,
)
from statplayground.core.validation import check_probability
from statplayground.distributions._normal import normal_cdf


@dataclass(frozen=True)
class RootSolution:
    """Outcome of one inverse-normal solve."""
    value: float
    iterations: int
    saturated: bool


def upper_tail_z(
    p_two_sided: float,
    settings: RootFindSettings = DEFAULT_ROOT_FIND,
) -> RootSolution:
    """
    Solve 2 * Phi(-z) = p for z in [0, settings.search_bound].

    Args:
        p_two_sided: Two-sided tail probability in (0, 1]
        settings: Search domain and tolerances

    Returns:
        RootSolution. When p is smaller than the tail mass left at the
        search bound the root lies outside the domain; the bound itself is
        returned with saturated=True.

    Raises:
        ValidationError: If p is outside (0, 1]
        ConvergenceError: If the solver exhausts settings.maxiter
    """
    p = check_probability(p_two_sided, 'p', include_one=True)
    bound = settings.search_bound

    def excess(z: float) -> float:
        return 2.0 * normal_cdf(-z) - p

    # Phi(0) from the polynomial sits a hair under 0.5, so p == 1 can give
    # a non-positive excess at 0; z = 0 is then the answer.
    if excess(0.0) <= 0.0:
        return RootSolution(value=0.0, iterations=0, saturated=False)
    if excess(bound) >= 0.0:
        return RootSolution(value=bound, iterations=0, saturated=True)

    root, info = optimize.brentq(
        excess,
        0.0,
        bound,
        xtol=settings.xtol,
        maxiter=settings.maxiter,
        full_output=True,
        disp=False,
    )
    if not info.converged:
        raise ConvergenceError(
            f"inverse normal did not converge for p={p} "
            f"within {settings.maxiter} iterations",
            iterations=info.iterations,
            reason=info.flag,
            threshold=settings.xtol,
        )
    return RootSolution(
        value=float(root), iterations=info.iterations, saturated=False
    )


def normal_ppf(
    p: float,
    settings: RootFindSettings = DEFAULT_ROOT_FIND,
) -> float:
    """
    Standard normal quantile function, the inverse of normal_cdf.

    Args:
        p: Probability in (0, 1)
        settings: Root-finder settings

    Returns:
        z with normal_cdf(z) == p to solver tolerance, limited to
        +/- settings.search_bound. Emits NumericalBoundaryWarning when the
        limit is hit.

    Raises:
        ValidationError: If p is outside (0, 1)
    """
    p = check_probability(p, 'p')
    if p == 0.5:
        return 0.0

    # Work on the smaller tail and restore the sign afterwards
    tail = min(p, 1.0 - p)
    solution = upper_tail_z(2.0 * tail, settings)
    if solution.saturated:
        warnings.warn(
            f"normal_ppf({p}) lies beyond +/-{settings.search_bound}; "
            f"returning the search bound",
            NumericalBoundaryWarning,
            stacklevel=2,
        )
    return solution.value if p > 0.5 else -solution.value
