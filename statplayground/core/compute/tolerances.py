"""
Numerical settings and tolerance tiers.

Defines the root-finder configuration, the sentinel values returned on
degenerate inputs, and the accuracy the engine promises:

- NORMAL_CDF: the Zelen & Severo approximation, visualisation grade
- ROUND_TRIP: solve-then-test agreement on p-values

Used by the solvers, the test suite and any caller that wants to override
the defaults.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Named tolerance for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


@dataclass(frozen=True)
class RootFindSettings:
    """
    Configuration for the bracketing root-finder behind the inverse normal.

    Attributes:
        search_bound: Upper end of the |z| search domain; the solver
            saturates here instead of diverging as p -> 0
        xtol: Absolute tolerance on z
        maxiter: Iteration cap; every solve terminates within it
    """
    search_bound: float = 10.0
    xtol: float = 1e-12
    maxiter: int = 60


DEFAULT_ROOT_FIND = RootFindSettings()

# Statistic returned when the combined standard error is exactly zero but
# the means differ. Signed like (a.mean - b.mean).
Z_SENTINEL = 1e6

# F returned when the within-group mean square is zero but the
# between-group mean square is not.
F_SENTINEL = 1e12

# Zelen & Severo (A&S 26.2.17): |error| < 7.5e-8 over the real line,
# rounded up for comparisons
NORMAL_CDF = ToleranceTier(
    rtol=0.0,
    atol=1e-7,
    name='normal_cdf',
    description='Polynomial normal CDF, visualisation grade',
)

# Solving for a mean and re-running the z-test must land within this
ROUND_TRIP = ToleranceTier(
    rtol=0.0,
    atol=1e-3,
    name='round_trip',
    description='Inverse solver followed by forward z-test',
)
