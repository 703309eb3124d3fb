"""
Distribution functions.

Public API:
    normal_cdf(x) -> float | ndarray        # Zelen & Severo approximation
    normal_pdf(x, mean, std_dev)            # density for chart curves
    normal_ppf(p) -> float                  # inverse CDF by root-finding
    upper_tail_z(p) -> RootSolution         # |z| for a two-sided p-value
    f_sf(f, df_num, df_den) -> float        # F upper tail
    density_curve(group, lower, upper, num) # (x, y) grid for one group
"""

from statplayground.distributions._normal import (
    density_curve,
    normal_cdf,
    normal_pdf,
)
from statplayground.distributions._inverse import (
    RootSolution,
    normal_ppf,
    upper_tail_z,
)
from statplayground.distributions._fdist import f_sf

__all__ = [
    "density_curve",
    "normal_cdf",
    "normal_pdf",
    "normal_ppf",
    "upper_tail_z",
    "RootSolution",
    "f_sf",
]
