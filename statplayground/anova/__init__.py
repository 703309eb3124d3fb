"""
Analysis of Variance (ANOVA) over group summaries.

Public API:
    anova(groups) -> AnovaSolution
"""

from statplayground.anova.solvers import anova
from statplayground.anova.solution import AnovaSolution
from statplayground.anova._common import AnovaParams, AnovaTableRow

__all__ = [
    "anova",
    "AnovaSolution",
    "AnovaParams",
    "AnovaTableRow",
]
