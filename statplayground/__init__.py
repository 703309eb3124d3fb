"""
statplayground: the statistics engine behind an interactive statistics
playground.

Pure functions over parametric group summaries, recomputed on every
slider change.

Submodules:
    distributions: Normal CDF/PDF/quantile, F upper tail
    hypothesis: Two-sample z-test, target-p inverse solver, coin test
    anova: One-way ANOVA from group summaries
    hmm: Hidden Markov Model sequence simulation
    explain: Context text and requests for the conversational explainer
"""

__version__ = "0.1.0"

from statplayground import distributions
from statplayground import hypothesis
from statplayground import anova
from statplayground import hmm
from statplayground import explain

from statplayground.core import GroupSummary

__all__ = [
    "__version__",
    "distributions",
    "hypothesis",
    "anova",
    "hmm",
    "explain",
    "GroupSummary",
]
