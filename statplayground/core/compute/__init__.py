"""
Shared numeric settings for statplayground.

Submodules:
    tolerances: Root-finder configuration, sentinel values, accuracy tiers
"""

from statplayground.core.compute.tolerances import (
    DEFAULT_ROOT_FIND,
    F_SENTINEL,
    NORMAL_CDF,
    ROUND_TRIP,
    RootFindSettings,
    ToleranceTier,
    Z_SENTINEL,
)

__all__ = [
    "DEFAULT_ROOT_FIND",
    "F_SENTINEL",
    "NORMAL_CDF",
    "ROUND_TRIP",
    "RootFindSettings",
    "ToleranceTier",
    "Z_SENTINEL",
]
