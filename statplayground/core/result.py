"""
Generic result container for all statplayground computations.

Every test in the engine returns a domain payload wrapped in this envelope,
so timing, boundary flags and warnings are carried the same way everywhere.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (boundary, method, iterations)
    - timing is optional
    - Immutable (frozen=True); the UI recomputes instead of mutating
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (statistic, p-value, table, ...)
        info: Structured metadata (method, boundary flag, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=TestParams(statistic=1.2, p_value=0.23, ...),
        ...     info={'method': 'two-sample z-test', 'boundary': False},
        ...     timing={'total_seconds': 1e-5},
        ...     backend_name='analytic',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

    @property
    def boundary(self) -> bool:
        """True when a documented numerical boundary value was returned."""
        return bool(self.info.get('boundary', False))
