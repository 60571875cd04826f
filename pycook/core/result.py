"""
Generic result container for PyCook computations.

The Result class provides a standardized envelope that backends return.
This keeps timing, warnings and backend identity alongside the
domain-specific parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, n, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
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
        params: Domain-specific parameters (intercept, slope, sums)
        info: Structured metadata (method, n, weighted)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        
    Examples:
        >>> Result(
        ...     params=LinearParams(intercept=0.0, slope=2.0, ...),
        ...     info={'method': 'sums', 'n': 4, 'weighted': False},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_sums'
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
