"""
Generic result container for PyBasicStats computations.

The Result class provides a standardized envelope for aggregate
computations such as describe(). The leaf statistics return plain floats;
Result carries timing and non-fatal warnings alongside the payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (dtype, n, median method)
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
        params: Domain-specific parameters (mean, mode, etc.)
        info: Structured metadata (dtype, n, options used)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(mean=2.5, ...),
        ...     info={'n': 6, 'dtype': 'int64'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_descriptive'
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
