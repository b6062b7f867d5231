"""
Exception hierarchy for PyBasicStats.

All exceptions inherit from PyBasicStatsError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyBasicStatsError(Exception):
    """Base exception for all PyBasicStats errors."""
    pass


class ValidationError(PyBasicStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Input has the wrong number of dimensions.

    Every statistic works on a flat sequence; nested input is rejected
    rather than flattened.
    """
    pass


class NumericalError(PyBasicStatsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class CanonicalKeyError(NumericalError):
    """
    A mode tally key did not survive the print/parse round trip.

    The mode classifier buckets values by their decimal rendering and parses
    the winning keys back into the element type. A key that parses to a
    different rendering means the element type cannot be keyed this way,
    which is a programming error rather than a property of the data.

    Attributes:
        key: The canonical key that failed to round-trip
        dtype: Name of the element dtype the key was parsed into
        parsed: Rendering of the parsed value, if parsing succeeded
    """

    def __init__(
        self,
        message: str,
        key: str,
        dtype: str,
        parsed: str | None = None,
    ):
        super().__init__(message)
        self.key = key
        self.dtype = dtype
        self.parsed = parsed
