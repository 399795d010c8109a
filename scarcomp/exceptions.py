# scarcomp/exceptions.py

"""
Error taxonomy for the scarcity comparison framework.

Every error is raised at the boundary of the offending call and carries
enough context (technology, year, period, value) to correct the input.
"""

from typing import Any, Hashable, Optional


class ScarcityError(Exception):
    """Base class for all errors raised by scarcomp."""
    pass


class DataIntegrityError(ScarcityError):
    """
    Raised when the time series of a region violate a store invariant.

    Attributes
    ----------
    technology : str
        Offending technology.
    invariant : str
        Broken invariant, e.g. ``'missing technology'``,
        ``'period count'``, ``'year set'``, ``'non-finite value'`` or
        ``'negative value'``.
    year, period, value : optional
        Location and value of an offending entry, where applicable.
    """

    def __init__(
        self,
        technology: str,
        invariant: str,
        detail: str = "",
        year: Optional[Hashable] = None,
        period: Optional[int] = None,
        value: Optional[float] = None,
    ):
        self.technology = technology
        self.invariant = invariant
        self.year = year
        self.period = period
        self.value = value
        message = f"{technology}: {invariant}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class MissingDataError(ScarcityError):
    """Raised when a requested year or technology column is absent."""

    def __init__(self, technology: Optional[str], year: Hashable, detail: str = ""):
        self.technology = technology
        self.year = year
        if technology is None:
            message = f"Year {year!r} is not available"
        else:
            message = f"No {technology} column for year {year!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class InvalidParameterError(ScarcityError, ValueError):
    """Raised for out-of-range request parameters (N, years, capacities)."""

    def __init__(self, parameter: str, value: Any, reason: str):
        self.parameter = parameter
        self.value = value
        super().__init__(f"Invalid {parameter}={value!r}: {reason}")
