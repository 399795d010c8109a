# scarcomp/interfaces/__init__.py

"""
Data containers and parameter types for the scarcity comparison framework.

Classes
-------
SeriesStore
    Validated, read-only per-technology time series of one region.
CapacityAssignment
    Installed capacity per renewable technology.
YearSelection
    Ordered, non-empty selection of weather/load years.
FlatSeries
    Load and residual load flattened across a year selection.
ScarcityResult
    Top-N scarcity steps and their confirmed / unconfirmed classification.
"""

from .containers import SeriesStore, build_series_store
from .parameters import CapacityAssignment, YearSelection, as_year_selection
from .results import FlatSeries, ScarcityResult

__all__ = [
    'SeriesStore',
    'build_series_store',
    'CapacityAssignment',
    'YearSelection',
    'as_year_selection',
    'FlatSeries',
    'ScarcityResult',
]
