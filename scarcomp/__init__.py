# scarcomp/__init__.py

"""
Scarcity Comparison Framework (scarcomp).

Checks whether the scarcity time steps of an electricity load series (its N
highest-demand periods) remain scarcity time steps of the residual load,
i.e. the load minus the renewable generation implied by an assumed mix of
installed solar, offshore wind and onshore wind capacity.

Main Components
---------------
SeriesStore : dataclass
    Validated per-technology time series of one region.
compute_residual_load : function
    Flat load and residual load for a year selection and capacity mix.
build_duration_curve : function
    Series sorted from highest to lowest value.
classify_scarcity : function
    Top-N scarcity steps and their confirmed / unconfirmed classification.
run : function
    Unified entry point running the whole pipeline.

Subpackages
-----------
input : CSV reader and reader configuration
interfaces : Data containers and parameter types
core : Residual load, duration curve and scarcity computations
visualization : matplotlib rendering of an analysis
logs : Logger setup for drivers

Example
-------
>>> from scarcomp import run_from_directory
>>> analysis = run_from_directory('data', 'BE', years=[1, 2, 3],
...                               capacities={'Solar': 20, 'WindOn': 10}, n=10)
>>> print(analysis.summary())
"""

from .constants import Technology, TECHNOLOGIES, RENEWABLES, HOURS_PER_YEAR
from .exceptions import (
    ScarcityError,
    DataIntegrityError,
    MissingDataError,
    InvalidParameterError,
)
from .interfaces import (
    SeriesStore,
    build_series_store,
    CapacityAssignment,
    YearSelection,
    FlatSeries,
    ScarcityResult,
)
from .core import compute_residual_load, build_duration_curve, classify_scarcity
from .input import ReaderConfig, TimeSeriesReader
from .run import run, run_from_directory, ScarcityAnalysis

__all__ = [
    # Technologies
    'Technology',
    'TECHNOLOGIES',
    'RENEWABLES',
    'HOURS_PER_YEAR',
    # Errors
    'ScarcityError',
    'DataIntegrityError',
    'MissingDataError',
    'InvalidParameterError',
    # Containers
    'SeriesStore',
    'build_series_store',
    'CapacityAssignment',
    'YearSelection',
    'FlatSeries',
    'ScarcityResult',
    # Pipeline
    'compute_residual_load',
    'build_duration_curve',
    'classify_scarcity',
    # Ingestion
    'ReaderConfig',
    'TimeSeriesReader',
    # Run functions
    'run',
    'run_from_directory',
    'ScarcityAnalysis',
]

__version__ = '0.1.0'
