# scarcomp/run.py

"""
Unified run interface for scarcomp.

This module provides a single entry point that takes a SeriesStore and
the request parameters (years, capacities, N) through the whole pipeline:
residual load, duration curves and scarcity classification.

Example
-------
>>> from scarcomp import run_from_directory
>>> analysis = run_from_directory('data', 'BE', years=[1, 2], capacities={'Solar': 20}, n=10)
>>> analysis.summary()['confirmation_rate']
0.8
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Hashable, Iterable, Mapping, Optional, Union

import numpy as np
import pandas as pd

from .core import build_duration_curve, classify_scarcity, compute_residual_load
from .input import ReaderConfig, TimeSeriesReader
from .interfaces import (
    CapacityAssignment,
    FlatSeries,
    ScarcityResult,
    SeriesStore,
    as_year_selection,
    build_series_store,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ScarcityAnalysis:
    """
    Container for the results of one computation request.

    Attributes
    ----------
    region : str
        Region of the store.
    capacities : CapacityAssignment
        Capacities used for the residual load.
    flat : FlatSeries
        Flat load and residual load.
    load_curve : np.ndarray
        Load duration curve.
    residual_curve : np.ndarray
        Residual load duration curve.
    scarcity : ScarcityResult
        Classification of the load scarcity steps.
    """
    region: str
    capacities: CapacityAssignment
    flat: FlatSeries
    load_curve: np.ndarray
    residual_curve: np.ndarray
    scarcity: ScarcityResult

    @property
    def years(self):
        return self.flat.years

    def summary(self) -> Dict[str, Any]:
        """Headline figures of the analysis."""
        return {
            'region': self.region,
            'years': list(self.flat.years),
            'capacities': self.capacities.to_dict(),
            'n': self.scarcity.n,
            'n_confirmed': self.scarcity.n_confirmed,
            'confirmation_rate': self.scarcity.confirmation_rate,
            'peak_load': float(self.load_curve[0]),
            'peak_residual_load': float(self.residual_curve[0]),
            'min_residual_load': float(self.residual_curve[-1]),
        }

    def scatter_frame(self) -> pd.DataFrame:
        """
        One row per load scarcity step with its year and period.

        Columns: index, year, period, load, residual_load, confirmed.
        """
        df = self.scarcity.to_frame()
        located = [self.flat.locate(i) for i in self.scarcity.load_indices]
        df.insert(1, 'year', [year for year, _ in located])
        df.insert(2, 'period', [period for _, period in located])
        return df

    def duration_frame(self) -> pd.DataFrame:
        """Both duration curves side by side, indexed by duration rank (1-based)."""
        return pd.DataFrame(
            {'load': self.load_curve, 'residual_load': self.residual_curve},
            index=pd.RangeIndex(1, len(self.load_curve) + 1, name='duration'),
        )


def run(
    store: SeriesStore,
    years: Optional[Iterable[Hashable]] = None,
    capacities: Union[CapacityAssignment, Mapping, None] = None,
    n: int = 100,
) -> ScarcityAnalysis:
    """
    Run the full pipeline on a store.

    Parameters
    ----------
    store : SeriesStore
        Validated time series of one region.
    years : iterable, optional
        Years to concatenate, in order. Defaults to every year of the store.
    capacities : CapacityAssignment or mapping, optional
        Installed renewable capacity; missing renewables are zero.
    n : int, optional
        Number of scarcity time steps (default 100).

    Returns
    -------
    ScarcityAnalysis

    Raises
    ------
    InvalidParameterError
        For an empty year selection, a negative capacity or N out of range.
    MissingDataError
        If a selected year is not in the store.
    """
    selection = as_year_selection(years, store)
    caps = CapacityAssignment.from_mapping(capacities)

    flat = compute_residual_load(store, selection, caps)
    scarcity = classify_scarcity(flat.load, flat.residual, n)
    analysis = ScarcityAnalysis(
        region=store.region,
        capacities=caps,
        flat=flat,
        load_curve=build_duration_curve(flat.load),
        residual_curve=build_duration_curve(flat.residual),
        scarcity=scarcity,
    )
    logger.info(
        f"'{store.region}' years={list(selection.years)} capacities={caps.to_dict()} n={n}: "
        f"{scarcity.n_confirmed}/{n} scarcity steps confirmed"
    )
    return analysis


def run_from_directory(
    data_dir: Optional[str],
    region: str,
    years: Optional[Iterable[Hashable]] = None,
    capacities: Union[CapacityAssignment, Mapping, None] = None,
    n: int = 100,
    config: Optional[ReaderConfig] = None,
) -> ScarcityAnalysis:
    """
    Read the CSV files of ``region`` and run the pipeline.

    Either ``data_dir`` or a full ``config`` must be given; when both are,
    ``data_dir`` replaces the config's directory.
    """
    if config is None:
        if data_dir is None:
            raise ValueError("Either data_dir or config is required")
        config = ReaderConfig(data_dir=data_dir)
    elif data_dir is not None:
        config = replace(config, data_dir=data_dir)

    store = build_series_store(region, TimeSeriesReader(config))
    return run(store, years=years, capacities=capacities, n=n)
