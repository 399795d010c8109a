# scarcomp/core/residual.py

"""
Residual load engine.

Flattens the load and renewable availability series of a store across a
year selection and nets the renewable generation implied by a capacity
assignment out of the load.
"""

import logging
from typing import Hashable, Iterable, Mapping, Union

import numpy as np

from ..constants import RENEWABLES, Technology
from ..interfaces import CapacityAssignment, FlatSeries, SeriesStore, YearSelection

logger = logging.getLogger(__name__)


def flatten(store: SeriesStore, technology, years: YearSelection) -> np.ndarray:
    """
    Concatenate the yearly columns of one technology in selection order.

    Raises
    ------
    MissingDataError
        If the technology has no column for one of the years.
    """
    return store.columns(Technology.parse(technology), years.years)


def compute_residual_load(
    store: SeriesStore,
    years: Union[YearSelection, Iterable[Hashable]],
    capacities: Union[CapacityAssignment, Mapping, None] = None,
) -> FlatSeries:
    """
    Compute the flat load and residual load series.

    ``residual[i] = load[i] - sum(capacity[tech] * value[tech][i])`` over
    the renewables, summed in the fixed order Solar, WindOff, WindOn so
    results are reproducible bit for bit.

    Parameters
    ----------
    store : SeriesStore
        Validated time series of one region.
    years : YearSelection or iterable
        Years to concatenate, in flattening order.
    capacities : CapacityAssignment or mapping, optional
        Installed capacity per renewable. Missing renewables have zero
        capacity; ``None`` means no renewables at all.

    Returns
    -------
    FlatSeries
        Parallel load and residual arrays of length
        ``len(years) * store.periods_per_year``. The residual is not
        clamped and may be negative.

    Raises
    ------
    InvalidParameterError
        If the selection is empty or a capacity is invalid.
    MissingDataError
        If a selected year or a technology column is missing.

    Examples
    --------
    >>> load, residual = compute_residual_load(store, [1, 2], {'Solar': 20})
    >>> len(load) == 2 * 8760
    True
    """
    selection = YearSelection.from_iterable(years)
    caps = CapacityAssignment.from_mapping(capacities)
    selection.check_available(store)

    load = flatten(store, Technology.LOAD, selection)
    residual = load.copy()
    for tech in RENEWABLES:
        capacity = caps[tech]
        availability = flatten(store, tech, selection)
        if capacity:
            residual -= capacity * availability

    logger.debug(
        f"Residual load for '{store.region}', years {list(selection.years)}, "
        f"capacities {caps.to_dict()}: min={residual.min():.3f}, max={residual.max():.3f}"
    )
    return FlatSeries(
        load=load,
        residual=residual,
        years=selection.years,
        periods_per_year=store.periods_per_year,
    )
