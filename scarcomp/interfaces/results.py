# scarcomp/interfaces/results.py

"""
Result containers produced by the residual load engine and the scarcity
classifier.

- FlatSeries: load and residual load concatenated across the selected years
- ScarcityResult: top-N scarcity steps of both series and the
  confirmed / unconfirmed classification of every load scarcity step
"""

from dataclasses import dataclass
from typing import Hashable, Tuple

import numpy as np
import pandas as pd

from ..constants import HOURS_PER_YEAR


def _frozen(array) -> np.ndarray:
    array = np.array(array, copy=True)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class FlatSeries:
    """
    Load and residual load flattened across a year selection.

    The flat index of period ``p`` (1-based) of the year at position ``k``
    (0-based) of the selection is ``k * periods_per_year + (p - 1)``.

    Attributes
    ----------
    load : np.ndarray
        Concatenated load, one value per flat index.
    residual : np.ndarray
        Load minus renewable generation at the same flat index. May be
        negative (renewable oversupply).
    years : tuple
        Year identifiers in flattening order.
    periods_per_year : int
        Periods contributed by each year.

    Notes
    -----
    Unpacks like a pair: ``load, residual = flat``.
    """
    load: np.ndarray
    residual: np.ndarray
    years: Tuple[Hashable, ...]
    periods_per_year: int = HOURS_PER_YEAR

    def __post_init__(self):
        object.__setattr__(self, "load", _frozen(self.load))
        object.__setattr__(self, "residual", _frozen(self.residual))
        object.__setattr__(self, "years", tuple(self.years))
        if self.load.shape != self.residual.shape:
            raise ValueError(
                f"load and residual differ in shape: {self.load.shape} vs {self.residual.shape}"
            )

    def __iter__(self):
        return iter((self.load, self.residual))

    def __len__(self) -> int:
        return len(self.load)

    def locate(self, flat_index: int) -> Tuple[Hashable, int]:
        """
        Map a flat index back to ``(year, period)``.

        Raises
        ------
        IndexError
            If ``flat_index`` is outside the series.
        """
        if not 0 <= flat_index < len(self.load):
            raise IndexError(f"flat index {flat_index} outside 0..{len(self.load) - 1}")
        position, offset = divmod(int(flat_index), self.periods_per_year)
        return self.years[position], offset + 1

    def to_frame(self) -> pd.DataFrame:
        """Long table with year, period, load and residual_load columns."""
        return pd.DataFrame({
            'year': np.repeat(np.array(self.years, dtype=object), self.periods_per_year),
            'period': np.tile(np.arange(1, self.periods_per_year + 1), len(self.years)),
            'load': self.load,
            'residual_load': self.residual,
        })


@dataclass(frozen=True, eq=False)
class ScarcityResult:
    """
    Classification of the load scarcity time steps.

    Attributes
    ----------
    n : int
        Number of scarcity time steps per series.
    load_indices : np.ndarray
        Flat indices of the N largest load values, largest first.
    residual_indices : np.ndarray
        Flat indices of the N largest residual load values, largest first.
    residual_top_values : np.ndarray
        Residual load values at ``residual_indices``.
    confirmed : np.ndarray of bool
        Per entry of ``load_indices``: whether the residual load at that
        index is one of ``residual_top_values``.
    load_values, residual_values : np.ndarray
        Load and residual load at ``load_indices`` (scatter coordinates).

    Notes
    -----
    Confirmation is decided by value membership, not index membership.
    The two agree when residual values are distinct and may differ under
    ties.
    """
    n: int
    load_indices: np.ndarray
    residual_indices: np.ndarray
    residual_top_values: np.ndarray
    confirmed: np.ndarray
    load_values: np.ndarray
    residual_values: np.ndarray

    def __post_init__(self):
        for name in ('load_indices', 'residual_indices', 'residual_top_values',
                     'confirmed', 'load_values', 'residual_values'):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    @property
    def confirmed_indices(self) -> np.ndarray:
        return self.load_indices[self.confirmed]

    @property
    def unconfirmed_indices(self) -> np.ndarray:
        return self.load_indices[~self.confirmed]

    @property
    def n_confirmed(self) -> int:
        return int(self.confirmed.sum())

    @property
    def confirmation_rate(self) -> float:
        """Share of load scarcity steps confirmed by the residual load."""
        return self.n_confirmed / self.n

    def is_confirmed(self, flat_index: int) -> bool:
        """
        Classification of one load scarcity step.

        Raises
        ------
        KeyError
            If ``flat_index`` is not a load scarcity step.
        """
        hits = np.flatnonzero(self.load_indices == flat_index)
        if hits.size == 0:
            raise KeyError(f"flat index {flat_index} is not a load scarcity step")
        return bool(self.confirmed[hits[0]])

    def to_frame(self) -> pd.DataFrame:
        """One row per load scarcity step, largest load first."""
        return pd.DataFrame({
            'index': self.load_indices,
            'load': self.load_values,
            'residual_load': self.residual_values,
            'confirmed': self.confirmed,
        })
