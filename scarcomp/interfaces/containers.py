# scarcomp/interfaces/containers.py

"""
SeriesStore container for the interfaces package.

This module defines the SeriesStore class that holds the per-technology
time series tables of one region. It is the single input of the residual
load engine and is built once per region selection.

Design principles:
- Immutable after construction (frozen dataclass, tables copied on entry)
- Validation runs automatically in __post_init__
- Tables are pandas DataFrames indexed by period (T = 1..8760) with one
  column per weather/load year
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Hashable, Iterable, Mapping, Sequence, Tuple

import numpy as np
import pandas as pd

from ..constants import HOURS_PER_YEAR, PERIOD_INDEX, TECHNOLOGIES, Technology
from ..exceptions import DataIntegrityError, MissingDataError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SeriesStore:
    """
    Validated, read-only time series of one region.

    Attributes
    ----------
    region : str
        Region identifier (e.g. ``'BE'``).
    tables : mapping of Technology -> pd.DataFrame
        One TimeSeriesTable per technology, as a read-only mapping. The
        frames are kept for inspection only; computations read frozen
        copies taken at construction, so editing a frame in place does not
        alter the store. Rows are periods, columns are
        year identifiers, values are normalized (GW for load, availability
        factor for renewables).
    periods_per_year : int
        Expected row count of every table (default 8760).

    Examples
    --------
    >>> store = SeriesStore('BE', tables)
    >>> store.years
    (1, 2, 3)
    >>> store.column(Technology.SOLAR, 2)[:3]
    array([0.  , 0.  , 0.01])

    Notes
    -----
    - Construction fails with DataIntegrityError if any technology is
      missing, or if period counts, year sets or values are inconsistent
    - The year order of the Load table is the canonical year order
    """
    region: str
    tables: Dict[Technology, pd.DataFrame]
    periods_per_year: int = HOURS_PER_YEAR
    _years: Tuple[Hashable, ...] = field(default=(), init=False, repr=False, compare=False)
    _columns: Mapping = field(default=None, init=False, repr=False, compare=False)
    _index: Mapping = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Copy the tables under canonical keys, validate and freeze them."""
        tables = {}
        keys = {}
        for key, df in self.tables.items():
            try:
                tech = Technology.parse(key)
            except ValueError as e:
                raise DataIntegrityError(str(key), "unknown technology", str(e)) from e
            if tech in tables:
                raise DataIntegrityError(
                    tech.value, "duplicate technology",
                    f"keys {keys[tech]!r} and {key!r} name the same technology"
                )
            keys[tech] = key
            tables[tech] = df.copy()
        object.__setattr__(self, "tables", tables)
        self.validate()

        # Computations read the frozen arrays, never the frames.
        columns = {}
        index = {}
        for tech, df in tables.items():
            index[tech] = df.index.copy()
            by_year = {}
            for year in df.columns:
                values = df[year].to_numpy(dtype=float, copy=True)
                values.setflags(write=False)
                by_year[year] = values
            columns[tech] = MappingProxyType(by_year)
        object.__setattr__(self, "tables", MappingProxyType(tables))
        object.__setattr__(self, "_columns", MappingProxyType(columns))
        object.__setattr__(self, "_index", MappingProxyType(index))
        object.__setattr__(self, "_years", tuple(tables[Technology.LOAD].columns))
        logger.debug(
            f"SeriesStore '{self.region}' ready: {len(self._years)} years x "
            f"{self.periods_per_year} periods"
        )

    def validate(self) -> None:
        """
        Check every store invariant, technology by technology.

        Checks (in order):
        - All four technologies are present
        - Every table has ``periods_per_year`` rows
        - Every table has the same year set as the Load table
        - Every value is numeric, finite and non-negative

        Raises
        ------
        DataIntegrityError
            Identifying the technology and the broken invariant.
        """
        for tech in TECHNOLOGIES:
            if tech not in self.tables:
                raise DataIntegrityError(
                    tech.value, "missing technology",
                    f"region '{self.region}' has {sorted(t.value for t in self.tables)}"
                )

        reference_years = set(self.tables[Technology.LOAD].columns)
        for tech in TECHNOLOGIES:
            df = self.tables[tech]
            if len(df) != self.periods_per_year:
                raise DataIntegrityError(
                    tech.value, "period count",
                    f"expected {self.periods_per_year}, found {len(df)}"
                )
            if df.columns.duplicated().any():
                dupes = sorted(set(df.columns[df.columns.duplicated()]), key=str)
                raise DataIntegrityError(tech.value, "year set", f"duplicate years {dupes}")
            years = set(df.columns)
            if years != reference_years:
                missing = sorted(reference_years - years, key=str)
                extra = sorted(years - reference_years, key=str)
                raise DataIntegrityError(
                    tech.value, "year set",
                    f"missing {missing}, unexpected {extra} relative to Load"
                )
            self._validate_values(tech, df)

    @staticmethod
    def _validate_values(tech: Technology, df: pd.DataFrame) -> None:
        try:
            values = df.to_numpy(dtype=float)
        except (TypeError, ValueError) as e:
            raise DataIntegrityError(tech.value, "non-numeric value", str(e)) from e

        bad = np.argwhere(~np.isfinite(values))
        if bad.size:
            row, col = bad[0]
            raise DataIntegrityError(
                tech.value, "non-finite value",
                f"year={df.columns[col]!r}, period={df.index[row]}, value={values[row, col]}",
                year=df.columns[col], period=int(df.index[row]), value=float(values[row, col]),
            )
        bad = np.argwhere(values < 0)
        if bad.size:
            row, col = bad[0]
            raise DataIntegrityError(
                tech.value, "negative value",
                f"year={df.columns[col]!r}, period={df.index[row]}, value={values[row, col]}",
                year=df.columns[col], period=int(df.index[row]), value=float(values[row, col]),
            )

    @classmethod
    def from_columns(
        cls,
        region: str,
        columns: Mapping[Technology, Mapping[Hashable, Sequence[float]]],
        periods_per_year: int = HOURS_PER_YEAR,
    ) -> 'SeriesStore':
        """
        Build a store from plain ``{technology: {year: values}}`` mappings.

        Parameters
        ----------
        region : str
            Region identifier.
        columns : mapping
            Per technology, a mapping of year identifier to the values of
            that year (one per period).
        periods_per_year : int, optional
            Expected number of values per year (default 8760).

        Returns
        -------
        SeriesStore
            Validated store.
        """
        tables = {}
        for tech, by_year in columns.items():
            df = pd.DataFrame({year: np.asarray(values, dtype=float) for year, values in by_year.items()})
            df.index = pd.RangeIndex(1, len(df) + 1, name=PERIOD_INDEX)
            tables[tech] = df
        return cls(region=region, tables=tables, periods_per_year=periods_per_year)

    @property
    def years(self) -> Tuple[Hashable, ...]:
        """Available year identifiers, in Load table order."""
        return self._years

    @property
    def technologies(self) -> Tuple[Technology, ...]:
        return TECHNOLOGIES

    def has_year(self, year: Hashable) -> bool:
        return year in self._years

    def table(self, technology) -> pd.DataFrame:
        """Return a copy of the table of ``technology``, as validated."""
        tech = Technology.parse(technology)
        return pd.DataFrame(
            {year: values.copy() for year, values in self._columns[tech].items()},
            index=self._index[tech].copy(),
        )

    def column(self, technology, year: Hashable) -> np.ndarray:
        """
        Return the values of one technology for one year.

        Raises
        ------
        MissingDataError
            If the table has no column for ``year``.
        """
        tech = Technology.parse(technology)
        by_year = self._columns.get(tech)
        if by_year is None:
            raise MissingDataError(tech.value, year, "technology not in store")
        if year not in by_year:
            raise MissingDataError(tech.value, year)
        return by_year[year].copy()

    def columns(self, technology, years: Iterable[Hashable]) -> np.ndarray:
        """Concatenate the columns of ``technology`` for ``years`` in order."""
        return np.concatenate([self.column(technology, year) for year in years])


def build_series_store(region: str, reader) -> SeriesStore:
    """
    Build the validated SeriesStore of ``region`` from an ingestion reader.

    Parameters
    ----------
    region : str
        Region identifier.
    reader : TimeSeriesReader
        Any object exposing ``read_region(region)`` returning one table per
        technology, aligned on period index and year set.

    Returns
    -------
    SeriesStore

    Raises
    ------
    DataIntegrityError
        If the tables violate a store invariant.
    """
    tables = reader.read_region(region)
    periods = getattr(reader, "periods_per_year", HOURS_PER_YEAR)
    store = SeriesStore(region=region, tables=tables, periods_per_year=periods)
    logger.info(f"Built series store for '{region}' with years {list(store.years)}")
    return store
