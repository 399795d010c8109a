# scarcomp/input/reader.py

"""
Reads the yearly time series CSV files of a region into TimeSeriesTables.
"""
import logging
import os
from typing import Dict, Hashable, List

import pandas as pd

from ..constants import PERIOD_INDEX, TECHNOLOGIES, Technology
from ..exceptions import DataIntegrityError, InvalidParameterError
from .config import ReaderConfig

logger = logging.getLogger(__name__)


def year_id(header) -> Hashable:
    """Integer headers become int year ids, anything else is kept as text."""
    text = str(header).strip()
    try:
        return int(text)
    except ValueError:
        return text


class TimeSeriesReader:
    """
    Reads one CSV file per technology: one row per period, one column per
    weather/load year.

    Parameters
    ----------
    config : ReaderConfig
        Data directory, CSV dialect, file names and normalization divisors.

    Example
    -------
    >>> reader = TimeSeriesReader(ReaderConfig(data_dir='data'))
    >>> tables = reader.read_region('BE')
    >>> tables[Technology.LOAD].shape
    (8760, 35)
    """
    def __init__(self, config: ReaderConfig):
        self.config = config

    @property
    def periods_per_year(self) -> int:
        return self.config.periods_per_year

    def check_region(self, region: str) -> None:
        if region not in self.config.regions:
            raise InvalidParameterError(
                "region", region, f"expected one of {list(self.config.regions)}"
            )

    def _year_columns(self, df: pd.DataFrame, tech: Technology) -> List:
        if self.config.year_columns is not None:
            wanted = {str(c).strip() for c in self.config.year_columns}
            columns = [c for c in df.columns if str(c).strip() in wanted]
            if len(columns) != len(wanted):
                found = {str(c).strip() for c in columns}
                raise DataIntegrityError(
                    tech.value, "year set",
                    f"configured year columns {sorted(wanted - found)} not in file"
                )
            return columns
        return [c for c in df.columns if isinstance(year_id(c), int)]

    def read_table(self, region: str, technology) -> pd.DataFrame:
        """
        Read and normalize the table of one technology.

        Returns
        -------
        pd.DataFrame
            Indexed by period ``T`` (1..n), one float column per year id,
            values divided by the technology's normalization divisor.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        DataIntegrityError
            If the file has no year columns or non-numeric year values.
        """
        tech = Technology.parse(technology)
        path = self.config.path_for(region, tech)
        if not os.path.exists(path):
            raise FileNotFoundError(f"No {tech.value} file for region '{region}': {path}")

        df = pd.read_csv(path, sep=self.config.delimiter, decimal=self.config.decimal)
        columns = self._year_columns(df, tech)
        if not columns:
            raise DataIntegrityError(tech.value, "year set", f"no year columns in {path}")

        table = df[columns].rename(columns=year_id)
        try:
            table = table.astype(float)
        except ValueError as e:
            raise DataIntegrityError(tech.value, "non-numeric value", f"{path}: {e}") from e
        table = table / self.config.normalization[tech]
        table.index = pd.RangeIndex(1, len(table) + 1, name=PERIOD_INDEX)

        logger.debug(f"Read {tech.value} for '{region}': {table.shape[0]} periods x {table.shape[1]} years")
        return table

    def read_region(self, region: str) -> Dict[Technology, pd.DataFrame]:
        """Read the tables of every technology of ``region``."""
        self.check_region(region)
        tables = {tech: self.read_table(region, tech) for tech in TECHNOLOGIES}
        logger.info(f"Read {len(tables)} time series tables for region '{region}' from {self.config.data_dir}")
        return tables
