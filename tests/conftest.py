# tests/conftest.py

"""
Shared fixtures for scarcomp tests.

Provides:
- Synthetic full-size stores (8760 periods per year)
- A tiny hand-checked store (5 periods per year)
- A data directory of CSV files in the TYNDP dialect (';' and ',')
"""

import numpy as np
import pandas as pd
import pytest

from scarcomp.constants import HOURS_PER_YEAR, TECHNOLOGIES, Technology
from scarcomp.input import ReaderConfig
from scarcomp.interfaces import SeriesStore


# =============================================================================
# Helpers
# =============================================================================

def synthetic_columns(years, periods, seed=0):
    """Random non-negative {technology: {year: values}} columns."""
    rng = np.random.default_rng(seed)
    columns = {}
    for tech in TECHNOLOGIES:
        if tech is Technology.LOAD:
            columns[tech] = {y: 8.0 + 4.0 * rng.random(periods) for y in years}
        else:
            columns[tech] = {y: rng.random(periods) for y in years}
    return columns


def write_region_csvs(directory, region, years, periods, seed=0,
                      delimiter=";", decimal=","):
    """
    Write the four CSV files of a region in raw units (MW, percent).

    Returns the normalized columns written, for comparison.
    """
    columns = synthetic_columns(years, periods, seed)
    config = ReaderConfig(data_dir=str(directory), delimiter=delimiter, decimal=decimal)
    for tech in TECHNOLOGIES:
        raw = pd.DataFrame({
            str(y): np.round(values * config.normalization[tech], 3)
            for y, values in columns[tech].items()
        })
        raw.insert(0, "Hour", np.arange(1, periods + 1))
        raw.to_csv(config.path_for(region, tech), sep=delimiter, decimal=decimal, index=False)
    return columns


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Full-size store: region 'BE', years [1, 2, 3], 8760 periods each."""
    return SeriesStore.from_columns("BE", synthetic_columns([1, 2, 3], HOURS_PER_YEAR))


@pytest.fixture
def tiny_store():
    """
    Hand-checked store with 5 periods per year.

    Years: [2001, 2002]
    Load 2001: [100, 90, 80, 70, 60], Load 2002: [50, 55, 95, 40, 65]
    Solar is 0.5 in period 1 and 3 of 2001, zero elsewhere; wind is zero
    except WindOn = 1.0 in period 3 of 2002.
    """
    zeros = [0.0] * 5
    columns = {
        Technology.LOAD: {2001: [100, 90, 80, 70, 60], 2002: [50, 55, 95, 40, 65]},
        Technology.SOLAR: {2001: [0.5, 0.0, 0.5, 0.0, 0.0], 2002: zeros},
        Technology.WIND_OFFSHORE: {2001: zeros, 2002: zeros},
        Technology.WIND_ONSHORE: {2001: zeros, 2002: [0.0, 0.0, 1.0, 0.0, 0.0]},
    }
    return SeriesStore.from_columns("BE", columns, periods_per_year=5)


# =============================================================================
# CSV Directory Fixtures
# =============================================================================

@pytest.fixture
def csv_data_dir(tmp_path):
    """
    Data directory with BE files: 3 years (1, 2, 3) x 24 periods,
    ';' delimiter and ',' decimal mark, plus a leading 'Hour' column.
    """
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    write_region_csvs(data_dir, "BE", [1, 2, 3], 24)
    return str(data_dir)


@pytest.fixture
def csv_config(csv_data_dir):
    """Reader config for csv_data_dir (24 periods per year)."""
    return ReaderConfig(data_dir=csv_data_dir, periods_per_year=24)


@pytest.fixture
def region_writer():
    """The write_region_csvs helper, for tests needing a custom dialect."""
    return write_region_csvs
