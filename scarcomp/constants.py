# scarcomp/constants.py

"""
Constants shared across the scarcity comparison framework.

This module defines the technology enumeration, the fixed renewable
iteration order, tolerance values and the ingestion defaults of the
ENTSO-E TYNDP 2020 data set the framework was first built around.
"""

from enum import Enum
from typing import Dict, Tuple

# Tolerance for floating point comparisons
TOL = 1e-9

# Hours per (non-leap) year; one period per hour
HOURS_PER_YEAR = 8760


class Technology(str, Enum):
    """Time series kinds held per region. LOAD is demand, the rest supply."""
    LOAD = "Load"
    SOLAR = "Solar"
    WIND_OFFSHORE = "WindOff"
    WIND_ONSHORE = "WindOn"

    @classmethod
    def parse(cls, name) -> "Technology":
        """
        Resolve a technology from an enum member, its value or its name.

        Matching is case-insensitive and also accepts the long aliases
        ``WindOffshore`` and ``WindOnshore``.

        Raises
        ------
        ValueError
            If ``name`` matches no technology.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("_", "")
        for tech in cls:
            if key in (tech.value.lower(), tech.name.lower().replace("_", "")):
                return tech
        raise ValueError(
            f"Unknown technology '{name}'. Expected one of: {[t.value for t in cls]}"
        )

    @property
    def is_renewable(self) -> bool:
        return self is not Technology.LOAD


# Every technology, demand first
TECHNOLOGIES: Tuple[Technology, ...] = (
    Technology.LOAD,
    Technology.SOLAR,
    Technology.WIND_OFFSHORE,
    Technology.WIND_ONSHORE,
)

# Renewable order used for residual load summation and iteration
RENEWABLES: Tuple[Technology, ...] = TECHNOLOGIES[1:]

# Regions covered by the default data set
DEFAULT_REGIONS: Tuple[str, ...] = ("BE", "PT")

# Input file names per technology; {region} is substituted
DEFAULT_FILENAMES: Dict[Technology, str] = {
    Technology.LOAD: "{region}_LOAD_NT.2025.csv",
    Technology.SOLAR: "Solar_TYNDP2020_{region}.csv",
    Technology.WIND_OFFSHORE: "WindOff_TYNDP2020_{region}.csv",
    Technology.WIND_ONSHORE: "WindOn_TYNDP2020_{region}.csv",
}

# Divisors applied to raw values: MW -> GW for load, % -> factor for renewables
DEFAULT_NORMALIZATION: Dict[Technology, float] = {
    Technology.LOAD: 1000.0,
    Technology.SOLAR: 100.0,
    Technology.WIND_OFFSHORE: 100.0,
    Technology.WIND_ONSHORE: 100.0,
}

DEFAULT_DELIMITER = ";"
DEFAULT_DECIMAL = ","

# Name of the period index of every time series table
PERIOD_INDEX = "T"
