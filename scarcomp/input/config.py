# scarcomp/input/config.py

"""
Ingestion configuration.

The data directory, CSV dialect, file names and normalization divisors are
bundled into a ReaderConfig value passed to the reader at construction.
Defaults match the ENTSO-E TYNDP 2020 files (``;`` delimiter, ``,``
decimal mark).
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional, Sequence, Tuple

import yaml

from ..constants import (
    DEFAULT_DECIMAL,
    DEFAULT_DELIMITER,
    DEFAULT_FILENAMES,
    DEFAULT_NORMALIZATION,
    DEFAULT_REGIONS,
    HOURS_PER_YEAR,
    TECHNOLOGIES,
    Technology,
)


@dataclass(frozen=True)
class ReaderConfig:
    """
    Settings of the time series reader.

    Attributes
    ----------
    data_dir : str
        Directory holding the input CSV files.
    delimiter : str
        Field delimiter of the CSV files.
    decimal : str
        Decimal mark of the CSV files.
    filenames : dict of Technology -> str
        File name template per technology; ``{region}`` is substituted.
    normalization : dict of Technology -> float
        Divisor applied to the raw values of each technology.
    regions : tuple of str
        Regions that may be requested.
    year_columns : sequence, optional
        Column headers to read as years. By default every column whose
        header is an integer is a year column.
    periods_per_year : int
        Expected rows per file.
    """
    data_dir: str
    delimiter: str = DEFAULT_DELIMITER
    decimal: str = DEFAULT_DECIMAL
    filenames: Dict[Technology, str] = field(default_factory=lambda: dict(DEFAULT_FILENAMES))
    normalization: Dict[Technology, float] = field(default_factory=lambda: dict(DEFAULT_NORMALIZATION))
    regions: Tuple[str, ...] = DEFAULT_REGIONS
    year_columns: Optional[Sequence[Hashable]] = None
    periods_per_year: int = HOURS_PER_YEAR

    def __post_init__(self):
        filenames = dict(DEFAULT_FILENAMES)
        filenames.update({Technology.parse(k): v for k, v in self.filenames.items()})
        normalization = dict(DEFAULT_NORMALIZATION)
        normalization.update({Technology.parse(k): float(v) for k, v in self.normalization.items()})
        for tech in TECHNOLOGIES:
            if normalization[tech] <= 0:
                raise ValueError(
                    f"Normalization divisor for {tech.value} must be positive, got {normalization[tech]}"
                )
        if self.delimiter == self.decimal:
            raise ValueError(f"Delimiter and decimal mark must differ, both are '{self.delimiter}'")
        object.__setattr__(self, "filenames", filenames)
        object.__setattr__(self, "normalization", normalization)
        object.__setattr__(self, "regions", tuple(self.regions))
        if self.year_columns is not None:
            object.__setattr__(self, "year_columns", tuple(self.year_columns))

    def path_for(self, region: str, technology) -> str:
        """Full path of the CSV file of ``technology`` in ``region``."""
        tech = Technology.parse(technology)
        return os.path.join(self.data_dir, self.filenames[tech].format(region=region))

    @classmethod
    def from_dict(cls, config: Dict[str, Any], **overrides: Any) -> 'ReaderConfig':
        """Build a config from a plain dict; ``overrides`` that are not None win."""
        merged = dict(config)
        merged.update({k: v for k, v in overrides.items() if v is not None})
        unknown = set(merged) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown reader config keys: {sorted(unknown)}")
        if 'data_dir' not in merged:
            raise ValueError("Reader config requires 'data_dir'")
        return cls(**merged)

    @classmethod
    def from_yaml(cls, config_path: str, **overrides: Any) -> 'ReaderConfig':
        """
        Read a YAML config file.

        A relative ``data_dir`` is resolved against the directory of the
        config file.

        Example
        -------
        .. code-block:: yaml

            data_dir: data
            delimiter: ";"
            decimal: ","
            regions: [BE, PT]
            normalization:
              Load: 1000
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Reader config file not found: {config_path}")
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}
        data_dir = config.get('data_dir')
        if overrides.get('data_dir') is None and data_dir is not None and not os.path.isabs(data_dir):
            config['data_dir'] = os.path.join(os.path.dirname(os.path.abspath(config_path)), data_dir)
        return cls.from_dict(config, **overrides)
