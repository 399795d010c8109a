# scarcomp/interfaces/parameters.py

"""
Request parameters for a residual load computation.

This module defines immutable dataclasses for the transient parameters
supplied with every computation request:

- CapacityAssignment: installed capacity per renewable technology
- YearSelection: ordered, non-empty selection of weather/load years

Each parameter class validates itself on construction and raises
InvalidParameterError for out-of-range values.
"""

import math
from numbers import Integral
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Mapping, Optional, Tuple, Union

from ..constants import RENEWABLES, Technology
from ..exceptions import InvalidParameterError, MissingDataError


def _technology_or_none(key):
    try:
        return Technology.parse(key)
    except ValueError:
        return None


@dataclass(frozen=True)
class CapacityAssignment:
    """
    Installed capacity per renewable technology.

    Capacities are expressed in the units of the normalized renewable
    series (GW in the default data set). Renewables absent from the
    mapping have zero capacity and do not affect the residual load.

    Attributes
    ----------
    capacities : dict of Technology -> float
        Non-negative, finite capacity per renewable technology.

    Examples
    --------
    >>> caps = CapacityAssignment.from_mapping({'Solar': 10, 'WindOn': 5})
    >>> caps[Technology.WIND_OFFSHORE]
    0.0
    """
    capacities: Dict[Technology, float] = field(default_factory=dict)

    def __post_init__(self):
        normalized = {}
        keys = {}
        for key, value in self.capacities.items():
            try:
                tech = Technology.parse(key)
            except ValueError as e:
                raise InvalidParameterError("capacity technology", key, str(e)) from e
            if not tech.is_renewable:
                raise InvalidParameterError(
                    "capacity technology", key, "Load has no installed capacity"
                )
            if tech in normalized:
                raise InvalidParameterError(
                    "capacity technology", key,
                    f"{tech.value} already given as {keys[tech]!r}"
                )
            try:
                value = float(value)
            except (TypeError, ValueError) as e:
                raise InvalidParameterError(f"capacity[{tech.value}]", value, "not a number") from e
            if not math.isfinite(value):
                raise InvalidParameterError(f"capacity[{tech.value}]", value, "must be finite")
            if value < 0:
                raise InvalidParameterError(f"capacity[{tech.value}]", value, "must be non-negative")
            keys[tech] = key
            normalized[tech] = value
        object.__setattr__(self, "capacities", normalized)

    @classmethod
    def from_mapping(
        cls,
        capacities: Union['CapacityAssignment', Mapping, None] = None,
        **kwargs: float,
    ) -> 'CapacityAssignment':
        """
        Coerce a mapping (or None) into a CapacityAssignment.

        Keyword arguments are merged on top, keyed by technology value,
        e.g. ``from_mapping(Solar=10.0)``, and replace any entry of
        ``capacities`` naming the same technology.
        """
        if isinstance(capacities, cls) and not kwargs:
            return capacities
        merged = dict(capacities.capacities if isinstance(capacities, cls) else (capacities or {}))
        overridden = {_technology_or_none(name) for name in kwargs} - {None}
        merged = {k: v for k, v in merged.items() if _technology_or_none(k) not in overridden}
        merged.update(kwargs)
        return cls(merged)

    def __getitem__(self, technology) -> float:
        return self.capacities.get(Technology.parse(technology), 0.0)

    def items(self) -> Iterable[Tuple[Technology, float]]:
        """All renewables with their capacity, in summation order."""
        return [(tech, self[tech]) for tech in RENEWABLES]

    @property
    def total(self) -> float:
        return sum(self.capacities.values())

    def to_dict(self) -> Dict[str, float]:
        return {tech.value: cap for tech, cap in self.items()}


@dataclass(frozen=True)
class YearSelection:
    """
    Ordered selection of weather/load years to concatenate.

    Selecting k years yields flat series of length ``k * periods_per_year``.
    Order is significant only for the flattening order.

    Attributes
    ----------
    years : tuple
        Distinct year identifiers, in flattening order.
    """
    years: Tuple[Hashable, ...]

    def __post_init__(self):
        years = tuple(self.years)
        if not years:
            raise InvalidParameterError("years", years, "selection must not be empty")
        seen = set()
        dupes = [y for y in years if y in seen or seen.add(y)]
        if dupes:
            raise InvalidParameterError("years", years, f"duplicate years {dupes}")
        object.__setattr__(self, "years", years)

    @classmethod
    def from_iterable(
        cls,
        years: Union['YearSelection', Iterable[Hashable]],
    ) -> 'YearSelection':
        if isinstance(years, cls):
            return years
        if isinstance(years, (str, bytes, Integral)):
            return cls((years,))
        return cls(tuple(years))

    @classmethod
    def first(cls, store, count: int) -> 'YearSelection':
        """
        Select the first ``count`` years of ``store``.

        Raises
        ------
        InvalidParameterError
            If ``count`` is not in ``1..len(store.years)``.
        """
        available = store.years
        if not 1 <= count <= len(available):
            raise InvalidParameterError(
                "years", count, f"expected 1..{len(available)} for region '{store.region}'"
            )
        return cls(tuple(available[:count]))

    def check_available(self, store) -> None:
        """Raise MissingDataError for the first year absent from ``store``."""
        for year in self.years:
            if not store.has_year(year):
                raise MissingDataError(
                    None, year, f"region '{store.region}' has years {list(store.years)}"
                )

    def position(self, year: Hashable) -> int:
        return self.years.index(year)

    def __len__(self) -> int:
        return len(self.years)

    def __iter__(self):
        return iter(self.years)


def as_year_selection(years: Optional[Iterable[Hashable]], store) -> YearSelection:
    """Default to every year of ``store`` when ``years`` is None."""
    if years is None:
        return YearSelection(tuple(store.years))
    return YearSelection.from_iterable(years)
