# scarcomp/core/scarcity.py

"""
Scarcity classifier.

Selects the N highest-value time steps of the load and of the residual
load and labels each load scarcity step as confirmed when its residual
load also qualifies among the residual top-N values.
"""

import logging
from numbers import Integral

import numpy as np

from ..exceptions import InvalidParameterError
from ..interfaces import ScarcityResult

logger = logging.getLogger(__name__)


def top_n_indices(values: np.ndarray, n: int) -> np.ndarray:
    """
    Indices of the ``n`` largest values, largest first.

    Equal values are ordered by ascending index, so the selection among
    ties at the boundary is deterministic.
    """
    return np.argsort(-values, kind="stable")[:n]


def _as_series(name: str, series) -> np.ndarray:
    values = np.asarray(series, dtype=float)
    if values.ndim != 1:
        raise InvalidParameterError(name, values.shape, "expected a 1-D series")
    if not np.isfinite(values).all():
        position = int(np.flatnonzero(~np.isfinite(values))[0])
        raise InvalidParameterError(
            name, values[position], f"non-finite value at index {position}"
        )
    return values


def classify_scarcity(load, residual, n: int) -> ScarcityResult:
    """
    Classify the load scarcity time steps against the residual load.

    Parameters
    ----------
    load : array-like
        Flat load series.
    residual : array-like
        Flat residual load series, parallel to ``load``.
    n : int
        Number of scarcity time steps, ``1 <= n <= len(load)``.

    Returns
    -------
    ScarcityResult
        Load and residual top-N indices, the residual top-N values and one
        confirmed flag per load scarcity step.

    Raises
    ------
    InvalidParameterError
        If ``n`` is out of range, or the series differ in length, are not
        1-D or contain non-finite values.

    Notes
    -----
    A load scarcity step is confirmed when its residual value *equals* one
    of the residual top-N values. With tied residual values this can
    confirm a step whose index is not in ``residual_indices``. When every
    value is identical the top-N selection is the first N indices.

    Examples
    --------
    >>> result = classify_scarcity([100, 90, 80, 70, 60], [60, 90, 40, 70, 90], 2)
    >>> result.load_indices, result.confirmed
    (array([0, 1]), array([False,  True]))
    """
    load = _as_series("load", load)
    residual = _as_series("residual", residual)
    if load.shape != residual.shape:
        raise InvalidParameterError(
            "residual", len(residual), f"length differs from load length {len(load)}"
        )
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidParameterError("n", n, "must be an integer")
    if not 1 <= n <= len(load):
        raise InvalidParameterError("n", n, f"must satisfy 1 <= n <= {len(load)}")
    n = int(n)

    load_indices = top_n_indices(load, n)
    residual_indices = top_n_indices(residual, n)
    residual_top_values = residual[residual_indices]
    confirmed = np.isin(residual[load_indices], residual_top_values)

    result = ScarcityResult(
        n=n,
        load_indices=load_indices,
        residual_indices=residual_indices,
        residual_top_values=residual_top_values,
        confirmed=confirmed,
        load_values=load[load_indices],
        residual_values=residual[load_indices],
    )
    logger.debug(f"{result.n_confirmed}/{n} load scarcity steps confirmed")
    return result
