# scarcomp/core/duration.py

"""Duration curves: a series sorted from its highest to its lowest value."""

import numpy as np


def build_duration_curve(series) -> np.ndarray:
    """
    Sort ``series`` descending.

    Parameters
    ----------
    series : array-like
        One-dimensional values (e.g. flat load or residual load).

    Returns
    -------
    np.ndarray
        A new float array holding the same values, largest first. The
        relative order of equal values is unspecified.
    """
    values = np.asarray(series, dtype=float)
    if values.ndim != 1:
        raise ValueError(f"Expected a 1-D series, got shape {values.shape}")
    return np.sort(values)[::-1].copy()
