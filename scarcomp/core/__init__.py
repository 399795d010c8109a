# scarcomp/core/__init__.py

"""
Numeric pipeline: residual load, duration curves and scarcity classification.
"""
from .residual import compute_residual_load
from .duration import build_duration_curve
from .scarcity import classify_scarcity, top_n_indices

__all__ = [
    'compute_residual_load',
    'build_duration_curve',
    'classify_scarcity',
    'top_n_indices',
]
