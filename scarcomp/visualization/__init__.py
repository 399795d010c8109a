# scarcomp/visualization/__init__.py

"""
Visualization submodule: duration curves and classified scarcity steps.
"""

from .plotter import ScarcityPlotter

__all__ = [
    'ScarcityPlotter',
]
