# scarcomp/input/__init__.py

"""
Input data handling submodule for the scarcity comparison framework.
"""
from .config import ReaderConfig
from .reader import TimeSeriesReader
