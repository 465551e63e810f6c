"""
KeysChartAnalyzer Strain Package

Chord-level strain data points and the per-hand chain walked by
overall-difficulty integrators.
"""

from .chain import StrainChain
from .data_point import StrainDataPoint

__all__ = [
    "StrainDataPoint",
    "StrainChain",
]
