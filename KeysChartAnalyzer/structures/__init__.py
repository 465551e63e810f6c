"""
KeysChartAnalyzer Structures

Note, chart and hand-scoped note containers shared by the strain solver
and the pattern analyzer.
"""

from .hit_object import Chart, HitObject
from .scoped import FingerAction, FingerState, Hand, ScopedHitObject

__all__ = [
    "HitObject",
    "Chart",
    "Hand",
    "FingerAction",
    "FingerState",
    "ScopedHitObject",
]
