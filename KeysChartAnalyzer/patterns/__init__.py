"""
KeysChartAnalyzer Patterns Package

Stream segmentation, chord classification and skillset roll-up.
"""

from .analyzer import (
    PatternAnalyzer,
    StreamTotals,
    accumulate_stream_totals,
    compute_skillset_percentages,
    segment_streams,
)
from .pattern_info import PatternInfo, PatternType
from .skillset import REPORTED_SKILLSETS, Skillset

__all__ = [
    "PatternAnalyzer",
    "PatternInfo",
    "PatternType",
    "Skillset",
    "REPORTED_SKILLSETS",
    "StreamTotals",
    "segment_streams",
    "accumulate_stream_totals",
    "compute_skillset_percentages",
]
