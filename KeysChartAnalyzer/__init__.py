"""
KeysChartAnalyzer

Difficulty profiling for vertical-scrolling multi-lane (keys) charts:
- Strain data points per hand with multiplicative strain coefficients
- Stream pattern detection with chord classification
- Skillset percentages (stream, jumpstream, handstream, quadstream)
"""

from .batch import analyze_rates
from .config import AnalyzerConfig
from .errors import AnalysisError, EmptyPatternError, PatternClassificationError
from .patterns import (
    REPORTED_SKILLSETS,
    PatternAnalyzer,
    PatternInfo,
    PatternType,
    Skillset,
    StreamTotals,
)
from .report import format_analysis_report, generate_markdown_report
from .strain import StrainChain, StrainDataPoint
from .structures import (
    Chart,
    FingerAction,
    FingerState,
    Hand,
    HitObject,
    ScopedHitObject,
)

__all__ = [
    "HitObject",
    "Chart",
    "Hand",
    "FingerAction",
    "FingerState",
    "ScopedHitObject",
    "StrainDataPoint",
    "StrainChain",
    "PatternAnalyzer",
    "PatternInfo",
    "PatternType",
    "Skillset",
    "REPORTED_SKILLSETS",
    "StreamTotals",
    "AnalyzerConfig",
    "AnalysisError",
    "EmptyPatternError",
    "PatternClassificationError",
    "analyze_rates",
    "format_analysis_report",
    "generate_markdown_report",
]
