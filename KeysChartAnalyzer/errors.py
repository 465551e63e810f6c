"""
Exceptions raised by KeysChartAnalyzer.
"""


class AnalysisError(Exception):
    """Base class for analysis failures."""


class EmptyPatternError(AnalysisError, ValueError):
    """Raised when a pattern is built from zero hit objects."""


class PatternClassificationError(AnalysisError):
    """Raised when the roll-up meets a pattern type it has no case for."""
