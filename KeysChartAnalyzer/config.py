"""
Analyzer configuration.
"""

from dataclasses import dataclass

from .constants import (
    MIN_STREAM_BPM,
    MIN_STREAM_OBJECTS,
    STREAM_SNAP_DIVISOR,
    stream_threshold_ms,
)


@dataclass
class AnalyzerConfig:
    """Configuration for PatternAnalyzer."""

    # Stream detection
    min_stream_bpm: float = MIN_STREAM_BPM
    snap_divisor: int = STREAM_SNAP_DIVISOR  # 4 = 16th notes
    min_stream_objects: int = MIN_STREAM_OBJECTS

    def __post_init__(self):
        if self.min_stream_bpm <= 0:
            raise ValueError(f"min_stream_bpm must be positive: {self.min_stream_bpm}")
        if self.snap_divisor <= 0:
            raise ValueError(f"snap_divisor must be positive: {self.snap_divisor}")
        if self.min_stream_objects < 1:
            raise ValueError(
                f"min_stream_objects must be at least 1: {self.min_stream_objects}"
            )

    @property
    def stream_threshold_ms(self) -> float:
        """Gap threshold; pairs further apart than this break a stream."""
        return stream_threshold_ms(self.min_stream_bpm, self.snap_divisor)
