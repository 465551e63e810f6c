"""
Centralized Constants for KeysChartAnalyzer

Consolidates stream detection thresholds, chord size categories and
analyzer defaults to avoid duplication across modules.
"""

# =============================================================================
# Analyzer Version
# =============================================================================

PATTERN_ANALYZER_VERSION = "0.0.1"

# =============================================================================
# Stream Detection
# =============================================================================

# Minimum tempo (BPM) at which 16th notes still count as a stream
MIN_STREAM_BPM = 120.0

# Subdivisions per beat used to derive the gap threshold (16th notes)
STREAM_SNAP_DIVISOR = 4

# Minimum amount of objects required for a run to be kept as a stream
MIN_STREAM_OBJECTS = 4

MS_PER_MINUTE = 60000.0


def stream_threshold_ms(
    min_bpm: float = MIN_STREAM_BPM, snap_divisor: int = STREAM_SNAP_DIVISOR
) -> float:
    """Largest gap (ms) between two notes that keeps a stream going."""
    return MS_PER_MINUTE / min_bpm / snap_divisor


# =============================================================================
# Chord Categories
# =============================================================================

CHORD_JUMP = 2
CHORD_HAND = 3
CHORD_QUAD = 4
CHORD_FIVE_PLUS = 5  # lower bound, anything larger also counts

# =============================================================================
# Strain
# =============================================================================

DEFAULT_STRAIN_COEFFICIENT = 1.0
DEFAULT_LN_STRAIN_MULTIPLIER = 1.0
