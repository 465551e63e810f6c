"""
Pattern Analyzer for Keys Charts

Detects stream patterns in a chart and rolls them up into skillset
percentages:
1. Segmentation: one forward pass splitting the chart into candidate runs
2. Classification: each kept run becomes a PatternInfo with chord counts
3. Roll-up: per-type fold of all patterns into whole-chart totals
4. Skillsets: stream share of the chart and jump/hand/quad stream shares
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import AnalyzerConfig
from ..constants import PATTERN_ANALYZER_VERSION
from ..errors import PatternClassificationError
from ..structures import Chart, HitObject
from .pattern_info import PatternInfo, PatternType
from .skillset import Skillset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreamTotals:
    """Whole-chart stream counters accumulated over all stream patterns."""

    total_stream_length: float = 0.0  # ms, rate-scaled
    count_jump_stream: int = 0
    count_hand_stream: int = 0
    count_quad_stream: int = 0
    count_five_plus_stream: int = 0

    @property
    def total_chord_stream_count(self) -> int:
        return (
            self.count_jump_stream
            + self.count_hand_stream
            + self.count_quad_stream
            + self.count_five_plus_stream
        )


# =============================================================================
# Segmentation
# =============================================================================


def segment_streams(
    hit_objects: Sequence[HitObject],
    rate: float = 1.0,
    config: Optional[AnalyzerConfig] = None,
) -> list[PatternInfo]:
    """
    Split time-ordered hit objects into stream patterns.

    A pair of neighbouring notes continues a run when their scaled gap is at
    most the stream threshold and they sit in different lanes. Runs shorter
    than `config.min_stream_objects` are discarded.

    Args:
        hit_objects: Time-ascending notes of the whole chart
        rate: Playback rate (> 0)
        config: Detection thresholds (defaults to AnalyzerConfig())

    Returns:
        Detected stream patterns in chart order
    """
    config = config or AnalyzerConfig()
    threshold = config.stream_threshold_ms

    patterns: list[PatternInfo] = []
    current_run: list[HitObject] = []

    def finalize_run() -> None:
        if len(current_run) >= config.min_stream_objects:
            patterns.append(PatternInfo(PatternType.STREAM, rate, list(current_run)))
        current_run.clear()

    last_index = len(hit_objects) - 1

    for i in range(1, len(hit_objects)):
        hit_object = hit_objects[i]
        previous = hit_objects[i - 1]

        time_diff = abs(hit_object.start_time / rate - previous.start_time / rate)

        # Too far apart for a stream, or a repeated lane (jack/trill)
        if time_diff > threshold or hit_object.lane == previous.lane:
            # Previous object was still the tail of the running pattern
            if current_run:
                current_run.append(previous)

            finalize_run()
            continue

        current_run.append(previous)

        # End of chart closes the run
        if i == last_index:
            current_run.append(hit_object)
            finalize_run()

    return patterns


# =============================================================================
# Roll-up
# =============================================================================


def _fold_stream_patterns(
    totals: StreamTotals, patterns: Sequence[PatternInfo]
) -> StreamTotals:
    for pattern in patterns:
        totals = dataclasses.replace(
            totals,
            total_stream_length=totals.total_stream_length + pattern.length,
            count_jump_stream=totals.count_jump_stream + pattern.jump_chord_count,
            count_hand_stream=totals.count_hand_stream + pattern.hand_chord_count,
            count_quad_stream=totals.count_quad_stream + pattern.quad_chord_count,
            count_five_plus_stream=(
                totals.count_five_plus_stream + pattern.five_plus_chord_count
            ),
        )
    return totals


def accumulate_stream_totals(patterns: Sequence[PatternInfo]) -> StreamTotals:
    """
    Fold detected patterns, grouped by type, into fresh whole-chart totals.

    Raises:
        PatternClassificationError: a pattern type has no roll-up case
    """
    grouped: dict[PatternType, list[PatternInfo]] = {}
    for pattern in patterns:
        grouped.setdefault(pattern.pattern_type, []).append(pattern)

    totals = StreamTotals()
    for pattern_type, group in grouped.items():
        if pattern_type is PatternType.STREAM:
            totals = _fold_stream_patterns(totals, group)
        else:
            raise PatternClassificationError(
                f"No roll-up defined for pattern type: {pattern_type!r}"
            )

    return totals


def compute_skillset_percentages(
    totals: StreamTotals, map_length: float, rate: float = 1.0
) -> dict[Skillset, float]:
    """
    Derive the seven skillset percentages from whole-chart totals.

    Args:
        totals: Rolled-up stream counters
        map_length: Raw chart duration in ms
        rate: Playback rate (> 0)

    Returns:
        Dict with every reported Skillset as key
    """
    map_time = map_length / rate
    stream_percentage = (
        totals.total_stream_length / map_time * 100 if map_time != 0 else 0.0
    )

    def chord_stream_percent(count: int) -> tuple[float, float]:
        if count == 0 or stream_percentage == 0:
            return 0.0, 0.0
        # Kept in this exact form; downstream values are tuned against it
        percent = (
            count / totals.total_chord_stream_count * 100 / (100 / stream_percentage)
        )
        relative = percent / stream_percentage * 100
        return percent, relative

    jumpstream, relative_jumpstream = chord_stream_percent(totals.count_jump_stream)
    handstream, relative_handstream = chord_stream_percent(totals.count_hand_stream)
    quadstream, relative_quadstream = chord_stream_percent(totals.count_quad_stream)

    return {
        Skillset.STREAM: stream_percentage,
        Skillset.TOTAL_JUMPSTREAM: jumpstream,
        Skillset.RELATIVE_JUMPSTREAM: relative_jumpstream,
        Skillset.TOTAL_HANDSTREAM: handstream,
        Skillset.RELATIVE_HANDSTREAM: relative_handstream,
        Skillset.TOTAL_QUADSTREAM: quadstream,
        Skillset.RELATIVE_QUADSTREAM: relative_quadstream,
    }


# =============================================================================
# Analyzer
# =============================================================================


class PatternAnalyzer:
    """
    Stream pattern analysis of one chart at one rate.

    The analysis runs on construction. One instance per (chart, rate); the
    chart is only read, so separate instances may run on separate threads.
    """

    VERSION = PATTERN_ANALYZER_VERSION

    def __init__(
        self,
        chart: Chart,
        rate: float = 1.0,
        config: Optional[AnalyzerConfig] = None,
    ):
        """
        Args:
            chart: Chart to analyze
            rate: Playback rate resolved from the active mods (> 0)
            config: Detection thresholds
        """
        self.chart = chart
        self.rate = rate
        self.config = config or AnalyzerConfig()

        self.detected_patterns: list[PatternInfo] = []
        self.totals = StreamTotals()
        self.skillset_percentages: dict[Skillset, float] = {}

        self._analyze()

    def _analyze(self) -> None:
        if self.chart.hit_objects:
            self.detected_patterns = segment_streams(
                self.chart.hit_objects, self.rate, self.config
            )

        self.totals = accumulate_stream_totals(self.detected_patterns)
        self.skillset_percentages = compute_skillset_percentages(
            self.totals, self.chart.length, self.rate
        )

        logger.info(
            "Analyzed %s at %sx: %d patterns, %.0f ms of stream (%.2f%%)",
            self.chart,
            self.rate,
            len(self.detected_patterns),
            self.totals.total_stream_length,
            self.skillset_percentages[Skillset.STREAM],
        )
        if logger.isEnabledFor(logging.DEBUG):
            for pattern in self.detected_patterns:
                logger.debug("%s", pattern.describe())

    @property
    def total_stream_length(self) -> float:
        return self.totals.total_stream_length

    @property
    def count_jump_stream(self) -> int:
        return self.totals.count_jump_stream

    @property
    def count_hand_stream(self) -> int:
        return self.totals.count_hand_stream

    @property
    def count_quad_stream(self) -> int:
        return self.totals.count_quad_stream

    @property
    def count_five_plus_stream(self) -> int:
        return self.totals.count_five_plus_stream

    @property
    def total_chord_stream_count(self) -> int:
        return self.totals.total_chord_stream_count
