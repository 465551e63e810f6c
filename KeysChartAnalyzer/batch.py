"""
Multi-rate analysis.

Runs one independent PatternAnalyzer per rate. The chart is shared read-only,
every analyzer owns its own scratch state, so the analyses run side by side
on a thread pool.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional

from tqdm import tqdm

from .config import AnalyzerConfig
from .patterns import PatternAnalyzer
from .structures import Chart

logger = logging.getLogger(__name__)


def analyze_rates(
    chart: Chart,
    rates: Iterable[float],
    config: Optional[AnalyzerConfig] = None,
    max_workers: Optional[int] = None,
    show_progress: bool = False,
) -> dict[float, PatternAnalyzer]:
    """
    Analyze one chart at several playback rates.

    Args:
        chart: Chart to analyze (not mutated)
        rates: Playback rates (> 0); duplicates are analyzed once
        config: Detection thresholds shared by every analysis
        max_workers: Thread pool size (None = executor default)
        show_progress: Display a tqdm progress bar

    Returns:
        Analyzer per rate, in input order
    """
    rates = list(dict.fromkeys(rates))
    if not rates:
        return {}

    logger.info("Analyzing %s at %d rates", chart, len(rates))

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        analyses = executor.map(
            lambda rate: PatternAnalyzer(chart, rate=rate, config=config), rates
        )
        analyzers = list(
            tqdm(
                analyses,
                total=len(rates),
                desc="Analyzing rates",
                disable=not show_progress,
            )
        )

    return dict(zip(rates, analyzers))
