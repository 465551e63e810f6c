"""
Markdown reports for pattern analyses.

Renders a single analysis (stream totals plus skillset breakdown) or a
multi-rate comparison table produced by `analyze_rates`.
"""

from datetime import datetime
from typing import Optional

from .patterns import REPORTED_SKILLSETS, PatternAnalyzer, Skillset

SKILLSET_HEADERS = {
    Skillset.STREAM: "Stream",
    Skillset.TOTAL_JUMPSTREAM: "Jumpstream",
    Skillset.RELATIVE_JUMPSTREAM: "Rel. Jumpstream",
    Skillset.TOTAL_HANDSTREAM: "Handstream",
    Skillset.RELATIVE_HANDSTREAM: "Rel. Handstream",
    Skillset.TOTAL_QUADSTREAM: "Quadstream",
    Skillset.RELATIVE_QUADSTREAM: "Rel. Quadstream",
}


def _percent(value: float) -> str:
    return f"{value:.2f}%"


def format_analysis_report(
    analyzer: PatternAnalyzer,
    title: Optional[str] = None,
    include_patterns: bool = False,
) -> str:
    """
    Generate a markdown report for one analysis.

    Args:
        analyzer: Finished analysis
        title: Report heading (defaults to "Analysis for: <chart>")
        include_patterns: Append a table with every detected pattern

    Returns:
        Markdown text
    """
    lines = []

    heading = title or f"Analysis for: {analyzer.chart}"
    lines.append(f"# {heading}")
    lines.append("")
    lines.append(f"**Rate:** {analyzer.rate}x")
    lines.append(f"**Analyzer Version:** {analyzer.VERSION}")
    lines.append("")

    lines.append("## Summary")
    lines.append("")
    lines.append(f"- **Detected Pattern Count:** {len(analyzer.detected_patterns)}")
    lines.append(f"- **Total Stream Length:** {analyzer.total_stream_length} ms")
    lines.append(f"- **'Jump' Stream Count:** {analyzer.count_jump_stream}")
    lines.append(f"- **'Hand' Stream Count:** {analyzer.count_hand_stream}")
    lines.append(f"- **'Quad' Stream Count:** {analyzer.count_quad_stream}")
    lines.append(f"- **'5+' Stream Count:** {analyzer.count_five_plus_stream}")
    lines.append("")

    lines.append("## Skillset Breakdown")
    lines.append("")
    lines.append("| Skillset | Percentage |")
    lines.append("|------|------|")
    for skillset in REPORTED_SKILLSETS:
        value = analyzer.skillset_percentages[skillset]
        lines.append(f"| {SKILLSET_HEADERS[skillset]} | {_percent(value)} |")
    lines.append("")

    if include_patterns and analyzer.detected_patterns:
        lines.append("## Patterns")
        lines.append("")
        lines.append("| Start (ms) | Length (ms) | Objects | Jump | Hand | Quad | 5+ |")
        lines.append("|" + "|".join("------" for _ in range(7)) + "|")
        for pattern in analyzer.detected_patterns:
            row_values = [
                f"{pattern.start_time:.0f}",
                f"{pattern.length:.0f}",
                str(len(pattern.hit_objects)),
                str(pattern.jump_chord_count),
                str(pattern.hand_chord_count),
                str(pattern.quad_chord_count),
                str(pattern.five_plus_chord_count),
            ]
            lines.append("| " + " | ".join(row_values) + " |")
        lines.append("")

    return "\n".join(lines)


def generate_markdown_report(
    results: dict[float, PatternAnalyzer],
    title: Optional[str] = None,
    hide_columns: Optional[list[Skillset]] = None,
) -> str:
    """
    Generate a markdown table comparing analyses of one chart across rates.

    Args:
        results: Analyzer per rate, as returned by `analyze_rates`
        title: Report heading (defaults to the chart name)
        hide_columns: Skillsets to leave out of the table

    Returns:
        Markdown text
    """
    lines = []

    if title is None and results:
        title = str(next(iter(results.values())).chart)

    lines.append(f"# {title or 'KeysChartAnalyzer Report'}")
    lines.append("")
    lines.append(f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append(f"**Rates Analyzed:** {len(results)}")
    lines.append("")

    if not results:
        return "\n".join(lines)

    hidden = set(hide_columns or [])
    visible = [s for s in REPORTED_SKILLSETS if s not in hidden]

    headers = ["Rate", "Patterns"] + [SKILLSET_HEADERS[s] for s in visible]
    lines.append("| " + " | ".join(headers) + " |")
    lines.append("|" + "|".join("------" for _ in headers) + "|")

    for rate, analyzer in results.items():
        row_values = [f"{rate}x", str(len(analyzer.detected_patterns))]
        row_values += [_percent(analyzer.skillset_percentages[s]) for s in visible]
        lines.append("| " + " | ".join(row_values) + " |")
    lines.append("")

    return "\n".join(lines)
