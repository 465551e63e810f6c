from types import SimpleNamespace

import numpy as np
import pytest

from KeysChartAnalyzer import (
    REPORTED_SKILLSETS,
    AnalyzerConfig,
    PatternAnalyzer,
    PatternClassificationError,
    PatternType,
    Skillset,
)
from KeysChartAnalyzer.patterns import (
    StreamTotals,
    accumulate_stream_totals,
    compute_skillset_percentages,
    segment_streams,
)


def _cycle_lanes(n, spacing=100, keys=4, start=0):
    return [(start + i * spacing, (i % keys) + 1) for i in range(n)]


def test_empty_chart(make_chart):
    analyzer = PatternAnalyzer(make_chart([], length=0))

    assert analyzer.detected_patterns == []
    assert set(analyzer.skillset_percentages) == set(REPORTED_SKILLSETS)
    assert all(v == 0 for v in analyzer.skillset_percentages.values())


@pytest.mark.parametrize("n", [4, 5, 9, 32])
def test_continuous_stream_is_one_pattern(make_chart, n):
    analyzer = PatternAnalyzer(make_chart(_cycle_lanes(n), length=10000))

    assert len(analyzer.detected_patterns) == 1
    pattern = analyzer.detected_patterns[0]
    assert pattern.pattern_type is PatternType.STREAM
    assert len(pattern.hit_objects) == n
    assert pattern.length == (n - 1) * 100


def test_three_note_run_is_discarded(make_chart):
    analyzer = PatternAnalyzer(make_chart(_cycle_lanes(3), length=1000))
    assert analyzer.detected_patterns == []


def test_four_note_run_is_kept(stream_chart):
    analyzer = PatternAnalyzer(stream_chart)
    assert len(analyzer.detected_patterns) == 1


def test_same_lane_breaks_run(make_chart):
    lanes = [1, 2, 3, 3, 4, 1, 2]
    chart = make_chart([(i * 100, lane) for i, lane in enumerate(lanes)], length=1000)

    patterns = PatternAnalyzer(chart).detected_patterns

    # First run [1, 2, 3] is too short, second starts at the repeated lane
    assert len(patterns) == 1
    assert [h.lane for h in patterns[0].hit_objects] == [3, 4, 1, 2]
    assert patterns[0].start_time == 300
    assert patterns[0].length == 300


def test_gap_break_keeps_tail_of_run(make_chart):
    notes = _cycle_lanes(4) + [(1000, 1), (1100, 2)]
    patterns = PatternAnalyzer(make_chart(notes, length=2000)).detected_patterns

    assert len(patterns) == 1
    assert [h.start_time for h in patterns[0].hit_objects] == [0, 100, 200, 300]


def test_gap_at_threshold_continues_run(make_chart):
    chart = make_chart(_cycle_lanes(4, spacing=125), length=1000)
    patterns = PatternAnalyzer(chart).detected_patterns

    assert len(patterns) == 1
    assert patterns[0].length == 375


def test_gap_over_threshold_breaks_run(make_chart):
    chart = make_chart(_cycle_lanes(4, spacing=126), length=1000)
    assert PatternAnalyzer(chart).detected_patterns == []


def test_adjacent_notes_in_a_pattern_never_share_a_lane(make_chart):
    rng = np.random.default_rng(7)
    gaps = rng.choice([0, 60, 100, 150], size=400)
    times = np.cumsum(gaps)
    lanes = rng.integers(1, 5, size=400)
    # One note per lane per timestamp
    notes = list({(int(t), int(lane)) for t, lane in zip(times, lanes)})

    analyzer = PatternAnalyzer(make_chart(notes))

    assert analyzer.detected_patterns
    for pattern in analyzer.detected_patterns:
        assert len(pattern.hit_objects) >= 4
        for a, b in zip(pattern.hit_objects, pattern.hit_objects[1:]):
            assert a.lane != b.lane
            assert b.start_time - a.start_time <= 125


def test_higher_rate_brings_notes_under_threshold(make_chart):
    chart = make_chart(_cycle_lanes(4, spacing=200), length=1000)

    assert PatternAnalyzer(chart, rate=1.0).detected_patterns == []

    doubled = PatternAnalyzer(chart, rate=2.0)
    assert len(doubled.detected_patterns) == 1
    assert doubled.detected_patterns[0].length == 300
    assert doubled.skillset_percentages[Skillset.STREAM] == pytest.approx(60.0)


def test_lower_rate_pushes_notes_over_threshold(stream_chart):
    assert PatternAnalyzer(stream_chart, rate=1.0).detected_patterns
    assert PatternAnalyzer(stream_chart, rate=0.5).detected_patterns == []


def test_plain_stream_percentages(stream_chart):
    percentages = PatternAnalyzer(stream_chart).skillset_percentages

    assert percentages[Skillset.STREAM] == pytest.approx(30.0)
    for skillset in REPORTED_SKILLSETS:
        if skillset is not Skillset.STREAM:
            assert percentages[skillset] == 0


def test_jumpstream_percentages(make_chart):
    notes = [(0, 1), (0, 2), (100, 3), (200, 1), (200, 4), (300, 2)]
    analyzer = PatternAnalyzer(make_chart(notes, length=1000))

    assert analyzer.count_jump_stream == 2
    assert analyzer.total_chord_stream_count == 2
    assert analyzer.total_stream_length == 300

    percentages = analyzer.skillset_percentages
    assert percentages[Skillset.STREAM] == pytest.approx(30.0)
    assert percentages[Skillset.TOTAL_JUMPSTREAM] == pytest.approx(30.0)
    assert percentages[Skillset.RELATIVE_JUMPSTREAM] == pytest.approx(100.0)
    assert percentages[Skillset.TOTAL_HANDSTREAM] == 0
    assert percentages[Skillset.RELATIVE_QUADSTREAM] == 0


def test_mixed_chord_percentages():
    totals = StreamTotals(
        total_stream_length=500.0,
        count_jump_stream=3,
        count_hand_stream=1,
        count_quad_stream=0,
        count_five_plus_stream=0,
    )
    percentages = compute_skillset_percentages(totals, map_length=1000.0)

    assert percentages[Skillset.STREAM] == pytest.approx(50.0)
    assert percentages[Skillset.TOTAL_JUMPSTREAM] == pytest.approx(37.5)
    assert percentages[Skillset.RELATIVE_JUMPSTREAM] == pytest.approx(75.0)
    assert percentages[Skillset.TOTAL_HANDSTREAM] == pytest.approx(12.5)
    assert percentages[Skillset.RELATIVE_HANDSTREAM] == pytest.approx(25.0)
    assert percentages[Skillset.TOTAL_QUADSTREAM] == 0


def test_zero_map_length_is_guarded():
    totals = StreamTotals(total_stream_length=300.0, count_jump_stream=2)
    percentages = compute_skillset_percentages(totals, map_length=0.0)

    assert len(percentages) == 7
    assert all(v == 0 for v in percentages.values())


def test_roll_up_is_a_fresh_fold(stream_chart):
    patterns = PatternAnalyzer(stream_chart).detected_patterns

    first = accumulate_stream_totals(patterns)
    second = accumulate_stream_totals(patterns)

    assert first == second
    assert first.total_stream_length == 300


def test_unknown_pattern_type_aborts_roll_up(stream_chart):
    patterns = PatternAnalyzer(stream_chart).detected_patterns
    unknown = SimpleNamespace(pattern_type="jackspeed", length=100.0)

    with pytest.raises(PatternClassificationError):
        accumulate_stream_totals(patterns + [unknown])


def test_config_controls_minimum_run(make_chart):
    chart = make_chart(_cycle_lanes(3), length=1000)
    patterns = segment_streams(
        chart.hit_objects, config=AnalyzerConfig(min_stream_objects=3)
    )
    assert len(patterns) == 1


def test_config_threshold():
    assert AnalyzerConfig().stream_threshold_ms == 125
    assert AnalyzerConfig(min_stream_bpm=150).stream_threshold_ms == 100

    with pytest.raises(ValueError):
        AnalyzerConfig(min_stream_bpm=0)


def test_analysis_is_logged(stream_chart, caplog):
    with caplog.at_level("INFO", logger="KeysChartAnalyzer"):
        PatternAnalyzer(stream_chart)

    assert "1 patterns" in caplog.text


def test_five_plus_chord_counts_toward_chord_total(make_chart):
    notes = [(0, 1), (0, 2), (0, 3), (0, 4), (0, 5), (100, 6), (200, 1), (200, 2), (300, 3)]
    analyzer = PatternAnalyzer(make_chart(notes, length=1000))

    assert len(analyzer.detected_patterns) == 1
    assert analyzer.count_jump_stream == 1
    assert analyzer.count_five_plus_stream == 1
    assert analyzer.count_quad_stream == 0
    assert analyzer.total_chord_stream_count == 2

    percentages = analyzer.skillset_percentages
    assert percentages[Skillset.STREAM] == pytest.approx(30.0)
    # The five-plus chord halves the jump share without a skillset of its own
    assert percentages[Skillset.TOTAL_JUMPSTREAM] == pytest.approx(15.0)
    assert percentages[Skillset.RELATIVE_JUMPSTREAM] == pytest.approx(50.0)
    assert percentages[Skillset.TOTAL_QUADSTREAM] == 0


def test_quad_and_five_plus_percentages():
    totals = StreamTotals(
        total_stream_length=400.0,
        count_jump_stream=2,
        count_hand_stream=1,
        count_quad_stream=3,
        count_five_plus_stream=2,
    )
    assert totals.total_chord_stream_count == 8

    percentages = compute_skillset_percentages(totals, map_length=1000.0)

    assert percentages[Skillset.STREAM] == pytest.approx(40.0)
    assert percentages[Skillset.TOTAL_JUMPSTREAM] == pytest.approx(10.0)
    assert percentages[Skillset.RELATIVE_JUMPSTREAM] == pytest.approx(25.0)
    assert percentages[Skillset.TOTAL_HANDSTREAM] == pytest.approx(5.0)
    assert percentages[Skillset.RELATIVE_HANDSTREAM] == pytest.approx(12.5)
    assert percentages[Skillset.TOTAL_QUADSTREAM] == pytest.approx(15.0)
    assert percentages[Skillset.RELATIVE_QUADSTREAM] == pytest.approx(37.5)


def test_patterns_are_logged_at_debug(stream_chart, caplog):
    with caplog.at_level("DEBUG", logger="KeysChartAnalyzer"):
        PatternAnalyzer(stream_chart)

    assert "Detected Stream Pattern:" in caplog.text
    assert "Objects: 4" in caplog.text


def test_chart_is_hashable_and_read_only(make_chart):
    chart = make_chart([(100, 2), (0, 1)], length=500)

    assert isinstance(chart.hit_objects, tuple)
    assert [h.start_time for h in chart.hit_objects] == [0, 100]
    assert hash(chart) == hash(make_chart([(0, 1), (100, 2)], length=500))
    with pytest.raises(AttributeError):
        chart.hit_objects.append(chart.hit_objects[0])
