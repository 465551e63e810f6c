import pytest

from KeysChartAnalyzer import Chart, FingerState, Hand, HitObject, ScopedHitObject


@pytest.fixture
def make_chart():
    """
    Factory building a chart from (start_time, lane) pairs.
    Pairs may be given in any order; length defaults to the last start time.
    """

    def _make(notes, length=None, title="test chart"):
        hit_objects = [HitObject(lane=lane, start_time=float(t)) for t, lane in notes]
        return Chart.from_hit_objects(hit_objects, length=length, title=title)

    return _make


@pytest.fixture
def stream_chart(make_chart):
    """Four cross-lane notes 100 ms apart in a 1 second chart."""
    return make_chart([(0, 1), (100, 2), (200, 3), (300, 4)], length=1000)


@pytest.fixture
def make_scoped():
    def _make(
        start_time=0.0,
        end_time=None,
        lane=1,
        hand=Hand.LEFT,
        finger_state=FingerState.NONE,
        ln_strain_multiplier=1.0,
    ):
        return ScopedHitObject(
            hit_object=HitObject(lane=lane, start_time=start_time, end_time=end_time),
            hand=hand,
            finger_state=finger_state,
            ln_strain_multiplier=ln_strain_multiplier,
        )

    return _make
