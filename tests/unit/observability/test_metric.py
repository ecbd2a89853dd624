from unittest.mock import patch

from sqlbind.observability import Metric


def test_checkpoints_record_time_since_previous() -> None:
    with patch("sqlbind.observability._metric.perf_counter", side_effect=[10.0, 10.5, 11.25, 12.0]):
        metric = Metric()
        metric.checkpoint("prepare")
        metric.checkpoint("execute")
        metric.done("close")

    assert metric.timings == {"prepare": 0.5, "execute": 0.75, "close": 0.75}
    assert metric.elapsed == 2.0


def test_checkpoints_after_done_are_ignored() -> None:
    metric = Metric()
    metric.done("close")
    metric.checkpoint("late")

    assert list(metric.timings) == ["close"]


def test_timings_is_a_copy() -> None:
    metric = Metric()
    metric.checkpoint("prepare")
    metric.timings.clear()

    assert "prepare" in metric.timings


def test_repr_lists_checkpoints() -> None:
    with patch("sqlbind.observability._metric.perf_counter", side_effect=[0.0, 0.001]):
        metric = Metric()
        metric.checkpoint("prepare")

    assert repr(metric) == "Metric(prepare=1.000ms)"
