# tests/test_utils.py - metrics and metric log helpers
import pytest

from markov_textgen.errors import MarkovTextgenError
from markov_textgen.utils.logger_utils import Log
from markov_textgen.utils.metrics_tracker import Metrics


def test_metrics_average_in_memory():
    m = Metrics()
    m.record("train_time", 0.2)
    m.record("train_time", 0.4)
    assert m.avg("train_time") == pytest.approx(0.3)
    assert m.avg("missing") == 0.0
    assert m.summary()["train_time"]["count"] == 2


def test_metrics_persist_roundtrip(tmp_path):
    path = str(tmp_path / "metrics.json")
    m = Metrics(path)
    m.record("generate_time", 1.5)
    m.save()
    again = Metrics(path)
    assert again.avg("generate_time") == pytest.approx(1.5)
    assert again.counts["generate_time"] == 1


def test_metrics_record_does_not_touch_disk(tmp_path):
    path = tmp_path / "metrics.json"
    Metrics(str(path)).record("train_time", 0.1)
    assert not path.exists()


def test_metrics_bad_file(tmp_path):
    path = tmp_path / "metrics.json"
    path.write_text("[1, 2]")
    with pytest.raises(MarkovTextgenError):
        Metrics(str(path))


def test_time_block_records_duration(metric_log):
    with Log.time_block("work") as t:
        sum(range(1000))
    assert t.duration >= 0.0
    assert "work done" in metric_log.read_text(encoding="utf-8")


def test_metric_line_format(metric_log):
    Log.metric("windows", 12)
    line = metric_log.read_text(encoding="utf-8").strip()
    assert line.startswith("[")
    assert line.endswith("windows: 12")
