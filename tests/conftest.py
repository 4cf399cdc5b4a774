# tests/conftest.py - shared fixtures
import pytest

from markov_textgen.utils.logger_utils import Log


class ScriptedRandom:
    """RandomSource that returns a fixed sequence of draws, for exact sampling tests."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def random(self):
        r = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return r


@pytest.fixture(autouse=True)
def metric_log(tmp_path, monkeypatch):
    # keep metric log files out of the working tree
    path = tmp_path / "logs" / "metrics.log"
    monkeypatch.setattr(Log, "path", str(path))
    return path


@pytest.fixture
def scripted():
    return ScriptedRandom
