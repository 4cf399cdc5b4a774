# metrics_tracker.py - running sums/counts of timings, optionally kept in a JSON file

import json
import os
from collections import defaultdict

from markov_textgen.errors import MarkovTextgenError


class Metrics:
    """
    Accumulates timings per key. With a `path`, earlier runs are loaded on
    start and save() writes the merged totals back; without one it is in-memory.
    """
    def __init__(self, path=None):
        self.path = path
        self.sums = defaultdict(float)
        self.counts = defaultdict(int)
        if path and os.path.exists(path):
            self._load()

    def _load(self):
        try:
            with open(self.path, "r", encoding="utf8") as f:
                stored = json.load(f)
            for key, entry in stored.items():
                self.sums[key] = float(entry["sum"])
                self.counts[key] = int(entry["count"])
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            raise MarkovTextgenError(f"bad metrics file {self.path}: {e}") from e

    def save(self):
        if not self.path:
            return
        stored = {k: {"sum": self.sums[k], "count": self.counts[k]} for k in self.sums}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(stored, f, indent=2)

    def record(self, key, val):
        self.sums[key] += val
        self.counts[key] += 1

    def avg(self, key):
        n = self.counts.get(key, 0)
        return self.sums[key] / n if n else 0.0

    def summary(self):
        return {k: {"avg": self.avg(k), "count": self.counts[k]} for k in self.sums}
