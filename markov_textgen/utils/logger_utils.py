# logger_utils.py - file log for metrics (timings, counts) alongside stdlib logging

import logging
import os
import time
from datetime import datetime

# Directory where log files are stored, created on first write
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "markov_textgen.log")

logger = logging.getLogger("markov_textgen.metrics")


class Log:
    """Lightweight metric log: appends timestamped lines to a file and to `logger`."""
    path = DEFAULT_LOG_PATH

    @staticmethod
    def write(msg: str):
        """
        Append a message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        directory = os.path.dirname(Log.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(Log.path, "a", encoding="utf-8") as f:
            f.write(f"[{ts}] {msg}\n")

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts etc).
        Example line: [2026-01-01 12:45:02] train done: 0.123s
        """
        line = f"{tag}: {value}{unit}"
        logger.info(line)
        Log.write(line)

    @staticmethod
    def time_block(label):
        """
        Measure execution time of a code block:
            with Log.time_block("train"):
                gen.train(text)
        The duration (seconds) is recorded as a metric on exit and is
        available as `.duration` afterwards.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.duration = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.duration = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.duration, 3), "s")
