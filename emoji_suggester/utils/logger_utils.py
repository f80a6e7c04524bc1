# logger_utils.py - logging and metrics

import os
import time
from datetime import datetime

# Directory where log files go, override with EMOJI_SUGGESTER_LOG_DIR
LOG_DIR = os.environ.get("EMOJI_SUGGESTER_LOG_DIR", "logs")
LOG_PATH = os.path.join(LOG_DIR, "emoji_suggester.log")


class Log:
    """Append-only application log plus small timing helpers."""

    path = LOG_PATH
    echo = False  # print metric lines to the console as well

    @classmethod
    def set_path(cls, path: str) -> None:
        cls.path = path

    @classmethod
    def write(cls, msg: str) -> None:
        """
        Append a message with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        folder = os.path.dirname(cls.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(cls.path, "a", encoding="utf-8") as f:
            f.write(f"[{ts}] {msg}\n")

    @classmethod
    def metric(cls, tag, value, unit=""):
        """
        Record a metric (timings, counts).
        Example: [12:45:02] reindex: 0.012s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        if cls.echo:
            print(line)
        cls.write(line)

    @staticmethod
    def time_block(label):
        """
        Measure a block of code:
            with Log.time_block("reindex"):
                engine.initialize(data)
        """
        return _Timer(label)


class _Timer:
    """Context manager used by Log.time_block."""

    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 4), "s")
