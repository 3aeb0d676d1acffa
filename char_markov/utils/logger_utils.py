# logger_utils.py - file + console logging and timing metrics for the CLI

from __future__ import annotations

import os
import sys
import time
from datetime import datetime
from typing import Optional, TextIO

# Directory where log files are stored (created on first write)
LOG_DIR = "logs"

# Path to the default log file, can be overridden per Log instance
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "char_markov.log")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }
    LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

    def __init__(
        self,
        path: Optional[str] = None,
        use_color: bool = True,
        level: str = "INFO",
        stream: Optional[TextIO] = None,
        echo: bool = True,
    ):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.level = level.upper()
        self.stream = stream
        self.echo = echo

    def enabled(self, level: str) -> bool:
        return self.LEVELS.get(level, 0) >= self.LEVELS.get(self.level, 20)

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp and echo it.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if not self.enabled(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if not self.echo:
            return
        # console goes to stderr so generated text on stdout stays clean
        out = self.stream or sys.stderr
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}", file=out)
        else:
            print(line, file=out)

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = ""):
        """
        Record a metric (timing, counts, table sizes) at INFO level.
        Example: build done: 0.012s
        """
        self.info(f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Measure execution time of a code block:
            with log.time_block("build"):
                model = ChainModel(text, order=3)
        The duration is recorded as a metric when the block exits.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
