"""Millisecond stopwatch, timestamped log lines and exception reporting."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable
from datetime import datetime
from typing import IO, TypeVar

__all__ = [
    "Stopwatch",
    "LogWriter",
    "now_datetime",
    "format_log_line",
    "debug_run",
]

R = TypeVar("R")


class Stopwatch:
    """Stopwatch driven by one toggle: the first call starts it, the next stops it."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self.start = 0.0
        self.end = 0.0
        self.running = False

    def toggle(self) -> None:
        """Start timing if stopped, otherwise stop it."""
        if not self.running:
            self.start = self._clock()
            self.running = True
        else:
            self.end = self._clock()
            self.running = False

    def __call__(self) -> None:
        self.toggle()

    def elapsed_ms(self) -> int:
        """Whole milliseconds between the last start and the last stop."""
        return int((self.end - self.start) * 1000)


def now_datetime() -> datetime:
    """The current local date and time."""
    return datetime.now()


def format_log_line(moment: datetime, level: str, message: str) -> str:
    """One log line: ``[YYYY-MM-DD HH:MM:SS:mmm] LEVEL: message`` and a newline."""
    return (
        f"[{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}:"
        f"{moment.microsecond // 1000:03d}] {level}: {message}\n"
    )


class LogWriter:
    """Writes timestamped lines to a file path (appended), a stream, or stdout."""

    def __init__(self, target: str | os.PathLike[str] | IO[str] | None = None) -> None:
        self._owned = False
        if target is None:
            self.stream: IO[str] = sys.stdout
        elif isinstance(target, (str, os.PathLike)):
            self.stream = open(target, "a", encoding="utf-8")
            self._owned = True
        else:
            self.stream = target

    def log(self, message: str, level: str) -> None:
        """Write ``message`` with the given level and the current time."""
        self.stream.write(format_log_line(now_datetime(), level, message))

    def info(self, message: str) -> None:
        """Write ``message`` at level INFO."""
        self.log(message, "INFO")

    def __lshift__(self, message: str) -> LogWriter:
        self.info(message)
        return self

    def close(self) -> None:
        """Close the file if this writer opened it; streams passed in are left open."""
        if self._owned and not self.stream.closed:
            self.stream.close()

    def __enter__(self) -> LogWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def debug_run(func: Callable[[], R]) -> R:
    """Call ``func``; report any exception on stderr and raise it again."""
    try:
        return func()
    except Exception as exc:
        print(f"Exception caught: {exc}", file=sys.stderr)
        raise