"""Cumulative benchmarking timers keyed by task name."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO

from .hashmap import HashMap

_MASK = 0xFFFFFFFF


def _milliseconds() -> int:
    return time.monotonic_ns() // 1_000_000


class BenchTimer:
    """Accumulates elapsed milliseconds per task.

    Nested starts of the same task are counted; time is only added when the
    outermost start is closed by :meth:`cumul`. Times are 32-bit unsigned.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock if clock is not None else _milliseconds
        self._level: HashMap[str, int] = HashMap(0)
        self._nr: HashMap[str, int] = HashMap(0)
        self._cumul: HashMap[str, int] = HashMap(0)
        self._last: HashMap[str, int] = HashMap(0)

    def start(self, task: str) -> None:
        """Start timing ``task``."""
        if self._level[task] == 0:
            self._last[task] = int(self._clock()) & _MASK
        self._level[task] = (self._level[task] + 1) & _MASK

    def cumul(self, task: str) -> None:
        """Stop timing ``task`` and add the elapsed time to its total."""
        self._level[task] = (self._level[task] - 1) & _MASK
        if self._level[task] == 0:
            elapsed = ((int(self._clock()) & _MASK) - self._last[task]) & _MASK
            self._nr[task] = (self._nr[task] + 1) & _MASK
            self._cumul[task] = (self._cumul[task] + elapsed) & _MASK
            self._last.reset(task)

    def reset(self, task: str) -> None:
        """Forget everything recorded for ``task``."""
        for table in (self._level, self._nr, self._cumul, self._last):
            table.reset(task)

    def report(self, out: Optional[TextIO], task: str, threshold: int = 0) -> None:
        """Write the total for ``task`` unless it is below ``threshold`` ms."""
        out = out if out is not None else sys.stdout
        elapsed = self._cumul[task]
        if elapsed < threshold:
            return
        nr = self._nr[task]
        line = f"Task '{task}' took {elapsed} ms"
        if nr > 1:
            line += f" ({nr} invocations)"
        out.write(line + "\n")

    def report_all(self, out: Optional[TextIO] = None) -> None:
        """Write the totals of every timed task, in task name order."""
        for task in sorted(self._cumul):
            self.report(out, task)


_DEFAULT = BenchTimer()


def timer_start(task: str) -> None:
    _DEFAULT.start(task)


def timer_cumul(task: str) -> None:
    _DEFAULT.cumul(task)


def timer_reset(task: str) -> None:
    _DEFAULT.reset(task)


def bench_print(
    out: Optional[TextIO] = None, task: Optional[str] = None, threshold: int = 0
) -> None:
    """Report one task of the shared timer, or all of them when ``task`` is None."""
    if task is None:
        _DEFAULT.report_all(out)
    else:
        _DEFAULT.report(out, task, threshold)