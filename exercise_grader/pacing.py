"""
Request pacing policies for the evaluator.

A pacer is any zero-argument callable. The evaluator invokes it once after
every submission.
"""

import time
from typing import Callable

from .config import PACING_INTERVAL_MS

Pacer = Callable[[], None]


class FixedIntervalPacer:
    """
    Sleeps for a fixed interval on every call.
    """

    def __init__(self, interval_ms: int = PACING_INTERVAL_MS, sleep: Callable[[float], None] = time.sleep) -> None:
        if interval_ms < 0:
            raise ValueError(f"Pacing interval must be >= 0, got {interval_ms}")
        self.interval_ms = interval_ms
        self._sleep = sleep

    def __call__(self) -> None:
        if self.interval_ms:
            self._sleep(self.interval_ms / 1000)


def no_delay() -> None:
    """Pacer that returns immediately."""
