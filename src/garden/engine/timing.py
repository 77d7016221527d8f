# src/garden/engine/timing.py
# Elapsed-time model for a puzzle session: wall seconds plus penalties.
# The clock source is injectable so tests never sleep.

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

Clock = Callable[[], float]


@dataclass
class PenaltyClock:
    now: Clock = field(default=time.monotonic)
    started_at: Optional[float] = None
    stopped_at: Optional[float] = None
    penalty_seconds: int = 0

    @property
    def running(self) -> bool:
        return self.started_at is not None and self.stopped_at is None

    def start(self) -> None:
        self.started_at = self.now()
        self.stopped_at = None
        self.penalty_seconds = 0

    def stop(self) -> None:
        if self.running:
            self.stopped_at = self.now()

    def add_penalty(self, seconds: int) -> None:
        self.penalty_seconds += seconds

    def elapsed(self) -> int:
        """Whole seconds since start, plus penalties. Frozen once stopped."""
        if self.started_at is None:
            return self.penalty_seconds
        end = self.stopped_at if self.stopped_at is not None else self.now()
        return int(end - self.started_at) + self.penalty_seconds

    def reset(self) -> None:
        self.started_at = None
        self.stopped_at = None
        self.penalty_seconds = 0
