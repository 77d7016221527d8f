# src/garden/engine/session.py
# One player's run at a puzzle: marks, check-with-penalty, reveal on win.

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..config import PENALTY_SECONDS
from ..levelgen.generator import Puzzle
from .timing import Clock, PenaltyClock
from .validator import Outcome, check_puzzle

log = logging.getLogger(__name__)


class GardenSession:
    def __init__(
        self,
        puzzle: Puzzle,
        *,
        clock: Optional[Clock] = None,
        penalty_seconds: int = PENALTY_SECONDS,
    ) -> None:
        self.puzzle = puzzle
        self.penalty_seconds = penalty_seconds
        self.timer = PenaltyClock(now=clock) if clock is not None else PenaltyClock()
        self.marks: List[bool] = [False] * (puzzle.size * puzzle.size)
        self.active = False
        self.won = False
        self.failed_checks = 0

    # ---- Lifecycle ----
    def start(self) -> None:
        self.timer.start()
        self.active = True
        self.won = False

    def reset(self) -> None:
        self.marks = [False] * len(self.marks)
        self.timer.reset()
        self.active = False
        self.won = False
        self.failed_checks = 0

    # ---- Input ----
    def toggle(self, idx: int) -> bool:
        """Flip the mark at idx. Ignored (returns current state) unless active."""
        if not 0 <= idx < len(self.marks):
            raise IndexError(f"cell {idx} outside 0..{len(self.marks) - 1}")
        if self.active:
            self.marks[idx] = not self.marks[idx]
        return self.marks[idx]

    # ---- Checking ----
    def check(self) -> Optional[Outcome]:
        """Validate the current marks. Returns None when the session is not active."""
        if not self.active:
            return None
        outcome = check_puzzle(self.puzzle, self.marks)
        if outcome.ok:
            self.timer.stop()
            self.active = False
            self.won = True
            log.debug("solved seed %d in %ds", self.puzzle.seed, self.timer.elapsed())
        else:
            self.failed_checks += 1
            self.timer.add_penalty(self.penalty_seconds)
            log.debug("check failed: %s at %s", outcome.violation.value, outcome.cells)
        return outcome

    def elapsed(self) -> int:
        return self.timer.elapsed()

    def revealed(self) -> Optional[Tuple[bool, ...]]:
        return self.puzzle.solution if self.won else None
