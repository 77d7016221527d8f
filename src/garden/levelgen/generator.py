# src/garden/levelgen/generator.py
# Canonical level generator: bounded attempt loop inside a bounded reseed loop.

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import DEFAULT_TUNING, ConfigError, GeneratorTuning, RuleSet, check_board
from ..grid import Grid
from ..rng import make_rng
from .placement import Marker, solution_mask, try_place
from .regions import grow_regions

log = logging.getLogger(__name__)

class GenerationError(RuntimeError):
    """Every seed in the reseed chain ran out of attempts."""

@dataclass(frozen=True)
class Puzzle:
    size: int
    count: int
    seed: int        # seed the caller asked for
    seed_used: int   # seed in the chain seed, seed+1, ... that produced the board
    markers: Tuple[Marker, ...]
    solution: Tuple[bool, ...]
    regions: Tuple[int, ...]
    rules: RuleSet

    @property
    def grid(self) -> Grid:
        return Grid(self.size)

    def region_rows(self) -> List[List[int]]:
        return self.grid.rows(self.regions)

def _attempt_seed(seed: int, size: int, count: int, tuning: GeneratorTuning):
    """Try one seed. Returns (markers, rng, attempts) or (None, None, attempts)."""
    grid = Grid(size)
    rng = make_rng(seed)
    for attempt in range(1, tuning.max_attempts + 1):
        markers = try_place(grid, rng, count)
        if markers is not None:
            return markers, rng, attempt
    return None, None, tuning.max_attempts

def generate(
    seed: int,
    size: int,
    count: int,
    *,
    rules: Optional[RuleSet] = None,
    tuning: Optional[GeneratorTuning] = None,
) -> Puzzle:
    """
    Build a puzzle for (seed, size, count).

    Attempts share one RNG stream per seed; the stream is never reseeded
    between attempts. When a seed exhausts `max_attempts`, the next seed in
    the chain (seed+1) gets a fresh stream. The result depends only on the
    requested seed and the arguments.
    """
    rules = rules or RuleSet.for_count(size, count)
    tuning = tuning or DEFAULT_TUNING
    check_board(size, count)
    if rules.enforce_uniqueness and count > size:
        raise ConfigError(f"{count} markers cannot have unique rows on a {size}x{size} board")

    for k in range(tuning.max_reseeds + 1):
        cur = seed + k
        markers, rng, attempts = _attempt_seed(cur, size, count, tuning)
        if markers is None:
            log.info("seed %d exhausted %d attempts (size=%d count=%d); reseeding", cur, attempts, size, count)
            continue
        # Regions keep drawing from the same stream that placed the markers.
        regions = grow_regions(markers, rng, size, jitter=tuning.jitter)
        log.debug("seed %d -> board after %d attempt(s) via seed %d", seed, attempts, cur)
        return Puzzle(
            size=size,
            count=count,
            seed=seed,
            seed_used=cur,
            markers=tuple(markers),
            solution=tuple(solution_mask(Grid(size), markers)),
            regions=tuple(regions),
            rules=rules,
        )

    log.error("no board for seed %d size=%d count=%d after %d reseeds", seed, size, count, tuning.max_reseeds)
    raise GenerationError(
        f"no valid board for seed {seed} (size={size}, count={count}) "
        f"after {tuning.max_reseeds} reseeds x {tuning.max_attempts} attempts"
    )
