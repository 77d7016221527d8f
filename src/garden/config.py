from dataclasses import dataclass
from typing import Dict

from .grid import MIN_SIZE, max_independent

PENALTY_SECONDS = 10
DEFAULT_JITTER = 0.4   # region boundary noise; must stay below 2

class ConfigError(ValueError):
    """Board configuration that can never produce a valid puzzle."""

@dataclass(frozen=True)
class RuleSet:
    # Strict boards need one marker per row, column and region.
    # Relaxed (overflow) boards only forbid touching markers.
    enforce_uniqueness: bool = True

    @classmethod
    def for_count(cls, size: int, count: int) -> "RuleSet":
        return cls(enforce_uniqueness=count <= size)

@dataclass(frozen=True)
class GeneratorTuning:
    max_attempts: int = 5000   # placement attempts per seed
    max_reseeds: int = 256     # seed, seed+1, ... before giving up
    jitter: float = DEFAULT_JITTER

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ConfigError("max_attempts must be >= 1")
        if self.max_reseeds < 0:
            raise ConfigError("max_reseeds must be >= 0")
        if not (0.0 <= self.jitter < 2.0):
            raise ConfigError(f"jitter must be in [0, 2), got {self.jitter}")

DEFAULT_TUNING = GeneratorTuning()

@dataclass(frozen=True)
class Preset:
    name: str
    size: int
    count: int
    rules: RuleSet

PRESETS: Dict[str, Preset] = {
    p.name: p for p in (
        Preset("garden",    6, 6, RuleSet(enforce_uniqueness=True)),   # daily board
        Preset("meadow",    7, 7, RuleSet(enforce_uniqueness=True)),
        Preset("overgrown", 6, 7, RuleSet(enforce_uniqueness=False)),
        Preset("warren",    6, 8, RuleSet(enforce_uniqueness=False)),
    )
}

def preset(name: str) -> Preset:
    try:
        return PRESETS[name]
    except KeyError:
        raise ConfigError(f"unknown preset {name!r}; choose from {', '.join(PRESETS)}") from None

def check_board(size: int, count: int) -> None:
    """
    Reject (size, count) pairs the generator could never satisfy:
      - size below 3,
      - count below 1,
      - more markers than pairwise non-touching cells fit on the board,
      - 3x3 boards with 3 distinct-row/col markers (no such layout exists).
    """
    if size < MIN_SIZE:
        raise ConfigError(f"size must be >= {MIN_SIZE}, got {size}")
    if count < 1:
        raise ConfigError(f"count must be >= 1, got {count}")
    cap = max_independent(size)
    if count > cap:
        raise ConfigError(f"{count} non-touching markers do not fit on a {size}x{size} board (max {cap})")
    if size == 3 and count == 3:
        raise ConfigError("a 3x3 board cannot hold 3 markers in distinct rows and columns")
