# src/garden/engine/validator.py
# Win check for a set of player marks. Pure: no state, no exceptions for
# well-formed input. Check order is part of the contract:
#   count, then per mark in index order: row, column, region, touching

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from ..grid import Grid, touching
from ..levelgen.generator import Puzzle


class Violation(Enum):
    WRONG_COUNT = "wrong_count"
    ROW_CONFLICT = "row_conflict"
    COLUMN_CONFLICT = "column_conflict"
    REGION_CONFLICT = "region_conflict"
    ADJACENT = "adjacent"


@dataclass(frozen=True)
class Outcome:
    violation: Optional[Violation] = None
    cells: Tuple[int, ...] = ()

    @property
    def ok(self) -> bool:
        return self.violation is None

    @classmethod
    def valid(cls) -> "Outcome":
        return cls()


def marked_cells(candidate: Sequence[bool]) -> List[int]:
    return [i for i, on in enumerate(candidate) if on]


def _scan_marks(
    marks: List[int],
    grid: Grid,
    regions: Sequence[int],
    enforce_uniqueness: bool,
) -> Optional[Outcome]:
    """
    One pass over the marks in index order. For each mark: row, column and
    region against earlier marks (strict boards only), then touching against
    every other mark. The first failure wins.
    """
    seen_rows: Dict[int, int] = {}
    seen_cols: Dict[int, int] = {}
    seen_regions: Dict[int, int] = {}
    for idx in marks:
        r, c = grid.rc(idx)
        if enforce_uniqueness:
            reg = regions[idx]
            if r in seen_rows:
                return Outcome(Violation.ROW_CONFLICT, (seen_rows[r], idx))
            if c in seen_cols:
                return Outcome(Violation.COLUMN_CONFLICT, (seen_cols[c], idx))
            if reg in seen_regions:
                return Outcome(Violation.REGION_CONFLICT, (seen_regions[reg], idx))
            seen_rows[r] = idx
            seen_cols[c] = idx
            seen_regions[reg] = idx
        for other in marks:
            if other != idx and touching((r, c), grid.rc(other)):
                return Outcome(Violation.ADJACENT, (idx, other))
    return None


def validate(
    regions: Sequence[int],
    size: int,
    target_count: int,
    candidate: Sequence[bool],
    *,
    enforce_uniqueness: Optional[bool] = None,
) -> Outcome:
    """
    Check `candidate` against the board rules.

    enforce_uniqueness defaults to the strict regime (target_count <= size).
    Relaxed boards skip the row/column/region check entirely; touching is
    always checked.
    """
    grid = Grid(size)
    if len(regions) != grid.cells:
        raise ValueError(f"region map has {len(regions)} cells, expected {grid.cells}")
    if len(candidate) != grid.cells:
        raise ValueError(f"candidate has {len(candidate)} cells, expected {grid.cells}")
    if enforce_uniqueness is None:
        enforce_uniqueness = target_count <= size

    marks = marked_cells(candidate)
    if len(marks) != target_count:
        return Outcome(Violation.WRONG_COUNT, tuple(marks))

    failure = _scan_marks(marks, grid, regions, enforce_uniqueness)
    if failure is not None:
        return failure

    return Outcome.valid()


def check_puzzle(puzzle: Puzzle, candidate: Sequence[bool]) -> Outcome:
    return validate(
        puzzle.regions,
        puzzle.size,
        puzzle.count,
        candidate,
        enforce_uniqueness=puzzle.rules.enforce_uniqueness,
    )
