# src/garden/levelgen/placement.py
# One placement attempt: shuffled rows/cols for the first `size` markers,
# uniform free-cell draws for any overflow markers, rejection on touching.

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..grid import Grid, touching
from ..rng import Mulberry32

@dataclass(frozen=True)
class Marker:
    row: int
    col: int
    color: int

    @property
    def rc(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def index(self, size: int) -> int:
        return self.row * size + self.col

def color_for(i: int, size: int, count: int) -> int:
    # Colors recycle only when there are more markers than rows.
    return i % size if count > size else i

def _touches_any(rc: Tuple[int, int], placed: List[Marker]) -> bool:
    return any(touching(rc, m.rc) for m in placed)

def _pick_free_cell(grid: Grid, rng: Mulberry32, placed: List[Marker]) -> Optional[Tuple[int, int]]:
    taken = {m.index(grid.size) for m in placed}
    free = [i for i in grid.indices() if i not in taken]
    if not free:
        return None
    return grid.rc(free[rng.below(len(free))])

def try_place(grid: Grid, rng: Mulberry32, count: int) -> Optional[List[Marker]]:
    """
    Run a single attempt. Returns the markers in placement order, or None
    as soon as one marker touches an earlier one (or no free cell is left).

    RNG consumption per attempt:
      1) row shuffle (size-1 draws)
      2) column shuffle (size-1 draws)
      3) one draw per overflow marker, in order
    """
    size = grid.size
    rows = list(range(size))
    cols = list(range(size))
    rng.shuffle(rows)
    rng.shuffle(cols)

    placed: List[Marker] = []
    for i in range(count):
        if i < size:
            rc = (rows[i], cols[i])
        else:
            rc = _pick_free_cell(grid, rng, placed)
            if rc is None:
                return None
        if _touches_any(rc, placed):
            return None
        placed.append(Marker(rc[0], rc[1], color_for(i, size, count)))
    return placed

def solution_mask(grid: Grid, markers: List[Marker]) -> List[bool]:
    mask = [False] * grid.cells
    for m in markers:
        mask[m.index(grid.size)] = True
    return mask
