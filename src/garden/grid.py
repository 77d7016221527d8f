from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

MIN_SIZE = 3

RC = Tuple[int, int]

@dataclass(frozen=True)
class Grid:
    size: int

    def __post_init__(self) -> None:
        if self.size < MIN_SIZE:
            raise ValueError(f"grid size must be >= {MIN_SIZE}, got {self.size}")

    @property
    def cells(self) -> int:
        return self.size * self.size

    def idx(self, row: int, col: int) -> int:
        return row * self.size + col

    def rc(self, idx: int) -> RC:
        return divmod(idx, self.size)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def indices(self) -> Iterator[int]:
        # Row-major; the region grower depends on this order.
        return iter(range(self.cells))

    def rows(self, flat: Sequence[int]) -> List[List[int]]:
        """Fold a flat per-cell array into row lists."""
        if len(flat) != self.cells:
            raise ValueError(f"expected {self.cells} cells, got {len(flat)}")
        return [list(flat[r * self.size:(r + 1) * self.size]) for r in range(self.size)]

def touching(a: RC, b: RC) -> bool:
    """Chebyshev distance <= 1; a cell touches itself."""
    return abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1

def manhattan(a: RC, b: RC) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

def max_independent(size: int) -> int:
    # Largest set of pairwise non-touching cells on a size x size board
    half = (size + 1) // 2
    return half * half
