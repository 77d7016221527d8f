# src/garden/levelgen/regions.py
# Noisy Voronoi partition: every cell joins the marker with the smallest
# jittered Manhattan distance.

from typing import List, Sequence

from ..config import DEFAULT_JITTER
from ..grid import Grid, manhattan
from ..rng import Mulberry32
from .placement import Marker


def grow_regions(
    markers: Sequence[Marker],
    rng: Mulberry32,
    size: int,
    jitter: float = DEFAULT_JITTER,
) -> List[int]:
    """
    Return a row-major region map of size*size marker colors.

    Draw order is fixed: cells row-major, and for each cell one draw per
    marker in placement order, so a given RNG state always grows the same map.
    Ties keep the earlier marker (strict <).

    With jitter < 2 a marker cell always keeps its own color, since any other
    marker is at least Manhattan distance 2 away.
    """
    if not markers:
        raise ValueError("grow_regions needs at least one marker")
    grid = Grid(size)
    regions = [0] * grid.cells
    for idx in grid.indices():
        cell = grid.rc(idx)
        best = float("inf")
        color = markers[0].color
        for m in markers:
            d = manhattan(cell, m.rc) + rng.random() * jitter
            if d < best:
                best = d
                color = m.color
        regions[idx] = color
    return regions
