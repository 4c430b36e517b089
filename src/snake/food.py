# food.py
from typing import Iterable

import numpy as np # type: ignore

from .grid import Grid, Position


class BoardFullError(Exception):
    """Raised when every grid cell is occupied and food has nowhere to go."""


def spawn_food(occupied: Iterable[Position], grid: Grid, rng: np.random.Generator) -> Position:
    """
    Pick a uniformly random free cell.

    Free cells are taken from an occupancy mask, so a single draw always
    lands on a valid cell however crowded the grid is.
    """
    free = np.ones((grid.height, grid.width), dtype=bool)
    for x, y in occupied:
        if grid.contains((x, y)):
            free[y, x] = False

    candidates = np.flatnonzero(free)
    if candidates.size == 0:
        raise BoardFullError(f"No free cell left on a {grid.width}x{grid.height} grid")

    idx = int(candidates[rng.integers(candidates.size)])
    fy, fx = divmod(idx, grid.width)
    return Position(fx, fy)
