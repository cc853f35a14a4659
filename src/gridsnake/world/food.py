"""Food placement strategies.

Each strategy takes the grid size, the cells currently occupied by the snake
and a `random.Random`, and returns a free cell or None when the grid is full.

- `place_by_rejection` mirrors the classic approach: draw random cells until
  one is free. Expected cost grows as the snake fills the grid, so it gives up
  after `max_attempts` draws and defers to the free-cell strategy.
- `place_from_free_cells` builds an occupancy mask and picks uniformly among
  the free cells; it always terminates.
"""

from __future__ import annotations

import random
from typing import Callable, Collection, Dict, Optional, Tuple

import numpy as np

Cell = Tuple[int, int]
PlacementFn = Callable[[int, int, Collection[Cell], random.Random], Optional[Cell]]


def occupancy_mask(width: int, height: int, occupied: Collection[Cell]) -> np.ndarray:
    """Boolean (height, width) array, True where a cell is occupied."""
    mask = np.zeros((height, width), dtype=bool)
    if occupied:
        cols, rows = zip(*occupied)
        mask[np.asarray(rows), np.asarray(cols)] = True
    return mask


def place_from_free_cells(
    width: int, height: int, occupied: Collection[Cell], rng: random.Random
) -> Optional[Cell]:
    free = np.flatnonzero(~occupancy_mask(width, height, occupied))
    if free.size == 0:
        return None
    index = int(free[rng.randrange(free.size)])
    row, col = divmod(index, width)
    return (col, row)


def place_by_rejection(
    width: int,
    height: int,
    occupied: Collection[Cell],
    rng: random.Random,
    *,
    max_attempts: Optional[int] = None,
) -> Optional[Cell]:
    taken = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)
    if len(taken) >= width * height:
        return None
    if max_attempts is None:
        max_attempts = 4 * width * height
    for _ in range(max_attempts):
        cell = (rng.randrange(width), rng.randrange(height))
        if cell not in taken:
            return cell
    return place_from_free_cells(width, height, taken, rng)


PLACEMENT_STRATEGIES: Dict[str, PlacementFn] = {
    "rejection": place_by_rejection,
    "free_cell": place_from_free_cells,
}


__all__ = [
    "Cell",
    "PLACEMENT_STRATEGIES",
    "occupancy_mask",
    "place_by_rejection",
    "place_from_free_cells",
]
