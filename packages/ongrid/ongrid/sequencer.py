"""Row-major traversal of grid positions."""
from __future__ import annotations

from typing import Callable, Iterator

from ongrid.grid import GridModel
from ongrid.types import Entity

# Anything shaped like occupied(); swapped out in tests to break ordering.
Sequencer = Callable[[GridModel], Iterator[tuple[int, int, Entity]]]


def positions(grid: GridModel) -> Iterator[tuple[int, int]]:
    """Yield every in-bounds position, x varying fastest, then y."""
    for y in range(grid.height):
        for x in range(grid.width):
            yield x, y


def occupied(grid: GridModel) -> Iterator[tuple[int, int, Entity]]:
    """Yield ``(x, y, entity)`` for cells whose kind is not NONE, in row-major order."""
    for x, y in positions(grid):
        entity = grid.resolve(x, y)
        if entity is not None and entity.occupied:
            yield x, y, entity
