"""GridModel - dense row-major array of entities."""
from __future__ import annotations

from ongrid.types import ConfigError, Entity, EntityKind


class GridModel:
    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ConfigError(
                f"grid dimensions must be positive, got {width}x{height}"
            )
        self._width = width
        self._height = height
        self._cells: list[Entity] = [Entity() for _ in range(width * height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return len(self._cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def index_of(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise ValueError(
                f"({x}, {y}) out of bounds for {self._width}x{self._height} grid"
            )
        return y * self._width + x

    def resolve(self, x: int, y: int) -> Entity | None:
        """Return the entity at ``(x, y)``, or None when the position is off the grid."""
        if not self.in_bounds(x, y):
            return None
        return self._cells[y * self._width + x]

    def place(self, kind: EntityKind, x: int, y: int) -> Entity:
        entity = self._cells[self.index_of(x, y)]
        entity.kind = kind
        return entity
