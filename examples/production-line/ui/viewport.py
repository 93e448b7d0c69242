"""Pixel <-> grid coordinate mapping for the window."""
from __future__ import annotations

from dataclasses import dataclass

from ui.constants import (
    CELL_SIZE, MARGIN_BOTTOM, MARGIN_LEFT, MARGIN_RIGHT, MARGIN_TOP,
)


@dataclass(frozen=True)
class Viewport:
    """Screen placement of a grid of ``width`` x ``height`` cells."""

    width: int
    height: int
    cell_size: int = CELL_SIZE
    left: int = MARGIN_LEFT
    top: int = MARGIN_TOP
    right: int = MARGIN_RIGHT
    bottom: int = MARGIN_BOTTOM

    @property
    def grid_w(self) -> int:
        return self.width * self.cell_size

    @property
    def grid_h(self) -> int:
        return self.height * self.cell_size

    @property
    def screen_size(self) -> tuple[int, int]:
        return (
            self.left + self.grid_w + self.right,
            self.top + self.grid_h + self.bottom,
        )

    def to_grid(self, px: float, py: float) -> tuple[float, float]:
        """Translate window pixels to grid coordinates (cell units, may be off-grid)."""
        return (px - self.left) / self.cell_size, (py - self.top) / self.cell_size

    def cell_origin(self, x: int, y: int) -> tuple[int, int]:
        return self.left + x * self.cell_size, self.top + y * self.cell_size
