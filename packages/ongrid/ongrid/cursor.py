"""Pointer input state, written by input handlers between ticks."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class CursorState:
    """Pointer position in grid coordinates and primary button state.

    Coordinates are already translated from device pixels, so ``(2.5, 5.9)``
    lies over cell ``(2, 5)``.
    """

    x: float = 0.0
    y: float = 0.0
    primary_down: bool = False

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def press(self) -> None:
        self.primary_down = True

    def release(self) -> None:
        self.primary_down = False

    def cell(self) -> tuple[int, int]:
        return math.floor(self.x), math.floor(self.y)

    def is_over(self, x: int, y: int) -> bool:
        # A pointer outside any representable position is over no cell.
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            return False
        return self.cell() == (x, y)
