"""Layout, color, and rendering constants."""
from __future__ import annotations

from ongrid import EntityKind

CELL_SIZE = 50
BORDER_W = 1
FPS = 60

# Margins around the grid (top margin also holds the ledger counter)
MARGIN_TOP = 20
MARGIN_BOTTOM = 30
MARGIN_LEFT = 40
MARGIN_RIGHT = 50

COLOR_BG = (0, 0, 0)
COLOR_GRID = (128, 128, 128)
COLOR_MARGIN = (34, 34, 34)
COLOR_TEXT = (255, 255, 255)
COLOR_LETTER = (0, 0, 0)
COLOR_ORBIT = (211, 211, 211)

# Unknown kinds draw in magenta with an X
UNKNOWN_STYLE = ((255, 0, 255), "X")

ENTITY_STYLES: dict[EntityKind, tuple[tuple[int, int, int], str]] = {
    EntityKind.GENERATOR: ((0, 0, 139), "G"),
    EntityKind.MOTOR: ((0, 128, 0), "M"),
    EntityKind.PRODUCER: ((139, 0, 0), "P"),
}

ORBIT_MARKER = 3
ORBIT_PADDING = 1
