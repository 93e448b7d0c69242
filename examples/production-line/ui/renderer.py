"""Grid, counter and entity rendering."""
from __future__ import annotations

import math

import pygame

from ongrid import GridView
from ui.constants import (
    BORDER_W, COLOR_BG, COLOR_GRID, COLOR_LETTER, COLOR_MARGIN, COLOR_ORBIT,
    COLOR_TEXT, ENTITY_STYLES, ORBIT_MARKER, ORBIT_PADDING, UNKNOWN_STYLE,
)
from ui.viewport import Viewport


class Fonts:
    """Lazily created fonts; pygame.font needs pygame.init() first."""

    def __init__(self, counter_size: int) -> None:
        self._counter_size = counter_size
        self._cache: dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        if size not in self._cache:
            self._cache[size] = pygame.font.SysFont("monospace", size)
        return self._cache[size]

    @property
    def counter(self) -> pygame.font.Font:
        return self.get(self._counter_size)


def draw_grid(surface: pygame.Surface, vp: Viewport) -> None:
    surface.fill(COLOR_BG)
    right = vp.left + vp.grid_w
    bottom = vp.top + vp.grid_h
    for px in range(vp.left, right + 1, vp.cell_size):
        pygame.draw.rect(surface, COLOR_GRID, (px - BORDER_W, vp.top, BORDER_W * 2, vp.grid_h))
    for py in range(vp.top, bottom + 1, vp.cell_size):
        pygame.draw.rect(surface, COLOR_GRID, (vp.left, py - BORDER_W, vp.grid_w, BORDER_W * 2))


def draw_margins(surface: pygame.Surface, vp: Viewport) -> None:
    screen_w, screen_h = vp.screen_size
    right = vp.left + vp.grid_w
    bottom = vp.top + vp.grid_h
    pygame.draw.rect(surface, COLOR_MARGIN, (0, 0, screen_w, vp.top))
    pygame.draw.rect(surface, COLOR_MARGIN, (0, bottom, screen_w, vp.bottom))
    pygame.draw.rect(surface, COLOR_MARGIN, (0, 0, vp.left, screen_h))
    pygame.draw.rect(surface, COLOR_MARGIN, (right, 0, vp.right, screen_h))


def draw_counter(surface: pygame.Surface, vp: Viewport, view: GridView, fonts: Fonts) -> None:
    """Ledger total, floored, centred in the top margin."""
    text = fonts.counter.render(str(math.floor(view.ledger_total)), True, COLOR_TEXT)
    center = (vp.left + vp.grid_w // 2, vp.top // 2)
    surface.blit(text, text.get_rect(center=center))


def draw_entities(surface: pygame.Surface, vp: Viewport, view: GridView, fonts: Fonts) -> None:
    inner = vp.cell_size - BORDER_W * 2
    half = inner / 2
    orbit_radius = half - ORBIT_PADDING - ORBIT_MARKER

    for cell in view.cells:
        color, letter = ENTITY_STYLES.get(cell.kind, UNKNOWN_STYLE)
        ox, oy = vp.cell_origin(cell.x, cell.y)
        left, top = ox + BORDER_W, oy + BORDER_W
        pygame.draw.rect(surface, color, (left, top, inner, inner))

        percent = fonts.get(10).render(str(math.floor(cell.cycle_progress * 100)), True, COLOR_TEXT)
        surface.blit(percent, percent.get_rect(bottomleft=(left, top + inner)))

        glyph = fonts.get(20).render(letter, True, COLOR_LETTER)
        surface.blit(glyph, (left, top))

        # Progress is in turns, clockwise from the top
        angle = cell.cycle_progress * 2 * math.pi
        cx = left + half + math.sin(angle) * orbit_radius
        cy = top + half - math.cos(angle) * orbit_radius
        marker = pygame.Rect(0, 0, ORBIT_MARKER, ORBIT_MARKER)
        marker.center = (round(cx), round(cy))
        pygame.draw.rect(surface, COLOR_ORBIT, marker)
