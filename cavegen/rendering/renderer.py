"""Cell map renderer: scale-to-fit blit of cell states onto a surface.

Alive cells (floor) map to color index 0, dead cells (wall) to index 1.
With scaling on, each cell becomes a block of scale_x x scale_y pixels,
where the scale is the integer ratio of surface size to grid size.
"""

from __future__ import annotations

import pygame

from cavegen.config import COLOR_BG, COLOR_FLOOR, COLOR_WALL
from cavegen.simulation.cellmap import States
from cavegen.simulation.rect import Rect

FLOOR_INDEX = 0
WALL_INDEX = 1
PALETTE = {FLOOR_INDEX: COLOR_FLOOR, WALL_INDEX: COLOR_WALL}
ROOM_OUTLINE_COLOR = (200, 80, 60)


def color_index(alive: bool) -> int:
    """Palette index for a cell."""
    return FLOOR_INDEX if alive else WALL_INDEX


def cell_scale(states: States, width: int, height: int) -> tuple[int, int]:
    """Integer pixels per cell in each axis. Never less than 1."""
    rows = len(states)
    cols = len(states[0])
    return max(1, width // cols), max(1, height // rows)


def draw_states(states: States, surface: pygame.Surface, scale: bool = True) -> None:
    """Draw cell states to a surface.

    Without scaling, cell (row, col) lands on pixel (col, row). Pixels
    outside the surface are clipped.
    """
    if scale:
        sx, sy = cell_scale(states, surface.get_width(), surface.get_height())
    else:
        sx, sy = 1, 1
    for r, row in enumerate(states):
        for c, alive in enumerate(row):
            color = PALETTE[color_index(alive)]
            if sx == 1 and sy == 1:
                surface.set_at((c, r), color)
            else:
                surface.fill(color, (c * sx, r * sy, sx, sy))


class Renderer:
    """Draws a cell map, and optionally room outlines, to the screen."""

    def __init__(self, screen: pygame.Surface, scale: bool = True) -> None:
        self._screen = screen
        self._scale = scale

    def draw(self, states: States, rooms: list[Rect] | None = None) -> None:
        """Redraw the whole map and flip the display."""
        self._screen.fill(COLOR_BG)
        draw_states(states, self._screen, self._scale)
        if rooms:
            self._draw_rooms(states, rooms)
        pygame.display.flip()

    def _draw_rooms(self, states: States, rooms: list[Rect]) -> None:
        if self._scale:
            sx, sy = cell_scale(states, self._screen.get_width(), self._screen.get_height())
        else:
            sx, sy = 1, 1
        for room in rooms:
            pygame.draw.rect(
                self._screen, ROOM_OUTLINE_COLOR,
                (room.x1 * sx, room.y1 * sy, room.width * sx, room.height * sy),
                1,
            )
