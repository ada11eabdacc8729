"""Tests for drawing cell states to pygame surfaces."""

import pygame

from cavegen.config import COLOR_BG, COLOR_FLOOR, COLOR_WALL
from cavegen.rendering.renderer import (
    FLOOR_INDEX,
    PALETTE,
    ROOM_OUTLINE_COLOR,
    WALL_INDEX,
    Renderer,
    cell_scale,
    color_index,
    draw_states,
)
from cavegen.simulation.rect import Rect
from tests.grids import ascii_states


def rgb(surface: pygame.Surface, x: int, y: int) -> tuple[int, int, int]:
    return tuple(surface.get_at((x, y)))[:3]


class TestColorIndex:
    """Tests for the cell to palette index mapping."""

    def test_alive_is_floor(self):
        assert color_index(True) == FLOOR_INDEX == 0

    def test_dead_is_wall(self):
        assert color_index(False) == WALL_INDEX == 1

    def test_palette(self):
        assert PALETTE[FLOOR_INDEX] == COLOR_FLOOR
        assert PALETTE[WALL_INDEX] == COLOR_WALL


class TestCellScale:
    """Tests for integer scale-to-fit factors."""

    def test_exact_fit(self):
        assert cell_scale([[False] * 160] * 120, 320, 240) == (2, 2)

    def test_truncates(self):
        assert cell_scale([[False] * 3] * 2, 10, 7) == (3, 3)

    def test_never_below_one(self):
        assert cell_scale([[False] * 50] * 50, 20, 20) == (1, 1)


class TestDrawStates:
    """Tests for blitting states onto a surface."""

    STATES = ascii_states("""
        #.
        .#
    """)

    def test_scaled_blocks(self):
        surf = pygame.Surface((8, 6))
        draw_states(self.STATES, surf)
        # 4x3 pixels per cell
        for x in range(4):
            for y in range(3):
                assert rgb(surf, x, y) == COLOR_FLOOR
                assert rgb(surf, x + 4, y) == COLOR_WALL
                assert rgb(surf, x, y + 3) == COLOR_WALL
                assert rgb(surf, x + 4, y + 3) == COLOR_FLOOR

    def test_unscaled_maps_col_to_x(self):
        states = ascii_states("""
            ...
            #..
        """)
        surf = pygame.Surface((10, 10))
        surf.fill((0, 0, 0))
        draw_states(states, surf, scale=False)
        assert rgb(surf, 0, 1) == COLOR_FLOOR
        assert rgb(surf, 1, 0) == COLOR_WALL
        assert rgb(surf, 2, 1) == COLOR_WALL
        # Outside the grid area stays untouched
        assert rgb(surf, 5, 5) == (0, 0, 0)

    def test_grid_larger_than_surface_is_clipped(self):
        states = [[True] * 30 for _ in range(30)]
        surf = pygame.Surface((10, 10))
        draw_states(states, surf)
        assert rgb(surf, 9, 9) == COLOR_FLOOR


class TestRenderer:
    """Tests for full-screen redraws."""

    def test_draw_fills_background_and_cells(self, screen):
        renderer = Renderer(screen)
        renderer.draw(self._states())
        # 4x2 grid on 40x20 -> 10 px cells, no leftover border
        assert rgb(screen, 5, 5) == COLOR_FLOOR
        assert rgb(screen, 15, 5) == COLOR_WALL
        assert COLOR_BG not in (rgb(screen, 39, 19), rgb(screen, 0, 0))

    def test_draw_room_outlines(self, screen):
        renderer = Renderer(screen)
        renderer.draw(self._states(), rooms=[Rect(1, 0, 3, 2)])
        assert rgb(screen, 10, 0) == ROOM_OUTLINE_COLOR
        assert rgb(screen, 15, 5) == COLOR_WALL

    @staticmethod
    def _states():
        return ascii_states("""
            #.#.
            .#.#
        """)
