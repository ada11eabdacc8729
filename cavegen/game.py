"""Window loop for watching the generator run.

Feeds real elapsed time into a GenerationCycle and redraws the map
whenever it changes. The simulation itself never touches pygame.
"""

from __future__ import annotations

import logging

import pygame

from cavegen.config import FPS
from cavegen.rendering.renderer import Renderer
from cavegen.simulation.cellmap import InvalidDimension
from cavegen.simulation.cycle import GenerationCycle

logger = logging.getLogger(__name__)


class Game:
    """Owns the window, the generation cycle and the renderer.

    Keys: ESC quits, SPACE re-randomizes, R toggles room carving.
    """

    def __init__(self, screen: pygame.Surface, cycle: GenerationCycle) -> None:
        self._screen = screen
        self._cycle = cycle
        self._clock = pygame.time.Clock()
        self._renderer = Renderer(screen)
        self._dirty = True

    def run(self) -> None:
        """Main loop. Returns when the window is closed."""
        running = True
        last_frame_ms = pygame.time.get_ticks()
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_key(event.key)

            if not running:
                break

            now_ms = pygame.time.get_ticks()
            if self._cycle.advance(now_ms - last_frame_ms):
                self._dirty = True
            last_frame_ms = now_ms

            if self._dirty:
                self._render()
                self._dirty = False

            self._clock.tick(FPS)

    def _handle_key(self, key: int) -> bool:
        """Apply a key press. Returns False to quit."""
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_SPACE:
            self._cycle.restart()
            self._dirty = True
        elif key == pygame.K_r:
            try:
                self._cycle.carve = not self._cycle.carve
            except InvalidDimension as e:
                logger.warning("Room carving unavailable: %s", e)
                return True
            logger.info("Room carving %s", "on" if self._cycle.carve else "off")
            self._cycle.restart()
            self._dirty = True
        elif key == pygame.K_F11:
            pygame.display.toggle_fullscreen()
            self._dirty = True
        return True

    def _render(self) -> None:
        layout = self._cycle.layout
        rooms = layout.rooms if layout is not None else None
        self._renderer.draw(self._cycle.cellmap.states(), rooms)
