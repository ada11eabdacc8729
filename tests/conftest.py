"""Shared test fixtures for cavegen."""

from __future__ import annotations

import os
import random

import pytest

from cavegen.simulation.cellmap import CellMap

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


@pytest.fixture
def rng() -> random.Random:
    """A random source seeded with 42."""
    return random.Random(42)


@pytest.fixture
def cellmap(rng: random.Random) -> CellMap:
    """A 20x15 all-dead map sharing the seeded random source."""
    return CellMap(20, 15, rng=rng)


@pytest.fixture
def screen():
    """A 40x20 dummy-driver display surface, torn down after the test."""
    import pygame

    pygame.display.init()
    surface = pygame.display.set_mode((40, 20))
    yield surface
    pygame.display.quit()
