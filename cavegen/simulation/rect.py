"""Axis-aligned rectangle used as the unit of spatial subdivision.

Coordinates are in cells. A Rect covers columns [x1, x2) and rows [y1, y2).
Rects are immutable values: every operation that derives a new shape
returns a new Rect.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator

from cavegen.config import ROOM_MAX_OFFSET, ROOM_MAX_SIZE, ROOM_MIN_SIZE
from cavegen.simulation.cellmap import InvalidDimension


@dataclass(frozen=True, slots=True)
class Rect:
    x1: int
    y1: int
    x2: int
    y2: int

    def __post_init__(self) -> None:
        if self.x2 <= self.x1 or self.y2 <= self.y1:
            raise InvalidDimension(
                f"Rect corners must span a positive area, got "
                f"({self.x1}, {self.y1})-({self.x2}, {self.y2})"
            )

    @classmethod
    def from_size(cls, x: int, y: int, width: int, height: int) -> Rect:
        """Build a Rect from its top-left corner and size."""
        if width <= 0 or height <= 0:
            raise InvalidDimension(
                f"Rect size must be positive, got {width}x{height}"
            )
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> int:
        return abs(self.x1 - self.x2)

    @property
    def height(self) -> int:
        return abs(self.y1 - self.y2)

    def quarter(self) -> list[Rect]:
        """Split into four quadrants anchored at this rect's origin.

        Each quadrant is max(width // 2, 1) x max(height // 2, 1), so thin
        rects yield overlapping quadrants rather than empty ones.
        """
        hw = max(self.width // 2, 1)
        hh = max(self.height // 2, 1)
        return [
            Rect.from_size(self.x1, self.y1, hw, hh),
            Rect.from_size(self.x1 + hw, self.y1, hw, hh),
            Rect.from_size(self.x1, self.y1 + hh, hw, hh),
            Rect.from_size(self.x1 + hw, self.y1 + hh, hw, hh),
        ]

    def touches_or_overlaps(self, other: Rect) -> bool:
        """True if the rects overlap or share an edge."""
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def contains(self, other: Rect) -> bool:
        """True if `other` lies fully inside this rect."""
        return (
            self.x1 <= other.x1
            and other.x2 <= self.x2
            and self.y1 <= other.y1
            and other.y2 <= self.y2
        )

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield every covered (row, col)."""
        for row in range(self.y1, self.y2):
            for col in range(self.x1, self.x2):
                yield row, col

    def sample_room(self, rng: random.Random) -> Rect:
        """Sample a room candidate from this rect.

        Width and height are drawn from [3, min(dimension, 10)], raised to
        3 when the source is thinner than that. The origin is jittered by
        0-5 cells in each axis. The candidate may extend past this rect;
        admission decides whether it fits.
        """
        width = rng.randint(ROOM_MIN_SIZE, max(ROOM_MIN_SIZE, min(self.width, ROOM_MAX_SIZE)))
        height = rng.randint(ROOM_MIN_SIZE, max(ROOM_MIN_SIZE, min(self.height, ROOM_MAX_SIZE)))
        x = self.x1 + rng.randint(0, ROOM_MAX_OFFSET)
        y = self.y1 + rng.randint(0, ROOM_MAX_OFFSET)
        return Rect.from_size(x, y, width, height)
