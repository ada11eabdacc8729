"""Binary cell map: the grid that the generators work on.

Each cell is a bool: True = alive (floor), False = dead (wall). The
polarity is only a convention shared with the renderer.

States are row-major lists of lists, indexed states[row][col]. The map
never hands out or keeps references to lists owned by callers, so a
snapshot can be mutated freely without desynchronizing the map.
"""

from __future__ import annotations

import random
from typing import Callable

from cavegen.config import DEFAULT_LIVING_CHANCE

States = list[list[bool]]


class InvalidDimension(ValueError):
    """A grid or rectangle was constructed with a non-positive size."""


class ShapeMismatch(ValueError):
    """An update produced states that don't fit the map grid."""


class CellMap:
    """Fixed-size 2D grid of alive/dead cells."""

    def __init__(self, cols: int, rows: int, rng: random.Random | None = None) -> None:
        if cols <= 0 or rows <= 0:
            raise InvalidDimension(
                f"Map dimensions must be positive, got {cols}x{rows}"
            )
        self._cols = cols
        self._rows = rows
        self._rng = rng if rng is not None else random.Random()
        self._states: States = [[False] * cols for _ in range(rows)]

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    def states(self) -> States:
        """Return a copy of the current cell states."""
        return [list(row) for row in self._states]

    def get(self, row: int, col: int) -> bool:
        """Get a cell state. Out-of-bounds returns False (wall)."""
        if 0 <= row < self._rows and 0 <= col < self._cols:
            return self._states[row][col]
        return False

    def update(self, transform: Callable[[States], States]) -> None:
        """Replace the states with transform(current states).

        The result must have exactly `rows` rows of `cols` cells each.
        Otherwise the map is left unchanged and ShapeMismatch is raised.
        """
        new_states = transform(self.states())
        if len(new_states) != self._rows or any(
            len(row) != self._cols for row in new_states
        ):
            raise ShapeMismatch(
                f"Transformed states don't fit the {self._rows}x{self._cols} map grid"
            )
        self._states = [[bool(cell) for cell in row] for row in new_states]

    def randomize(
        self,
        living_chance: float = DEFAULT_LIVING_CHANCE,
        rng: random.Random | None = None,
    ) -> None:
        """Set every cell alive independently with probability living_chance."""
        if not 0.0 <= living_chance <= 1.0:
            raise ValueError(f"living_chance must be in [0, 1], got {living_chance}")
        rng = rng if rng is not None else self._rng
        for row in self._states:
            for c in range(self._cols):
                row[c] = rng.random() < living_chance

    def describe(self) -> str:
        """Dimensions followed by one line of 0/1 per row."""
        lines = [f"[{self._rows}, {self._cols}]", "states:"]
        for row in self._states:
            lines.append("".join("1" if cell else "0" for cell in row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()
