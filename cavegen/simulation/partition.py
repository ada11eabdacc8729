"""BSP-style room placement.

A pool of candidate rects starts with one seed rect covering most of the
grid plus its four quadrants. Each iteration picks a rect from the pool,
samples a room candidate inside it and, if the candidate is admitted,
records the room and pushes the picked rect's quadrants back into the
pool. Selection skips the seed (index 0) once it has children, so
subdivision keeps getting finer where rooms were accepted.

The loop always runs a fixed number of iterations; rejected candidates
still count. No corridors are carved between rooms.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable

from cavegen.config import BSP_ITERATIONS, BSP_MARGIN, BSP_SIZE_REDUCTION
from cavegen.simulation.cellmap import InvalidDimension, States
from cavegen.simulation.rect import Rect

logger = logging.getLogger(__name__)

AdmissionCheck = Callable[[Rect, list[Rect], Rect], bool]


@dataclass
class RoomLayout:
    """Result of a single build.

    Attributes:
        bounds: The seed rect. Rooms must lie inside it.
        rects: Candidate pool in insertion order; rects[0] is the seed.
        rooms: Admitted rooms in acceptance order.
    """
    bounds: Rect
    rects: list[Rect] = field(default_factory=list)
    rooms: list[Rect] = field(default_factory=list)


def can_place_rooms(cols: int, rows: int) -> bool:
    """True if the grid is large enough for a non-empty seed rect."""
    return cols > BSP_SIZE_REDUCTION and rows > BSP_SIZE_REDUCTION


def seed_rect(cols: int, rows: int) -> Rect:
    """Seed rect: 2-cell margin on the near side, 3 cells on the far side."""
    if not can_place_rooms(cols, rows):
        raise InvalidDimension(
            f"Room placement needs a grid larger than "
            f"{BSP_SIZE_REDUCTION}x{BSP_SIZE_REDUCTION}, got {cols}x{rows}"
        )
    return Rect.from_size(
        BSP_MARGIN, BSP_MARGIN,
        cols - BSP_SIZE_REDUCTION, rows - BSP_SIZE_REDUCTION,
    )


def room_is_possible(candidate: Rect, rooms: list[Rect], bounds: Rect) -> bool:
    """Admit a candidate that fits in bounds and keeps clear of every room.

    Rooms that merely touch are rejected too, so two admitted rooms are
    always separated by at least one wall cell.
    """
    if not bounds.contains(candidate):
        return False
    return not any(candidate.touches_or_overlaps(room) for room in rooms)


def build_rooms(
    states: States,
    rng: random.Random | None = None,
    admit: AdmissionCheck = room_is_possible,
    iterations: int = BSP_ITERATIONS,
) -> RoomLayout:
    """Subdivide the grid and place rooms.

    Args:
        states: Grid states; only the dimensions are used.
        rng: Random source. A fresh unseeded one is used when omitted.
        admit: Admission check, called exactly `iterations` times.
        iterations: Number of sampling rounds.

    Returns:
        The seed bounds, the full rect pool and the admitted rooms.
    """
    rng = rng if rng is not None else random.Random()
    rows = len(states)
    cols = len(states[0]) if rows else 0
    seed = seed_rect(cols, rows)

    layout = RoomLayout(bounds=seed)
    layout.rects.append(seed)
    layout.rects.extend(seed.quarter())

    for _ in range(iterations):
        if len(layout.rects) == 1:
            index = 0
        else:
            index = rng.randrange(1, len(layout.rects))
        source = layout.rects[index]
        candidate = source.sample_room(rng)
        if admit(candidate, layout.rooms, seed):
            layout.rooms.append(candidate)
            layout.rects.extend(source.quarter())

    logger.debug(
        "Placed %d rooms from %d candidate rects in %d iterations",
        len(layout.rooms), len(layout.rects), iterations,
    )
    return layout


def carve_rooms(rooms: list[Rect]) -> Callable[[States], States]:
    """Return a CellMap.update transform that turns room cells into floor.

    Room cells outside the grid are ignored.
    """
    def transform(states: States) -> States:
        rows = len(states)
        cols = len(states[0]) if rows else 0
        carved = [list(row) for row in states]
        for room in rooms:
            for r, c in room.cells():
                if 0 <= r < rows and 0 <= c < cols:
                    carved[r][c] = True
        return carved

    return transform
