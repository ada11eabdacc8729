"""Grid helpers for tests."""

from __future__ import annotations

import textwrap

from cavegen.simulation.cellmap import States


def ascii_states(text: str) -> States:
    """Parse ASCII art into states. '#' = alive, '.' = dead.

    Leading/trailing blank lines and common indentation are stripped.
    """
    lines = textwrap.dedent(text).strip().splitlines()
    return [[ch == "#" for ch in line.strip()] for line in lines]


def brute_force_neighbours(states: States, row: int, col: int) -> int:
    """Reference neighbour count: check all 8 offsets explicitly."""
    offsets = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]
    total = 0
    for dr, dc in offsets:
        r, c = row + dr, col + dc
        if 0 <= r < len(states) and 0 <= c < len(states[0]) and states[r][c]:
            total += 1
    return total
