"""Cellular automaton smoothing for cell maps.

Pure functions over row-major bool grids (states[row][col]). A step never
mutates its input: every cell of the next generation is computed from the
previous generation only.

Rule (Moore neighbourhood, no wraparound):
- Alive cells survive with >= 4 live neighbours, otherwise die.
- Dead cells are born with >= 5 live neighbours OR with none at all.
  The zero-neighbour birth fills isolated holes with cave-like noise.
"""

from __future__ import annotations

from cavegen.config import BIRTH_MIN_NEIGHBOURS, SURVIVE_MIN_NEIGHBOURS
from cavegen.simulation.cellmap import States


def count_neighbours(states: States, row: int, col: int) -> int:
    """Count live cells among the 8 neighbours of (row, col).

    Out-of-bounds positions are skipped, so the result is in [0, 8].
    """
    rows = len(states)
    cols = len(states[0])
    count = 0
    for dr in range(-1, 2):
        for dc in range(-1, 2):
            if dr == 0 and dc == 0:
                continue
            nr, nc = row + dr, col + dc
            if nr < 0 or nc < 0 or nr >= rows or nc >= cols:
                continue
            if states[nr][nc]:
                count += 1
    return count


def next_cell_state(alive: bool, neighbours: int) -> bool:
    """Transition rule for a single cell."""
    if alive:
        return neighbours >= SURVIVE_MIN_NEIGHBOURS
    return neighbours >= BIRTH_MIN_NEIGHBOURS or neighbours == 0


def step(states: States) -> States:
    """Take a single CA step and return the evolved states."""
    rows = len(states)
    cols = len(states[0])
    new_states: States = []
    for r in range(rows):
        new_row = [False] * cols
        for c in range(cols):
            new_row[c] = next_cell_state(states[r][c], count_neighbours(states, r, c))
        new_states.append(new_row)
    return new_states


def run_steps(states: States, count: int) -> States:
    """Apply `count` CA steps in sequence."""
    if count < 0:
        raise ValueError(f"Step count must be non-negative, got {count}")
    for _ in range(count):
        states = step(states)
    return states
