"""Timed generation cycle.

Randomizes a CellMap, then advances it one CA step every
STEP_INTERVAL_MS until STEPS_PER_CYCLE steps have run, then starts over
with a fresh random map. Time is fed in from outside as elapsed
milliseconds, so the cycle runs the same under a real clock or a test.
"""

from __future__ import annotations

import logging
import random

from cavegen.config import (
    BSP_SIZE_REDUCTION,
    DEFAULT_LIVING_CHANCE,
    STEP_INTERVAL_MS,
    STEPS_PER_CYCLE,
)
from cavegen.simulation.automaton import step
from cavegen.simulation.cellmap import CellMap, InvalidDimension
from cavegen.simulation.partition import (
    RoomLayout,
    build_rooms,
    can_place_rooms,
    carve_rooms,
)

logger = logging.getLogger(__name__)


class GenerationCycle:
    """Drives a CellMap through repeated randomize-then-smooth cycles.

    Attributes:
        cellmap: The map being evolved.
        step_count: CA steps taken since the last randomize.
        cycle_count: Number of randomizes so far.
        layout: Rooms from the last build, or None when rooms are off.
    """

    def __init__(
        self,
        cellmap: CellMap,
        rng: random.Random | None = None,
        living_chance: float = DEFAULT_LIVING_CHANCE,
        step_interval_ms: int = STEP_INTERVAL_MS,
        steps_per_cycle: int = STEPS_PER_CYCLE,
        carve: bool = False,
    ) -> None:
        if step_interval_ms <= 0:
            raise ValueError(f"step_interval_ms must be positive, got {step_interval_ms}")
        if steps_per_cycle <= 0:
            raise ValueError(f"steps_per_cycle must be positive, got {steps_per_cycle}")
        self.cellmap = cellmap
        self._rng = rng if rng is not None else random.Random()
        self._living_chance = living_chance
        self._step_interval_ms = step_interval_ms
        self._steps_per_cycle = steps_per_cycle
        self._carve = False
        self.carve = carve
        self._accumulator_ms = 0
        self.step_count = 0
        self.cycle_count = 0
        self.layout: RoomLayout | None = None
        self.restart()

    @property
    def carve(self) -> bool:
        """Whether rooms are carved into each freshly randomized map.

        Turning it on for a map too small for rooms raises
        InvalidDimension and leaves the cycle untouched.
        """
        return self._carve

    @carve.setter
    def carve(self, value: bool) -> None:
        if value and not can_place_rooms(self.cellmap.cols, self.cellmap.rows):
            raise InvalidDimension(
                f"Room carving needs a map larger than "
                f"{BSP_SIZE_REDUCTION}x{BSP_SIZE_REDUCTION}, "
                f"got {self.cellmap.cols}x{self.cellmap.rows}"
            )
        self._carve = value

    def restart(self) -> None:
        """Re-randomize the map and reset the step counter."""
        self.cellmap.randomize(self._living_chance, rng=self._rng)
        self.step_count = 0
        self._accumulator_ms = 0
        self.cycle_count += 1
        if self.carve:
            self._carve_rooms()
        else:
            self.layout = None
        logger.info("Cycle %d: map randomized", self.cycle_count)

    def _carve_rooms(self) -> None:
        self.layout = build_rooms(self.cellmap.states(), rng=self._rng)
        self.cellmap.update(carve_rooms(self.layout.rooms))

    def step_once(self) -> None:
        """Take one CA step, restarting first if the cycle is complete."""
        if self.step_count >= self._steps_per_cycle:
            self.restart()
            return
        self.cellmap.update(step)
        self.step_count += 1
        logger.debug("Cycle %d: step %d", self.cycle_count, self.step_count)

    def advance(self, dt_ms: int) -> bool:
        """Feed elapsed time. Returns True if the map changed."""
        self._accumulator_ms += dt_ms
        changed = False
        while self._accumulator_ms >= self._step_interval_ms:
            self._accumulator_ms -= self._step_interval_ms
            self.step_once()
            changed = True
        return changed
