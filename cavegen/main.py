"""cavegen entry point.

Usage:
    Watch the generator:   python -m cavegen.main
    Reproducible run:      python -m cavegen.main --seed 42
    With BSP rooms:        python -m cavegen.main --rooms
    Headless text dump:    python -m cavegen.main --seed 42 --dump 5
"""

from __future__ import annotations

import argparse
import logging
import random

from cavegen.config import (
    DEFAULT_LIVING_CHANCE,
    MAP_COLS,
    MAP_ROWS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from cavegen.simulation.automaton import run_steps
from cavegen.simulation.cellmap import CellMap
from cavegen.simulation.cycle import GenerationCycle
from cavegen.simulation.partition import build_rooms, can_place_rooms, carve_rooms

logger = logging.getLogger(__name__)


def _probability(value: str) -> float:
    chance = float(value)
    if not 0.0 <= chance <= 1.0:
        raise argparse.ArgumentTypeError(f"must be between 0 and 1, got {value}")
    return chance


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="cavegen: cellular automaton caves and BSP rooms",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for reproducible maps",
    )
    parser.add_argument(
        "--cols", type=_positive_int, default=MAP_COLS,
        help=f"Map width in cells (default {MAP_COLS})",
    )
    parser.add_argument(
        "--rows", type=_positive_int, default=MAP_ROWS,
        help=f"Map height in cells (default {MAP_ROWS})",
    )
    parser.add_argument(
        "--living-chance", type=_probability, default=DEFAULT_LIVING_CHANCE,
        help="Probability that a cell starts alive",
    )
    parser.add_argument(
        "--rooms", action="store_true",
        help="Carve BSP rooms into every freshly randomized map",
    )
    parser.add_argument(
        "--dump", type=int, metavar="STEPS", default=None,
        help="Run STEPS automaton steps headless and print the map",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Start in fullscreen mode (toggle with F11)",
    )
    return parser


def dump(cellmap: CellMap, steps: int, rng: random.Random,
         living_chance: float, rooms: bool) -> str:
    """Randomize, optionally carve rooms, run `steps` steps, describe."""
    cellmap.randomize(living_chance, rng=rng)
    if rooms:
        layout = build_rooms(cellmap.states(), rng=rng)
        cellmap.update(carve_rooms(layout.rooms))
    cellmap.update(lambda states: run_steps(states, steps))
    return cellmap.describe()


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.dump is not None and args.dump < 0:
        parser.error("--dump must be non-negative")
    if args.rooms and not can_place_rooms(args.cols, args.rows):
        parser.error("--rooms needs a map larger than 5x5")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    rng = random.Random(args.seed)
    cellmap = CellMap(args.cols, args.rows, rng=rng)

    if args.dump is not None:
        print(dump(cellmap, args.dump, rng, args.living_chance, args.rooms))
        return

    import pygame

    from cavegen.game import Game

    pygame.init()
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("cavegen")

    logger.info("Generating %dx%d map, seed=%s", args.cols, args.rows, args.seed)
    cycle = GenerationCycle(
        cellmap, rng=rng, living_chance=args.living_chance, carve=args.rooms,
    )
    Game(screen, cycle).run()

    pygame.quit()


if __name__ == "__main__":
    main()
