"""Shared constants for cavegen. All tunable configuration lives here."""

# --- Display ---
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 30

# --- Map ---
MAP_COLS = 160
MAP_ROWS = 120
DEFAULT_LIVING_CHANCE = 0.5  # probability a cell starts alive (floor)

# --- Cellular automaton ---
# Alive cells survive with at least this many live neighbours.
SURVIVE_MIN_NEIGHBOURS = 4
# Dead cells are born with at least this many, or with none at all.
BIRTH_MIN_NEIGHBOURS = 5

# --- Cadence ---
STEP_INTERVAL_MS = 500  # one CA step every half second
STEPS_PER_CYCLE = 10    # re-randomize after this many steps

# --- BSP rooms ---
BSP_ITERATIONS = 240
BSP_MARGIN = 2           # seed rect offset from the top-left corner
BSP_SIZE_REDUCTION = 5   # seed rect is (cols - 5) x (rows - 5)
ROOM_MIN_SIZE = 3
ROOM_MAX_SIZE = 10
ROOM_MAX_OFFSET = 5      # candidate origin jitter inside its source rect

# --- Colors ---
COLOR_FLOOR = (222, 206, 170)
COLOR_WALL = (52, 40, 32)
COLOR_BG = (20, 20, 30)
