# moverange/settings.py
from __future__ import annotations

# Board
GRID_SIZE: int = 12
SHADED_DENSITY: float = 0.15          # approx. share of blocked cells
DENSITY_ROLL_RANGE: int = 99999       # trials are drawn from [0, DENSITY_ROLL_RANGE)

# Movement
MAX_MOVEMENT_POINTS: int = 6

# --- RNG (optional seed; None = random) ---
RNG_SEED: int | None = None

# Window / render
TILE_SIZE: int = 52
BOARD_MARGIN: int = TILE_SIZE
WINDOW_TITLE: str = "Movement Range"

# Timestep (fixed update loop)
FIXED_DT: float = 1.0 / 60.0
MAX_STEPS: int = 5
DT_CLAMP: float = 0.25

# Colors
BG_COLOR: tuple[int, int, int] = (15, 15, 20)
GRID_COLOR: tuple[int, int, int] = (45, 45, 60)
GRID_HILITE: tuple[int, int, int] = (70, 70, 100)
LABEL_RGB: tuple[int, int, int] = (20, 20, 20)

# Cell looks (color, label)
EMPTY_CELL_COLOR: tuple[int, int, int] = (255, 255, 255)
EMPTY_CELL_TEXT: str = "-"
SHADED_CELL_COLOR: tuple[int, int, int] = (128, 128, 128)
SHADED_CELL_TEXT: str = "*"
PLAYER_CELL_COLOR: tuple[int, int, int] = (0, 255, 255)
PLAYER_CELL_TEXT: str = "X"
VALID_CELL_COLOR: tuple[int, int, int] = (0, 255, 0)

# Overlays (RGBA for semi-transparency)
PATH_RGBA: tuple[int, int, int, int] = (40, 40, 200, 200)   # hover path

# Token
TOKEN_COLOR: tuple[int, int, int] = (220, 220, 40)
TOKEN_MOVE_SPEED_TPS: float = 8.0     # tiles per second

# HUD / labels
HUD_BG_RGBA: tuple[int, int, int, int] = (0, 0, 0, 150)
HUD_TEXT_RGB: tuple[int, int, int] = (240, 240, 240)
HUD_FONT_SIZE: int = 20
LABEL_FONT_SIZE: int = 28

# Logging
LOG_LEVEL: str = "INFO"
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
