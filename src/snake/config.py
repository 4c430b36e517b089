# config.py
from dataclasses import dataclass
from typing import Optional

import pygame # type: ignore

from .grid import Direction

# ----- Window & grid -----
WIDTH, HEIGHT = 720, 480
CELL_SIZE = 30
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE
TITLE = "Snake"

# ----- Colors -----
BG         = (20, 20, 24)
GRID_LINE  = (32, 32, 38)
HEAD       = (80, 200, 80)
BODY       = (40, 140, 40)
FOOD       = (200, 70, 70)
TEXT       = (220, 220, 230)
SCORE_TEXT = (80, 200, 80)

# ----- Key bindings -----
# Arrow keys and WASD both steer.
KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}
RESTART_BUTTON = 1  # left mouse button

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None   # None -> fresh entropy every run
    ticks_per_second: int = 10
    fps: int = 60
    initial_length: int = 3
    growth_per_food: int = 1
    font_size: int = 24
    debug: bool = False          # print game events to stdout

CFG = Config()
