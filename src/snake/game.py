# game.py
from enum import Enum
from typing import Optional

import numpy as np # type: ignore

from .config import CFG, GRID_W, GRID_H, Config
from .food import BoardFullError, spawn_food
from .grid import Direction, Grid, Position
from .snake import Snake


class GameStatus(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"
    WON = "won"          # snake fills the grid, no room left for food


class Game:
    """
    Owns the snake, food, score and status, and advances them one tick at a time.

    Pure state: no pygame calls, no I/O. The renderer and input handler get
    this object passed in and only go through its methods.
    """

    def __init__(
        self,
        grid: Optional[Grid] = None,
        rng: Optional[np.random.Generator] = None,
        config: Config = CFG,
    ):
        self.grid = grid if grid is not None else Grid(GRID_W, GRID_H)
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.config = config
        self.restart()

    # ---------- Lifecycle ----------
    def restart(self) -> None:
        """Back to the initial snake, score 0, fresh food. Valid from any state."""
        self.snake = Snake(self.grid.center, self.config.initial_length, Direction.RIGHT)
        if not all(self.grid.contains(p) for p in self.snake):
            raise ValueError(
                f"Initial snake of length {self.config.initial_length} "
                f"does not fit a {self.grid.width}x{self.grid.height} grid"
            )
        self.pending: Direction = self.snake.direction
        self.score = 0
        self.status = GameStatus.RUNNING
        self.food: Optional[Position] = None
        self._place_food()

    def _place_food(self) -> None:
        try:
            self.food = spawn_food(self.snake, self.grid, self.rng)
        except BoardFullError:
            self.food = None
            self.status = GameStatus.WON

    # ---------- Commands ----------
    def set_direction(self, direction: Direction) -> bool:
        """
        Queue a heading for the next tick (no 180° turns).
        Returns True if the change was accepted.
        """
        if self.status is not GameStatus.RUNNING:
            return False
        if direction == self.pending or direction is self.snake.direction.opposite:
            return False
        self.pending = direction
        return True

    def tick(self) -> GameStatus:
        """Advance one step: move, collide, eat, grow."""
        if self.status is not GameStatus.RUNNING:
            return self.status

        new_head = self.snake.next_head(self.pending)

        # Wall / self collision leaves the snake where it was, heading included
        if not self.grid.contains(new_head) or self.snake.collides(new_head):
            self.status = GameStatus.GAME_OVER
            return self.status

        # Commit direction once per tick
        self.snake.direction = self.pending

        ate = new_head == self.food
        if ate:
            self.score += 1
            self.snake.grow(self.config.growth_per_food)
        self.snake.advance(new_head)
        if ate:
            self._place_food()
        return self.status

    # ---------- Queries ----------
    @property
    def is_running(self) -> bool:
        return self.status is GameStatus.RUNNING

    @property
    def head(self) -> Position:
        return self.snake.head

    @property
    def length(self) -> int:
        return len(self.snake)
