# grid.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    """Unit offsets in screen coordinates (y grows downward)."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


class Position(NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        return Position(self.x + direction.dx, self.y + direction.dy)


@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")

    @classmethod
    def from_screen(cls, width_px: int, height_px: int, cell_px: int) -> "Grid":
        """
        Derive the play-field from a window size.
        The cell size must evenly divide both window dimensions.
        """
        if cell_px <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_px}")
        if width_px % cell_px or height_px % cell_px:
            raise ValueError(
                f"Window {width_px}x{height_px} is not divisible by cell size {cell_px}"
            )
        return cls(width_px // cell_px, height_px // cell_px)

    @property
    def center(self) -> Position:
        return Position(self.width // 2, self.height // 2)

    def contains(self, pos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height
