# snake.py
from collections import deque
from typing import Deque, Iterator, Set

from .grid import Direction, Position


class Snake:
    """
    Ordered body segments (head first) plus the current heading.

    The deque gives O(1) head-push / tail-pop; a set mirrors it so that
    occupancy checks don't scan the body.
    """

    def __init__(self, head: Position, length: int, direction: Direction = Direction.RIGHT):
        if length < 1:
            raise ValueError(f"Snake length must be at least 1, got {length}")
        self.direction = direction
        self.pending_growth = 0
        # Segments trail behind the head, opposite to the heading.
        back = direction.opposite
        self.segments: Deque[Position] = deque([head])
        for _ in range(length - 1):
            self.segments.append(self.segments[-1].step(back))
        self._cells: Set[Position] = set(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.segments)

    def __contains__(self, pos) -> bool:
        return pos in self._cells

    @property
    def head(self) -> Position:
        return self.segments[0]

    @property
    def tail(self) -> Position:
        return self.segments[-1]

    def next_head(self, direction: Direction) -> Position:
        return self.head.step(direction)

    def collides(self, pos: Position) -> bool:
        """
        True if moving the head onto `pos` would hit the body.
        The tail cell is free when it is about to be vacated this move.
        """
        if pos not in self._cells:
            return False
        return not (pos == self.tail and self.pending_growth == 0)

    def grow(self, amount: int = 1) -> None:
        self.pending_growth += amount

    def advance(self, new_head: Position) -> None:
        """Push the new head; drop the tail unless growth is pending."""
        if self.pending_growth > 0:
            self.pending_growth -= 1
        else:
            self._cells.discard(self.segments.pop())
        self.segments.appendleft(new_head)
        self._cells.add(new_head)
