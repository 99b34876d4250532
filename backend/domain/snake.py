"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable

from .constants import Direction, START_DIRECTION


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of flat board indices from head at index 0 to tail at the end
        direction: the last direction applied to the snake
    """

    def __init__(self, positions: Iterable[int], direction: Direction = START_DIRECTION):
        self.positions = deque(positions)
        self.direction = direction

    @property
    def head(self) -> int:
        """Return the head index (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> int:
        """Return the tail index (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}, direction={self.direction.value}>"
