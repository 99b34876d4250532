"""
Game constants for the snake engine.
"""

from enum import Enum


class Cell(Enum):
    """Contents of a single board position."""
    PLAIN = "plain"
    SNAKE = "snake"
    WALL = "wall"
    FOOD = "food"


class Direction(str, Enum):
    """Movement input; NONE means no new input this tick."""
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    NONE = "NONE"


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# (dx, dy) per direction; y grows downwards (row-major board)
DIRECTION_OFFSETS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
    Direction.NONE: (0, 0),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Run-length codes used by the board string format
CELL_CODES = {
    "W": Cell.WALL,
    "E": Cell.PLAIN,
    "S": Cell.SNAKE,
}
DIMENSION_PREFIX = "B"
ROW_SEPARATOR = "|"
DIMENSION_SEPARATOR = "x"

# Game settings
DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 10
START_POSITION = (2, 2)
START_DIRECTION = RIGHT
MIN_BOARD_SIZE = 4
TICK_MS = 300
