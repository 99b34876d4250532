"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
terminal concerns (rendering loop, keyboard input, etc.).
"""

from .constants import (
    Cell,
    Direction,
    UP,
    DOWN,
    LEFT,
    RIGHT,
    VALID_MOVES,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    TICK_MS,
)
from .errors import (
    BoardDecodeError,
    BoardFullError,
    DimensionFormatError,
    DimensionMismatchError,
    DimensionValueError,
    EmptyBoardStringError,
    MultipleSnakesError,
    NoSnakeError,
    UnknownCellCodeError,
)
from .snake import Snake
from .game_state import GameState
from .board_codec import DecodedBoard, decode_board, encode_board

__all__ = [
    'Cell', 'Direction',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DEFAULT_WIDTH', 'DEFAULT_HEIGHT', 'TICK_MS',
    'BoardDecodeError', 'BoardFullError', 'DimensionFormatError',
    'DimensionMismatchError', 'DimensionValueError', 'EmptyBoardStringError',
    'MultipleSnakesError', 'NoSnakeError', 'UnknownCellCodeError',
    'Snake',
    'GameState',
    'DecodedBoard', 'decode_board', 'encode_board',
]
