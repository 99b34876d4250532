"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple

from .constants import Cell, Direction

# Glyphs used by the terminal renderer
CELL_GLYPHS = {
    Cell.SNAKE: "S",
    Cell.FOOD: "O",
    Cell.WALL: "█",
    Cell.PLAIN: " ",
}


class GameState:
    """
    A read-only snapshot of the engine's observable state.

    Attributes:
        cells: flat row-major list of Cell values (index = y * width + x)
        width, height: board dimensions
        score: food eaten so far
        game_over: whether the game has ended
        snake_positions: snake body as flat indices, head first
        direction: the snake's current direction
    """

    def __init__(
        self,
        cells: List[Cell],
        width: int,
        height: int,
        score: int,
        game_over: bool,
        snake_positions: List[int],
        direction: Direction,
    ):
        self.cells = cells
        self.width = width
        self.height = height
        self.score = score
        self.game_over = game_over
        self.snake_positions = snake_positions
        self.direction = direction

    def cell_at(self, x: int, y: int) -> Cell:
        return self.cells[y * self.width + x]

    def coordinates(self, index: int) -> Tuple[int, int]:
        """Convert a flat index to (x, y)."""
        return index % self.width, index // self.width

    def rows(self) -> List[str]:
        return [
            "".join(CELL_GLYPHS[cell] for cell in self.cells[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        ]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        S = snake
        O = food
        █ = wall
        (space) = empty space
        The first line carries the score; rows follow top to bottom.
        """
        return "\n".join([f"SCORE: {self.score}"] + self.rows())

    def __repr__(self):
        return (
            f"<GameState {self.width}x{self.height}, score={self.score}, "
            f"game_over={self.game_over}, snake={self.snake_positions}>"
        )
