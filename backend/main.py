import random
import sys
import argparse
import logging
from typing import List, Optional

import blessed

from config import load_settings
from domain.constants import (
    Cell,
    Direction,
    UP,
    DOWN,
    LEFT,
    RIGHT,
    DIRECTION_OFFSETS,
    OPPOSITES,
    START_POSITION,
    START_DIRECTION,
    MIN_BOARD_SIZE,
    TICK_MS,
)
from domain.board_codec import decode_board
from domain.errors import BoardDecodeError, BoardFullError
from domain.game_state import GameState
from domain.snake import Snake

logger = logging.getLogger(__name__)

USAGE = "usage: snake <GROWS: 0|1> [BOARD STRING]"
GROWS_ERROR = "snake_grows must be either 1 (grows) or 0 (does not grow)"


class SnakeGame:
    """
    Manages:
      - Board (flat row-major cells, width, height)
      - The snake
      - Food placement
      - Score
      - Game over flag

    The game is a closed state machine: the caller drives it with one
    update() per tick and reads the public state in between.
    """
    def __init__(
        self,
        cells: List[Cell],
        width: int,
        height: int,
        snake: Snake,
        grow_on_eat: bool,
        rng: Optional[random.Random] = None
    ):
        self.cells = cells
        self.width = width
        self.height = height
        self.snake = snake
        self.score = 0
        self.game_over = False
        self.death_reason: Optional[str] = None   # 'bounds', 'wall' or 'self'
        self._grow_on_eat = grow_on_eat
        self.rng = rng if rng is not None else random.Random()

    @property
    def grow_on_eat(self) -> bool:
        return self._grow_on_eat

    @classmethod
    def new(cls, width: int, height: int, grow_on_eat: bool,
            rng: Optional[random.Random] = None) -> "SnakeGame":
        """
        Build a walled board with a one-segment snake at (2, 2) heading right
        and one piece of food.
        """
        if width < MIN_BOARD_SIZE or height < MIN_BOARD_SIZE:
            raise ValueError(
                f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}, got {width}x{height}"
            )

        cells = [Cell.PLAIN] * (width * height)
        for x in range(width):
            cells[x] = Cell.WALL
            cells[x + (height - 1) * width] = Cell.WALL
        for y in range(height):
            cells[y * width] = Cell.WALL
            cells[y * width + width - 1] = Cell.WALL

        start_x, start_y = START_POSITION
        snake_pos = start_y * width + start_x
        cells[snake_pos] = Cell.SNAKE

        game = cls(cells, width, height, Snake([snake_pos], START_DIRECTION), grow_on_eat, rng)
        game.place_food()
        return game

    @classmethod
    def from_string(cls, encoded: str, grow_on_eat: bool,
                    rng: Optional[random.Random] = None) -> "SnakeGame":
        """
        Build a game from a run-length board string.

        Raises:
            BoardDecodeError: if the string is rejected; nothing is constructed.
        """
        board = decode_board(encoded)
        game = cls(
            board.cells,
            board.width,
            board.height,
            Snake([board.snake_index], START_DIRECTION),
            grow_on_eat,
            rng
        )
        game.place_food()
        return game

    def place_food(self):
        """
        Mark a random plain cell as food.

        Samples uniformly over the whole board; after one failed sample per
        cell it falls back to choosing among the remaining plain cells.
        """
        for _ in range(len(self.cells)):
            idx = self.rng.randrange(len(self.cells))
            if self.cells[idx] == Cell.PLAIN:
                self.cells[idx] = Cell.FOOD
                logger.debug(f"Placed food at index {idx}")
                return

        free = [idx for idx, cell in enumerate(self.cells) if cell == Cell.PLAIN]
        if not free:
            raise BoardFullError("No plain cell left to place food on")
        logger.warning(f"Food sampling missed {len(self.cells)} times, scanning {len(free)} free cells")
        idx = self.rng.choice(free)
        self.cells[idx] = Cell.FOOD
        logger.debug(f"Placed food at index {idx}")

    def resolve_direction(self, requested: Direction) -> Direction:
        """
        Apply the input rules: a reversal is ignored while the snake has a
        body, and NONE keeps the current direction.
        """
        current = self.snake.direction
        if requested == Direction.NONE:
            return current
        if len(self.snake) > 1 and OPPOSITES.get(current) == requested:
            return current
        return requested

    def update(self, requested: Direction):
        """
        Execute one tick:
          1) If game is over, do nothing
          2) Resolve the direction
          3) Check the target cell against the bounds, walls and the body
          4) Move the head, then eat or drop the tail
        """
        if self.game_over:
            return

        direction = self.resolve_direction(requested)
        self.snake.direction = direction
        if direction == Direction.NONE:
            # No direction has ever been committed; the snake stays put.
            return

        head_x = self.snake.head % self.width
        head_y = self.snake.head // self.width
        dx, dy = DIRECTION_OFFSETS[direction]
        next_x, next_y = head_x + dx, head_y + dy

        if not (0 <= next_x < self.width and 0 <= next_y < self.height):
            self.end_game("bounds")
            return

        next_idx = next_y * self.width + next_x
        target = self.cells[next_idx]

        if target == Cell.WALL:
            self.end_game("wall")
            return
        if target == Cell.SNAKE:
            if next_idx != self.snake.tail:
                self.end_game("self")
                return
            logger.debug(f"Head follows tail into index {next_idx}")

        is_food = target == Cell.FOOD

        self.snake.positions.appendleft(next_idx)
        self.cells[next_idx] = Cell.SNAKE

        if is_food:
            self.score += 1
            if not self.grow_on_eat:
                self._drop_tail(next_idx)
            self.place_food()
        else:
            self._drop_tail(next_idx)

    def _drop_tail(self, head_idx: int):
        tail = self.snake.positions.pop()
        self.cells[tail] = Cell.PLAIN
        # The head may have moved into the cell the tail just left.
        self.cells[head_idx] = Cell.SNAKE

    def end_game(self, reason: str):
        self.game_over = True
        self.death_reason = reason
        logger.info(f"Game Over: {reason} (score {self.score})")

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            cells=list(self.cells),
            width=self.width,
            height=self.height,
            score=self.score,
            game_over=self.game_over,
            snake_positions=list(self.snake.positions),
            direction=self.snake.direction
        )

    def print_board(self) -> str:
        return self.get_current_state().print_board()


# -------------------------------
# Terminal loop
# -------------------------------

KEY_DIRECTIONS = {
    "KEY_UP": UP,
    "KEY_DOWN": DOWN,
    "KEY_LEFT": LEFT,
    "KEY_RIGHT": RIGHT,
}
QUIT_KEYS = {"q", "Q"}


def render(term, game: SnakeGame):
    colors = {
        Cell.SNAKE: lambda: term.yellow("S"),
        Cell.FOOD: lambda: term.red("O"),
        Cell.WALL: lambda: term.blue("█"),
        Cell.PLAIN: lambda: " ",
    }
    lines = [f"SCORE: {game.score}   "]
    for y in range(game.height):
        row = game.cells[y * game.width:(y + 1) * game.width]
        lines.append("".join(colors[cell]() for cell in row))
    print(term.home + "\r\n".join(lines), end="", flush=True)


def run_game(game: SnakeGame, term=None, tick_ms: int = TICK_MS) -> SnakeGame:
    """
    Drive the game from the keyboard until it ends or the player quits.

    Each iteration waits up to tick_ms for a key, then calls update()
    exactly once with the last direction seen.
    """
    if term is None:
        term = blessed.Terminal()

    last_dir = START_DIRECTION
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        render(term, game)
        while not game.game_over:
            key = term.inkey(timeout=tick_ms / 1000)
            if key:
                if key.name == "KEY_ESCAPE" or str(key) in QUIT_KEYS:
                    logger.info("Player quit")
                    break
                last_dir = KEY_DIRECTIONS.get(key.name, last_dir)

            game.update(last_dir)
            render(term, game)

    return game


def parse_grows(flag: str) -> Optional[bool]:
    if flag == "1":
        return True
    if flag == "0":
        return False
    return None


def main(argv: Optional[List[str]] = None, term=None) -> int:
    parser = argparse.ArgumentParser(
        prog="snake",
        description="Play snake in the terminal.",
        add_help=False
    )
    parser.add_argument("grows", nargs="?",
                        help="1 if the snake grows when it eats, 0 if it keeps its length")
    parser.add_argument("board", nargs="?",
                        help="Optional run-length board string, e.g. B5x5|W5|W1E3W1|...")
    args, _ = parser.parse_known_args(argv)

    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.grows is None:
        print(USAGE)
        return 0

    grow_on_eat = parse_grows(args.grows)
    if grow_on_eat is None:
        print(GROWS_ERROR)
        return 0

    rng = random.Random(settings.seed)
    if args.board is not None:
        try:
            game = SnakeGame.from_string(args.board, grow_on_eat, rng=rng)
        except (BoardDecodeError, BoardFullError) as e:
            print(f"Error parsing board: {e}")
            return 0
    else:
        game = SnakeGame.new(settings.board_width, settings.board_height, grow_on_eat, rng=rng)

    run_game(game, term=term, tick_ms=settings.tick_ms)

    print(f"Game Over! Score: {game.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
