#!/usr/bin/env python3
"""
CLI tool to produce and check run-length board strings

Usage:
    python board_string.py --width <w> --height <h>
    python board_string.py --check <board string>

Examples:
    # Encode a fresh 20x10 board
    python board_string.py --width 20 --height 10

    # Decode a board string and show it
    python board_string.py --check "B4x4|W4|W1S1E1W1|W1E2W1|W4"
"""

import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from domain.board_codec import decode_board, encode_board  # noqa: E402
from domain.constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, START_DIRECTION  # noqa: E402
from domain.errors import BoardDecodeError  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from main import SnakeGame  # noqa: E402

logger = logging.getLogger(__name__)


def fresh_board_string(width: int, height: int) -> str:
    """Encode the layout a new game starts with (food is not encoded)."""
    game = SnakeGame.new(width, height, grow_on_eat=True)
    return encode_board(game.cells, game.width, game.height)


def check_board_string(encoded: str) -> str:
    """Decode a board string and return its rendering."""
    board = decode_board(encoded)
    state = GameState(
        cells=board.cells,
        width=board.width,
        height=board.height,
        score=0,
        game_over=False,
        snake_positions=[board.snake_index],
        direction=START_DIRECTION
    )
    return state.print_board()


def main() -> int:
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = argparse.ArgumentParser(
        description='Encode fresh boards or check existing board strings',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH,
                        help=f'Board width (default: {DEFAULT_WIDTH})')
    parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT,
                        help=f'Board height (default: {DEFAULT_HEIGHT})')
    parser.add_argument('--check', type=str,
                        help='Board string to decode and render')
    args = parser.parse_args()

    if args.check is not None:
        try:
            print(check_board_string(args.check))
        except BoardDecodeError as e:
            logger.error(f"Invalid board string: {e}")
            print(f"Error parsing board: {e}")
            return 1
        return 0

    try:
        print(fresh_board_string(args.width, args.height))
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
