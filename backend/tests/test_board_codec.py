"""
Tests for the run-length board string codec.
"""

import os
import random
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.board_codec import decode_board, encode_board  # noqa: E402
from domain.constants import Cell  # noqa: E402
from domain.errors import (  # noqa: E402
    BoardDecodeError,
    DimensionFormatError,
    DimensionMismatchError,
    DimensionValueError,
    EmptyBoardStringError,
    MultipleSnakesError,
    NoSnakeError,
    UnknownCellCodeError,
)
from main import SnakeGame  # noqa: E402

W, E, S = Cell.WALL, Cell.PLAIN, Cell.SNAKE


class TestDecode:

    def test_decode_walled_board(self):
        board = decode_board("B4x4|W4|W1S1E1W1|W1E2W1|W4")
        assert board.width == 4
        assert board.height == 4
        assert board.snake_index == 5
        assert board.cells == [
            W, W, W, W,
            W, S, E, W,
            W, E, E, W,
            W, W, W, W,
        ]

    def test_height_comes_before_width(self):
        board = decode_board("B2x3|S1E5")
        assert board.height == 2
        assert board.width == 3

    def test_letter_without_digits_emits_nothing(self):
        board = decode_board("B1x2|WE1S1")
        assert board.cells == [E, S]
        assert board.snake_index == 1

    def test_row_segments_are_not_checked_against_width(self):
        board = decode_board("B2x2|E3|S1")
        assert board.cells == [E, E, E, S]
        assert board.snake_index == 3

    def test_non_letters_between_tokens_are_skipped(self):
        board = decode_board("B2x2|E1 E1-S1.E1")
        assert board.cells == [E, E, S, E]

    def test_multi_digit_run_lengths(self):
        board = decode_board("B1x12|E10S1E1")
        assert len(board.cells) == 12
        assert board.snake_index == 10

    def test_zero_length_snake_token_is_ignored(self):
        board = decode_board("B1x3|S0E2S1")
        assert board.snake_index == 2

    def test_oversized_run_length_counts_as_zero(self):
        board = decode_board("B1x1|S1W99999999999999999999")
        assert board.cells == [S]
        assert board.snake_index == 0

    def test_largest_unsigned_run_length_is_kept(self):
        with pytest.raises(DimensionMismatchError) as exc:
            decode_board("B1x1|S1W18446744073709551615")
        assert exc.value.actual == 2 ** 64

    def test_very_long_digit_run_counts_as_zero(self):
        board = decode_board("B1x2|E1S1W" + "9" * 5000)
        assert board.cells == [E, S]

    def test_leading_zeros_in_run_length(self):
        board = decode_board("B1x2|E" + "0" * 5000 + "1S1")
        assert board.cells == [E, S]

    def test_plus_sign_in_dimensions(self):
        board = decode_board("B+2x+2|E3S1")
        assert board.height == 2
        assert board.width == 2


class TestDecodeErrors:

    @pytest.mark.parametrize("encoded,error", [
        ("", EmptyBoardStringError),
        ("A2x2|E3S1", DimensionFormatError),
        ("b2x2|E3S1", DimensionFormatError),
        ("B2|E3S1", DimensionFormatError),
        ("B2x2x2|E3S1", DimensionFormatError),
        ("Bax2|E3S1", DimensionValueError),
        ("B2xb|E3S1", DimensionValueError),
        ("B-2x2|E3S1", DimensionValueError),
        ("Bx2|E3S1", DimensionValueError),
        ("B+x2|E3S1", DimensionValueError),
        ("B2x++2|E3S1", DimensionValueError),
        ("B18446744073709551616x1|S1", DimensionValueError),
        ("B2x2|E3X1", UnknownCellCodeError),
        ("B2x2|E3s1", UnknownCellCodeError),
        ("B2x2|F1E2S1", UnknownCellCodeError),
        ("B2x2|S1E2S1", MultipleSnakesError),
        ("B2x2|S2E2", MultipleSnakesError),
        ("B2x2|E1S1|E1S1", MultipleSnakesError),
        ("B2x2|S1E2", DimensionMismatchError),
        ("B2x2|S1E4", DimensionMismatchError),
        ("B2x2|E4", NoSnakeError),
        ("B2x2|E4S0", NoSnakeError),
    ])
    def test_error_kinds(self, encoded, error):
        with pytest.raises(error):
            decode_board(encoded)

    def test_errors_are_value_errors(self):
        for cls in (EmptyBoardStringError, DimensionFormatError, DimensionValueError,
                    UnknownCellCodeError, MultipleSnakesError, DimensionMismatchError,
                    NoSnakeError):
            assert issubclass(cls, BoardDecodeError)
            assert issubclass(cls, ValueError)

    def test_dimension_value_error_names_dimension(self):
        with pytest.raises(DimensionValueError) as exc:
            decode_board("B2xb|E3S1")
        assert exc.value.dimension == "width"
        assert "width" in str(exc.value)

        with pytest.raises(DimensionValueError) as exc:
            decode_board("Bax2|E3S1")
        assert exc.value.dimension == "height"

    def test_mismatch_reports_counts(self):
        with pytest.raises(DimensionMismatchError) as exc:
            decode_board("B2x2|S1E2")
        assert exc.value.expected == 4
        assert exc.value.actual == 3
        assert str(exc.value) == "Dimension mismatch: expected 4, got 3"

    def test_mismatch_checked_before_missing_snake(self):
        with pytest.raises(DimensionMismatchError):
            decode_board("B2x2|E5")

    def test_large_run_is_rejected_without_building_cells(self):
        with pytest.raises(DimensionMismatchError) as exc:
            decode_board("B1x1|S1W9999999999")
        assert exc.value.expected == 1
        assert exc.value.actual == 10000000000

    def test_unknown_code_after_large_run_wins_over_mismatch(self):
        with pytest.raises(UnknownCellCodeError):
            decode_board("B1x1|S1W9999999999X1")

    def test_second_snake_after_large_run_wins_over_mismatch(self):
        with pytest.raises(MultipleSnakesError):
            decode_board("B1x1|S1W9999999999S1")

    def test_unknown_code_is_reported(self):
        with pytest.raises(UnknownCellCodeError) as exc:
            decode_board("B2x2|E3X1")
        assert exc.value.code == "X"
        assert str(exc.value) == "Unknown char X"


class TestEncode:

    def test_encode_fresh_board(self):
        game = SnakeGame.new(5, 4, True, rng=random.Random(7))
        assert encode_board(game.cells, game.width, game.height) == "B4x5|W5|W1E3W1|W1E1S1E1W1|W5"

    def test_food_is_encoded_as_empty(self):
        cells = [W, W, W, W, Cell.FOOD, S]
        assert encode_board(cells, 3, 2) == "B2x3|W3|W1E1S1"

    def test_wrong_cell_count_rejected(self):
        with pytest.raises(ValueError):
            encode_board([W, W, W], 2, 2)

    @pytest.mark.parametrize("width,height", [(4, 4), (7, 5), (20, 10)])
    def test_round_trip_fresh_board(self, width, height):
        game = SnakeGame.new(width, height, False, rng=random.Random(width * height))
        board = decode_board(encode_board(game.cells, game.width, game.height))

        expected = [E if c == Cell.FOOD else c for c in game.cells]
        assert board.cells == expected
        assert board.width == width
        assert board.height == height
        assert board.snake_index == game.snake.head

    def test_round_trip_decoded_board(self):
        encoded = "B3x4|E2S1E1|W1E3|E4"
        board = decode_board(encoded)
        again = decode_board(encode_board(board.cells, board.width, board.height))
        assert again.cells == board.cells
        assert again.snake_index == board.snake_index
