"""
Run-length board strings.

Format: ``B<height>x<width>|<tokens>|<tokens>|...`` where every token is a
cell letter (W = wall, E = empty, S = snake) followed by an optional decimal
run length. Cells fill the board in flat row-major order; the ``|``
separators are not checked against the declared width.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .constants import (
    Cell,
    CELL_CODES,
    DIMENSION_PREFIX,
    DIMENSION_SEPARATOR,
    ROW_SEPARATOR,
)
from .errors import (
    DimensionFormatError,
    DimensionMismatchError,
    DimensionValueError,
    EmptyBoardStringError,
    MultipleSnakesError,
    NoSnakeError,
    UnknownCellCodeError,
)

logger = logging.getLogger(__name__)

MAX_UNSIGNED = 2 ** 64 - 1
MAX_UNSIGNED_DIGITS = len(str(MAX_UNSIGNED))

# Food is not part of the encoded shape
ENCODE_CODES = {
    Cell.WALL: "W",
    Cell.PLAIN: "E",
    Cell.FOOD: "E",
    Cell.SNAKE: "S",
}


@dataclass
class DecodedBoard:
    """Result of a successful decode."""
    width: int
    height: int
    cells: List[Cell]
    snake_index: int


def _fits_unsigned(digits: str) -> bool:
    """True if a string of ASCII digits fits in an unsigned 64-bit integer."""
    significant = digits.lstrip("0")
    return len(significant) <= MAX_UNSIGNED_DIGITS and int(significant or "0") <= MAX_UNSIGNED


def _parse_dimension(name: str, raw: str) -> int:
    # Unsigned parse: an optional leading "+" then ASCII digits
    digits = raw[1:] if raw.startswith("+") else raw
    if not (digits.isascii() and digits.isdigit()) or not _fits_unsigned(digits):
        raise DimensionValueError(name, raw)
    return int(digits.lstrip("0") or "0")


def _read_run_length(segment: str, start: int):
    """Return (count, next_position) for the digits starting at ``start``.

    A letter without digits yields a count of 0, not 1, and so does a run
    length too large for an unsigned 64-bit integer.
    """
    end = start
    while end < len(segment) and segment[end].isascii() and segment[end].isdigit():
        end += 1
    digits = segment[start:end]
    if not digits or not _fits_unsigned(digits):
        return 0, end
    return int(digits.lstrip("0") or "0"), end


def decode_board(encoded: str) -> DecodedBoard:
    """
    Decode a board string.

    Raises:
        BoardDecodeError: one subclass per rejection reason.
    """
    if not encoded:
        raise EmptyBoardStringError()

    header, *segments = encoded.split(ROW_SEPARATOR)
    if not header.startswith(DIMENSION_PREFIX):
        raise DimensionFormatError(header)

    dims = header[len(DIMENSION_PREFIX):].split(DIMENSION_SEPARATOR)
    if len(dims) != 2:
        raise DimensionFormatError(header)
    height = _parse_dimension("height", dims[0])
    width = _parse_dimension("width", dims[1])

    runs = []
    total = 0
    snake_index = None

    for segment in segments:
        pos = 0
        while pos < len(segment):
            char = segment[pos]
            pos += 1
            if not char.isalpha():
                continue

            count, pos = _read_run_length(segment, pos)

            cell_type = CELL_CODES.get(char)
            if cell_type is None:
                raise UnknownCellCodeError(char)

            if cell_type is Cell.SNAKE and count > 0:
                if snake_index is not None or count > 1:
                    raise MultipleSnakesError()
                snake_index = total
            if count > 0:
                runs.append((cell_type, count))
                total += count

    # Cells are only materialised once the run lengths add up to the board.
    if total != width * height:
        raise DimensionMismatchError(width * height, total)
    if snake_index is None:
        raise NoSnakeError()

    cells: List[Cell] = []
    for cell_type, count in runs:
        cells.extend([cell_type] * count)

    logger.debug(f"Decoded {width}x{height} board with snake at index {snake_index}")
    return DecodedBoard(width=width, height=height, cells=cells, snake_index=snake_index)


def _encode_row(row: Sequence[Cell]) -> str:
    tokens = []
    run_code = None
    run_length = 0
    for cell in row:
        code = ENCODE_CODES[cell]
        if code == run_code:
            run_length += 1
            continue
        if run_code is not None:
            tokens.append(f"{run_code}{run_length}")
        run_code, run_length = code, 1
    if run_code is not None:
        tokens.append(f"{run_code}{run_length}")
    return "".join(tokens)


def encode_board(cells: Sequence[Cell], width: int, height: int) -> str:
    """
    Encode a flat board as ``B<height>x<width>|row|row|...``.

    Every row becomes its own segment and every run carries an explicit
    count. Food is written as empty space.
    """
    if len(cells) != width * height:
        raise ValueError(
            f"Board has {len(cells)} cells, expected {width * height} for {width}x{height}"
        )

    rows = [_encode_row(cells[y * width:(y + 1) * width]) for y in range(height)]
    header = f"{DIMENSION_PREFIX}{height}{DIMENSION_SEPARATOR}{width}"
    return ROW_SEPARATOR.join([header] + rows)
