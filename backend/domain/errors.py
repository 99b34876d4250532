"""
Error types raised by the snake engine.

Decode errors are the only recoverable failures: they describe why a board
string was rejected and never leave a partially built game behind.
"""


class BoardDecodeError(ValueError):
    """Base class for every board string rejection."""


class EmptyBoardStringError(BoardDecodeError):
    def __init__(self):
        super().__init__("Empty string")


class DimensionFormatError(BoardDecodeError):
    def __init__(self, header: str):
        self.header = header
        super().__init__(f"Invalid dimension format: {header!r}")


class DimensionValueError(BoardDecodeError):
    def __init__(self, dimension: str, raw: str):
        self.dimension = dimension
        self.raw = raw
        super().__init__(f"Invalid {dimension}: {raw!r}")


class UnknownCellCodeError(BoardDecodeError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown char {code}")


class MultipleSnakesError(BoardDecodeError):
    def __init__(self):
        super().__init__("Multiple snakes")


class DimensionMismatchError(BoardDecodeError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Dimension mismatch: expected {expected}, got {actual}")


class NoSnakeError(BoardDecodeError):
    def __init__(self):
        super().__init__("No snake found")


class BoardFullError(RuntimeError):
    """Raised when food has to be placed but no plain cell is left."""
