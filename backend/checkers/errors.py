from __future__ import annotations


class BoardFormatError(ValueError):
    """Raised when a board string cannot be decoded."""

    def __init__(self, message: str, board: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.board = board

    def __str__(self) -> str:
        return self.message


class InvalidLengthError(BoardFormatError):
    def __init__(self, board: str, expected: int) -> None:
        super().__init__(
            f"invalid board string of length {len(board)}, expected {expected}: {board!r}",
            board,
        )
        self.expected = expected


class InvalidSymbolError(BoardFormatError):
    def __init__(self, symbol: str, x: int, y: int, board: str = "") -> None:
        super().__init__(f"invalid board, invalid piece {symbol!r} at {x}, {y}", board)
        self.symbol = symbol
        self.x = x
        self.y = y


class OutOfBoundsError(BoardFormatError):
    def __init__(self, x: int, y: int, board: str = "") -> None:
        super().__init__(f"invalid board, piece out of bounds: {x}, {y}", board)
        self.x = x
        self.y = y
