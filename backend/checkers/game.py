from __future__ import annotations

from typing import Optional

from .errors import BoardFormatError, InvalidLengthError, OutOfBoundsError
from .geometry import BOARD_DIM, USABLE, Pos
from .pieces import Piece, Player, parse_piece, piece_string

ROW_SEP = "|"
BOARD_STRING_LENGTH = BOARD_DIM * BOARD_DIM + (BOARD_DIM - 1)

_START_ROWS = 3


class Game:
    """Sparse board (absent squares are empty) plus the side to move."""

    def __init__(
        self,
        pieces: Optional[dict[Pos, Piece]] = None,
        turn: Player = Player.BLACK,
    ) -> None:
        self.pieces: dict[Pos, Piece] = pieces if pieces is not None else {}
        self.turn = turn

    @classmethod
    def empty(cls, *, turn: Player = Player.BLACK) -> "Game":
        return cls({}, turn)

    @classmethod
    def standard(cls) -> "Game":
        game = cls.empty()
        for pos in USABLE:
            if pos.y < _START_ROWS:
                game.pieces[pos] = Piece(Player.BLACK)
            elif pos.y >= BOARD_DIM - _START_ROWS:
                game.pieces[pos] = Piece(Player.RED)
        return game

    @classmethod
    def parse(cls, s: str) -> "Game":
        if len(s) != BOARD_STRING_LENGTH:
            raise InvalidLengthError(s, BOARD_STRING_LENGTH)

        result = cls.empty(turn=Player.BLACK)
        for y, row in enumerate(s.split(ROW_SEP)):
            if y >= BOARD_DIM:
                raise OutOfBoundsError(0, y, s)
            for x, symbol in enumerate(row):
                if x >= BOARD_DIM:
                    raise OutOfBoundsError(x, y, s)
                piece = parse_piece(symbol, x, y, s)
                if piece is not None:
                    result.pieces[Pos(x, y)] = piece
            if len(row) < BOARD_DIM:
                raise BoardFormatError(f"invalid board, row {y} has {len(row)} squares", s)
        return result

    def piece_at(self, pos: Pos) -> bool:
        return pos in self.pieces

    def get(self, pos: Pos) -> Optional[Piece]:
        return self.pieces.get(pos)

    def copy(self) -> "Game":
        return Game(dict(self.pieces), self.turn)

    def __str__(self) -> str:
        rows = []
        for y in range(BOARD_DIM):
            rows.append("".join(piece_string(self.get(Pos(x, y))) for x in range(BOARD_DIM)))
        return ROW_SEP.join(rows)

    def __repr__(self) -> str:
        return f"Game(turn={self.turn.value}, board={str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self.pieces == other.pieces and self.turn == other.turn

    __hash__ = None  # type: ignore[assignment]


def parse(s: str) -> Game:
    """Decode a 71-character board string; the side to move is always Black."""

    return Game.parse(s)
