"""Checkers rules substrate: geometry, move tables and the board text format."""

from .errors import BoardFormatError, InvalidLengthError, InvalidSymbolError, OutOfBoundsError
from .game import BOARD_STRING_LENGTH, ROW_SEP, Game, parse
from .geometry import BOARD_DIM, NO_POS, USABLE, Pos, capture, compute_usable
from .hash import compute_game_hash
from .pieces import (
    NO_PIECE,
    NO_PLAYER,
    OPPONENTS,
    PIECE_STRINGS,
    PLAYERS,
    STRING_PIECES,
    Piece,
    Player,
    parse_piece,
    piece_string,
)
from .tables import JUMPS, KING_JUMPS, KING_MOVES, MOVES, jumps_for, moves_for

__all__ = [
    "BOARD_DIM",
    "BOARD_STRING_LENGTH",
    "ROW_SEP",
    "Pos",
    "NO_POS",
    "USABLE",
    "compute_usable",
    "capture",
    "Player",
    "Piece",
    "NO_PLAYER",
    "NO_PIECE",
    "PLAYERS",
    "OPPONENTS",
    "PIECE_STRINGS",
    "STRING_PIECES",
    "parse_piece",
    "piece_string",
    "MOVES",
    "JUMPS",
    "KING_MOVES",
    "KING_JUMPS",
    "moves_for",
    "jumps_for",
    "Game",
    "parse",
    "compute_game_hash",
    "BoardFormatError",
    "InvalidLengthError",
    "InvalidSymbolError",
    "OutOfBoundsError",
]
