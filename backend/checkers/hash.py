from __future__ import annotations

import random
from typing import Dict, Tuple, TYPE_CHECKING

from .geometry import BOARD_DIM, Pos
from .pieces import Piece, Player

if TYPE_CHECKING:  # pragma: no cover
    from .game import Game

_RANDOM_SEED = 20241129
_TURN_KEYS = {
    Player.BLACK: random.Random(_RANDOM_SEED).getrandbits(64),
    Player.RED: random.Random(_RANDOM_SEED + 1).getrandbits(64),
}


def _build_table() -> Dict[Tuple[Pos, Player, bool], int]:
    rng = random.Random(_RANDOM_SEED + 2)
    return {
        (Pos(x, y), player, king): rng.getrandbits(64)
        for y in range(BOARD_DIM)
        for x in range(BOARD_DIM)
        for player in Player
        for king in (False, True)
    }


_ZOBRIST_TABLE = _build_table()


def zobrist_piece_key(pos: Pos, piece: Piece) -> int:
    try:
        return _ZOBRIST_TABLE[(pos, piece.player, piece.king)]
    except KeyError as exc:
        raise ValueError(f"Position {pos} is off the board.") from exc


def zobrist_turn_key(turn: Player) -> int:
    return _TURN_KEYS[turn]


def compute_game_hash(game: "Game") -> int:
    """Return a Zobrist hash for the piece layout and the player to move."""

    result = zobrist_turn_key(game.turn)
    for pos, piece in game.pieces.items():
        result ^= zobrist_piece_key(pos, piece)
    return result
