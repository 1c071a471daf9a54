from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Optional

from checkers.errors import BoardFormatError
from checkers.game import Game
from checkers.geometry import USABLE, Pos
from checkers.pieces import PLAYERS, Piece, Player
from checkers.tables import jumps_for, moves_for

from .schemas import BoardRequest, TurnRequest
from .serializers import serialize_game, serialize_jumps, serialize_moves, serialize_pos

logger = logging.getLogger(__name__)


def _player_from_label(label: str) -> Player:
    try:
        return PLAYERS[label.lower()]
    except KeyError as exc:
        raise ValueError(f"Unsupported player '{label}'.") from exc


class GameSession:
    """Thread-safe owner of a single Game instance."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.lock = Lock()
        self.game = game if game is not None else Game.empty()

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def load(self, payload: BoardRequest) -> dict[str, Any]:
        try:
            game = Game.parse(payload.board)
        except BoardFormatError as exc:
            logger.warning("Rejected board string: %s", exc)
            raise
        if payload.turn is not None:
            game.turn = _player_from_label(payload.turn)
        with self.lock:
            self.game = game
            logger.info("Loaded board %s (%s to move).", game, game.turn.value)
            return self._serialize_locked()

    def reset(self) -> dict[str, Any]:
        with self.lock:
            self.game = Game.empty()
            return self._serialize_locked()

    def set_turn(self, payload: TurnRequest) -> dict[str, Any]:
        with self.lock:
            self.game.turn = _player_from_label(payload.turn)
            return self._serialize_locked()

    def moves_at(self, x: int, y: int) -> dict[str, Any]:
        with self.lock:
            pos = Pos(x, y)
            piece = self._require_piece(pos)
            return {
                "piece": serialize_pos(pos),
                "moves": serialize_moves(moves_for(piece, pos)),
                "jumps": serialize_jumps(jumps_for(piece, pos)),
            }

    # table lookups need no lock: the tables never change -----------------

    @staticmethod
    def usable() -> list[dict[str, int]]:
        return serialize_moves(USABLE)

    @staticmethod
    def table_entry(x: int, y: int, player: str, king: bool) -> dict[str, Any]:
        pos = Pos(x, y)
        if pos not in USABLE:
            raise ValueError(f"{pos} is not a usable square.")
        piece = Piece(_player_from_label(player), king)
        return {
            "piece": serialize_pos(pos),
            "moves": serialize_moves(moves_for(piece, pos)),
            "jumps": serialize_jumps(jumps_for(piece, pos)),
        }

    # helpers ------------------------------------------------------------

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(self.game)

    def _require_piece(self, pos: Pos) -> Piece:
        piece = self.game.get(pos)
        if piece is None:
            raise ValueError(f"No piece at x {pos.x}, y {pos.y}.")
        return piece
