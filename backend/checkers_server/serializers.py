from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, Mapping

from checkers.game import Game
from checkers.geometry import Pos
from checkers.hash import compute_game_hash
from checkers.pieces import Piece, Player, piece_string


def serialize_pos(pos: Pos) -> dict[str, int]:
    return {"x": pos.x, "y": pos.y}


def serialize_piece(pos: Pos, piece: Piece) -> dict[str, Any]:
    return {
        "x": pos.x,
        "y": pos.y,
        "player": piece.player.value,
        "isKing": piece.king,
        "symbol": piece_string(piece),
    }


def serialize_moves(destinations: Iterable[Pos]) -> list[dict[str, int]]:
    return [serialize_pos(pos) for pos in sorted(destinations)]


def serialize_jumps(jumps: Mapping[Pos, Pos]) -> list[dict[str, Any]]:
    return [
        {"to": serialize_pos(landing), "capture": serialize_pos(jumps[landing])}
        for landing in sorted(jumps)
    ]


def serialize_game(game: Game) -> dict[str, Any]:
    pieces = [
        serialize_piece(pos, piece)
        for pos, piece in sorted(game.pieces.items(), key=lambda item: (item[0].y, item[0].x))
    ]
    total_counts = Counter(piece["player"] for piece in pieces)
    king_counts = Counter(piece["player"] for piece in pieces if piece["isKing"])

    return {
        "board": str(game),
        "turn": game.turn.value,
        "pieces": pieces,
        "pieceCounts": {
            player.value: {
                "total": total_counts.get(player.value, 0),
                "kings": king_counts.get(player.value, 0),
            }
            for player in Player
        },
        # Sent as a string: 64-bit keys overflow JavaScript numbers.
        "hash": format(compute_game_hash(game), "016x"),
    }
