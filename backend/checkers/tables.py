from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from .geometry import USABLE, Pos, capture
from .pieces import Piece, Player

logger = logging.getLogger(__name__)

MoveTable = Mapping[Pos, frozenset[Pos]]
JumpTable = Mapping[Pos, Mapping[Pos, Pos]]

_DIRECTIONS = (-1, 1)
_EMPTY_MOVES: frozenset[Pos] = frozenset()
_EMPTY_JUMPS: Mapping[Pos, Pos] = MappingProxyType({})


def _build() -> tuple[
    Mapping[Player, MoveTable],
    Mapping[Player, JumpTable],
    MoveTable,
    JumpTable,
]:
    moves: dict[Player, dict[Pos, set[Pos]]] = {player: {} for player in Player}
    jumps: dict[Player, dict[Pos, dict[Pos, Pos]]] = {player: {} for player in Player}
    king_moves: dict[Pos, set[Pos]] = {}
    king_jumps: dict[Pos, dict[Pos, Pos]] = {}

    for pos in sorted(USABLE):
        king_moves[pos] = set()
        king_jumps[pos] = {}
        for player in (Player.BLACK, Player.RED):
            player_moves = moves[player][pos] = set()
            player_jumps = jumps[player][pos] = {}
            for direction in _DIRECTIONS:
                step = pos.offset(direction, player.forward)
                if step in USABLE:
                    player_moves.add(step)
                    king_moves[pos].add(step)
                landing = pos.offset(2 * direction, 2 * player.forward)
                if landing in USABLE:
                    captured = capture(pos, landing)
                    player_jumps[landing] = captured
                    king_jumps[pos][landing] = captured

    def freeze_moves(table: dict[Pos, set[Pos]]) -> MoveTable:
        return MappingProxyType({pos: frozenset(dests) for pos, dests in table.items()})

    def freeze_jumps(table: dict[Pos, dict[Pos, Pos]]) -> JumpTable:
        return MappingProxyType({pos: MappingProxyType(dests) for pos, dests in table.items()})

    frozen = (
        MappingProxyType({player: freeze_moves(table) for player, table in moves.items()}),
        MappingProxyType({player: freeze_jumps(table) for player, table in jumps.items()}),
        freeze_moves(king_moves),
        freeze_jumps(king_jumps),
    )
    logger.debug(
        "Built move tables for %d squares (%d king moves, %d king jumps).",
        len(USABLE),
        sum(len(dests) for dests in king_moves.values()),
        sum(len(dests) for dests in king_jumps.values()),
    )
    return frozen


MOVES, JUMPS, KING_MOVES, KING_JUMPS = _build()


def moves_for(piece: Piece, pos: Pos) -> frozenset[Pos]:
    """Single-step destinations for ``piece`` standing on ``pos``."""

    table = KING_MOVES if piece.king else MOVES[piece.player]
    return table.get(pos, _EMPTY_MOVES)


def jumps_for(piece: Piece, pos: Pos) -> Mapping[Pos, Pos]:
    """Jump landing squares mapped to the square each one captures."""

    table = KING_JUMPS if piece.king else JUMPS[piece.player]
    return table.get(pos, _EMPTY_JUMPS)
