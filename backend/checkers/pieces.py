from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from .errors import InvalidSymbolError


class Player(Enum):
    BLACK = "black"
    RED = "red"

    @property
    def forward(self) -> int:
        """Row direction this player's men advance toward."""
        return 1 if self is Player.BLACK else -1

    @property
    def opponent(self) -> "Player":
        return OPPONENTS[self]


# "No player" is spelled None so it can never compare equal to a real side.
NO_PLAYER: Optional[Player] = None


@dataclass(frozen=True, slots=True)
class Piece:
    player: Player
    king: bool = False

    def crowned(self) -> "Piece":
        return Piece(self.player, True)

    def __str__(self) -> str:
        return piece_string(self)


NO_PIECE: Optional[Piece] = None

EMPTY_SYMBOL = "*"

PLAYERS: Mapping[str, Player] = MappingProxyType({player.value: player for player in Player})

OPPONENTS: Mapping[Player, Player] = MappingProxyType({
    Player.BLACK: Player.RED,
    Player.RED: Player.BLACK,
})

PIECE_STRINGS: Mapping[Optional[Player], str] = MappingProxyType({
    Player.RED: "r",
    Player.BLACK: "b",
    NO_PLAYER: EMPTY_SYMBOL,
})

STRING_PIECES: Mapping[str, Optional[Piece]] = MappingProxyType({
    "r": Piece(Player.RED, False),
    "b": Piece(Player.BLACK, False),
    "R": Piece(Player.RED, True),
    "B": Piece(Player.BLACK, True),
    EMPTY_SYMBOL: NO_PIECE,
})


def piece_string(piece: Optional[Piece]) -> str:
    if piece is None:
        return PIECE_STRINGS[NO_PLAYER]
    symbol = PIECE_STRINGS[piece.player]
    return symbol.upper() if piece.king else symbol


def parse_piece(symbol: str, x: int = -1, y: int = -1, board: str = "") -> Optional[Piece]:
    """Decode one board symbol; ``None`` means an empty square."""

    try:
        return STRING_PIECES[symbol]
    except KeyError as exc:
        raise InvalidSymbolError(symbol, x, y, board) from exc
