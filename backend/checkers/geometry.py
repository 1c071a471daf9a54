from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BOARD_DIM = 8


@dataclass(frozen=True, slots=True, order=True)
class Pos:
    x: int
    y: int

    def on_board(self) -> bool:
        return 0 <= self.x < BOARD_DIM and 0 <= self.y < BOARD_DIM

    def offset(self, dx: int, dy: int) -> "Pos":
        return Pos(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


NO_POS: Optional[Pos] = None


def compute_usable() -> frozenset[Pos]:
    """Return the 32 dark squares, the only squares a piece can ever occupy."""

    return frozenset(
        Pos(x, y)
        for y in range(BOARD_DIM)
        for x in range((y + 1) % 2, BOARD_DIM, 2)
    )


USABLE = compute_usable()


def capture(start: Pos, end: Pos) -> Pos:
    """Return the square jumped over when moving from ``start`` to ``end``."""

    dx = end.x - start.x
    dy = end.y - start.y
    if abs(dx) != 2 or abs(dy) != 2:
        raise ValueError(f"{start} -> {end} is not a two-square diagonal jump.")
    return Pos(start.x + dx // 2, start.y + dy // 2)
