from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

PlayerLabel = Literal["black", "red"]


class BoardRequest(BaseModel):
    board: str = Field(..., description="71-character board string, rows joined by '|'.")
    turn: Optional[PlayerLabel] = Field(
        default=None, description="Side to move; Black when omitted."
    )


class TurnRequest(BaseModel):
    turn: PlayerLabel
