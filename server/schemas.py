from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

PlayerLabel = Literal["red", "black"]
GameModeLabel = Literal["human", "computer"]


class SquareRequest(BaseModel):
    row: int = Field(..., ge=0, le=7)
    col: int = Field(..., ge=0, le=7)


class NewGameRequest(BaseModel):
    mode: GameModeLabel = "human"


class PieceModel(BaseModel):
    id: str
    player: PlayerLabel
    type: Literal["normal", "king"]
    row: int = Field(..., ge=0, le=7)
    col: int = Field(..., ge=0, le=7)


class SavedGame(BaseModel):
    """Persisted form of a game, enough to resume it."""

    pieces: list[PieceModel]
    currentPlayer: PlayerLabel
    selectedPiece: Optional[PieceModel] = None
    gameMode: Optional[GameModeLabel] = None
    chainPieceId: Optional[str] = None
