from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .move import BOARD_SIZE, Position


class Player(str, Enum):
    RED = "red"
    BLACK = "black"

    @property
    def opponent(self) -> "Player":
        return Player.BLACK if self is Player.RED else Player.RED

    @property
    def promotion_row(self) -> int:
        return 0 if self is Player.RED else BOARD_SIZE - 1


class PieceType(str, Enum):
    NORMAL = "normal"
    KING = "king"


Direction = tuple[int, int]

_KING_DIRECTIONS: tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

# Travel directions per (rank, owner); order is the order moves are generated in.
DIRECTIONS: dict[tuple[PieceType, Player], tuple[Direction, ...]] = {
    (PieceType.NORMAL, Player.RED): ((-1, -1), (-1, 1)),
    (PieceType.NORMAL, Player.BLACK): ((1, -1), (1, 1)),
    (PieceType.KING, Player.RED): _KING_DIRECTIONS,
    (PieceType.KING, Player.BLACK): _KING_DIRECTIONS,
}


@dataclass(frozen=True, slots=True)
class Piece:
    id: str
    player: Player
    type: PieceType
    row: int
    col: int

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    @property
    def is_king(self) -> bool:
        return self.type is PieceType.KING

    @property
    def directions(self) -> tuple[Direction, ...]:
        return DIRECTIONS[(self.type, self.player)]

    def moved_to(self, row: int, col: int) -> "Piece":
        return replace(self, row=row, col=col)

    def promoted(self) -> "Piece":
        return replace(self, type=PieceType.KING)

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.player.name},{self.row},{self.col})"
