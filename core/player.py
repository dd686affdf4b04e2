from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .game import Game
    from .move import Move

MovePolicy = Callable[["Game"], Optional["Move"]]


# Also names the game mode: the kind of controller playing black.
class PlayerKind(str, Enum):
    HUMAN = "human"
    COMPUTER = "computer"


@dataclass
class PlayerController:
    kind: PlayerKind
    name: str
    policy: Optional[MovePolicy] = None

    @property
    def is_human(self) -> bool:
        return self.policy is None or self.kind == PlayerKind.HUMAN

    def select_move(self, game: "Game") -> Optional["Move"]:
        if self.policy is None:
            return None
        return self.policy(game)

    @classmethod
    def human(cls, name: str) -> "PlayerController":
        return cls(kind=PlayerKind.HUMAN, name=name)
