from __future__ import annotations

import random
from typing import Optional

from core.game import Game
from core.player import PlayerController, PlayerKind

from .greedy import select_move as greedy_select

__all__ = ["create_computer_controller"]


def create_computer_controller(name: str, *, seed: Optional[int] = None) -> PlayerController:
    rng = random.Random(seed)

    def _policy(game: Game):
        return greedy_select(game, rng=rng)

    suffix = f" (seed={seed})" if seed is not None else ""
    return PlayerController(
        kind=PlayerKind.COMPUTER,
        name=f"{name} Computer{suffix}",
        policy=_policy,
    )
