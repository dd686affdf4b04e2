from __future__ import annotations

import logging
import time
from threading import Lock
from typing import Any, Optional

from ai.agents import create_computer_controller
from core.game import Game, GameSnapshot
from core.pieces import Player
from core.player import PlayerController, PlayerKind

from .config import ServerSettings
from .schemas import NewGameRequest, SquareRequest
from .serializers import serialize_game, serialize_move
from .store import GameStore, JsonFileGameStore

logger = logging.getLogger(__name__)


def _store_from_settings(settings: ServerSettings) -> GameStore:
    if settings.state_file is not None:
        return JsonFileGameStore(settings.state_file)
    return GameStore()


class GameSession:
    """Thread-safe orchestrator around a single Game instance."""

    def __init__(self, settings: Optional[ServerSettings] = None, store: Optional[GameStore] = None) -> None:
        self.lock = Lock()
        self.settings = settings or ServerSettings()
        self.store = store if store is not None else _store_from_settings(self.settings)

        snapshot = self.store.load()
        if snapshot is not None:
            logger.info("Resuming saved game (%s to move).", snapshot.current_player.value)
            self.game = Game.restore(snapshot, on_change=self._persist)
        else:
            self.game = Game(on_change=self._persist)
        self._apply_player_controllers()

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def new_game(self, payload: Optional[NewGameRequest] = None) -> dict[str, Any]:
        with self.lock:
            mode = PlayerKind(payload.mode) if payload else PlayerKind.HUMAN
            self.game.reset(mode)
            self._apply_player_controllers()
            return self._serialize_locked()

    def get_valid_moves(self, row: int, col: int) -> dict[str, Any]:
        with self.lock:
            piece = next((p for p in self.game.pieces if p.position == (row, col)), None)
            if piece is None:
                raise ValueError(f"No piece at row {row}, col {col}.")
            if piece.player != self.game.current_player:
                raise ValueError("It is not this piece's turn.")
            moves = [move for move in self.game.legal_moves() if move.start == piece.position]
            return {
                "piece": {"row": row, "col": col},
                "moves": [serialize_move(move) for move in moves],
            }

    def select(self, payload: SquareRequest) -> dict[str, Any]:
        with self.lock:
            if not self.game.select_piece(payload.row, payload.col):
                raise ValueError("That piece cannot be selected now.")
            return self._serialize_locked()

    def deselect(self) -> dict[str, Any]:
        with self.lock:
            self.game.deselect()
            return self._serialize_locked()

    def move(self, payload: SquareRequest) -> dict[str, Any]:
        with self.lock:
            if not self.game.move_selected(payload.row, payload.col):
                raise ValueError("Requested square is not a valid move for the selected piece.")
            return self._serialize_locked()

    def run_ai_move(self) -> dict[str, Any]:
        with self.lock:
            if self.game.is_over:
                raise RuntimeError("The game is over.")
            if not self.game.isAITurn():
                raise RuntimeError("It is not the computer's turn.")
            if self.settings.computer_delay:
                time.sleep(self.settings.computer_delay)
            if not self.game.play_computer_turn():
                raise RuntimeError("Computer controller could not choose a move.")
            return self._serialize_locked()

    # helpers ------------------------------------------------------------

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(self.game)

    def _persist(self, snapshot: GameSnapshot) -> None:
        if self.game.is_over:
            self.store.clear()
        else:
            self.store.save(snapshot)

    def _apply_player_controllers(self) -> None:
        for player in (Player.RED, Player.BLACK):
            self.game.setPlayer(player, self._controller_for(player))

    def _controller_for(self, player: Player) -> PlayerController:
        label = player.value.capitalize()
        if self.game.game_mode == PlayerKind.COMPUTER and player == Player.BLACK:
            return create_computer_controller(label, seed=self.settings.ai_seed)
        return PlayerController.human(f"{label} Human")
