from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .board import (
    get_current_player_moves,
    get_piece_at,
    get_valid_moves,
    initialize_board,
    is_game_over,
    make_move,
)
from .move import Move
from .pieces import Piece, Player
from .player import PlayerController, PlayerKind

logger = logging.getLogger(__name__)

# Upper bound on moves the computer may chain in one turn.
MAX_CHAIN_STEPS = 10


class GamePhase(str, Enum):
    SELECTING = "selecting"
    SELECTED = "selected"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameSnapshot:
    """Everything needed to resume a game."""

    pieces: tuple[Piece, ...]
    current_player: Player
    selected_piece: Optional[Piece]
    game_mode: Optional[PlayerKind]
    chain_piece_id: Optional[str] = None


ChangeListener = Callable[[GameSnapshot], None]


class Game:
    """Turn and capture-chain state machine on top of the pure rules in :mod:`core.board`.

    Every accepted transition notifies ``on_change`` with a fresh snapshot. Rejected
    actions return ``False`` and leave the state untouched.
    """

    def __init__(self, mode: PlayerKind = PlayerKind.HUMAN, *, on_change: Optional[ChangeListener] = None):
        self.on_change = on_change
        self.players: dict[Player, PlayerController] = {
            Player.RED: PlayerController.human("Red Human"),
            Player.BLACK: PlayerController.human("Black Human"),
        }
        self._start(mode)

    def _start(self, mode: PlayerKind) -> None:
        self.game_mode = mode
        self.pieces: list[Piece] = initialize_board()
        self.current_player = Player.RED
        self.selected_piece: Optional[Piece] = None
        self.valid_moves: list[Move] = []
        self.chain_piece_id: Optional[str] = None
        self.winner: Optional[Player] = None
        self.phase = GamePhase.SELECTING

    def reset(self, mode: Optional[PlayerKind] = None) -> None:
        self._start(mode if mode is not None else self.game_mode)
        self._notify()

    # controllers ----------------------------------------------------------

    def setPlayer(self, player: Player, controller: PlayerController) -> None:
        self.players[player] = controller

    def getPlayer(self, player: Player) -> PlayerController:
        return self.players[player]

    def currentController(self) -> PlayerController:
        return self.getPlayer(self.current_player)

    def isAITurn(self) -> bool:
        return not self.currentController().is_human

    # queries --------------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def chain_active(self) -> bool:
        return self.chain_piece_id is not None

    def legal_moves(self) -> list[Move]:
        if self.is_over:
            return []
        return get_current_player_moves(self.pieces, self.current_player)

    def movable_pieces(self) -> list[Piece]:
        starts = {move.start for move in self.legal_moves()}
        return [piece for piece in self.pieces if piece.position in starts]

    # transitions ----------------------------------------------------------

    def select_piece(self, row: int, col: int) -> bool:
        if self.is_over or self.isAITurn():
            return self._reject("selection not accepted now")
        piece = get_piece_at(self.pieces, row, col)
        if piece is None or piece.player != self.current_player:
            return self._reject(f"no {self.current_player.value} piece at {row},{col}")

        if self.selected_piece is not None and self.selected_piece.id == piece.id:
            return self.deselect()

        self.selected_piece = piece
        self.valid_moves = self._moves_for_selection(piece)
        self.phase = GamePhase.SELECTED
        self._notify()
        return True

    def deselect(self) -> bool:
        if self.selected_piece is None:
            return self._reject("nothing to deselect")
        self._clear_selection()
        self._notify()
        return True

    def move_selected(self, row: int, col: int) -> bool:
        if self.is_over or self.isAITurn() or self.selected_piece is None:
            return self._reject("no selected piece to move")
        move = next((m for m in self.valid_moves if m.end == (row, col)), None)
        if move is None:
            return self._reject(f"{row},{col} is not a valid target")
        self._apply(move)
        return True

    def play(self, move: Move) -> bool:
        if self.is_over:
            return self._reject("game is over")
        if move not in self.legal_moves():
            return self._reject(f"illegal move {move}")
        self._apply(move)
        return True

    def play_computer_turn(self) -> bool:
        """Let the current computer controller play its whole turn, capture chain included."""
        if self.is_over or not self.isAITurn():
            return False

        controller = self.currentController()
        steps = 0
        while steps < MAX_CHAIN_STEPS:
            move = controller.select_move(self)
            if move is None or not self.play(move):
                break
            steps += 1
            if self.chain_piece_id is None:
                break
        else:
            logger.warning(
                "%s reached %d chained moves; ending the turn mid-chain.", controller.name, MAX_CHAIN_STEPS
            )
            self.switchTurn()
            result = is_game_over(self.pieces, self.current_player)
            if result.game_over:
                self._finish(result.winner)
            self._notify()
        return steps > 0

    def switchTurn(self) -> None:
        self._clear_selection()
        self.chain_piece_id = None
        self.current_player = self.current_player.opponent

    # snapshots ------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            pieces=tuple(self.pieces),
            current_player=self.current_player,
            selected_piece=self.selected_piece,
            game_mode=self.game_mode,
            chain_piece_id=self.chain_piece_id,
        )

    @classmethod
    def restore(cls, snapshot: GameSnapshot, *, on_change: Optional[ChangeListener] = None) -> "Game":
        game = cls(snapshot.game_mode or PlayerKind.HUMAN, on_change=on_change)
        game.pieces = list(snapshot.pieces)
        game.current_player = snapshot.current_player

        result = is_game_over(game.pieces, game.current_player)
        if result.game_over:
            game._finish(result.winner)
            return game

        chain_piece = game._find_piece(snapshot.chain_piece_id) if snapshot.chain_piece_id else None
        if chain_piece is not None and any(m.is_capture for m in get_valid_moves(game.pieces, chain_piece)):
            game.chain_piece_id = chain_piece.id

        selected = game._find_piece(snapshot.selected_piece.id) if snapshot.selected_piece else None
        if selected is not None and selected.player == game.current_player:
            game.selected_piece = selected
            game.valid_moves = game._moves_for_selection(selected)
            game.phase = GamePhase.SELECTED
        return game

    # helpers --------------------------------------------------------------

    def _apply(self, move: Move) -> None:
        mover = get_piece_at(self.pieces, *move.start)
        self.pieces = make_move(self.pieces, move)

        moved: Optional[Piece] = None
        continuations: list[Move] = []
        if move.is_capture and mover is not None:
            moved = self._find_piece(mover.id)
            if moved is not None:
                continuations = [m for m in get_valid_moves(self.pieces, moved) if m.is_capture]

        next_player = self.current_player if continuations else self.current_player.opponent
        result = is_game_over(self.pieces, next_player)
        if result.game_over:
            self.current_player = next_player
            self._finish(result.winner)
        elif continuations and moved is not None:
            self.selected_piece = moved
            self.valid_moves = continuations
            self.chain_piece_id = moved.id
            self.phase = GamePhase.SELECTED
        else:
            self.switchTurn()
        self._notify()

    def _moves_for_selection(self, piece: Piece) -> list[Move]:
        moves = get_valid_moves(self.pieces, piece)
        player_moves = get_current_player_moves(self.pieces, self.current_player)
        if any(m.is_capture for m in player_moves):
            return [m for m in moves if m.is_capture]
        return moves

    def _find_piece(self, piece_id: str) -> Optional[Piece]:
        return next((piece for piece in self.pieces if piece.id == piece_id), None)

    def _clear_selection(self) -> None:
        self.selected_piece = None
        self.valid_moves = []
        if not self.is_over:
            self.phase = GamePhase.SELECTING

    def _finish(self, winner: Optional[Player]) -> None:
        self.winner = winner
        self.phase = GamePhase.GAME_OVER
        self._clear_selection()
        self.chain_piece_id = None
        logger.info("Game over, winner: %s", winner.value if winner else "none")

    def _reject(self, reason: str) -> bool:
        logger.debug("Rejected action: %s", reason)
        return False

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.snapshot())
