"""Core checkers engine package."""

from .board import (
    GameResult,
    get_current_player_moves,
    get_piece_at,
    get_valid_moves,
    initialize_board,
    is_game_over,
    is_valid_position,
    make_move,
)
from .game import MAX_CHAIN_STEPS, Game, GamePhase, GameSnapshot
from .move import BOARD_SIZE, Move, Position
from .pieces import Piece, PieceType, Player
from .player import PlayerController, PlayerKind

__all__ = [
	"BOARD_SIZE",
	"Game",
	"GamePhase",
	"GameResult",
	"GameSnapshot",
	"MAX_CHAIN_STEPS",
	"Move",
	"Position",
	"Piece",
	"PieceType",
	"Player",
	"PlayerController",
	"PlayerKind",
	"get_current_player_moves",
	"get_piece_at",
	"get_valid_moves",
	"initialize_board",
	"is_game_over",
	"is_valid_position",
	"make_move",
]
