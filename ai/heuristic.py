from __future__ import annotations

from typing import Sequence

from core.board import get_current_player_moves, get_piece_at
from core.move import BOARD_SIZE
from core.pieces import Piece, Player


_MAN_VALUE = 1.0
_KING_VALUE = 1.8
_PROGRESS_WEIGHT = 0.1
_CENTER_WEIGHT = 0.08
_BACK_ROW_WEIGHT = 0.12
_MOBILITY_WEIGHT = 0.05
_SUPPORT_WEIGHT = 0.07


# Top-level evaluator: material plus a few positional terms.
def evaluate_board(pieces: Sequence[Piece], perspective: Player) -> float:
	"""Score the position from one side, rewarding material, advancement, central control, home-row guards, and mobility."""
	opponent = perspective.opponent
	material = {Player.RED: 0.0, Player.BLACK: 0.0}
	support = {Player.RED: 0.0, Player.BLACK: 0.0}

	for piece in pieces:
		base = _KING_VALUE if piece.is_king else _MAN_VALUE
		material[piece.player] += (
			base
			+ _PROGRESS_WEIGHT * _forward_progress(piece)
			+ _CENTER_WEIGHT * _center_bias(piece)
			+ _BACK_ROW_WEIGHT * _back_rank_guard(piece)
		)
		support[piece.player] += _support_network(piece, pieces)

	mobility = {
		player: float(len(get_current_player_moves(pieces, player)))
		for player in (Player.RED, Player.BLACK)
	}
	return (
		material[perspective]
		- material[opponent]
		+ _MOBILITY_WEIGHT * (mobility[perspective] - mobility[opponent])
		+ _SUPPORT_WEIGHT * (support[perspective] - support[opponent])
	)


# How close a man is to promotion (kings always maxed).
def _forward_progress(piece: Piece) -> float:
	if piece.is_king:
		return 1.0
	max_rank = BOARD_SIZE - 1
	return (max_rank - abs(piece.row - piece.player.promotion_row)) / max_rank


def _center_bias(piece: Piece) -> float:
	center = (BOARD_SIZE - 1) / 2.0
	normalized = (abs(piece.row - center) + abs(piece.col - center)) / (2.0 * center)
	return max(0.0, 1.0 - normalized)


# Unmoved men on the home row block enemy promotion.
def _back_rank_guard(piece: Piece) -> float:
	if piece.is_king:
		return 0.0
	home_row = piece.player.opponent.promotion_row
	return 1.0 if piece.row == home_row else 0.0


def _support_network(piece: Piece, pieces: Sequence[Piece]) -> float:
	support = 0
	for d_row in (-1, 1):
		for d_col in (-1, 1):
			neighbor = get_piece_at(pieces, piece.row + d_row, piece.col + d_col)
			if neighbor and neighbor.player == piece.player:
				support += 1
	return support / 4.0
