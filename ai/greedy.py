from __future__ import annotations

import random
from typing import Optional, Sequence

from core.board import get_current_player_moves, make_move
from core.game import Game
from core.move import Move
from core.pieces import Piece, Player

from .heuristic import evaluate_board

_SCORE_EPSILON = 1e-6


def get_computer_move(
	pieces: Sequence[Piece],
	player: Player,
	*,
	candidates: Optional[Sequence[Move]] = None,
	rng: Optional[random.Random] = None,
) -> Optional[Move]:
	"""Pick the candidate whose resulting board evaluates best for ``player``.

	Candidates default to every legal move of ``player``. Ties are broken at random.
	"""
	moves = list(candidates) if candidates is not None else get_current_player_moves(pieces, player)
	if not moves:
		return None

	best_score: Optional[float] = None
	best_moves: list[Move] = []
	for move in moves:
		score = evaluate_board(make_move(pieces, move), player)
		if best_score is None or score > best_score + _SCORE_EPSILON:
			best_score = score
			best_moves = [move]
		elif abs(score - best_score) <= _SCORE_EPSILON:
			best_moves.append(move)

	chooser = rng if rng is not None else random
	return chooser.choice(best_moves)


def select_move(game: Game, rng: Optional[random.Random] = None) -> Optional[Move]:
	return get_computer_move(game.pieces, game.current_player, candidates=game.legal_moves(), rng=rng)
