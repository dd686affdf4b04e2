"""Checkers rules over an immutable collection of pieces.

Every function here is pure: the board is just a sequence of :class:`Piece`
values and occupancy is derived by scanning it. Moves are single steps; a
multi-jump is played as a series of one-capture moves by :class:`core.game.Game`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .move import BOARD_SIZE, Move
from .pieces import Piece, PieceType, Player

logger = logging.getLogger(__name__)

Pieces = Sequence[Piece]
MoveList = list[Move]

_ROWS_PER_SIDE = 3


@dataclass(frozen=True, slots=True)
class GameResult:
    game_over: bool
    winner: Optional[Player] = None


def initialize_board() -> list[Piece]:
    pieces: list[Piece] = []
    next_id = 0

    home_rows = (
        (Player.BLACK, range(0, _ROWS_PER_SIDE)),
        (Player.RED, range(BOARD_SIZE - _ROWS_PER_SIDE, BOARD_SIZE)),
    )
    for player, rows in home_rows:
        for row in rows:
            for col in range(BOARD_SIZE):
                if (row + col) % 2 == 1:
                    pieces.append(Piece(f"piece-{next_id}", player, PieceType.NORMAL, row, col))
                    next_id += 1
    return pieces


def get_piece_at(pieces: Pieces, row: int, col: int) -> Optional[Piece]:
    for piece in pieces:
        if piece.row == row and piece.col == col:
            return piece
    return None


def is_valid_position(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def _possible_moves(pieces: Pieces, piece: Piece) -> MoveList:
    origin = piece.position
    moves: MoveList = []

    for dr, dc in piece.directions:
        new_r, new_c = piece.row + dr, piece.col + dc
        if is_valid_position(new_r, new_c) and get_piece_at(pieces, new_r, new_c) is None:
            moves.append(Move(start=origin, end=(new_r, new_c)))

    for dr, dc in piece.directions:
        mid_r, mid_c = piece.row + dr, piece.col + dc
        end_r, end_c = piece.row + 2 * dr, piece.col + 2 * dc
        if not (is_valid_position(mid_r, mid_c) and is_valid_position(end_r, end_c)):
            continue
        jumped = get_piece_at(pieces, mid_r, mid_c)
        if jumped is not None and jumped.player != piece.player and get_piece_at(pieces, end_r, end_c) is None:
            moves.append(Move(start=origin, end=(end_r, end_c), captures=((mid_r, mid_c),)))

    return moves


def get_valid_moves(pieces: Pieces, piece: Piece) -> MoveList:
    """Legal moves for one piece: its captures if it has any, else its simple moves."""
    moves = _possible_moves(pieces, piece)
    capture_moves = [move for move in moves if move.is_capture]
    if capture_moves:
        return capture_moves
    return [move for move in moves if not move.is_capture]


def get_current_player_moves(pieces: Pieces, player: Player) -> MoveList:
    """Legal moves for a whole side, applying mandatory capture across all of its pieces."""
    capture_moves: MoveList = []
    quiet_moves: MoveList = []

    for piece in pieces:
        if piece.player != player:
            continue
        moves = get_valid_moves(pieces, piece)
        if any(move.is_capture for move in moves):
            capture_moves.extend(move for move in moves if move.is_capture)
        else:
            quiet_moves.extend(moves)

    return capture_moves if capture_moves else quiet_moves


def make_move(pieces: Pieces, move: Move) -> list[Piece]:
    moving = get_piece_at(pieces, *move.start)
    if moving is None:
        logger.debug("make_move: no piece at %s for move %s; board left unchanged.", move.start, move)
        return list(pieces)

    removed = {move.start, *move.captures}
    remaining = [piece for piece in pieces if piece.position not in removed]

    moved = moving.moved_to(*move.end)
    if _should_promote(moved):
        moved = moved.promoted()

    remaining.append(moved)
    return remaining


def _should_promote(piece: Piece) -> bool:
    if piece.is_king:
        return False
    return piece.row == piece.player.promotion_row


def is_game_over(pieces: Pieces, current_player: Player) -> GameResult:
    red_count = sum(1 for piece in pieces if piece.player == Player.RED)
    black_count = len(pieces) - red_count

    if red_count == 0:
        return GameResult(True, Player.BLACK)
    if black_count == 0:
        return GameResult(True, Player.RED)

    if not get_current_player_moves(pieces, current_player):
        return GameResult(True, current_player.opponent)
    return GameResult(False, None)
