from __future__ import annotations

from collections import Counter
from typing import Any, Optional

from core.game import Game, GameSnapshot
from core.move import Move, Position
from core.pieces import Piece, PieceType, Player
from core.player import PlayerController, PlayerKind

from .schemas import PieceModel, SavedGame


def _coord_tuple_to_dict(coord: Position) -> dict[str, int]:
    row, col = coord
    return {"row": row, "col": col}


def serialize_piece(piece: Piece) -> dict[str, Any]:
    return {
        "id": piece.id,
        "row": piece.row,
        "col": piece.col,
        "player": piece.player.value,
        "type": piece.type.value,
        "isKing": piece.is_king,
    }


def serialize_move(move: Move) -> dict[str, Any]:
    return {
        "start": _coord_tuple_to_dict(move.start),
        "end": _coord_tuple_to_dict(move.end),
        "captures": [_coord_tuple_to_dict(capture) for capture in move.captures],
        "isCapture": move.is_capture,
    }


def serialize_controller(controller: PlayerController) -> dict[str, str]:
    return {"kind": controller.kind.value, "name": controller.name}


def serialize_game(game: Game) -> dict[str, Any]:
    pieces = [serialize_piece(piece) for piece in game.pieces]
    total_counts = Counter(piece["player"] for piece in pieces)
    king_counts = Counter(piece["player"] for piece in pieces if piece["isKing"])

    legal_moves = game.legal_moves()
    selected = game.selected_piece

    return {
        "turn": game.current_player.value,
        "phase": game.phase.value,
        "gameOver": game.is_over,
        "winner": game.winner.value if game.winner else None,
        "gameMode": game.game_mode.value if game.game_mode else None,
        "pieces": pieces,
        "pieceCounts": {
            player.value: {
                "total": total_counts.get(player.value, 0),
                "kings": king_counts.get(player.value, 0),
            }
            for player in (Player.RED, Player.BLACK)
        },
        "selectedPiece": serialize_piece(selected) if selected else None,
        "validMoves": [serialize_move(move) for move in game.valid_moves],
        "movablePieces": [piece.id for piece in game.movable_pieces()],
        "mandatoryCapture": any(move.is_capture for move in legal_moves),
        "chainActive": game.chain_active,
        "players": {
            "red": serialize_controller(game.getPlayer(Player.RED)),
            "black": serialize_controller(game.getPlayer(Player.BLACK)),
        },
    }


def _piece_to_model(piece: Piece) -> PieceModel:
    return PieceModel(
        id=piece.id,
        player=piece.player.value,
        type=piece.type.value,
        row=piece.row,
        col=piece.col,
    )


def _piece_from_model(model: PieceModel) -> Piece:
    return Piece(model.id, Player(model.player), PieceType(model.type), model.row, model.col)


def snapshot_to_saved(snapshot: GameSnapshot) -> SavedGame:
    return SavedGame(
        pieces=[_piece_to_model(piece) for piece in snapshot.pieces],
        currentPlayer=snapshot.current_player.value,
        selectedPiece=_piece_to_model(snapshot.selected_piece) if snapshot.selected_piece else None,
        gameMode=snapshot.game_mode.value if snapshot.game_mode else None,
        chainPieceId=snapshot.chain_piece_id,
    )


def saved_to_snapshot(saved: SavedGame) -> GameSnapshot:
    selected: Optional[Piece] = _piece_from_model(saved.selectedPiece) if saved.selectedPiece else None
    return GameSnapshot(
        pieces=tuple(_piece_from_model(piece) for piece in saved.pieces),
        current_player=Player(saved.currentPlayer),
        selected_piece=selected,
        game_mode=PlayerKind(saved.gameMode) if saved.gameMode else None,
        chain_piece_id=saved.chainPieceId,
    )
