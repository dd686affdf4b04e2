from __future__ import annotations

import random
import sys
import unittest
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from ai.agents import create_computer_controller  # noqa: E402
from ai.greedy import get_computer_move  # noqa: E402
from ai.heuristic import evaluate_board  # noqa: E402
from core.board import get_current_player_moves, get_piece_at, initialize_board  # noqa: E402
from core.game import MAX_CHAIN_STEPS, Game, GameSnapshot  # noqa: E402
from core.move import Move  # noqa: E402
from core.pieces import Piece, PieceType, Player  # noqa: E402
from core.player import PlayerController, PlayerKind  # noqa: E402


def _piece(identifier: str, player: Player, row: int, col: int) -> Piece:
    return Piece(identifier, player, PieceType.NORMAL, row, col)


# Black at 2,1 can jump 3,2 and then 5,4.
DOUBLE_JUMP_BOARD = (
    _piece("b", Player.BLACK, 2, 1),
    _piece("r1", Player.RED, 3, 2),
    _piece("r2", Player.RED, 5, 4),
    _piece("r3", Player.RED, 7, 0),
)


def _computer_game(pieces, player: Player = Player.BLACK) -> Game:
    game = Game.restore(
        GameSnapshot(pieces=tuple(pieces), current_player=player, selected_piece=None, game_mode=PlayerKind.COMPUTER)
    )
    game.setPlayer(Player.BLACK, create_computer_controller("Black", seed=7))
    return game


class HeuristicTests(unittest.TestCase):
    def test_start_position_is_balanced(self) -> None:
        pieces = initialize_board()
        self.assertAlmostEqual(evaluate_board(pieces, Player.RED), 0.0, places=6)
        self.assertAlmostEqual(
            evaluate_board(pieces, Player.RED),
            -evaluate_board(pieces, Player.BLACK),
            places=6,
        )

    def test_material_advantage_scores_higher(self) -> None:
        pieces = [p for p in initialize_board() if p.position != (0, 1)]
        self.assertGreater(evaluate_board(pieces, Player.RED), 0.0)


class GreedyPolicyTests(unittest.TestCase):
    def test_returns_none_without_moves(self) -> None:
        pieces = [_piece("r", Player.RED, 0, 1)]
        self.assertIsNone(get_computer_move(pieces, Player.RED))

    def test_picks_a_legal_move(self) -> None:
        pieces = initialize_board()
        move = get_computer_move(pieces, Player.BLACK, rng=random.Random(3))
        self.assertIn(move, get_current_player_moves(pieces, Player.BLACK))

    def test_same_seed_same_choice(self) -> None:
        pieces = initialize_board()
        first = get_computer_move(pieces, Player.BLACK, rng=random.Random(11))
        second = get_computer_move(pieces, Player.BLACK, rng=random.Random(11))
        self.assertEqual(first, second)

    def test_respects_candidate_list(self) -> None:
        pieces = initialize_board()
        only = Move(start=(2, 7), end=(3, 6))
        self.assertEqual(get_computer_move(pieces, Player.BLACK, candidates=[only]), only)


class ComputerTurnTests(unittest.TestCase):
    def test_computer_completes_capture_chain(self) -> None:
        game = _computer_game(DOUBLE_JUMP_BOARD)
        self.assertTrue(game.play_computer_turn())

        self.assertEqual(game.current_player, Player.RED)
        self.assertEqual(len(game.pieces), 2)
        self.assertEqual(get_piece_at(game.pieces, 6, 5).id, "b")
        self.assertFalse(game.chain_active)

    def test_human_turn_is_not_played(self) -> None:
        game = _computer_game(initialize_board(), Player.RED)
        self.assertFalse(game.play_computer_turn())
        self.assertEqual(game.current_player, Player.RED)

    def test_full_computer_mode_exchange(self) -> None:
        game = Game(PlayerKind.COMPUTER)
        game.setPlayer(Player.BLACK, create_computer_controller("Black", seed=2))
        game.select_piece(5, 2)
        game.move_selected(4, 3)
        self.assertTrue(game.play_computer_turn())
        self.assertEqual(game.current_player, Player.RED)
        self.assertEqual(sum(1 for p in game.pieces if p.player == Player.BLACK), 12)

    def test_chain_loop_stops_at_cap(self) -> None:
        game = _computer_game(DOUBLE_JUMP_BOARD)
        calls: list[Move] = []
        move = Move(start=(2, 1), end=(4, 3), captures=((3, 2),))

        def _policy(_game):
            return move

        def _play(candidate: Move) -> bool:
            calls.append(candidate)
            game.chain_piece_id = "b"
            return True

        game.setPlayer(Player.BLACK, PlayerController(kind=PlayerKind.COMPUTER, name="Looping", policy=_policy))
        game.play = _play
        with self.assertLogs("core.game", level="WARNING"):
            self.assertTrue(game.play_computer_turn())

        self.assertEqual(len(calls), MAX_CHAIN_STEPS)
        self.assertEqual(game.current_player, Player.RED)
        self.assertFalse(game.chain_active)

    def test_chain_cap_checks_game_over_for_next_side(self) -> None:
        # The red piece sits on its last row as a man and cannot move.
        game = _computer_game([_piece("b", Player.BLACK, 2, 1), _piece("r", Player.RED, 0, 1)])
        snapshots: list[GameSnapshot] = []
        game.on_change = snapshots.append

        def _policy(_game):
            return Move(start=(2, 1), end=(3, 0))

        def _play(_candidate: Move) -> bool:
            game.chain_piece_id = "b"
            return True

        game.setPlayer(Player.BLACK, PlayerController(kind=PlayerKind.COMPUTER, name="Looping", policy=_policy))
        game.play = _play
        with self.assertLogs("core.game", level="WARNING"):
            self.assertTrue(game.play_computer_turn())

        self.assertTrue(game.is_over)
        self.assertEqual(game.winner, Player.BLACK)
        self.assertFalse(game.chain_active)
        self.assertEqual(len(snapshots), 1)
        self.assertIsNone(snapshots[0].selected_piece)
        self.assertEqual(game.legal_moves(), [])


if __name__ == "__main__":
    unittest.main()
