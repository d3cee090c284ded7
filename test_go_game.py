import unittest
import numpy as np
from sgfmill import sgf
from go_board import Board
from go_game import GoGame
from go_moves import KoViolationError, OccupiedOrOutOfBoundsError, SelfCaptureError
from go_scoring import ScoringMethod


class TestGoGame(unittest.TestCase):
    def test_initial_board(self):
        game = GoGame(size=9)
        self.assertEqual(game.size, 9)
        self.assertTrue(np.all(game.board.occupancy() == GoGame.EMPTY))
        self.assertEqual(game.current_player, GoGame.BLACK)

    def test_simple_move(self):
        game = GoGame(size=9)
        self.assertTrue(game.play(0, 0))
        self.assertEqual(game.board.get(0, 0).occupant, GoGame.BLACK)
        self.assertEqual(game.current_player, GoGame.WHITE)
        self.assertEqual(game.history, [(GoGame.BLACK, (0, 0))])

    def test_move_numbers_follow_sequence(self):
        game = GoGame(size=9)
        game.play(0, 0)
        game.play(8, 8)
        self.assertEqual(game.board.get(0, 0).move_number, 1)
        self.assertEqual(game.board.get(8, 8).move_number, 2)
        self.assertEqual(game.move_number, 2)

    def test_capture_real(self):
        game = GoGame(size=3)
        game.board = Board.from_string("""
            .W.
            WBW
            ...
        """)
        game.current_player = GoGame.WHITE
        self.assertTrue(game.play(2, 1))
        self.assertEqual(game.board.get(1, 1).occupant, GoGame.EMPTY)
        self.assertEqual(game.captures[GoGame.WHITE], 1)

    def test_suicide(self):
        game = GoGame(size=3)
        game.board = Board.from_string("""
            .W.
            W.W
            .W.
        """)
        game.current_player = GoGame.BLACK
        self.assertFalse(game.play(1, 1))
        self.assertIsInstance(game.last_error, SelfCaptureError)
        self.assertEqual(game.current_player, GoGame.BLACK)
        self.assertEqual(game.history, [])

    def test_occupied_and_off_board(self):
        game = GoGame(size=5)
        self.assertTrue(game.play(2, 2))
        self.assertFalse(game.play(2, 2))
        self.assertFalse(game.play(5, 0))
        self.assertFalse(game.play(-1, 0))
        self.assertEqual(game.current_player, GoGame.WHITE)

    def test_half_missing_coordinate_is_rejected(self):
        game = GoGame(size=5)
        self.assertFalse(game.play(0, None))
        self.assertIsInstance(game.last_error, OccupiedOrOutOfBoundsError)
        self.assertFalse(game.play(None, 1))
        self.assertIsInstance(game.last_error, OccupiedOrOutOfBoundsError)
        self.assertEqual(game.current_player, GoGame.BLACK)
        self.assertEqual(game.pass_count, 0)
        self.assertEqual(game.history, [])

    def test_ko_sequence(self):
        game = GoGame(size=5)
        game.board = Board.from_string("""
            ..B..
            .BWB.
            .W.W.
            ..W..
            .....
        """)
        game.current_player = GoGame.BLACK

        # Black plays (2,2) to capture White (1,2)
        self.assertTrue(game.play(2, 2))
        self.assertEqual(game.board.get(1, 2).occupant, GoGame.EMPTY)

        # White tries to play (1,2) immediately - should fail
        self.assertFalse(game.play(1, 2))
        self.assertIsInstance(game.last_error, KoViolationError)
        self.assertNotIn((1, 2), game.get_valid_moves())

        # White plays elsewhere
        self.assertTrue(game.play(0, 0))
        # Black plays elsewhere
        self.assertTrue(game.play(4, 4))
        # Now White can play (1,2)
        self.assertTrue(game.play(1, 2))
        self.assertEqual(game.board.get(2, 2).occupant, GoGame.EMPTY)

    def test_pass_ends_game(self):
        game = GoGame(size=5)
        self.assertTrue(game.play(None, None))
        self.assertFalse(game.is_over())
        self.assertTrue(game.play(2, 2))
        self.assertEqual(game.pass_count, 0)
        self.assertTrue(game.play(None, None))
        self.assertTrue(game.play(None, None))
        self.assertTrue(game.is_over())
        self.assertFalse(game.play(0, 0))
        self.assertFalse(game.pass_move())

    def test_pass_clears_ko(self):
        game = GoGame(size=5)
        game.board = Board.from_string("""
            ..B..
            .BWB.
            .W.W.
            ..W..
            .....
        """)
        game.play(2, 2)
        self.assertIsNotNone(game.previous_board)
        game.pass_move()
        self.assertIsNone(game.previous_board)

    def test_resign(self):
        game = GoGame(size=9)
        game.resign(GoGame.WHITE)
        self.assertTrue(game.is_over())
        self.assertEqual(game.winner(), GoGame.BLACK)
        self.assertEqual(game.result_string(), "B+R")

    def test_resign_after_game_over(self):
        game = GoGame(size=3, komi=0)
        game.board = Board.from_string("BBB\nB.B\nBBB")
        game.pass_move()
        game.pass_move()
        self.assertFalse(game.resign(GoGame.BLACK))
        self.assertIsNone(game.resigned_player)
        self.assertEqual(game.result_string(), "B+9")

        game = GoGame(size=9)
        self.assertTrue(game.resign(GoGame.BLACK))
        self.assertFalse(game.resign(GoGame.WHITE))
        self.assertEqual(game.result_string(), "W+R")

    def test_resign_requires_a_player(self):
        game = GoGame(size=9)
        with self.assertRaises(ValueError):
            game.resign(GoGame.EMPTY)
        self.assertFalse(game.is_over())

    def test_area_score(self):
        game = GoGame(size=3, komi=0.5)
        game.board = Board.from_string("BBB\nB.B\nBBB")
        self.assertEqual(game.score(), (9.0, 0.5))
        self.assertEqual(game.winner(), GoGame.BLACK)
        self.assertEqual(game.result_string(), "B+8.5")

    def test_territory_score(self):
        game = GoGame(size=3, komi=6.5, method=ScoringMethod.TERRITORY)
        game.board = Board.from_string("BBB\nB.B\nBBB")
        self.assertEqual(game.score(), (1.0, 6.5))
        self.assertEqual(game.result_string(), "W+5.5")

    def test_method_given_by_name(self):
        game = GoGame(size=3, komi=0, method="territory")
        self.assertIs(game.method, ScoringMethod.TERRITORY)
        game.board = Board.from_string("BBB\nB.B\nBBB")
        self.assertEqual(game.score(), (1.0, 0.0))
        with self.assertRaises(ValueError):
            GoGame(size=3, method="bogus")

    def test_draw(self):
        game = GoGame(size=3, komi=0)
        self.assertIsNone(game.winner())
        self.assertEqual(game.result_string(), "Draw")

    def test_handicap(self):
        game = GoGame(size=9, handicap=2)
        self.assertEqual(game.board.get(2, 2).occupant, GoGame.BLACK)
        self.assertEqual(game.board.get(6, 6).occupant, GoGame.BLACK)
        self.assertEqual(game.board.get(2, 2).move_number, 0)
        self.assertEqual(game.board.count(GoGame.BLACK), 2)
        self.assertEqual(game.current_player, GoGame.WHITE)

    def test_handicap_limits(self):
        self.assertEqual(GoGame(size=19, handicap=20).board.count(GoGame.BLACK), 5)
        game = GoGame(size=7, handicap=3)
        self.assertEqual(game.board.count(GoGame.BLACK), 0)
        self.assertEqual(game.current_player, GoGame.BLACK)

    def test_invalid_settings(self):
        with self.assertRaises(ValueError):
            GoGame(size=9, komi=-1)
        with self.assertRaises(ValueError):
            GoGame(size=9, handicap=-1)

    def test_get_valid_moves(self):
        game = GoGame(size=3)
        moves = game.get_valid_moves()
        self.assertEqual(len(moves), 10)
        self.assertIsNone(moves[-1])
        game.play(1, 1)
        self.assertNotIn((1, 1), game.get_valid_moves())

    def test_no_valid_moves_after_game_over(self):
        game = GoGame(size=3)
        game.pass_move()
        game.pass_move()
        self.assertTrue(game.is_over())
        self.assertEqual(game.get_valid_moves(), [])

        game = GoGame(size=3)
        game.resign(GoGame.WHITE)
        self.assertEqual(game.get_valid_moves(), [])

    def test_analyze_leaves_board_untouched(self):
        game = GoGame(size=3, komi=0)
        game.board = Board.from_string("BBB\nB.B\nBBB")
        annotated, scores = game.analyze()
        self.assertEqual(scores, (9.0, 0.0))
        self.assertEqual(annotated.get(1, 1).scoring_explanation, "Cell enclosed by Black")
        self.assertIsNone(game.board.get(1, 1).scoring_explanation)

    def test_copy(self):
        game = GoGame(size=5)
        game.play(0, 0)
        clone = game.copy()
        clone.play(1, 1)
        self.assertEqual(game.board.get(1, 1).occupant, GoGame.EMPTY)
        self.assertEqual(len(game.history), 1)
        self.assertEqual(clone.current_player, GoGame.BLACK)

    def test_to_sgf(self):
        game = GoGame(size=3)
        game.play(1, 1)
        game.play(0, 0)
        game.play(None, None)
        game.play(None, None)

        sgf_game = sgf.Sgf_game.from_bytes(game.to_sgf())
        self.assertEqual(sgf_game.get_size(), 3)
        self.assertEqual(sgf_game.get_komi(), 6.5)
        moves = [node.get_move() for node in sgf_game.get_main_sequence()[1:]]
        self.assertEqual(moves, [("b", (1, 1)), ("w", (2, 0)), ("b", None), ("w", None)])
        self.assertEqual(sgf_game.get_root().get("RE"), game.result_string())

    def test_to_sgf_handicap(self):
        game = GoGame(size=9, handicap=2)
        sgf_game = sgf.Sgf_game.from_bytes(game.to_sgf())
        self.assertEqual(sgf_game.get_handicap(), 2)
        black, white, empty = sgf_game.get_root().get_setup_stones()
        self.assertEqual(black, {(6, 2), (2, 6)})
        self.assertEqual(white, set())
        self.assertFalse(sgf_game.get_root().has_property("RE"))

    def test_str(self):
        game = GoGame(size=2)
        game.play(0, 0)
        self.assertEqual(str(game), "  1 2\n1 X . \n2 . . \n")


if __name__ == '__main__':
    unittest.main()
