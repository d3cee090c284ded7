import logging

from sgfmill import sgf

from go_board import Board, Occupant
from go_config import DEFAULT_BOARD_SIZE, DEFAULT_KOMI, HANDICAP_POSITIONS, MAX_HANDICAP
from go_moves import IllegalMoveError, play_move
from go_scoring import ScoringMethod, analyze_board, calculate_score

logger = logging.getLogger(__name__)


class GoGame:
    """One game in memory: turn, passes, ko reference and move numbering."""
    BLACK = Occupant.BLACK
    WHITE = Occupant.WHITE
    EMPTY = Occupant.EMPTY

    def __init__(self, size=DEFAULT_BOARD_SIZE, handicap=0, komi=DEFAULT_KOMI,
                 method=ScoringMethod.AREA):
        if komi < 0:
            raise ValueError(f"Komi must not be negative, got {komi}")
        if handicap < 0:
            raise ValueError(f"Handicap must not be negative, got {handicap}")
        self.size = size
        self.komi = komi
        self.method = ScoringMethod(method)
        self.board = Board(size)
        self.current_player = self.BLACK
        self.previous_board = None
        self.move_number = 0
        self.pass_count = 0
        self.history = []
        self.captures = {self.BLACK: 0, self.WHITE: 0}
        self.resigned_player = None
        self.last_error = None

        self.handicap_stones = HANDICAP_POSITIONS.get(size, [])[:min(handicap, MAX_HANDICAP)]
        for r, c in self.handicap_stones:
            spot = self.board.get(r, c)
            spot.occupant = self.BLACK
            spot.move_number = 0
        if self.handicap_stones:
            # Black's handicap stones stand in for Black's first move
            self.current_player = self.WHITE
            logger.info("Placed %d handicap stone(s)", len(self.handicap_stones))

    def play(self, r, c):
        if r is None and c is None:
            return self.pass_move()
        if self.is_over():
            return False

        try:
            result = play_move(self.board, self.current_player, r, c,
                               previous_board=self.previous_board,
                               sequence_id=self.move_number + 1)
        except IllegalMoveError as e:
            self.last_error = e
            logger.info("Illegal move by %s at (%s, %s): %s", self.current_player, r, c, e.reason)
            return False

        self.move_number += 1
        self.previous_board = self.board
        self.board = result.board
        self.captures[self.current_player] += result.captured_stones
        self.last_error = None
        self.pass_count = 0
        self.history.append((self.current_player, (r, c)))
        logger.info("Move %d: %s at (%d, %d)", self.move_number, self.current_player, r, c)
        self.current_player = self.current_player.opponent
        return True

    def pass_move(self):
        if self.is_over():
            return False
        self.pass_count += 1
        self.previous_board = None
        self.last_error = None
        self.history.append((self.current_player, None))
        logger.info("%s passes", self.current_player)
        self.current_player = self.current_player.opponent
        if self.is_over():
            logger.info("Game over after two passes: %s", self.result_string())
        return True

    def resign(self, player):
        if player not in (self.BLACK, self.WHITE):
            raise ValueError(f"Only Black or White can resign, got {player!r}")
        if self.is_over():
            return False
        self.resigned_player = Occupant(player)
        logger.info("%s resigns", self.resigned_player)
        return True

    def is_over(self):
        return self.pass_count >= 2 or self.resigned_player is not None

    def score(self):
        return calculate_score(self.board, self.method, self.komi)

    def analyze(self):
        """Return an annotated copy of the board together with its score."""
        board = self.board.copy()
        scores = analyze_board(board, self.current_player, self.method, self.komi)
        return board, scores

    def winner(self):
        if self.resigned_player is not None:
            return self.resigned_player.opponent
        b_score, w_score = self.score()
        if b_score > w_score:
            return self.BLACK
        if w_score > b_score:
            return self.WHITE
        return None

    def result_string(self):
        winner = self.winner()
        if winner is None:
            return "Draw"
        prefix = "B+" if winner == self.BLACK else "W+"
        if self.resigned_player is not None:
            return prefix + "R"
        b_score, w_score = self.score()
        return prefix + f"{abs(b_score - w_score):g}"

    def get_valid_moves(self):
        if self.is_over():
            return []
        moves = []
        for r, c in self.board.coords():
            if self.board.get(r, c).occupant != self.EMPTY:
                continue
            try:
                play_move(self.board, self.current_player, r, c,
                          previous_board=self.previous_board)
            except IllegalMoveError:
                continue
            moves.append((r, c))
        moves.append(None)  # Pass
        return moves

    def to_sgf(self):
        sgf_game = sgf.Sgf_game(size=self.size)
        root = sgf_game.get_root()
        root.set("KM", self.komi)
        if self.handicap_stones:
            root.set("HA", len(self.handicap_stones))
            root.set_setup_stones(
                [self.board.sgf_point(r, c) for r, c in self.handicap_stones], [])
        for player, move in self.history:
            node = sgf_game.extend_main_sequence()
            colour = "b" if player == self.BLACK else "w"
            node.set_move(colour, None if move is None else self.board.sgf_point(*move))
        if self.is_over():
            root.set("RE", self.result_string())
        return sgf_game.serialise()

    def copy(self):
        new_game = GoGame(size=self.size, komi=self.komi, method=self.method)
        new_game.board = self.board.copy()
        new_game.current_player = self.current_player
        new_game.previous_board = self.previous_board
        new_game.move_number = self.move_number
        new_game.pass_count = self.pass_count
        new_game.history = list(self.history)
        new_game.captures = dict(self.captures)
        new_game.resigned_player = self.resigned_player
        new_game.handicap_stones = list(self.handicap_stones)
        return new_game

    def __str__(self):
        return str(self.board)
