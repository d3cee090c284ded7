from enum import Enum

from go_board import Occupant
from go_config import DEFAULT_KOMI
from go_territory import annotate_for_scoring, annotate_playability, determine_territory


class ScoringMethod(Enum):
    AREA = "area"            # Chinese rules: stones on board + territory
    TERRITORY = "territory"  # Japanese rules: territory only, captures not tracked


def calculate_score(board, method=ScoringMethod.AREA, komi=DEFAULT_KOMI):
    """Return ``(black_score, white_score)``; komi always goes to White."""
    method = ScoringMethod(method)
    black_territory, white_territory = determine_territory(board)

    if method == ScoringMethod.AREA:
        black_score = board.count(Occupant.BLACK) + black_territory
        white_score = board.count(Occupant.WHITE) + white_territory
    else:
        black_score = black_territory
        white_score = white_territory
    return float(black_score), float(white_score) + komi


def analyze_board(board, side_to_move, method=ScoringMethod.AREA, komi=DEFAULT_KOMI):
    """Annotate ``board`` in place for display and return its current score."""
    annotate_for_scoring(board)
    annotate_playability(board, side_to_move)
    return calculate_score(board, method, komi)
