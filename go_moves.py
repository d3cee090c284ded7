"""Move engine: placement, capture, self-capture and simple ko.

The engine never mutates the board it is given. Every accepted move yields a
fresh Board; every rejected move raises an ``IllegalMoveError`` and leaves the
caller's board as it was.
"""

import logging
from dataclasses import dataclass, field

from go_board import Occupant
from go_groups import group_at

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Exception class raised for an illegal move."""
    reason = "illegal_move"


class OccupiedOrOutOfBoundsError(IllegalMoveError):
    reason = "occupied_or_out_of_bounds"


class SelfCaptureError(IllegalMoveError):
    reason = "self_capture"


class KoViolationError(IllegalMoveError):
    reason = "ko_violation"


@dataclass
class MoveResult:
    board: object
    captured: list = field(default_factory=list)

    @property
    def captured_stones(self):
        return sum(len(group.stones) for group in self.captured)


def _check_color(color):
    if color not in (Occupant.BLACK, Occupant.WHITE):
        raise ValueError(f"Cannot play a stone of color {color!r}")
    return Occupant(color)


def _place_and_capture(board, color, r, c, sequence_id):
    if r is None or c is None or not board.in_bounds(r, c):
        raise OccupiedOrOutOfBoundsError(f"({r}, {c}) is off the {board.size}x{board.size} board")
    if board.get(r, c).occupant != Occupant.EMPTY:
        raise OccupiedOrOutOfBoundsError(f"({r}, {c}) is already occupied")

    new_board = board.copy()
    spot = new_board.get(r, c)
    spot.occupant = color
    spot.move_number = sequence_id
    spot.marker = None

    captured = []
    opponent = color.opponent
    for nr, nc in new_board.neighbors(r, c):
        # a neighbor already cleared by an earlier capture is skipped here
        if new_board.get(nr, nc).occupant != opponent:
            continue
        group = group_at(new_board, nr, nc)
        if group.is_dead:
            for gr, gc in group.stones:
                new_board.get(gr, gc).clear(marker="captured")
            captured.append(group)

    own = group_at(new_board, r, c)
    if own.is_dead:
        raise SelfCaptureError(f"{color} at ({r}, {c}) would have no liberties")
    return new_board, captured


def play_move(board, color, r, c, previous_board=None, sequence_id=None):
    """Apply a move and report what it captured.

    ``previous_board`` is the position before the opponent's last move, as a
    Board or an occupancy array. Only stone colors are compared against it.
    """
    color = _check_color(color)
    try:
        new_board, captured = _place_and_capture(board, color, r, c, sequence_id)
        if previous_board is not None and new_board.same_occupancy(previous_board):
            raise KoViolationError(f"{color} at ({r}, {c}) repeats the previous position")
    except IllegalMoveError as e:
        logger.debug("Rejected %s at (%s, %s): %s", color, r, c, e)
        raise

    result = MoveResult(new_board, captured)
    if captured:
        logger.debug("%s at (%s, %s) captured %d stone(s)",
                     color, r, c, result.captured_stones)
    return result


def apply_move(board, color, r, c, previous_board=None, sequence_id=None):
    return play_move(board, color, r, c, previous_board, sequence_id).board


def is_move_playable(board, color, r, c):
    """Whether ``color`` may play at (r, c), ignoring ko."""
    color = _check_color(color)
    try:
        _place_and_capture(board, color, r, c, sequence_id=None)
    except IllegalMoveError:
        return False
    return True
