import logging
from dataclasses import dataclass, field

from go_board import Occupant

logger = logging.getLogger(__name__)


@dataclass
class Group:
    """A maximal chain of same-colored stones and its liberties."""
    occupant: Occupant
    stones: set = field(default_factory=set)
    liberties: set = field(default_factory=set)

    @property
    def is_dead(self):
        return not self.liberties


def _collect(board, r, c, visited):
    color = board.get(r, c).occupant
    group = Group(occupant=color)
    stack = [(r, c)]

    while stack:
        curr_r, curr_c = stack.pop()
        if (curr_r, curr_c) in visited:
            continue
        visited.add((curr_r, curr_c))
        group.stones.add((curr_r, curr_c))

        for nr, nc in board.neighbors(curr_r, curr_c):
            neighbor = board.get(nr, nc).occupant
            if neighbor == Occupant.EMPTY:
                group.liberties.add((nr, nc))
            elif neighbor == color and (nr, nc) not in visited:
                stack.append((nr, nc))
    return group


def group_at(board, r, c):
    """Return the group holding the stone at (r, c), or None if there is no stone."""
    spot = board.get(r, c)
    if spot is None or spot.occupant == Occupant.EMPTY:
        return None
    return _collect(board, r, c, set())


def find_groups(board):
    groups = []
    visited = set()
    for r, c in board.coords():
        if (r, c) in visited:
            continue
        if board.get(r, c).occupant == Occupant.EMPTY:
            continue
        groups.append(_collect(board, r, c, visited))
    return groups


def remove_dead_stones(board):
    """Clear every group without liberties from ``board`` in place.

    Liberties are evaluated once, on the board as given, so two mutually
    surrounding groups are both removed. Returns the removed groups.
    """
    removed = []
    for group in find_groups(board):
        if not group.is_dead:
            continue
        for r, c in group.stones:
            board.get(r, c).clear(marker="removed")
        removed.append(group)
    if removed:
        logger.debug("Removed %d dead group(s), %d stone(s)",
                     len(removed), sum(len(g.stones) for g in removed))
    return removed
