import logging
from collections import deque
from dataclasses import dataclass, field

from go_board import Occupant
from go_moves import is_move_playable

logger = logging.getLogger(__name__)


@dataclass
class EmptyRegion:
    spots: list = field(default_factory=list)
    border: set = field(default_factory=set)
    touches_edge: bool = False

    @property
    def owner(self):
        """The color this region counts for, or None for open and neutral regions."""
        if self.touches_edge or len(self.border) != 1:
            return None
        return next(iter(self.border))


def find_empty_regions(board):
    regions = []
    visited = set()
    for row, col in board.coords():
        if (row, col) in visited or board.get(row, col).occupant != Occupant.EMPTY:
            continue

        region = EmptyRegion()
        q = deque([(row, col)])
        visited.add((row, col))
        while q:
            r, c = q.popleft()
            region.spots.append((r, c))
            if board.is_edge(r, c):
                region.touches_edge = True
            for nr, nc in board.neighbors(r, c):
                neighbor = board.get(nr, nc).occupant
                if neighbor != Occupant.EMPTY:
                    region.border.add(neighbor)
                elif (nr, nc) not in visited:
                    visited.add((nr, nc))
                    q.append((nr, nc))
        regions.append(region)
    return regions


def determine_territory(board):
    black_territory = 0
    white_territory = 0
    for region in find_empty_regions(board):
        owner = region.owner
        if owner == Occupant.BLACK:
            black_territory += len(region.spots)
        elif owner == Occupant.WHITE:
            white_territory += len(region.spots)
    return black_territory, white_territory


def annotate_for_scoring(board):
    """Write per-spot territory owner and explanation for display.

    Scoring never reads these fields back.
    """
    for spot in board.spots:
        spot.scoring_owner = None
        spot.scoring_explanation = None

    regions = find_empty_regions(board)
    logger.debug("Found %d empty regions", len(regions))

    for region in regions:
        owner = region.owner
        if region.touches_edge:
            explanation = "Open (touches edge)"
        elif owner is not None:
            explanation = f"Cell enclosed by {owner}"
        else:
            explanation = "Neutral"
        for r, c in region.spots:
            spot = board.get(r, c)
            spot.scoring_owner = owner
            spot.scoring_explanation = explanation


def annotate_playability(board, side_to_move):
    # ko is not checked: the previous position is unknown here
    for r, c in board.coords():
        spot = board.get(r, c)
        if spot.occupant != Occupant.EMPTY:
            spot.playable = False
        else:
            spot.playable = is_move_playable(board, side_to_move, r, c)
