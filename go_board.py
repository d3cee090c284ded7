"""Board model: occupants, spots and the flat row-major grid."""

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional

import numpy as np
from sgfmill import boards


class Occupant(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = -1

    @property
    def opponent(self):
        return Occupant(-self.value)

    def __str__(self):
        return self.name.capitalize()

    def __format__(self, format_spec):
        return format(str(self), format_spec)


@dataclass
class Spot:
    """One intersection. Only ``occupant`` matters for the rules."""
    occupant: Occupant = Occupant.EMPTY
    move_number: Optional[int] = None
    marker: Optional[str] = None
    playable: bool = True
    scoring_owner: Optional[Occupant] = None
    scoring_explanation: Optional[str] = None

    def clear(self, marker=None):
        self.occupant = Occupant.EMPTY
        self.move_number = None
        self.marker = marker


_CHAR_TO_OCCUPANT = {
    "B": Occupant.BLACK,
    "X": Occupant.BLACK,
    "W": Occupant.WHITE,
    "O": Occupant.WHITE,
    ".": Occupant.EMPTY,
}

_SGFMILL_COLOUR = {Occupant.BLACK: "b", Occupant.WHITE: "w"}


class Board:
    def __init__(self, size, spots=None):
        if size <= 0:
            raise ValueError(f"Board size must be positive, got {size}")
        if spots is None:
            spots = [Spot() for _ in range(size * size)]
        spots = list(spots)
        if len(spots) != size * size:
            raise ValueError(
                f"Invalid board: contains {len(spots)} spots but expected "
                f"{size * size} for size {size}"
            )
        self.size = size
        self.spots = spots

    @classmethod
    def from_occupants(cls, occupants, size):
        return cls(size, [Spot(occupant=Occupant(o)) for o in occupants])

    @classmethod
    def from_string(cls, text):
        """Build a board from rows such as ``"BBB"``, ``"B.B"``, ``"BBB"``.

        ``B``/``X`` are black, ``W``/``O`` white and ``.`` empty. Blank lines
        and indentation are ignored.
        """
        rows = [line.strip().upper() for line in text.strip().splitlines()]
        rows = [row for row in rows if row]
        size = len(rows)
        occupants = []
        for row in rows:
            if len(row) != size:
                raise ValueError(f"Row {row!r} does not match board size {size}")
            for ch in row:
                if ch not in _CHAR_TO_OCCUPANT:
                    raise ValueError(f"Unknown board character {ch!r}")
                occupants.append(_CHAR_TO_OCCUPANT[ch])
        return cls.from_occupants(occupants, size)

    def index(self, row, col):
        return row * self.size + col

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row, col):
        if not self.in_bounds(row, col):
            return None
        return self.spots[self.index(row, col)]

    def neighbors(self, row, col):
        if not self.in_bounds(row, col):
            return []
        result = []
        if row > 0:
            result.append((row - 1, col))  # north
        if row < self.size - 1:
            result.append((row + 1, col))  # south
        if col > 0:
            result.append((row, col - 1))  # west
        if col < self.size - 1:
            result.append((row, col + 1))  # east
        return result

    def is_edge(self, row, col):
        last = self.size - 1
        return row == 0 or col == 0 or row == last or col == last

    def coords(self):
        for r in range(self.size):
            for c in range(self.size):
                yield r, c

    def copy(self):
        return Board(self.size, [replace(spot) for spot in self.spots])

    def occupancy(self):
        return np.array([spot.occupant for spot in self.spots], dtype=np.int8)

    def same_occupancy(self, other):
        if isinstance(other, Board):
            other = other.occupancy()
        return np.array_equal(self.occupancy(), np.asarray(other, dtype=np.int8))

    def count(self, occupant):
        return int(np.sum(self.occupancy() == occupant))

    def sgf_point(self, row, col):
        # sgfmill counts rows from the bottom edge
        return self.size - 1 - row, col

    def to_sgfmill(self):
        board = boards.Board(self.size)
        for r, c in self.coords():
            occupant = self.spots[self.index(r, c)].occupant
            if occupant != Occupant.EMPTY:
                sr, sc = self.sgf_point(r, c)
                board.play(sr, sc, _SGFMILL_COLOUR[occupant])
        return board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.spots == other.spots

    def __str__(self):
        res = "  " + " ".join(str(i + 1) for i in range(self.size)) + "\n"
        for r in range(self.size):
            res += str(r + 1) + " "
            for c in range(self.size):
                occupant = self.spots[self.index(r, c)].occupant
                if occupant == Occupant.BLACK:
                    res += "X "
                elif occupant == Occupant.WHITE:
                    res += "O "
                else:
                    res += ". "
            res += "\n"
        return res
