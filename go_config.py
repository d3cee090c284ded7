DEFAULT_BOARD_SIZE = 9
DEFAULT_KOMI = 6.5
MAX_HANDICAP = 9

# Handicap points as (row, col), in placement order.
HANDICAP_POSITIONS = {
    9: [(2, 2), (6, 6), (6, 2), (2, 6), (4, 4)],
    13: [(3, 3), (9, 9), (9, 3), (3, 9), (6, 6)],
    19: [(3, 3), (15, 15), (3, 15), (15, 3), (9, 9)],
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
