import os
import sys

import pytest

# Ensure the project root (containing the game modules) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from board import CalendarDate
from pieces import PIECES
from placements import GameState, Placement, piece_to_board_coords, place_piece


# A full cover of the board leaving August (1, 2) and day 31 (5, 6) open.
AUGUST_31_COVER = {
    "RECTANGLE": [(0, 4), (0, 5), (0, 6), (1, 4), (1, 5), (1, 6)],
    "U": [(0, 1), (0, 2), (0, 3), (1, 1), (1, 3)],
    "L": [(2, 0), (3, 0), (4, 0), (5, 0), (2, 1)],
    "N": [(2, 2), (3, 2), (3, 1), (4, 1), (5, 1)],
    "Z": [(2, 3), (2, 4), (3, 3), (4, 3), (4, 2)],
    "P": [(2, 5), (2, 6), (3, 4), (3, 5), (3, 6)],
    "V": [(2, 7), (3, 7), (4, 7), (4, 6), (4, 5)],
    "Y": [(5, 2), (5, 3), (5, 4), (5, 5), (4, 4)],
}


def placement_covering(piece, cells):
    """Find the orientation and anchor that puts `piece` exactly on `cells`."""
    row = min(r for r, _ in cells)
    col = min(c for _, c in cells)
    for index, orientation in enumerate(PIECES[piece].orientations):
        if set(piece_to_board_coords(orientation, row, col)) == set(cells):
            return Placement(piece, row, col, index)
    raise AssertionError(f"{piece} cannot cover {cells}")


@pytest.fixture()
def august_31():
    return CalendarDate(month_index=7, day_number=31)


@pytest.fixture()
def solution():
    return [placement_covering(piece, cells) for piece, cells in AUGUST_31_COVER.items()]


@pytest.fixture()
def solved_state(solution):
    state = GameState()
    for p in solution:
        place_piece(state, p.piece, p.row, p.col, p.orientation)
    return state
