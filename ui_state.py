from __future__ import annotations

import logging
from enum import Enum, auto

from board import CalendarDate, excluded_cells
from pieces import (
    bounding_box,
    find_flipped_orientation,
    get_piece_orientation,
    next_orientation,
    piece_names,
    prev_orientation,
)
from placements import (
    GameState,
    is_valid_placement,
    legal_placements,
    piece_at,
    piece_to_board_coords,
    place_piece,
    remove_piece,
    reset_game,
)
from win import check_win_condition

log = logging.getLogger(__name__)


class UIState(Enum):
    PLAYING = auto()
    SOLVED = auto()


class AppState:
    """Interaction state for one play session.

    Mutations go through the placement engine: a drop is validated with
    is_valid_placement before place_piece, and the win check runs after
    every change.
    """

    def __init__(self, date: CalendarDate, game: GameState | None = None):
        self.date = date
        self.game = game if game is not None else GameState()
        self.excluded = excluded_cells(date)
        self.selected: str | None = None  # piece held by the player
        self.orientation = 0
        self.hover: tuple[int, int] | None = None  # board cell under the cursor
        self.current_state = UIState.PLAYING
        self._update_win()

    def unplaced_pieces(self) -> list[str]:
        return [name for name in piece_names() if name not in self.game.placements]

    def select(self, piece: str) -> None:
        if piece in self.game.placements:
            return
        if piece != self.selected:
            self.orientation = 0
        self.selected = piece

    def deselect(self) -> None:
        self.selected = None
        self.orientation = 0

    def rotate(self, clockwise: bool = True) -> None:
        if self.selected is None:
            return
        if clockwise:
            self.orientation = next_orientation(self.selected, self.orientation)
        else:
            self.orientation = prev_orientation(self.selected, self.orientation)

    def flip(self) -> None:
        if self.selected is not None:
            self.orientation = find_flipped_orientation(self.selected, self.orientation)

    def anchor_for(self, row: int, col: int) -> tuple[int, int]:
        """Anchor that puts the middle of the held orientation on (row, col)."""
        cells = None if self.selected is None else get_piece_orientation(self.selected, self.orientation)
        if not cells:
            return row, col
        width, height = bounding_box(cells)
        return row - (height - 1) // 2, col - (width - 1) // 2

    def preview_cells(self) -> list[tuple[int, int]] | None:
        """Board cells the held piece would cover, centred on the hover cell."""
        if self.selected is None or self.hover is None:
            return None
        cells = get_piece_orientation(self.selected, self.orientation)
        if cells is None:
            return None
        row, col = self.anchor_for(*self.hover)
        return piece_to_board_coords(cells, row, col)

    def preview_valid(self) -> bool:
        cells = self.preview_cells()
        return cells is not None and is_valid_placement(cells, self.game.occupied, self.excluded)

    def drop(self, row: int, col: int) -> bool:
        """Place the held piece with its anchor at (row, col). False if it doesn't fit."""
        if self.selected is None or self.current_state is UIState.SOLVED:
            return False
        cells = get_piece_orientation(self.selected, self.orientation)
        if cells is None:
            return False

        coords = piece_to_board_coords(cells, row, col)
        if not is_valid_placement(coords, self.game.occupied, self.excluded):
            return False

        place_piece(self.game, self.selected, row, col, self.orientation)
        log.debug("Placed %s at (%d, %d) orientation %d", self.selected, row, col, self.orientation)
        self.deselect()
        self._update_win()
        return True

    def pick_up(self, row: int, col: int) -> bool:
        """Lift the piece covering (row, col) back into the player's hand."""
        piece = piece_at(self.game, row, col)
        if piece is None:
            return False

        orientation = self.game.placements[piece].orientation
        remove_piece(self.game, piece)
        log.debug("Picked up %s from (%d, %d)", piece, row, col)
        self.selected = piece
        self.orientation = orientation
        self._update_win()
        return True

    def reset(self) -> None:
        reset_game(self.game)
        self.deselect()
        self.current_state = UIState.PLAYING
        log.info("Board reset")

    def stuck_pieces(self) -> list[str]:
        """Unplaced pieces that no longer fit anywhere on the board."""
        return [
            name for name in self.unplaced_pieces()
            if not legal_placements(self.game, name, self.excluded)
        ]

    def _update_win(self) -> None:
        if check_win_condition(self.game, self.date):
            if self.current_state is not UIState.SOLVED:
                log.info("Solved %s", self.date.key)
            self.current_state = UIState.SOLVED
        else:
            self.current_state = UIState.PLAYING
