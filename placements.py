# placements.py
# Piece placement on the board: coordinate transform, validation, occupancy

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from board import BOARD_ROWS, BOARD_COLS, is_valid_position
from pieces import get_piece, get_piece_orientation


@dataclass(frozen=True)
class Placement:
    piece: str
    row: int  # anchor: board position of the orientation's (0, 0)
    col: int
    orientation: int


@dataclass
class GameState:
    # Insertion ordered, so a save file replays pieces in the order they were placed.
    placements: dict[str, Placement] = field(default_factory=dict)
    occupied: set[tuple[int, int]] = field(default_factory=set)


def piece_to_board_coords(
    cells: Iterable[tuple[int, int]],
    row: int,
    col: int,
) -> list[tuple[int, int]]:
    # relative (x, y) -> absolute (row + y, col + x)
    return [(row + y, col + x) for x, y in cells]


def placement_cells(placement: Placement) -> list[tuple[int, int]]:
    cells = get_piece_orientation(placement.piece, placement.orientation)
    if cells is None:
        return []
    return piece_to_board_coords(cells, placement.row, placement.col)


def is_valid_placement(
    coords: Iterable[tuple[int, int]],
    occupied: set[tuple[int, int]],
    excluded: Iterable[tuple[int, int]] = (),
) -> bool:
    """True if every cell is on the board, free, and not a date cell."""
    excluded = set(excluded)
    return all(
        is_valid_position(r, c) and (r, c) not in occupied and (r, c) not in excluded
        for r, c in coords
    )


def place_piece(state: GameState, piece: str, row: int, col: int, orientation: int) -> None:
    """
    Record a placement and mark its cells occupied.

    Does not validate: callers check is_valid_placement first. An existing
    placement of the same piece is overwritten.
    """
    placement = Placement(piece, row, col, orientation)
    state.placements[piece] = placement
    state.occupied.update(placement_cells(placement))


def rebuild_occupancy(state: GameState) -> None:
    state.occupied = set()
    for placement in state.placements.values():
        state.occupied.update(placement_cells(placement))


def remove_piece(state: GameState, piece: str) -> bool:
    """Take a piece off the board. Returns False if it was not placed."""
    if piece not in state.placements:
        return False
    del state.placements[piece]
    # Recompute from what is left rather than subtracting.
    rebuild_occupancy(state)
    return True


def reset_game(state: GameState) -> None:
    state.placements.clear()
    state.occupied.clear()


def piece_at(state: GameState, row: int, col: int) -> str | None:
    for name, placement in state.placements.items():
        if (row, col) in placement_cells(placement):
            return name
    return None


def legal_placements(
    state: GameState,
    piece: str,
    excluded: Iterable[tuple[int, int]] = (),
) -> list[Placement]:
    """Every valid placement of a piece given the current occupancy."""
    found = get_piece(piece)
    if found is None:
        return []
    excluded = set(excluded)
    result: list[Placement] = []

    for index, shape in enumerate(found.orientations):
        max_x = max(x for x, _ in shape)
        max_y = max(y for _, y in shape)

        # Slide shape over the 6x8 grid
        for row in range(BOARD_ROWS - max_y):
            for col in range(BOARD_COLS - max_x):
                coords = piece_to_board_coords(shape, row, col)
                if is_valid_placement(coords, state.occupied, excluded):
                    result.append(Placement(piece, row, col, index))

    return result
