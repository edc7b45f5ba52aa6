# win.py
# Exact-cover check for the current date

from __future__ import annotations

from board import CalendarDate, all_cells, excluded_cells
from placements import GameState


def required_cells(date: CalendarDate) -> set[tuple[int, int]]:
    """Cells that must be covered: the whole board minus the date's month and day."""
    cells = set(all_cells())
    cells.difference_update(excluded_cells(date))
    return cells


def check_win_condition(state: GameState, date: CalendarDate) -> bool:
    return required_cells(date) <= state.occupied


def uncovered_cells(state: GameState, date: CalendarDate) -> list[tuple[int, int]]:
    return sorted(required_cells(date) - state.occupied)
