# board.py
# Board geometry, month/day cell lookup

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum

BOARD_ROWS = 6
BOARD_COLS = 8

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


class CellKind(Enum):
    MONTH = "month"
    DAY = "day"


@dataclass(frozen=True)
class Cell:
    kind: CellKind
    label: str
    month_index: int | None = None  # 0–11 for MONTH cells
    day_number: int | None = None  # 1–31 for DAY cells


@dataclass(frozen=True)
class CalendarDate:
    """The date the puzzle is played for. Months are 0-based, days 1-based."""

    month_index: int
    day_number: int

    @classmethod
    def from_date(cls, d: datetime.date) -> CalendarDate:
        return cls(d.month - 1, d.day)

    @property
    def key(self) -> str:
        return f"{self.month_index}-{self.day_number}"


def initialize_board() -> dict[tuple[int, int], Cell]:
    """
    Build the fixed calendar layout (6 rows x 8 columns):

          0 1 2 3 4 5 6 7
        0   M M M M M M        months 0-5
        1   M M M M M M        months 6-11
        2 D D D D D D D D      days 1-8
        3 D D D D D D D D      days 9-16
        4 D D D D D D D D      days 17-24
        5 D D D D D D D        days 25-31
    """
    cells: dict[tuple[int, int], Cell] = {}

    for month_index, name in enumerate(MONTH_NAMES):
        row, col = divmod(month_index, 6)
        cells[(row, col + 1)] = Cell(CellKind.MONTH, name[:3], month_index=month_index)

    day = 1
    for row in range(2, BOARD_ROWS):
        width = BOARD_COLS if row < BOARD_ROWS - 1 else BOARD_COLS - 1
        for col in range(width):
            cells[(row, col)] = Cell(CellKind.DAY, str(day), day_number=day)
            day += 1

    return cells


# Built once, shared read-only.
BOARD: dict[tuple[int, int], Cell] = initialize_board()

_MONTH_POSITIONS: dict[int, tuple[int, int]] = {
    cell.month_index: pos for pos, cell in BOARD.items() if cell.kind is CellKind.MONTH
}
_DAY_POSITIONS: dict[int, tuple[int, int]] = {
    cell.day_number: pos for pos, cell in BOARD.items() if cell.kind is CellKind.DAY
}


def is_valid_position(row: int, col: int) -> bool:
    return (row, col) in BOARD


def get_cell(row: int, col: int) -> Cell | None:
    return BOARD.get((row, col))


def all_cells() -> list[tuple[int, int]]:
    """All cells that can ever be covered by pieces, row-major."""
    return sorted(BOARD)


def find_month_position(month_index: int) -> tuple[int, int] | None:
    return _MONTH_POSITIONS.get(month_index)


def find_day_position(day_number: int) -> tuple[int, int] | None:
    return _DAY_POSITIONS.get(day_number)


def excluded_cells(date: CalendarDate) -> tuple[tuple[int, int], ...]:
    """Month and day cells that must stay uncovered on the given date."""
    found = (find_month_position(date.month_index), find_day_position(date.day_number))
    return tuple(pos for pos in found if pos is not None)
