# gui.py

from __future__ import annotations

from typing import Dict, List, Tuple

import pygame

from board import BOARD, BOARD_ROWS, BOARD_COLS, MONTH_NAMES, CalendarDate, CellKind
from config import Config
from pieces import bounding_box, get_piece_orientation, piece_names
from placements import GameState, placement_cells
from ui_state import AppState, UIState
from win import uncovered_cells

CELL_SIZE = Config.CELL_SIZE
TOP_BAR_HEIGHT = 120

# Piece tray below the board
TRAY_COLUMNS = 4
TRAY_SLOT_HEIGHT = CELL_SIZE * 3 // 2
TRAY_CELL = CELL_SIZE // 3
TRAY_HEIGHT = TRAY_SLOT_HEIGHT * 2 + 16

BOARD_TOP = TOP_BAR_HEIGHT
TRAY_TOP = BOARD_TOP + BOARD_ROWS * CELL_SIZE + 16

WINDOW_WIDTH = BOARD_COLS * CELL_SIZE
WINDOW_HEIGHT = TRAY_TOP + TRAY_HEIGHT

# Colors – refined dark mode
BG = (15, 15, 17)
CARD_BG = (30, 30, 34)
GRID = (90, 90, 95)
TEXT_MAIN = (245, 245, 250)
TEXT_SECONDARY = (230, 230, 235)
TEXT_MUTED = (150, 150, 158)

DATE_BORDER = (220, 90, 90)
PREVIEW_OK = (60, 200, 80)
PREVIEW_BAD = (250, 80, 80)
SOLVED_GLOW = (50, 255, 80)

PIECE_COLORS: Dict[str, Tuple[int, int, int]] = {
    "L": (231, 76, 60),
    "N": (52, 152, 219),
    "P": (39, 174, 96),
    "U": (243, 156, 18),
    "V": (142, 68, 173),
    "Y": (233, 30, 99),
    "Z": (22, 160, 133),
    "RECTANGLE": (230, 126, 34),
}


def cell_rect(row: int, col: int) -> pygame.Rect:
    return pygame.Rect(col * CELL_SIZE + 2, BOARD_TOP + row * CELL_SIZE + 2, CELL_SIZE - 4, CELL_SIZE - 4)


def pixel_to_cell(pos: Tuple[int, int]) -> Tuple[int, int] | None:
    """Grid position under a pixel, or None outside the 6x8 grid."""
    x, y = pos
    if x < 0 or y < BOARD_TOP:
        return None
    row = (y - BOARD_TOP) // CELL_SIZE
    col = x // CELL_SIZE
    if row >= BOARD_ROWS or col >= BOARD_COLS:
        return None
    return row, col


def tray_slot(index: int) -> pygame.Rect:
    slot_w = WINDOW_WIDTH // TRAY_COLUMNS
    r, c = divmod(index, TRAY_COLUMNS)
    return pygame.Rect(c * slot_w, TRAY_TOP + r * TRAY_SLOT_HEIGHT, slot_w, TRAY_SLOT_HEIGHT)


def get_tray_piece(pos: Tuple[int, int]) -> str | None:
    # Slots are fixed per piece so the tray doesn't reshuffle while playing.
    for i, name in enumerate(piece_names()):
        if tray_slot(i).collidepoint(pos):
            return name
    return None


def _blit_centered(screen: pygame.Surface, surf: pygame.Surface, rect: pygame.Rect):
    screen.blit(surf, surf.get_rect(center=rect.center))


def draw_top_bar(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    app: AppState,
):
    pygame.draw.rect(screen, BG, (0, 0, WINDOW_WIDTH, TOP_BAR_HEIGHT))

    card_rect = pygame.Rect(16, 16, WINDOW_WIDTH - 32, TOP_BAR_HEIGHT - 32)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)

    title_surf = title_font.render("Calendar Puzzle", True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 20, card_rect.y + 12))

    month_name = MONTH_NAMES[app.date.month_index][:3]
    date_surf = label_font.render(f"{month_name} {app.date.day_number}", True, TEXT_MAIN)
    screen.blit(date_surf, (card_rect.right - date_surf.get_width() - 20, card_rect.y + 12))

    if app.current_state is UIState.SOLVED:
        status = "Solved!"
    else:
        remaining = len(uncovered_cells(app.game, app.date))
        status = f"{remaining} squares left"
        stuck = app.stuck_pieces()
        if stuck and app.selected is None:
            status += f" · {len(stuck)} piece(s) can't fit"
    status_surf = label_font.render(status, True, TEXT_SECONDARY)
    screen.blit(status_surf, (card_rect.x + 20, card_rect.y + 48))


def draw_board(
    screen: pygame.Surface,
    cell_font: pygame.font.Font,
    game: GameState,
    date: CalendarDate,
):
    """Board cells, date cells and placed pieces."""
    piece_map: Dict[Tuple[int, int], str] = {}
    for placement in game.placements.values():
        for cell in placement_cells(placement):
            piece_map[cell] = placement.piece

    for (r, c), cell in BOARD.items():
        rect = cell_rect(r, c)

        if (r, c) in piece_map:
            pygame.draw.rect(screen, PIECE_COLORS[piece_map[(r, c)]], rect, border_radius=12)
            continue

        is_today = (
            (cell.kind is CellKind.MONTH and cell.month_index == date.month_index)
            or (cell.kind is CellKind.DAY and cell.day_number == date.day_number)
        )
        pygame.draw.rect(screen, BG, rect, border_radius=12)
        if is_today:
            pygame.draw.rect(screen, DATE_BORDER, rect, width=2, border_radius=12)
            color = TEXT_MAIN
        else:
            pygame.draw.rect(screen, GRID, rect, width=1, border_radius=12)
            color = TEXT_MUTED
        _blit_centered(screen, cell_font.render(cell.label, True, color), rect)


def draw_preview(screen: pygame.Surface, app: AppState):
    cells = app.preview_cells()
    if cells is None:
        return
    color = PREVIEW_OK if app.preview_valid() else PREVIEW_BAD
    overlay = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
    for r, c in cells:
        # Cells hanging off the grid are still drawn so the player sees why it's red.
        pygame.draw.rect(overlay, (*color, 110), cell_rect(r, c), border_radius=12)
    screen.blit(overlay, (0, 0))


def _draw_mini_piece(screen: pygame.Surface, slot: pygame.Rect, cells: List[Tuple[int, int]], color):
    w, h = bounding_box(cells)
    ox = slot.centerx - w * TRAY_CELL // 2
    oy = slot.centery - h * TRAY_CELL // 2
    for x, y in cells:
        rect = pygame.Rect(ox + x * TRAY_CELL + 1, oy + y * TRAY_CELL + 1, TRAY_CELL - 2, TRAY_CELL - 2)
        pygame.draw.rect(screen, color, rect, border_radius=4)


def draw_tray(screen: pygame.Surface, app: AppState):
    unplaced = set(app.unplaced_pieces())
    for i, name in enumerate(piece_names()):
        slot = tray_slot(i)
        if name == app.selected:
            pygame.draw.rect(screen, CARD_BG, slot.inflate(-8, -8), border_radius=12)
            pygame.draw.rect(screen, GRID, slot.inflate(-8, -8), width=1, border_radius=12)
        if name not in unplaced:
            continue
        orientation = app.orientation if name == app.selected else 0
        _draw_mini_piece(screen, slot, list(get_piece_orientation(name, orientation)), PIECE_COLORS[name])


def draw_solved_glow(screen: pygame.Surface):
    glow_surf = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
    board_rect = pygame.Rect(0, BOARD_TOP, BOARD_COLS * CELL_SIZE, BOARD_ROWS * CELL_SIZE)
    pygame.draw.rect(glow_surf, (*SOLVED_GLOW, 50), board_rect.inflate(8, 8), border_radius=20, width=4)
    pygame.draw.rect(glow_surf, (*SOLVED_GLOW, 255), board_rect, border_radius=16, width=3)
    pygame.draw.rect(glow_surf, (*SOLVED_GLOW, 80), board_rect.inflate(-10, -10), border_radius=12, width=4)
    screen.blit(glow_surf, (0, 0))


def draw(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    cell_font: pygame.font.Font,
    app: AppState,
):
    screen.fill(BG)
    draw_top_bar(screen, title_font, label_font, app)
    draw_board(screen, cell_font, app.game, app.date)
    draw_preview(screen, app)
    draw_tray(screen, app)
    if app.current_state is UIState.SOLVED:
        draw_solved_glow(screen)
