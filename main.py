from __future__ import annotations

import logging
from datetime import date

import pygame

from board import CalendarDate
from config import Config
from gui import WINDOW_WIDTH, WINDOW_HEIGHT, draw, get_tray_piece, pixel_to_cell
from storage import clear_game, load_game, restore_state, save_game
from ui_state import AppState

log = logging.getLogger(__name__)


def load_session(today: CalendarDate) -> AppState:
    """Resume today's game if there is one; saves from other days are dropped."""
    saved = load_game(Config.SAVE_PATH)
    if saved is None:
        return AppState(today)
    if saved.date_key != today.key:
        log.info("Discarding save from %s", saved.date_key)
        clear_game(Config.SAVE_PATH)
        return AppState(today)
    log.info("Resuming %d placed piece(s)", len(saved.placements))
    return AppState(today, restore_state(saved.placements))


def handle_click(app: AppState, pos: tuple[int, int], button: int) -> bool:
    """Returns True when the board changed."""
    if button in (3, 4):
        app.rotate()
        return False
    if button == 5:
        app.rotate(clockwise=False)
        return False
    if button != 1:
        return False

    tray_piece = get_tray_piece(pos)
    if tray_piece is not None:
        app.select(tray_piece)
        return False

    cell = pixel_to_cell(pos)
    if cell is None:
        return False
    if app.selected is not None:
        return app.drop(*app.anchor_for(*cell))
    return app.pick_up(*cell)


def handle_key(app: AppState, key: int) -> bool:
    if key in (pygame.K_r, pygame.K_e):
        app.rotate()
    elif key == pygame.K_q:
        app.rotate(clockwise=False)
    elif key == pygame.K_f:
        app.flip()
    elif key == pygame.K_ESCAPE:
        app.deselect()
    elif key == pygame.K_BACKSPACE:
        app.reset()
        return True
    return False


def main():
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("Calendar Puzzle")

    # Fonts
    title_font = pygame.font.SysFont("SF Pro Display", 32, bold=True)
    label_font = pygame.font.SysFont("SF Pro Text", 20)
    cell_font = pygame.font.SysFont("SF Pro Text", 18, bold=True)

    clock = pygame.time.Clock()
    today = CalendarDate.from_date(date.today())
    app = load_session(today)

    running = True
    while running:
        clock.tick(Config.FPS)

        for event in pygame.event.get():
            changed = False
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEMOTION:
                app.hover = pixel_to_cell(event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                changed = handle_click(app, event.pos, event.button)
            elif event.type == pygame.KEYDOWN:
                changed = handle_key(app, event.key)

            if changed:
                save_game(Config.SAVE_PATH, app.game, today)

        draw(screen, title_font, label_font, cell_font, app)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
