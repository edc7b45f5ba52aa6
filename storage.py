# storage.py
# Save/load of the in-progress game as JSON

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from board import CalendarDate
from pieces import get_piece
from placements import GameState, place_piece, rebuild_occupancy

log = logging.getLogger(__name__)

# (piece, row, col, orientation)
PlacementRecord = tuple[str, int, int, int]


@dataclass(frozen=True)
class SavedGame:
    date_key: str
    placements: list[PlacementRecord]


def save_game(path: str | Path, state: GameState, date: CalendarDate) -> None:
    data = {
        "date": date.key,
        "placements": [
            [p.piece, p.row, p.col, p.orientation] for p in state.placements.values()
        ],
    }
    try:
        Path(path).write_text(json.dumps(data, indent=2))
    except OSError:
        log.exception("Failed to save game state to %s", path)


def load_game(path: str | Path) -> SavedGame | None:
    """
    Read a saved game. Returns None if there is no save or it can't be read.

    The date key is returned as stored; whether it still applies is up to
    the caller.
    """
    path = Path(path)
    if not path.exists():
        return None

    try:
        data = json.loads(path.read_text())
        records = [
            (str(piece), int(row), int(col), int(orientation))
            for piece, row, col, orientation in data["placements"]
        ]
        return SavedGame(str(data["date"]), records)
    except (OSError, ValueError, KeyError, TypeError) as e:
        log.warning("Ignoring unreadable save file %s: %s", path, e)
        return None


def restore_state(records: list[PlacementRecord]) -> GameState:
    """Replay saved placements without validating them."""
    state = GameState()
    for piece, row, col, orientation in records:
        if get_piece(piece) is None:
            log.warning("Skipping unknown piece %r in save file", piece)
            continue
        place_piece(state, piece, row, col, orientation)
    rebuild_occupancy(state)
    return state


def clear_game(path: str | Path) -> None:
    Path(path).unlink(missing_ok=True)
