import pytest

from board import CalendarDate
from pieces import PIECES, bounding_box, find_flipped_orientation
from placements import GameState, piece_to_board_coords, placement_cells
from ui_state import AppState, UIState

from conftest import placement_covering


@pytest.fixture()
def app(august_31):
    return AppState(august_31)


def test_new_session(app):
    assert app.current_state is UIState.PLAYING
    assert app.excluded == ((1, 2), (5, 6))
    assert len(app.unplaced_pieces()) == 8
    assert app.stuck_pieces() == []


def test_drop_places_piece(app):
    app.select("L")
    assert app.drop(2, 0)
    assert "L" in app.game.placements
    assert app.selected is None
    assert "L" not in app.unplaced_pieces()


def test_invalid_drop_leaves_state_alone(app):
    app.select("L")
    assert not app.drop(0, 0)  # (0, 0) is off the board
    assert app.game.placements == {}
    assert app.game.occupied == set()
    assert app.selected == "L"


def test_drop_on_date_cell_refused(app):
    # Orientation 0 of L anchored at (1, 2) would cover August.
    app.select("L")
    assert not app.drop(1, 2)


def test_drop_without_selection(app):
    assert not app.drop(2, 0)


def test_pick_up_and_move(app):
    app.select("P")
    app.rotate()
    assert app.drop(2, 0)
    orientation = app.game.placements["P"].orientation

    assert app.pick_up(2, 0)
    assert app.selected == "P"
    assert app.orientation == orientation
    assert app.game.occupied == set()

    assert app.drop(3, 3)
    assert app.game.placements["P"].row == 3


def test_pick_up_empty_cell(app):
    assert not app.pick_up(2, 0)


def test_select_placed_piece_ignored(app):
    app.select("L")
    app.drop(2, 0)
    app.select("L")
    assert app.selected is None


def test_rotate_and_flip(app):
    app.rotate()
    assert app.orientation == 0  # nothing held

    app.select("N")
    app.rotate()
    app.rotate()
    assert app.orientation == 2
    app.rotate(clockwise=False)
    assert app.orientation == 1
    app.flip()
    assert app.orientation == find_flipped_orientation("N", 1)

    app.select("V")
    assert app.orientation == 0


def test_preview(app):
    assert app.preview_cells() is None
    app.select("L")
    # L is 4 wide and 2 tall, so (2, 1) is its middle when anchored on (2, 0).
    app.hover = (2, 1)
    assert sorted(app.preview_cells()) == [(2, 0), (2, 1), (2, 2), (2, 3), (3, 0)]
    assert app.preview_valid()
    app.hover = (5, 5)
    assert not app.preview_valid()


def test_solving_through_drops(app, solution):
    for p in solution:
        assert app.current_state is UIState.PLAYING
        app.select(p.piece)
        app.orientation = p.orientation
        assert app.drop(p.row, p.col)
    assert app.current_state is UIState.SOLVED

    # Lifting a piece reopens the board; putting it back solves it again.
    last = solution[-1]
    assert app.pick_up(*placement_cells(last)[0])
    assert app.current_state is UIState.PLAYING
    assert app.drop(last.row, last.col)
    assert app.current_state is UIState.SOLVED


def test_resume_solved_game(solved_state, august_31):
    assert AppState(august_31, solved_state).current_state is UIState.SOLVED


def test_pick_up_from_solved_board(solved_state, august_31):
    app = AppState(august_31, solved_state)
    assert app.pick_up(2, 0)
    assert app.current_state is UIState.PLAYING
    assert app.selected == "L"
    assert "L" not in solved_state.placements
    assert (2, 0) not in solved_state.occupied


def test_pick_up_from_almost_solved(solution, august_31):
    game = GameState()
    app = AppState(august_31, game)
    for p in solution[:-1]:
        app.select(p.piece)
        app.orientation = p.orientation
        app.drop(p.row, p.col)
    last = solution[-1]
    first_cell = placement_cells(solution[0])[0]
    assert app.pick_up(*first_cell)
    assert app.selected == solution[0].piece
    assert solution[0].piece not in game.placements
    assert set(app.unplaced_pieces()) == {solution[0].piece, last.piece}


def test_date_with_no_excluded_month():
    app = AppState(CalendarDate(12, 1))
    assert app.excluded == ((2, 0),)


def test_reset(solved_state, august_31):
    app = AppState(august_31, solved_state)
    app.select("L")
    app.reset()
    assert app.current_state is UIState.PLAYING
    assert app.game.placements == {}
    assert app.game.occupied == set()
    assert app.selected is None


def test_stuck_pieces(solution, august_31):
    app = AppState(august_31)
    for p in solution:
        if p.piece in ("RECTANGLE", "U"):
            continue
        app.select(p.piece)
        app.orientation = p.orientation
        assert app.drop(p.row, p.col)
    assert app.stuck_pieces() == []

    # U takes the only 2x3 gap left in the month rows.
    u = placement_covering("U", [(0, 4), (0, 6), (1, 4), (1, 5), (1, 6)])
    app.select("U")
    app.orientation = u.orientation
    assert app.drop(u.row, u.col)
    assert app.stuck_pieces() == ["RECTANGLE"]


def test_anchor_without_selection(app):
    assert app.anchor_for(3, 4) == (3, 4)


@pytest.mark.parametrize("name", list(PIECES))
def test_preview_stays_under_cursor(app, name):
    app.select(name)
    hover = (2, 3)
    app.hover = hover
    for index in range(len(PIECES[name].orientations)):
        app.orientation = index
        cells = app.preview_cells()
        rows = [r for r, _ in cells]
        cols = [c for _, c in cells]
        assert min(rows) <= hover[0] <= max(rows)
        assert min(cols) <= hover[1] <= max(cols)
        # Dropping at the cursor uses the same anchor the preview shows.
        anchor = app.anchor_for(*hover)
        assert sorted(cells) == sorted(
            piece_to_board_coords(PIECES[name].orientations[index], *anchor)
        )


def test_rotated_z_centres_on_cursor(app):
    # Orientation 1 of Z has no cell at offset (0, 0).
    app.select("Z")
    app.orientation = 1
    assert (0, 0) not in PIECES["Z"].orientations[1]
    assert bounding_box(PIECES["Z"].orientations[1]) == (3, 3)
    app.hover = (3, 3)
    assert sorted(app.preview_cells()) == [(2, 3), (2, 4), (3, 3), (4, 2), (4, 3)]
    assert app.anchor_for(3, 3) == (2, 2)
    assert app.drop(2, 2)
    assert (3, 3) in app.game.occupied
