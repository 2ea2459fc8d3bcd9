"""Tests for grid bounds and wrap-around."""

from orb_snake.geometry import Board, axis_of, occupied, snap, step


class TestBoard:
    def test_bounds_for_reference_viewport(self):
        board = Board(400, 450, 20, 50)
        assert board.max_col == 19
        assert board.min_row == 3
        assert board.max_row == 21
        assert board.wrap_top == 40
        assert board.last_x == 380
        assert board.last_y == 420

    def test_start_head_is_grid_centered(self):
        assert Board(400, 450, 20, 50).start_head() == (200, 240)

    def test_spawn_cells_skip_ui_band(self):
        board = Board(400, 450, 20, 50)
        cells = list(board.spawn_cells())
        assert len(cells) == board.spawn_capacity() == 20 * 19
        assert cells[0] == (0, 60)
        assert all(y >= 50 for _, y in cells)


class TestWrap:
    board = Board(400, 450, 20, 50)

    def test_right_edge_wraps_to_column_zero(self):
        assert self.board.wrap((400, 240)) == (0, 240)

    def test_left_edge_wraps_to_last_column(self):
        assert self.board.wrap((-20, 240)) == (380, 240)

    def test_top_band_wraps_to_bottom_row(self):
        assert self.board.wrap((200, 40)) == (200, 420)

    def test_bottom_edge_wraps_below_band_boundary(self):
        assert self.board.wrap((200, 460)) == (200, 40)

    def test_inside_positions_untouched(self):
        assert self.board.wrap((0, 60)) == (0, 60)
        assert self.board.wrap((380, 440)) == (380, 440)

    def test_partial_column_is_reachable(self):
        board = Board(410, 450, 20, 50)
        assert board.wrap((400, 240)) == (400, 240)
        assert board.wrap((-20, 240)) == (380, 240)


def test_snap_floors_onto_grid():
    assert snap(199) == 180
    assert snap(200) == 200
    assert snap(250) == 240


def test_step_and_occupancy():
    assert step((20, 40), (20, 0)) == (40, 40)
    assert occupied((20, 40), [(0, 0), (20, 40)])
    assert occupied((20, 40), [[20, 40]])
    assert not occupied((20, 40), [(40, 20)])


def test_axis_of():
    assert axis_of((20, 0)) == "x"
    assert axis_of((0, -20)) == "y"
    assert axis_of((0, 0)) is None
