import random

import pytest

from falltris.blocks import standard_blocks
from falltris.game import (
    TOTAL_COLUMNS,
    TOTAL_ROWS,
    DropTimer,
    Game,
    Grid,
    score_for_rows,
)


def _block(block_id):
    return next(b for b in standard_blocks() if b.id == block_id)


def _filled_cells(grid):
    return sum(1 for row in grid.cells for value in row if value)


@pytest.mark.parametrize("count,points", [(0, 0), (1, 100), (2, 300), (3, 500), (4, 500)])
def test_score_for_rows(count, points):
    assert score_for_rows(count) == points


def test_drop_timer_fires_and_resets():
    timer = DropTimer(0.5)
    assert timer.tick(0.3) is False
    assert timer.tick(0.3) is True
    assert timer.tick(0.3) is False
    assert timer.tick(0.2) is True


def test_grid_bounds():
    grid = Grid()
    assert grid.is_inside(0, 0)
    assert grid.is_inside(TOTAL_ROWS - 1, TOTAL_COLUMNS - 1)
    assert not grid.is_inside(-1, 0)
    assert not grid.is_inside(0, TOTAL_COLUMNS)
    assert not grid.is_inside(TOTAL_ROWS, 0)


def test_is_empty_outside_raises():
    with pytest.raises(IndexError):
        Grid().is_empty(-1, 0)


def test_reset_empties_grid():
    grid = Grid(4, 3)
    grid.cells[2][1] = 5
    assert not grid.is_empty(2, 1)
    grid.reset()
    assert _filled_cells(grid) == 0


def test_clear_single_row_drops_above():
    grid = Grid(4, 3)
    grid.cells[3] = [1, 2, 3]
    grid.cells[2][0] = 7
    assert grid.is_row_full(3)
    assert grid.clear_full_rows() == 1
    assert grid.cells[3] == [7, 0, 0]
    assert _filled_cells(grid) == 1


def test_clear_separated_rows():
    grid = Grid(5, 2)
    grid.cells[4] = [1, 1]
    grid.cells[3] = [6, 0]
    grid.cells[2] = [2, 2]
    grid.cells[1] = [0, 7]
    assert grid.clear_full_rows() == 2
    assert grid.cells[4] == [6, 0]
    assert grid.cells[3] == [0, 7]
    assert _filled_cells(grid) == 2


def test_move_left_and_right_stop_at_walls():
    game = Game(random.Random(3))
    while game.move_left():
        pass
    assert min(c for _, c in game.current.cell_positions()) == 0
    while game.move_right():
        pass
    assert max(c for _, c in game.current.cell_positions()) == TOTAL_COLUMNS - 1


def test_rotation_blocked_at_top_for_i_block():
    game = Game(random.Random(0))
    game.current = _block(3)
    start = game.current.cell_positions()
    assert game.rotate() is False
    assert game.current.cell_positions() == start


def test_rotation_succeeds_when_room():
    game = Game(random.Random(0))
    game.current = _block(6)
    game.current.move(5, 0)
    assert game.rotate() is True
    assert game.current.rotation_state == 1


def test_step_down_locks_block():
    game = Game(random.Random(5))
    locked_id = game.current.id
    upcoming = game.next_block
    steps = 0
    while game.step_down():
        steps += 1
        assert steps < TOTAL_ROWS
    assert _filled_cells(game.grid) == 4
    assert all(v in (0, locked_id) for row in game.grid.cells for v in row)
    assert game.current is upcoming
    assert game.score == 0


def test_clearing_two_rows_scores_and_notifies():
    calls = []
    game = Game(random.Random(2), on_clear=lambda: calls.append(1))
    for row in (TOTAL_ROWS - 2, TOTAL_ROWS - 1):
        game.grid.cells[row] = [9 if c not in (4, 5) else 0 for c in range(TOTAL_COLUMNS)]
    game.current = _block(4)
    while game.step_down():
        pass
    assert len(calls) == 2
    assert game.score == score_for_rows(2)
    assert _filled_cells(game.grid) == 0


def test_soft_drop_adds_point_and_moves():
    game = Game(random.Random(4))
    before = game.current.cell_positions()
    game.update(0.0, down_held=True)
    assert game.score == 1
    assert game.current.cell_positions() == [(r + 1, c) for r, c in before]


def test_timer_drop_in_update():
    game = Game(random.Random(4))
    before = game.current.cell_positions()
    game.update(0.2)
    assert game.current.cell_positions() == before
    game.update(0.4)
    assert game.current.cell_positions() == [(r + 1, c) for r, c in before]


def test_paused_game_does_not_update():
    game = Game(random.Random(4))
    assert game.toggle_pause() is True
    before = game.current.cell_positions()
    game.update(5.0, down_held=True)
    assert game.current.cell_positions() == before
    assert game.score == 0
    assert game.toggle_pause() is False


def test_game_over_and_restart():
    game = Game(random.Random(11))
    for _ in range(5000):
        if game.game_over:
            break
        game.step_down()
    assert game.game_over
    score = game.score
    cells = [row[:] for row in game.grid.cells]
    game.update(10.0, down_held=True)
    assert game.score == score
    assert game.grid.cells == cells
    game.restart()
    assert not game.game_over
    assert game.score == 0
    assert _filled_cells(game.grid) == 0