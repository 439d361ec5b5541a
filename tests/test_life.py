import random

import pytest

from mahikit.life import LifeGrid


def _grid_with(rows, cols, cells):
    grid = LifeGrid(rows, cols)
    for r, c in cells:
        grid.set_alive(r, c, True)
    return grid


def _shifted(cells, dr, dc, rows, cols):
    return sorted(((r + dr) % rows, (c + dc) % cols) for r, c in cells)


def test_block_is_still_life():
    block = [(2, 2), (2, 3), (3, 2), (3, 3)]
    grid = _grid_with(8, 8, block)
    for _ in range(5):
        grid.step()
    assert grid.live_cells() == sorted(block)


def test_blinker_oscillates():
    horizontal = [(5, 4), (5, 5), (5, 6)]
    grid = _grid_with(10, 10, horizontal)
    grid.step()
    assert grid.live_cells() == [(4, 5), (5, 5), (6, 5)]
    grid.step()
    assert grid.live_cells() == sorted(horizontal)


def test_lone_cell_dies():
    grid = _grid_with(6, 6, [(3, 3)])
    grid.step()
    assert grid.live_cells() == []


def test_glider_br_moves_down_right():
    grid = LifeGrid(12, 12)
    grid.glider_br(5, 5)
    start = grid.live_cells()
    for _ in range(4):
        grid.step()
    assert grid.live_cells() == _shifted(start, 1, 1, 12, 12)


def test_glider_bl_moves_down_left():
    grid = LifeGrid(12, 12)
    grid.glider_bl(5, 5)
    start = grid.live_cells()
    for _ in range(4):
        grid.step()
    assert grid.live_cells() == _shifted(start, 1, -1, 12, 12)


def test_glider_wraps_around_torus():
    grid = LifeGrid(8, 8)
    grid.glider_br(0, 7)
    start = grid.live_cells()
    for _ in range(4 * 8):
        grid.step()
    assert grid.live_cells() == start


def test_glider_br_stamps_five_cells_around_center():
    grid = LifeGrid(10, 10)
    grid.glider_br(4, 4)
    assert len(grid.live_cells()) == 5
    assert not grid.is_alive(4, 4)
    assert grid.is_alive(3, 4)


def test_ages_count_generations():
    block = [(1, 1), (1, 2), (2, 1), (2, 2)]
    grid = _grid_with(6, 6, block)
    assert grid.age(1, 1) == 0
    steps = 3
    for _ in range(steps):
        grid.step()
    assert all(grid.age(r, c) == steps for r, c in block)
    assert grid.age(4, 4) == 0


def test_killed_cell_has_no_age():
    grid = _grid_with(6, 6, [(1, 1), (1, 2), (2, 1), (2, 2)])
    grid.step()
    grid.set_alive(1, 1, False)
    assert grid.age(1, 1) == 0
    assert not grid.is_alive(1, 1)


def test_neighbors_wrap_across_corner():
    grid = _grid_with(5, 7, [(0, 0)])
    assert grid.living_neighbors(4, 6) == 1
    assert grid.living_neighbors(0, 0) == 0


def test_out_of_range_raises():
    grid = LifeGrid(4, 4)
    with pytest.raises(IndexError):
        grid.is_alive(4, 0)
    with pytest.raises(IndexError):
        grid.set_alive(0, -1, True)
    with pytest.raises(IndexError):
        grid.glider_br(0, 4)


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        LifeGrid(0, 5)


def test_spawn_is_reproducible_with_seed():
    a = LifeGrid(20, 20)
    b = LifeGrid(20, 20)
    a.spawn(10, random.Random(42))
    b.spawn(10, random.Random(42))
    assert a.live_cells() == b.live_cells()
    assert len(a.live_cells()) > 0