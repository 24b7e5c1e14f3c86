import random

import pytest

from quadplay.life import Board, CellState, random_board


def _board_with(width, height, cells):
    board = Board(width, height)
    for x, y in cells:
        board.set(x, y, CellState.ALIVE)
    return board


def test_new_board_is_dead():
    board = Board(3, 2)
    assert board.alive_cells() == set()
    assert board.get(2, 1) is CellState.DEAD


def test_set_and_get_round_trip():
    board = Board(4, 4)
    board.set(1, 2, CellState.ALIVE)
    assert board.get(1, 2) is CellState.ALIVE
    assert board.get(2, 1) is CellState.DEAD


def test_out_of_bounds_raises():
    board = Board(3, 3)
    with pytest.raises(IndexError):
        board.get(-1, 0)
    with pytest.raises(IndexError):
        board.set(3, 0, CellState.ALIVE)


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Board(0, 5)


def test_neighbours_excludes_self_and_edges():
    full = [(x, y) for x in range(3) for y in range(3)]
    board = _board_with(3, 3, full)
    assert board.neighbours(1, 1) == 8
    assert board.neighbours(0, 0) == 3


def test_block_is_still_life():
    cells = {(1, 1), (2, 1), (1, 2), (2, 2)}
    board = _board_with(4, 4, cells)
    board.step()
    assert board.alive_cells() == cells


def test_blinker_oscillates():
    horizontal = {(1, 2), (2, 2), (3, 2)}
    vertical = {(2, 1), (2, 2), (2, 3)}
    board = _board_with(5, 5, horizontal)
    board.step()
    assert board.alive_cells() == vertical
    board.step()
    assert board.alive_cells() == horizontal


def test_lonely_cell_dies():
    board = _board_with(3, 3, {(1, 1)})
    board.step()
    assert board.alive_cells() == set()


def test_random_board_is_deterministic_for_seed():
    a = random_board(10, 8, random.Random(7))
    b = random_board(10, 8, random.Random(7))
    assert a.alive_cells() == b.alive_cells()
    assert all(0 <= x < 10 and 0 <= y < 8 for x, y in a.alive_cells())