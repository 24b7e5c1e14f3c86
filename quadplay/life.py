"""Conway's Game of Life on a bounded board."""

from __future__ import annotations

import random
from enum import Enum


class CellState(Enum):
    """State of a single cell."""

    ALIVE = "alive"
    DEAD = "dead"


class Board:
    """A fixed-size grid of cells; cells beyond the edges count as absent."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("board dimensions must be positive")
        self.width = width
        self.height = height
        self._cells = [[CellState.DEAD] * width for _ in range(height)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the board")

    def get(self, x, y) -> CellState:
        """State of the cell at column ``x``, row ``y``."""
        self._check(x, y)
        return self._cells[y][x]

    def set(self, x, y, state) -> None:
        """Set the state of the cell at column ``x``, row ``y``."""
        self._check(x, y)
        self._cells[y][x] = state

    def neighbours(self, x, y) -> int:
        """Number of live cells among the up to eight cells around ``(x, y)``."""
        self._check(x, y)
        return sum(
            1
            for j in (-1, 0, 1)
            for i in (-1, 0, 1)
            if (i, j) != (0, 0)
            and 0 <= x + i < self.width
            and 0 <= y + j < self.height
            and self._cells[y + j][x + i] is CellState.ALIVE
        )

    def step(self) -> None:
        """Advance the whole board by one generation."""
        self._cells = [
            [self._next_state(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]

    def _next_state(self, x: int, y: int) -> CellState:
        current = self._cells[y][x]
        count = self.neighbours(x, y)
        if current is CellState.ALIVE:
            return CellState.ALIVE if count in (2, 3) else CellState.DEAD
        return CellState.ALIVE if count == 3 else CellState.DEAD

    def alive_cells(self) -> set[tuple[int, int]]:
        """Coordinates of every live cell."""
        return {
            (x, y)
            for y, row in enumerate(self._cells)
            for x, cell in enumerate(row)
            if cell is CellState.ALIVE
        }


def random_board(width, height, rng) -> Board:
    """A board where each cell is alive with probability one in five."""
    board = Board(width, height)
    for y in range(height):
        for x in range(width):
            if rng.randrange(5) == 0:
                board.set(x, y, CellState.ALIVE)
    return board


__all__ = ["Board", "CellState", "random_board", "random"]