"""Grid snake game: steer, eat fruit, avoid walls and your own tail."""

from __future__ import annotations

import random
from collections import deque
from enum import Enum

SQUARES = 16
INITIAL_SPEED = 0.3
FRUIT_SCORE = 100
SPEEDUP = 0.9

Point = tuple[int, int]


class Direction(Enum):
    """Movement direction as a grid step."""

    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class SnakeGame:
    """State of one snake game on a ``squares`` by ``squares`` grid."""

    def __init__(self, rng: random.Random | None = None, squares: int = SQUARES) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.squares = squares
        self.reset()

    def reset(self) -> None:
        """Start a new game."""
        self.head: Point = (0, 0)
        self.body: deque[Point] = deque()
        self.direction = Direction.RIGHT
        self.fruit = self._random_point()
        self.score = 0
        self.speed = INITIAL_SPEED
        self.game_over = False

    def _random_point(self) -> Point:
        return (self.rng.randrange(self.squares), self.rng.randrange(self.squares))

    def steer(self, direction) -> None:
        """Turn, unless that would reverse straight into the body."""
        if self.game_over or direction is self.direction.opposite:
            return
        self.direction = direction

    def tick(self) -> None:
        """Advance the snake by one square."""
        if self.game_over:
            return
        self.body.appendleft(self.head)
        dx, dy = self.direction.value
        self.head = (self.head[0] + dx, self.head[1] + dy)
        if self.head == self.fruit:
            self.fruit = self._random_point()
            self.score += FRUIT_SCORE
            self.speed *= SPEEDUP
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < self.squares and 0 <= y < self.squares):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True