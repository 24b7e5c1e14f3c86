import random
from collections import deque

import pytest

from quadplay.snake import FRUIT_SCORE, INITIAL_SPEED, SPEEDUP, Direction, SnakeGame


@pytest.fixture
def game():
    g = SnakeGame(random.Random(1))
    g.fruit = (15, 15)
    return g


def test_initial_state(game):
    assert game.head == (0, 0)
    assert game.direction is Direction.RIGHT
    assert game.score == 0
    assert not game.game_over


def test_tick_moves_head_without_growing(game):
    game.tick()
    assert game.head == (1, 0)
    assert len(game.body) == 0


def test_eating_fruit_grows_and_scores(game):
    game.fruit = (1, 0)
    game.tick()
    assert game.score == FRUIT_SCORE
    assert list(game.body) == [(0, 0)]
    assert game.speed == pytest.approx(INITIAL_SPEED * SPEEDUP)
    assert 0 <= game.fruit[0] < 16 and 0 <= game.fruit[1] < 16


def test_reverse_steer_ignored(game):
    game.steer(Direction.LEFT)
    assert game.direction is Direction.RIGHT
    game.steer(Direction.DOWN)
    assert game.direction is Direction.DOWN


def test_hitting_wall_ends_game(game):
    game.steer(Direction.UP)
    game.tick()
    assert game.game_over
    head = game.head
    game.tick()
    assert game.head == head


def test_self_collision_ends_game(game):
    game.head = (5, 5)
    game.body = deque([(5, 6), (6, 6), (6, 5), (6, 4)])
    game.direction = Direction.RIGHT
    game.tick()
    assert game.game_over


def test_reset_restores_start(game):
    game.fruit = (1, 0)
    game.tick()
    game.steer(Direction.UP)
    game.tick()
    game.reset()
    assert game.head == (0, 0)
    assert game.score == 0
    assert game.speed == INITIAL_SPEED
    assert not game.game_over
    assert len(game.body) == 0


def test_opposite_directions(game):
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.LEFT.opposite is Direction.RIGHT
    game.steer(game.direction.opposite)
    assert game.direction is Direction.RIGHT
    game.tick()
    assert game.head == (1, 0)