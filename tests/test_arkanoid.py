import pytest

from quadplay.arkanoid import BLOCKS_H, BLOCKS_W, PLATFORM_SPEED, SCR_H, Arkanoid


def test_initial_blocks_full():
    game = Arkanoid()
    assert game.blocks_left == BLOCKS_W * BLOCKS_H
    assert game.stick


def test_ball_sticks_to_platform():
    game = Arkanoid()
    game.update(0.0, False, False, False)
    assert game.ball_x == game.platform_x
    assert game.ball_y == SCR_H - 0.5
    assert game.stick


def test_platform_moves_right_and_left():
    game = Arkanoid()
    start = game.platform_x
    game.update(0.5, False, True, False)
    assert game.platform_x == pytest.approx(start + PLATFORM_SPEED * 0.5)
    game.update(0.5, True, False, False)
    assert game.platform_x == pytest.approx(start)


def test_space_launches_ball():
    game = Arkanoid()
    game.update(0.0, False, False, True)
    assert not game.stick
    x, y = game.ball_x, game.ball_y
    dx, dy = game.dx, game.dy
    game.update(0.1, False, False, False)
    assert game.ball_x == pytest.approx(x + dx * 0.1)
    # the ball was launched while still on the paddle, so it bounced there first
    assert game.ball_y == pytest.approx(y + dy * 0.1)


def test_block_hit_destroys_block_and_bounces():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = 1.0, 0.5
    dy = game.dy
    game.update(0.0, False, False, False)
    assert game.blocks[0][0] is False
    assert game.dy == -dy
    assert game.blocks_left == BLOCKS_W * BLOCKS_H - 1


def test_falling_below_resets_ball():
    game = Arkanoid()
    game.stick = False
    game.platform_x = 3.0
    game.ball_x, game.ball_y = 15.0, SCR_H + 1.0
    game.dy = 3.5
    game.update(0.0, False, False, False)
    assert game.stick
    assert game.dy < 0


def test_side_wall_reverses_dx():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = 0.0, 12.0
    dx = game.dx
    game.update(0.0, False, False, False)
    assert game.dx == -dx