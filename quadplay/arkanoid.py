"""Arkanoid-style breakout simulation in a 20 by 20 world."""

from __future__ import annotations

BLOCKS_W = 10
BLOCKS_H = 10
SCR_W = 20.0
SCR_H = 20.0
PLATFORM_WIDTH = 5.0
PLATFORM_HEIGHT = 0.2
PLATFORM_SPEED = 3.0
BLOCK_W = SCR_W / BLOCKS_W
BLOCK_H = 7.0 / BLOCKS_H


class Arkanoid:
    """Ball, paddle and block wall of one game."""

    def __init__(self) -> None:
        self.blocks = [[True] * BLOCKS_W for _ in range(BLOCKS_H)]
        self.ball_x = 12.0
        self.ball_y = 7.0
        self.dx = 3.5
        self.dy = -3.5
        self.platform_x = 10.0
        self.stick = True

    @staticmethod
    def block_rect(i: int, j: int) -> tuple[float, float, float, float]:
        """Cell rectangle ``(x, y, w, h)`` of block column ``i``, row ``j``."""
        return (i * BLOCK_W + 0.05, j * BLOCK_H + 0.05, BLOCK_W, BLOCK_H)

    def update(self, delta, left, right, space) -> None:
        """Advance by ``delta`` seconds with the given keys held."""
        if right and self.platform_x < SCR_W - PLATFORM_WIDTH / 2.0:
            self.platform_x += PLATFORM_SPEED * delta
        if left and self.platform_x > PLATFORM_WIDTH / 2.0:
            self.platform_x -= PLATFORM_SPEED * delta

        if not self.stick:
            self.ball_x += self.dx * delta
            self.ball_y += self.dy * delta
        else:
            self.ball_x = self.platform_x
            self.ball_y = SCR_H - 0.5
            self.stick = not space

        if self.ball_x <= 0.0 or self.ball_x > SCR_W:
            self.dx = -self.dx
        on_platform = (
            self.ball_y > SCR_H - PLATFORM_HEIGHT - 0.15 / 2.0
            and self.platform_x - PLATFORM_WIDTH / 2.0
            <= self.ball_x
            <= self.platform_x + PLATFORM_WIDTH / 2.0
        )
        if self.ball_y <= 0.0 or on_platform:
            self.dy = -self.dy
        if self.ball_y >= SCR_H:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        for j, row in enumerate(self.blocks):
            for i, alive in enumerate(row):
                if not alive:
                    continue
                bx, by, bw, bh = self.block_rect(i, j)
                if bx <= self.ball_x < bx + bw and by <= self.ball_y < by + bh:
                    self.dy = -self.dy
                    row[i] = False

    @property
    def blocks_left(self) -> int:
        return sum(sum(row) for row in self.blocks)