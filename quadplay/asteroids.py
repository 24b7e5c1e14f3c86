"""Asteroids: a ship that thrusts, turns and shoots rocks that split when hit."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

Vec2 = tuple[float, float]

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
MAX_SPEED = 5.0
BULLET_SPEED = 7.0
BULLET_LIFETIME = 1.5
SHOT_COOLDOWN = 0.1
TURN_STEP = 5.0
INITIAL_ASTEROIDS = 10
INITIAL_SIDES = 6


def _length(v: Vec2) -> float:
    return math.hypot(v[0], v[1])


def _normalize(v: Vec2) -> Vec2:
    length = _length(v)
    if length == 0.0:
        return (0.0, 0.0)
    return (v[0] / length, v[1] / length)


def _scale(v: Vec2, k: float) -> Vec2:
    return (v[0] * k, v[1] * k)


def _add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def _distance(a: Vec2, b: Vec2) -> float:
    return _length((a[0] - b[0], a[1] - b[1]))


def wrap_around(pos, width, height) -> Vec2:
    """Move a point that left the screen to the opposite edge."""
    x, y = float(pos[0]), float(pos[1])
    if x > width:
        x = 0.0
    if x < 0.0:
        x = float(width)
    if y > height:
        y = 0.0
    if y < 0.0:
        y = float(height)
    return (x, y)


@dataclass
class Ship:
    """The player's ship; ``rot`` is in degrees, zero pointing up."""

    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = (0.0, 0.0)


@dataclass
class Bullet:
    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


@dataclass
class AsteroidsGame:
    """State of one game on a ``width`` by ``height`` screen."""

    width: float = 800.0
    height: float = 600.0
    rng: random.Random = field(default_factory=random.Random)
    start_time: float = 0.0

    def __post_init__(self) -> None:
        self.last_shot = self.start_time
        self.reset()

    @property
    def center(self) -> Vec2:
        return (self.width / 2.0, self.height / 2.0)

    @property
    def won(self) -> bool:
        """True once the game is over with every asteroid destroyed."""
        return self.gameover and not self.asteroids

    def reset(self) -> None:
        """Start a new game with a fresh ship and a ring of asteroids."""
        self.ship = Ship(pos=self.center)
        self.bullets: list[Bullet] = []
        self.asteroids: list[Asteroid] = []
        self.gameover = False
        radius = min(self.width, self.height) / 2.0
        for _ in range(INITIAL_ASTEROIDS):
            direction = _normalize(
                (self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0))
            )
            self.asteroids.append(
                Asteroid(
                    pos=_add(self.center, _scale(direction, radius)),
                    vel=(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0)),
                    rot=0.0,
                    rot_speed=self.rng.uniform(-2.0, 2.0),
                    size=min(self.width, self.height) / 10.0,
                    sides=INITIAL_SIDES,
                )
            )

    def _wrap(self, pos: Vec2) -> Vec2:
        return wrap_around(pos, self.width, self.height)

    def _split(self, asteroid: Asteroid, bullet: Bullet) -> list[Asteroid]:
        bvx, bvy = bullet.vel
        children = []
        for perpendicular in ((bvy, -bvx), (-bvy, bvx)):
            children.append(
                Asteroid(
                    pos=asteroid.pos,
                    vel=_scale(_normalize(perpendicular), self.rng.uniform(1.0, 3.0)),
                    rot=self.rng.uniform(0.0, 360.0),
                    rot_speed=self.rng.uniform(-2.0, 2.0),
                    size=asteroid.size * 0.8,
                    sides=asteroid.sides - 1,
                )
            )
        return children

    def update(self, frame_t, up=False, left=False, right=False, space=False) -> None:
        """Advance one frame at time ``frame_t`` with the given keys held."""
        if self.gameover:
            return
        ship = self.ship
        rotation = math.radians(ship.rot)
        facing = (math.sin(rotation), -math.cos(rotation))

        acc = _scale(ship.vel, -1.0 / 10.0)
        if up:
            acc = _scale(facing, 1.0 / 3.0)

        if space and frame_t - self.last_shot > SHOT_COOLDOWN:
            self.bullets.append(
                Bullet(
                    pos=_add(ship.pos, _scale(facing, SHIP_HEIGHT / 2.0)),
                    vel=_scale(facing, BULLET_SPEED),
                    shot_at=frame_t,
                )
            )
            self.last_shot = frame_t
        if right:
            ship.rot += TURN_STEP
        elif left:
            ship.rot -= TURN_STEP

        ship.vel = _add(ship.vel, acc)
        if _length(ship.vel) > MAX_SPEED:
            ship.vel = _scale(_normalize(ship.vel), MAX_SPEED)
        ship.pos = self._wrap(_add(ship.pos, ship.vel))

        for bullet in self.bullets:
            bullet.pos = _add(bullet.pos, bullet.vel)
        for asteroid in self.asteroids:
            asteroid.pos = self._wrap(_add(asteroid.pos, asteroid.vel))
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > frame_t]

        new_asteroids: list[Asteroid] = []
        for asteroid in self.asteroids:
            if _distance(asteroid.pos, ship.pos) < asteroid.size + SHIP_HEIGHT / 3.0:
                self.gameover = True
                break
            for bullet in self.bullets:
                if _distance(asteroid.pos, bullet.pos) < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 4:
                        new_asteroids.extend(self._split(asteroid, bullet))
                    break

        self.bullets = [
            b
            for b in self.bullets
            if b.shot_at + BULLET_LIFETIME > frame_t and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided]
        self.asteroids.extend(new_asteroids)

        if not self.asteroids:
            self.gameover = True