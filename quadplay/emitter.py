"""Particle emitters: spawning, simulating and retiring particles over time."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace

from quadplay.particle_config import BatchedCurve, Color, EmitterConfig, Vec2


def _lerp_color(a: Color, b: Color, t: float) -> Color:
    return tuple(x * (1.0 - t) + y * t for x, y in zip(a, b))  # type: ignore[return-value]


def _initial_velocity(rng: random.Random, direction: Vec2, spread: float, speed: float) -> Vec2:
    """Rotate ``direction`` by a random angle within ``spread`` and scale it by ``speed``."""
    angle = rng.uniform(-spread / 2.0, spread / 2.0)
    dx, dy = direction
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return ((dx * cos_a - dy * sin_a) * speed, (dx * sin_a + dy * cos_a) * speed)


@dataclass
class Particle:
    """State of one live particle."""

    pos: Vec2
    size: float
    color: Color
    velocity: Vec2
    lifetime: float
    initial_size: float
    spawn_index: float
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)
    progress: float = 0.0
    lived: float = 0.0
    frame: int = 0


class Emitter:
    """Spawns particles according to an :class:`EmitterConfig` and advances them."""

    MAX_PARTICLES = 10000

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.position: Vec2 = (0.0, 0.0)
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0
        self.batched_size_curve: BatchedCurve | None = None
        self.rebuild_size_curve()

    def reset(self) -> None:
        """Drop every particle and restart the emission cycle."""
        self.particles.clear()
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0

    def rebuild_size_curve(self) -> None:
        """Re-sample the size curve after the configuration changed."""
        curve = self.config.size_curve
        self.batched_size_curve = curve.batch() if curve is not None else None

    def emit(self, pos, n) -> None:
        """Immediately emit ``n`` particles at ``pos``, ignoring ``emitting`` and ``amount``."""
        for _ in range(n):
            self._emit_particle(pos)
            self.particles_spawned += 1

    def _emit_particle(self, offset) -> None:
        cfg = self.config
        sx, sy = cfg.emission_shape.random_point(self.rng)
        ox, oy = offset[0] + sx, offset[1] + sy

        size = cfg.size - cfg.size * self.rng.uniform(0.0, cfg.size_randomness)
        if cfg.local_coords:
            pos = (ox, oy)
        else:
            pos = (self.position[0] + ox, self.position[1] + oy)

        speed = cfg.initial_velocity - cfg.initial_velocity * self.rng.uniform(
            0.0, cfg.initial_velocity_randomness
        )
        velocity = _initial_velocity(
            self.rng, cfg.initial_direction, cfg.initial_direction_spread, speed
        )
        lifetime = cfg.lifetime - cfg.lifetime * self.rng.uniform(0.0, cfg.lifetime_randomness)

        self.particles.append(
            Particle(
                pos=pos,
                size=size,
                color=cfg.colors_curve.start,
                velocity=velocity,
                lifetime=lifetime,
                initial_size=size,
                spawn_index=float(self.particles_spawned),
            )
        )
        self.particles_spawned += 1

    def _spawn(self, dt: float) -> None:
        cfg = self.config
        self.time_passed += dt
        if cfg.amount == 0:
            gap = math.inf
        else:
            gap = (cfg.lifetime / cfg.amount) * (1.0 - cfg.explosiveness)

        if gap < 0.001:
            spawn_amount = cfg.amount
        else:
            ratio = (self.time_passed - self.last_emit_time) / gap
            spawn_amount = max(0, int(ratio)) if math.isfinite(ratio) else 0

        for _ in range(spawn_amount):
            self.last_emit_time = self.time_passed
            if self.particles_spawned < cfg.amount:
                self._emit_particle((0.0, 0.0))
            if len(self.particles) >= cfg.amount:
                break

    def _advance(self, particle: Particle, dt: float) -> None:
        cfg = self.config
        vx, vy = particle.velocity
        accel = cfg.linear_accel * dt
        vx, vy = vx + vx * accel, vy + vy * accel

        t = particle.lived / particle.lifetime if particle.lifetime != 0 else 1.0
        curve = cfg.colors_curve
        if t < 0.5:
            particle.color = _lerp_color(curve.start, curve.mid, t * 2.0)
        else:
            particle.color = _lerp_color(curve.mid, curve.end, (t - 0.5) * 2.0)

        px, py = particle.pos
        particle.pos = (px + vx * dt, py + vy * dt)

        scale = self.batched_size_curve.get(t) if self.batched_size_curve is not None else 1.0
        particle.size = particle.initial_size * scale

        if particle.lifetime != 0:
            particle.progress = particle.lived / particle.lifetime

        particle.lived += dt

        gx, gy = cfg.gravity
        particle.velocity = (vx + gx * dt, vy + gy * dt)

        atlas = cfg.atlas
        if atlas is None:
            particle.uv = (0.0, 0.0, 1.0, 1.0)
            return
        if particle.lifetime != 0:
            span = atlas.end_index - atlas.start_index
            raw = particle.lived / particle.lifetime * span
            particle.frame = max(0, int(raw)) + atlas.start_index
        x = particle.frame % atlas.n
        y = particle.frame // atlas.m
        particle.uv = (x / atlas.n, y / atlas.m, 1.0 / atlas.n, 1.0 / atlas.m)

    def update(self, dt, position) -> None:
        """Move the emitter to ``position`` and advance the simulation by ``dt`` seconds."""
        self.position = (float(position[0]), float(position[1]))
        cfg = self.config

        if cfg.emitting:
            self._spawn(dt)

        if cfg.one_shot and self.time_passed > cfg.lifetime:
            self.time_passed = 0.0
            self.last_emit_time = 0.0
            cfg.emitting = False

        for particle in self.particles:
            self._advance(particle, dt)

        survivors = [
            p for p in self.particles if not (p.lived > p.lifetime or p.lived > cfg.lifetime)
        ]
        self.particles_spawned -= len(self.particles) - len(survivors)
        self.particles = survivors


class EmittersCache:
    """A pool of emitters sharing one configuration, recycled once they stop emitting."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.cache: list[Emitter] = [
            Emitter(replace(config, emitting=False), self.rng)
            for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self.active: list[tuple[Emitter, Vec2]] = []

    def spawn(self, pos) -> None:
        """Start a fresh emission cycle at ``pos``."""
        emitter = self.cache.pop() if self.cache else Emitter(replace(self.config), self.rng)
        emitter.config.emitting = True
        emitter.reset()
        self.active.append((emitter, (float(pos[0]), float(pos[1]))))

    def update(self, dt) -> None:
        """Advance all active emitters, returning finished ones to the cache."""
        still_active: list[tuple[Emitter, Vec2]] = []
        for emitter, pos in self.active:
            emitter.update(dt, pos)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self.cache.append(emitter)
        self.active = still_active