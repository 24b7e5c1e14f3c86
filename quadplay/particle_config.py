"""Configuration types for particle emitters: curves, shapes, atlases and settings."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Union

Vec2 = tuple[float, float]
Color = tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


class Interpolation(Enum):
    """How the points between a curve's key points are produced."""

    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass
class BatchedCurve:
    """A curve sampled into evenly spaced values."""

    points: list[float]

    def get(self, t: float) -> float:
        """Value of the curve at ``t`` in 0..1, linearly interpolated between samples."""
        if not self.points:
            raise ValueError("batched curve has no points")
        last = len(self.points) - 1
        t_scaled = t * len(self.points)
        previous_ix = min(max(int(t_scaled), 0), last) if math.isfinite(t_scaled) else 0
        next_ix = min(previous_ix + 1, last)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """Key points of a curve over 0..1, sampled ``resolution`` times per unit."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve by walking x in steps of ``1 / resolution``."""
        if self.interpolation is Interpolation.BEZIER:
            raise ValueError("bezier interpolation is not supported")
        if self.resolution <= 0:
            raise ValueError("curve resolution must be positive")

        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for (start_x, start_y), (end_x, end_y) in zip(self.points, self.points[1:]):
            while x <= end_x:
                t = (x - start_x) / (end_x - start_x)
                samples.append(start_y + (end_y - start_y) * t)
                x += step
        return BatchedCurve(samples)


@dataclass(frozen=True)
class PointEmission:
    """Every particle starts at one fixed offset: the emitter position by default."""

    x: float = 0.0
    y: float = 0.0

    def random_point(self, rng: random.Random) -> Vec2:
        return (self.x, self.y)


@dataclass(frozen=True)
class RectEmission:
    """Particles start anywhere inside a rectangle centred on the emitter."""

    width: float
    height: float

    def random_point(self, rng: random.Random) -> Vec2:
        return (
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class SphereEmission:
    """Particles start anywhere inside a disc centred on the emitter."""

    radius: float

    def random_point(self, rng: random.Random) -> Vec2:
        ro = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return (ro * math.cos(phi), ro * math.sin(phi))


EmissionShape = Union[PointEmission, RectEmission, SphereEmission]


@dataclass(frozen=True)
class ColorCurve:
    """Colours a particle passes through over its lifetime."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE


class Mesh(NamedTuple):
    """Vertex data (position xyz, uv, rgba per vertex) and triangle indices."""

    vertices: list[float]
    indices: list[int]


@dataclass(frozen=True)
class RectangleShape:
    """A unit quad."""

    def geometry(self) -> Mesh:
        vertices = [
            -1.0, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            1.0, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            1.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
            -1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        ]
        return Mesh(vertices, [0, 1, 2, 0, 2, 3])


@dataclass(frozen=True)
class CircleShape:
    """A triangle fan approximating a unit circle."""

    subdivisions: int

    def geometry(self) -> Mesh:
        if self.subdivisions < 1:
            raise ValueError("a circle needs at least one subdivision")
        vertices = [0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend((rx, ry, 0.0, rx, ry, 1.0, 1.0, 1.0, 1.0))
            if i != self.subdivisions:
                indices.extend((0, i + 1, i + 2))
        return Mesh(vertices, indices)


@dataclass(frozen=True)
class CustomMeshShape:
    """A user supplied mesh in the same vertex layout."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]

    def geometry(self) -> Mesh:
        return Mesh(list(self.vertices), list(self.indices))


ParticleShape = Union[RectangleShape, CircleShape, CustomMeshShape]


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom vertex and fragment shader sources for particles."""

    vertex: str
    fragment: str


class BlendMode(Enum):
    """How overlapping particles combine."""

    ALPHA = "alpha"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite sheet of ``n`` columns and ``m`` rows; frames ``start_index``..``end_index``."""

    n: int
    m: int
    start_index: int = 0
    end_index: int | None = None

    def __post_init__(self) -> None:
        if self.n <= 0 or self.m <= 0:
            raise ValueError("atlas dimensions must be positive")
        if self.end_index is None:
            object.__setattr__(self, "end_index", self.n * self.m)


@dataclass
class EmitterConfig:
    """All settings of a particle emitter."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=PointEmission)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=RectangleShape)
    emitting: bool = True
    initial_direction: Vec2 = (0.0, -1.0)
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Curve | None = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = (0.0, 0.0)
    texture: object | None = None
    atlas: AtlasConfig | None = None
    material: ParticleMaterial | None = None
    post_processing: bool = False