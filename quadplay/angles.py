"""Angle helpers for 2D camera rotation and first-person look direction."""

from __future__ import annotations

import math

Vec3 = tuple[float, float, float]

PITCH_LIMIT = 1.5


def short_angle_dist(a0, a1) -> float:
    """Signed shortest rotation in degrees from ``a0`` to ``a1``."""
    full = 360.0
    da = math.fmod(a1 - a0, full)
    return math.fmod(2.0 * da, full) - da


def angle_lerp(a0, a1, t) -> float:
    """Interpolate from ``a0`` towards ``a1`` along the shortest arc."""
    return a0 + short_angle_dist(a0, a1) * t


def wrap_degrees(angle) -> float:
    """Bring an angle that stepped just outside 0..360 back into range."""
    if angle >= 360.0:
        return angle - 360.0
    if angle < 0.0:
        return angle + 360.0
    return angle


def clamp_pitch(pitch) -> float:
    """Limit the pitch so the camera never flips over."""
    return max(-PITCH_LIMIT, min(PITCH_LIMIT, pitch))


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(sum(c * c for c in v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return (v[0] / length, v[1] / length, v[2] / length)


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def look_vectors(yaw, pitch, world_up) -> tuple[Vec3, Vec3, Vec3]:
    """Unit ``(front, right, up)`` vectors of a camera with the given yaw and pitch."""
    front = _normalize(
        (
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
    )
    right = _normalize(_cross(front, tuple(world_up)))
    up = _normalize(_cross(right, front))
    return front, right, up