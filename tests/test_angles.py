import math

import pytest

from quadplay.angles import (
    PITCH_LIMIT,
    angle_lerp,
    clamp_pitch,
    look_vectors,
    short_angle_dist,
    wrap_degrees,
)

ANGLES = [(0.0, 350.0), (10.0, 200.0), (300.0, 20.0), (45.0, 45.0), (90.0, 270.5)]


@pytest.mark.parametrize("a0,a1", ANGLES)
def test_short_distance_is_short_and_correct(a0, a1):
    d = short_angle_dist(a0, a1)
    assert -180.0 <= d <= 180.0
    assert math.isclose(math.fmod(a0 + d - a1, 360.0) % 360.0 % 360.0, 0.0, abs_tol=1e-9) or \
        math.isclose(math.fmod(a0 + d - a1, 360.0) % 360.0, 360.0, abs_tol=1e-9)


def test_short_distance_wraps_backwards():
    assert short_angle_dist(0.0, 350.0) == pytest.approx(-10.0)


@pytest.mark.parametrize("a0,a1", ANGLES)
def test_lerp_endpoints(a0, a1):
    assert angle_lerp(a0, a1, 0.0) == a0
    end = angle_lerp(a0, a1, 1.0)
    assert math.cos(math.radians(end)) == pytest.approx(math.cos(math.radians(a1)))
    assert math.sin(math.radians(end)) == pytest.approx(math.sin(math.radians(a1)))


@pytest.mark.parametrize("angle", [0.0, 10.0, 359.0])
def test_wrap_degrees(angle):
    assert wrap_degrees(angle) == angle
    assert wrap_degrees(angle + 360.0) == pytest.approx(angle)
    if angle > 0:
        assert wrap_degrees(angle - 360.0) == pytest.approx(angle)


def test_clamp_pitch():
    assert clamp_pitch(2.0) == PITCH_LIMIT
    assert clamp_pitch(-2.0) == -PITCH_LIMIT
    assert clamp_pitch(0.3) == 0.3


@pytest.mark.parametrize("yaw,pitch", [(1.18, 0.0), (0.0, 1.0), (-2.0, -1.2)])
def test_look_vectors_orthonormal(yaw, pitch):
    front, right, up = look_vectors(yaw, pitch, (0.0, 1.0, 0.0))
    dot = lambda a, b: sum(x * y for x, y in zip(a, b))
    for v in (front, right, up):
        assert dot(v, v) == pytest.approx(1.0)
    assert dot(front, right) == pytest.approx(0.0, abs=1e-9)
    assert dot(front, up) == pytest.approx(0.0, abs=1e-9)
    assert dot(right, up) == pytest.approx(0.0, abs=1e-9)
    assert up[1] >= 0.0