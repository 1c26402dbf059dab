import dataclasses

import pytest

from rps_gesture.core.geometry import ORIGIN, Point2D, euclidean_distance


def test_distance_pythagorean():
    assert euclidean_distance(Point2D(0.0, 0.0), Point2D(3.0, 4.0)) == pytest.approx(5.0)


def test_distance_to_self_is_zero():
    p = Point2D(0.25, 0.75)
    assert euclidean_distance(p, p) == 0.0


def test_origin():
    assert ORIGIN == Point2D(0.0, 0.0)
    assert euclidean_distance(ORIGIN, ORIGIN) == 0.0


@pytest.mark.parametrize("a, b", [
    (Point2D(0.0, 0.0), Point2D(1.0, 1.0)),
    (Point2D(0.1, 0.9), Point2D(0.7, 0.3)),
    (Point2D(-2.5, 4.0), Point2D(3.0, -1.25)),
    (Point2D(1e-9, 0.0), Point2D(0.0, 1e-9)),
])
def test_distance_is_symmetric(a, b):
    assert euclidean_distance(a, b) == euclidean_distance(b, a)


def test_distance_returns_python_float():
    assert type(euclidean_distance(Point2D(0, 0), Point2D(1, 0))) is float


def test_point_is_immutable():
    p = Point2D(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 3.0
