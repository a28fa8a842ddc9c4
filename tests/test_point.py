import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
import math

from pointsets.point import Point


def test_distance_is_symmetric():
    a = Point(1.5, -2.0, 3.25)
    b = Point(-4.0, 0.5, 7.0)
    assert a.distance_to(b) == b.distance_to(a)


def test_distance_to_self_is_zero():
    a = Point(3.0, 4.0, 5.0)
    assert a.distance_to(a) == 0.0


def test_distance_unit_diagonal():
    assert math.isclose(Point(0, 0, 0).distance_to(Point(1, 1, 1)), math.sqrt(3))


def test_from_sequence_drops_extra_channels():
    p = Point.from_sequence([1, 2, 3, 255, 128, 0])
    assert p == Point(1.0, 2.0, 3.0)
    assert p.as_tuple() == (1.0, 2.0, 3.0)
