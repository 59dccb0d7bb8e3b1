"""
Tests for geometry predicates and value objects.
"""

import pytest

from kata.geometry import do_rectangles_overlap, is_inside_circle, is_triangle
from kata.model import Bounds, Circle, Point, Rectangle


class TestModel:

    def test_rectangle_area(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20
        assert r.get_area() == 200

    def test_bounds_edges(self):
        b = Bounds(top=5, left=5, width=20, height=10)
        assert b.right == 25
        assert b.bottom == 15

    def test_circle_default(self):
        c = Circle()
        assert c.center == Point(0, 0)
        assert c.radius == 0


@pytest.mark.parametrize(
    "sides, expected",
    [((1, 2, 3), False), ((3, 4, 5), True), ((10, 1, 1), False), ((10, 10, 10), True)],
)
def test_is_triangle(sides, expected):
    assert is_triangle(*sides) is expected


class TestRectanglesOverlap:

    def test_overlapping(self):
        assert do_rectangles_overlap(Bounds(0, 0, 10, 10), Bounds(5, 5, 20, 20))

    def test_apart(self):
        assert not do_rectangles_overlap(Bounds(0, 0, 10, 10), Bounds(20, 20, 20, 20))

    def test_second_above_first(self):
        """The check must look at all four edges, not only two."""
        assert not do_rectangles_overlap(Bounds(20, 20, 10, 10), Bounds(0, 0, 5, 5))

    def test_touching_edges(self):
        assert not do_rectangles_overlap(Bounds(0, 0, 10, 10), Bounds(0, 10, 10, 10))

    def test_contained(self):
        assert do_rectangles_overlap(Bounds(0, 0, 100, 100), Bounds(10, 10, 5, 5))

    def test_symmetric(self):
        a, b = Bounds(0, 0, 10, 10), Bounds(5, 5, 20, 20)
        assert do_rectangles_overlap(a, b) == do_rectangles_overlap(b, a)


class TestInsideCircle:

    def test_center(self):
        assert is_inside_circle(Circle(Point(0, 0), 10), Point(0, 0))

    def test_outside(self):
        assert not is_inside_circle(Circle(Point(0, 0), 10), Point(10, 10))

    def test_euclidean_distance(self):
        """(6, 6) is 8.49 away: inside, though |dx| + |dy| = 12."""
        assert is_inside_circle(Circle(Point(0, 0), 10), Point(6, 6))

    def test_on_boundary(self):
        assert not is_inside_circle(Circle(Point(5, 5), 5), Point(10, 5))
