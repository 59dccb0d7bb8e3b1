"""
Geometry predicates over the value objects in kata.model.
"""

import math

from kata.model import Bounds, Circle, Number, Point


def is_triangle(a: Number, b: Number, c: Number) -> bool:
    """
    True when a non-degenerate triangle has sides a, b, c.

    Examples:
        1, 2, 3    => False
        3, 4, 5    => True
        10, 1, 1   => False
        10, 10, 10 => True
    """
    return a + b > c and a + c > b and b + c > a


def do_rectangles_overlap(rect1: Bounds, rect2: Bounds) -> bool:
    """
    True when the interiors of two axis-aligned rectangles intersect.

    Rectangles that only touch along an edge do not overlap.

    Examples:
        Bounds(0, 0, 10, 10), Bounds(5, 5, 20, 20)   => True
        Bounds(0, 0, 10, 10), Bounds(20, 20, 20, 20) => False
    """
    return (
        rect1.left < rect2.right
        and rect2.left < rect1.right
        and rect1.top < rect2.bottom
        and rect2.top < rect1.bottom
    )


def is_inside_circle(circle: Circle, point: Point) -> bool:
    """
    True when the point lies strictly inside the circle.

    Examples:
        Circle(Point(0, 0), 10), Point(0, 0)   => True
        Circle(Point(0, 0), 10), Point(10, 10) => False
    """
    distance = math.hypot(point.x - circle.center.x, point.y - circle.center.y)
    return distance < circle.radius
