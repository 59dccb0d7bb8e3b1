"""
Core Value Objects

Plain data classes used by the object and geometry exercises:
    - Rectangle (width/height with an area)
    - Bounds (an axis-aligned rectangle placed on a canvas)
    - Point
    - Circle

ARCHITECTURAL RULE:
    These objects:
        - Hold values, not behaviour (get_area is the one exception)
        - Are JSON round-trippable via kata.serialization
        - Use canvas coordinates: y grows downwards
"""

from dataclasses import dataclass, field
from typing import Union

Number = Union[int, float]


@dataclass
class Rectangle:
    """
    A rectangle known only by its size.

    Example:
        r = Rectangle(10, 20)
        r.width       # => 10
        r.height      # => 20
        r.get_area()  # => 200
    """

    width: Number
    height: Number

    def get_area(self) -> Number:
        return self.width * self.height


@dataclass(frozen=True)
class Bounds:
    """
    An axis-aligned rectangle in canvas coordinate space.

        (left; top)
           -------------
           |           |
           |           |  height
           -------------
               width

    Properties:
        top: y of the upper edge
        left: x of the left edge
        width: horizontal extent
        height: vertical extent
    """

    top: Number
    left: Number
    width: Number
    height: Number

    @property
    def bottom(self) -> Number:
        return self.top + self.height

    @property
    def right(self) -> Number:
        return self.left + self.width


@dataclass(frozen=True)
class Point:
    x: Number
    y: Number


@dataclass(frozen=True)
class Circle:
    """A circle given by its center and radius."""

    center: Point = field(default_factory=lambda: Point(0, 0))
    radius: Number = 0
