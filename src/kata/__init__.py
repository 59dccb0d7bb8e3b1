"""
kata — textbook-style coding exercises.

The centrepiece is the CSS selector builder (kata.selectors): an
immutable-fragment builder that enforces selector part order and
cardinality and combines selectors with ' ', '+', '~', '>'.

The remaining modules are small pure functions:
    - kata.conditions: FizzBuzz, Luhn, brackets, radix, paths, ...
    - kata.geometry: triangle, rectangle overlap, point in circle
    - kata.grids: matrix product, tic-tac-toe
    - kata.timespan: relative time strings
    - kata.serialization: JSON/YAML round trips
"""

from kata.selectors import (
    CardinalityError,
    Fragment,
    OrderError,
    SelectorBuilder,
    ValidationError,
    combine,
    css_selector_builder,
    stringify,
)

__version__ = "0.1.0"

__all__ = [
    "CardinalityError",
    "Fragment",
    "OrderError",
    "SelectorBuilder",
    "ValidationError",
    "combine",
    "css_selector_builder",
    "stringify",
]
