"""
CSS Selector Builder

Builds CSS selector strings from ordered parts:

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              Can be several occurrences

and joins built selectors with the combinators ' ', '+', '~', '>'.

ARCHITECTURAL RULE:
    Fragments are immutable values.
    Every append returns a NEW fragment.
    A fragment handed to a caller is never modified afterwards.

Grammar rules enforced on every append:
    - element, id and pseudo-element occur at most once
    - parts follow the order of Category (element first, pseudo-element last)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when an append would break selector grammar."""

    MESSAGE = "Invalid selector"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.MESSAGE)


class CardinalityError(ValidationError):
    """Raised when element, id or pseudo-element is appended a second time."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )


class OrderError(ValidationError):
    """Raised when a part is appended after a part that must follow it."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )


class Category(Enum):
    """
    Selector part categories, declared in grammar order.

    Declaration order IS the rank: a part may only be appended when no
    part of a later category is already present.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def repeatable(self) -> bool:
        return self not in _SINGLE_OCCURRENCE

    def render(self, value: str) -> str:
        """Format a raw value as a token of this category."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"

    def parse(self, token: str) -> str:
        """
        Inverse of render(): the raw value inside a token of this category.

        Raises:
            ValueError: token does not look like a token of this category
        """
        prefix, suffix = _AFFIXES[self]
        if (
            classify_token(token) is not self
            or not token.endswith(suffix)
            or len(token) < len(prefix) + len(suffix)
        ):
            raise ValueError(f"{token!r} is not a {self.value} token")
        return token[len(prefix):len(token) - len(suffix)]


_RANKS = {category: index for index, category in enumerate(Category)}

_SINGLE_OCCURRENCE = frozenset(
    {Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT}
)

_AFFIXES = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


def classify_token(token: str) -> Category | None:
    """
    Category of a rendered token, or None for a combinator.

    Tokens are told apart by their prefix; combinator tokens are the only
    ones starting with whitespace. An empty token is an (empty) element.
    """
    if token[:1].isspace():
        return None
    if token.startswith("::"):
        return Category.PSEUDO_ELEMENT
    if token.startswith(":"):
        return Category.PSEUDO_CLASS
    if token.startswith("["):
        return Category.ATTRIBUTE
    if token.startswith("."):
        return Category.CLASS
    if token.startswith("#"):
        return Category.ID
    return Category.ELEMENT


def combinator_token(combinator: str) -> str:
    """
    Render a combinator with its surrounding spaces.

    '+' becomes ' + '. The descendant combinator (whitespace only)
    collapses to a single space so that 'tr' ' ' 'td' reads 'tr td'.
    """
    symbol = combinator.strip()
    if not symbol:
        return " "
    return f" {symbol} "


@dataclass(frozen=True)
class Fragment:
    """
    One buildable selector, simple or combined.

    Properties:
        tokens:
            Rendered tokens in insertion order, combinator tokens included.
            Example: ("div", "#main", " + ", "table")

        categories:
            Categories present in the trailing compound selector
            (everything after the last combinator), in insertion order.
            Validation of further appends only looks at this.

        combined:
            True when the fragment came out of combine().

    IMPORTANT:
        This object is immutable (frozen=True).
        element()/id()/... return new fragments.
    """

    tokens: Tuple[str, ...] = ()
    categories: Tuple[Category, ...] = ()
    combined: bool = False

    def element(self, name: str) -> Fragment:
        return self._append(Category.ELEMENT, name)

    def id(self, name: str) -> Fragment:
        return self._append(Category.ID, name)

    def class_(self, name: str) -> Fragment:
        return self._append(Category.CLASS, name)

    def attr(self, spec: str) -> Fragment:
        return self._append(Category.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> Fragment:
        return self._append(Category.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> Fragment:
        return self._append(Category.PSEUDO_ELEMENT, name)

    def stringify(self) -> str:
        """Concatenate all tokens in stored order."""
        return "".join(self.tokens)

    def __str__(self) -> str:
        return self.stringify()

    def _append(self, category: Category, value: str) -> Fragment:
        check_append(self.categories, category)
        return replace(
            self,
            tokens=self.tokens + (category.render(value),),
            categories=self.categories + (category,),
        )


def check_append(present: Tuple[Category, ...], category: Category) -> None:
    """
    Validate appending `category` to a compound holding `present`.

    Cardinality is checked before order, so a second element() reports
    CardinalityError even though ELEMENT also ranks below everything.

    Raises:
        CardinalityError: single-occurrence category already present
        OrderError: a later-ranked category already present
    """
    if not category.repeatable and category in present:
        logger.debug("rejected second %s in %s", category.value, present)
        raise CardinalityError()
    if any(other.rank > category.rank for other in present):
        logger.debug("rejected %s after %s", category.value, present)
        raise OrderError()


def combine(left: Fragment, combinator: str, right: Fragment) -> Fragment:
    """
    Join two fragments with a combinator.

    Performs no validation and never raises. Neither input is modified.
    The result keeps the right-hand compound's categories, so appending
    to it extends (and is validated against) the right-hand side only.
    """
    return Fragment(
        tokens=left.tokens + (combinator_token(combinator),) + right.tokens,
        categories=right.categories,
        combined=True,
    )


def stringify(fragment: Fragment) -> str:
    return fragment.stringify()


EMPTY = Fragment()


class SelectorBuilder:
    """
    Facade for starting selector chains.

    Every entry method starts from an empty fragment, so the builder
    itself holds no state and one instance can be shared freely.

    Example:
        builder.id('main').class_('container').class_('editable').stringify()
        => '#main.container.editable'
    """

    def element(self, name: str) -> Fragment:
        return EMPTY.element(name)

    def id(self, name: str) -> Fragment:
        return EMPTY.id(name)

    def class_(self, name: str) -> Fragment:
        return EMPTY.class_(name)

    def attr(self, spec: str) -> Fragment:
        return EMPTY.attr(spec)

    def pseudo_class(self, name: str) -> Fragment:
        return EMPTY.pseudo_class(name)

    def pseudo_element(self, name: str) -> Fragment:
        return EMPTY.pseudo_element(name)

    def combine(self, left: Fragment, combinator: str, right: Fragment) -> Fragment:
        return combine(left, combinator, right)

    def stringify(self, fragment: Fragment) -> str:
        return stringify(fragment)


css_selector_builder = SelectorBuilder()


__all__ = [
    "Category",
    "CardinalityError",
    "EMPTY",
    "Fragment",
    "OrderError",
    "SelectorBuilder",
    "ValidationError",
    "check_append",
    "classify_token",
    "combinator_token",
    "combine",
    "css_selector_builder",
    "stringify",
]
