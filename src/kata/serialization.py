"""
Serialization helpers for kata objects (Fragment, Rectangle and other dataclasses).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import dataclasses
import json
import logging
import warnings
from typing import Any, Dict, Tuple, Type, TypeVar

import yaml

from kata.selectors import Category, Fragment, check_append, classify_token

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SerializationError(ValueError):
    """Raised when a dict cannot be turned back into a Fragment."""
    pass


def fragment_to_dict(f: Fragment) -> Dict[str, Any]:
    return {
        "tokens": list(f.tokens),
        "categories": [c.value for c in f.categories],
        "combined": f.combined,
    }


def fragment_from_dict(d: Dict[str, Any]) -> Fragment:
    """
    Rebuild a Fragment from fragment_to_dict() output.

    Only the trailing compound's categories are stored. A plain
    (non-combined) fragment must have exactly one category per token; a
    combined one labels the tokens after its last combinator. Labelled
    tokens are replayed through the same checks as element()/id()/...,
    so a restored fragment never breaks order or cardinality.

    Raises:
        SerializationError: not a mapping, unknown category, inconsistent
            lengths, token not matching its category, grammar violation
    """
    if not isinstance(d, dict):
        raise SerializationError(f"Expected a mapping, got {type(d).__name__}")

    tokens = tuple(d.get("tokens", []))
    if not all(isinstance(t, str) for t in tokens):
        raise SerializationError(f"Tokens must be strings: {list(tokens)!r}")
    try:
        categories = tuple(Category(c) for c in d.get("categories", []))
    except ValueError as e:
        raise SerializationError(f"Unknown selector category: {e}") from e
    combined = bool(d.get("combined", False))

    if len(categories) > len(tokens):
        raise SerializationError(
            f"More categories ({len(categories)}) than tokens ({len(tokens)})"
        )
    if not combined and len(categories) != len(tokens):
        raise SerializationError(
            f"Plain fragment needs one category per token, got "
            f"{len(categories)} categories for {len(tokens)} tokens"
        )

    boundary = len(tokens) - len(categories)
    if combined and boundary and classify_token(tokens[boundary - 1]) is not None:
        raise SerializationError(
            f"Categories must label the whole trailing compound, "
            f"but {tokens[boundary - 1]!r} precedes it"
        )

    present: Tuple[Category, ...] = ()
    for token, category in zip(tokens[boundary:], categories):
        try:
            category.parse(token)
            check_append(present, category)
        except ValueError as e:
            raise SerializationError(f"Invalid {category.value} token {token!r}: {e}") from e
        present += (category,)

    logger.debug("restored fragment %r", "".join(tokens))
    return Fragment(tokens=tokens, categories=categories, combined=combined)


def fragment_to_json(f: Fragment) -> str:
    return json.dumps(fragment_to_dict(f), sort_keys=True)


def fragment_from_json(s: str) -> Fragment:
    d = json.loads(s)
    return fragment_from_dict(d)


def fragment_to_yaml(f: Fragment) -> str:
    return yaml.safe_dump(fragment_to_dict(f))


def fragment_from_yaml(s: str) -> Fragment:
    d = yaml.safe_load(s)
    return fragment_from_dict(d)


def _encode_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """
    Compact JSON representation of a value; dataclass instances encode as their fields.

    Examples:
        [1, 2, 3]            => '[1,2,3]'
        Rectangle(10, 20)    => '{"height":20,"width":10}'
    """
    return json.dumps(obj, default=_encode_default, sort_keys=True, separators=(",", ":"))


def from_json(cls: Type[T], s: str) -> T:
    """
    Build an instance of dataclass `cls` from its JSON representation.

        r = from_json(Rectangle, '{"width": 10, "height": 20}')
        r.get_area()  # => 200

    Keys that are not fields of `cls` are ignored with a UserWarning.
    Missing fields fall back to the dataclass defaults.

    Raises:
        TypeError: `cls` is not a dataclass, the JSON is not an object,
            or a field without default is missing
    """
    if not (dataclasses.is_dataclass(cls) and isinstance(cls, type)):
        raise TypeError(f"from_json needs a dataclass type, got {cls!r}")

    d = json.loads(s)
    if not isinstance(d, dict):
        raise TypeError(f"Expected a JSON object for {cls.__name__}, got {type(d).__name__}")

    names = {f.name for f in dataclasses.fields(cls) if f.init}
    unknown = sorted(set(d) - names)
    if unknown:
        warnings.warn(f"Ignoring unknown keys for {cls.__name__}: {', '.join(unknown)}", UserWarning)
    return cls(**{k: v for k, v in d.items() if k in names})
