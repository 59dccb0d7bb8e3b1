"""
Tests for serialization and deserialization of kata objects.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `kata.serialization`.
"""

import pytest

from kata.examples import build_sibling_table_selector
from kata.model import Rectangle
from kata.selectors import CardinalityError, OrderError, combine, css_selector_builder as builder
from kata.serialization import (
    SerializationError,
    fragment_to_dict,
    fragment_from_dict,
    fragment_to_json,
    fragment_from_json,
    fragment_to_yaml,
    fragment_from_yaml,
    get_json,
    from_json,
)


def build_sample_fragment():
    return builder.element("a").id("home").class_("nav").attr("href").pseudo_class("hover")


def test_fragment_dict_shape():
    d = fragment_to_dict(builder.element("a").class_("b"))
    assert d == {"tokens": ["a", ".b"], "categories": ["element", "class"], "combined": False}


def test_json_roundtrip():
    fragment = build_sample_fragment()
    restored = fragment_from_json(fragment_to_json(fragment))
    assert restored == fragment
    assert restored.stringify() == 'a#home.nav[href]:hover'


def test_yaml_roundtrip():
    fragment = build_sample_fragment()
    restored = fragment_from_yaml(fragment_to_yaml(fragment))
    assert fragment_to_dict(restored) == fragment_to_dict(fragment)


def test_combined_roundtrip():
    fragment = build_sibling_table_selector()
    restored = fragment_from_json(fragment_to_json(fragment))
    assert restored.stringify() == fragment.stringify()
    assert restored.combined


def test_restored_fragment_keeps_validating():
    restored = fragment_from_json(fragment_to_json(build_sample_fragment()))
    with pytest.raises(CardinalityError):
        restored.id("other")
    with pytest.raises(OrderError):
        restored.class_("late")
    assert restored.pseudo_element("after").stringify().endswith(":hover::after")


def test_restored_combined_validates_right_side_only():
    fragment = combine(builder.id("a"), ">", builder.element("p"))
    restored = fragment_from_dict(fragment_to_dict(fragment))
    assert restored.id("b").stringify() == "#a > p#b"


def test_unknown_category_rejected():
    with pytest.raises(SerializationError):
        fragment_from_dict({"tokens": ["a"], "categories": ["tag"], "combined": False})


def test_category_count_mismatch_rejected():
    with pytest.raises(SerializationError):
        fragment_from_dict({"tokens": ["a", ".b"], "categories": ["element"], "combined": False})


def test_more_categories_than_tokens_rejected():
    with pytest.raises(SerializationError):
        fragment_from_dict({"tokens": ["a"], "categories": ["element", "class"], "combined": True})


class TestObjectJSON:
    """get_json / from_json round trip for plain values and dataclasses."""

    def test_list(self):
        """Output is compact, without spaces after separators."""
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keys_sorted(self):
        assert get_json({"width": 10, "height": 20}) == '{"height":20,"width":10}'

    def test_dataclass(self):
        assert get_json(Rectangle(10, 20)) == '{"height":20,"width":10}'

    def test_from_json_builds_instance(self):
        r = from_json(Rectangle, '{"width": 10, "height": 20}')
        assert isinstance(r, Rectangle)
        assert r.width == 10
        assert r.height == 20
        assert r.get_area() == 200

    def test_roundtrip(self):
        r = Rectangle(3, 4)
        assert from_json(Rectangle, get_json(r)) == r

    def test_unknown_keys_warn(self):
        with pytest.warns(UserWarning):
            r = from_json(Rectangle, '{"width": 1, "height": 2, "depth": 3}')
        assert r == Rectangle(1, 2)

    def test_missing_field(self):
        with pytest.raises(TypeError):
            from_json(Rectangle, '{"width": 1}')

    def test_not_a_dataclass(self):
        with pytest.raises(TypeError):
            from_json(dict, "{}")

    def test_not_an_object(self):
        with pytest.raises(TypeError):
            from_json(Rectangle, "[1, 2]")

    def test_unencodable_object(self):
        with pytest.raises(TypeError):
            get_json(object())


class TestRejectedPayloads:
    """Payloads that would restore a fragment breaking the selector grammar."""

    def test_duplicate_id(self):
        payload = {"tokens": ["#a", "#b", "div"], "categories": ["id", "id", "element"], "combined": False}
        with pytest.raises(SerializationError):
            fragment_from_dict(payload)

    def test_out_of_order(self):
        payload = {"tokens": [".a", "#b"], "categories": ["class", "id"], "combined": False}
        with pytest.raises(SerializationError):
            fragment_from_dict(payload)

    def test_category_label_does_not_match_token(self):
        payload = {"tokens": ["::after"], "categories": ["element"], "combined": False}
        with pytest.raises(SerializationError):
            fragment_from_dict(payload)

    def test_unclosed_attribute(self):
        payload = {"tokens": ["[href"], "categories": ["attribute"], "combined": False}
        with pytest.raises(SerializationError):
            fragment_from_dict(payload)

    def test_combined_trailing_compound_validated(self):
        payload = {
            "tokens": ["a", " + ", "#x", "#y"],
            "categories": ["id", "id"],
            "combined": True,
        }
        with pytest.raises(SerializationError):
            fragment_from_dict(payload)

    def test_combined_categories_must_cover_trailing_compound(self):
        """Leaving '#x' unlabelled would allow a second id to be appended."""
        payload = {"tokens": ["a", " + ", "#x", ".y"], "categories": ["class"], "combined": True}
        with pytest.raises(SerializationError):
            fragment_from_dict(payload)

    def test_non_string_token(self):
        with pytest.raises(SerializationError):
            fragment_from_dict({"tokens": [1], "categories": ["element"], "combined": False})

    @pytest.mark.parametrize("payload", [None, [], "div"])
    def test_not_a_mapping(self, payload):
        with pytest.raises(SerializationError):
            fragment_from_dict(payload)

    def test_empty_yaml_document(self):
        with pytest.raises(SerializationError):
            fragment_from_yaml("")

    def test_json_null(self):
        with pytest.raises(SerializationError):
            fragment_from_json("null")

    def test_yaml_list(self):
        with pytest.raises(SerializationError):
            fragment_from_yaml("- a\n- b\n")
