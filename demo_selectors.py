#!/usr/bin/env python3
"""
Demo: build the documented example selectors and analyze them.

Also shows the two grammar errors and a JSON round trip.
"""

from kata.analyzer import analyze_selector
from kata.examples import EXAMPLES
from kata.selectors import ValidationError, css_selector_builder as builder
from kata.serialization import fragment_from_json, fragment_to_json


def main():
    print("=" * 80)
    print("CSS SELECTOR BUILDER DEMO")
    print("=" * 80)

    for name, build in EXAMPLES.items():
        fragment = build()
        report = analyze_selector(fragment)
        print(f"\n{name}:")
        print(f"  selector:    {fragment.stringify()}")
        print(f"  compounds:   {report.compound_count}")
        print(f"  specificity: {report.specificity}")
        for warning in report.warnings:
            print(f"  ! {warning}")

    print("\nGrammar errors:")
    print("-" * 80)
    attempts = [
        ("id twice", lambda: builder.id("a").id("b")),
        ("id after class", lambda: builder.class_("a").id("b")),
        ("two pseudo-elements", lambda: builder.pseudo_element("after").pseudo_element("before")),
    ]
    for label, attempt in attempts:
        try:
            attempt()
        except ValidationError as e:
            print(f"  {label}: {type(e).__name__}: {e}")

    print("\nJSON round trip:")
    print("-" * 80)
    fragment = EXAMPLES["sibling_table"]()
    payload = fragment_to_json(fragment)
    print(f"  {payload}")
    print(f"  -> {fragment_from_json(payload).stringify()}")
    print("=" * 80)


if __name__ == "__main__":
    main()
