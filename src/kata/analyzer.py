"""
Selector Analyzer — read-only diagnostics for built selectors.

This module provides lightweight analysis of Fragment objects:
    - Compound selectors and combinators
    - Per-category inventory
    - CSS specificity
    - Warning flags for selectors that are likely to be a maintenance risk

IMPORTANT: It does NOT modify the fragment.
It only produces read-only reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from kata.selectors import Category, Fragment, classify_token

MAX_COMPOUNDS = 4


def split_compounds(fragment: Fragment) -> Tuple[List[List[str]], List[str]]:
    """
    Split a fragment into its compound selectors and combinator symbols.

    Returns:
        (compounds, combinators) where len(compounds) == len(combinators) + 1
        for any non-empty fragment
    """
    compounds: List[List[str]] = [[]]
    combinators: List[str] = []
    for token in fragment.tokens:
        if classify_token(token) is None:
            combinators.append(token.strip() or " ")
            compounds.append([])
        else:
            compounds[-1].append(token)
    return compounds, combinators


@dataclass
class SelectorReport:
    """Analysis report for one selector."""

    selector: str
    compound_count: int = 0
    combinators: List[str] = field(default_factory=list)

    # Inventory keyed by Category.value
    category_counts: Dict[str, int] = field(default_factory=dict)

    # (ids, classes + attributes + pseudo-classes, elements + pseudo-elements)
    specificity: Tuple[int, int, int] = (0, 0, 0)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_selector(fragment: Fragment) -> SelectorReport:
    """
    Analyze a built selector.

    Checks for:
    - Compound structure and combinators
    - Category usage and specificity
    - Overqualified ids, repeated ids, long chains

    Returns a SelectorReport with metrics and warnings.
    """
    report = SelectorReport(selector=fragment.stringify())

    if not fragment.tokens:
        report.add_warning("Empty selector")
        return report

    compounds, combinators = split_compounds(fragment)
    report.compound_count = len(compounds)
    report.combinators = combinators

    counts = {category.value: 0 for category in Category}
    ids: List[str] = []

    for compound in compounds:
        kinds = [classify_token(token) for token in compound]
        for token, kind in zip(compound, kinds):
            counts[kind.value] += 1
            if kind is Category.ID:
                ids.append(token)
        if Category.ELEMENT in kinds and Category.ID in kinds:
            report.add_warning(f"Overqualified id selector: {''.join(compound)}")

    report.category_counts = counts
    report.specificity = (
        counts[Category.ID.value],
        counts[Category.CLASS.value]
        + counts[Category.ATTRIBUTE.value]
        + counts[Category.PSEUDO_CLASS.value],
        counts[Category.ELEMENT.value] + counts[Category.PSEUDO_ELEMENT.value],
    )

    if len(ids) > 1:
        report.add_warning(f"Multiple ids in one selector: {', '.join(ids)}")

    if report.compound_count > MAX_COMPOUNDS:
        report.add_warning(
            f"Long combinator chain: {report.compound_count} compound selectors"
        )

    return report
