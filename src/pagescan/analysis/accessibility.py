"""Accessibility surface heuristic.

This is a surface scan, not an auditor. It looks at four things only:
- the number of ``<h1>`` elements
- ``<img>`` tags without usable ``alt`` text
- ``<button>`` elements with neither visible text nor ``aria-label``
- heading levels that jump by more than two between neighbours
"""

from __future__ import annotations

from ..domain.models import AccessibilityMetrics
from .markup import (
    iter_headings,
    iter_opening_tags,
    iter_tag_fragments,
    normalize_text,
    read_attribute,
)
from .notes import accessibility_notes

H1_PENALTY = 10
MISSING_ALT_PENALTY = 2
UNLABELED_BUTTON_PENALTY = 3
HEADING_JUMP_PENALTY = 5
MAX_HEADING_STEP = 2


def count_h1(html: str) -> int:
    return sum(1 for _ in iter_tag_fragments(html, "h1"))


def count_images_missing_alt(html: str) -> int:
    missing = 0
    for tag in iter_opening_tags(html, "img"):
        alt = read_attribute(tag, "alt")
        if alt is None or not alt.strip():
            missing += 1
    return missing


def count_unlabeled_buttons(html: str) -> int:
    unlabeled = 0
    for button in iter_tag_fragments(html, "button"):
        visible_text = normalize_text(button.content)
        aria_label = read_attribute(button.opening_tag, "aria-label")
        if not visible_text and not aria_label:
            unlabeled += 1
    return unlabeled


def heading_levels(html: str) -> list[int]:
    return [level for level, _ in iter_headings(html)]


def count_heading_order_issues(levels: list[int]) -> int:
    issues = 0
    for prev, curr in zip(levels, levels[1:]):
        if curr - prev > MAX_HEADING_STEP:
            issues += 1
    return issues


def accessibility_score(
    *,
    h1_count: int,
    images_missing_alt: int,
    unlabeled_buttons: int,
    heading_order_issues: int,
) -> int:
    score = 100
    if h1_count == 0:
        score -= H1_PENALTY
    if h1_count > 1:
        score -= H1_PENALTY
    score -= images_missing_alt * MISSING_ALT_PENALTY
    score -= unlabeled_buttons * UNLABELED_BUTTON_PENALTY
    score -= heading_order_issues * HEADING_JUMP_PENALTY
    return max(0, score)


def check_accessibility(html: str, *, url: str = "") -> AccessibilityMetrics:
    h1_count = count_h1(html)
    images_missing_alt = count_images_missing_alt(html)
    unlabeled_buttons = count_unlabeled_buttons(html)
    heading_order_issues = count_heading_order_issues(heading_levels(html))

    return AccessibilityMetrics(
        url=url,
        h1_count=h1_count,
        images_missing_alt=images_missing_alt,
        unlabeled_buttons=unlabeled_buttons,
        heading_order_issues=heading_order_issues,
        accessibility_score=accessibility_score(
            h1_count=h1_count,
            images_missing_alt=images_missing_alt,
            unlabeled_buttons=unlabeled_buttons,
            heading_order_issues=heading_order_issues,
        ),
        notes=tuple(
            accessibility_notes(
                h1_count=h1_count,
                images_missing_alt=images_missing_alt,
                unlabeled_buttons=unlabeled_buttons,
                heading_order_issues=heading_order_issues,
            )
        ),
    )
