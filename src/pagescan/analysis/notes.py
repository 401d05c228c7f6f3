"""Human-readable advisory notes for the marketer / content owner.

One note per checked dimension, always in the same order.
"""

from __future__ import annotations

# Advisory threshold only; the score penalty uses density.LONG_PARAGRAPH_WORDS.
LONG_PARAGRAPH_NOTE_WORDS = 80


def density_notes(*, avg_paragraph_length: float, image_count: int, heading_count: int) -> list[str]:
    notes: list[str] = []
    if avg_paragraph_length > LONG_PARAGRAPH_NOTE_WORDS:
        notes.append("Paragraphs are long; consider splitting large blocks of text.")
    else:
        notes.append("Paragraph length seems reasonable.")

    if image_count == 0:
        notes.append("No images found; consider adding supporting visuals.")
    else:
        notes.append("Contains imagery to break up text.")

    if heading_count == 0:
        notes.append("No headings found; add subheadings to improve scanning.")
    else:
        notes.append("Has headings to guide the reader.")
    return notes


def accessibility_notes(
    *,
    h1_count: int,
    images_missing_alt: int,
    unlabeled_buttons: int,
    heading_order_issues: int,
) -> list[str]:
    notes: list[str] = []
    if h1_count == 0:
        notes.append("No <h1> found; every page should have a single main heading.")
    elif h1_count > 1:
        notes.append(f"Multiple <h1> elements found ({h1_count}); usually you only want one.")
    else:
        notes.append("Single <h1> present ✅")

    if images_missing_alt > 0:
        notes.append(f"{images_missing_alt} image(s) missing alt text.")
    else:
        notes.append("All images appear to include alt text ✅")

    if unlabeled_buttons > 0:
        notes.append(f"{unlabeled_buttons} <button> element(s) have no visible text or aria-label.")
    else:
        notes.append("All buttons appear to have labels or aria-labels ✅")

    if heading_order_issues > 0:
        notes.append(f"{heading_order_issues} heading level jump(s) detected (e.g. h2 → h5).")
    else:
        notes.append("Heading level progression mostly looks consistent ✅")
    return notes
