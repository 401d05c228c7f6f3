"""Content density (scanability) heuristic."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..domain.models import DensityMetrics
from .markup import count_opening_tags, count_words, iter_tag_contents, normalize_text
from .notes import density_notes

LONG_PARAGRAPH_WORDS = 100
LONG_PARAGRAPH_PENALTY = 20
NO_IMAGES_PENALTY = 20
NO_HEADINGS_PENALTY = 20

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


@dataclass(frozen=True)
class Paragraph:
    text: str
    word_count: int


def extract_paragraphs(html: str) -> list[Paragraph]:
    """Normalized ``<p>`` texts in document order, empty ones dropped."""
    out: list[Paragraph] = []
    for content in iter_tag_contents(html, "p"):
        text = normalize_text(content)
        if not text:
            continue
        out.append(Paragraph(text=text, word_count=count_words(text)))
    return out


def scanability_score(*, avg_paragraph_length: float, image_count: int, heading_count: int) -> int:
    score = 100
    if avg_paragraph_length > LONG_PARAGRAPH_WORDS:
        score -= LONG_PARAGRAPH_PENALTY
    if image_count == 0:
        score -= NO_IMAGES_PENALTY
    if heading_count == 0:
        score -= NO_HEADINGS_PENALTY
    return max(0, score)


def evaluate_density(html: str, *, url: str = "") -> DensityMetrics:
    paragraphs = extract_paragraphs(html)
    word_count = sum(p.word_count for p in paragraphs)
    image_count = count_opening_tags(html, "img")
    heading_count = sum(count_opening_tags(html, tag) for tag in HEADING_TAGS)

    avg = word_count / len(paragraphs) if paragraphs else 0.0

    return DensityMetrics(
        url=url,
        word_count=word_count,
        image_count=image_count,
        heading_count=heading_count,
        # Round half up so 2.5 reports as 3.
        avg_paragraph_length=int(math.floor(avg + 0.5)),
        scanability_score=scanability_score(
            avg_paragraph_length=avg,
            image_count=image_count,
            heading_count=heading_count,
        ),
        notes=tuple(
            density_notes(
                avg_paragraph_length=avg,
                image_count=image_count,
                heading_count=heading_count,
            )
        ),
    )
