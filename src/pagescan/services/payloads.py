"""Wire payloads (camelCase) for analysis results."""

from __future__ import annotations

from ..domain.models import AccessibilityMetrics, DensityMetrics, PageReport


def serialize_density(m: DensityMetrics) -> dict:
    return {
        "url": m.url,
        "wordCount": m.word_count,
        "imageCount": m.image_count,
        "headingCount": m.heading_count,
        "avgParagraphLength": m.avg_paragraph_length,
        "scanabilityScore": m.scanability_score,
        "notes": list(m.notes),
    }


def serialize_accessibility(m: AccessibilityMetrics) -> dict:
    return {
        "url": m.url,
        "h1Count": m.h1_count,
        "imagesMissingAlt": m.images_missing_alt,
        "unlabeledButtons": m.unlabeled_buttons,
        "headingOrderIssues": m.heading_order_issues,
        "accessibilityScore": m.accessibility_score,
        "notes": list(m.notes),
    }


def serialize_report(r: PageReport) -> dict:
    return {
        "url": r.url,
        "density": serialize_density(r.density),
        "accessibility": serialize_accessibility(r.accessibility),
    }
