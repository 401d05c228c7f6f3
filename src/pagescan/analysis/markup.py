"""Regex-based markup scanning primitives.

Pages are scanned as raw text, never parsed into a tree. Every rule here is a
plain pattern match so that malformed or partial markup degrades into fewer
matches instead of errors.

Rules:
- Tag names match case-insensitively and must end at a word boundary.
- Occurrences are yielded in document order and never overlap.
- Same-name nesting is not tracked: the first closing tag ends a match.
"""

from __future__ import annotations

import re
from bisect import bisect_left
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, Optional

_MARKUP_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")
_HEADING_OPEN_RE = re.compile(r"<(h[1-6])\b[^>]*>", re.IGNORECASE)
_HEADING_START_RE = re.compile(r"<(h[1-6])\b", re.IGNORECASE)
_HEADING_CLOSE_RE = re.compile(r"</h([1-6])>", re.IGNORECASE)


@dataclass(frozen=True)
class TagFragment:
    """One matched element occurrence."""

    name: str
    opening_tag: str
    content: str = ""


@lru_cache(maxsize=64)
def _opening_tag_re(tag: str) -> re.Pattern[str]:
    return re.compile(rf"<{re.escape(tag)}\b[^>]*>", re.IGNORECASE)


@lru_cache(maxsize=64)
def _closing_tag_re(tag: str) -> re.Pattern[str]:
    return re.compile(rf"</{re.escape(tag)}>", re.IGNORECASE)


@lru_cache(maxsize=64)
def _attribute_res(name: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    # The lookbehind keeps `alt` from matching inside `data-alt`.
    n = re.escape(name)
    double = re.compile(rf"(?<![\w:-]){n}\s*=\s*\"([^\"]*)\"", re.IGNORECASE)
    single = re.compile(rf"(?<![\w:-]){n}\s*=\s*'([^']*)'", re.IGNORECASE)
    return double, single


def _tag_scan_end(markup: str) -> int:
    # A `<...>` match must end at a `>`, so nothing past the last one can match.
    # Bounding the scan there keeps `[^>]*` from rescanning an unterminated tail.
    return markup.rfind(">") + 1


def iter_tag_fragments(markup: str, tag: str) -> Iterator[TagFragment]:
    """Yield every complete ``<tag ...>...</tag>`` occurrence in ``markup``.

    The content runs to the first closing tag after the opening tag. When an
    opening tag has no closing tag after it, no later one can either, so the
    scan stops there.
    """
    markup = markup or ""
    opening_re = _opening_tag_re(tag)
    closing_re = _closing_tag_re(tag)
    end = _tag_scan_end(markup)
    pos = 0
    while True:
        opening = opening_re.search(markup, pos, end)
        if opening is None:
            return
        closing = closing_re.search(markup, opening.end())
        if closing is None:
            return
        yield TagFragment(
            name=tag.lower(),
            opening_tag=opening.group(0),
            content=markup[opening.end() : closing.start()],
        )
        pos = closing.end()


def iter_tag_contents(markup: str, tag: str) -> Iterator[str]:
    """Yield the inner content of every complete ``<tag>`` element."""
    for fragment in iter_tag_fragments(markup, tag):
        yield fragment.content


def iter_opening_tags(markup: str, tag: str) -> Iterator[str]:
    """Yield raw opening tags, with or without a closing tag (void elements)."""
    markup = markup or ""
    for m in _opening_tag_re(tag).finditer(markup, 0, _tag_scan_end(markup)):
        yield m.group(0)


def iter_headings(markup: str) -> Iterator[tuple[int, TagFragment]]:
    """Yield ``(level, fragment)`` for complete h1..h6 elements in document order.

    The closing tag must carry the same level as the opening tag. An opening
    tag without a matching close is skipped and the scan moves on.
    """
    markup = markup or ""
    closes: dict[int, list[tuple[int, int]]] = {level: [] for level in range(1, 7)}
    for m in _HEADING_CLOSE_RE.finditer(markup):
        closes[int(m.group(1))].append((m.start(), m.end()))
    close_starts = {level: [start for start, _ in spans] for level, spans in closes.items()}

    end = _tag_scan_end(markup)
    pos = 0
    while True:
        opening = _HEADING_OPEN_RE.search(markup, pos, end)
        if opening is None:
            return
        tag_end = opening.end()
        # Every heading start inside this opening tag ends at the same `>`.
        for start in _HEADING_START_RE.finditer(markup, opening.start(), tag_end):
            level = int(start.group(1)[1])
            idx = bisect_left(close_starts[level], tag_end)
            if idx == len(close_starts[level]):
                continue
            close_start, close_end = closes[level][idx]
            yield level, TagFragment(
                name=start.group(1).lower(),
                opening_tag=markup[start.start() : tag_end],
                content=markup[tag_end:close_start],
            )
            pos = close_end
            break
        else:
            pos = tag_end


def count_opening_tags(markup: str, tag: str) -> int:
    return sum(1 for _ in iter_opening_tags(markup, tag))


def read_attribute(tag_fragment: str, name: str) -> Optional[str]:
    """Return a quoted attribute value from an opening tag.

    Returns ``None`` when no quoted ``name=`` token exists at all and ``""``
    when it is present but empty. Entity references are left as-is.
    """
    double, single = _attribute_res(name)
    m = double.search(tag_fragment or "")
    if m is not None:
        return m.group(1)
    m = single.search(tag_fragment or "")
    if m is not None:
        return m.group(1)
    return None


def normalize_text(fragment: str) -> str:
    """Strip tags and collapse whitespace into single spaces."""
    fragment = fragment or ""
    end = _tag_scan_end(fragment)
    text = _MARKUP_RE.sub(" ", fragment[:end]) + fragment[end:]
    return _WHITESPACE_RE.sub(" ", text).strip()


def count_words(text: str) -> int:
    return len([w for w in text.split() if w])
