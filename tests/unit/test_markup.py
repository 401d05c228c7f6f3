from __future__ import annotations

import time

from pagescan.analysis.markup import (
    count_opening_tags,
    count_words,
    iter_headings,
    iter_tag_contents,
    iter_tag_fragments,
    normalize_text,
    read_attribute,
)


def test_paragraph_content_is_normalized_to_prose() -> None:
    contents = list(iter_tag_contents("<p>Hello <b>world</b></p>", "p"))
    assert contents == ["Hello <b>world</b>"]
    text = normalize_text(contents[0])
    assert text == "Hello world"
    assert count_words(text) == 2


def test_tag_match_is_case_insensitive_and_ignores_attributes() -> None:
    html = "<P class='lead'>A</P><p id=\"x\" data-y='1'>B</p>"
    assert list(iter_tag_contents(html, "p")) == ["A", "B"]


def test_tag_name_must_end_at_word_boundary() -> None:
    html = '<param name="x"><pre>code</pre><p>ok</p>'
    assert list(iter_tag_contents(html, "p")) == ["ok"]


def test_unclosed_tag_is_not_matched() -> None:
    assert list(iter_tag_contents("<p>never closed", "p")) == []
    assert list(iter_tag_contents("", "p")) == []


def test_same_name_nesting_stops_at_first_closing_tag() -> None:
    html = "<div><div>inner</div>tail</div>"
    assert list(iter_tag_contents(html, "div")) == ["<div>inner"]


def test_each_call_is_a_fresh_scan() -> None:
    html = "<p>one</p><p>two</p>"
    gen = iter_tag_contents(html, "p")
    assert next(gen) == "one"
    assert list(iter_tag_contents(html, "p")) == ["one", "two"]


def test_fragment_keeps_opening_tag() -> None:
    fragments = list(iter_tag_fragments('<button aria-label="Close"><i></i></button>', "button"))
    assert len(fragments) == 1
    assert fragments[0].opening_tag == '<button aria-label="Close">'
    assert fragments[0].content == "<i></i>"


def test_opening_tags_count_void_and_self_closing_images() -> None:
    html = '<img src="a"/><IMG src="b"></img><image src="c">'
    assert count_opening_tags(html, "img") == 2


def test_read_attribute_quote_styles() -> None:
    assert read_attribute('<img src="a.png" alt="cat">', "alt") == "cat"
    assert read_attribute("<img alt='dog' src='b.png'>", "alt") == "dog"
    assert read_attribute('<IMG ALT="x">', "alt") == "x"
    assert read_attribute('<img alt = "spaced">', "alt") == "spaced"


def test_read_attribute_absent_vs_empty() -> None:
    assert read_attribute('<img src="a.png">', "alt") is None
    assert read_attribute('<img src="a.png" alt="">', "alt") == ""
    assert read_attribute('<img data-alt="x">', "alt") is None
    # Unquoted values are not recognised.
    assert read_attribute("<img alt=cat>", "alt") is None


def test_read_attribute_does_not_decode_entities() -> None:
    assert read_attribute('<img alt="Tom &amp; Jerry">', "alt") == "Tom &amp; Jerry"


def test_normalize_text_is_idempotent() -> None:
    raw = "  <div>\n Hello\t\t<span>there</span>\n</div>  "
    once = normalize_text(raw)
    assert once == "Hello there"
    assert normalize_text(once) == once


def test_headings_require_matching_closing_level() -> None:
    html = "<h1>A</h1><H2 class='x'>B</h2><h3>C</h4><h6>D</h6>"
    assert [level for level, _ in iter_headings(html)] == [1, 2, 6]


def test_unterminated_angle_brackets_normalize_in_linear_time() -> None:
    started = time.perf_counter()
    assert normalize_text("<" * 50000) == "<" * 50000
    assert normalize_text("<" * 50000 + ">") == ""
    assert time.perf_counter() - started < 2


def test_unclosed_openings_followed_by_closed_element() -> None:
    html = "<p>a <p>b</p><p>c</p><p>d"
    assert list(iter_tag_contents(html, "p")) == ["a <p>b", "c"]


def test_heading_without_close_is_skipped_for_a_later_one() -> None:
    html = "<h2>lost<h3>kept</h3><h1>also lost"
    assert [(level, f.content) for level, f in iter_headings(html)] == [(3, "kept")]
