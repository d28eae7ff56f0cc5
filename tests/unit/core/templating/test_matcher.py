from __future__ import annotations

"""
Unit tests for the Tag Matcher.

Verifies:
1. Name normalization to a single '.html' suffix.
2. Extraction of component references with offsets and fallback text.
3. First-match-only layout detection.
4. Placeholder substitution semantics.
"""

import pytest

from elbuilder.core.templating.matcher import (
    find_component_refs,
    find_layout_ref,
    normalize_name,
    replace_placeholder,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("greeting", "greeting.html"),
        ("greeting.html", "greeting.html"),
        ("nav/menu", "nav/menu.html"),
        ("a.html.html", "a.html.html"),
        ("", ".html"),
    ],
)
def test_normalize_name(raw: str, expected: str) -> None:
    """Verify that exactly one trailing suffix is stripped before re-appending."""
    assert normalize_name(raw) == expected


def test_find_component_refs_order_and_offsets() -> None:
    """Verify left-to-right extraction and that offsets address the matched span."""
    text = (
        '<p><el-component src="a"></el-component></p>'
        '<el-component  src="b.html" >fallback</el-component>'
    )

    refs = find_component_refs(text)

    assert [r.name for r in refs] == ["a.html", "b.html"]
    for ref in refs:
        assert text[ref.start:ref.end] == ref.span_text
    assert refs[1].fallback == "fallback"


def test_find_component_refs_fallback_spans_lines() -> None:
    """Inner fallback text may contain newlines."""
    text = '<el-component src="card">\n  line one\n  line two\n</el-component>'

    refs = find_component_refs(text)

    assert len(refs) == 1
    assert "line two" in refs[0].fallback


def test_find_component_refs_is_non_greedy() -> None:
    """Two adjacent references must not be merged into one match."""
    text = '<el-component src="a">x</el-component><el-component src="b">y</el-component>'

    refs = find_component_refs(text)

    assert [r.fallback for r in refs] == ["x", "y"]


def test_find_component_refs_ignores_malformed_tags() -> None:
    """Tags without the src attribute or the closing tag are not references."""
    text = '<el-component name="a"></el-component><el-component src="b">'

    assert find_component_refs(text) == []


def test_find_layout_ref_returns_first_only() -> None:
    """Only the first layout reference is honored."""
    text = (
        '<el-layout name="base">First\nbody</el-layout>'
        '<el-layout name="other">Second</el-layout>'
    )

    ref = find_layout_ref(text)

    assert ref is not None
    assert ref.name == "base.html"
    assert ref.body == "First\nbody"


def test_find_layout_ref_none_when_absent() -> None:
    assert find_layout_ref("<h1>No layout</h1>") is None


def test_replace_placeholder_first_occurrence_only() -> None:
    """Only the first placeholder receives the body."""
    layout = "<header/><el-content/><footer/><el-content />"

    assert replace_placeholder(layout, "BODY") == "<header/>BODY<footer/><el-content />"


def test_replace_placeholder_keeps_backslashes_literal() -> None:
    """The body is inserted verbatim, without regex escape processing."""
    body = r"C:\new\table \1"

    assert replace_placeholder("<el-content/>", body) == body


def test_replace_placeholder_without_marker_drops_body() -> None:
    layout = "<h1>Static</h1>"

    assert replace_placeholder(layout, "lost") == layout
