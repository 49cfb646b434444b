"""Tests for heading and HTML anchor extraction."""

from navcheck.api.document.extract_headings import extract_headings, extract_html_anchors


def _summary(text: str) -> list[tuple[int, str, int, str]]:
    return [(h.level, h.text, h.line_number, h.slug) for h in extract_headings(text)]


def test_atx_headings():
    text = "# Title\n## Section One\n### Sub ###\n#NoSpace\n    # indented code"
    assert _summary(text) == [
        (1, "Title", 1, "title"),
        (2, "Section One", 2, "section-one"),
        (3, "Sub", 3, "sub"),
    ]


def test_setext_headings():
    text = "Title\n=====\n\nOther\n-----\n"
    assert _summary(text) == [(1, "Title", 1, "title"), (2, "Other", 4, "other")]


def test_thematic_breaks_are_not_headings():
    text = "- item\n---\n\n---\nparagraph\n\n***"
    assert _summary(text) == []


def test_headings_in_fences_are_ignored():
    text = "```\n# not a heading\n```\n# Real"
    assert _summary(text) == [(1, "Real", 4, "real")]


def test_front_matter_is_not_a_setext_heading():
    text = "---\ntitle: x\n---\n# Real"
    assert _summary(text) == [(1, "Real", 4, "real")]


def test_duplicate_headings_are_suffixed():
    assert [h.slug for h in extract_headings("## A\n## A\n### A")] == ["a", "a-1", "a-2"]


def test_html_anchors():
    text = "<a name=\"custom\"></a>\n<a class=\"x\" id='other'>x</a>\n```\n<a id=\"hidden\">\n```"
    assert extract_html_anchors(text) == frozenset({"custom", "other"})
