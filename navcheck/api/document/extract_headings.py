"""Heading and HTML anchor extractor."""

import re

from ..anchor.resolve_anchors import resolve_anchors
from .Heading import Heading
from .iter_prose_lines import iter_prose_lines

ATX_PATTERN = re.compile(r"^ {0,3}(#{1,6})(?=[ \t]|$)(.*)$")
ATX_CLOSING_PATTERN = re.compile(r"(?:^|[ \t]+)#+[ \t]*$")
SETEXT_PATTERN = re.compile(r"^ {0,3}(=+|-+)[ \t]*$")
# Lines that cannot be the text of a setext heading
NON_PARAGRAPH_PATTERN = re.compile(r"^\s*(?:[>|<]|[-*+]\s|\d+[.)]\s|#)|^\s*[-=*_]*\s*$")
HTML_ANCHOR_PATTERN = re.compile(r"<a\s+(?:[^>]*?\s+)?(?:name|id)=[\"']([^\"']+)[\"']", re.IGNORECASE)


def _atx_text(raw: str) -> str:
    return ATX_CLOSING_PATTERN.sub("", raw.strip()).strip()


def extract_headings(text: str) -> list[Heading]:
    """Extract headings outside code blocks, with resolved slugs.

    ATX headings (``## Title``) and setext headings (a text line underlined
    with ``===`` or ``---``) are recognized. A setext heading takes only the
    line directly above the underline as its text.

    Args:
        text: Markdown content

    Returns:
        Headings in document order
    """
    found: list[tuple[int, str, int]] = []
    previous: tuple[int, str] | None = None

    for line_num, line in iter_prose_lines(text):
        atx = ATX_PATTERN.match(line)
        if atx:
            found.append((len(atx.group(1)), _atx_text(atx.group(2)), line_num))
            previous = None
            continue

        setext = SETEXT_PATTERN.match(line)
        if (
            setext
            and previous is not None
            and previous[0] == line_num - 1
            and not NON_PARAGRAPH_PATTERN.match(previous[1])
        ):
            level = 1 if setext.group(1).startswith("=") else 2
            found.append((level, previous[1].strip(), previous[0]))
            previous = None
            continue

        previous = (line_num, line)

    slugs = resolve_anchors(heading_text for _, heading_text, _ in found)
    return [
        Heading(level=level, text=heading_text, line_number=line_num, slug=slug)
        for (level, heading_text, line_num), slug in zip(found, slugs)
    ]


def extract_html_anchors(text: str) -> frozenset[str]:
    """Collect explicit ``<a name="...">`` / ``<a id="...">`` anchors outside code blocks."""
    anchors: set[str] = set()
    for _, line in iter_prose_lines(text):
        anchors.update(match.group(1).strip() for match in HTML_ANCHOR_PATTERN.finditer(line))
    return frozenset(anchor for anchor in anchors if anchor)
