"""Markdown link extractor."""

import re
from collections.abc import Iterator

from ._constants import LINK_KIND_IMAGE, LINK_KIND_INLINE, LINK_KIND_REFERENCE
from .iter_prose_lines import iter_prose_lines
from .Link import Link
from .split_target import split_target

# [text](target) and ![alt](target); link text may hold one level of brackets and
# the destination one level of balanced parentheses
MARKDOWN_URL_PATTERN = re.compile(
    r"(?<!\\)(!)?\[((?:[^\[\]]|\[[^\[\]]*\])*)\]\(\s*(<[^>]*>[^)]*|(?:[^()]|\([^()]*\))*)\)"
)
# [label]: target   (footnote definitions "[^1]:" excluded)
REFERENCE_PATTERN = re.compile(r"^ {0,3}\[([^\]^][^\]]*)\]:\s*(<[^>]*>|\S+)")
CODE_SPAN_PATTERN = re.compile(r"(`+)(.+?)(?<!`)\1(?!`)")


def _mask_code_spans(line: str) -> str:
    """Blank out inline code spans, keeping column positions."""
    return CODE_SPAN_PATTERN.sub(lambda match: " " * len(match.group(0)), line)


def _scan_inline(line: str, offset: int, line_num: int, source: str) -> Iterator[Link]:
    for match in MARKDOWN_URL_PATTERN.finditer(line):
        is_image = bool(match.group(1))
        text = match.group(2)
        target, path, anchor = split_target(match.group(3))
        if target:
            yield Link(
                source=source,
                line_number=line_num,
                column_number=offset + match.start() + 1,
                kind=LINK_KIND_IMAGE if is_image else LINK_KIND_INLINE,
                text=text.strip(),
                raw_target=target,
                path=path,
                anchor=anchor,
                span=match.group(0),
            )
        # Badges: [![alt](image)](link)
        yield from _scan_inline(text, offset + match.start(2), line_num, source)


def extract_links(text: str, source: str = "") -> Iterator[Link]:
    """Extract links from markdown text, skipping code.

    Args:
        text: Markdown content
        source: Root-relative path recorded on each Link

    Yields:
        Link records in document order
    """
    for line_num, raw_line in iter_prose_lines(text):
        line = _mask_code_spans(raw_line)

        reference = REFERENCE_PATTERN.match(line)
        if reference:
            target, path, anchor = split_target(reference.group(2))
            if target:
                yield Link(
                    source=source,
                    line_number=line_num,
                    column_number=reference.start(1),
                    kind=LINK_KIND_REFERENCE,
                    text=reference.group(1).strip(),
                    raw_target=target,
                    path=path,
                    anchor=anchor,
                    span=reference.group(0).strip(),
                )
            continue

        yield from _scan_inline(line, 0, line_num, source)
