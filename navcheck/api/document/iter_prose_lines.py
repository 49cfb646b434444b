"""Iterate the lines of a markdown document that are not code or front matter."""

import re
from collections.abc import Iterator

import yaml

# Opening/closing code fence: 3+ backticks or tildes after the indentation
FENCE_PATTERN = re.compile(r"^( *)(`{3,}|~{3,})(.*)$")
# Bullet or ordered list marker; group 1 ends at the item's content column
LIST_ITEM_PATTERN = re.compile(r"^( *(?:[-*+]|\d{1,9}[.)]) {1,4})\S")
FRONT_MATTER_DELIMITERS = ("---", "...")
# Fences may be indented this much past their container's content column
MAX_FENCE_INDENT = 3


def _front_matter_end(lines: list[str]) -> int:
    """Return the number of leading lines that form a YAML front matter block.

    The block must be empty or parse as a YAML mapping, so a document that
    opens with a ``---`` thematic break is left alone.
    """
    if not lines or lines[0].rstrip() != "---":
        return 0
    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() in FRONT_MATTER_DELIMITERS:
            block = "\n".join(lines[1:index])
            if not block.strip():
                return index + 1
            try:
                data = yaml.safe_load(block)
            except yaml.YAMLError:
                return 0
            return index + 1 if isinstance(data, dict) else 0
    return 0


def iter_prose_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for lines outside fenced code blocks.

    A fence opens when indented at most three spaces past the content column
    of the enclosing list item (or the margin outside lists). It closes on a
    line using the same character at least as many times as the opening
    fence; an unclosed fence runs to the end of the document.

    Args:
        text: Markdown content

    Yields:
        1-based line number and the raw line text
    """
    lines = text.splitlines()
    fence: str | None = None
    fence_column = 0
    content_column = 0
    skip = _front_matter_end(lines)

    for line_num, line in enumerate(lines, start=1):
        if line_num <= skip:
            continue

        expanded = line.expandtabs(4)
        match = FENCE_PATTERN.match(expanded)

        if fence is not None:
            if (
                match
                and len(match.group(1)) - fence_column <= MAX_FENCE_INDENT
                and match.group(2)[0] == fence[0]
                and len(match.group(2)) >= len(fence)
                and not match.group(3).strip()
            ):
                fence = None
            continue

        if expanded.strip():
            indent = len(expanded) - len(expanded.lstrip(" "))
            item = LIST_ITEM_PATTERN.match(expanded)
            if item:
                content_column = len(item.group(1))
            elif indent < content_column:
                content_column = 0

        if match:
            indent = len(match.group(1))
            column = content_column if indent >= content_column else 0
            # Backtick fences may not carry backticks in their info string
            if indent - column <= MAX_FENCE_INDENT and not (
                match.group(2).startswith("`") and "`" in match.group(3)
            ):
                fence = match.group(2)
                fence_column = column
                continue

        yield line_num, line
