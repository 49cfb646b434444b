"""GitHub heading slug (UNO: single function)."""

import html
import re
import unicodedata

IMAGE_PATTERN = re.compile(r"!\[[^\]]*\]\([^)]*\)")
LINK_PATTERN = re.compile(r"\[([^\]]*)\]\([^)]*\)")
HTML_TAG_PATTERN = re.compile(r"<[^>]+>")
# _em_ and __strong__ delimiters outside words (snake_case stays intact)
UNDERSCORE_EMPHASIS_PATTERN = re.compile(r"(?<!\w)(_{1,2})(?=\S)(.+?)(?<=\S)\1(?!\w)")

# Characters kept besides letters, marks and numbers
KEPT_PUNCTUATION = frozenset("-_ ")


def _is_slug_char(char: str) -> bool:
    return char in KEPT_PUNCTUATION or unicodedata.category(char)[0] in ("L", "M", "N")


def slugify(text: str) -> str:
    """Compute the anchor GitHub generates for a heading, before de-duplication.

    Follows github-slugger: the rendered heading text is lowercased, every
    character that is not a letter, mark, number, hyphen, underscore or space
    is removed, and each space becomes a hyphen. Hyphens are neither
    collapsed nor trimmed, so ``"A -- B"`` becomes ``"a----b"``.

    Args:
        text: Heading text as written in the source (inline markup allowed)

    Returns:
        The slug, possibly empty (e.g. for a heading made only of emoji)
    """
    rendered = IMAGE_PATTERN.sub("", text)
    rendered = LINK_PATTERN.sub(r"\1", rendered)
    rendered = HTML_TAG_PATTERN.sub("", rendered)
    rendered = UNDERSCORE_EMPHASIS_PATTERN.sub(r"\2", rendered)
    rendered = html.unescape(rendered).strip().lower()
    kept = "".join(char for char in rendered if _is_slug_char(char))
    return kept.replace(" ", "-")
