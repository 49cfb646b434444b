"""Heading anchor resolution (UNO: single function)."""

from collections.abc import Iterable

from .slugify import slugify


def resolve_anchors(headings: Iterable[str]) -> list[str]:
    """Slug each heading in order, de-duplicating like GitHub.

    The first occurrence of a slug is kept as is; later occurrences get
    ``-1``, ``-2``, ... appended, skipping any suffixed form that is already
    taken (github-slugger's occurrence counter). Headings that slug to an
    empty string map to ``""`` and take no part in de-duplication.

    Args:
        headings: Heading texts in document order

    Returns:
        One slug per heading, aligned with the input
    """
    occurrences: dict[str, int] = {}
    slugs: list[str] = []

    for text in headings:
        slug = slugify(text)
        if not slug:
            slugs.append("")
            continue

        original = slug
        while slug in occurrences:
            occurrences[original] += 1
            slug = f"{original}-{occurrences[original]}"
        occurrences[slug] = 0
        slugs.append(slug)

    return slugs
