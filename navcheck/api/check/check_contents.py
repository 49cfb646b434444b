"""Guide Contents table check."""

import re

from ..document.Document import Document
from ..document.iter_prose_lines import iter_prose_lines
from .Category import Category
from .DocumentIndex import DocumentIndex
from .find_guides import find_guides
from .Finding import Finding

# | [Section](#anchor) | ...
CONTENTS_ROW_PATTERN = re.compile(r"^\s*\|\s*\[[^\]]+\]\(#")


def check_document_contents(document: Document, contents_heading: str) -> list[Finding]:
    """Check one guide's Contents table against its H2 sections.

    Contents tables list only key sections, so a table shorter than the H2
    list is fine; a longer one is stale.
    """
    wanted = contents_heading.strip().lower()
    h2s = [heading for heading in document.headings if heading.level == 2]
    contents = [heading for heading in h2s if heading.text.strip().lower() == wanted]

    if not contents:
        return [
            Finding(
                path=document.rel_path,
                line=0,
                category=Category.MISSING_CONTENTS,
                message=f"guide has no '## {contents_heading}' section",
            )
        ]

    sections = len(h2s) - len(contents)
    entries = sum(1 for _, line in iter_prose_lines(document.text) if CONTENTS_ROW_PATTERN.match(line))
    if entries > sections:
        return [
            Finding(
                path=document.rel_path,
                line=contents[0].line_number,
                category=Category.STALE_CONTENTS,
                message=f"Contents lists {entries} entries but the guide has {sections} H2 section(s)",
            )
        ]
    return []


def check_contents(index: DocumentIndex) -> list[Finding]:
    findings: list[Finding] = []
    for guide in find_guides(index):
        findings.extend(check_document_contents(guide, index.config.contents_heading))
    return findings
