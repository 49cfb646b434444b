"""Cross-reference links against files and anchors."""

from ...utils.get_logger import get_logger
from ..document.Document import Document
from ..document.Link import Link
from ..document.parse_document import relative_to_root
from .Category import Category
from .DocumentIndex import DocumentIndex
from .Finding import Finding
from .resolve_link_target import resolve_link_target

logger = get_logger("graph")


class GraphChecker:
    """Validate every link of every indexed document.

    Each link yields at most one finding: a ``file://`` URL is non-portable
    whether or not it exists, a missing target is a broken file (its anchor is
    not examined), and an anchor absent from an existing markdown target is a
    broken anchor. Anchors into directories and non-markdown files are not
    checked.
    """

    def __init__(self, index: DocumentIndex):
        self.index = index
        self.links_checked = 0

    def check_all(self) -> list[Finding]:
        findings: list[Finding] = []
        for document in list(self.index):
            for link in document.links:
                findings.extend(self.check(link, document))
        logger.info("Checked %d links, %d findings", self.links_checked, len(findings))
        return findings

    def check(self, link: Link, source: Document) -> list[Finding]:
        self.links_checked += 1

        if link.is_file_url:
            return [
                self._finding(
                    link,
                    Category.NON_PORTABLE,
                    f"'{link.raw_target}' is a file:// URL tied to one machine; use a relative path",
                )
            ]

        target = resolve_link_target(link, source.path, self.index.root)
        if target is None:
            return []

        target_rel = relative_to_root(target, self.index.root)
        if not target.exists():
            return [self._finding(link, Category.BROKEN_FILE, f"'{link.path}' does not exist ({target_rel})")]

        if link.anchor is None or not target.is_file() or not self.index.is_markdown(target):
            return []

        document = self.index.get(target)
        if document is None:
            # Unparseable target, already reported as parse-error
            return []
        if link.anchor not in document.anchors:
            return [self._finding(link, Category.BROKEN_ANCHOR, f"anchor '#{link.anchor}' not found in {target_rel}")]
        return []

    @staticmethod
    def _finding(link: Link, category: Category, message: str) -> Finding:
        return Finding(path=link.source, line=link.line_number, category=category, message=message, span=link.span)
