"""Guide index completeness check."""

from pathlib import Path

from ...utils.get_logger import get_logger
from .Category import Category
from .DocumentIndex import DocumentIndex
from .find_guides import find_guides
from .Finding import Finding
from .resolve_link_target import resolve_link_target

logger = get_logger("navigation")


def check_index(index: DocumentIndex) -> list[Finding]:
    """Require each index file to link to every guide.

    Returns:
        ``missing-index`` for each configured index file that does not exist
        while guides exist, and ``unindexed-guide`` for each guide an existing
        index file does not link to
    """
    guides = find_guides(index)
    if not guides:
        return []

    findings: list[Finding] = []
    for index_name in index.config.index_files:
        index_path = index.normalize(index.root / index_name)
        if not index_path.is_file():
            findings.append(
                Finding(
                    path=index_name,
                    line=0,
                    category=Category.MISSING_INDEX,
                    message=f"index file does not exist but {len(guides)} guide(s) must be listed in it",
                )
            )
            continue

        index_doc = index.get(index_path)
        if index_doc is None:
            continue

        linked: set[Path] = set()
        for link in index_doc.links:
            target = resolve_link_target(link, index_doc.path, index.root)
            if target is not None:
                linked.add(target)

        for guide in guides:
            if guide.path not in linked:
                findings.append(
                    Finding(
                        path=index_doc.rel_path,
                        line=0,
                        category=Category.UNINDEXED_GUIDE,
                        message=f"guide '{guide.rel_path}' is not linked from {index_doc.rel_path}",
                    )
                )

    logger.info("Index check over %d guides: %d findings", len(guides), len(findings))
    return findings
