"""Select guide documents from the index (UNO: single function)."""

from ..document.Document import Document
from .DocumentIndex import DocumentIndex


def find_guides(index: DocumentIndex) -> list[Document]:
    """Return indexed documents that live under one of the configured guide directories."""
    prefixes = tuple(f"{guide_dir.strip('/')}/" for guide_dir in index.config.guide_dirs if guide_dir.strip("/"))
    return [document for document in index if document.rel_path.startswith(prefixes)]
