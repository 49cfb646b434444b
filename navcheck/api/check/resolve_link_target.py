"""Resolve a link to the filesystem path it points at (UNO: single function)."""

import os
from pathlib import Path

from ..document.Link import Link


def resolve_link_target(link: Link, source_path: Path, root: Path) -> Path | None:
    """Return the normalized absolute path a local link points at.

    Same-file links resolve to ``source_path``. Paths starting with ``/`` are
    taken relative to the corpus root, as GitHub does for repository links;
    all others are relative to the source document's directory.

    Returns:
        None for external and ``file://`` links, which have no corpus target
    """
    if link.is_external or link.is_file_url:
        return None
    if link.is_same_file:
        return Path(os.path.normpath(source_path))
    if link.path.startswith("/"):
        return Path(os.path.normpath(root / link.path.lstrip("/")))
    return Path(os.path.normpath(source_path.parent / link.path))
