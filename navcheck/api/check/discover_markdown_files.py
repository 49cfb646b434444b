"""Markdown file discovery."""

import os
from fnmatch import fnmatchcase
from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.NavConfig import NavConfig
from .FatalIOError import FatalIOError

logger = get_logger("discover")


def _matches_any_glob(rel_path: str, globs: list[str]) -> bool:
    return any(fnmatchcase(rel_path, pattern) for pattern in globs)


def discover_markdown_files(root: Path, config: NavConfig) -> list[Path]:
    """List the markdown files under ``root`` in sorted order.

    Directories named in ``exclude_dirnames`` are not descended into and files
    whose root-relative posix path matches an ``exclude_globs`` pattern are
    skipped. Unreadable subdirectories are logged and skipped.

    Raises:
        FatalIOError: If ``root`` is not a readable directory
    """
    if not root.is_dir():
        raise FatalIOError(root, "not a directory")
    try:
        os.listdir(root)
    except OSError as exc:
        raise FatalIOError(root, exc.strerror or str(exc)) from exc

    excluded = set(config.exclude_dirnames)
    extensions = set(config.markdown_extensions)
    found: list[Path] = []

    def on_error(exc: OSError) -> None:
        logger.warning("Skipping unreadable directory %s: %s", exc.filename, exc.strerror)

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames[:] = sorted(name for name in dirnames if name not in excluded)
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.suffix.lower() not in extensions:
                continue
            rel_path = path.relative_to(root).as_posix()
            if _matches_any_glob(rel_path, config.exclude_globs):
                continue
            found.append(path)

    logger.info("Discovered %d markdown files under %s", len(found), root)
    return sorted(found)
